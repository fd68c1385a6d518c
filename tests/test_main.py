"""Tests for the command-line entry point."""
import json

import main


def test_import_text_prints_json(tmp_path, capsys, scenario_a_text):
    source = tmp_path / "resume.txt"
    source.write_text(scenario_a_text, encoding="utf-8")

    exit_code = main.main(["--config", str(tmp_path / "none.yaml"), "import-text", str(source)])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["profile"]["fullName"] == "John Smith"
    assert payload["experiences"][0]["company"] == "Acme Corp"


def test_output_file(tmp_path, scenario_a_text):
    source = tmp_path / "resume.txt"
    source.write_text(scenario_a_text, encoding="utf-8")
    output = tmp_path / "out.json"

    exit_code = main.main(["--output", str(output), "--ui-language", "zh", "import-text", str(source)])

    assert exit_code == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["title"].startswith("导入的简历")


def test_blank_text_asks_for_manual_paste(tmp_path, capsys):
    source = tmp_path / "blank.txt"
    source.write_text("   \n", encoding="utf-8")

    exit_code = main.main(["import-text", str(source)])

    assert exit_code == main.EXIT_CODES[main.RecoveryAction.MANUAL_PASTE]
    assert "Paste" in capsys.readouterr().err


def test_missing_pdf_aborts(tmp_path):
    exit_code = main.main(["import-pdf", str(tmp_path / "missing.pdf")])

    assert exit_code == main.EXIT_CODES[main.RecoveryAction.ABORT]


def test_missing_text_file(tmp_path):
    assert main.main(["import-text", str(tmp_path / "missing.txt")]) == 1
