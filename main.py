import sys
import json
import logging
import argparse

from core.config_loader import load_config
from extraction.orchestrator import ResumeImportService
from extraction.resume.exceptions import ResumeImportException, RecoveryAction, recovery_for

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

EXIT_CODES = {
    RecoveryAction.ABORT: 2,
    RecoveryAction.MANUAL_PASTE: 3,
    RecoveryAction.RETRY: 4,
}


def read_text_input(path: str) -> str:
    """Read pasted resume text from a file, or stdin for '-'."""
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def write_result(result, output_path: str | None) -> None:
    payload = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    if output_path:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(payload)
        logger.info(f"Wrote import result to {output_path}")
    else:
        print(payload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Resume PDF import')
    parser.add_argument('--config', default='config.yaml', help='Path to config YAML')
    parser.add_argument('--ui-language', choices=['zh', 'en'], help='Language for the default title')
    parser.add_argument('--output', help='Write JSON here instead of stdout')
    parser.add_argument('--verbose', action='store_true')

    subparsers = parser.add_subparsers(dest='command', required=True)

    pdf_parser = subparsers.add_parser('import-pdf', help='Import a resume PDF')
    pdf_parser.add_argument('path', help='PDF file')

    text_parser = subparsers.add_parser('import-text', help='Import pasted resume text')
    text_parser.add_argument('path', help="Text file, or '-' for stdin")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = load_config(args.config)
    ui_language = args.ui_language or config.ui_language
    service = ResumeImportService(config)

    try:
        if args.command == 'import-pdf':
            result = service.import_pdf(args.path, ui_language)
        else:
            result = service.import_text(read_text_input(args.path), ui_language)
    except ResumeImportException as e:
        prompt = recovery_for(e)
        logger.error(f"Import failed: {e}")
        print(prompt.message(ui_language), file=sys.stderr)
        return EXIT_CODES[prompt.action]
    except OSError as e:
        logger.error(f"Could not read input: {e}")
        return 1

    write_result(result, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
