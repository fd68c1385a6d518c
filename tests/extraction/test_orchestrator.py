"""End-to-end tests for ResumeImportService."""
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from core.config_loader import AppConfig, ParsingConfig
from extraction.orchestrator import ResumeImportService
from extraction.resume.acquisition import TextAcquisition
from extraction.resume.exceptions import DocumentReadError, EmptyTextError


@pytest.fixture
def mock_acquisition():
    return Mock(spec=TextAcquisition)


@pytest.fixture
def service(mock_acquisition):
    return ResumeImportService(AppConfig(), acquisition=mock_acquisition)


class TestImportText:

    def test_scenario_a(self, service, scenario_a_text):
        result = service.import_text(scenario_a_text)

        assert result.profile.email == "john@x.com"
        assert result.profile.full_name == "John Smith"
        assert result.profile.phone == "+1 555-123-4567"

        assert len(result.educations) == 1
        assert result.educations[0].school == "MIT"
        assert result.educations[0].start_date == "2018"
        assert result.educations[0].end_date == "2020"

        assert len(result.experiences) == 1
        assert result.experiences[0].company == "Acme Corp"
        assert result.experiences[0].end_date == "Present"
        assert "Built things" in result.experiences[0].description
        assert result.language == "en"

    def test_explicit_skills_section(self, service):
        text = "李雷\nlilei@example.cn\n技能: Java, Python\n教育经历\n清华大学\n2015 - 2019"

        result = service.import_text(text)

        assert "Java" in result.skills.content
        assert "Python" in result.skills.content
        assert "自动提取技能" not in result.skills.content
        assert result.language == "zh"
        assert result.educations[0].school == "清华大学"

    def test_blank_text_is_rejected(self, service):
        with pytest.raises(EmptyTextError):
            service.import_text("  \n\t ")

    def test_first_email_wins(self, service):
        result = service.import_text("Jane Doe\na@one.com b@two.com")

        assert result.profile.email == "a@one.com"

    def test_undated_block_becomes_catch_all(self, service):
        result = service.import_text("Jane Doe\nExperience\nFreelance work\nVarious clients")

        assert len(result.experiences) == 1
        assert result.experiences[0].company == "Extracted Experience"
        assert result.experiences[0].description == "<p>Freelance work</p><p>Various clients</p>"

    def test_projects_land_in_custom_section(self, service):
        result = service.import_text("Jane Doe\nProjects\nChat App\n2021 - 2022\nRealtime chat")

        assert result.projects == []
        assert result.custom_sections[0].title == "Projects"
        assert "Chat App" in result.custom_sections[0].content

    def test_projects_as_entries_when_configured(self, mock_acquisition):
        config = AppConfig(parsing=ParsingConfig(projects_as_custom_section=False))
        service = ResumeImportService(config, acquisition=mock_acquisition)

        result = service.import_text("Jane Doe\nProjects\nChat App\n2021 - 2022\nRealtime chat")

        assert result.custom_sections == []
        assert result.projects[0].name == "Chat App"

    def test_ui_language_sets_title(self, service, scenario_a_text):
        assert service.import_text(scenario_a_text, "zh").title.startswith("导入的简历")
        assert service.import_text(scenario_a_text).title.startswith("Imported Resume")


class TestParseText:

    def test_empty_text_gives_fully_formed_result(self, service):
        result = service.parse_text("")

        assert result.educations == []
        assert result.experiences == []
        assert result.skills.content == ""
        assert result.profile.full_name is None

    def test_concurrent_calls_are_independent(self, service):
        texts = [
            f"Person Number{chr(65 + i)}\nuser{i}@example.com\nExperience\nCompany {i}\n2020 - 2021"
            for i in range(8)
        ]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(service.parse_text, texts))

        for i, result in enumerate(results):
            assert result.profile.email == f"user{i}@example.com"
            assert result.experiences[0].company == f"Company {i}"


class TestImportPdf:

    def test_parses_acquired_text(self, service, mock_acquisition, scenario_a_text):
        mock_acquisition.extract.return_value = scenario_a_text + "\n"

        result = service.import_pdf(b"%PDF-fake")

        mock_acquisition.extract.assert_called_once_with(b"%PDF-fake")
        assert result.profile.email == "john@x.com"

    def test_acquisition_errors_propagate(self, service, mock_acquisition):
        mock_acquisition.extract.side_effect = DocumentReadError("broken")

        with pytest.raises(DocumentReadError):
            service.import_pdf("resume.pdf")
