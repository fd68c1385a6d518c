from typing import Optional
import logging

from core.config_loader import AppConfig
from core.utils import detect_language
from extraction.resume.acquisition import PdfSource, TextAcquisition
from extraction.resume.assembler import assemble
from extraction.resume.exceptions import EmptyTextError
from extraction.resume.fields import extract_fields
from extraction.resume.items import segment_items
from extraction.resume.normalizer import normalize
from extraction.resume.sections import segment
from extraction.resume.skills import extract_skills
from extraction.schema_models import PartialResumeResult

logger = logging.getLogger(__name__)


class ResumeImportService:
    """Service for turning an uploaded PDF or pasted text into a partial resume.

    Stages run strictly in sequence within one call, and every call builds its
    own intermediate state, so one service instance can serve concurrent
    imports.

    Usage:
        service = ResumeImportService(load_config())
        try:
            partial = service.import_pdf("resume.pdf")
        except ResumeImportException as e:
            prompt = recovery_for(e)   # retry / manual paste / abort
        ...
        partial = service.import_text(pasted_text)   # manual path
    """

    def __init__(self, config: Optional[AppConfig] = None, acquisition: Optional[TextAcquisition] = None):
        self.config = config or AppConfig()
        self.acquisition = acquisition or TextAcquisition(self.config.acquisition)

    def import_pdf(self, source: PdfSource, ui_language: Optional[str] = None) -> PartialResumeResult:
        """Import a PDF: acquisition (with OCR fallback) followed by parsing.

        Args:
            source: PDF path, raw bytes or binary file object
            ui_language: Language for the default title ('zh' or 'en')

        Raises:
            DocumentReadError, EmptyTextError, ImportTimeoutError
        """
        raw_text = self.acquisition.extract(source)
        logger.info(f"Acquired {len(raw_text)} characters of raw text")
        return self.parse_text(raw_text, ui_language)

    def import_text(self, text: str, ui_language: Optional[str] = None) -> PartialResumeResult:
        """Import manually pasted text, skipping acquisition entirely.

        Raises:
            EmptyTextError: If the pasted text is blank
        """
        if not text or not text.strip():
            raise EmptyTextError("No text provided")
        return self.parse_text(text, ui_language)

    def parse_text(self, raw_text: str, ui_language: Optional[str] = None) -> PartialResumeResult:
        """Run normalization, extraction and segmentation over raw text. Never raises."""
        parsing = self.config.parsing
        text = normalize(raw_text)
        language = detect_language(text)
        lines = text.split('\n')

        profile = extract_fields(text, parsing.name_scan_lines)
        blocks = segment(lines, parsing.max_header_length)

        education = segment_items(blocks.education, 'education', parsing.max_title_length)
        experience = segment_items(blocks.experience, 'experience', parsing.max_title_length)
        projects = segment_items(blocks.projects, 'projects', parsing.max_title_length)
        skills = extract_skills(text, blocks.skills, language)

        logger.debug(
            f"Parsed {len(lines)} lines (language={language}): "
            f"{len(education)} education, {len(experience)} experience, {len(projects)} project items"
        )

        return assemble(
            profile,
            education,
            experience,
            projects,
            skills,
            detected_language=language,
            ui_language=ui_language or self.config.ui_language,
            projects_as_custom_section=parsing.projects_as_custom_section,
        )
