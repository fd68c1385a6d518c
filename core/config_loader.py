import yaml
import os
import logging
from typing import Optional, Literal
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class AcquisitionConfig(BaseModel):
    """
    Configuration for PDF text acquisition.

    Embedded text is tried first; OCR only runs when the extracted text is
    shorter than min_text_length.
    """
    min_text_length: int = 50  # Below this, the PDF is treated as image-only
    ocr_enabled: bool = True  # False = OCR only via an explicit ocr() call
    ocr_scale: float = 2.0  # Page render upscaling factor for OCR
    ocr_languages: str = "eng+chi_sim"  # Tesseract language union
    timeout_seconds: float = 10.0  # Budget for the whole extraction call

    # One-time process-wide OCR runtime setup
    asset_base_path: Optional[str] = None  # tessdata directory
    tesseract_cmd: Optional[str] = None  # Explicit tesseract binary


class ParsingConfig(BaseModel):
    """Tunables for the heuristic text-to-resume parsing stages."""
    name_scan_lines: int = 10  # Leading lines searched for the person's name
    max_header_length: int = 50  # Longer lines are never section headers
    max_title_length: int = 100  # Longer lines are never claimed as item titles

    # Projects land in a custom section rather than the first-class list
    projects_as_custom_section: bool = True


class AppConfig(BaseModel):
    acquisition: AcquisitionConfig = Field(default_factory=AcquisitionConfig)
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    ui_language: Literal["zh", "en"] = "en"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from another dir), try the repo root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config file found, using defaults")

    if not isinstance(data, dict):
        raise ValueError(f"Config must contain a mapping, got {type(data).__name__}")

    # An empty section key (e.g. "acquisition:" with nothing under it) loads as None
    for section in ('acquisition', 'parsing'):
        if section not in data or data[section] is None:
            data[section] = {}

    # Allow env var override for the acquisition timeout
    env_timeout = os.environ.get("RESUME_IMPORT_TIMEOUT")
    if env_timeout:
        data['acquisition']['timeout_seconds'] = float(env_timeout)

    env_ocr = os.environ.get("RESUME_IMPORT_OCR_ENABLED")
    if env_ocr:
        data['acquisition']['ocr_enabled'] = _parse_bool(env_ocr)

    # Allow env var override for the OCR runtime location
    env_tesseract = os.environ.get("TESSERACT_CMD")
    if env_tesseract:
        data['acquisition']['tesseract_cmd'] = env_tesseract

    env_tessdata = os.environ.get("TESSDATA_PREFIX")
    if env_tessdata:
        data['acquisition']['asset_base_path'] = env_tessdata

    env_ui_language = os.environ.get("RESUME_IMPORT_UI_LANGUAGE")
    if env_ui_language:
        data['ui_language'] = env_ui_language

    return AppConfig(**data)
