#!/usr/bin/env python3
"""
Resume Import Models - Transient data structures used while parsing.

These never leave the extraction pipeline; the output contract lives in
extraction.schema_models.
"""

from dataclasses import dataclass, field
from typing import List, Optional

SECTION_KEYS = ('education', 'experience', 'skills', 'projects')


@dataclass
class RawDocumentText:
    """Page texts recovered from one import attempt."""
    pages: List[str] = field(default_factory=list)
    source: str = "text"  # "text" (embedded) or "ocr"

    @property
    def text(self) -> str:
        return "".join(f"{page}\n" for page in self.pages)

    def significant_length(self) -> int:
        """Length with all whitespace runs collapsed, used for the OCR threshold."""
        return len(" ".join(self.text.split()))


@dataclass
class SectionBlock:
    """Raw text accumulated per resume section; unseen sections stay empty."""
    education: str = ""
    experience: str = ""
    skills: str = ""
    projects: str = ""

    def get(self, section: str) -> str:
        if section not in SECTION_KEYS:
            raise KeyError(section)
        return getattr(self, section)

    def append(self, section: str, line: str) -> None:
        setattr(self, section, self.get(section) + line + "\n")


@dataclass
class ExtractedItem:
    """One education/experience/project entry before entity mapping."""
    title: Optional[str] = None
    date: Optional[str] = None
    description: str = ""  # HTML paragraphs
