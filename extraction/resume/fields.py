#!/usr/bin/env python3
"""
Field Extractor - Pull single-value contact fields out of resume text.

Each field is first-match-wins over the whole text. A later, possibly better
candidate is never considered; missing fields are simply left unset.
"""
import logging
import re
from typing import List, Optional

from extraction.schema_models import ParsedProfile

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'[A-Za-z0-9._-]+@[A-Za-z0-9._-]+\.[A-Za-z0-9_-]+')

PHONE_PATTERN = re.compile(
    r'(?<!\d)(?:\+?86[ -]?)?1[3-9]\d{9}(?!\d)'          # mainland mobile, optional country code
    r'|(?:\+\d{1,3}[ -]?)?(?<!\d)\d{3}-\d{3}-\d{4}(?!\d)'  # 555-123-4567, optionally +1
    r'|(?<!\d)\d{3,4}[-. ]\d{7,8}(?!\d)'                # area code + local number
)

LINK_PATTERN = re.compile(
    r'https?://\S+|github\.com/\S+|linkedin\.com/in/\S+',
    re.IGNORECASE
)

NAME_DENYLIST = re.compile(
    r'\b(?:resume|résumé|curriculum\s+vitae|cv)\b|简历|履历',
    re.IGNORECASE
)

DIGIT_PATTERN = re.compile(r'\d')


def _first_match(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    return match.group(0) if match else None


def guess_name(lines: List[str], scan_lines: int = 10) -> Optional[str]:
    """Return the first leading line that looks like a person's name."""
    candidates = [line.strip() for line in lines if line.strip()][:scan_lines]
    for line in candidates:
        if not 2 <= len(line) <= 29:
            continue
        if DIGIT_PATTERN.search(line) or '@' in line:
            continue
        if NAME_DENYLIST.search(line):
            continue
        return line
    return None


def extract_fields(text: str, name_scan_lines: int = 10) -> ParsedProfile:
    """Extract email, phone, link and name from normalized resume text."""
    text = text or ""

    profile = ParsedProfile(
        email=_first_match(EMAIL_PATTERN, text),
        phone=_first_match(PHONE_PATTERN, text),
        link=_first_match(LINK_PATTERN, text),
        full_name=guess_name(text.split('\n'), name_scan_lines),
    )

    missing = [name for name, value in profile.model_dump().items() if value is None]
    if missing:
        logger.debug(f"Fields not extracted: {', '.join(missing)}")

    return profile
