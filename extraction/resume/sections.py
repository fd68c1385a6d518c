"""
Section Segmenter - Split resume lines into named section blocks.

A single left-to-right pass with a "current section" cursor. Header lines
are recognised by anchored bilingual keyword prefixes and consumed; every
other line goes to the active section. Lines before the first header are
dropped here (field extraction works on the full text independently).
"""
import logging
import re
from typing import Dict, Iterable, Optional, Tuple

from extraction.resume.models import SectionBlock

logger = logging.getLogger(__name__)

# Consulted in this order; the first matching section wins.
SECTION_PATTERNS: Dict[str, Tuple[str, ...]] = {
    'education': (
        r'education\b', r'academic\s+background\b',
        r'教育经历', r'教育背景', r'学历', r'教育',
    ),
    'experience': (
        r'(?:work|professional|employment|internship)\s+(?:experience|history)\b',
        r'experience\b', r'employment\b',
        r'工作经历', r'工作经验', r'实习经历', r'职业经历',
    ),
    'skills': (
        r'(?:technical\s+|core\s+)?skills\b', r'skill\s+set\b',
        r'专业技能', r'技能专长', r'技能',
    ),
    'projects': (
        r'(?:personal\s+|selected\s+)?projects\b', r'project\s+experience\b',
        r'项目经历', r'项目经验',
    ),
}

HEADER_PATTERNS = {
    section: re.compile(r'^\s*(?:' + '|'.join(keywords) + r')', re.IGNORECASE)
    for section, keywords in SECTION_PATTERNS.items()
}

INLINE_CONTENT = re.compile(r'[:：]\s*(.*)$')


def match_header(line: str, max_header_length: int = 50) -> Optional[Tuple[str, str]]:
    """
    Test a line against the section header table.

    Returns:
        (section, inline_content) for a header line, where inline_content is
        the text after a colon ("Skills: Java, Python"), else None.
    """
    stripped = line.strip()
    if not stripped or len(stripped) >= max_header_length:
        return None

    for section, pattern in HEADER_PATTERNS.items():
        match = pattern.match(stripped)
        if match:
            inline = INLINE_CONTENT.search(stripped, match.end())
            return section, inline.group(1).strip() if inline else ""
    return None


def segment(lines: Iterable[str], max_header_length: int = 50) -> SectionBlock:
    """Assign lines to section blocks by header keyword scanning."""
    blocks = SectionBlock()
    current: Optional[str] = None

    for line in lines:
        header = match_header(line, max_header_length)
        if header:
            current, inline = header
            logger.debug(f"Section header '{line.strip()}' -> {current}")
            if inline:
                blocks.append(current, inline)
            continue

        if current is not None:
            blocks.append(current, line)

    return blocks
