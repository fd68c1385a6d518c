#!/usr/bin/env python3
"""
Item Segmenter - Split one section block into discrete entries.

Flattened resume text carries no layout signal, so entries are anchored on
date-bearing lines (a year or a "present" marker). The line just before an
anchor is assumed to be the entry's title/institution, which matches the
common "Title line, then Date line" layout.

Pass rules:
- Date line: attaches to an undated item whose title is the preceding line;
  otherwise the in-progress item is finalized and a new one starts, claiming
  the preceding short line as its title.
- Other lines: the block's first line opens an item as its title; with a
  titled item in progress the line becomes a description paragraph; with an
  untitled item the line becomes its title.
- A block without any anchor yields a single catch-all item.
"""
import html
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from core.utils import to_paragraphs
from extraction.resume.models import ExtractedItem

logger = logging.getLogger(__name__)

YEAR_PATTERN = re.compile(r'(?<!\d)(?:19|20)\d{2}(?!\d)')
PRESENT_PATTERN = re.compile(r'\b(?:present|current|now)\b|至今|目前|现在', re.IGNORECASE)

CATCH_ALL_TITLES = {
    'education': 'Extracted Education',
    'experience': 'Extracted Experience',
    'projects': 'Extracted Projects',
}


def is_date_line(line: str) -> bool:
    """True when the line carries a year (1900s/2000s) or a present/current marker."""
    return bool(YEAR_PATTERN.search(line) or PRESENT_PATTERN.search(line))


@dataclass
class _DraftItem:
    title: Optional[str] = None
    title_index: Optional[int] = None
    date: Optional[str] = None
    paragraphs: List[tuple] = field(default_factory=list)  # (line_index, text)

    def has_content(self) -> bool:
        return bool(self.title or self.date)

    def release_line(self, index: int) -> None:
        """Drop a description paragraph that a following item claims as its title."""
        if self.paragraphs and self.paragraphs[-1][0] == index:
            self.paragraphs.pop()

    def build(self) -> ExtractedItem:
        return ExtractedItem(
            title=self.title,
            date=self.date,
            description="".join(
                f"<p>{html.escape(text, quote=False)}</p>" for _, text in self.paragraphs
            ),
        )


def catch_all_item(lines: List[str], section: str) -> ExtractedItem:
    return ExtractedItem(
        title=CATCH_ALL_TITLES.get(section, CATCH_ALL_TITLES['experience']),
        description=to_paragraphs(lines),
    )


def segment_items(
    section_text: str,
    section: str = 'experience',
    max_title_length: int = 100,
) -> List[ExtractedItem]:
    """
    Group a section's lines into entries anchored on date-bearing lines.

    Args:
        section_text: Raw text of one section block
        section: Section key, used for the catch-all placeholder title
        max_title_length: Longer lines are never claimed as titles by lookback

    Returns:
        Extracted items in document order; at least one when the block has text
    """
    lines = [line.strip() for line in (section_text or "").split('\n') if line.strip()]
    if not lines:
        return []

    if not any(is_date_line(line) for line in lines):
        logger.debug(f"No date anchors in {section} block, using catch-all item")
        return [catch_all_item(lines, section)]

    items: List[ExtractedItem] = []
    current: Optional[_DraftItem] = None

    for index, line in enumerate(lines):
        if is_date_line(line):
            prev = lines[index - 1] if index > 0 else None

            if current is not None and current.date is None and current.title_index == index - 1:
                current.date = line
                continue

            claim_prev = (
                prev is not None
                and not is_date_line(prev)
                and len(prev) < max_title_length
                and (current is None or current.title_index != index - 1)
            )

            if current is not None and current.has_content():
                if claim_prev:
                    current.release_line(index - 1)
                items.append(current.build())
                current = None

            current = _DraftItem(date=line)
            if claim_prev:
                current.title = prev
                current.title_index = index - 1
            continue

        if current is None and index == 0:
            current = _DraftItem(title=line, title_index=index)
        elif current is not None and current.title:
            current.paragraphs.append((index, line))
        elif current is None:
            current = _DraftItem(title=line, title_index=index)
        else:
            # Weak fallback: an untitled (date-only) item takes this line as title
            current.title = line
            current.title_index = index

    if current is not None and current.has_content():
        items.append(current.build())

    if not items:
        return [catch_all_item(lines, section)]

    return items
