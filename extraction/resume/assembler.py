#!/usr/bin/env python3
"""
Result Assembler - Merge extraction outputs into a PartialResumeResult.

Never raises on missing data: absent inputs become empty lists/strings.
"""
import html
import logging
import re
import time
from datetime import date
from typing import List, Optional, Tuple

from core.utils import generate_id
from extraction.resume.models import ExtractedItem
from extraction.schema_models import (
    CustomSection,
    Education,
    Experience,
    ParsedProfile,
    PartialResumeResult,
    Project,
    SkillSection,
)

logger = logging.getLogger(__name__)

_MONTH = r'(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?\s+'
_DATE_TOKEN = rf'(?:{_MONTH})?(?:19|20)\d{{2}}(?:\s*[./年-]\s*\d{{1,2}}\s*月?)?'
_PRESENT_TOKEN = r'\b(?:present|current|now)\b|至今|目前|现在'

DATE_RANGE_PATTERN = re.compile(
    rf'(?P<start>{_DATE_TOKEN})\s*(?:-|~|to|至)\s*(?P<end>{_DATE_TOKEN}|{_PRESENT_TOKEN})',
    re.IGNORECASE
)
SINGLE_DATE_PATTERN = re.compile(rf'{_DATE_TOKEN}|{_PRESENT_TOKEN}', re.IGNORECASE)

# Leftover punctuation around the text that shares a line with the dates
_SEPARATOR_CHARS = ' \t,|·•()（）:：-'

IMPORTED_TITLES = {
    'zh': '导入的简历',
    'en': 'Imported Resume',
}

PROJECTS_SECTION_TITLES = {
    'zh': '项目经历',
    'en': 'Projects',
}


def split_date_line(line: Optional[str]) -> Tuple[str, str, str]:
    """
    Split a date-bearing line into (start, end, remainder).

    The remainder is whatever shares the line with the dates, e.g. the role
    in "Software Engineer | 2020 - Present".
    """
    if not line:
        return "", "", ""

    match = DATE_RANGE_PATTERN.search(line)
    if match:
        start, end = match.group('start').strip(), match.group('end').strip()
    else:
        match = SINGLE_DATE_PATTERN.search(line)
        if not match:
            return line.strip(), "", ""
        start, end = match.group(0).strip(), ""

    remainder = (line[:match.start()] + ' ' + line[match.end():]).strip(_SEPARATOR_CHARS)
    return start, end, remainder


def to_education(item: ExtractedItem) -> Education:
    start, end, remainder = split_date_line(item.date)
    return Education(
        school=item.title or "",
        degree=remainder,
        start_date=start,
        end_date=end,
        description=item.description,
    )


def to_experience(item: ExtractedItem) -> Experience:
    start, end, remainder = split_date_line(item.date)
    return Experience(
        company=item.title or "",
        position=remainder,
        start_date=start,
        end_date=end,
        description=item.description,
    )


def to_project(item: ExtractedItem) -> Project:
    start, end, remainder = split_date_line(item.date)
    return Project(
        name=item.title or "",
        role=remainder,
        start_date=start,
        end_date=end,
        description=item.description,
    )


def render_projects(items: List[ExtractedItem]) -> str:
    """Render project items as free-text HTML for a custom section."""
    parts = []
    for item in items:
        heading = " ".join(
            part for part in (
                f"<strong>{html.escape(item.title, quote=False)}</strong>" if item.title else "",
                html.escape(item.date, quote=False) if item.date else "",
            ) if part
        )
        if heading:
            parts.append(f"<p>{heading}</p>")
        parts.append(item.description)
    return "".join(parts)


def default_title(ui_language: str, today: Optional[date] = None) -> str:
    today = today or date.today()
    label = IMPORTED_TITLES.get(ui_language, IMPORTED_TITLES['en'])
    return f"{label} ({today.isoformat()})"


def assemble(
    profile: Optional[ParsedProfile],
    education_items: Optional[List[ExtractedItem]],
    experience_items: Optional[List[ExtractedItem]],
    project_items: Optional[List[ExtractedItem]],
    skills_content: Optional[str],
    detected_language: str,
    ui_language: str = "en",
    projects_as_custom_section: bool = True,
) -> PartialResumeResult:
    """Build the fully formed import result from the pipeline stages' outputs."""
    education_items = education_items or []
    experience_items = experience_items or []
    project_items = project_items or []
    language = detected_language if detected_language in ('zh', 'en') else 'en'

    projects: List[Project] = []
    custom_sections: List[CustomSection] = []
    if project_items:
        if projects_as_custom_section:
            custom_sections.append(CustomSection(
                title=PROJECTS_SECTION_TITLES[language],
                content=render_projects(project_items),
            ))
        else:
            projects = [to_project(item) for item in project_items]

    result = PartialResumeResult(
        id=generate_id(),
        updated_at=int(time.time() * 1000),
        title=default_title(ui_language),
        language=language,
        profile=profile or ParsedProfile(),
        educations=[to_education(item) for item in education_items],
        experiences=[to_experience(item) for item in experience_items],
        projects=projects,
        skills=SkillSection(content=skills_content or ""),
        custom_sections=custom_sections,
    )

    logger.info(
        f"Assembled import result: {len(result.educations)} education, "
        f"{len(result.experiences)} experience, {len(project_items)} project entries"
    )
    return result
