"""
Skills Extractor - Explicit skills section, or keyword inference as fallback.
"""
import html
import logging
import re
from typing import List

from core.utils import to_paragraphs

logger = logging.getLogger(__name__)

SKILL_VOCABULARY = (
    'Java', 'Python', 'React', 'Vue', 'Angular', 'Node.js', 'JavaScript', 'TypeScript',
    'SQL', 'MySQL', 'PostgreSQL', 'MongoDB', 'Redis', 'Docker', 'Kubernetes',
    'AWS', 'Azure', 'GCP', 'Go', 'Rust', 'C++', 'C#', 'Kotlin', 'Swift',
    'HTML', 'CSS', 'Git', 'Linux', 'Spring', 'Django', 'Flask', 'FastAPI',
    'TensorFlow', 'PyTorch', 'Pandas', 'Spark', 'Kafka', 'GraphQL',
)

_CANONICAL = {skill.lower(): skill for skill in SKILL_VOCABULARY}

# Longest first so "JavaScript" is tried before "Java"; the lookarounds keep
# matches whole-word even for tokens ending in '+', '#' or containing '.'
SKILL_PATTERN = re.compile(
    r'(?<![A-Za-z0-9_.+#])(?:'
    + '|'.join(re.escape(s) for s in sorted(SKILL_VOCABULARY, key=len, reverse=True))
    + r')(?![A-Za-z0-9_+#])',
    re.IGNORECASE
)

SKILLS_LABELS = {
    'zh': '自动提取技能',
    'en': 'Extracted Skills',
}


def infer_skills(full_text: str) -> List[str]:
    """Return canonical vocabulary skills found in the text, in order of first appearance."""
    found: List[str] = []
    for match in SKILL_PATTERN.finditer(full_text or ""):
        canonical = _CANONICAL[match.group(0).lower()]
        if canonical not in found:
            found.append(canonical)
    return found


def extract_skills(full_text: str, explicit_section_text: str = "", language: str = "en") -> str:
    """
    Build the skills HTML content.

    An explicit skills section is used verbatim (one paragraph per line);
    otherwise vocabulary matches are joined into a single labeled sentence.
    """
    if explicit_section_text and explicit_section_text.strip():
        return to_paragraphs(explicit_section_text.split('\n'))

    skills = infer_skills(full_text)
    if not skills:
        return ""

    logger.debug(f"Inferred {len(skills)} skills from full text")
    label = SKILLS_LABELS.get(language, SKILLS_LABELS['en'])
    return f"<p>{label}: {html.escape(', '.join(skills), quote=False)}</p>"
