import html
import re
import uuid
from typing import Iterable, Literal

CJK_PATTERN = re.compile(r"[\u3400-\u4dbf\u4e00-\u9fff]")


def generate_id() -> str:
    """Return a fresh, globally unique entity identifier."""
    return str(uuid.uuid4())


def detect_language(text: str) -> Literal["zh", "en"]:
    """
    Classify content language for default labels.

    Any CJK ideograph makes the text 'zh'; everything else is 'en'.
    """
    return "zh" if CJK_PATTERN.search(text or "") else "en"


def to_paragraphs(lines: Iterable[str]) -> str:
    """Render lines as escaped HTML paragraphs, skipping blank ones."""
    return "".join(
        f"<p>{html.escape(line.strip(), quote=False)}</p>"
        for line in lines
        if line and line.strip()
    )
