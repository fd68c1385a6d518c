"""
Text normalization for raw PDF/OCR output.

Line breaks are preserved: later stages rely on them for section and item
boundaries. normalize() is idempotent.
"""
import re

# Plain character substitutions (OCR misreads and typographic variants)
CHAR_SUBSTITUTIONS = (
    ('\x00', ''),
    ('—', '-'),  # em dash
    ('–', '-'),  # en dash
    ('ﬁ', 'fi'),
    ('ﬂ', 'fl'),
    (' ', ' '),  # no-break space
    ('　', ' '),  # ideographic space
)

# A vertical bar read in place of a capital I: "M|T", "|nternship"
BAR_AS_I_PATTERNS = (
    re.compile(r'(?<=[A-Za-z])\|(?=[A-Za-z])'),
    re.compile(r'(?<!\S)\|(?=[a-z])'),
)

HORIZONTAL_WS = re.compile(r'[ \t\f\v]+')


def normalize(raw_text: str) -> str:
    """Clean raw extracted text for the parsing stages."""
    if not raw_text:
        return ""

    text = raw_text.replace('\r\n', '\n').replace('\r', '\n')

    for old, new in CHAR_SUBSTITUTIONS:
        text = text.replace(old, new)

    for pattern in BAR_AS_I_PATTERNS:
        text = pattern.sub('I', text)

    lines = [HORIZONTAL_WS.sub(' ', line).strip() for line in text.split('\n')]
    return '\n'.join(lines).strip()
