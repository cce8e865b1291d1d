from typing import Optional, Sequence

from ..core.text import collapse_whitespace, starts_with_list_marker, strip_wrapping_quotes
from .parser import UNTITLED
from .sections import classify_line, is_section_header, LineKind

# Contained anywhere, these mark a line as metadata rather than a recipe name
TITLE_STOP_WORDS = ("prep time", "cook time", "servings", "calories")

MAX_TITLE_LENGTH = 100


def is_likely_not_title(line: str) -> bool:
    lower = line.lower()
    return (
        classify_line(line) != LineKind.CONTENT
        or any(w in lower for w in TITLE_STOP_WORDS)
        or starts_with_list_marker(line)
        or len(line) > MAX_TITLE_LENGTH
    )


def clean_title(title: str) -> str:
    return collapse_whitespace(strip_wrapping_quotes(title.strip()))


def find_title_index(lines: Sequence[str]) -> Optional[int]:
    for i, line in enumerate(lines):
        if line and not is_likely_not_title(line):
            return i
    return None


def extract_title(lines: Sequence[str]) -> str:
    idx = find_title_index(lines)
    if idx is None:
        return UNTITLED
    # "''" cleans down to nothing
    return clean_title(lines[idx]) or UNTITLED


def extract_description(lines: Sequence[str]) -> Optional[str]:
    """
    First line after the title that is not a section label and is between
    10 and 200 characters long (exclusive).
    """
    idx = find_title_index(lines)
    if idx is None:
        return None

    for line in lines[idx + 1:]:
        if not line or is_section_header(line):
            continue
        if 10 < len(line) < 200:
            return line
    return None
