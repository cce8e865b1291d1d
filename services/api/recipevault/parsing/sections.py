"""
Line classification and section boundaries for pasted recipe text.

Section labels are ordinary lines ("Ingredients:", "What you need", "Method")
so every check here is a case-insensitive substring test. Metadata lines are
the exception: they are only recognised as a prefix ("Prep time: 10 min").
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from ..core.text import split_lines

INGREDIENT_HEADERS = ("ingredients", "what you need", "you will need")
INSTRUCTION_HEADERS = ("instructions", "directions", "method", "steps", "how to")
OTHER_HEADERS = ("nutrition", "notes", "tips", "variations")
METADATA_PREFIXES = (
    "prep time", "cook time", "serves", "difficulty",
    "calories", "protein", "carbs", "fat", "fiber", "sugar", "sodium",
)


class LineKind(str, Enum):
    INGREDIENTS_HEADER = "ingredients_header"
    INSTRUCTIONS_HEADER = "instructions_header"
    OTHER_HEADER = "other_header"
    METADATA = "metadata"
    CONTENT = "content"


def is_ingredients_header(line: str) -> bool:
    lower = line.lower()
    return any(h in lower for h in INGREDIENT_HEADERS)


def is_instructions_header(line: str) -> bool:
    lower = line.lower()
    return any(h in lower for h in INSTRUCTION_HEADERS)


def is_other_header(line: str) -> bool:
    lower = line.lower()
    return any(h in lower for h in OTHER_HEADERS)


def is_section_header(line: str) -> bool:
    return is_ingredients_header(line) or is_instructions_header(line) or is_other_header(line)


def is_metadata_line(line: str) -> bool:
    return line.lower().startswith(METADATA_PREFIXES)


def classify_line(line: str) -> LineKind:
    """Classify one trimmed line; the first matching family wins."""
    if is_ingredients_header(line):
        return LineKind.INGREDIENTS_HEADER
    if is_instructions_header(line):
        return LineKind.INSTRUCTIONS_HEADER
    if is_other_header(line):
        return LineKind.OTHER_HEADER
    if is_metadata_line(line):
        return LineKind.METADATA
    return LineKind.CONTENT


@dataclass(frozen=True)
class Sections:
    """
    Scanned lines plus half-open [start, end) index ranges of the two blocks.
    A block that was not found is (0, 0).
    """
    lines: Tuple[str, ...]
    ingredients: Tuple[int, int] = (0, 0)
    instructions: Tuple[int, int] = (0, 0)

    @property
    def ingredient_lines(self) -> List[str]:
        start, end = self.ingredients
        return list(self.lines[start:end])

    @property
    def instruction_lines(self) -> List[str]:
        start, end = self.instructions
        return list(self.lines[start:end])


def _ingredient_block(lines: Tuple[str, ...]) -> Tuple[int, int]:
    start = None
    for i, line in enumerate(lines):
        if start is None:
            if is_ingredients_header(line):
                start = i + 1
            continue
        # A repeated ingredients label ("For the sauce ingredients") does not end the block
        if is_instructions_header(line) and not is_ingredients_header(line):
            return start, i
    if start is None:
        return 0, 0
    return start, len(lines)


def _instruction_block(lines: Tuple[str, ...]) -> Tuple[int, int]:
    start = None
    for i, line in enumerate(lines):
        if start is None:
            if is_instructions_header(line):
                start = i + 1
            continue
        if is_other_header(line) or is_metadata_line(line):
            return start, i
    if start is None:
        return 0, 0
    return start, len(lines)


def scan_sections(text: str) -> Sections:
    lines = tuple(split_lines(text))
    return Sections(
        lines=lines,
        ingredients=_ingredient_block(lines),
        instructions=_instruction_block(lines),
    )
