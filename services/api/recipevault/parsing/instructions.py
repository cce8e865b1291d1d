from typing import List, Sequence

from ..core.text import strip_step_marker
from .sections import INSTRUCTION_HEADERS

MIN_INSTRUCTION_LENGTH = 5
MAX_INSTRUCTION_LENGTH = 1000


def clean_instruction_line(line: str) -> str:
    return strip_step_marker(line)


def is_instruction_label(line: str) -> bool:
    """True for a bare label line such as "Method:" or "Directions"."""
    return line.lower().rstrip(" :").strip() in INSTRUCTION_HEADERS


def validate_instructions(instructions: Sequence[str]) -> List[str]:
    return [
        step for step in instructions
        if MIN_INSTRUCTION_LENGTH <= len(step) <= MAX_INSTRUCTION_LENGTH
    ]


def parse_instructions(lines: Sequence[str], validate: bool = True) -> List[str]:
    """
    Turn the lines of an instructions block into ordered step strings.

    Step numbers ("1.", "2)", "Step 3:") and bullets are stripped. A repeated
    instructions label inside the block is skipped rather than kept as a step;
    steps that merely mention "steps" or "method" are kept.
    """
    instructions = []
    for line in lines:
        if is_instruction_label(line):
            continue
        step = clean_instruction_line(line)
        if step:
            instructions.append(step)

    if validate:
        return validate_instructions(instructions)
    return instructions
