"""
Scalar recipe metadata pulled straight from the raw text: prep/cook time,
servings, difficulty and cuisine.

Every table here is walked in order and the first hit wins, so the order of
entries is part of the behaviour.
"""
import re
from typing import Optional, Sequence

PREP_TIME_KEYWORDS = ("prep", "preparation", "preparing", "chop", "chopping", "cut", "cutting")
COOK_TIME_KEYWORDS = ("cook", "cooking", "bake", "baking", "simmer", "simmering")

TIME_UNIT = r"(minutes?|mins?|min|hours?|hrs?|h)\b"
# A whole number of at most six digits; longer runs are not a count
AMOUNT = r"(?<!\d)(\d{1,6})(?!\d)"

SERVING_PATTERNS = (
    re.compile(rf"\bserves?\s*{AMOUNT}", re.IGNORECASE),
    re.compile(rf"{AMOUNT}\s*servings?\b", re.IGNORECASE),
    re.compile(rf"\bfor\s*{AMOUNT}\s*people\b", re.IGNORECASE),
    re.compile(rf"{AMOUNT}\s*portions?\b", re.IGNORECASE),
)
MIN_SERVINGS = 1
MAX_SERVINGS = 50

DIFFICULTY_PATTERNS = (
    (re.compile(r"\b(easy|simple|quick|basic)\b", re.IGNORECASE), "easy"),
    (re.compile(r"\b(medium|moderate|intermediate)\b", re.IGNORECASE), "medium"),
    (re.compile(r"\b(hard|difficult|complex|advanced|challenging)\b", re.IGNORECASE), "hard"),
)

CUISINE_PATTERNS = (
    (re.compile(r"\b(italian|pasta|pizza|risotto)\b", re.IGNORECASE), "Italian"),
    (re.compile(r"\b(chinese|asian|stir-fry|dim\s*sum)\b", re.IGNORECASE), "Chinese"),
    (re.compile(r"\b(indian|curry|tandoori|biryani)\b", re.IGNORECASE), "Indian"),
    (re.compile(r"\b(mexican|taco|enchilada|guacamole)\b", re.IGNORECASE), "Mexican"),
    (re.compile(r"\b(japanese|sushi|ramen|tempura)\b", re.IGNORECASE), "Japanese"),
    (re.compile(r"\b(thai|pad\s*thai|tom\s*yum)\b", re.IGNORECASE), "Thai"),
    (re.compile(r"\b(french|coq\s*au\s*vin|ratatouille)\b", re.IGNORECASE), "French"),
    (re.compile(r"\b(mediterranean|greek|falafel|hummus)\b", re.IGNORECASE), "Mediterranean"),
    (re.compile(r"\b(american|burger|bbq|mac\s*and\s*cheese)\b", re.IGNORECASE), "American"),
)

CUISINES = tuple(cuisine for _, cuisine in CUISINE_PATTERNS)


def _time_pattern(keyword: str) -> re.Pattern:
    # keyword, optional "time", anything but digits on the same line, then "<n> <unit>"
    return re.compile(
        rf"\b{re.escape(keyword)}(?:\s*time)?[^\d\n]*?{AMOUNT}\s*{TIME_UNIT}",
        re.IGNORECASE,
    )


PREP_TIME_PATTERNS = tuple(_time_pattern(k) for k in PREP_TIME_KEYWORDS)
COOK_TIME_PATTERNS = tuple(_time_pattern(k) for k in COOK_TIME_KEYWORDS)


def extract_time_from_text(text: str, patterns: Sequence[re.Pattern]) -> Optional[int]:
    """Minutes for the first keyword pattern that matches; hours are converted."""
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            amount = int(match.group(1))
            unit = match.group(2).lower()
            if unit.startswith("h"):
                return amount * 60
            return amount
    return None


def extract_prep_time(text: str) -> Optional[int]:
    return extract_time_from_text(text, PREP_TIME_PATTERNS)


def extract_cook_time(text: str) -> Optional[int]:
    return extract_time_from_text(text, COOK_TIME_PATTERNS)


def extract_servings(text: str) -> Optional[int]:
    for pattern in SERVING_PATTERNS:
        for match in pattern.finditer(text):
            servings = int(match.group(1))
            if MIN_SERVINGS <= servings <= MAX_SERVINGS:
                return servings
    return None


def extract_difficulty(text: str) -> Optional[str]:
    for pattern, level in DIFFICULTY_PATTERNS:
        if pattern.search(text):
            return level
    return None


def extract_cuisine(text: str) -> Optional[str]:
    for pattern, cuisine in CUISINE_PATTERNS:
        if pattern.search(text):
            return cuisine
    return None
