import re
import logging
from decimal import Decimal, ROUND_HALF_UP
from fractions import Fraction
from typing import List, Optional, Sequence, Tuple

from ..core.text import collapse_whitespace, expand_vulgar_fractions, strip_bullet
from .parser import ParsedIngredient
from .sections import is_section_header

logger = logging.getLogger("recipevault.parsing")

UNIT_SYNONYMS = {
    "tbsp": "tablespoon", "tbs": "tablespoon", "tablespoons": "tablespoon",
    "tsp": "teaspoon", "teaspoons": "teaspoon",
    "oz": "ounce", "ounces": "ounce",
    "lb": "pound", "lbs": "pound", "pounds": "pound",
    "g": "gram", "grams": "gram",
    "kg": "kilogram", "kilograms": "kilogram",
    "ml": "milliliter", "milliliters": "milliliter",
    "l": "liter", "liters": "liter",
    "cup": "cup", "cups": "cup",
    "piece": "piece", "pieces": "piece",
    "slice": "slice", "slices": "slice",
    "clove": "clove", "cloves": "clove",
    "bunch": "bunch", "bunches": "bunch",
    "can": "can", "cans": "can",
    "package": "package", "packages": "package",
    "bag": "bag", "bags": "bag",
    "jar": "jar", "jars": "jar",
    "bottle": "bottle", "bottles": "bottle",
}

# Words that count as a measurement when they follow a quantity.
# Anything else after the number is part of the ingredient name.
KNOWN_UNITS = frozenset(UNIT_SYNONYMS) | frozenset(UNIT_SYNONYMS.values()) | {
    "tablespoon", "teaspoon", "pinch", "dash", "handful",
    "sprig", "sprigs", "stalk", "stalks", "head", "heads", "ear", "ears",
    "medium", "large", "small", "extra large", "xl",
}

# 2 | 2.5 | 1/2 | 1 1/2
QTY = r"\d+(?:\s+\d+/\d+|/\d+|\.\d+)?"
RANGE_SEP = r"\s*(?:to|-|–)\s*"
UNIT_WORDS = r"[a-zA-Z]+(?:\s+[a-zA-Z]+)*"

# Tried in order, first match wins
RANGE_UNIT_RE = re.compile(
    rf"^(?P<qty>{QTY})(?:{RANGE_SEP}(?P<qty2>{QTY}))?\s+(?P<words>{UNIT_WORDS})\s+(?P<name>.+)$",
    re.IGNORECASE,
)
UNIT_RE = re.compile(rf"^(?P<qty>{QTY})(?:\s*-\s*)?\s*(?P<words>{UNIT_WORDS})\s+(?P<name>.+)$")
QTY_RE = re.compile(rf"^(?P<qty>{QTY})(?:{RANGE_SEP}(?P<qty2>{QTY}))?(?:\s*-\s*)?\s*(?P<name>.+)$", re.IGNORECASE)

_RANGE_SPLIT_RE = re.compile(r"\s*(?:-|–|\bto\b)\s*", re.IGNORECASE)
_EDGE_PUNCT_RE = re.compile(r"^[\s,.;:]+|[\s,.;:]+$")

MAX_INGREDIENT_LENGTH = 200


def normalize_unit(unit: str) -> str:
    lower = collapse_whitespace(unit).lower()
    return UNIT_SYNONYMS.get(lower, lower)


def is_known_unit(unit: str) -> bool:
    return collapse_whitespace(unit).lower() in KNOWN_UNITS


def clean_ingredient_name(name: str) -> str:
    """Strip edge punctuation, collapse whitespace, lowercase."""
    return collapse_whitespace(_EDGE_PUNCT_RE.sub("", name or "")).lower()


def _to_fraction(value: str) -> Optional[Fraction]:
    # "1 1/2" -> 3/2
    try:
        return sum((Fraction(part) for part in value.split()), Fraction(0))
    except (ValueError, ZeroDivisionError):
        return None


def _format_decimal(value: Fraction) -> str:
    d = Decimal(value.numerator) / Decimal(value.denominator)
    return str(d.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def normalize_quantity(quantity: str) -> str:
    """
    "1/2" -> "0.50", "1 1/2" -> "1.50", "1-2" / "1 to 2" -> "1.50".
    Plain numbers, and anything that does not convert, pass through unchanged.
    """
    q = collapse_whitespace(quantity)
    parts = _RANGE_SPLIT_RE.split(q)
    if len(parts) == 2:
        low, high = _to_fraction(parts[0]), _to_fraction(parts[1])
        if low is None or high is None:
            return q
        return _format_decimal((low + high) / 2)

    if "/" in q:
        value = _to_fraction(q)
        return _format_decimal(value) if value is not None else q

    return q


def _split_unit(words: str) -> Tuple[Optional[str], List[str]]:
    """
    Pick the measurement off the front of the word run after the quantity.
    Returns (unit as written, leftover words that belong to the name).

    Only the leading word (or the two-word "extra large") is checked against
    the known units, not the whole run: "1 cup grated cheese" keeps "cup" as
    its unit and "grated cheese" as its name. A run whose leading word is not
    a unit folds entirely into the name.
    """
    tokens = words.split()
    if len(tokens) >= 2:
        pair = f"{tokens[0]} {tokens[1]}"
        if is_known_unit(normalize_unit(pair)):
            return pair, tokens[2:]
    if is_known_unit(normalize_unit(tokens[0])):
        return tokens[0], tokens[1:]
    return None, tokens


def _raw_quantity(match: re.Match) -> str:
    qty = collapse_whitespace(match.group("qty"))
    qty2 = match.groupdict().get("qty2")
    if qty2:
        return f"{qty}-{collapse_whitespace(qty2)}"
    return qty


def _build(quantity: str, unit: Optional[str], name: str, normalize: bool) -> ParsedIngredient:
    if not normalize:
        return ParsedIngredient(quantity=quantity, unit=unit, name=collapse_whitespace(name))
    return ParsedIngredient(
        quantity=normalize_quantity(quantity),
        unit=normalize_unit(unit) if unit else None,
        name=clean_ingredient_name(name),
    )


def parse_ingredient_components(line: str, normalize: bool = True) -> ParsedIngredient:
    """
    Decompose one bullet-free ingredient line into quantity, unit and name.
    Never fails: a line without a leading quantity becomes the name with quantity "1".
    """
    text = expand_vulgar_fractions(line).strip()

    # 1. "1 to 2 cups milk", "2 cups flour"  2. "500g spaghetti"
    for pattern in (RANGE_UNIT_RE, UNIT_RE):
        match = pattern.match(text)
        if match:
            unit, leftover = _split_unit(match.group("words"))
            name = " ".join(leftover + [match.group("name")])
            return _build(_raw_quantity(match), unit, name, normalize)

    # 3. "2 eggs"
    match = QTY_RE.match(text)
    if match:
        return _build(_raw_quantity(match), None, match.group("name"), normalize)

    # 4. "Salt and pepper to taste"
    logger.debug(f"No quantity found, keeping whole line as name: {line!r}")
    return _build("1", None, text, normalize)


def is_likely_ingredient(line: str) -> bool:
    clean = strip_bullet(line)
    return 0 < len(clean) < MAX_INGREDIENT_LENGTH and not is_section_header(clean)


def parse_ingredient_line(line: str, normalize: bool = True) -> Optional[ParsedIngredient]:
    clean = strip_bullet(line)
    if not clean:
        return None
    return parse_ingredient_components(clean, normalize)


def parse_ingredients(lines: Sequence[str], normalize: bool = True) -> List[ParsedIngredient]:
    """Parse every ingredient-looking line of an ingredients block, in order."""
    ingredients = []
    for line in lines:
        if not is_likely_ingredient(line):
            continue
        ingredient = parse_ingredient_line(line, normalize)
        if ingredient:
            ingredients.append(ingredient)
    return ingredients
