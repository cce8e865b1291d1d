import re
from typing import Optional

from ..core.text import split_lines, strip_bullet
from .parser import Nutrition

NUMBER = r"(?<!\d)(\d{1,6}(?!\d)(?:\.\d+)?)"

# (field, amount-first pattern "25g protein", label-first pattern "Protein: 25g")
NUTRITION_PATTERNS = (
    ("calories",
     re.compile(rf"{NUMBER}\s*(?:calories?|kcal|cal)\b", re.IGNORECASE),
     re.compile(rf"\b(?:calories?|kcal)\s*[:=\-]?\s*{NUMBER}", re.IGNORECASE)),
    ("protein",
     re.compile(rf"{NUMBER}\s*(?:g|grams?)?\s*(?:of\s*)?protein", re.IGNORECASE),
     re.compile(rf"\bprotein\s*[:=\-]?\s*{NUMBER}", re.IGNORECASE)),
    ("carbs",
     re.compile(rf"{NUMBER}\s*(?:g|grams?)?\s*(?:of\s*)?(?:carbs|carbohydrates)", re.IGNORECASE),
     re.compile(rf"\b(?:carbs|carbohydrates)\s*[:=\-]?\s*{NUMBER}", re.IGNORECASE)),
    ("fat",
     re.compile(rf"{NUMBER}\s*(?:g|grams?)?\s*(?:of\s*)?fat", re.IGNORECASE),
     re.compile(rf"\bfat\s*[:=\-]?\s*{NUMBER}", re.IGNORECASE)),
    ("fiber",
     re.compile(rf"{NUMBER}\s*(?:g|grams?)?\s*(?:of\s*)?fiber", re.IGNORECASE),
     re.compile(rf"\bfiber\s*[:=\-]?\s*{NUMBER}", re.IGNORECASE)),
    ("sugar",
     re.compile(rf"{NUMBER}\s*(?:g|grams?)?\s*(?:of\s*)?sugar", re.IGNORECASE),
     re.compile(rf"\bsugar\s*[:=\-]?\s*{NUMBER}", re.IGNORECASE)),
    ("sodium",
     re.compile(rf"{NUMBER}\s*(?:mg|milligrams?)?\s*(?:of\s*)?sodium", re.IGNORECASE),
     re.compile(rf"\bsodium\s*[:=\-]?\s*{NUMBER}", re.IGNORECASE)),
)

# Lines that open with a label ("Calories 450 Protein 25g") pair each number
# with the label before it, so the label-first form is tried first there
LABEL_FIRST_LINE_RE = re.compile(
    r"^(?:calories?|kcal|protein|carbs|carbohydrates|fat|fiber|sugar|sodium)\b", re.IGNORECASE
)


def extract_nutrition(text: str) -> Optional[Nutrition]:
    """
    Scan line by line for macro values. A later line overwrites an earlier
    value for the same field. Returns None when no field was found.
    """
    found = {}
    for line in split_lines(text):
        label_led = bool(LABEL_FIRST_LINE_RE.match(strip_bullet(line)))
        for field, amount_first, label_first in NUTRITION_PATTERNS:
            if label_led:
                match = label_first.search(line) or amount_first.search(line)
            else:
                match = amount_first.search(line) or label_first.search(line)
            if match:
                found[field] = float(match.group(1))

    if not found:
        return None
    return Nutrition(**found)
