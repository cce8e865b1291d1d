import re
from typing import List, Sequence

from .parser import ParsedIngredient

DIETARY_PATTERNS = (
    (re.compile(r"\b(vegetarian|veggie)\b", re.IGNORECASE), "vegetarian"),
    (re.compile(r"\b(vegan|plant-based)\b", re.IGNORECASE), "vegan"),
    (re.compile(r"\b(gluten-free|gluten\s*free)\b", re.IGNORECASE), "gluten-free"),
    (re.compile(r"\b(dairy-free|dairy\s*free|lactose-free)\b", re.IGNORECASE), "dairy-free"),
    (re.compile(r"\b(nut-free|peanut-free)\b", re.IGNORECASE), "nut-free"),
    (re.compile(r"\b(keto|ketogenic)\b", re.IGNORECASE), "keto"),
    (re.compile(r"\b(paleo|paleolithic)\b", re.IGNORECASE), "paleo"),
    (re.compile(r"\b(low-carb|low\s*carb)\b", re.IGNORECASE), "low-carb"),
    (re.compile(r"\b(high-protein|high\s*protein)\b", re.IGNORECASE), "high-protein"),
    (re.compile(r"\b(organic|natural)\b", re.IGNORECASE), "organic"),
)

# Plain substring checks, so "chicken stock" and "ham hock" both count
MEAT_KEYWORDS = ("chicken", "beef", "pork", "lamb", "fish", "shrimp", "bacon", "ham", "sausage")


def ingredient_text(ingredients: Sequence[ParsedIngredient]) -> str:
    return " ".join(i.name.lower() for i in ingredients)


def detect_dietary_tags(text: str, ingredients: Sequence[ParsedIngredient]) -> List[str]:
    """
    Tag the recipe from explicit dietary wording, then infer "vegetarian"
    when nothing in the text or ingredients names a meat.
    """
    full_text = f"{text.lower()} {ingredient_text(ingredients)}"
    tags = {}

    for pattern, tag in DIETARY_PATTERNS:
        if pattern.search(full_text):
            tags[tag] = True

    if "vegan" not in tags:
        has_meat = any(meat in full_text for meat in MEAT_KEYWORDS)
        if not has_meat:
            tags["vegetarian"] = True

    return list(tags)
