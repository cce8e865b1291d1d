import re
from typing import List, Sequence

from .dietary import ingredient_text
from .parser import ParsedIngredient

CATEGORY_PATTERNS = (
    (re.compile(r"\b(breakfast|pancake|waffle|omelette|scramble)\b", re.IGNORECASE), "Breakfast"),
    (re.compile(r"\b(lunch|sandwich|wrap|salad)\b", re.IGNORECASE), "Lunch"),
    (re.compile(r"\b(dinner|main\s*course|entree)\b", re.IGNORECASE), "Dinner"),
    (re.compile(r"\b(dessert|sweet|cake|cookie|pie|ice\s*cream)\b", re.IGNORECASE), "Dessert"),
    (re.compile(r"\b(snack|appetizer|starter|finger\s*food)\b", re.IGNORECASE), "Snacks & Appetizers"),
    (re.compile(r"\b(soup|stew|broth|bisque)\b", re.IGNORECASE), "Soups & Stews"),
    (re.compile(r"\b(sauce|dressing|dip|spread)\b", re.IGNORECASE), "Sauces & Dressings"),
    (re.compile(r"\b(bread|bun|roll|muffin|biscuit)\b", re.IGNORECASE), "Breads & Baked Goods"),
    (re.compile(r"\b(drink|beverage|smoothie|juice|cocktail)\b", re.IGNORECASE), "Beverages"),
    (re.compile(r"\b(side\s*dish|accompaniment)\b", re.IGNORECASE), "Side Dishes"),
)

CATEGORIES = tuple(category for _, category in CATEGORY_PATTERNS)

# Substring match: "pancakes", "flatbread" and "toasted" all count
BREAKFAST_FALLBACK = re.compile(r"toast|bread|bagel|muffin|pancake|waffle")


def categorize_recipe(text: str, title: str, ingredients: Sequence[ParsedIngredient]) -> List[str]:
    """Every matching category is kept; categories are not exclusive."""
    full_text = f"{text} {title}".lower() + f" {ingredient_text(ingredients)}"
    categories = {}

    for pattern, category in CATEGORY_PATTERNS:
        if pattern.search(full_text):
            categories[category] = True

    if "Breakfast" not in categories and (
        BREAKFAST_FALLBACK.search(title.lower()) or BREAKFAST_FALLBACK.search(full_text)
    ):
        categories["Breakfast"] = True

    return list(categories)
