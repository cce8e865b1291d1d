import logging
from typing import Optional

from .parser import RecipeParser, ParsedRecipe, ParseOptions
from .sections import scan_sections
from .title import extract_title, extract_description
from .ingredient_parser import parse_ingredients
from .instructions import parse_instructions
from .metadata import (
    extract_prep_time, extract_cook_time, extract_servings,
    extract_difficulty, extract_cuisine, MIN_SERVINGS, MAX_SERVINGS,
)
from .dietary import detect_dietary_tags
from .nutrition import extract_nutrition
from .categories import categorize_recipe

logger = logging.getLogger("recipevault.parsing")


class RuleBasedParser(RecipeParser):
    def parse(self, text: str, options: Optional[ParseOptions] = None, hints: dict = None) -> ParsedRecipe:
        options = options or ParseOptions()
        text = text or ""
        hints = hints or {}

        sections = scan_sections(text)

        title = self._title_from_hint(hints) or extract_title(sections.lines)
        description = extract_description(sections.lines)
        ingredients = parse_ingredients(sections.ingredient_lines, options.normalize_ingredients)
        instructions = parse_instructions(sections.instruction_lines, options.validate_instructions)

        servings = self._servings_from_hint(hints)
        if servings is None:
            servings = extract_servings(text)

        dietary_tags = detect_dietary_tags(text, ingredients) if options.detect_dietary_restrictions else []
        macros = extract_nutrition(text) if options.extract_nutrition else None
        categories = categorize_recipe(text, title, ingredients) if options.categorize_recipe else []

        recipe = ParsedRecipe(
            title=title,
            description=description,
            ingredients=ingredients,
            instructions=instructions,
            prep_time=extract_prep_time(text),
            cook_time=extract_cook_time(text),
            servings=servings,
            difficulty=extract_difficulty(text),
            cuisine_type=extract_cuisine(text),
            dietary_tags=dietary_tags,
            macros=macros,
            categories=categories,
        )
        logger.debug(
            f"Parsed {recipe.title!r}: {len(recipe.ingredients)} ingredients, "
            f"{len(recipe.instructions)} steps, {len(sections.lines)} lines"
        )
        return recipe

    def _title_from_hint(self, hints: dict) -> Optional[str]:
        title_hint = hints.get('title_hint')
        if isinstance(title_hint, str) and title_hint.strip():
            return title_hint.strip()
        return None

    def _servings_from_hint(self, hints: dict) -> Optional[int]:
        servings = hints.get('servings')
        # bool is an int subclass
        if isinstance(servings, int) and not isinstance(servings, bool) and MIN_SERVINGS <= servings <= MAX_SERVINGS:
            return servings
        return None
