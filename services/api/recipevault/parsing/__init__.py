from typing import Optional

from .parser import RecipeParser, ParsedRecipe, ParsedIngredient, Nutrition, ParseOptions
from .rule_based_parser import RuleBasedParser

_default_parser = RuleBasedParser()


def parse(raw_text: str, options: Optional[ParseOptions] = None) -> ParsedRecipe:
    """Parse free-form recipe text with the rule-based parser."""
    return _default_parser.parse(raw_text, options)


__all__ = ["RecipeParser", "ParsedRecipe", "ParsedIngredient", "Nutrition", "ParseOptions", "RuleBasedParser", "parse"]
