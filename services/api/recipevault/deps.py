"""FastAPI dependencies for the RecipeVault parser API.

Provides:
- The recipe parser used by the routers
- Parse options resolution (request -> settings defaults)
"""

from typing import Optional

from .parsing import RecipeParser, RuleBasedParser, ParseOptions
from .settings import settings

_parser = RuleBasedParser()


def get_parser() -> RecipeParser:
    """Parser dependency; tests override it through app.dependency_overrides."""
    return _parser


def resolve_options(options: Optional[ParseOptions]) -> ParseOptions:
    if options is not None:
        return options
    return settings.default_parse_options()
