"""Recipe parsing API router.

Endpoints:
- POST /api/recipes/parse - Parse raw recipe text into a structured record
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from ..deps import get_parser, resolve_options
from ..parsing import ParsedRecipe, RecipeParser
from ..schemas import ParseRequest
from ..settings import settings

logger = logging.getLogger("recipevault.api")

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.post("/recipes/parse", response_model=ParsedRecipe, response_model_exclude_none=True)
@limiter.limit(settings.rate_limit)
def parse_recipe(
    request: Request,  # Required for rate limiter
    payload: ParseRequest,
    parser: RecipeParser = Depends(get_parser),
):
    """Parse pasted recipe text. Nothing is stored."""
    if len(payload.text) > settings.max_text_length:
        raise HTTPException(
            status_code=413,
            detail=f"Recipe text too large: {len(payload.text)} chars (max {settings.max_text_length})",
        )

    options = resolve_options(payload.options)
    hints = payload.hints.model_dump(exclude_none=True) if payload.hints else None

    parsed = parser.parse(payload.text, options, hints)
    logger.info(
        f"Parsed recipe {parsed.title!r}: {len(parsed.ingredients)} ingredients, "
        f"{len(parsed.instructions)} instructions"
    )
    return parsed
