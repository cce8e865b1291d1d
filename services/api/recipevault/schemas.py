"""Pydantic schemas for the RecipeVault parser API.

Request/response models for:
- Recipe text parsing
- Unit vocabulary
"""

from typing import Optional

from pydantic import BaseModel, Field

from .parsing import ParseOptions


# --- Parsing ---

class ParseHints(BaseModel):
    title_hint: Optional[str] = None
    servings: Optional[int] = Field(None, ge=1, le=50)


class ParseRequest(BaseModel):
    text: str
    options: Optional[ParseOptions] = None
    hints: Optional[ParseHints] = None


# --- Units ---

class UnitVocabularyOut(BaseModel):
    synonyms: dict[str, str]
    known_units: list[str]
