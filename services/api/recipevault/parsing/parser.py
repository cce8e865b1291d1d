from abc import ABC, abstractmethod
from typing import Optional, List, Literal
from pydantic import BaseModel, Field

UNTITLED = "Untitled Recipe"


class ParsedIngredient(BaseModel):
    quantity: str = "1"
    unit: Optional[str] = None
    name: str


class Nutrition(BaseModel):
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    fiber: Optional[float] = None
    sugar: Optional[float] = None
    sodium: Optional[float] = None


class ParseOptions(BaseModel):
    extract_nutrition: bool = True
    detect_dietary_restrictions: bool = True
    categorize_recipe: bool = True
    normalize_ingredients: bool = True
    # Drop instruction lines outside 5..1000 characters
    validate_instructions: bool = True


class ParsedRecipe(BaseModel):
    title: str = Field(UNTITLED, min_length=1)
    description: Optional[str] = None
    ingredients: List[ParsedIngredient] = []
    instructions: List[str] = []
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    servings: Optional[int] = Field(None, ge=1, le=50)
    difficulty: Optional[Literal["easy", "medium", "hard"]] = None
    cuisine_type: Optional[str] = None
    dietary_tags: List[str] = []
    macros: Optional[Nutrition] = None
    categories: List[str] = []


class RecipeParser(ABC):
    @abstractmethod
    def parse(self, text: str, options: Optional[ParseOptions] = None, hints: dict = None) -> ParsedRecipe:
        """Parse raw text into a structured Recipe object."""
        pass
