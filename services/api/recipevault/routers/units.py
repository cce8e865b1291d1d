"""
Router for the unit vocabulary used by the ingredient parser.
"""

from fastapi import APIRouter

from ..parsing.ingredient_parser import UNIT_SYNONYMS, KNOWN_UNITS
from ..schemas import UnitVocabularyOut

router = APIRouter()


@router.get("", response_model=UnitVocabularyOut)
def list_units():
    """
    Synonym table (written form -> canonical unit) and the full set of words
    treated as a measurement after a quantity.
    """
    return UnitVocabularyOut(
        synonyms=dict(UNIT_SYNONYMS),
        known_units=sorted(KNOWN_UNITS),
    )
