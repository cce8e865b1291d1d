import pytest

from recipevault.parsing.ingredient_parser import (
    parse_ingredient_line, parse_ingredients, normalize_quantity, normalize_unit,
    is_known_unit, clean_ingredient_name,
)


def _triple(ing):
    return ing.quantity, ing.unit, ing.name


@pytest.mark.parametrize("line, expected", [
    ("2 cups flour", ("2", "cup", "flour")),
    ("1/2 cup sugar", ("0.50", "cup", "sugar")),
    ("1-2 cloves garlic", ("1.50", "clove", "garlic")),
    ("1 to 2 cups milk", ("1.50", "cup", "milk")),
    ("- 1 pound spaghetti", ("1", "pound", "spaghetti")),
    ("• 4 ounces pancetta, diced", ("4", "ounce", "pancetta, diced")),
    ("2 tbsp olive oil.", ("2", "tablespoon", "olive oil")),
    ("500g spaghetti", ("500", "gram", "spaghetti")),
    ("3 large eggs", ("3", "large", "eggs")),
    ("2 eggs", ("2", None, "eggs")),
    ("Fresh basil leaves", ("1", None, "fresh basil leaves")),
    ("Salt and pepper to taste", ("1", None, "salt and pepper to taste")),
])
def test_parse_ingredient_line(line, expected):
    assert _triple(parse_ingredient_line(line)) == expected


def test_unknown_unit_words_fold_into_name():
    ing = parse_ingredient_line("2 ripe bananas, mashed")
    assert ing.unit is None
    assert ing.name == "ripe bananas, mashed"
    assert ing.quantity == "2"


def test_leading_unit_is_kept_when_more_words_follow():
    ing = parse_ingredient_line("1 cup grated Pecorino Romano cheese")
    assert _triple(ing) == ("1", "cup", "grated pecorino romano cheese")


def test_two_word_unit():
    assert _triple(parse_ingredient_line("2 extra large eggs")) == ("2", "extra large", "eggs")


def test_mixed_numbers_decimals_and_unicode_fractions():
    assert parse_ingredient_line("1 1/2 cups water").quantity == "1.50"
    assert parse_ingredient_line("2.5 kg beef").quantity == "2.5"
    assert _triple(parse_ingredient_line("½ tsp salt")) == ("0.50", "teaspoon", "salt")
    assert parse_ingredient_line("1½ cups stock").quantity == "1.50"


def test_range_without_unit_is_averaged():
    assert _triple(parse_ingredient_line("2-3 eggs")) == ("2.50", None, "eggs")


def test_unnormalized_values_are_returned_as_written():
    assert _triple(parse_ingredient_line("1/2 Cups Sugar", normalize=False)) == ("1/2", "Cups", "Sugar")
    assert parse_ingredient_line("1-2 cloves garlic", normalize=False).quantity == "1-2"


def test_normalize_quantity():
    assert normalize_quantity("3/4") == "0.75"
    assert normalize_quantity("1/8") == "0.13"
    assert normalize_quantity("1 to 3") == "2.00"
    assert normalize_quantity("2") == "2"
    assert normalize_quantity("1/0") == "1/0"


def test_normalize_unit_and_known_units():
    assert normalize_unit("TBS") == "tablespoon"
    assert normalize_unit("Bunches") == "bunch"
    assert normalize_unit("pinch") == "pinch"
    assert is_known_unit("sprigs")
    assert is_known_unit("XL")
    assert not is_known_unit("ripe")


def test_clean_ingredient_name():
    assert clean_ingredient_name(", Chopped   Onion.") == "chopped onion"


def test_parse_ingredients_keeps_every_line():
    lines = ["- 2 cups flour", "Notes", "-", "a pinch of love", "x" * 250, "3 eggs"]
    ingredients = parse_ingredients(lines)

    # header, empty bullet and overlong line are not ingredient lines
    assert [i.name for i in ingredients] == ["flour", "a pinch of love", "eggs"]
