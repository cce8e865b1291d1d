import pytest
from recipevault.parsing import RuleBasedParser, ParseOptions, parse


def test_empty_text():
    recipe = parse("")

    assert recipe.title == "Untitled Recipe"
    assert recipe.ingredients == []
    assert recipe.instructions == []
    assert recipe.description is None
    assert recipe.macros is None


def test_single_word_title():
    assert parse("Recipe").title == "Recipe"


def test_full_recipe(parser, carbonara_text):
    recipe = parser.parse(carbonara_text)

    assert recipe.title == "Classic Spaghetti Carbonara"
    assert recipe.description == "A traditional Italian pasta dish with eggs, cheese, and pancetta."
    assert len(recipe.ingredients) == 7
    assert recipe.ingredients[0].model_dump() == {"quantity": "1", "unit": "pound", "name": "spaghetti"}
    assert recipe.ingredients[6].quantity == "0.25"
    assert len(recipe.instructions) == 8
    assert recipe.instructions[0].startswith("Bring a large pot")
    assert recipe.prep_time == 10
    assert recipe.servings == 4
    assert recipe.difficulty == "medium"
    assert recipe.cuisine_type == "Italian"
    assert "vegetarian" in recipe.dietary_tags
    assert recipe.macros.model_dump(exclude_none=True) == {
        "calories": 450, "protein": 25, "carbs": 45, "fat": 18,
    }


def test_ingredient_formats(parser):
    text = """
    Test Recipe

    Ingredients:
    - 2 cups flour
    - 1/2 cup sugar
    - 3 large eggs
    - 1/4 teaspoon salt
    - 2 tablespoons olive oil
    - 1-2 cloves garlic
    - 1 to 2 cups milk
    - Fresh basil leaves
    - Salt and pepper to taste

    Instructions:
    1. Mix ingredients
    2. Cook gently
    """
    recipe = parser.parse(text)

    assert len(recipe.ingredients) == 9
    assert recipe.ingredients[0].model_dump() == {"quantity": "2", "unit": "cup", "name": "flour"}
    assert recipe.ingredients[1].model_dump() == {"quantity": "0.50", "unit": "cup", "name": "sugar"}
    assert recipe.ingredients[5].model_dump() == {"quantity": "1.50", "unit": "clove", "name": "garlic"}
    assert recipe.ingredients[6].model_dump() == {"quantity": "1.50", "unit": "cup", "name": "milk"}
    assert recipe.ingredients[7].model_dump() == {"quantity": "1", "unit": None, "name": "fresh basil leaves"}


def test_cooking_times(parser):
    text = """
    Slow Cooker Beef Stew

    Prep time: 15 minutes
    Cook time: 8 hours

    Ingredients:
    - 2 pounds beef chuck

    Instructions:
    1. Cook beef for 8 hours
    """
    recipe = parser.parse(text)

    assert recipe.prep_time == 15
    assert recipe.cook_time == 480
    assert "vegetarian" not in recipe.dietary_tags
    assert "Soups & Stews" in recipe.categories


def test_numbered_instructions_without_ingredients(parser):
    text = """
    Instructions:
    1. Preheat oven to 350°F
    2. Mix ingredients in a bowl
    3. Pour into pan
    4. Bake for 30 minutes
    """
    recipe = parser.parse(text)

    assert recipe.instructions == [
        "Preheat oven to 350°F",
        "Mix ingredients in a bowl",
        "Pour into pan",
        "Bake for 30 minutes",
    ]
    assert recipe.title == "Untitled Recipe"


def test_instructions_stop_at_other_section(parser):
    text = "Directions\n1. Whisk eggs\n2. Fold in flour\nTips\nUse room temperature eggs"
    assert parser.parse(text).instructions == ["Whisk eggs", "Fold in flour"]


def test_simple_toast(parser):
    text = """
    Simple Toast

    Ingredients:
    - 2 slices bread
    - 1 tablespoon butter

    Instructions:
    1. Toast bread until golden brown
    2. Spread butter on toast
    3. Serve hot
    """
    recipe = parser.parse(text)

    assert recipe.title == "Simple Toast"
    assert [i.unit for i in recipe.ingredients] == ["slice", "tablespoon"]
    assert len(recipe.instructions) == 3
    assert recipe.difficulty == "easy"
    assert "vegetarian" in recipe.dietary_tags
    assert "Breakfast" in recipe.categories


def test_option_gating(parser, carbonara_text):
    options = ParseOptions(
        extract_nutrition=False,
        detect_dietary_restrictions=False,
        categorize_recipe=False,
    )
    recipe = parser.parse(carbonara_text, options)

    assert recipe.macros is None
    assert recipe.dietary_tags == []
    assert recipe.categories == []
    # Unaffected passes still run
    assert recipe.servings == 4


def test_normalization_off(parser):
    text = "Ingredients:\n- 1/2 Cups Sugar\n- 1-2 cloves garlic"
    recipe = parser.parse(text, ParseOptions(normalize_ingredients=False))

    assert recipe.ingredients[0].model_dump() == {"quantity": "1/2", "unit": "Cups", "name": "Sugar"}
    assert recipe.ingredients[1].quantity == "1-2"


def test_validation_off_keeps_short_steps(parser):
    text = "Steps\n1. Mix\n2. Bake until golden"

    assert parser.parse(text).instructions == ["Bake until golden"]
    assert parser.parse(text, ParseOptions(validate_instructions=False)).instructions == ["Mix", "Bake until golden"]


def test_hints_override_title_and_servings(parser):
    text = "Pancakes\nServes 2\nIngredients:\n1 cup flour"
    recipe = parser.parse(text, hints={"title_hint": "  Sunday Pancakes ", "servings": 6})

    assert recipe.title == "Sunday Pancakes"
    assert recipe.servings == 6


def test_out_of_range_servings_hint_is_ignored(parser):
    recipe = parser.parse("Serves 3", hints={"servings": 99})
    assert recipe.servings == 3


@pytest.mark.parametrize("text", [
    "Ingredients:\n- 2 cups flour\n- \n- ???\n- 1/0 cup weird\nInstructions:\n1. Go",
    "Ingredients\n" + "\n".join(f"- item {i}" for i in range(50)),
    "\x00\x01 garbage ⅞⅞ -- // 1/ /2",
])
def test_never_raises_and_is_deterministic(parser, text):
    first = parser.parse(text)
    second = parser.parse(text)

    assert first == second
    assert len(first.dietary_tags) == len(set(first.dietary_tags))
    assert len(first.categories) == len(set(first.categories))


def test_ingredient_count_matches_block_lines(parser):
    text = "Ingredients\n- 2 eggs\nnotes\n1 cup milk\npinch of salt\nInstructions\n1. Whisk everything"
    recipe = parser.parse(text)

    assert [i.name for i in recipe.ingredients] == ["eggs", "milk", "pinch of salt"]


def test_huge_numbers_do_not_raise(parser):
    huge = "9" * 5000
    recipe = parser.parse(f"Stew\nCook time: {huge} minutes\nServes {huge}")

    assert recipe.cook_time is None
    assert recipe.servings is None
