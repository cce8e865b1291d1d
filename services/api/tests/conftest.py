import pytest
from fastapi.testclient import TestClient

from recipevault.main import app
from recipevault.parsing import RuleBasedParser
from recipevault.routers.recipes import limiter


CARBONARA = """
Classic Spaghetti Carbonara

A traditional Italian pasta dish with eggs, cheese, and pancetta.

Ingredients:
- 1 pound spaghetti
- 4 large eggs
- 1 cup grated Pecorino Romano cheese
- 4 ounces pancetta, diced
- 4 cloves garlic, minced
- Salt and black pepper to taste
- 1/4 cup reserved pasta water

Instructions:
1. Bring a large pot of salted water to boil and cook spaghetti according to package directions.
2. In a large skillet, cook pancetta over medium heat until crispy, about 8 minutes.
3. Add garlic and cook for 1 minute until fragrant.
4. In a bowl, whisk together eggs, cheese, and black pepper.
5. Drain pasta, reserving 1/4 cup of pasta water.
6. Add hot pasta to skillet with pancetta and toss to combine.
7. Remove from heat and quickly stir in egg mixture, adding pasta water as needed.
8. Serve immediately with extra cheese and black pepper.

Prep time: 10 minutes
Cook time: 20 minutes
Serves 4 people
Difficulty: Medium
Calories: 450 per serving
Protein: 25g
Carbs: 45g
Fat: 18g
"""


@pytest.fixture
def parser():
    return RuleBasedParser()


@pytest.fixture
def carbonara_text():
    return CARBONARA


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture
def client():
    """Test client with clean dependency overrides."""
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
