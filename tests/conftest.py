import pytest
from app.models import Preference
from app.core.matcher_config import MatcherConfig
from app.services.matcher import RecipeMatcher
from tests.helpers import make_recipe


@pytest.fixture
def chicken_rice():
    """The reference recipe: 20 min, chinese, 250 kcal, 25g protein."""
    return make_recipe(1)


@pytest.fixture
def empty_preference():
    return Preference(diet_types=[], cuisines=[], cooking_time=30, nutrition=[], excluded_ingredients=[])


@pytest.fixture
def catalog():
    return (
        make_recipe(1, cooking_time=30, cuisine="chinese", calories=400, diet_types=["vegetarian"]),
        make_recipe(2, cooking_time=10, cuisine="italian", calories=150),
        make_recipe(3, cooking_time=30, cuisine="chinese", calories=200, diet_types=["vegetarian"]),
        make_recipe(4, cooking_time=90, cuisine="thai", calories=600),
        make_recipe(5, cooking_time=20, cuisine="japanese", calories=300, ingredients=["peanut butter", "noodles"]),
    )


@pytest.fixture
def instant_matcher(catalog):
    """RecipeMatcher over the test catalog with the pacing delay disabled."""
    return RecipeMatcher(
        catalog_provider=lambda: catalog,
        config=MatcherConfig(simulated_delay_ms=0),
    )
