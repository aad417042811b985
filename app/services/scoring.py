import math
from typing import Iterable
from app.models import Preference, Recipe
from app.core.rules import (
    COOKING_TIME_DECAY,
    GOAL_HIGH_PROTEIN,
    GOAL_LOW_CALORIE,
    HIGH_PROTEIN_MIN_GRAMS,
    LOW_CALORIE_MAX_KCAL,
    SCORE_WEIGHTS,
)
from app.utils.ingredient_parser import contains_ingredient


def score_recipe(recipe: Recipe, preference: Preference) -> int:
    """Score how well a recipe matches a user's preferences.

    Args:
        recipe: Catalog recipe to score.
        preference: Preferences submitted for this request.

    Returns:
        An integer match score in [0, 100].

    Notes:
        - Each factor adds its weight to the maximum only when it applies,
          so empty preference fields are neither rewarded nor penalized.
        - Diet types and nutrition goals give partial credit; cuisine is binary.
        - Cooking time always applies unless the budget is 0.
        - Any excluded ingredient vetoes the recipe with a score of 0.
        - A request where no factor applies is a perfect match (100).
    """
    if _has_excluded_ingredient(recipe.ingredients, preference.excluded_ingredients):
        return 0

    score = 0.0
    max_score = 0.0

    # Diet types: fraction of requested diets the recipe satisfies.
    if preference.diet_types:
        weight = SCORE_WEIGHTS["diet_types"]
        max_score += weight
        matching = set(recipe.diet_types).intersection(preference.diet_types)
        score += weight * (len(matching) / len(preference.diet_types))

    # Cuisine: all or nothing.
    if preference.cuisines:
        weight = SCORE_WEIGHTS["cuisine"]
        max_score += weight
        if recipe.cuisine in preference.cuisines:
            score += weight

    # Cooking time: closer to the budget scores higher, over budget scores 0.
    if preference.cooking_time > 0:
        weight = SCORE_WEIGHTS["cooking_time"]
        max_score += weight
        if recipe.cooking_time <= preference.cooking_time:
            gap = preference.cooking_time - recipe.cooking_time
            time_ratio = 1 - gap / preference.cooking_time * COOKING_TIME_DECAY
            score += weight * time_ratio

    # Nutrition: fraction of requested goals met; unknown goals never match.
    if preference.nutrition:
        weight = SCORE_WEIGHTS["nutrition"]
        max_score += weight
        matches = sum(1 for goal in preference.nutrition if _meets_goal(recipe, goal))
        score += weight * (matches / len(preference.nutrition))

    if max_score == 0:
        return 100
    return _round_half_up(score / max_score * 100)


def _has_excluded_ingredient(ingredients: Iterable[str], excluded: Iterable[str]) -> bool:
    ingredients = list(ingredients)
    return any(contains_ingredient(ingredients, term) for term in excluded)


def _meets_goal(recipe: Recipe, goal: str) -> bool:
    if goal == GOAL_HIGH_PROTEIN:
        return recipe.nutrition.protein >= HIGH_PROTEIN_MIN_GRAMS
    if goal == GOAL_LOW_CALORIE:
        return recipe.nutrition.calories <= LOW_CALORIE_MAX_KCAL
    return False


def _round_half_up(value: float) -> int:
    # round() would send 12.5 to 12; match scores round halves up.
    return int(math.floor(value + 0.5))
