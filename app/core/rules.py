from typing import Dict, List

# --- Catalog Enumerations ---
CUISINES: List[str] = ["chinese", "western", "japanese", "korean", "italian", "thai"]

DIET_TYPES: List[str] = [
    "vegetarian",
    "vegan",
    "lowCarb",
    "lowFat",
    "glutenFree",
    "dairyFree",
    "highProtein",
    "lowCalorie",
]

# --- Nutrition Goals ---
GOAL_HIGH_PROTEIN = "highProtein"
GOAL_LOW_CALORIE = "lowCalorie"
NUTRITION_GOALS: List[str] = [GOAL_HIGH_PROTEIN, GOAL_LOW_CALORIE]

HIGH_PROTEIN_MIN_GRAMS = 20
LOW_CALORIE_MAX_KCAL = 300

# --- Scoring Weights ---
# Excluded ingredients are a veto, not a weighted factor.
SCORE_WEIGHTS: Dict[str, int] = {
    "diet_types": 5,
    "cuisine": 4,
    "cooking_time": 3,
    "nutrition": 4,
}

# Share of the cooking-time weight lost as the gap approaches the full budget.
COOKING_TIME_DECAY = 0.5

# --- Sort Keys ---
SORT_RELEVANCE = "relevance"
SORT_TIME = "time"
SORT_CALORIES = "calories"
SORT_KEYS: List[str] = [SORT_RELEVANCE, SORT_TIME, SORT_CALORIES]
