from typing import Dict

# Badge colours for diet type chips on recipe cards.
DIET_TYPE_BADGE_COLORS: Dict[str, str] = {
    "vegetarian": "#16a34a",
    "vegan": "#16a34a",
    "lowCarb": "#2563eb",
    "lowFat": "#2563eb",
    "glutenFree": "#d97706",
    "dairyFree": "#d97706",
    "highProtein": "#dc2626",
    "lowCalorie": "#2563eb",
}
DEFAULT_BADGE_COLOR = "#6b7280"

DIET_TYPE_LABELS: Dict[str, str] = {
    "vegetarian": "Vegetarian",
    "vegan": "Vegan",
    "lowCarb": "Low Carb",
    "lowFat": "Low Fat",
    "glutenFree": "Gluten Free",
    "dairyFree": "Dairy Free",
    "highProtein": "High Protein",
    "lowCalorie": "Low Calorie",
}

CUISINE_LABELS: Dict[str, str] = {
    "chinese": "Chinese",
    "western": "Western",
    "japanese": "Japanese",
    "korean": "Korean",
    "italian": "Italian",
    "thai": "Thai",
}

NUTRITION_GOAL_LABELS: Dict[str, str] = {
    "highProtein": "High protein (20g+)",
    "lowCalorie": "Low calorie (300 kcal or less)",
}

SORT_LABELS: Dict[str, str] = {
    "relevance": "Best match",
    "time": "Cooking time",
    "calories": "Calories",
}


def diet_type_badge_color(diet_type: str) -> str:
    return DIET_TYPE_BADGE_COLORS.get(diet_type, DEFAULT_BADGE_COLOR)


def diet_type_label(diet_type: str) -> str:
    return DIET_TYPE_LABELS.get(diet_type, diet_type)


def cuisine_label(cuisine: str) -> str:
    return CUISINE_LABELS.get(cuisine, cuisine)


def diet_badges_html(diet_types, limit=None) -> str:
    """Render diet types as inline pill badges (cards show the first three)."""
    shown = diet_types[:limit] if limit is not None else diet_types
    return " ".join(
        f'<span style="background: {diet_type_badge_color(d)}; color: white; '
        f'padding: 2px 10px; border-radius: 20px; margin-right: 6px; '
        f'font-size: 0.8em; font-weight: 500;">{diet_type_label(d)}</span>'
        for d in shown
    )


def macro_bar_widths(protein: int, carbs: int, fat: int) -> Dict[str, float]:
    """Bar widths (0-100) for the detail view, relative to the largest macro."""
    largest = max(protein, carbs, fat)
    if largest <= 0:
        return {"protein": 0.0, "carbs": 0.0, "fat": 0.0}
    return {
        "protein": protein / largest * 100,
        "carbs": carbs / largest * 100,
        "fat": fat / largest * 100,
    }
