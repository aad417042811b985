import streamlit as st

from app.core.rules import (
    HIGH_PROTEIN_MIN_GRAMS,
    LOW_CALORIE_MAX_KCAL,
    SCORE_WEIGHTS,
)


def render_documentation() -> None:
    st.header("📚 How matching works")
    st.markdown(
        """
Tell us what you like to eat and we rank every recipe in the catalog by how well
it fits. This page explains what each part of the form does to the score.
"""
    )

    st.divider()
    st.subheader("✅ Quickstart")
    st.markdown(
        """
- **Start the app:** `python run.py` (or run API + UI separately).
- **Open the UI:** `http://127.0.0.1:8501`.
- **Pick preferences:** diet types, cuisines, nutrition goals and a time budget.
- **Exclude ingredients:** comma separated, e.g. `peanut, shrimp`.
- **Find recipes:** results appear after a short analysis pause.
- **Re-sort:** switch between best match, cooking time and calories.
"""
    )

    st.markdown(
        """
Environment setup:
- `API_URL` / `API_DOCS_URL` override the Streamlit links.
- `SIMULATED_DELAY_MS` sets the analysis pause (`0` disables it).
- `RECIPE_CATALOG_PATH` points at another catalog JSON file.
- Defaults live in `config/matcher_config.json`.
"""
    )

    st.subheader("🧮 How is the match score computed?")
    st.markdown(
        f"""
Each preference you fill in is a factor with a weight. A factor you leave empty
is skipped entirely, so it never lowers the score.

| Factor | Weight | Credit |
|---|---|---|
| Diet types | {SCORE_WEIGHTS["diet_types"]} | share of your chosen diets the recipe fits |
| Cuisine | {SCORE_WEIGHTS["cuisine"]} | full if the cuisine is one you chose |
| Cooking time | {SCORE_WEIGHTS["cooking_time"]} | none if over budget, otherwise 50-100% (closer to budget scores higher) |
| Nutrition | {SCORE_WEIGHTS["nutrition"]} | share of goals met (high protein: {HIGH_PROTEIN_MIN_GRAMS}g+, low calorie: {LOW_CALORIE_MAX_KCAL} kcal or less) |

The match score is the earned credit divided by the total weight of the factors
that applied, shown as a percentage. Any recipe containing an excluded
ingredient scores 0 and is hidden.
"""
    )

    st.markdown(
        """
Architecture at a glance:
```
[Streamlit UI] -> [FastAPI /api/match]      -> scoring -> ranking -> response
               -> [FastAPI /api/reorder]    -> sorting only
               -> [FastAPI /api/recipes/id] -> detail view
```
"""
    )
