import streamlit as st
import requests
import os

from app.core.rules import CUISINES, DIET_TYPES, NUTRITION_GOALS, SORT_KEYS
from app.ui.documentation import render_documentation
from app.ui.labels import (
    NUTRITION_GOAL_LABELS,
    SORT_LABELS,
    cuisine_label,
    diet_badges_html,
    diet_type_label,
    macro_bar_widths,
)

# Configuration
API_BASE_URL = os.getenv("API_URL", "http://127.0.0.1:8000")
API_DOCS_URL = os.getenv("API_DOCS_URL", "http://127.0.0.1:8000/docs")

st.set_page_config(page_title="Recipe Matcher", layout="wide")

col1, col2 = st.columns([5, 1])
with col1:
    st.title("🍜 Recipe Matcher")
with col2:
    st.link_button("API Docs", API_DOCS_URL, type="secondary", use_container_width=True)

finder_tab, help_tab = st.tabs(["Find recipes", "Help"])


def render_detail(recipe: dict) -> None:
    left, right = st.columns([2, 1])
    with left:
        if recipe.get("image"):
            st.image(recipe["image"], use_container_width=True)
        st.markdown("**Description**")
        st.write(recipe.get("description", ""))
        st.markdown("**Steps**")
        for i, step in enumerate(recipe.get("steps", []), 1):
            st.markdown(f"{i}. {step}")
    with right:
        st.markdown("**Basic info**")
        st.markdown(
            f"- Cuisine: {cuisine_label(recipe['cuisine'])}\n"
            f"- Cooking time: {recipe['cooking_time']} min\n"
            f"- Difficulty: {recipe.get('difficulty', '')}\n"
            f"- Servings: {recipe.get('servings', 1)}\n"
            f"- Method: {recipe.get('cooking_method', '')}"
        )

        nutrition = recipe["nutrition"]
        st.markdown(f"**Nutrition** ({nutrition['calories']} kcal)")
        widths = macro_bar_widths(nutrition["protein"], nutrition["carbs"], nutrition["fat"])
        for macro in ("protein", "carbs", "fat"):
            st.caption(f"{macro.title()}: {nutrition[macro]}g")
            st.progress(int(widths[macro]))

        st.markdown("**Ingredients**")
        for ingredient in recipe.get("ingredients", []):
            st.markdown(f"- {ingredient}")

        if recipe.get("tags"):
            st.markdown("**Tags**")
            st.write(", ".join(recipe["tags"]))

        if recipe.get("diet_types"):
            st.markdown("**Suitable diets**")
            st.markdown(diet_badges_html(recipe["diet_types"]), unsafe_allow_html=True)


def render_results(recipes: list) -> None:
    if not recipes:
        st.info("Sorry, no recipes match your preferences. Try relaxing some of them.")
        return

    columns = st.columns(3)
    for index, recipe in enumerate(recipes):
        with columns[index % 3]:
            with st.container(border=True):
                if recipe.get("image"):
                    st.image(recipe["image"], use_container_width=True)
                st.markdown(f"### {recipe['name']}")
                st.caption(
                    f"Match {recipe['match_score']}% | {recipe['cooking_time']} min | "
                    f"{recipe['nutrition']['calories']} kcal"
                )
                st.write(recipe.get("description", ""))
                st.markdown(diet_badges_html(recipe.get("diet_types", []), limit=3), unsafe_allow_html=True)
                with st.expander("View recipe"):
                    render_detail(recipe)


def sorted_view(ranked: list, sort_by: str) -> list:
    """Re-sort the ranked list for display; the ranked list itself is never replaced."""
    response = requests.post(f"{API_BASE_URL}/api/reorder", json={
        "recipes": ranked,
        "sort_by": sort_by
    })
    if response.status_code != 200:
        raise RuntimeError(f"Error {response.status_code}: {response.text}")
    return response.json()["recipes"]


def on_sort_change() -> None:
    ranked = st.session_state.get("ranked")
    if not ranked:
        return
    try:
        st.session_state["recipes"] = sorted_view(ranked, st.session_state["sort_by"])
        st.session_state.pop("error", None)
    except RuntimeError as exc:
        st.session_state["error"] = str(exc)
    except requests.exceptions.ConnectionError:
        st.session_state["error"] = "Could not connect to the API. Is the backend running?"


with help_tab:
    render_documentation()

with finder_tab:
    with st.form("preference_form"):
        st.subheader("Your preferences")
        diet_types = st.multiselect("Diet types", DIET_TYPES, format_func=diet_type_label, key="diet_types")
        cuisines = st.multiselect("Cuisines", CUISINES, format_func=cuisine_label, key="cuisines")
        cooking_time = st.slider("Maximum cooking time (minutes)", 10, 120, 60, step=5)
        nutrition = [
            goal for goal in NUTRITION_GOALS
            if st.checkbox(NUTRITION_GOAL_LABELS[goal], key=f"goal_{goal}")
        ]
        excluded = st.text_input("Exclude ingredients", placeholder="e.g. peanut, shrimp")
        submitted = st.form_submit_button("Find recipes", type="primary")

    if submitted:
        with st.spinner("Analysing your preferences..."):
            try:
                response = requests.post(f"{API_BASE_URL}/api/match", json={
                    "preferences": {
                        "diet_types": diet_types,
                        "cuisines": cuisines,
                        "cooking_time": cooking_time,
                        "nutrition": nutrition,
                        "excluded_ingredients": excluded
                    },
                    "sort_by": "relevance"
                })
                if response.status_code == 200:
                    ranked = response.json()["recipes"]
                    st.session_state["ranked"] = ranked
                    st.session_state["recipes"] = sorted_view(ranked, st.session_state.get("sort_by", "relevance"))
                    st.session_state.pop("error", None)
                else:
                    st.session_state["error"] = f"Error {response.status_code}: {response.text}"
            except RuntimeError as exc:
                st.session_state["error"] = str(exc)
            except requests.exceptions.ConnectionError:
                st.session_state["error"] = "Could not connect to the API. Is the backend running? (`uvicorn app.main:app`)"

    if st.session_state.get("error"):
        st.error(st.session_state["error"])

    if "recipes" in st.session_state:
        st.divider()
        header, sorter = st.columns([3, 1])
        with header:
            st.subheader(f"Recommended recipes ({len(st.session_state['recipes'])})")
        with sorter:
            st.selectbox(
                "Sort by",
                SORT_KEYS,
                format_func=lambda key: SORT_LABELS[key],
                key="sort_by",
                on_change=on_sort_change
            )
        render_results(st.session_state["recipes"])
