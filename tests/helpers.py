from app.models import NutritionalInfo, Recipe


def make_recipe(
    recipe_id,
    cooking_time=20,
    diet_types=None,
    cuisine="chinese",
    calories=250,
    protein=25,
    ingredients=None,
):
    return Recipe(
        id=recipe_id,
        name=f"Recipe {recipe_id}",
        cuisine=cuisine,
        cooking_time=cooking_time,
        diet_types=diet_types if diet_types is not None else [],
        nutrition=NutritionalInfo(calories=calories, protein=protein, carbs=30, fat=10),
        ingredients=ingredients if ingredients is not None else ["chicken", "rice"],
        steps=["step"],
    )
