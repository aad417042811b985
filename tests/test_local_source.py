import pytest
import json
from pathlib import Path
from app.core.matcher_config import MatcherConfig
from app.services.sources.local import CatalogFileError, LocalSource


def catalog_entry(recipe_id, **overrides):
    entry = {
        "id": recipe_id,
        "name": f"Recipe {recipe_id}",
        "description": "Tasty.",
        "image": "https://example.com/image.jpg",
        "cuisine": "thai",
        "cookingTime": 25,
        "dietTypes": ["vegan"],
        "calories": 320,
        "protein": 12,
        "carbs": 40,
        "fat": 9,
        "ingredients": ["rice noodles", "tofu"],
        "steps": ["Soak the noodles.", "Stir-fry everything."],
        "tags": ["noodles"],
        "difficulty": "Easy",
        "servings": 2,
        "cookingMethod": "Stir-fry"
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def write_catalog(tmp_path):
    def _write(content):
        path = tmp_path / "recipes.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)
    return _write


def test_local_source_adapts_camel_case_fields(write_catalog):
    source = LocalSource(write_catalog([catalog_entry(1)]))
    recipes = source.load_recipes()

    assert len(recipes) == 1
    recipe = recipes[0]
    assert recipe.id == 1
    assert recipe.cooking_time == 25
    assert recipe.diet_types == ["vegan"]
    assert recipe.nutrition.calories == 320
    assert recipe.nutrition.protein == 12
    assert recipe.cooking_method == "Stir-fry"
    assert recipe.steps == ["Soak the noodles.", "Stir-fry everything."]


def test_local_source_preserves_catalog_order(write_catalog):
    source = LocalSource(write_catalog([catalog_entry(3), catalog_entry(1), catalog_entry(2)]))
    assert [r.id for r in source.load_recipes()] == [3, 1, 2]


def test_local_source_skips_malformed_entries(write_catalog):
    entries = [
        catalog_entry(1),
        catalog_entry(2, cookingTime=0),
        {"id": 3, "name": "No cuisine"},
        "not a recipe",
        catalog_entry(4),
    ]
    source = LocalSource(write_catalog(entries))

    assert [r.id for r in source.load_recipes()] == [1, 4]


def test_local_source_skips_unknown_cuisine_and_diet_type(write_catalog):
    entries = [
        catalog_entry(1, cuisine="martian"),
        catalog_entry(2, dietTypes=["vegan", "carnivore"]),
        catalog_entry(3),
    ]
    source = LocalSource(write_catalog(entries))

    assert [r.id for r in source.load_recipes()] == [3]


def test_local_source_does_not_read_until_loaded(tmp_path):
    path = tmp_path / "recipes.json"
    source = LocalSource(str(path))
    path.write_text(json.dumps([catalog_entry(1)]), encoding="utf-8")

    assert [r.id for r in source.load_recipes()] == [1]


def test_local_source_missing_file_raises(tmp_path):
    source = LocalSource(str(tmp_path / "missing.json"))
    with pytest.raises(CatalogFileError, match="not found"):
        source.load_recipes()


def test_local_source_invalid_json_raises(write_catalog):
    source = LocalSource(write_catalog("{not json"))
    with pytest.raises(CatalogFileError, match="not valid JSON"):
        source.load_recipes()


def test_local_source_rejects_non_list_payload(write_catalog):
    source = LocalSource(write_catalog({"recipes": []}))
    with pytest.raises(CatalogFileError, match="JSON array"):
        source.load_recipes()


def test_bundled_catalog_loads_cleanly():
    path = MatcherConfig().catalog_path
    recipes = LocalSource(path).load_recipes()

    assert len(recipes) == len(json.loads(Path(path).read_text(encoding="utf-8")))
    assert len({r.id for r in recipes}) == len(recipes)
