import json
import os
from typing import List, Optional
from pydantic import ValidationError
from app.services.sources.base import RecipeSource
from app.models import Recipe, NutritionalInfo
from app.core.logging_config import get_logger

logger = get_logger(__name__)

class CatalogFileError(Exception):
    """The catalog file is missing or is not a JSON array of recipes."""

class LocalSource(RecipeSource):
    name = "Local"

    def __init__(self, file_path: str = "data/recipes.json"):
        self.file_path = file_path

    def _load_data(self) -> List[dict]:
        if not os.path.exists(self.file_path):
            logger.error(f"{self.file_path} not found.")
            raise CatalogFileError(f"{self.file_path} not found")
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            logger.error(f"Error decoding {self.file_path}")
            raise CatalogFileError(f"{self.file_path} is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            logger.error(f"{self.file_path} must contain a JSON array of recipes")
            raise CatalogFileError(f"{self.file_path} must contain a JSON array of recipes")
        return data

    def load_recipes(self) -> List[Recipe]:
        """
        Reads the catalog file and adapts the camelCase entries to our
        canonical Recipe model. Entries that fail validation are skipped so
        one bad record cannot take the whole catalog down; an unreadable file
        raises CatalogFileError.
        """
        recipes = []
        for entry in self._load_data():
            recipe = self._adapt(entry)
            if recipe is not None:
                recipes.append(recipe)
        logger.info(f"Loaded {len(recipes)} recipes from {self.file_path}")
        return recipes

    def _adapt(self, data: dict) -> Optional[Recipe]:
        if not isinstance(data, dict):
            logger.warning(f"Skipping non-object catalog entry: {data!r}")
            return None
        try:
            return Recipe(
                id=data.get("id"),
                name=data.get("name"),
                description=data.get("description", ""),
                image=data.get("image"),
                cuisine=data.get("cuisine"),
                cooking_time=data.get("cookingTime"),
                diet_types=data.get("dietTypes", []),
                nutrition=NutritionalInfo(
                    calories=data.get("calories", 0),
                    protein=data.get("protein", 0),
                    carbs=data.get("carbs", 0),
                    fat=data.get("fat", 0)
                ),
                ingredients=data.get("ingredients", []),
                steps=data.get("steps", []),
                tags=data.get("tags", []),
                difficulty=data.get("difficulty", ""),
                servings=data.get("servings", 1),
                cooking_method=data.get("cookingMethod", "")
            )
        except ValidationError as exc:
            logger.warning(f"Skipping malformed recipe {data.get('id')!r}: {exc.error_count()} error(s)")
            return None
