from typing import List, Optional, Tuple
from app.services.sources.base import RecipeSource
from app.services.sources.local import LocalSource
from app.models import Recipe
from app.core.matcher_config import load_matcher_config
from app.core.logging_config import get_logger

logger = get_logger(__name__)

class RecipeSourceError(Exception):
    def __init__(self, sources: List[str], errors: List[str]):
        super().__init__("Failed to load recipes from sources")
        self.sources = sources
        self.errors = errors

class RecipeService:
    """Holds the read-only recipe catalog, loaded once from its sources."""

    def __init__(self, sources: Optional[List[RecipeSource]] = None):
        if sources is None:
            sources = [LocalSource(load_matcher_config().catalog_path)]
        self.sources: List[RecipeSource] = sources
        self._catalog: Optional[Tuple[Recipe, ...]] = None

    def get_catalog(self) -> Tuple[Recipe, ...]:
        """
        Returns the catalog in source order, loading it on first use.
        """
        if self._catalog is None:
            self._catalog = self._load()
        return self._catalog

    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        for recipe in self.get_catalog():
            if recipe.id == recipe_id:
                return recipe
        return None

    def _load(self) -> Tuple[Recipe, ...]:
        all_recipes = []
        errors = []
        seen_ids = set()

        for source in self.sources:
            try:
                recipes = source.load_recipes()
            except Exception as e:
                logger.error(f"Error loading from source {source.name}: {e}")
                errors.append(f"{source.name}: {e}")
                continue
            for recipe in recipes:
                if recipe.id in seen_ids:
                    logger.warning(f"Duplicate recipe id {recipe.id} from {source.name}; keeping the first")
                    continue
                seen_ids.add(recipe.id)
                all_recipes.append(recipe)

        if errors and len(errors) == len(self.sources):
            raise RecipeSourceError([s.name for s in self.sources], errors)

        logger.info(f"📚 Catalog ready with {len(all_recipes)} recipes")
        return tuple(all_recipes)

recipe_service = RecipeService()
