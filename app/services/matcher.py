import time
from typing import Callable, Iterable, List, Optional, Sequence
from app.models import Preference, Recipe, ScoredRecipe
from app.core.matcher_config import MatcherConfig, load_matcher_config
from app.core.rules import SORT_CALORIES, SORT_TIME
from app.core.logging_config import get_logger
from app.services.scoring import score_recipe
from app.services.recipe_service import recipe_service

logger = get_logger(__name__)

_SORT_FIELDS = {
    SORT_TIME: lambda r: r.cooking_time,
    SORT_CALORIES: lambda r: r.nutrition.calories,
}


def match_all(catalog: Iterable[Recipe], preference: Preference) -> List[ScoredRecipe]:
    """Score every catalog recipe and rank the ones that match.

    Recipes scoring 0 are dropped. The result is ordered by descending score;
    Python's sort is stable, so equal scores keep their catalog order.
    """
    matched = []
    for recipe in catalog:
        score = score_recipe(recipe, preference)
        if score > 0:
            matched.append(ScoredRecipe(**recipe.model_dump(), match_score=score))
    return sorted(matched, key=lambda r: r.match_score, reverse=True)


def reorder(scored: Sequence[ScoredRecipe], key: str) -> List[ScoredRecipe]:
    """Return a new ordering of already-scored recipes.

    ``time`` and ``calories`` sort ascending; ``relevance`` and unknown keys
    keep the incoming order. Scores are never recomputed and the input is
    left untouched.
    """
    sort_field = _SORT_FIELDS.get(key)
    if sort_field is None:
        return list(scored)
    return sorted(scored, key=sort_field)


class RecipeMatcher:
    def __init__(
        self,
        catalog_provider: Optional[Callable[[], Sequence[Recipe]]] = None,
        config: Optional[MatcherConfig] = None,
    ) -> None:
        if catalog_provider is None:
            catalog_provider = recipe_service.get_catalog
        self.catalog_provider = catalog_provider
        self.config = config or load_matcher_config()

    def recommend(self, preference: Preference, sort_by: Optional[str] = None) -> List[ScoredRecipe]:
        """Rank the catalog for a preference after the configured pacing delay.

        Args:
            preference: Validated preferences for this request.
            sort_by: Sort key applied to the ranked list; defaults to the
                configured default sort.

        Returns:
            Matching recipes with their scores, in the requested order.
        """
        start = time.time()
        if self.config.simulated_delay_ms > 0:
            time.sleep(self.config.simulated_delay_ms / 1000.0)

        catalog = self.catalog_provider()
        ranked = match_all(catalog, preference)
        ordered = reorder(ranked, sort_by or self.config.default_sort)

        elapsed = time.time() - start
        logger.info(
            f"🍳 Matched {len(ordered)}/{len(catalog)} recipes "
            f"(sort={sort_by or self.config.default_sort}) in {elapsed:.2f}s"
        )
        return ordered


recipe_matcher = RecipeMatcher()
