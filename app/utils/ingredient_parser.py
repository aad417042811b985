from typing import Iterable, List, Union


def parse_excluded_ingredients(raw: Union[str, Iterable[str], None]) -> List[str]:
    """Normalize excluded-ingredient input into a list of unique, trimmed terms.

    Accepts the raw comma-separated text from the preference form
    (e.g. ``"peanut, shrimp,,  "``) or an already split list. Empty terms are
    dropped and the first occurrence of a repeated term wins.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        parts: Iterable[str] = raw.split(",")
    else:
        parts = raw

    terms: List[str] = []
    for part in parts:
        term = str(part).strip()
        if term and term not in terms:
            terms.append(term)
    return terms


def contains_ingredient(ingredients: Iterable[str], term: str) -> bool:
    """Case-insensitive substring check of ``term`` against every ingredient line."""
    needle = term.lower()
    return any(needle in ingredient.lower() for ingredient in ingredients)
