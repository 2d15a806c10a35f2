import logging
from typing import Iterable, List, Sequence

from .normalize import normalize_ingredient
from .schemas import MatchResult, Recipe

logger = logging.getLogger(__name__)


def detected_set(detected: Iterable[str]) -> frozenset:
    return frozenset(n for n in map(normalize_ingredient, detected) if n)


def match(
    detected: Sequence[str], recipes: Sequence[Recipe]
) -> List[MatchResult]:
    """Rank recipes by how many of their ingredients were detected.

    Both the detected names and the recipe ingredients are normalized here
    regardless of what the caller or loader did. Recipes without any
    detected ingredient are dropped. The sort is stable, so recipes with
    equal match counts keep their input order.
    """
    have = detected_set(detected)
    if not have or not recipes:
        return []

    results = []
    for recipe in recipes:
        matched, missing = [], []
        for ing in map(normalize_ingredient, recipe.ingredients):
            (matched if ing in have else missing).append(ing)
        if not matched:
            continue
        results.append(MatchResult(
            name=recipe.name,
            link=recipe.link,
            matched_ingredients=matched,
            missing_ingredients=missing,
        ))

    results.sort(key=lambda r: len(r.matched_ingredients), reverse=True)
    logger.debug("Matched recipes: %s", [r.name for r in results])
    return results
