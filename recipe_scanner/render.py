"""View helpers for match results.

Escaping is left to the Jinja2 templates (autoescape is on for ``.html``);
this module only builds the data the templates iterate over.
"""
from typing import Dict, List, Sequence
from urllib.parse import quote_plus

from .schemas import MatchResult

NO_INGREDIENTS = "No ingredients detected."
NO_RECIPES = "No recipes available."
NO_MATCHES = "No recipes found for the detected ingredients."


def shopping_link(ingredient: str, base_url: str) -> str:
    return f"{base_url}{quote_plus(ingredient)}"


def build_view(results: Sequence[MatchResult], base_url: str) -> List[Dict]:
    rows = []
    for r in results:
        rows.append({
            "name": r.name,
            "link": r.link,
            "matched": r.matched_ingredients,
            "matched_count": r.match_count,
            "missing": r.missing_ingredients,
            "missing_count": len(r.missing_ingredients),
            "shop_links": [
                {"ingredient": m, "url": shopping_link(m, base_url)}
                for m in r.missing_ingredients
            ],
        })
    return rows


def empty_message(have: Sequence[str], catalog_size: int, results: Sequence) -> str:
    """Pick the message shown when there is nothing to list, or ''."""
    if not have:
        return NO_INGREDIENTS
    if catalog_size == 0:
        return NO_RECIPES
    if not results:
        return NO_MATCHES
    return ""
