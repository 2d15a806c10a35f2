# No fuzzy matching: exact normalized matches only
from typing import Iterable, List


def normalize_ingredient(s: str) -> str:
    if not s:
        return ""
    return s.strip().lower()


def normalize_all(items: Iterable[str]) -> List[str]:
    """Normalize every entry, keeping order and dropping blanks."""
    out = []
    for item in items:
        n = normalize_ingredient(item)
        if n:
            out.append(n)
    return out
