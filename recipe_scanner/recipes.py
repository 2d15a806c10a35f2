import json
import logging
from pathlib import Path
from typing import Any, Tuple

from pydantic import TypeAdapter, ValidationError

from .schemas import Recipe

logger = logging.getLogger(__name__)

_DATASET = TypeAdapter(Tuple[Recipe, ...])


class RecipeDatasetError(ValueError):
    """Raised when the recipe dataset cannot be decoded."""


def parse_recipes(data: Any, source: str = "<data>") -> Tuple[Recipe, ...]:
    """Validate already-decoded JSON into immutable Recipe records.

    Raises:
        RecipeDatasetError: if any entry does not match the schema.
    """
    try:
        return _DATASET.validate_python(data)
    except ValidationError as e:
        bad = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise RecipeDatasetError(
            f"{source}: invalid recipe entries at {', '.join(bad) or 'root'}"
        ) from e


def load_recipes(path) -> Tuple[Recipe, ...]:
    """Load recipes from a JSON file.

    Args:
        path (str or Path): Path to the JSON file.

    Returns:
        tuple: Recipe records in file order; empty if the file is missing.

    Raises:
        RecipeDatasetError: if the file is not valid JSON or an entry is
            malformed.
    """
    p = Path(path)
    if not p.exists():
        logger.warning("Recipe dataset %s not found", p)
        return ()
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise RecipeDatasetError(f"{p}: not valid JSON ({e})") from e
    recipes = parse_recipes(data, source=str(p))
    logger.info("Loaded %d recipe(s) from %s", len(recipes), p)
    return recipes
