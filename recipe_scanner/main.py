import argparse
import logging
import sys

from .config import get_settings
from .matcher import match
from .normalize import normalize_all
from .recipes import RecipeDatasetError, load_recipes
from .render import empty_message


def main(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Recommend recipes for detected ingredients."
    )
    parser.add_argument("ingredients", nargs="*", help="detected ingredient names")
    parser.add_argument("--dataset", default=str(settings.dataset_path))
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        recipes = load_recipes(args.dataset)
    except RecipeDatasetError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    have = normalize_all(args.ingredients)
    results = match(have, recipes)
    message = empty_message(have, len(recipes), results)
    if message:
        print(message)
        return 0
    for r in results:
        total = r.match_count + len(r.missing_ingredients)
        missing = ", ".join(r.missing_ingredients) or "nothing"
        print(f"- {r.name} ({r.match_count}/{total}): missing {missing}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
