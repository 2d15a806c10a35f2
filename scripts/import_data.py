import sys

from recipe_scanner.config import get_settings
from recipe_scanner.crud import seed_recipes
from recipe_scanner.db import init_db, SessionLocal
from recipe_scanner.recipes import RecipeDatasetError, load_recipes


def main():
    init_db()
    p = get_settings().dataset_path
    if not p.exists():
        print(f'{p} not found')
        return 1
    try:
        recipes = load_recipes(p)
    except RecipeDatasetError as e:
        print(f'error: {e}')
        return 1
    db = SessionLocal()
    try:
        added = seed_recipes(db, recipes)
    finally:
        db.close()
    print(f'Imported {added} recipes')
    return 0


if __name__ == '__main__':
    sys.exit(main())
