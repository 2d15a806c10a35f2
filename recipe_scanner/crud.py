import json
from typing import Iterable, List, Optional
from sqlalchemy.orm import Session
from . import models, schemas


def _search(db: Session, q: Optional[str] = None):
    query = db.query(models.Recipe)
    if q:
        query = query.filter(models.Recipe.name.ilike(f"%{q.strip()}%"))
    return query


def get_recipe(db: Session, recipe_id: int):
    return db.query(models.Recipe).filter(models.Recipe.id == recipe_id).first()


def get_recipe_by_name(db: Session, name: str):
    return db.query(models.Recipe).filter(models.Recipe.name == name).first()


def get_recipes(db: Session, skip: int = 0, limit: int = 100, q: Optional[str] = None):
    return (
        _search(db, q)
        .order_by(models.Recipe.id)
        .offset(skip)
        .limit(limit)
        .all()
    )


def count_recipes(db: Session, q: Optional[str] = None) -> int:
    return _search(db, q).count()


def get_all_recipes(db: Session) -> List[schemas.Recipe]:
    # id order is dataset order, which the matcher's stable sort relies on
    rows = db.query(models.Recipe).order_by(models.Recipe.id).all()
    return [to_schema(r) for r in rows]


def to_schema(db_recipe: models.Recipe) -> schemas.Recipe:
    return schemas.Recipe(
        name=db_recipe.name,
        link=db_recipe.link or "",
        ingredients=json.loads(db_recipe.ingredients or "[]"),
    )


def to_out(db_recipe: models.Recipe) -> schemas.RecipeOut:
    return schemas.RecipeOut(id=db_recipe.id, **to_schema(db_recipe).model_dump())


def seed_recipes(db: Session, recipes: Iterable[schemas.Recipe]) -> int:
    """Upsert dataset recipes by name. Returns how many rows were added or changed."""
    changed = 0
    for recipe in recipes:
        ingredients = json.dumps(list(recipe.ingredients))
        db_recipe = get_recipe_by_name(db, recipe.name)
        if db_recipe is None:
            db.add(models.Recipe(
                name=recipe.name,
                link=recipe.link,
                ingredients=ingredients,
            ))
        elif db_recipe.link != recipe.link or db_recipe.ingredients != ingredients:
            db_recipe.link = recipe.link
            db_recipe.ingredients = ingredients
        else:
            continue
        # flush so a repeated name later in the same batch is seen
        db.flush()
        changed += 1
    db.commit()
    return changed
