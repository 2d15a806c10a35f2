# flake8: noqa
import sys
import json
from pathlib import Path

# Ensure project root is on sys.path so `recipe_scanner` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import pytest
from pydantic import ValidationError

from recipe_scanner.config import PROJECT_ROOT
from recipe_scanner.recipes import RecipeDatasetError, load_recipes, parse_recipes
from recipe_scanner.schemas import Recipe


def write(tmp_path, data):
    p = tmp_path / "recipes.json"
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


def test_load_recipes_in_file_order(tmp_path):
    p = write(tmp_path, [
        {"name": "Pancake", "ingredients": ["egg", "flour"], "link": "http://a"},
        {"name": "Omelette", "ingredients": ["Egg "], "link": "http://b"},
    ])
    recipes = load_recipes(p)
    assert isinstance(recipes, tuple)
    assert [r.name for r in recipes] == ["Pancake", "Omelette"]
    # raw ingredient text is kept; the matcher normalizes it
    assert recipes[1].ingredients == ("Egg ",)


def test_load_missing_file_returns_empty(tmp_path):
    assert load_recipes(tmp_path / "nope.json") == ()


def test_invalid_json_fails_fast(tmp_path):
    p = tmp_path / "recipes.json"
    p.write_text("[{not json", encoding="utf-8")
    with pytest.raises(RecipeDatasetError):
        load_recipes(p)


@pytest.mark.parametrize("entry", [
    {"ingredients": ["egg"], "link": "http://a"},
    {"name": "X", "link": "http://a"},
    {"name": "", "ingredients": ["egg"], "link": "http://a"},
    {"name": "X", "ingredients": "egg", "link": "http://a"},
    {"name": "X", "ingredients": ["egg"]},
    {"name": "X", "ingredients": ["egg"], "link": "http://a", "steps": []},
])
def test_malformed_entry_fails_fast(tmp_path, entry):
    p = write(tmp_path, [
        {"name": "Good", "ingredients": ["egg"], "link": "http://g"},
        entry,
    ])
    with pytest.raises(RecipeDatasetError) as exc:
        load_recipes(p)
    assert "1" in str(exc.value)


def test_parse_rejects_non_list():
    with pytest.raises(RecipeDatasetError):
        parse_recipes({"name": "X"})


def test_recipe_is_immutable():
    r = Recipe(name="X", ingredients=["a"], link="http://x")
    with pytest.raises(ValidationError):
        r.name = "Y"


def test_bundled_dataset_is_valid():
    recipes = load_recipes(PROJECT_ROOT / "data" / "recipes.json")
    assert len(recipes) > 0
