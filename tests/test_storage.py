from __future__ import annotations

from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from recipebox.examples import example_recipes, pancakes, simple_omelet
from recipebox.recipes import create_recipe
from recipebox.storage import InMemoryRecipeStorage


def test_add_recipe_creates_and_keeps_it():
    storage = InMemoryRecipeStorage()

    recipe = storage.add_recipe(name="Chili", cooking_time=90)

    assert recipe.servings == 4
    assert recipe.steps == []
    assert storage.get_recipe(recipe.id) is recipe


def test_list_recipes_in_insertion_order():
    storage = InMemoryRecipeStorage()
    first = storage.add_recipe(name="First", cooking_time=1)
    second = storage.save_recipe(create_recipe("Second", 2, 3))

    assert storage.list_recipes() == [first, second]


def test_list_recipes_returns_a_copy():
    storage = InMemoryRecipeStorage()
    storage.add_recipe(name="Only", cooking_time=1)

    storage.list_recipes().clear()

    assert len(storage.list_recipes()) == 1


def test_get_unknown_recipe_raises_key_error():
    storage = InMemoryRecipeStorage()
    storage.add_recipe(name="Only", cooking_time=1)

    with pytest.raises(KeyError):
        storage.get_recipe(-1)


def test_pancakes_example_drops_third_step():
    recipe = pancakes()

    assert recipe.servings == 6
    assert [ingredient.name for ingredient in recipe.ingredients] == ["Flour", "Milk", "Eggs"]
    assert "Heat griddle and pour batter to form pancakes" not in recipe.steps
    assert len(recipe.steps) == 4


def test_example_recipes():
    names = [recipe.name for recipe in example_recipes()]

    assert names == ["Pancakes", "Simple Omelet"]
    assert len(simple_omelet().steps) == 5
