"""Sample recipes used by ``recipes demo`` and the tests."""

from __future__ import annotations

from typing import List

from .models import Recipe
from .recipes import add_ingredient, add_step, create_recipe, remove_step


def pancakes() -> Recipe:
    """Pancakes for six, with the flipping step taken out again."""

    recipe = create_recipe("Pancakes", 20, 6)
    add_ingredient(recipe, "Flour", 2, "cups")
    add_ingredient(recipe, "Milk", 1.5, "cups")
    add_ingredient(recipe, "Eggs", 2, "large")

    add_step(recipe, "Mix dry ingredients in a bowl")
    add_step(recipe, "Add wet ingredients and stir until smooth")
    add_step(recipe, "Heat griddle and pour batter to form pancakes")
    add_step(recipe, "Flip when bubbles form on surface")
    add_step(recipe, "Cook until golden brown")
    return remove_step(recipe, 2)


def simple_omelet() -> Recipe:
    recipe = create_recipe("Simple Omelet", 10, 1)
    add_ingredient(recipe, "Eggs", 2, "large")
    add_ingredient(recipe, "Milk", 2, "tbsp")
    add_ingredient(recipe, "Salt", 1, "pinch")
    add_ingredient(recipe, "Butter", 1, "tbsp")

    add_step(recipe, "Beat eggs, milk, and salt together")
    add_step(recipe, "Melt butter in pan over medium heat")
    add_step(recipe, "Pour egg mixture into pan")
    add_step(recipe, "Cook until bottom is set, then fold in half")
    add_step(recipe, "Slide onto plate and serve")
    return recipe


def example_recipes() -> List[Recipe]:
    return [pancakes(), simple_omelet()]


__all__ = ["example_recipes", "pancakes", "simple_omelet"]
