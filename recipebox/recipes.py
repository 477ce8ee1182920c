"""Creating recipes and changing their ingredients and steps.

Every function mutates the record it is given and hands the same record back,
so calls can be chained. Nothing here validates its input.
"""

from __future__ import annotations

import logging
import time
from datetime import date

from .models import Ingredient, Number, Recipe

logger = logging.getLogger(__name__)

_last_id = 0


def _next_id() -> int:
    # Millisecond timestamps, bumped so two recipes made in the same
    # millisecond still get distinct ids.
    global _last_id
    _last_id = max(time.time_ns() // 1_000_000, _last_id + 1)
    return _last_id


def create_recipe(name: str, cooking_time: Number, servings: Number = 4) -> Recipe:
    recipe = Recipe(
        id=_next_id(),
        name=name,
        cooking_time=cooking_time,
        servings=servings,
        date_created=date.today(),
    )
    logger.debug("Created recipe %s (%r)", recipe.id, name)
    return recipe


def add_ingredient(recipe: Recipe, name: str, amount: Number, unit: str) -> Recipe:
    recipe.ingredients.append(Ingredient(name=name, amount=amount, unit=unit))
    logger.debug("Added ingredient %r to recipe %s", name, recipe.id)
    return recipe


def add_step(recipe: Recipe, instruction: str) -> Recipe:
    recipe.steps.append(instruction)
    logger.debug("Added step %d to recipe %s", len(recipe.steps), recipe.id)
    return recipe


def remove_step(recipe: Recipe, step_index: int) -> Recipe:
    """Remove the step at ``step_index``.

    Indexes outside ``0 <= step_index < len(recipe.steps)`` leave the recipe
    untouched; negative indexes do not count from the end.
    """

    if 0 <= step_index < len(recipe.steps):
        del recipe.steps[step_index]
        logger.debug("Removed step %d from recipe %s", step_index, recipe.id)
    else:
        logger.debug(
            "Ignored removal of step %d from recipe %s (%d steps)",
            step_index,
            recipe.id,
            len(recipe.steps),
        )
    return recipe


__all__ = ["add_ingredient", "add_step", "create_recipe", "remove_step"]
