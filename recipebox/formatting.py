"""Text renderings of a recipe.

Everything in here is a pure function of the record passed in.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from .models import Number, Recipe

NO_STEPS = "No steps added yet"
NO_INGREDIENTS = "No ingredients added yet"


def format_quantity(value: Number) -> str:
    """Render a number the way a person would write it.

    Whole floats drop their ``.0`` (``2.0 -> "2"``) and non-finite values
    read ``Infinity``, ``-Infinity`` or ``NaN``.
    """

    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _one_decimal(value: Number) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        return format_quantity(value)
    rounded = Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return str(rounded)


def time_per_serving(recipe: Recipe) -> float:
    """Minutes of cooking time per serving.

    Zero servings gives ``inf`` (with the sign of the cooking time) or
    ``nan`` when the cooking time is zero too, instead of raising.
    """

    try:
        return recipe.cooking_time / recipe.servings
    except ZeroDivisionError:
        if recipe.cooking_time == 0:
            return math.nan
        return math.copysign(math.inf, recipe.cooking_time)


def get_steps_list(recipe: Recipe) -> str:
    if not recipe.steps:
        return NO_STEPS

    return "".join(f"{index}. {step}\n" for index, step in enumerate(recipe.steps, start=1))


def get_ingredients_list(recipe: Recipe) -> str:
    if not recipe.ingredients:
        return NO_INGREDIENTS

    return "".join(
        f"- {format_quantity(ingredient.amount)} {ingredient.unit} of {ingredient.name}\n"
        for ingredient in recipe.ingredients
    )


def format_recipe(recipe: Recipe) -> str:
    """Full plain-text rendering of a recipe.

    Sections come in a fixed order: the header, servings and times, the
    ingredients block and the steps block.
    """

    servings = format_quantity(recipe.servings)
    return (
        "\n"
        f"Recipe: {recipe.name}\n"
        f"Servings: {servings} for {servings} people\n"
        f"Cooking time: {format_quantity(recipe.cooking_time)} minutes\n"
        f"Time per serving: {_one_decimal(time_per_serving(recipe))} minutes\n"
        "\n"
        "Ingredients:\n"
        f"{get_ingredients_list(recipe)}\n"
        "\n"
        "Steps:\n"
        f"{get_steps_list(recipe)}\n"
    )


__all__ = [
    "NO_INGREDIENTS",
    "NO_STEPS",
    "format_quantity",
    "format_recipe",
    "get_ingredients_list",
    "get_steps_list",
    "time_per_serving",
]
