"""``recipes`` command group.

Recipes only live as long as the process, so every command builds what it
shows: ``demo`` uses the sample recipes, ``new`` builds one recipe from its
options and ``session`` keeps a menu running over the in-memory collection.
Step numbers on the command line are the 1-based numbers the views print.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence, Tuple

import click
from flask import current_app
from flask.cli import AppGroup, FlaskGroup

from .display import (
    display_error,
    display_formatted_recipe,
    display_info,
    display_recipe_details,
    display_recipe_list,
    display_success,
    display_warning,
)
from .examples import example_recipes
from .models import Recipe
from .recipes import add_ingredient, add_step, remove_step
from .storage import RecipeRepository

recipes_cli = AppGroup("recipes", help="Create recipes and show them in the terminal.")

VIEWS = ("formatted", "details", "table")


def _storage() -> RecipeRepository:
    return current_app.config["RECIPE_STORAGE"]


def _show_list(recipes: Sequence[Recipe]) -> None:
    display_recipe_list(list(recipes), tablefmt=current_app.config["RECIPE_TABLE_FORMAT"])


def _remove_step_number(recipe: Recipe, number: int) -> None:
    index = number - 1
    if not 0 <= index < len(recipe.steps):
        display_warning(f"Step {number} does not exist, nothing removed")
    remove_step(recipe, index)


@recipes_cli.command("demo")
@click.option(
    "--format/--no-format",
    "show_formatted",
    default=True,
    help="Also print the plain-text rendering of each recipe.",
)
def demo(show_formatted: bool) -> None:
    """Build the sample recipes and show them."""

    storage = _storage()
    for recipe in example_recipes():
        storage.save_recipe(recipe)
    current_app.logger.info("Loaded %d sample recipes", len(list(storage.list_recipes())))

    _show_list(storage.list_recipes())
    for recipe in storage.list_recipes():
        display_recipe_details(recipe)
        if show_formatted:
            display_formatted_recipe(recipe)


@recipes_cli.command("new")
@click.argument("name")
@click.argument("cooking_time", type=float)
@click.option("--servings", type=float, default=4, show_default=True, help="People served.")
@click.option(
    "--ingredient",
    "-i",
    "ingredients",
    type=(str, float, str),
    multiple=True,
    metavar="NAME AMOUNT UNIT",
    help="Ingredient to add, repeatable.",
)
@click.option("--step", "-s", "steps", multiple=True, help="Step to add, repeatable.")
@click.option(
    "--remove-step",
    "removals",
    type=int,
    multiple=True,
    metavar="NUMBER",
    help="Step number to remove after adding the steps, repeatable.",
)
@click.option(
    "--view",
    type=click.Choice(VIEWS),
    default="formatted",
    show_default=True,
    help="How to show the finished recipe.",
)
def new(
    name: str,
    cooking_time: float,
    servings: float,
    ingredients: Tuple[Tuple[str, float, str], ...],
    steps: Tuple[str, ...],
    removals: Tuple[int, ...],
    view: str,
) -> None:
    """Build recipe NAME taking COOKING_TIME minutes and show it."""

    recipe = _storage().add_recipe(name=name, cooking_time=cooking_time, servings=servings)
    for ingredient_name, amount, unit in ingredients:
        add_ingredient(recipe, ingredient_name, amount, unit)
    for instruction in steps:
        add_step(recipe, instruction)
    for number in removals:
        _remove_step_number(recipe, number)
    current_app.logger.info("Built recipe %s (%r)", recipe.id, name)

    if view == "table":
        _show_list([recipe])
    elif view == "details":
        display_recipe_details(recipe)
    else:
        display_formatted_recipe(recipe)


# Interactive session

def _pick_recipe(storage: RecipeRepository) -> Optional[Recipe]:
    recipe_id = click.prompt("Recipe ID", type=int)
    try:
        return storage.get_recipe(recipe_id)
    except KeyError:
        return None


def _create(storage: RecipeRepository) -> None:
    name = click.prompt("Recipe name")
    cooking_time = click.prompt("Cooking time (minutes)", type=float)
    servings = click.prompt("Servings", type=float, default=4)
    recipe = storage.add_recipe(name=name, cooking_time=cooking_time, servings=servings)
    display_success(f"Created '{recipe.name}' with ID {recipe.id}")


def _add_ingredient(storage: RecipeRepository) -> None:
    recipe = _pick_recipe(storage)
    if recipe is None:
        display_error("Recipe not found")
        return
    name = click.prompt("Ingredient name")
    amount = click.prompt("Amount", type=float)
    unit = click.prompt("Unit")
    add_ingredient(recipe, name, amount, unit)
    display_success(f"Added {name} to '{recipe.name}'")


def _add_step(storage: RecipeRepository) -> None:
    recipe = _pick_recipe(storage)
    if recipe is None:
        display_error("Recipe not found")
        return
    add_step(recipe, click.prompt("Instruction"))
    display_success(f"Added step {len(recipe.steps)} to '{recipe.name}'")


def _remove_step(storage: RecipeRepository) -> None:
    recipe = _pick_recipe(storage)
    if recipe is None:
        display_error("Recipe not found")
        return
    number = click.prompt("Step number", type=int)
    before = len(recipe.steps)
    _remove_step_number(recipe, number)
    if len(recipe.steps) < before:
        display_success(f"Removed step {number} from '{recipe.name}'")


def _list(storage: RecipeRepository) -> None:
    _show_list(storage.list_recipes())


def _view(storage: RecipeRepository) -> None:
    display_recipe_details(_pick_recipe(storage))


def _view_formatted(storage: RecipeRepository) -> None:
    display_formatted_recipe(_pick_recipe(storage))


MENU: Dict[str, Tuple[str, Optional[Callable[[RecipeRepository], None]]]] = {
    "1": ("Create a recipe", _create),
    "2": ("Add an ingredient", _add_ingredient),
    "3": ("Add a step", _add_step),
    "4": ("Remove a step", _remove_step),
    "5": ("List recipes", _list),
    "6": ("View a recipe", _view),
    "7": ("View a formatted recipe", _view_formatted),
    "0": ("Quit", None),
}


@recipes_cli.command("session")
def session() -> None:
    """Work on recipes from a menu until you quit."""

    storage = _storage()
    display_info("Recipes are kept in memory until you quit.")
    while True:
        click.echo("")
        for key, (label, _) in MENU.items():
            click.echo(f"{key}. {label}")
        choice = click.prompt("Choose an option", type=click.Choice(list(MENU)), show_choices=False)
        label, action = MENU[choice]
        if action is None:
            display_info("Goodbye!")
            return
        current_app.logger.info("Session action: %s", label)
        action(storage)


def main() -> None:
    """Entry point of the ``recipebox`` script."""

    from . import create_app

    FlaskGroup(create_app=create_app, add_default_commands=False)()


__all__ = ["main", "recipes_cli"]
