"""Terminal output for recipes and status notices."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import click
from tabulate import tabulate

from .formatting import NO_INGREDIENTS, NO_STEPS, format_quantity, format_recipe
from .models import Recipe

TABLE_HEADERS = ("ID", "Name", "Cooking Time (min)", "Servings")
NOT_FOUND = "Recipe not found"


def display_recipe_list(recipes: Sequence[Recipe], tablefmt: str = "grid") -> None:
    """Print one table row per recipe, in the order given."""

    if not recipes:
        click.secho("No recipes found", fg="yellow")
        return

    headers = [click.style(header, fg="cyan") for header in TABLE_HEADERS]
    rows = [
        [
            recipe.id,
            recipe.name,
            format_quantity(recipe.cooking_time),
            format_quantity(recipe.servings),
        ]
        for recipe in recipes
    ]
    click.echo(
        tabulate(
            rows,
            headers=headers,
            tablefmt=tablefmt,
            disable_numparse=True,
        )
    )


def display_recipe_details(recipe: Optional[Recipe]) -> None:
    if recipe is None:
        click.secho(NOT_FOUND, fg="red")
        return

    click.echo("\n" + click.style(f"Recipe: {recipe.name}", fg="cyan", bold=True))
    click.secho(f"ID: {recipe.id}", fg="green")
    click.secho(f"Cooking Time: {format_quantity(recipe.cooking_time)} minutes", fg="green")
    click.secho(f"Servings: {format_quantity(recipe.servings)}", fg="green")

    click.echo("\n" + click.style("Ingredients:", fg="cyan", bold=True))
    if not recipe.ingredients:
        click.secho(NO_INGREDIENTS, fg="yellow")
    for index, ingredient in enumerate(recipe.ingredients, start=1):
        click.secho(
            f"{index}. {format_quantity(ingredient.amount)} {ingredient.unit} of {ingredient.name}",
            fg="green",
        )

    click.echo("\n" + click.style("Steps:", fg="cyan", bold=True))
    if not recipe.steps:
        click.secho(NO_STEPS, fg="yellow")
    for index, step in enumerate(recipe.steps, start=1):
        click.secho(f"{index}. {step}", fg="green")

    click.echo("")


def display_formatted_recipe(
    recipe: Optional[Recipe],
    formatter: Callable[[Recipe], str] = format_recipe,
) -> None:
    if recipe is None:
        click.secho(NOT_FOUND, fg="red")
        return

    click.echo("\n" + formatter(recipe) + "\n")


def display_success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def display_error(message: str) -> None:
    click.secho(f"✗ {message}", fg="red")


def display_warning(message: str) -> None:
    click.secho(f"⚠ {message}", fg="yellow")


def display_info(message: str) -> None:
    click.secho(f"ℹ {message}", fg="blue")


__all__ = [
    "display_error",
    "display_formatted_recipe",
    "display_info",
    "display_recipe_details",
    "display_recipe_list",
    "display_success",
    "display_warning",
]
