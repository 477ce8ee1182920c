from __future__ import annotations

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from recipebox.display import (
    display_error,
    display_formatted_recipe,
    display_info,
    display_recipe_details,
    display_recipe_list,
    display_success,
    display_warning,
)
from recipebox.formatting import format_recipe
from recipebox.recipes import add_ingredient, add_step, create_recipe


def test_list_of_no_recipes(capsys):
    display_recipe_list([])

    assert capsys.readouterr().out == "No recipes found\n"


def test_list_shows_one_row_per_recipe_in_order(capsys):
    cake = create_recipe("Chocolate Cake", 45, 8)
    salad = create_recipe("Summer Salad", 10.0)

    display_recipe_list([cake, salad])

    out = capsys.readouterr().out
    header = next(line for line in out.splitlines() if "Name" in line)
    for column in ("ID", "Name", "Cooking Time (min)", "Servings"):
        assert column in header
    rows = [line for line in out.splitlines() if str(cake.id) in line or str(salad.id) in line]
    assert len(rows) == 2
    assert "Chocolate Cake" in rows[0] and "45" in rows[0] and "8" in rows[0]
    assert "Summer Salad" in rows[1] and "10" in rows[1] and "10.0" not in rows[1]


def test_list_respects_table_format(capsys):
    display_recipe_list([create_recipe("Soup", 30, 2)], tablefmt="plain")

    out = capsys.readouterr().out
    assert "+" not in out
    assert "Soup" in out


def test_details_of_missing_recipe(capsys):
    display_recipe_details(None)

    assert capsys.readouterr().out == "Recipe not found\n"


def test_details_of_empty_recipe(capsys):
    recipe = create_recipe("Water", 1)

    display_recipe_details(recipe)

    assert capsys.readouterr().out == (
        "\nRecipe: Water\n"
        f"ID: {recipe.id}\n"
        "Cooking Time: 1 minutes\n"
        "Servings: 4\n"
        "\nIngredients:\n"
        "No ingredients added yet\n"
        "\nSteps:\n"
        "No steps added yet\n"
        "\n"
    )


def test_details_enumerates_ingredients_and_steps(capsys):
    recipe = create_recipe("Pancakes", 20, 6)
    add_ingredient(recipe, "Flour", 2, "cups")
    add_ingredient(recipe, "Milk", 1.5, "cups")
    add_step(recipe, "Mix")
    add_step(recipe, "Cook")

    display_recipe_details(recipe)

    out = capsys.readouterr().out
    assert "Ingredients:\n1. 2 cups of Flour\n2. 1.5 cups of Milk\n" in out
    assert "Steps:\n1. Mix\n2. Cook\n" in out
    assert "No steps added yet" not in out


def test_formatted_recipe_is_wrapped_in_blank_lines(capsys):
    recipe = create_recipe("Tea", 4, 1)

    display_formatted_recipe(recipe)

    assert capsys.readouterr().out == "\n" + format_recipe(recipe) + "\n\n"


def test_formatted_recipe_uses_given_formatter(capsys):
    display_formatted_recipe(create_recipe("Tea", 4, 1), lambda recipe: f"<{recipe.name}>")

    assert capsys.readouterr().out == "\n<Tea>\n\n"


def test_formatted_missing_recipe(capsys):
    display_formatted_recipe(None)

    assert capsys.readouterr().out == "Recipe not found\n"


def test_status_notices_have_distinct_markers(capsys):
    display_success("Saved")
    display_error("Broken")
    display_warning("Careful")
    display_info("Note")

    assert capsys.readouterr().out.splitlines() == [
        "✓ Saved",
        "✗ Broken",
        "⚠ Careful",
        "ℹ Note",
    ]
