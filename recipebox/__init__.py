import os
from typing import Any, Mapping, Optional

from flask import Flask

from .cli import recipes_cli
from .models import Ingredient, Recipe
from .storage import InMemoryRecipeStorage, RecipeRepository


def create_app(
    storage: Optional[RecipeRepository] = None,
    config: Optional[Mapping[str, Any]] = None,
) -> Flask:
    """Create and configure the Flask application.

    Parameters
    ----------
    storage:
        Optional recipe repository. When ``None`` the application keeps its
        recipes in an :class:`InMemoryRecipeStorage` for the life of the process.
    config:
        Optional settings applied over the values read from the environment.
    """

    app = Flask(__name__)
    app.config.setdefault("RECIPE_TABLE_FORMAT", os.environ.get("RECIPES_TABLE_FORMAT", "grid"))
    app.config.setdefault("RECIPE_LOG_LEVEL", os.environ.get("RECIPES_LOG_LEVEL", "WARNING"))
    if config:
        app.config.update(config)

    # app.logger is the "recipebox" logger, so module loggers inherit its level.
    app.logger.setLevel(str(app.config["RECIPE_LOG_LEVEL"]).upper())

    if storage is None:
        storage = InMemoryRecipeStorage()
    app.config["RECIPE_STORAGE"] = storage

    app.cli.add_command(recipes_cli)
    return app


__all__ = ["create_app", "Ingredient", "Recipe"]
