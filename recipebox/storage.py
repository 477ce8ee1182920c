from __future__ import annotations

import logging
from typing import Iterable, List, Protocol

from .models import Number, Recipe
from .recipes import create_recipe

logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Protocol describing the behaviour required by the command line layer."""

    def list_recipes(self) -> Iterable[Recipe]:
        """Return an iterable of stored recipes in the order they were added."""

    def get_recipe(self, recipe_id: int) -> Recipe:
        """Return a single recipe or raise :class:`KeyError` if missing."""

    def add_recipe(
        self,
        *,
        name: str,
        cooking_time: Number,
        servings: Number = 4,
    ) -> Recipe:
        """Create a new recipe, keep it and return it."""

    def save_recipe(self, recipe: Recipe) -> Recipe:
        """Keep a recipe built elsewhere and return it."""


class InMemoryRecipeStorage(RecipeRepository):
    """Recipes kept for the lifetime of the process."""

    def __init__(self) -> None:
        self._recipes: List[Recipe] = []

    def list_recipes(self) -> List[Recipe]:
        return list(self._recipes)

    def get_recipe(self, recipe_id: int) -> Recipe:
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        raise KeyError(recipe_id)

    def add_recipe(
        self,
        *,
        name: str,
        cooking_time: Number,
        servings: Number = 4,
    ) -> Recipe:
        recipe = create_recipe(name, cooking_time, servings)
        self._recipes.append(recipe)
        logger.debug("Stored recipe %s, %d in total", recipe.id, len(self._recipes))
        return recipe

    def save_recipe(self, recipe: Recipe) -> Recipe:
        self._recipes.append(recipe)
        return recipe


__all__ = ["InMemoryRecipeStorage", "RecipeRepository"]
