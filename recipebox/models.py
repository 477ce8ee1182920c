from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Union

Number = Union[int, float]


@dataclass
class Ingredient:
    """A quantity of one ingredient used by a recipe."""

    name: str
    amount: Number
    unit: str


@dataclass
class Recipe:
    """Domain object representing a recipe being put together."""

    id: int
    name: str
    cooking_time: Number
    servings: Number = 4
    ingredients: List[Ingredient] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)
    date_created: Optional[date] = None


__all__ = ["Ingredient", "Number", "Recipe"]
