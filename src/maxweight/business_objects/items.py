# -*- coding: utf-8 -*-
"""
Food item model.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Sequence

from .errors import StateValidationError


@dataclass(frozen=True)
class FoodItem:
    """
    One food item available for purchase.

    Attributes
    ----------
    description : str
        Human-readable description, e.g. "spicy chicken breast". Must be non-empty.
    calories : float
        Caloric cost. Must be finite and > 0.
    weight : float
        Food weight in ounces. Expected to be >= 0; not enforced here,
        filter_food_vector is what drops irrelevant weights.
    """
    description: str
    calories: float
    weight: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.description:
            raise StateValidationError("FoodItem.description must be non-empty.")
        if not (self.calories > 0 and math.isfinite(self.calories)):
            raise StateValidationError(
                f"FoodItem[{self.description}] calories must be finite and > 0, got {self.calories}."
            )


# A catalog is any ordered, read-only sequence of items. Duplicates are allowed.
Catalog = Sequence[FoodItem]
