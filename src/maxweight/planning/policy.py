# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for a maxweight run.

Filtering (applied before solving):
  - min_weight, max_weight: inclusive weight range an item must fall in
  - max_items: keep only the first max_items matching items

Solving:
  - calorie_budget: maximum total calories of a selection
  - solvers: names of the solvers to run, in order; keys of planning.solvers.SOLVERS
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from maxweight.business_objects.errors import StateValidationError
from maxweight.planning.solvers import SOLVERS
from maxweight.planning.solvers.exhaustive import MAX_EXHAUSTIVE_ITEMS


@dataclass(frozen=True)
class Policy:
    """
    Run knobs (pure data holder).

    Attributes
    ----------
    # Solving
    calorie_budget : float
        Calorie budget handed to every solver. Must be >= 0.
    solvers : tuple[str, ...]
        Solver names, e.g. ("dynamic", "exhaustive").

    # Filtering
    min_weight : float
    max_weight : float
        Inclusive weight range; min_weight <= max_weight.
    max_items : int
        Cap on the filtered catalog size. Must be <= MAX_EXHAUSTIVE_ITEMS when "exhaustive" runs.
    """
    # Solving
    calorie_budget: float = 2000.0
    solvers: Tuple[str, ...] = ("dynamic", "exhaustive")

    # Filtering
    min_weight: float = 0.0
    max_weight: float = float("inf")
    max_items: int = 20

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.calorie_budget < 0:
            raise StateValidationError(f"Policy.calorie_budget must be >= 0, got {self.calorie_budget}.")
        if self.min_weight > self.max_weight:
            raise StateValidationError(
                f"Policy.min_weight ({self.min_weight}) must be <= max_weight ({self.max_weight})."
            )
        unknown = [name for name in self.solvers if name not in SOLVERS]
        if unknown:
            raise StateValidationError(
                f"Unknown solver(s) {unknown}; allowed: {sorted(SOLVERS)}."
            )
        if "exhaustive" in self.solvers and self.max_items > MAX_EXHAUSTIVE_ITEMS:
            raise StateValidationError(
                f"Policy.max_items must be <= {MAX_EXHAUSTIVE_ITEMS} with the exhaustive solver, "
                f"got {self.max_items}."
            )
