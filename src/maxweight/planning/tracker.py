# -*- coding: utf-8 -*-
"""
Reporting: plain-text food vectors and CSV artifacts for solver runs.

Files produced (when Tracker is used):
  - <solver>_selection.csv (one row per selected item; write_selection_csv)
  - comparison.csv         (one row per solver run; write_comparison_csv)

Callers decide when to invoke these writers; compare_solvers calls them at the end.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass
from typing import Iterable, List, TYPE_CHECKING

from maxweight.business_objects.items import FoodItem
from maxweight.planning.solution import Selection
from maxweight.quality_metrics.core import sum_food_vector

if TYPE_CHECKING:
    from maxweight.planning.compare import SolverRun


def format_food_vector(foods: Iterable[FoodItem]) -> str:
    """
    Render each item of `foods`, followed by the grand totals.
    """
    foods = list(foods)
    lines = ["*** food Vector ***"]
    if not foods:
        lines.append("[empty food list]")
        return "\n".join(lines)

    for food in foods:
        lines.append(
            f"Ye olde {food.description} ==> calories = {food.calories:g}; "
            f"weight of {food.weight:g} ounces"
        )
    total_calories, total_weight = sum_food_vector(foods)
    lines.append(f"> Grand total calories: {total_calories:g}")
    lines.append(f"> Grand total weight: {total_weight:g} ounces")
    return "\n".join(lines)


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def write_selection_csv(
        self,
        selection: Selection,
        filename: str = "selection.csv",
    ) -> str:
        """
        Persist a solver's selection to CSV.

        Columns:
          order_index, catalog_index, description, calories, weight
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "catalog_index", "description", "calories", "weight"])
            for order_index, catalog_index in enumerate(selection.indices):
                food = selection.catalog[catalog_index]
                w.writerow([
                    order_index,
                    catalog_index,
                    food.description,
                    float(food.calories),
                    float(food.weight),
                ])
        return path

    def write_comparison_csv(
        self,
        runs: List["SolverRun"],
        filename: str = "comparison.csv",
    ) -> str:
        """
        One row per solver run.

        Columns:
          solver, elapsed_seconds, selected_items, total_calories, total_weight,
          calorie_utilization_pct
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "solver",
                "elapsed_seconds",
                "selected_items",
                "total_calories",
                "total_weight",
                "calorie_utilization_pct",
            ])
            for run in runs:
                w.writerow([
                    run.solver,
                    round(run.elapsed_seconds, 6),
                    int(run.metrics["Selected Items"]),
                    run.metrics["TC"],
                    run.metrics["TW"],
                    run.metrics["CU"],
                ])
        return path
