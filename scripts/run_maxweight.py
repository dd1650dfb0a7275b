#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load the food database, filter it down, and run both solvers side by side.

This script does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_maxweight.py

Outputs under OUT_DIR:
  - dynamic_selection.csv     (items chosen by the dynamic program)
  - exhaustive_selection.csv  (items chosen by exhaustive search)
  - comparison.csv            (timing + totals per solver)
"""

from __future__ import annotations
import logging
import os
from typing import List

# ====== CONFIGURATION ======
DATABASE_PATH = "data/food.txt"
OUT_DIR = "reports/maxweight"

# Filter: keep the first MAX_ITEMS foods with MIN_WEIGHT <= weight <= MAX_WEIGHT.
# Exhaustive search is exponential; keep MAX_ITEMS small (well under 64).
MIN_WEIGHT = 1.0
MAX_WEIGHT = 10.0
MAX_ITEMS = 16

CALORIE_BUDGET = 2000.0
SOLVERS = ["dynamic", "exhaustive"]

LOG_LEVEL = logging.INFO
# ============================

from maxweight.business_objects.items import FoodItem
from maxweight.planning import Policy
from maxweight.planning.compare import compare_solvers
from maxweight.planning.filters import filter_food_vector
from maxweight.planning.tracker import Tracker, format_food_vector
from maxweight.utils.read_database import load_food_database


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    policy = Policy(
        calorie_budget=CALORIE_BUDGET,
        solvers=tuple(SOLVERS),
        min_weight=MIN_WEIGHT,
        max_weight=MAX_WEIGHT,
        max_items=MAX_ITEMS,
    )

    # Load and filter
    all_foods: List[FoodItem] = load_food_database(DATABASE_PATH)
    foods = filter_food_vector(all_foods, policy.min_weight, policy.max_weight, policy.max_items)

    print("\n=== Filtered catalog ===")
    print(format_food_vector(foods))

    # Solve
    tracker = Tracker(out_dir=OUT_DIR)
    runs = compare_solvers(foods, policy, tracker=tracker)

    for run in runs:
        print(f"\n=== {run.solver} ({run.elapsed_seconds:.6f} s) ===")
        print(format_food_vector(run.selection))

    print(f"\nArtifacts written under: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()
