# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to aggregate food vectors and score solver selections.
- No side effects
- No external dependencies

Public API:
  - sum_food_vector(foods) -> (total_calories, total_weight)
  - compute_selection_metrics(selection, budget) -> Dict[str, float]
"""

from __future__ import annotations
from typing import Dict, Iterable, Tuple

from maxweight.business_objects.items import FoodItem
from maxweight.planning.solution import Selection


def sum_food_vector(foods: Iterable[FoodItem]) -> Tuple[float, float]:
    """
    Total calories and total weight of `foods` (a catalog or a Selection).
    Empty input gives (0.0, 0.0).
    """
    total_calories = 0.0
    total_weight = 0.0
    for food in foods:
        total_calories += food.calories
        total_weight += food.weight
    return total_calories, total_weight


def compute_selection_metrics(selection: Selection, budget: float) -> Dict[str, float]:
    """
    Returns:
      {
        "TW": ...,               # total weight
        "TC": ...,               # total calories
        "CU": ...,               # calorie utilization, percent of budget (0..100)
        "WPC": ...,              # weight per calorie
        "SR": ...,               # selection rate, percent of catalog (0..100)
        "Selected Items": ...,
        "Total Items": ...
      }
    """
    TC, TW = sum_food_vector(selection)
    selected = len(selection)
    total_items = len(selection.catalog)

    CU = 0.0 if budget <= 0.0 else (TC / budget) * 100.0
    WPC = 0.0 if TC == 0.0 else TW / TC
    SR = 0.0 if total_items == 0 else (selected / total_items) * 100.0

    return {
        "TW": TW,
        "TC": TC,
        "CU": CU,
        "WPC": WPC,
        "SR": SR,
        "Selected Items": float(selected),
        "Total Items": float(total_items),
    }
