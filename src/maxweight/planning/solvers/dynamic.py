# -*- coding: utf-8 -*-
"""
Dynamic-programming solver (0/1 knapsack over integer calorie capacity).

Numeric contract:
  - The budget is rounded half up: C = floor(total_calories + 0.5).
  - Each item's calorie cost is truncated to an integer, both in the DP state
    and when walking back the remaining capacity. Fractional calories are lost.
  - Weights are summed as real numbers.

Table layout:
  - best[j]       : best total weight reachable with capacity j using the
                    items processed so far (one row, reused per item).
  - took[i][j]    : 1 if item i improved capacity j when it was processed.

Ties are never replaced (strict `>`), so earlier items win equal-weight choices.
Reconstruction starts from capacity C and walks items from last to first,
so the result lists the last-added item first.

Cost: O(n*C) time and space. Callers must keep the budget bounded.
"""

from __future__ import annotations
import math
from typing import List

from maxweight.business_objects.items import Catalog
from maxweight.planning.solution import Selection


def discretize_budget(total_calories: float) -> int:
    """Round half up to the integer capacity used by the DP table."""
    return int(math.floor(total_calories + 0.5))


def dynamic_max_weight(foods: Catalog, total_calories: float) -> Selection:
    """
    Compute the subset of `foods` of maximum total weight whose (truncated)
    calorie cost fits within `total_calories`.
    """
    capacity = discretize_budget(total_calories)
    if capacity < 0:
        return Selection(catalog=foods)

    costs = [int(food.calories) for food in foods]
    best: List[float] = [0.0] * (capacity + 1)
    took: List[bytearray] = []

    for food, cost in zip(foods, costs):
        row = bytearray(capacity + 1)
        for j in range(capacity, cost - 1, -1):
            candidate = best[j - cost] + food.weight
            if candidate > best[j]:
                best[j] = candidate
                row[j] = 1
        took.append(row)

    chosen: List[int] = []
    remaining = capacity
    for i in range(len(foods) - 1, -1, -1):
        if took[i][remaining]:
            chosen.append(i)
            remaining -= costs[i]

    return Selection(catalog=foods, indices=tuple(chosen))
