# -*- coding: utf-8 -*-
"""
Exhaustive-search solver.

Enumerates every subset of the input through a bit mask (bit j selects item j)
and keeps the feasible subset with the greatest total weight. Exponential by
construction: it is the baseline the dynamic-programming solver is checked
against, and is only meant for small catalogs (see filter_food_vector).
"""

from __future__ import annotations
from typing import Tuple

from maxweight.business_objects.errors import PreconditionViolation
from maxweight.business_objects.items import Catalog
from maxweight.planning.solution import Selection

# Subsets are indexed by a 64-bit mask; inputs must stay below that width.
MAX_EXHAUSTIVE_ITEMS = 63


def exhaustive_max_weight(foods: Catalog, total_calorie: float) -> Selection:
    """
    Among all subsets of `foods` whose total calories are <= `total_calorie`,
    return the one with the greatest total weight.

    The empty subset (weight 0) is the starting best, and a candidate only
    replaces the best when strictly heavier, so the first subset seen wins ties.
    The budget is used as-is, without rounding.

    Raises
    ------
    PreconditionViolation
        If `foods` has 64 or more items.
    """
    n = len(foods)
    if n > MAX_EXHAUSTIVE_ITEMS:
        raise PreconditionViolation(
            f"exhaustive search needs fewer than {MAX_EXHAUSTIVE_ITEMS + 1} items, got {n}; "
            "filter the catalog first."
        )

    best_subset: Tuple[int, ...] = ()
    best_weight = 0.0

    for mask in range(1 << n):
        current_subset = []
        current_weight = 0.0
        current_calories = 0.0
        for j in range(n):
            if mask & (1 << j):
                current_subset.append(j)
                current_weight += foods[j].weight
                current_calories += foods[j].calories

        if current_calories <= total_calorie and current_weight > best_weight:
            best_weight = current_weight
            best_subset = tuple(current_subset)

    return Selection(catalog=foods, indices=best_subset)
