# -*- coding: utf-8 -*-
"""
Catalog filtering.

Used to:
  1) drop foods whose weight is irrelevant to the optimization (e.g. zero or negative);
  2) bound the input size of the exhaustive solver, which is exponential in it.
"""

from __future__ import annotations
from typing import List

from maxweight.business_objects.items import Catalog, FoodItem


def filter_food_vector(
    source: Catalog,
    min_weight: float,
    max_weight: float,
    total_size: int,
) -> List[FoodItem]:
    """
    Return, in source order, the first `total_size` items of `source` whose
    weight lies in [min_weight, max_weight] (inclusive).

    Items outside the range are skipped. `total_size <= 0` gives an empty list.
    """
    result: List[FoodItem] = []
    if total_size <= 0:
        return result

    for item in source:
        if min_weight <= item.weight <= max_weight:
            result.append(item)
            if len(result) == total_size:
                break
    return result
