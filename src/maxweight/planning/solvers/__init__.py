# -*- coding: utf-8 -*-
"""
Solver registry.

Each solver takes (foods, budget) and returns a Selection.
"""

from __future__ import annotations
from typing import Callable, Dict

from maxweight.business_objects.items import Catalog
from maxweight.planning.solution import Selection
from .dynamic import dynamic_max_weight
from .exhaustive import exhaustive_max_weight

SolverFn = Callable[[Catalog, float], Selection]

SOLVERS: Dict[str, SolverFn] = {
    "dynamic": dynamic_max_weight,
    "exhaustive": exhaustive_max_weight,
}

__all__ = ["SOLVERS", "SolverFn", "dynamic_max_weight", "exhaustive_max_weight"]
