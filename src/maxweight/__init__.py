# -*- coding: utf-8 -*-
"""
maxweight: choose the heaviest set of foods that fits a calorie budget.

Two solvers are provided for the 0/1 knapsack formulation:
  - dynamic_max_weight    : O(n*C) dynamic program over integer calories
  - exhaustive_max_weight : O(n*2^n) enumeration, the reference for small inputs
"""

from maxweight.business_objects import (
    Catalog,
    FoodItem,
    SchemaError,
    DatabaseIOError,
    MalformedDatabaseError,
    StateValidationError,
    PreconditionViolation,
)
from maxweight.planning import Policy, Selection
from maxweight.planning.filters import filter_food_vector
from maxweight.planning.solvers import dynamic_max_weight, exhaustive_max_weight
from maxweight.quality_metrics.core import sum_food_vector, compute_selection_metrics
from maxweight.utils.read_database import load_food_database

__all__ = [
    "Catalog",
    "FoodItem",
    "SchemaError",
    "DatabaseIOError",
    "MalformedDatabaseError",
    "StateValidationError",
    "PreconditionViolation",
    "Policy",
    "Selection",
    "filter_food_vector",
    "dynamic_max_weight",
    "exhaustive_max_weight",
    "sum_food_vector",
    "compute_selection_metrics",
    "load_food_database",
]
__version__ = "0.1.0"
