# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    SchemaError,
    DatabaseIOError,
    MalformedDatabaseError,
    StateValidationError,
    PreconditionViolation,
)
from .items import Catalog, FoodItem

__all__ = [
    # errors
    "SchemaError",
    "DatabaseIOError",
    "MalformedDatabaseError",
    "StateValidationError",
    "PreconditionViolation",
    # core models
    "Catalog",
    "FoodItem",
]
