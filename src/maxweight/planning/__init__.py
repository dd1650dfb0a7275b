# -*- coding: utf-8 -*-
"""
Planning layer public API.

This module exposes the core planning-time data contracts:
  - Selection (solver output)
  - Policy configuration

Solvers, filtering, comparison and the tracker are intentionally not exported
here to avoid cluttering the namespace. They should be imported explicitly
when needed (or through the top-level maxweight package).
"""

from .solution import Selection
from .policy import Policy

__all__ = [
    "Selection",
    "Policy",
]
