# -*- coding: utf-8 -*-
"""
Selection model for solver results.

A Selection never owns FoodItems: it keeps the catalog it was computed
from and a tuple of indices into it. It must not outlive that catalog's
contents being stable (catalogs are read-only after loading).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from maxweight.business_objects.items import Catalog, FoodItem


@dataclass(frozen=True)
class Selection:
    """
    The subset of a catalog chosen by a solver.

    Attributes
    ----------
    catalog : Sequence[FoodItem]
        The catalog the indices refer to.
    indices : tuple[int, ...]
        Positions of the chosen items in `catalog`, in solver output order.

    Selections compare by value but are unhashable: the catalog is usually a list.
    """
    catalog: Catalog = field(repr=False)
    indices: Tuple[int, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    @property
    def items(self) -> List[FoodItem]:
        return [self.catalog[i] for i in self.indices]

    @property
    def total_calories(self) -> float:
        return sum((self.catalog[i].calories for i in self.indices), 0.0)

    @property
    def total_weight(self) -> float:
        return sum((self.catalog[i].weight for i in self.indices), 0.0)

    def descriptions(self) -> List[str]:
        return [self.catalog[i].description for i in self.indices]

    def __iter__(self) -> Iterator[FoodItem]:
        for i in self.indices:
            yield self.catalog[i]

    def __len__(self) -> int:
        return len(self.indices)
