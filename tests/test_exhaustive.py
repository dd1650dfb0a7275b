from __future__ import annotations

import pytest

from maxweight.business_objects.errors import PreconditionViolation, StateValidationError
from maxweight.business_objects.items import FoodItem
from maxweight.planning.solvers.exhaustive import exhaustive_max_weight


def test_example_picks_single_heaviest_fit(snack_catalog):
    selection = exhaustive_max_weight(snack_catalog, 150)

    assert selection.descriptions() == ["bar"]
    assert selection.total_weight == 6.0


def test_result_is_in_catalog_order():
    foods = [FoodItem("a", 10, 1.0), FoodItem("b", 20, 2.0), FoodItem("c", 30, 3.0)]

    selection = exhaustive_max_weight(foods, 40)

    assert selection.indices == (0, 2)


def test_empty_catalog_zero_and_negative_budget(snack_catalog):
    assert len(exhaustive_max_weight([], 100)) == 0
    assert len(exhaustive_max_weight(snack_catalog, 0)) == 0
    assert len(exhaustive_max_weight(snack_catalog, -1)) == 0


def test_budget_is_not_rounded():
    foods = [FoodItem("bun", 10, 2.0)]
    assert len(exhaustive_max_weight(foods, 9.9)) == 0
    assert exhaustive_max_weight(foods, 10).indices == (0,)


def test_ties_keep_first_subset_seen():
    foods = [FoodItem("first", 10, 5.0), FoodItem("second", 10, 5.0)]
    assert exhaustive_max_weight(foods, 10).descriptions() == ["first"]


def test_zero_weight_items_are_never_chosen():
    foods = [FoodItem("water", 1, 0.0)]
    assert len(exhaustive_max_weight(foods, 100)) == 0


def test_sixty_four_items_is_rejected():
    foods = [FoodItem(f"crumb{i}", 1, 1.0) for i in range(64)]

    with pytest.raises(PreconditionViolation):
        exhaustive_max_weight(foods, 10)

    assert issubclass(PreconditionViolation, StateValidationError)


def test_calls_are_idempotent(snack_catalog):
    first = exhaustive_max_weight(snack_catalog, 200)
    second = exhaustive_max_weight(snack_catalog, 200)
    assert first.indices == second.indices
