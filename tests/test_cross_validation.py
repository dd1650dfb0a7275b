from __future__ import annotations

import random

import pytest

from maxweight.business_objects.items import FoodItem
from maxweight.planning.solvers.dynamic import dynamic_max_weight
from maxweight.planning.solvers.exhaustive import exhaustive_max_weight


def _random_catalog(rng: random.Random, n: int) -> list[FoodItem]:
    # Integer calories and quarter-ounce weights keep every sum exact.
    return [
        FoodItem(f"food{i}", rng.randint(1, 60), rng.randint(0, 40) / 4.0)
        for i in range(n)
    ]


@pytest.mark.parametrize("seed", range(25))
def test_dynamic_matches_exhaustive(seed):
    rng = random.Random(seed)
    foods = _random_catalog(rng, rng.randint(0, 11))
    budget = rng.randint(0, 200)

    dynamic = dynamic_max_weight(foods, budget)
    exhaustive = exhaustive_max_weight(foods, budget)

    assert dynamic.total_weight == exhaustive.total_weight
    assert dynamic.total_calories <= budget
    assert exhaustive.total_calories <= budget
    assert len(set(dynamic.indices)) == len(dynamic.indices)


def test_solutions_agree_on_example(snack_catalog):
    for budget in (0, 49, 50, 95, 145, 150, 200, 295, 1000):
        d = dynamic_max_weight(snack_catalog, budget)
        e = exhaustive_max_weight(snack_catalog, budget)
        assert d.total_weight == e.total_weight


@pytest.mark.parametrize("seed, n", [(101, 16), (202, 17)])
def test_dynamic_matches_exhaustive_on_larger_catalogs(seed, n):
    rng = random.Random(seed)
    foods = _random_catalog(rng, n)
    budget = rng.randint(100, 400)

    dynamic = dynamic_max_weight(foods, budget)
    exhaustive = exhaustive_max_weight(foods, budget)

    assert dynamic.total_weight == exhaustive.total_weight
    assert dynamic.total_calories <= budget
    assert exhaustive.total_calories <= budget
