from __future__ import annotations

import csv
import logging
import os

from maxweight.business_objects.items import FoodItem
from maxweight.planning.compare import compare_solvers
from maxweight.planning.policy import Policy
from maxweight.planning.tracker import Tracker


def test_compare_runs_solvers_in_policy_order(snack_catalog):
    runs = compare_solvers(snack_catalog, Policy(calorie_budget=200))

    assert [r.solver for r in runs] == ["dynamic", "exhaustive"]
    assert all(r.metrics["TW"] == 7.5 for r in runs)
    assert all(r.elapsed_seconds >= 0.0 for r in runs)


def test_compare_writes_artifacts(snack_catalog, tmp_path):
    tracker = Tracker(out_dir=str(tmp_path / "out"))

    compare_solvers(snack_catalog, Policy(calorie_budget=150), tracker=tracker)

    out = tmp_path / "out"
    assert sorted(os.listdir(out)) == [
        "comparison.csv",
        "dynamic_selection.csv",
        "exhaustive_selection.csv",
    ]
    with open(out / "comparison.csv", newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["solver"] for r in rows] == ["dynamic", "exhaustive"]
    assert [float(r["total_weight"]) for r in rows] == [6.0, 6.0]
    assert [int(r["selected_items"]) for r in rows] == [1, 1]


def test_compare_warns_when_solvers_disagree(caplog):
    # Truncated calorie costs let the dynamic program overfill the budget.
    foods = [FoodItem(f"snack{i}", 10.9, 1.0) for i in range(3)]

    with caplog.at_level(logging.WARNING, logger="maxweight.planning.compare"):
        runs = compare_solvers(foods, Policy(calorie_budget=30))

    assert [r.metrics["TW"] for r in runs] == [3.0, 2.0]
    assert "disagree" in caplog.text


def test_compare_single_solver(snack_catalog):
    runs = compare_solvers(snack_catalog, Policy(calorie_budget=95, solvers=("exhaustive",)))
    assert len(runs) == 1
    assert runs[0].selection.descriptions() == ["apple"]
