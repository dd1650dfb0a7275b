# -*- coding: utf-8 -*-
"""
Side-by-side solver runs.

Pipeline for one call:
  1) run each solver named in Policy.solvers on the same catalog and budget,
     timing it with time.perf_counter
  2) score every selection with quality_metrics.compute_selection_metrics
  3) warn if the solvers disagree on the best total weight
  4) if a Tracker is given, write <solver>_selection.csv and comparison.csv
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from maxweight.business_objects.items import Catalog
from maxweight.planning.policy import Policy
from maxweight.planning.solution import Selection
from maxweight.planning.solvers import SOLVERS
from maxweight.planning.tracker import Tracker
from maxweight.quality_metrics.core import compute_selection_metrics

log = logging.getLogger(__name__)

# Tolerance when checking that solvers agree on the optimum
WEIGHT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class SolverRun:
    """
    Outcome of running one solver.

    Attributes
    ----------
    solver : str
        Solver name (key of SOLVERS).
    selection : Selection
        The chosen subset.
    elapsed_seconds : float
        Wall-clock time spent in the solver.
    metrics : dict[str, float]
        Output of compute_selection_metrics.
    """
    solver: str
    selection: Selection
    elapsed_seconds: float
    metrics: Dict[str, float]


def compare_solvers(
    foods: Catalog,
    policy: Policy,
    tracker: Optional[Tracker] = None,
) -> List[SolverRun]:
    """
    Run every solver in `policy.solvers` on `foods` with `policy.calorie_budget`.

    Returns
    -------
    List[SolverRun]
        One entry per solver, in policy order.
    """
    runs: List[SolverRun] = []
    for name in policy.solvers:
        solve = SOLVERS[name]
        start = time.perf_counter()
        selection = solve(foods, policy.calorie_budget)
        elapsed = time.perf_counter() - start

        metrics = compute_selection_metrics(selection, policy.calorie_budget)
        log.info(
            "%s: %d of %d items, %.4g calories, %.4g weight in %.6f s",
            name, len(selection), len(foods), metrics["TC"], metrics["TW"], elapsed,
        )
        runs.append(SolverRun(solver=name, selection=selection, elapsed_seconds=elapsed, metrics=metrics))

    if runs:
        weights = [run.metrics["TW"] for run in runs]
        if max(weights) - min(weights) > WEIGHT_TOLERANCE:
            log.warning(
                "Solvers disagree on total weight: %s",
                ", ".join(f"{run.solver}={run.metrics['TW']:.6g}" for run in runs),
            )

    if tracker is not None:
        for run in runs:
            tracker.write_selection_csv(run.selection, filename=f"{run.solver}_selection.csv")
        tracker.write_comparison_csv(runs)

    return runs
