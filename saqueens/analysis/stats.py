"""Typed result shapes and statistics helpers for the analysis pipeline.

Defines ``TypedDict`` structures for experiment outputs and provides utilities
to summarize per-run annealing records by outcome (solved vs exhausted).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, TypedDict

import numpy as np


METRICS = ("iterations", "accepted", "time", "best_jeopardized", "final_jeopardized")


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class SARecord(TypedDict):
    size: int
    seed: Optional[int]
    success: bool
    iterations: int
    accepted: int
    time: float
    best_jeopardized: int
    final_jeopardized: int
    final_conflicts: int


class SAResultEntry(TypedDict, total=False):
    success_rate: float
    failure_rate: float
    total_runs: int
    successes: int
    failures: int
    success_iterations: StatsSummary
    success_accepted: StatsSummary
    success_time: StatsSummary
    success_best_jeopardized: StatsSummary
    success_final_jeopardized: StatsSummary
    failure_iterations: StatsSummary
    failure_accepted: StatsSummary
    failure_time: StatsSummary
    failure_best_jeopardized: StatsSummary
    failure_final_jeopardized: StatsSummary
    all_iterations: StatsSummary
    all_accepted: StatsSummary
    all_time: StatsSummary
    all_best_jeopardized: StatsSummary
    all_final_jeopardized: StatsSummary
    raw_runs: List[SARecord]


# Board size -> aggregated annealing results
ExperimentResults = Dict[int, SAResultEntry]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps expected. Values <= 0 are coerced to 1.
    label : str
        Short label printed in front of the progress counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: Sequence[float]) -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Returns
    -------
    StatsSummary
        count, mean, median, population std, min, max, 25th/75th percentiles
        (linear interpolation) and range. When ``values`` is empty every
        numeric field is ``None`` and ``count`` is 0 so CSV columns stay
        aligned.
    """
    if len(values) == 0:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    arr = np.asarray(values, dtype=float)
    q25, median, q75 = np.percentile(arr, [25, 50, 75])
    return {
        "count": int(arr.size),
        "mean": float(arr.mean()),
        "median": float(median),
        "std": float(arr.std()),
        "min": float(arr.min()),
        "max": float(arr.max()),
        "q25": float(q25),
        "q75": float(q75),
        "range": float(arr.max() - arr.min()),
    }


def compute_grouped_statistics(results_list: List[SARecord]) -> Dict[str, Any]:
    """Aggregate annealing records by outcome.

    Returns
    -------
    Dict[str, Any]
        Rates (``success_rate``, ``failure_rate``), counters (``total_runs``,
        ``successes``, ``failures``) and a ``StatsSummary`` for each metric in
        ``METRICS`` over all runs (``all_<metric>``), solved runs
        (``success_<metric>``) and exhausted runs (``failure_<metric>``).
        Groups without runs are omitted.
    """
    successes = [r for r in results_list if r["success"]]
    failures = [r for r in results_list if not r["success"]]
    total = len(results_list)

    stats: Dict[str, Any] = {
        "total_runs": total,
        "successes": len(successes),
        "failures": len(failures),
        "success_rate": len(successes) / total if total else 0.0,
        "failure_rate": len(failures) / total if total else 0.0,
    }

    for group, records in (("all", results_list), ("success", successes), ("failure", failures)):
        if not records:
            continue
        for metric in METRICS:
            stats[f"{group}_{metric}"] = compute_detailed_statistics([r[metric] for r in records])

    return stats
