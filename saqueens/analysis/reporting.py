"""CSV export utilities for experiment outputs (aggregates and raw runs).

These helpers materialize a concise per-N summary as well as full per-run raw
data for downstream analysis or spreadsheet inspection.
"""
from __future__ import annotations

import csv
import os
from typing import Any, List, Optional

from . import settings
from .stats import METRICS, ExperimentResults, SARecord


RAW_COLUMNS = list(SARecord.__annotations__)


def build_suffix() -> str:
    """Build an optional filename suffix from ``RUN_TAG`` and ``RUN_ID``.

    Returns an empty string if no suffixing is configured.
    """
    parts: List[str] = []
    run_tag = getattr(settings, "RUN_TAG", None)
    if run_tag:
        parts.append(str(run_tag))
    if getattr(settings, "DATE_IN_FILENAMES", False):
        run_id = getattr(settings, "RUN_ID", None)
        if run_id:
            parts.append(str(run_id))
    return ("_" + "_".join(parts)) if parts else ""


def _fmt(value: Optional[Any]) -> Any:
    return "" if value is None else value


def save_results_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write compact per-N aggregate metrics to CSV and return the path.

    Columns: run counters and rates, then ``<group>_<metric>_<stat>`` for the
    mean and median of every metric over all and over solved runs.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results_SA{build_suffix()}.csv")

    stat_columns = [
        (group, metric, stat)
        for group in ("all", "success")
        for metric in METRICS
        for stat in ("mean", "median")
    ]
    header = ["n", "total_runs", "successes", "failures", "success_rate", "failure_rate"]
    header += [f"{group}_{metric}_{stat}" for group, metric, stat in stat_columns]

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for N in N_values:
            entry = results.get(N, {})
            row = [
                N,
                entry.get("total_runs", 0),
                entry.get("successes", 0),
                entry.get("failures", 0),
                entry.get("success_rate", 0.0),
                entry.get("failure_rate", 0.0),
            ]
            for group, metric, stat in stat_columns:
                summary = entry.get(f"{group}_{metric}", {})
                row.append(_fmt(summary.get(stat)))
            writer.writerow(row)

    print(f"Saved aggregate CSV: {filename}")
    return filename


def save_raw_data_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write one CSV row per annealing run and return the path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"raw_data_SA{build_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=["run"] + RAW_COLUMNS)
        writer.writeheader()
        for N in N_values:
            for idx, record in enumerate(results.get(N, {}).get("raw_runs", [])):
                writer.writerow({"run": idx, **{key: _fmt(record[key]) for key in RAW_COLUMNS}})

    print(f"Saved raw-run CSV: {filename}")
    return filename
