"""Visualization utilities for analysis outputs.

Overview
--------
Plotting helpers that generate PNG charts from the aggregated experiment
results produced by the analysis pipeline. Every public function writes its
files into ``out_dir`` (created if missing) and returns the written paths.

Chart map
---------
- 01_success_rate_vs_N.png: Success rate vs N
    - What: Reliability of the annealing schedule as the board grows.
    - X: N (board size). Y: successes / total_runs in [0, 1].
- 02_iterations_vs_N.png: Iterations vs N (log scale)
    - What: Hardware-independent effort: mean iterations of solved runs, with
      the cooling-schedule bound ``10**N`` for reference.
- 03_time_vs_N.png: Mean wall-clock time of solved runs vs N (log scale)
    - What: Practical cost; error bars are one population standard deviation.
- 04_iterations_boxplot.png: Distribution of iterations per N (solved runs)
    - What: Spread and outliers of the logical cost across runs (seaborn).
"""
from __future__ import annotations

import os
from typing import List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
import seaborn as sns  # noqa: E402

from .reporting import RAW_COLUMNS, build_suffix  # noqa: E402
from .stats import ExperimentResults  # noqa: E402


def _save(out_dir: str, stem: str, description: str) -> str:
    fname = os.path.join(out_dir, f"{stem}{build_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved {description}: {fname}")
    return fname


def _stat(results: ExperimentResults, N: int, key: str, stat: str, missing: float) -> float:
    """One summary value for size ``N``; ``missing`` only when it is absent or None."""
    value = results.get(N, {}).get(key, {}).get(stat)
    return missing if value is None else value


def runs_dataframe(results: ExperimentResults, N_values: List[int]) -> pd.DataFrame:
    """Flatten the raw runs of every N into one DataFrame (one row per run)."""
    rows = [record for N in N_values for record in results.get(N, {}).get("raw_runs", [])]
    return pd.DataFrame(rows, columns=RAW_COLUMNS)


def plot_success_rate(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    os.makedirs(out_dir, exist_ok=True)
    success = [results.get(N, {}).get("success_rate", 0.0) for N in N_values]

    plt.figure(figsize=(10, 6))
    plt.plot(N_values, success, marker="s", linewidth=2, markersize=8, label="Simulated Annealing")
    for n, rate in zip(N_values, success):
        plt.annotate(f"{rate:.2f}", (n, rate), textcoords="offset points", xytext=(0, 8), ha="center", fontsize=9)
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Success rate", fontsize=12)
    plt.title("Success Rate vs Problem Size", fontsize=14)
    plt.ylim(-0.05, 1.1)
    plt.xticks(N_values)
    plt.grid(True, alpha=0.7)
    plt.legend(fontsize=11)
    return _save(out_dir, "01_success_rate_vs_N", "success-rate chart")


def plot_iterations(results: ExperimentResults, N_values: List[int], out_dir: str) -> List[str]:
    """Chart mean iterations and mean time of solved runs against N."""
    os.makedirs(out_dir, exist_ok=True)
    iterations = np.array([_stat(results, N, "success_iterations", "mean", np.nan) for N in N_values], dtype=float)
    times = np.array([_stat(results, N, "success_time", "mean", np.nan) for N in N_values], dtype=float)
    time_std = np.array([_stat(results, N, "success_time", "std", 0.0) for N in N_values], dtype=float)
    bound = np.array([10.0 ** N for N in N_values])
    paths: List[str] = []

    plt.figure(figsize=(10, 6))
    plt.semilogy(N_values, iterations, marker="s", linewidth=2, markersize=8, label="SA: mean iterations (solved)")
    plt.semilogy(N_values, bound, linestyle="--", color="gray", label="Cooling bound 10^N")
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Iterations (log scale)", fontsize=12)
    plt.title("Logical Cost vs Problem Size", fontsize=14)
    plt.xticks(N_values)
    plt.grid(True, alpha=0.7)
    plt.legend(fontsize=11)
    paths.append(_save(out_dir, "02_iterations_vs_N", "iterations chart"))

    plt.figure(figsize=(10, 6))
    plt.errorbar(N_values, np.maximum(times, 1e-6), yerr=time_std, marker="s", linewidth=2, capsize=4,
                 label="SA: mean time (solved)")
    plt.yscale("log")
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Time [s] (log scale)", fontsize=12)
    plt.title("Execution Time vs Problem Size", fontsize=14)
    plt.xticks(N_values)
    plt.grid(True, alpha=0.7)
    plt.legend(fontsize=11)
    paths.append(_save(out_dir, "03_time_vs_N", "execution-time chart"))
    return paths


def plot_iteration_distribution(results: ExperimentResults, N_values: List[int], out_dir: str) -> List[str]:
    """Boxplot of iterations per N over solved runs; empty when nothing was solved."""
    os.makedirs(out_dir, exist_ok=True)
    df = runs_dataframe(results, N_values)
    solved = df[df["success"].astype(bool)]
    if solved.empty:
        print("No solved runs available for the iteration distribution")
        return []

    plt.figure(figsize=(12, 6))
    ax = sns.boxplot(data=solved, x="size", y="iterations", color="#ff7f0e")
    ax.set_yscale("log")
    ax.set_xlabel("N (board size)", fontsize=12)
    ax.set_ylabel("Iterations (log scale)", fontsize=12)
    ax.set_title("Distribution of Iterations per Board Size\n(solved runs only)", fontsize=14)
    ax.grid(True, axis="y", alpha=0.5)
    return [_save(out_dir, "04_iterations_boxplot", "iteration boxplot")]


def plot_and_save(results: ExperimentResults, N_values: List[int], out_dir: str) -> List[str]:
    """Generate every chart in the chart map and return the written paths."""
    paths = [plot_success_rate(results, N_values, out_dir)]
    paths += plot_iterations(results, N_values, out_dir)
    paths += plot_iteration_distribution(results, N_values, out_dir)
    return paths
