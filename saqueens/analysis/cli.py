"""Command-line interface and high-level pipelines for saqueens.

Two entry points share one parser:

- ``saqueens N`` solves a single N x N board, prints it and exits with 0 when
  solved or 1 when the cooling schedule ran out.
- ``saqueens --experiments`` loads the configuration, runs batches of
  independent solvers per board size (sequentially or on a process pool) and
  writes CSV reports and charts.

I/O, argument parsing and progress reporting live here so that the core
modules remain easy to test programmatically.
"""
from __future__ import annotations

import argparse
import tempfile
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from . import settings
from .experiments import run_experiments, run_experiments_parallel
from .plots import plot_and_save
from .reporting import save_raw_data_to_csv, save_results_to_csv
from .stats import ExperimentResults
from config_manager import ConfigManager
from saqueens.randomness import default_random_source
from saqueens.rendering import render_board
from saqueens.solver import Solver
from saqueens.utils import is_valid_solution


DEFAULT_CONFIG = "config.json"


# ------------- Utils --------------------------------------------------------

def _as_int(value, name: str) -> int:
    # bool is an int subclass but never a meaningful count or size
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and copy its values into ``settings`` in place.

    Malformed values (``null``, strings, nested objects) raise ``ValueError``.
    """
    config_mgr = ConfigManager(config_path)

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        raw_n_values = experiment_settings.get("N_values", settings.N_VALUES)
        if not isinstance(raw_n_values, list):
            raise ValueError(f"N_values must be a non-empty list of positive integers, got {raw_n_values!r}")
        n_values = [_as_int(n, "N_values entry") for n in raw_n_values]
        if not n_values or any(n < 1 for n in n_values):
            raise ValueError(f"N_values must be a non-empty list of positive integers, got {n_values}")
        settings.N_VALUES = n_values
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)
        seed = experiment_settings.get("base_seed", settings.BASE_SEED)
        settings.BASE_SEED = None if seed is None else _as_int(seed, "base_seed")

    execution_settings = config_mgr.get_execution_settings()
    settings.set_run_parameters(
        runs_sa=_as_int(experiment_settings.get("runs_sa", settings.RUNS_SA), "runs_sa"),
        num_processes=_as_int(execution_settings.get("num_processes", settings.NUM_PROCESSES), "num_processes"),
    )

    output_settings = config_mgr.get_output_settings()
    if output_settings:
        settings.DATE_IN_FILENAMES = bool(output_settings.get("date_in_filenames", settings.DATE_IN_FILENAMES))
        settings.RUN_TAG = output_settings.get("run_tag", settings.RUN_TAG)

    return config_mgr


def solve_board(size: int, seed: Optional[int] = None, quiet: bool = False) -> bool:
    """Solve one board, print it unless ``quiet``, and return the outcome."""
    solver = Solver(size, rng=default_random_source(seed))
    start = perf_counter()
    solved = solver.solve()
    elapsed = perf_counter() - start
    if not quiet:
        print(render_board(solver.board), end="")
        outcome = "solved" if solved else "exhausted the cooling schedule"
        print(f"N={size}: {outcome} after {solver.iteration} iterations ({elapsed:.4f}s)")
    return solved


# ------------- Pipeline -----------------------------------------------------

def run_pipeline(mode: str, validate: bool = False, plots: bool = True) -> ExperimentResults:
    """Run the experiment batch for ``settings.N_VALUES`` and write all outputs."""
    N_values = list(settings.N_VALUES)
    print(f"Running {mode} experiments for N = {N_values}")

    if mode == "sequential":
        results = run_experiments(
            N_values,
            settings.RUNS_SA,
            base_seed=settings.BASE_SEED,
            progress_label="SA experiments",
            validate=validate,
        )
    elif mode == "parallel":
        results = run_experiments_parallel(
            N_values,
            settings.RUNS_SA,
            base_seed=settings.BASE_SEED,
            num_processes=settings.NUM_PROCESSES,
            progress_label="SA experiments",
            validate=validate,
        )
    else:
        raise ValueError(f"Unknown pipeline mode: {mode}")

    save_results_to_csv(results, N_values, settings.OUT_DIR)
    save_raw_data_to_csv(results, N_values, settings.OUT_DIR)
    if plots:
        plot_and_save(results, N_values, settings.OUT_DIR)
    return results


def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test.

    Verifies that:
    - A seeded N=8 solver reaches a board that passes the exhaustive check.
    - N=3 ends with an explicit failure once the schedule is exhausted.
    - The experiment pipeline produces a non-empty CSV in a temporary folder.
    """
    print("Running quick regression tests...")

    solver = Solver(8, rng=default_random_source(42))
    if not solver.solve() or not is_valid_solution(solver.board):
        raise AssertionError(f"Simulated Annealing did not solve N=8 with seed 42: {solver.board!r}")
    print(f"  Simulated Annealing: N=8 solved in {solver.iteration} iterations")

    solver = Solver(3, rng=default_random_source(42))
    if solver.solve():
        raise AssertionError("Simulated Annealing reported a solution for N=3.")
    print(f"  Simulated Annealing: N=3 exhausted after {solver.iteration} iterations")

    results = run_experiments([4, 5], runs=3, base_seed=42, progress_label="Quick regression experiments", validate=True)

    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(save_results_to_csv(results, [4, 5], tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Results CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Solve N-Queens by simulated annealing and run experiment pipelines.")
    parser.add_argument("size", nargs="?", type=int, help="Board size N to solve (exit code 0 when solved, 1 otherwise).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a single solve (default: unseeded).")
    parser.add_argument("--quiet", "-q", action="store_true", help="Do not print the board for a single solve.")
    parser.add_argument("--experiments", action="store_true", help="Run the experiment pipeline instead of a single solve.")
    parser.add_argument(
        "--mode",
        choices=["sequential", "parallel"],
        default="parallel",
        help="Execution mode for --experiments (default: parallel).",
    )
    parser.add_argument("--config", default=None, help=f"Path to configuration file (default: {DEFAULT_CONFIG} when present).")
    parser.add_argument("--runs", type=int, default=None, help="Override runs per N from the configuration.")
    parser.add_argument("--no-plots", action="store_true", help="Skip chart generation.")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    parser.add_argument("--validate", action="store_true", help="Re-check every reported solution (extra assertions).")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    if not args.experiments:
        if args.size is None:
            parser.error("a board size N is required unless --experiments or --quick-test is given")
        try:
            solved = solve_board(args.size, seed=args.seed, quiet=args.quiet)
        except ValueError as exc:
            print(f"Invalid board size: {exc}")
            raise SystemExit(1) from exc
        raise SystemExit(0 if solved else 1)

    config_path = args.config
    if config_path is None and Path(DEFAULT_CONFIG).exists():
        config_path = DEFAULT_CONFIG

    try:
        if config_path is not None:
            apply_configuration(config_path)
        else:
            print("No configuration file found; using built-in settings.")
        if args.runs is not None:
            settings.set_run_parameters(runs_sa=args.runs)
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    try:
        run_pipeline(args.mode, validate=args.validate, plots=not args.no_plots)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user. Cleaning up workers...")
        raise SystemExit(130) from None
    except (ValueError, AssertionError) as exc:
        print(f"Execution error: {exc}")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
