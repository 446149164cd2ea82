"""Experiment runners for the annealing solver (sequential and parallel).

These routines execute repeatable batches of independent solver runs for a
set of board sizes and aggregate them per size. Every run gets its own
``random.Random`` seeded from ``base_seed``, so a batch is reproducible
regardless of the execution mode.

Outputs are structured dictionaries suitable for CSV export and plotting.
"""
from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from time import perf_counter
from typing import List, Optional, Tuple, cast

from saqueens.randomness import default_random_source
from saqueens.solver import Solver
from saqueens.utils import board_to_rows, conflicts, is_valid_solution

from .stats import (
    ExperimentResults,
    ProgressPrinter,
    SARecord,
    SAResultEntry,
    compute_grouped_statistics,
)


def run_seed(base_seed: Optional[int], size: int, run: int) -> Optional[int]:
    """Seed for run ``run`` at board size ``size`` (None keeps runs unseeded)."""
    if base_seed is None:
        return None
    return base_seed + 1000 * size + run


# Reusable workers -----------------------------------------------------------

def run_single_sa_experiment(params: Tuple[int, Optional[int]]) -> SARecord:
    """Solve one fresh board and describe the outcome (picklable worker)."""
    size, seed = params
    start = perf_counter()
    solver = Solver(size, rng=default_random_source(seed))
    success = solver.solve()
    elapsed = perf_counter() - start
    return {
        "size": size,
        "seed": seed,
        "success": success,
        "iterations": solver.iteration,
        "accepted": solver.accepted_moves,
        "time": elapsed,
        "best_jeopardized": solver.best_jeopardized,
        "final_jeopardized": solver.board.jeopardized_count(),
        "final_conflicts": conflicts(board_to_rows(solver.board)),
    }


def _validate_runs(size: int, runs: List[SARecord]) -> None:
    for idx, run in enumerate(runs):
        if run["success"]:
            if run["final_jeopardized"] != 0 or run["final_conflicts"] != 0:
                raise AssertionError(
                    f"SA validation failed for N={size}, run {idx}: success but "
                    f"final_jeopardized={run['final_jeopardized']}, final_conflicts={run['final_conflicts']}"
                )
            # Replay the seeded run and check the board with the exhaustive oracle
            if run["seed"] is not None:
                solver = Solver(size, rng=default_random_source(run["seed"]))
                solver.solve()
                if not is_valid_solution(solver.board):
                    raise AssertionError(f"Invalid SA solution replayed for N={size}, seed {run['seed']}: {solver.board!r}")
        elif run["final_jeopardized"] == 0:
            raise AssertionError(f"SA validation failed for N={size}, run {idx}: failure reported on a correct board")


def _summarize(size: int, runs: List[SARecord], validate: bool) -> SAResultEntry:
    if validate:
        _validate_runs(size, runs)
    entry = compute_grouped_statistics(runs)
    entry["raw_runs"] = list(runs)
    print(
        f"  N={size}: {entry['successes']}/{entry['total_runs']} solved "
        f"(success rate {entry['success_rate']:.2f})"
    )
    return cast(SAResultEntry, entry)


# Sequential runner ----------------------------------------------------------

def run_experiments(
    N_values: List[int],
    runs: int,
    base_seed: Optional[int] = None,
    progress_label: Optional[str] = None,
    validate: bool = False,
) -> ExperimentResults:
    """Run ``runs`` independent solvers for each N, one after another."""
    results: ExperimentResults = {}
    progress = ProgressPrinter(len(N_values), progress_label) if progress_label else None

    for index, N in enumerate(N_values, start=1):
        if progress:
            progress.update(index, f"N={N}")
        print(f"=== N = {N}, {runs} SA runs ===")
        sa_runs = [run_single_sa_experiment((N, run_seed(base_seed, N, run))) for run in range(runs)]
        results[N] = _summarize(N, sa_runs, validate)

    return results


# Parallel runner ------------------------------------------------------------

def run_experiments_parallel(
    N_values: List[int],
    runs: int,
    base_seed: Optional[int] = None,
    num_processes: int = 1,
    progress_label: Optional[str] = None,
    validate: bool = False,
) -> ExperimentResults:
    """Same contract as ``run_experiments``; runs for each N fan out to a process pool."""
    results: ExperimentResults = {}
    progress = ProgressPrinter(len(N_values), progress_label) if progress_label else None

    with ProcessPoolExecutor(max_workers=max(1, num_processes)) as executor:
        for index, N in enumerate(N_values, start=1):
            if progress:
                progress.update(index, f"N={N}")
            print(f"=== N = {N}, {runs} SA runs on {num_processes} processes ===")
            params = [(N, run_seed(base_seed, N, run)) for run in range(runs)]
            sa_runs = list(executor.map(run_single_sa_experiment, params))
            results[N] = _summarize(N, sa_runs, validate)

    return results
