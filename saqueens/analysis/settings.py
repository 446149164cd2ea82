"""Global settings for the saqueens experiment pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`saqueens.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

import multiprocessing
from datetime import datetime
from typing import List, Optional

# Board sizes to evaluate; 2 and 3 have no solution and show exhaustion
N_VALUES: List[int] = [2, 3, 4, 5, 6, 7, 8]

# Independent annealing runs per board size
RUNS_SA: int = 20

# Seed of the first run; per-run seeds derive from it (None = unseeded runs)
BASE_SEED: Optional[int] = 12345

# Output directory for CSV and charts
OUT_DIR: str = "results_saqueens"

# Number of worker processes to use (leave one core for the OS)
NUM_PROCESSES: int = max(1, multiprocessing.cpu_count() - 1)

# Output naming policy --------------------------------------------------------

# When True, results and plots include a datestamp suffix (e.g., _20261019-142530)
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run label appended to filenames to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def set_run_parameters(
        runs_sa: Optional[int] = None,
        base_seed: Optional[int] = None,
        num_processes: Optional[int] = None,
) -> None:
        """Override run counts, seeding and worker count.

        Parameters
        - runs_sa: annealing runs per board size (None keeps the current value).
        - base_seed: seed of the first run (None keeps the current value).
        - num_processes: worker processes for the parallel pipeline.

        Side effects
        - Updates module-level globals and prints a concise summary to stdout.
        """
        global RUNS_SA, BASE_SEED, NUM_PROCESSES
        if runs_sa is not None:
                if runs_sa < 1:
                        raise ValueError(f"runs_sa must be >= 1, got {runs_sa}")
                RUNS_SA = runs_sa
        if base_seed is not None:
                BASE_SEED = base_seed
        if num_processes is not None:
                NUM_PROCESSES = max(1, num_processes)

        print("Run settings configured:")
        print(f"   - Runs per N: {RUNS_SA}")
        print(f"   - Base seed: {BASE_SEED}" if BASE_SEED is not None else "   - Base seed: unseeded")
        print(f"   - Worker processes: {NUM_PROCESSES}")
