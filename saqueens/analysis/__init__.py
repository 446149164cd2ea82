"""
Analysis and orchestration package for saqueens experiments.

This package contains:
- settings: global knobs for run counts, seeding and output naming
- stats: typed summaries and aggregation helpers
- experiments: sequential and process-parallel batch runners
- reporting: CSV exports of aggregates and raw runs
- plots: chart generation
- cli: top-level entry point and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    SARecord,
    SAResultEntry,
    ExperimentResults,
    compute_detailed_statistics,
    compute_grouped_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "SARecord",
    "SAResultEntry",
    "ExperimentResults",
    # utils
    "compute_detailed_statistics",
    "compute_grouped_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]
