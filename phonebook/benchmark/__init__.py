"""
Benchmarking module for the phonebook search strategies.

This module times each sort/search pairing over the same directory and
queries and prints a report block per strategy.
"""

from .harness import (
    BenchmarkConfig,
    SearchInfo,
    Strategy,
    StrategyReport,
    count_found,
    run_all,
    run_strategy,
    timing,
)
from .timing import do_and_get_timing, format_elapsed_time

__all__ = [
    "BenchmarkConfig",
    "SearchInfo",
    "Strategy",
    "StrategyReport",
    "count_found",
    "do_and_get_timing",
    "format_elapsed_time",
    "run_all",
    "run_strategy",
    "timing",
]
