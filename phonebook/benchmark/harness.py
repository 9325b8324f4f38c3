from dataclasses import dataclass
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence, Tuple, Union

from ..algorithms.algorithm import Entry
from ..algorithms.binary_search import binary_search
from ..algorithms.hash_lookup import lookup_hash_map
from ..algorithms.jump_search import jump_search
from ..algorithms.linear_search import linear_search
from ..data_structures.hash_directory import create_hash_map
from ..data_structures.sorted_directory import (
    DEFAULT_ABORT_FACTOR,
    bubble_sort_with_break,
    quicksort,
)
from .timing import do_and_get_timing, format_elapsed_time


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run"""

    directory_path: Path
    queries_path: Path
    abort_factor: float = DEFAULT_ABORT_FACTOR
    plot_path: Optional[Path] = None
    show_plot: bool = False

    def __post_init__(self):
        self.directory_path = Path(self.directory_path)
        self.queries_path = Path(self.queries_path)
        if self.plot_path is not None:
            self.plot_path = Path(self.plot_path)
        if self.abort_factor < 0:
            raise ValueError("abort_factor must be non-negative")


@dataclass
class SearchInfo:
    """
    Summary of one strategy run.

    Attributes:
        found: Number of queries that resolved to an entry
        sorting: Time spent sorting in milliseconds, if the strategy sorts
        searching: Time spent searching in milliseconds, if itemized
        hashing: Time spent building the hash table in milliseconds
        aborted: Whether the sort gave up and linear search was used instead
    """

    found: int
    sorting: Optional[float] = None
    searching: Optional[float] = None
    hashing: Optional[float] = None
    aborted: bool = False


class Strategy(Enum):
    """Benchmarked strategies, in the order they run. Values are report labels."""

    LINEAR = "linear search"
    BUBBLE_JUMP = "bubble sort + jump search"
    QUICK_BINARY = "quick sort + binary search"
    HASH = "hash table"


@dataclass
class StrategyReport:
    """Outcome of a full strategy run"""

    strategy: Strategy
    info: SearchInfo
    elapsed_ms: float
    total_queries: int

    @property
    def setup_ms(self) -> float:
        """Time spent preparing the directory (sort or hash build)."""
        return (self.info.sorting or 0.0) + (self.info.hashing or 0.0)

    @property
    def search_ms(self) -> float:
        """Time spent searching; the whole run when it was not itemized."""
        if self.info.searching is None:
            return self.elapsed_ms
        return self.info.searching


Haystack = Union[Sequence[Entry], Mapping[str, Entry]]


def count_found(
    haystack: Haystack,
    queries: Sequence[str],
    search_fn: Callable[[Haystack, str], Optional[Entry]],
) -> int:
    """Run every query through search_fn and count the ones that were found."""
    found_entries = 0
    for query in queries:
        if search_fn(haystack, query) is not None:
            found_entries += 1
    return found_entries


def timing(
    search_type: str, number_of_searches: int, block: Callable[[], SearchInfo]
) -> Tuple[SearchInfo, float]:
    """
    Time a strategy and print its report block.

    Returns:
        The SearchInfo produced by block and the total elapsed milliseconds
    """
    print(f"Start searching ({search_type})...")

    search_info, elapsed = do_and_get_timing(block)

    print(
        f"Found {search_info.found} / {number_of_searches} entries. "
        f"Time taken: {format_elapsed_time(elapsed)}"
    )
    if search_info.hashing is not None:
        print_hashing_time(search_info.hashing)
    if search_info.sorting is not None:
        print_sorting_time(search_info.sorting, search_info.aborted)
    if search_info.searching is not None:
        print_searching_time(search_info.searching)
    print()

    return search_info, elapsed


def print_sorting_time(elapsed_ms: float, aborted: bool) -> None:
    line = f"Sorting time: {format_elapsed_time(elapsed_ms)}"
    if aborted:
        line += " - STOPPED, moved to linear search"
    print(line)


def print_searching_time(elapsed_ms: float) -> None:
    print(f"Searching time: {format_elapsed_time(elapsed_ms)}")


def print_hashing_time(elapsed_ms: float) -> None:
    print(f"Creating time: {format_elapsed_time(elapsed_ms)}")


def _linear(directory: Sequence[Entry], queries: Sequence[str]) -> SearchInfo:
    return SearchInfo(count_found(directory, queries, linear_search))


def _bubble_jump(
    directory: Sequence[Entry],
    queries: Sequence[str],
    baseline_ms: Optional[float],
    abort_factor: float,
) -> SearchInfo:
    sorted_directory, sort_time = do_and_get_timing(
        lambda: bubble_sort_with_break(directory, baseline_ms, abort_factor)
    )

    if sorted_directory is not None:
        found, search_time = do_and_get_timing(
            lambda: count_found(sorted_directory, queries, jump_search)
        )
    else:
        # Sort took too long, fall back to scanning the original
        found, search_time = do_and_get_timing(
            lambda: count_found(directory, queries, linear_search)
        )

    return SearchInfo(
        found,
        sorting=sort_time,
        searching=search_time,
        aborted=sorted_directory is None,
    )


def _quick_binary(directory: Sequence[Entry], queries: Sequence[str]) -> SearchInfo:
    sorted_directory, sort_time = do_and_get_timing(lambda: quicksort(directory))
    found, search_time = do_and_get_timing(
        lambda: count_found(sorted_directory, queries, binary_search)
    )
    return SearchInfo(found, sorting=sort_time, searching=search_time)


def _hash(directory: Sequence[Entry], queries: Sequence[str]) -> SearchInfo:
    hash_map, create_time = do_and_get_timing(lambda: create_hash_map(directory))
    found, search_time = do_and_get_timing(
        lambda: count_found(hash_map, queries, lookup_hash_map)
    )
    return SearchInfo(found, hashing=create_time, searching=search_time)


def run_strategy(
    strategy: Strategy,
    directory: Sequence[Entry],
    queries: Sequence[str],
    baseline_ms: Optional[float] = None,
    abort_factor: float = DEFAULT_ABORT_FACTOR,
) -> StrategyReport:
    """
    Run one strategy end to end and print its report.

    Args:
        strategy: Which sort/search pairing to run
        directory: Original directory; never mutated
        queries: Names to look up
        baseline_ms: Linear search time bounding the bubble sort, None for no bound
        abort_factor: Multiple of baseline_ms the bubble sort may take

    Returns:
        A StrategyReport with the SearchInfo and total elapsed milliseconds
    """
    block: Callable[[], SearchInfo]
    if strategy is Strategy.LINEAR:
        block = partial(_linear, directory, queries)
    elif strategy is Strategy.BUBBLE_JUMP:
        block = partial(_bubble_jump, directory, queries, baseline_ms, abort_factor)
    elif strategy is Strategy.QUICK_BINARY:
        block = partial(_quick_binary, directory, queries)
    elif strategy is Strategy.HASH:
        block = partial(_hash, directory, queries)
    else:
        raise ValueError(f"Unknown strategy: {strategy}")

    info, elapsed = timing(strategy.value, len(queries), block)
    return StrategyReport(strategy, info, elapsed, len(queries))


def run_all(
    directory: Sequence[Entry],
    queries: Sequence[str],
    abort_factor: float = DEFAULT_ABORT_FACTOR,
) -> List[StrategyReport]:
    """Run every strategy in order; the linear run sets the bubble sort budget."""
    reports: List[StrategyReport] = []
    baseline_ms: Optional[float] = None

    for strategy in Strategy:
        report = run_strategy(strategy, directory, queries, baseline_ms, abort_factor)
        if strategy is Strategy.LINEAR:
            baseline_ms = report.elapsed_ms
        reports.append(report)

    return reports
