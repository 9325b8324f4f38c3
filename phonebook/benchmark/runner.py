"""
Benchmark runner for the phonebook search strategies.

Usage examples:
    python -m phonebook.benchmark.runner
    python -m phonebook.benchmark.runner --directory data/directory.txt --queries data/find.txt --plot strategies.png
"""

import argparse
import sys
from typing import Optional, Sequence

from ..data.reader import DirectoryReader, load_queries
from ..data_structures.sorted_directory import DEFAULT_ABORT_FACTOR
from .harness import BenchmarkConfig, run_all


def parse_args(argv: Optional[Sequence[str]] = None) -> BenchmarkConfig:
    parser = argparse.ArgumentParser(description="Benchmark phonebook search strategies")
    parser.add_argument(
        "--directory",
        default="data/directory.txt",
        help="Path to the directory file (<phone> <name> per line)",
    )
    parser.add_argument(
        "--queries", default="data/find.txt", help="Path to the queries file"
    )
    parser.add_argument(
        "--abort-factor",
        type=float,
        default=DEFAULT_ABORT_FACTOR,
        help="Stop bubble sort once it takes this many times the linear search",
    )
    parser.add_argument("--plot", default=None, help="Save a timing chart to this file")
    parser.add_argument(
        "--show-plot", action="store_true", help="Display the timing chart"
    )

    args = parser.parse_args(argv)

    try:
        return BenchmarkConfig(
            directory_path=args.directory,
            queries_path=args.queries,
            abort_factor=args.abort_factor,
            plot_path=args.plot,
            show_plot=args.show_plot,
        )
    except ValueError as e:
        parser.error(str(e))


def main(argv: Optional[Sequence[str]] = None):
    config = parse_args(argv)

    try:
        reader = DirectoryReader(config.directory_path)
        directory = reader.entries
        queries = load_queries(config.queries_path)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print("Make sure the data files exist. You may need to generate them first.")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)

    stats = reader.get_stats()
    print(
        f"Loaded {len(reader):,} entries from {config.directory_path} "
        f"({stats['unique_names']:,} unique names, "
        f"{stats['duplicate_names']:,} duplicates)"
    )
    print(f"Loaded {len(queries):,} queries from {config.queries_path}")
    print()

    reports = run_all(directory, queries, abort_factor=config.abort_factor)

    if config.plot_path is not None or config.show_plot:
        from .plots import plot_strategy_times

        plot_strategy_times(reports, filename=config.plot_path, show=config.show_plot)
        if config.plot_path is not None:
            print(f"[OK] Timing chart saved as {config.plot_path}")

    return reports


if __name__ == "__main__":
    main()
