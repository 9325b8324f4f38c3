"""
Tests for the timing harness: report output, strategy dispatch and sequencing.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from phonebook.algorithms.algorithm import Entry
from phonebook.algorithms.linear_search import linear_search
from phonebook.benchmark.harness import (
    BenchmarkConfig,
    SearchInfo,
    Strategy,
    StrategyReport,
    count_found,
    run_all,
    run_strategy,
    timing,
)
from phonebook.data_structures.sorted_directory import bubble_sort_with_break


class TestSearchInfo:
    """Test suite for SearchInfo dataclass."""

    def test_defaults(self):
        info = SearchInfo(found=3)

        assert info.found == 3
        assert info.sorting is None
        assert info.searching is None
        assert info.hashing is None
        assert info.aborted is False


class TestBenchmarkConfig:
    """Test suite for BenchmarkConfig."""

    def test_paths_are_converted(self):
        config = BenchmarkConfig("a/directory.txt", "a/find.txt", plot_path="chart.png")

        assert config.directory_path == Path("a/directory.txt")
        assert config.queries_path == Path("a/find.txt")
        assert config.plot_path == Path("chart.png")
        assert config.abort_factor == 10.0

    def test_negative_abort_factor(self):
        with pytest.raises(ValueError):
            BenchmarkConfig("d.txt", "q.txt", abort_factor=-1)


class TestCountFound:
    """Test suite for count_found."""

    def test_end_to_end_example(self, sample_entries, sample_queries):
        assert count_found(sample_entries, sample_queries, linear_search) == 2

    def test_no_queries(self, sample_entries):
        assert count_found(sample_entries, [], linear_search) == 0

    def test_repeated_queries_count_each_time(self, sample_entries):
        assert count_found(sample_entries, ["Bob", "Bob", "Bob"], linear_search) == 3


class TestTimingReport:
    """Test suite for the per-strategy report block."""

    def test_linear_report(self, capsys):
        with patch(
            "phonebook.benchmark.harness.do_and_get_timing",
            return_value=(SearchInfo(2), 61_234.0),
        ):
            info, elapsed = timing("linear search", 3, lambda: SearchInfo(2))

        assert info == SearchInfo(2)
        assert elapsed == 61_234.0
        assert capsys.readouterr().out == (
            "Start searching (linear search)...\n"
            "Found 2 / 3 entries. Time taken: 01 min. 01 sec. 234 ms.\n"
            "\n"
        )

    def test_aborted_sort_report(self, capsys):
        info = SearchInfo(2, sorting=1500.0, searching=3.0, aborted=True)
        with patch(
            "phonebook.benchmark.harness.do_and_get_timing",
            return_value=(info, 1503.0),
        ):
            timing("bubble sort + jump search", 3, lambda: info)

        assert capsys.readouterr().out == (
            "Start searching (bubble sort + jump search)...\n"
            "Found 2 / 3 entries. Time taken: 00 min. 01 sec. 503 ms.\n"
            "Sorting time: 00 min. 01 sec. 500 ms. - STOPPED, moved to linear search\n"
            "Searching time: 00 min. 00 sec. 003 ms.\n"
            "\n"
        )

    def test_hash_report_order(self, capsys):
        info = SearchInfo(2, hashing=4.0, searching=1.0)
        with patch(
            "phonebook.benchmark.harness.do_and_get_timing",
            return_value=(info, 5.0),
        ):
            timing("hash table", 3, lambda: info)

        lines = capsys.readouterr().out.splitlines()
        assert lines[2] == "Creating time: 00 min. 00 sec. 004 ms."
        assert lines[3] == "Searching time: 00 min. 00 sec. 001 ms."
        assert lines[4] == ""

    def test_block_is_executed(self, capsys):
        calls = []

        def block():
            calls.append(True)
            return SearchInfo(0)

        info, elapsed = timing("linear search", 0, block)

        assert calls == [True]
        assert info.found == 0
        assert elapsed >= 0
        assert "Found 0 / 0 entries." in capsys.readouterr().out


class TestRunStrategy:
    """Test suite for run_strategy."""

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_end_to_end_example(self, strategy, sample_entries, sample_queries, capsys):
        report = run_strategy(strategy, sample_entries, sample_queries)

        assert isinstance(report, StrategyReport)
        assert report.strategy is strategy
        assert report.info.found == 2
        assert report.total_queries == 3
        assert report.elapsed_ms >= 0
        assert f"Start searching ({strategy.value})..." in capsys.readouterr().out

    def test_linear_has_no_itemized_times(self, sample_entries, sample_queries):
        info = run_strategy(Strategy.LINEAR, sample_entries, sample_queries).info

        assert info.sorting is None
        assert info.searching is None
        assert info.hashing is None

    def test_quick_binary_itemizes_sort_and_search(self, sample_entries, sample_queries):
        info = run_strategy(Strategy.QUICK_BINARY, sample_entries, sample_queries).info

        assert info.sorting is not None
        assert info.searching is not None
        assert info.hashing is None
        assert info.aborted is False

    def test_hash_itemizes_create_and_search(self, sample_entries, sample_queries):
        info = run_strategy(Strategy.HASH, sample_entries, sample_queries).info

        assert info.hashing is not None
        assert info.searching is not None
        assert info.sorting is None

    def test_bubble_jump_without_budget_completes(self, sample_entries, sample_queries):
        info = run_strategy(
            Strategy.BUBBLE_JUMP, sample_entries, sample_queries, baseline_ms=None
        ).info

        assert info.aborted is False
        assert info.found == 2

    def test_bubble_jump_abort_falls_back_to_linear(self, capsys):
        directory = [Entry(str(i), f"name{i:04d}") for i in reversed(range(300))]
        queries = ["name0000", "name0299", "missing"]

        with patch(
            "phonebook.benchmark.harness.linear_search", wraps=linear_search
        ) as spy:
            report = run_strategy(
                Strategy.BUBBLE_JUMP, directory, queries, baseline_ms=0.0
            )

        assert report.info.aborted is True
        assert report.info.found == 2
        assert spy.call_count == len(queries)
        assert "- STOPPED, moved to linear search" in capsys.readouterr().out

    def test_unknown_strategy(self, sample_entries, sample_queries):
        with pytest.raises(ValueError, match="Unknown strategy"):
            run_strategy("bogus", sample_entries, sample_queries)


class TestStrategyReport:
    """Test suite for StrategyReport derived timings."""

    def test_setup_and_search(self):
        report = StrategyReport(
            Strategy.QUICK_BINARY, SearchInfo(1, sorting=4.0, searching=2.0), 6.5, 1
        )

        assert report.setup_ms == 4.0
        assert report.search_ms == 2.0

    def test_linear_search_time_is_whole_run(self):
        report = StrategyReport(Strategy.LINEAR, SearchInfo(1), 9.0, 1)

        assert report.setup_ms == 0.0
        assert report.search_ms == 9.0


class TestRunAll:
    """Test suite for run_all sequencing."""

    def test_runs_every_strategy_in_order(self, sample_entries, sample_queries, capsys):
        reports = run_all(sample_entries, sample_queries)

        assert [r.strategy for r in reports] == list(Strategy)
        assert all(r.info.found == 2 for r in reports)

        out = capsys.readouterr().out
        positions = [out.index(f"({s.value})") for s in Strategy]
        assert positions == sorted(positions)
        # One blank separator line after each block
        assert out.count("\n\n") == len(Strategy)

    def test_linear_time_is_bubble_sort_baseline(self, sample_entries, sample_queries):
        with patch(
            "phonebook.benchmark.harness.bubble_sort_with_break",
            wraps=bubble_sort_with_break,
        ) as spy:
            reports = run_all(sample_entries, sample_queries, abort_factor=3.0)

        spy.assert_called_once_with(sample_entries, reports[0].elapsed_ms, 3.0)

    def test_original_directory_untouched(self, unsorted_entries):
        original = list(unsorted_entries)

        run_all(unsorted_entries, ["Adam Smith", "Grace Hopper", "Nobody"])

        assert unsorted_entries == original
