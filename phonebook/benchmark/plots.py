"""
Bar chart of per-strategy benchmark timings.

Each strategy gets one stacked bar: preparation time (sorting or hash table
creation) at the bottom and search time on top.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

import matplotlib.pyplot as plt

from .harness import StrategyReport

SETUP_COLOR = "orange"
SEARCH_COLOR = "blue"


def plot_strategy_times(
    reports: Sequence[StrategyReport],
    filename: Optional[Union[str, Path]] = None,
    show: bool = False,
    title: str = "Phonebook Search Strategies",
) -> None:
    """Generate the stacked timing chart, saving it when filename is given."""
    if not reports:
        raise ValueError("No benchmark reports to plot")

    labels = [report.strategy.value for report in reports]
    setup_times = [report.setup_ms for report in reports]
    search_times = [report.search_ms for report in reports]
    positions = range(len(reports))

    plt.figure(figsize=(12, 8))

    plt.bar(positions, setup_times, color=SETUP_COLOR, label="Sorting / Creating")
    bars = plt.bar(
        positions,
        search_times,
        bottom=setup_times,
        color=SEARCH_COLOR,
        label="Searching",
    )

    for bar, report in zip(bars, reports):
        if report.info.aborted:
            bar.set_hatch("//")
            plt.annotate(
                "sort stopped",
                (bar.get_x() + bar.get_width() / 2, bar.get_y() + bar.get_height()),
                ha="center",
                va="bottom",
            )

    plt.xticks(list(positions), labels)
    plt.xlabel("Strategy")
    plt.ylabel("Time (ms)")
    plt.title(title)
    plt.legend()
    plt.grid(True, axis="y", alpha=0.3)
    plt.tight_layout()

    if filename is not None:
        plt.savefig(filename, dpi=300, bbox_inches="tight")

    if show:
        plt.show()
    else:
        plt.close()
