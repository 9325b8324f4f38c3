import time
from typing import Optional, Sequence

from ..algorithms.algorithm import Entry

DEFAULT_ABORT_FACTOR = 10.0


def should_break_sort(
    sort_elapsed_ms: float,
    linear_search_elapsed_ms: Optional[float],
    abort_factor: float = DEFAULT_ABORT_FACTOR,
) -> bool:
    """Check whether sorting has used up its budget of abort_factor x the linear baseline."""
    if linear_search_elapsed_ms is None:
        return False
    return sort_elapsed_ms > linear_search_elapsed_ms * abort_factor


def bubble_sort_with_break(
    source: Sequence[Entry],
    linear_search_elapsed_ms: Optional[float] = None,
    abort_factor: float = DEFAULT_ABORT_FACTOR,
) -> Optional[list[Entry]]:
    """
    Bubble sort a copy of the directory by name, giving up when it gets too slow.

    The elapsed time is checked after every full pass. Once it exceeds
    ``abort_factor`` times ``linear_search_elapsed_ms`` the sort stops and
    None is returned; the partially sorted copy is discarded. Passing None as
    the baseline disables the check.

    Only strictly greater neighbours are swapped, so entries with equal names
    keep their original relative order.

    Args:
        source: Directory to sort, left untouched
        linear_search_elapsed_ms: Linear search baseline in milliseconds
        abort_factor: Multiple of the baseline the sort may take

    Returns:
        A new list sorted by name, or None if the sort was aborted
    """
    result = list(source)
    unsorted_elements = len(result)
    total_elapsed_ms = 0.0

    swapped = True
    while swapped:
        swapped = False
        start_time = time.perf_counter()

        for i in range(1, unsorted_elements):
            if result[i - 1].name > result[i].name:
                result[i - 1], result[i] = result[i], result[i - 1]
                swapped = True
        unsorted_elements -= 1

        end_time = time.perf_counter()
        total_elapsed_ms += (end_time - start_time) * 1000

        if should_break_sort(total_elapsed_ms, linear_search_elapsed_ms, abort_factor):
            return None

    return result


def quicksort(source: Sequence[Entry]) -> list[Entry]:
    """
    Quicksort a copy of the directory by name.

    Lomuto partition with the last element as pivot. Ranges are kept on an
    explicit stack so already-sorted input cannot hit the recursion limit.
    Keys are (name, original position), which makes the result identical to
    the stable bubble sort.
    """
    keyed = [(entry.name, position, entry) for position, entry in enumerate(source)]

    stack = [(0, len(keyed) - 1)]
    while stack:
        start, end = stack.pop()
        if start >= end:
            continue

        pivot = _quicksort_partition(keyed, start, end)
        stack.append((start, pivot - 1))
        stack.append((pivot + 1, end))

    return [entry for _, _, entry in keyed]


def _quicksort_partition(keyed: list, start: int, end: int) -> int:
    """Partition keyed[start..end] around keyed[end] and return the pivot's final index."""
    # Positions are unique, so tuple comparison never reaches the Entry itself
    pivot_key = keyed[end][:2]
    pivot_target_index = start

    for index in range(start, end):
        if keyed[index][:2] < pivot_key:
            keyed[index], keyed[pivot_target_index] = (
                keyed[pivot_target_index],
                keyed[index],
            )
            pivot_target_index += 1

    keyed[end], keyed[pivot_target_index] = keyed[pivot_target_index], keyed[end]
    return pivot_target_index
