from typing import Optional, Sequence

from .algorithm import Entry


def binary_search(haystack: Sequence[Entry], query: str) -> Optional[Entry]:
    """Binary search on a directory sorted by name, leftmost match wins."""
    left, right = 0, len(haystack) - 1
    result = None

    while left <= right:
        mid = (left + right) // 2
        mid_name = haystack[mid].name

        if mid_name < query:
            left = mid + 1
        else:
            if mid_name == query:
                result = haystack[mid]
            right = mid - 1

    return result
