from typing import Optional, Sequence

from .algorithm import Entry


def linear_search(haystack: Sequence[Entry], query: str) -> Optional[Entry]:
    """
    Scan the directory front to back for the first entry named ``query``.

    Time Complexity: O(n) - worst case, best case O(1), average case O(n/2)
    Space Complexity: O(1) - constant extra space

    Args:
        haystack: Entries in any order
        query: Name to search for

    Returns:
        The first matching Entry, or None if no entry has that name
    """
    for entry in haystack:
        if entry.name == query:
            return entry

    return None
