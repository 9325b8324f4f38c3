import math
from typing import Optional, Sequence

from .algorithm import Entry
from .linear_search import linear_search


def jump_search(haystack: Sequence[Entry], query: str) -> Optional[Entry]:
    """
    Jump search over a directory sorted by name.

    Jumps ahead floor(sqrt(n)) entries at a time while the boundary entry's
    name is smaller than the query. Once a boundary is not smaller, the block
    ending at that boundary is scanned linearly, so duplicates resolve to the
    first one in sorted order.

    Time Complexity: O(sqrt(n))
    """
    size = len(haystack)
    if size == 0:
        return None

    jump_size = math.isqrt(size)
    block_start = 0
    jump_index = 0

    while True:
        if query <= haystack[jump_index].name:
            return linear_search(haystack[block_start : jump_index + 1], query)

        if jump_index == size - 1:
            # Query sorts after the last entry
            return None

        block_start = jump_index + 1
        jump_index = min(jump_index + jump_size, size - 1)
