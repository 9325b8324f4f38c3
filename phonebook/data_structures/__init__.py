from .hash_directory import create_hash_map
from .sorted_directory import (
    DEFAULT_ABORT_FACTOR,
    bubble_sort_with_break,
    quicksort,
    should_break_sort,
)

__all__ = [
    "DEFAULT_ABORT_FACTOR",
    "bubble_sort_with_break",
    "create_hash_map",
    "quicksort",
    "should_break_sort",
]
