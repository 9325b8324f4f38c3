from .algorithm import Entry, SearchFunction
from .binary_search import binary_search
from .hash_lookup import lookup_hash_map
from .jump_search import jump_search
from .linear_search import linear_search

__all__ = [
    "Entry",
    "SearchFunction",
    "binary_search",
    "jump_search",
    "linear_search",
    "lookup_hash_map",
]
