from typing import Mapping, Optional

from .algorithm import Entry


def lookup_hash_map(directory: Mapping[str, Entry], query: str) -> Optional[Entry]:
    """Direct key lookup in a name -> Entry mapping. Average O(1)."""
    return directory.get(query)
