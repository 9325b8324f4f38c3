from typing import Iterable

from ..algorithms.algorithm import Entry


def create_hash_map(directory: Iterable[Entry]) -> dict[str, Entry]:
    """
    Index the directory by name.

    Entries are inserted in directory order, so for duplicate names the last
    occurrence overwrites the earlier ones.
    """
    hash_map: dict[str, Entry] = {}
    for entry in directory:
        hash_map[entry.name] = entry
    return hash_map
