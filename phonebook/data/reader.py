from pathlib import Path
from typing import Union

from ..algorithms.algorithm import Entry


class DirectoryFormatError(ValueError):
    """Raised when a directory line is not in ``<phone> <name>`` form."""


def parse_entry(line: str) -> Entry:
    """Split a directory line on its first space into phone and name."""
    parts = line.split(" ", 1)
    if len(parts) != 2:
        raise DirectoryFormatError(f"Expected '<phone> <name>', got {line!r}")
    return Entry(phone=parts[0], name=parts[1])


class DirectoryReader:
    """Reads a plain-text phone directory into memory, one entry per line."""

    def __init__(self, filepath: Union[str, Path]):
        self.filepath = Path(filepath)

        if not self.filepath.exists():
            raise FileNotFoundError(f"Directory file not found: {self.filepath}")

        self._entries = self._load_entries()

    def _load_entries(self) -> list[Entry]:
        """Parse every line, reporting the line number on failure."""
        entries: list[Entry] = []
        with open(self.filepath, encoding="utf-8") as directory_file:
            for line_number, line in enumerate(directory_file, start=1):
                line = line.rstrip("\r\n")
                try:
                    entries.append(parse_entry(line))
                except DirectoryFormatError as e:
                    raise DirectoryFormatError(
                        f"{self.filepath}:{line_number}: {e}"
                    ) from e
        return entries

    @property
    def entries(self) -> list[Entry]:
        """Return a copy of the loaded entries in file order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get_stats(self) -> dict:
        """Get statistics about the directory."""
        unique_names = len({entry.name for entry in self._entries})
        return {
            "total_entries": len(self._entries),
            "unique_names": unique_names,
            "duplicate_names": len(self._entries) - unique_names,
            "file_size": self.filepath.stat().st_size,
        }


def load_directory(filepath: Union[str, Path]) -> list[Entry]:
    """Load all entries of a directory file."""
    return DirectoryReader(filepath).entries


def load_queries(filepath: Union[str, Path]) -> list[str]:
    """Load one query name per line. Empty lines are kept as empty queries."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Queries file not found: {path}")

    with open(path, encoding="utf-8") as queries_file:
        return [line.rstrip("\r\n") for line in queries_file]
