from .reader import (
    DirectoryFormatError,
    DirectoryReader,
    load_directory,
    load_queries,
    parse_entry,
)
from .writer import PhonebookWriter

__all__ = [
    "DirectoryFormatError",
    "DirectoryReader",
    "PhonebookWriter",
    "load_directory",
    "load_queries",
    "parse_entry",
]
