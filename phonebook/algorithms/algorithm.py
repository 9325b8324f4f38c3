from dataclasses import dataclass
from typing import Callable, Optional, Sequence


@dataclass(frozen=True)
class Entry:
    """
    A single phone directory record.

    Attributes:
        phone: Phone number as it appears in the directory file
        name: Person name, the key every sort and search works on
    """

    phone: str
    name: str

    def __str__(self) -> str:
        """Directory file representation of the entry."""
        return f"{self.phone} {self.name}"


# Flat interface shared by every list-based search: haystack + query -> Entry or None
SearchFunction = Callable[[Sequence[Entry], str], Optional[Entry]]
