import time
from pathlib import Path
from typing import Iterable, Union

from ..algorithms.algorithm import Entry


class PhonebookWriter:
    """Writes directory and queries files in the plain-text benchmark format."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)

    def write_entries(
        self,
        entries: Iterable[Entry],
        filename: str = "directory.txt",
        report_every: int = 100_000,
    ) -> Path:
        """Write one ``<phone> <name>`` line per entry."""
        filepath = self.output_dir / filename
        print(f"Writing entries to {filepath}...")
        start_time = time.time()

        count = 0
        with open(filepath, "w", encoding="utf-8") as directory_file:
            for entry in entries:
                if " " in entry.phone:
                    raise ValueError(f"Phone number cannot contain spaces: {entry.phone!r}")
                directory_file.write(f"{entry}\n")
                count += 1

                if count % report_every == 0:
                    elapsed = time.time() - start_time
                    rate = count / elapsed if elapsed > 0 else 0
                    print(f"Wrote {count:,} entries - Rate: {rate:,.0f} entries/sec")

        elapsed = time.time() - start_time
        print(f"Writing complete! {count:,} entries in {elapsed:.1f}s")
        return filepath

    def write_queries(self, queries: Iterable[str], filename: str = "find.txt") -> Path:
        """Write one query name per line."""
        filepath = self.output_dir / filename
        print(f"Writing queries to {filepath}...")

        count = 0
        with open(filepath, "w", encoding="utf-8") as queries_file:
            for query in queries:
                queries_file.write(f"{query}\n")
                count += 1

        print(f"Writing complete! {count:,} queries")
        return filepath
