import argparse
import random
import time
from pathlib import Path
from typing import Iterator, Optional, Sequence

from mimesis import Person
from mimesis.locales import Locale

from ..algorithms.algorithm import Entry
from .writer import PhonebookWriter

PHONE_MASK = "###-###-####"
MAX_NAME_ATTEMPTS = 1000


class PhonebookGenerator:
    """Generates realistic phone directory entries and query lists using mimesis."""

    def __init__(self, locale: Locale = Locale.EN, seed: Optional[int] = None):
        self.person = Person(locale=locale, seed=seed)
        self.random = random.Random(seed)

    def generate_entry(self) -> Entry:
        """Generate a single entry with a space-free phone number."""
        return Entry(
            phone=self.person.phone_number(mask=PHONE_MASK),
            name=self.person.full_name(),
        )

    def generate_batch(self, count: int) -> Iterator[Entry]:
        """Generate a batch of entries."""
        if count < 0:
            raise ValueError("Count must be non-negative")
        for _ in range(count):
            yield self.generate_entry()

    def generate_missing_name(self, known_names: set[str]) -> str:
        """Generate a name that does not appear in ``known_names``."""
        for _ in range(MAX_NAME_ATTEMPTS):
            name = self.person.full_name()
            if name not in known_names:
                return name
        raise ValueError(
            f"Could not generate a name absent from the directory "
            f"after {MAX_NAME_ATTEMPTS} attempts"
        )

    def generate_queries(
        self, entries: Sequence[Entry], count: int, missing_ratio: float = 0.1
    ) -> list[str]:
        """
        Build a query list mixing directory names with names that are absent.

        Args:
            entries: Directory the queries will be run against
            count: Total number of queries
            missing_ratio: Fraction of queries guaranteed to miss

        Returns:
            Query names in random order
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        if not 0.0 <= missing_ratio <= 1.0:
            raise ValueError("missing_ratio must be between 0 and 1")

        missing_count = round(count * missing_ratio)
        present_count = count - missing_count
        if present_count and not entries:
            raise ValueError("Cannot draw present queries from an empty directory")

        names = [entry.name for entry in entries]
        known_names = set(names)

        queries = [self.random.choice(names) for _ in range(present_count)]
        queries.extend(self.generate_missing_name(known_names) for _ in range(missing_count))
        self.random.shuffle(queries)
        return queries


def generate_phonebook(
    output_dir: Path,
    entry_count: int,
    query_count: int,
    missing_ratio: float = 0.1,
    seed: Optional[int] = None,
) -> tuple[Path, Path]:
    """Generate and write a directory file and a matching queries file."""
    generator = PhonebookGenerator(locale=Locale.EN, seed=seed)
    writer = PhonebookWriter(output_dir)

    print(f"Generating {entry_count:,} entries and {query_count:,} queries...")
    start_time = time.time()

    entries = list(generator.generate_batch(entry_count))
    queries = generator.generate_queries(entries, query_count, missing_ratio)

    directory_path = writer.write_entries(entries)
    queries_path = writer.write_queries(queries)

    elapsed = time.time() - start_time
    print(f"Generation complete! {entry_count:,} entries in {elapsed:.1f}s")
    return directory_path, queries_path


def main():
    parser = argparse.ArgumentParser(description="Generate sample phonebook data")
    parser.add_argument(
        "--entries", type=int, default=1000, help="Number of directory entries"
    )
    parser.add_argument("--queries", type=int, default=100, help="Number of queries")
    parser.add_argument(
        "--missing-ratio",
        type=float,
        default=0.1,
        help="Fraction of queries that are not in the directory",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument(
        "--output-dir", default="data", help="Directory to write the files into"
    )
    parser.add_argument(
        "--force", action="store_true", help="Overwrite existing files without asking"
    )

    args = parser.parse_args()

    if args.entries < 0 or args.queries < 0:
        parser.error("--entries and --queries must be non-negative")
    if not 0.0 <= args.missing_ratio <= 1.0:
        parser.error("--missing-ratio must be between 0 and 1")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    # Check if files already exist
    existing = [
        path
        for path in (output_dir / "directory.txt", output_dir / "find.txt")
        if path.exists()
    ]
    if existing and not args.force:
        response = input(f"Output file {existing[0]} exists. Overwrite? (y/N): ")
        if response.lower() != "y":
            print("Aborted.")
            return

    try:
        generate_phonebook(
            output_dir, args.entries, args.queries, args.missing_ratio, args.seed
        )
        print("Phonebook generation completed successfully!")

    except KeyboardInterrupt:
        print("\nGeneration interrupted by user.")
    except Exception as e:
        print(f"Error during generation: {e}")
        raise


if __name__ == "__main__":
    main()
