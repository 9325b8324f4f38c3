"""
Pytest configuration and fixtures for the phonebook benchmark tests.

This file contains shared fixtures and configuration for all test modules.
"""

import shutil
import sys
import tempfile
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from phonebook.algorithms.algorithm import Entry  # noqa: E402


@pytest.fixture
def temp_dir():
    """Create a temporary directory for a single test."""
    temp_dir = tempfile.mkdtemp(prefix="phonebook_test_")
    yield Path(temp_dir)

    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def sample_entries():
    """Directory with a duplicate name, in file order."""
    return [
        Entry("101", "Alice"),
        Entry("102", "Bob"),
        Entry("103", "Alice"),
    ]


@pytest.fixture
def sample_queries():
    return ["Alice", "Carol", "Bob"]


@pytest.fixture
def unsorted_entries():
    """A directory with mixed-order names, spaces in names and one duplicate."""
    return [
        Entry("555-0001", "Zoe Walker"),
        Entry("555-0002", "Adam Smith"),
        Entry("555-0003", "Maria Garcia"),
        Entry("555-0004", "Bob Stone"),
        Entry("555-0005", "Adam Smith"),
        Entry("555-0006", "Carl Young"),
        Entry("555-0007", "Diana Prince"),
        Entry("555-0008", "Ethan Hunt"),
        Entry("555-0009", "Frank Moore"),
        Entry("555-0010", "Grace Hopper"),
    ]


@pytest.fixture
def phonebook_files(temp_dir, sample_entries, sample_queries):
    """Write the sample directory and queries to disk and return their paths."""
    directory_path = temp_dir / "directory.txt"
    queries_path = temp_dir / "find.txt"
    directory_path.write_text(
        "".join(f"{entry.phone} {entry.name}\n" for entry in sample_entries),
        encoding="utf-8",
    )
    queries_path.write_text(
        "".join(f"{query}\n" for query in sample_queries), encoding="utf-8"
    )
    return directory_path, queries_path


# Configure pytest markers
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# Custom collection modifiers
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark integration tests
        if "test_integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        # Mark unit tests (default for most tests)
        if not any(
            marker.name in ["integration", "slow"] for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# Pytest options
def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_runtest_setup(item):
    """Setup for individual test runs."""
    # Skip slow tests unless --run-slow is passed
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("need --run-slow option to run")
