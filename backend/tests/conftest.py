"""
Pytest configuration for the timebase test suite.
"""

import sys
from pathlib import Path

import pytest

# Add backend to Python path for test imports
backend_path = Path(__file__).parent.parent
sys.path.insert(0, str(backend_path))


# Configure pytest
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "persistence: marks tests that write a SQLite database"
    )
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP layer"
    )


@pytest.fixture
def db_path(tmp_path):
    """Path to a fresh SQLite database file."""
    return str(tmp_path / "timebase.db")
