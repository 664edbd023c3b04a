"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For answer set builders, see tests/fixtures/answer_fixtures.py
"""

import pytest

from core.config_loader import DatabaseConfig
from database.database import Database

IN_MEMORY_URL = "sqlite://"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def sqlite_database(request):
    """
    Fresh in-memory database with all tables created.

    unittest.TestCase classes receive it as ``self.database`` via
    ``@pytest.mark.usefixtures("sqlite_database")``.
    """
    database = Database(DatabaseConfig(url=IN_MEMORY_URL))
    database.create_all()
    if request.cls is not None:
        request.cls.database = database
    yield database
    database.dispose()
