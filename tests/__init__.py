#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only tests that need no database
    python -m pytest tests/ -v -m "not db"

    # Using unittest (database fixtures are pytest-only)
    python -m unittest discover tests -v

Database tests use an in-memory SQLite database, so no external service
is required.
"""
