#!/usr/bin/env python3
"""
Test suite for the matching service.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip tests that touch a database
    python -m pytest tests/ -v -m "not db"

Database tests use a temporary SQLite file per test; no external
database is required.
"""
