"""Shared pytest fixtures, registered through `pytest_plugins` in tests/conftest.py."""
