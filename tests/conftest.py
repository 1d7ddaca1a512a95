"""Global pytest fixtures for customer-service."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from customer_service.adapters.db import ConnectionProvider


pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.postgres",
    "tests.fixtures.datagen",
]


# Helper to route to an existing provider fixture by name
@pytest.fixture
def provider(request: pytest.FixtureRequest) -> ConnectionProvider:
    """Indirection fixture to parametrize over provider fixtures.

    Example:
        ```py
        @pytest.mark.parametrize("provider", ["postgres_provider", "sqlite_provider"], indirect=True)
        def test_something(provider): ...
        ```
    """
    return request.getfixturevalue(request.param)
