"""Configuration utilities for customer-service.

This module centralizes small helpers and constants related to application configuration.
"""

import os

DB_URL_ENV_VAR = "CUSTOMER_SERVICE_DB_URL"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the CUSTOMER_SERVICE_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `CUSTOMER_SERVICE_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `CUSTOMER_SERVICE_DB_URL` is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url
