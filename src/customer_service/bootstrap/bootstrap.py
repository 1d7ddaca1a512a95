"""Wire the connection provider and customer repository together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from customer_service import config
from customer_service.adapters.customers import SqlAlchemyCustomerRepository
from customer_service.adapters.db.connection import ConnectionProvider

if TYPE_CHECKING:
    from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    connection_provider: ConnectionProvider
    customers: SqlAlchemyCustomerRepository


def build_customer_repository(
    url: str | URL, *, ensure_schema: bool = True
) -> SqlAlchemyCustomerRepository:
    """Build a customer repository for ``url``.

    Args:
        url: SQLAlchemy database URL.
        ensure_schema: Run `ensure_schema()` before returning (default).

    Raises:
        DatabaseConnectionError: If the URL is malformed or the database is unreachable.
        SchemaError: If the customers table cannot be created.
    """
    provider = ConnectionProvider(url)
    repository = SqlAlchemyCustomerRepository(provider)
    if ensure_schema:
        repository.ensure_schema()
        logger.info("Customer schema ready at %s", provider.safe_url)
    return repository


def bootstrap(*, ensure_schema: bool = True) -> AppContainer:
    """Build the application from the configured database URL."""
    repository = build_customer_repository(
        config.get_db_url(), ensure_schema=ensure_schema
    )
    return AppContainer(
        connection_provider=repository.connection_provider,
        customers=repository,
    )
