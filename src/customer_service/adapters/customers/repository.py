"""SQLAlchemy-backed CustomerRepository.

Each operation opens its own connection from a `ConnectionProvider`, runs a
single statement, and closes the connection on every exit path. SQLAlchemy
errors are mapped to the repository exceptions defined in
`customer_service.interfaces.customer_repository`; nothing is retried.

Error classification:
    - Failing to open a connection is reported by the provider as
      `DatabaseConnectionError`.
    - A statement that fails because the connection was lost (the driver
      invalidated it, or raised an `InterfaceError`) is also a
      `DatabaseConnectionError`.
    - Any other statement failure belongs to the operation that ran it:
      `SchemaError` for `ensure_schema`, `ReadError` for `list_all`,
      `DuplicateKeyError` / `CustomerRepositoryError` for `create`.

Classes:
    SqlAlchemyCustomerRepository -- Implements CustomerRepository using SQLAlchemy Core.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import insert, select
from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, SQLAlchemyError
from sqlalchemy.schema import CreateTable

from customer_service.domain import Customer, InvalidCustomerError
from customer_service.interfaces.customer_repository import (
    CustomerRepository,
    CustomerRepositoryError,
    DatabaseConnectionError,
    DuplicateKeyError,
    ReadError,
    SchemaError,
)

from .schema import customers

if TYPE_CHECKING:
    from sqlalchemy.engine import Row

    from customer_service.adapters.db.connection import ConnectionProvider

logger = logging.getLogger(__name__)

# any flag present means a uniqueness violation
# (postgres: "duplicate key value violates unique constraint", sqlite: "UNIQUE constraint failed")
UNIQUE_VIOLATION_KEYWORDS = ("unique", "duplicate key")  # pragma: no mutate

EMPTY_STRING = ""  # pragma: no mutate


def _connection_lost(error: DBAPIError) -> bool:
    """Return True if ``error`` means the connection itself is gone."""
    return isinstance(error, InterfaceError) or error.connection_invalidated


class SqlAlchemyCustomerRepository(CustomerRepository):
    """SQLAlchemy-backed CustomerRepository.

    - Uses the `customers` table (see adapters.customers.schema).
    - Construction has no side effects; call `ensure_schema()` before first use
      (the composition root does this for you).
    - `ensure_schema()` emits a single ``CREATE TABLE IF NOT EXISTS``.
    - `list_all()` returns rows in the backend's natural scan order.
    """

    def __init__(self, connection_provider: ConnectionProvider):
        self.connection_provider = connection_provider

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def ensure_schema(self) -> None:
        ddl = CreateTable(customers, if_not_exists=True)
        with self.connection_provider.get_connection() as conn:
            try:
                conn.execute(ddl)
                conn.commit()
            except DBAPIError as e:
                if _connection_lost(e):
                    raise DatabaseConnectionError(str(e)) from e
                raise SchemaError(str(e)) from e
            except SQLAlchemyError as e:
                raise SchemaError(str(e)) from e
        logger.debug("Ensured table %r exists", customers.name)

    def create(self, customer: Customer) -> None:
        stmt = insert(customers).values(id=customer.id, name=customer.name)
        with self.connection_provider.get_connection() as conn:
            try:
                conn.execute(stmt)
                conn.commit()
            except IntegrityError as e:
                self._raise_repository_error_from_integrity_error(customer, e)
            except DBAPIError as e:  # value out of range, missing table, etc.
                if _connection_lost(e):
                    raise DatabaseConnectionError(str(e)) from e
                raise CustomerRepositoryError(str(e)) from e
        logger.debug("Created customer id=%s", customer.id)

    def list_all(self) -> list[Customer]:
        stmt = select(customers.c.id, customers.c.name)
        with self.connection_provider.get_connection() as conn:
            try:
                rows = conn.execute(stmt).all()
            except DBAPIError as e:  # e.g. table missing
                if _connection_lost(e):
                    raise DatabaseConnectionError(str(e)) from e
                raise ReadError(str(e)) from e
        result = [self._to_customer(row) for row in rows]
        logger.debug("Read %d customer(s)", len(result))
        return result

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    @staticmethod
    def _to_customer(row: Row) -> Customer:
        """Materialize a result row into a Customer.

        Raises:
            ReadError: If the row does not hold a valid id/name pair.
        """
        try:
            return Customer(id=row.id, name=row.name)
        except (AttributeError, InvalidCustomerError) as e:
            raise ReadError(f"Malformed customer row {tuple(row)!r}: {e}") from e

    @staticmethod
    def _raise_repository_error_from_integrity_error(
        customer: Customer, integrity_error: IntegrityError
    ) -> None:
        """Translate an IntegrityError raised by an insert.

        Raises:
            DuplicateKeyError: If the message points at a uniqueness violation.
            CustomerRepositoryError: For any other integrity error.
        """

        msg = (
            str(integrity_error.orig)
            if integrity_error.orig not in (None, EMPTY_STRING)
            else str(integrity_error)
        )

        if any(kw in msg.lower() for kw in UNIQUE_VIOLATION_KEYWORDS):
            raise DuplicateKeyError(customer.id, msg.strip()) from integrity_error

        # NOT NULL is already guaranteed by Customer, so this is a fallback.
        raise CustomerRepositoryError(msg) from integrity_error
