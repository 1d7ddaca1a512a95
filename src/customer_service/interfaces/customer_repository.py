"""Customer repository port for customer-service.

This module defines:
- The `CustomerRepository` port (framework-free ABC).
- A small, adapter-agnostic exception hierarchy for precise error handling.

Contract overview
-----------------
Schema:
- `ensure_schema()` is idempotent: it creates the `customers` table only if it
  does not exist yet. Calling it repeatedly never drops or duplicates data.

Create:
- One customer per call, one statement, committed before returning.
- `id` uniqueness is enforced by the storage primary key, not by the adapter.

Read:
- `list_all()` returns every stored customer. No ordering is guaranteed;
  callers must not rely on insertion order.
- An empty table yields an empty list.

Errors:
- `DatabaseConnectionError` — URL cannot be parsed, or storage is unreachable /
  rejects the credentials.
- `SchemaError` — DDL failed.
- `DuplicateKeyError` — `id` already stored; the existing row is untouched.
- `ReadError` — a stored row cannot be turned back into a `Customer`.

Nothing is caught or retried inside adapters; errors propagate to the caller.
"""

import abc
from collections.abc import Sequence

from customer_service.domain import Customer

# --- Exceptions to standardize adapter behavior ---


class CustomerRepositoryError(Exception):
    """Base class for customer repository errors."""


class DatabaseConnectionError(CustomerRepositoryError):
    """The database URL is malformed, or the database cannot be reached."""


class SchemaError(CustomerRepositoryError):
    """Creating the customers table failed."""


class DuplicateKeyError(CustomerRepositoryError):
    """A customer with the same id already exists.

    Attributes:
        customer_id (int): The id that collided.
    """

    def __init__(self, customer_id: int, detail: str = ""):
        msg = f"Customer with id {customer_id} already exists."
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
        self.customer_id = customer_id


class ReadError(CustomerRepositoryError):
    """A result row could not be materialized into a Customer."""


# --- Port ---


class CustomerRepository(abc.ABC):
    """An abstract base class for a customer repository."""

    @abc.abstractmethod
    def ensure_schema(self) -> None:
        """Create the customers table if it does not exist.

        Raises:
            SchemaError: if the DDL statement fails.
            DatabaseConnectionError: if the database cannot be reached.
        """

    @abc.abstractmethod
    def create(self, customer: Customer) -> None:
        """Persist a single customer.

        Raises:
            DuplicateKeyError: if a customer with ``customer.id`` already exists.
            DatabaseConnectionError: if the database cannot be reached.
        """

    @abc.abstractmethod
    def list_all(self) -> Sequence[Customer]:
        """Return all stored customers, in no particular order.

        Raises:
            ReadError: if a row cannot be converted into a Customer.
            DatabaseConnectionError: if the database cannot be reached.
        """
