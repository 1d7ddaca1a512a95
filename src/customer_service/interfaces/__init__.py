"""Interfaces (application boundary) for customer-service.

Framework-free contracts (ABCs) and the adapter-agnostic error hierarchy shared
by adapters, the composition root and entrypoints.

Dependency rule: may import `customer_service.domain` only.
"""

from .customer_repository import (
    CustomerRepository,
    CustomerRepositoryError,
    DatabaseConnectionError,
    DuplicateKeyError,
    ReadError,
    SchemaError,
)

__all__ = [
    "CustomerRepository",
    "CustomerRepositoryError",
    "DatabaseConnectionError",
    "DuplicateKeyError",
    "ReadError",
    "SchemaError",
]
