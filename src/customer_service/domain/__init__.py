"""Domain layer for customer-service.

Pure value types and domain errors. No I/O, no SQLAlchemy.
"""

from .customer import Customer
from .errors import DomainError, InvalidCustomerError

__all__ = ["Customer", "DomainError", "InvalidCustomerError"]
