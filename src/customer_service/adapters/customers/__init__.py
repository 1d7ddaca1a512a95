"""SQLAlchemy-backed customer repository and its table definition."""

from .repository import SqlAlchemyCustomerRepository
from .schema import customers

__all__ = ["SqlAlchemyCustomerRepository", "customers"]
