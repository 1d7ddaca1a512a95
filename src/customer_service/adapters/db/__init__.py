"""Database plumbing shared by the SQLAlchemy adapters."""

from .connection import ConnectionProvider
from .engine import make_engine
from .metadata import metadata

__all__ = ["ConnectionProvider", "make_engine", "metadata"]
