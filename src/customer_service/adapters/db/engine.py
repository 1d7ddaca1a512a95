"""Database engine factory.

This module centralizes creation of SQLAlchemy Engines:

- **No pooling**: engines use :class:`~sqlalchemy.pool.NullPool`, so every
  ``connect()`` opens a fresh DBAPI connection and ``close()`` really closes it.
- **No connect-time statements**: nothing is executed when a connection opens,
  so read-only databases (e.g. SQLite ``?mode=ro&uri=true``) stay readable.

Use this module whenever you need an Engine so that all connections are
consistently configured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

if TYPE_CHECKING:
    from sqlalchemy.engine import URL, Engine


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an unpooled SQLAlchemy Engine for the given URL.

    Note:
        Because connections are not pooled, an in-memory SQLite URL
        (``sqlite://``) gives every connection its own empty database. Use a
        file-backed SQLite URL when state must survive between operations.

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.

    Returns:
        Engine: Configured SQLAlchemy Engine.

    Raises:
        sqlalchemy.exc.ArgumentError: If ``url`` cannot be parsed.
        sqlalchemy.exc.NoSuchModuleError: If the dialect/driver is unknown.
        ValueError: If a URL component has the wrong type (e.g. a non-numeric port).
    """
    return create_engine(url, echo=echo, poolclass=NullPool)
