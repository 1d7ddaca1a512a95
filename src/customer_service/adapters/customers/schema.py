"""Customers table schema.

Defines the ``customers`` table:

| Column | Type    | Constraints            |
|--------|---------|------------------------|
| id     | BIGINT  | NOT NULL, PRIMARY KEY  |
| name   | VARCHAR | NOT NULL               |

Ids are caller-assigned, so the primary key is not autoincrementing (no
SERIAL/IDENTITY on Postgres).
"""

from __future__ import annotations

from sqlalchemy import BigInteger, Column, String, Table

from customer_service.adapters.db.metadata import metadata

__all__ = ["customers"]

customers = Table(
    "customers",
    metadata,
    Column(
        "id",
        BigInteger,
        primary_key=True,
        autoincrement=False,
        nullable=False,
        comment="Caller-assigned customer id.",
    ),
    Column(
        "name",
        String,
        nullable=False,
        comment="Customer display name.",
    ),
    comment="One row per customer.",
)
