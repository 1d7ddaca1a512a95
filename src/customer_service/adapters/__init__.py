"""Adapters (infrastructure) for customer-service.

Concrete implementations of the interfaces: SQLAlchemy engine and connection
handling, table metadata, and the SQLAlchemy-backed customer repository.

Dependency rule: may import `customer_service.domain` and
`customer_service.interfaces`; neither may import this package.
"""
