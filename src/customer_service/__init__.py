"""customer-service

A minimal customer-record data-access layer backed by a relational database,
integration-tested against a disposable PostgreSQL container.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
