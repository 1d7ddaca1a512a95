"""Bootstrap (composition root) for customer-service.

Assembles the application at runtime: builds the connection provider from the
configured URL, wires it into the SQLAlchemy customer repository, and runs the
explicit schema initialization step.

Import rules:
- Entry points import *this* package (not adapters directly).
- Inner layers must not import `customer_service.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_customer_repository

__all__ = ["AppContainer", "bootstrap", "build_customer_repository"]
