"""Entrypoints (inbound adapters) for customer-service.

Expose the application to the outside world. Currently only a CLI.

Dependency rule: go through `customer_service.bootstrap`; avoid importing
`customer_service.adapters` directly.
"""
