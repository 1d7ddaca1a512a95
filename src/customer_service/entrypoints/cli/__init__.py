"""Command-line interface for customer-service."""

from .main import customer_service

__all__ = ["customer_service"]
