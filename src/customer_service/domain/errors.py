"""Domain-layer error definitions."""


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidCustomerError(DomainError, ValueError):
    """Raised when a Customer is built from an invalid id or name."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid customer {field} {value!r}: {reason}.")
        self.field = field
        self.value = value
        self.reason = reason
