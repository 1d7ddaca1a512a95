"""The Customer value object."""

from dataclasses import dataclass

from .errors import InvalidCustomerError

BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


@dataclass(frozen=True, slots=True)
class Customer:
    """A customer record.

    Attributes:
        id: Caller-assigned identifier. Must fit in a signed 64-bit integer
            (the storage column is ``BIGINT``).
        name: Display name. Must be non-empty.

    Raises:
        InvalidCustomerError: If ``id`` is not a 64-bit integer or ``name`` is blank.
    """

    id: int  # pylint: disable=invalid-name
    name: str

    def __post_init__(self) -> None:
        # bool is an int subclass; True/False are not ids
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidCustomerError("id", self.id, "must be an integer")
        if not BIGINT_MIN <= self.id <= BIGINT_MAX:
            raise InvalidCustomerError("id", self.id, "must fit in 64 bits")
        if not isinstance(self.name, str):
            raise InvalidCustomerError("name", self.name, "must be a string")
        if not self.name.strip():
            raise InvalidCustomerError("name", self.name, "must not be empty")
