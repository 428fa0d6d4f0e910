"""
Error kinds raised by the record service.

Every error is terminal for the call that raised it; the dispatcher turns
them into failure responses, nothing else catches them.
"""

from __future__ import annotations


class LedgerServiceError(Exception):
    """Base class for every failure the service reports to a caller."""

    @property
    def kind(self) -> str:
        return self.__class__.__name__

    @property
    def message(self) -> str:
        return str(self)


class ArityError(LedgerServiceError):
    """Wrong number of positional arguments for an operation."""

    def __init__(self, expected: int, got: int, message: str | None = None):
        self.expected = expected
        self.got = got
        super().__init__(
            message or f"Incorrect number of arguments. Expecting {expected}."
        )


class FieldError(LedgerServiceError):
    """A single argument failed to parse into its schema field."""

    reason = "invalid"

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f'{field}: parsing "{value}": {self.reason}')


class FormatError(FieldError):
    reason = "invalid syntax"


class RangeError(FieldError):
    reason = "value out of range"


class DecodeError(LedgerServiceError):
    """Stored bytes do not match the record schema."""


class CollaboratorError(LedgerServiceError):
    """The ledger primitive itself failed."""


class UnknownOperation(LedgerServiceError):
    def __init__(self, name: str):
        self.name = name
        super().__init__("Invalid function name.")
