"""Exceptions raised while building or updating a book record."""

from __future__ import annotations

from typing import Any


class BookRecordError(Exception):
    """Base exception for book record errors."""


class InvalidArgumentError(BookRecordError, ValueError):
    """Raised when a field value is blank or malformed."""

    def __init__(self, field: str, value: Any = None, reason: str = "invalid value") -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}: {reason}")


class OutOfRangeError(BookRecordError, ValueError):
    """Raised when a price or stock amount is negative."""

    def __init__(self, field: str, value: Any = None) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}: must not be negative (got {value})")


class InvalidStateError(BookRecordError, RuntimeError):
    """Raised when an operation needs data the record does not have."""
