"""Errors raised by the product catalog.

Everything the service or a repository can reject derives from
DomainException, which is the one type the CLI turns into an error message.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException, ValueError):
    """A supplied value violates a field constraint."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


class MissingArgumentError(InvalidArgumentError):
    """A required argument was not supplied (None)."""


class InvalidOperationError(DomainException):
    """The operation is not allowed given the current persisted state."""


class StorageError(DomainException):
    """Persisted product data could not be read."""
