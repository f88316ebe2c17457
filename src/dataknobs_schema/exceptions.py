"""Custom exceptions for the dataknobs_schema package.

This module defines exception types for the schema package,
built on the common exception framework from dataknobs_common.
"""

from __future__ import annotations

from typing import Any

from dataknobs_common import (
    ConfigurationError,
    ValidationError as BaseValidationError,
)


class ValidationError(BaseValidationError):
    """A failed rule, located by its path within the validated value.

    The same class is collected into the list returned by ``validate`` and
    raised in throw mode. Two errors are equal when their message and path
    are equal.

    Attributes:
        message: The failing rule's message
        path: Dotted location of the value, ``None`` for the root value
    """

    def __init__(self, message: str, path: str | None = None):
        self.message = message
        self.path = path
        super().__init__(message, context={"path": path} if path else None)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.message, self.path) == (other.message, other.path)

    def __hash__(self) -> int:
        return hash((self.message, self.path))

    def __repr__(self) -> str:
        return f"ValidationError(message={self.message!r}, path={self.path!r})"


class SchemaConfigError(ConfigurationError):
    """Raised when a schema cannot be built from configuration."""

    pass


__all__ = [
    "ValidationError",
    "SchemaConfigError",
]
