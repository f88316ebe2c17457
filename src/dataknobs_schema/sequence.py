"""Length rules shared by string and array schemas.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import TYPE_CHECKING, Any, Self

from . import constants
from .schema import Schema

if TYPE_CHECKING:
    from collections.abc import Callable


def _length_rule(test: Callable[[int], bool]) -> Callable[[Any], bool]:
    # Values without a length fail here and are reported by the type rule
    return lambda value: value is None or (isinstance(value, Sized) and test(len(value)))


class SequenceSchema(Schema):
    """Base class for schemas of values with a length."""

    def min(self, min: int, message: str | None = None) -> Self:
        """Require a length of at least ``min`` (fluent API)."""
        return self._append(
            "min",
            _length_rule(lambda length: length >= min),
            message or constants.SEQUENCE_MIN.format(min),
        )

    def max(self, max: int, message: str | None = None) -> Self:
        """Require a length of at most ``max`` (fluent API)."""
        return self._append(
            "max",
            _length_rule(lambda length: length <= max),
            message or constants.SEQUENCE_MAX.format(max),
        )

    def length(self, length: int, message: str | None = None) -> Self:
        """Require a length of exactly ``length`` (fluent API)."""
        expected = length
        return self._append(
            "length",
            _length_rule(lambda length: length == expected),
            message or constants.SEQUENCE_LENGTH.format(expected),
        )

    def required(self, message: str | None = None) -> Self:
        """Reject ``None`` and empty values (fluent API).

        Appends the base required rule followed by the sequence rule, which
        carries ``message``.
        """
        super().required()
        return self._append("required", self._required(), message or constants.SEQUENCE_REQUIRED)

    def _required(self) -> Callable[[Any], bool]:
        return lambda value: isinstance(value, Sized) and len(value) > 0
