"""Boolean and number schemas.
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import TYPE_CHECKING, Any, Self

from . import constants
from .schema import Schema

if TYPE_CHECKING:
    from collections.abc import Callable


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class BooleanSchema(Schema):
    """Schema for ``bool`` values."""

    _default_type_message = constants.BOOLEAN_TYPE

    def _type(self) -> Callable[[Any], bool]:
        return lambda value: value is None or isinstance(value, bool)


class NumberSchema(Schema):
    """Schema for real numbers. Booleans are not numbers here."""

    _default_type_message = constants.NUMBER_TYPE

    def min(self, min: float, message: str | None = None) -> Self:
        """Require a value greater than or equal to ``min`` (fluent API)."""
        return self._append(
            "min",
            self._number_rule(lambda value: value >= min),
            message or constants.NUMBER_MIN.format(min),
        )

    def max(self, max: float, message: str | None = None) -> Self:
        """Require a value less than or equal to ``max`` (fluent API)."""
        return self._append(
            "max",
            self._number_rule(lambda value: value <= max),
            message or constants.NUMBER_MAX.format(max),
        )

    def positive(self, message: str | None = None) -> Self:
        """Require a value strictly greater than zero (fluent API)."""
        return self._append(
            "positive",
            self._number_rule(lambda value: value > 0),
            message or constants.NUMBER_POSITIVE,
        )

    def negative(self, message: str | None = None) -> Self:
        """Require a value strictly less than zero (fluent API)."""
        return self._append(
            "negative",
            self._number_rule(lambda value: value < 0),
            message or constants.NUMBER_NEGATIVE,
        )

    def integer(self, message: str | None = None) -> Self:
        """Require an integral value; ``2.0`` counts as an integer (fluent API)."""
        return self._append(
            "integer",
            self._number_rule(
                lambda value: isinstance(value, Integral)
                or (math.isfinite(value) and float(value).is_integer())
            ),
            message or constants.NUMBER_INTEGER,
        )

    def _type(self) -> Callable[[Any], bool]:
        return lambda value: value is None or _is_number(value)

    @staticmethod
    def _number_rule(test: Callable[[Any], bool]) -> Callable[[Any], bool]:
        # Non-numbers fail here and are reported by the type rule
        return lambda value: value is None or (_is_number(value) and test(value))
