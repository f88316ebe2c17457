"""Date schema and the date casting helper.

Dates may be given as ``datetime``/``date`` objects, millisecond timestamps or
strings. Strings are parsed as ISO 8601 first and, failing that, with their
``-`` separated segments reversed, so both ``2000-01-02`` and ``02-01-2000``
are read as the 2nd of January 2000.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timezone
from numbers import Real
from typing import TYPE_CHECKING, Any, Self

from . import constants
from .schema import Schema

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DateValue = datetime | date | int | float | str


def _parse_iso(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are read as UTC so every cast value is comparable
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def cast_date(value: DateValue) -> datetime:
    """Cast a date-like value to a timezone-aware datetime.

    Args:
        value: A datetime, date, timestamp in milliseconds or date string

    Returns:
        The value as a datetime; naive values are taken as UTC

    Raises:
        TypeError: If the value cannot be read as a date
    """
    if isinstance(value, datetime):
        return _as_utc(value)

    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)

    if isinstance(value, Real) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise TypeError(f"Timestamp out of range: {value!r}") from e

    if isinstance(value, str):
        try:
            return _as_utc(_parse_iso(value))
        except ValueError:
            pass

        reversed_value = "-".join(reversed(value.split("-")))
        try:
            parsed = _parse_iso(reversed_value)
        except ValueError as e:
            raise TypeError(f"Could not parse date from '{value}'") from e

        logger.debug(f"Parsed date '{value}' as '{reversed_value}'")
        return _as_utc(parsed)

    raise TypeError(f"Cannot cast {type(value).__name__} to a date")


def _try_cast(value: Any) -> datetime | None:
    try:
        return cast_date(value)
    except TypeError:
        return None


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


class DateSchema(Schema):
    """Schema for date-like values.

    The empty string passes the type rule, but it is not a date: ``min``,
    ``max`` and ``required`` reject it.
    """

    _default_type_message = constants.DATE_TYPE

    def min(self, min: DateValue, message: str | None = None) -> Self:
        """Require a date on or after ``min`` (fluent API).

        Raises:
            TypeError: If ``min`` cannot be cast to a date
        """
        bound = cast_date(min)
        return self._append(
            "min",
            self._date_rule(lambda value: value >= bound),
            message or constants.DATE_MIN.format(min),
        )

    def max(self, max: DateValue, message: str | None = None) -> Self:
        """Require a date on or before ``max`` (fluent API).

        Raises:
            TypeError: If ``max`` cannot be cast to a date
        """
        bound = cast_date(max)
        return self._append(
            "max",
            self._date_rule(lambda value: value <= bound),
            message or constants.DATE_MAX.format(max),
        )

    def _type(self) -> Callable[[Any], bool]:
        return lambda value: _is_blank(value) or _try_cast(value) is not None

    def _required(self) -> Callable[[Any], bool]:
        return lambda value: not _is_blank(value)

    @staticmethod
    def _date_rule(test: Callable[[datetime], bool]) -> Callable[[Any], bool]:
        def predicate(value: Any) -> bool:
            if value is None:
                return True
            cast = _try_cast(value)
            return cast is not None and test(cast)

        return predicate
