"""String schema with pattern rules.
"""

from __future__ import annotations

import re
from re import Pattern as RegexPattern
from typing import TYPE_CHECKING, Any, Self

from . import constants
from .sequence import SequenceSchema

if TYPE_CHECKING:
    from collections.abc import Callable


class StringSchema(SequenceSchema):
    """Schema for ``str`` values.

    Example:
        >>> schema = StringSchema().required().email()
        >>> schema.is_valid("user@example.com")
        True
        >>> schema.is_valid("")
        False
    """

    _default_type_message = constants.STRING_TYPE

    def match(self, pattern: str | RegexPattern[str], message: str | None = None) -> Self:
        """Require the value to match a regex pattern (fluent API).

        The pattern is searched anywhere in the value; anchor it with ``^``
        and ``$`` to match the whole string.

        Args:
            pattern: Regex pattern (string or compiled pattern)
            message: Error message override

        Returns:
            Self for chaining
        """
        regex = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
        return self._append(
            "match",
            self._match(regex),
            message or constants.STRING_MATCH.format(regex.pattern),
        )

    def email(self, message: str | None = None) -> Self:
        """Require a valid email address (fluent API)."""
        return self._append(
            "email", self._match(constants.EMAIL_PATTERN), message or constants.STRING_EMAIL
        )

    def phone(self, message: str | None = None) -> Self:
        """Require a valid phone number (fluent API)."""
        return self._append(
            "phone", self._match(constants.PHONE_PATTERN), message or constants.STRING_PHONE
        )

    def required(self, message: str | None = None) -> Self:
        """Reject ``None`` and the empty string with a single rule (fluent API)."""
        return self._append("required", self._required(), message or constants.STRING_REQUIRED)

    def not_empty(self, message: str | None = None) -> Self:
        """Reject whitespace-only strings while still allowing ``None`` (fluent API)."""
        required = self._required()
        return self._append(
            "not_empty",
            lambda value: value is None or (isinstance(value, str) and required(value.strip())),
            message or constants.STRING_REQUIRED,
        )

    def _type(self) -> Callable[[Any], bool]:
        return lambda value: value is None or isinstance(value, str)

    @staticmethod
    def _match(regex: RegexPattern[str]) -> Callable[[Any], bool]:
        return lambda value: value is None or (
            isinstance(value, str) and regex.search(value) is not None
        )
