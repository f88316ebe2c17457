"""Rule and base schema with a chainable, fluent API.

A schema owns an ordered list of rules. Configuration methods append a rule
and return the same instance, so schemas are built by chaining calls:

    >>> from dataknobs_schema import number
    >>> schema = number().required().min(0).max(10)
    >>> schema.is_valid(5)
    True
    >>> [error.message for error in schema.validate(11)]
    ['Value must be less than or equal to 10']
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

from . import constants
from .exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """A named predicate over an optional value and its failure message."""

    name: str
    predicate: Callable[[Any], bool]
    message: str

    def check(self, value: Any) -> bool:
        """Return True if the value satisfies this rule."""
        return bool(self.predicate(value))


def _guarded(predicate: Callable[[Any], bool], name: str) -> Callable[[Any], bool]:
    """Wrap a user predicate so that raising counts as failing."""

    def guarded(value: Any) -> bool:
        try:
            return bool(predicate(value))
        except Exception as e:
            logger.debug(f"Rule '{name}' raised for {value!r}: {e!s}")
            return False

    return guarded


class Schema(ABC):
    """Base class for all schemas.

    Subclasses provide ``_type`` (the predicate verifying the value's
    representation) and ``_default_type_message``. The type rule is always
    the first rule of a schema.
    """

    _default_type_message: str = ""

    def __init__(self, message: str | None = None, throw: bool = False):
        """Initialize the schema with its type rule.

        Args:
            message: Override for the type check failure message
            throw: If True, ``validate`` always raises on the first failing rule
        """
        self.rules: list[Rule] = []
        self.throw = throw
        self._append("type", self._type(), message or self._default_type_message)

    def _append(self, name: str, predicate: Callable[[Any], bool], message: str) -> Self:
        self.rules.append(Rule(name, predicate, message))
        return self

    def add_rule(
        self,
        predicate: Callable[[Any], bool],
        message: str,
        name: str = "custom",
    ) -> Self:
        """Append a user supplied rule (fluent API).

        A predicate that raises counts as failed.

        Args:
            predicate: Callable returning True for valid values
            message: Error message when the predicate fails
            name: Rule name used in logs

        Returns:
            Self for chaining
        """
        return self._append(name, _guarded(predicate, name), message)

    def validate_function(
        self,
        predicate: Callable[[Any], bool],
        message: str | None = None,
    ) -> Self:
        """Append a user supplied validating function (fluent API).

        The function receives the raw value, including ``None``. If it raises,
        the rule counts as failed.

        Example:
            >>> number().validate_function(lambda value: value == 1337).is_valid(1337)
            True

        Args:
            predicate: Callable returning True for valid values
            message: Error message when the predicate fails

        Returns:
            Self for chaining
        """
        return self._append(
            "validate_function",
            _guarded(predicate, "validate_function"),
            message or constants.VALIDATE_FUNCTION,
        )

    def required(self, message: str | None = None) -> Self:
        """Reject ``None`` values (fluent API).

        Args:
            message: Error message override

        Returns:
            Self for chaining
        """
        return self._append("required", self._required(), message or constants.REQUIRED)

    def is_valid(self, value: Any) -> bool:
        """Check a value, stopping at the first failing rule.

        Args:
            value: Value to validate

        Returns:
            True if every rule passes
        """
        try:
            self.validate(value, throw=True)
        except ValidationError:
            return False
        return True

    def validate(
        self,
        value: Any,
        path: str | None = None,
        throw: bool = False,
    ) -> list[ValidationError]:
        """Evaluate every rule in insertion order.

        Args:
            value: Value to validate
            path: Location of the value within an enclosing structure
            throw: If True, raise on the first failing rule instead of
                collecting errors

        Returns:
            One ValidationError per failing rule, empty if the value is valid

        Raises:
            ValidationError: On the first failing rule when this schema or the
                call is in throw mode
        """
        errors = []

        for rule in self.rules:
            if rule.check(value):
                continue

            error = ValidationError(rule.message, path)
            if self.throw or throw:
                logger.debug(f"Rule '{rule.name}' failed at {path or '<root>'}: {rule.message}")
                raise error
            errors.append(error)

        return errors

    def _required(self) -> Callable[[Any], bool]:
        return lambda value: value is not None

    @abstractmethod
    def _type(self) -> Callable[[Any], bool]:
        """Return the predicate accepting ``None`` or a value of this kind."""
