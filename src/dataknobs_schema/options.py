"""Select schema: the value must be one of a fixed list of options.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from . import constants
from .schema import Schema
from .utils import strict_key

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


@dataclass(frozen=True)
class SelectOption:
    """An option of a select field.

    Only ``label`` and ``value`` take part in validation; the remaining
    attributes are display metadata carried through untouched.
    """

    label: str
    value: str | None = None
    additional_label: Any = None
    content: Any = None
    checked: bool = False
    disabled: bool = False


def option_fields(option: Any) -> tuple[Any, Any] | None:
    """Return the ``(label, value)`` pair of an option-like value.

    Args:
        option: A SelectOption, any object with ``label`` and ``value``
            attributes, or a mapping with ``label`` and ``value`` keys

    Returns:
        The pair, or None if the value does not look like an option
    """
    if isinstance(option, Mapping):
        if "label" in option and "value" in option:
            return option["label"], option["value"]
        return None
    if hasattr(option, "label") and hasattr(option, "value"):
        return option.label, option.value
    return None


class SelectSchema(Schema):
    """Schema accepting one of the options given at construction."""

    _default_type_message = constants.SELECT_TYPE

    def __init__(
        self,
        options: Iterable[SelectOption | Mapping[str, Any]],
        message: str | None = None,
        options_message: str | None = None,
        throw: bool = False,
    ):
        """Initialize the schema with its type and membership rules.

        Args:
            options: Allowed options
            message: Override for the type check failure message
            options_message: Override for the membership failure message
            throw: If True, ``validate`` always raises on the first failing rule

        Raises:
            ValueError: If an option has no label or value
        """
        self.options = list(options)
        self._allowed = []
        for option in self.options:
            fields = option_fields(option)
            if fields is None:
                raise ValueError(f"Select option must have a label and a value: {option!r}")
            self._allowed.append(tuple(strict_key(field) for field in fields))

        super().__init__(message, throw)
        self._append("options", self._options(), options_message or constants.SELECT_OPTIONS)

    def _type(self) -> Callable[[Any], bool]:
        return lambda value: value is None or option_fields(value) is not None

    def _options(self) -> Callable[[Any], bool]:
        def predicate(value: Any) -> bool:
            if value is None:
                return True
            fields = option_fields(value)
            if fields is None:
                return False
            return tuple(strict_key(field) for field in fields) in self._allowed

        return predicate
