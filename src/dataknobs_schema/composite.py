"""Array and object schemas, which validate their children recursively.

Errors of children carry the child's path, built by appending ``.<index>``
for array elements and ``.<key>`` for object fields to the parent's path:

    >>> from dataknobs_schema import array, number, object, string
    >>> schema = object({"name": string().required(), "scores": array(number())})
    >>> [(e.path, e.message) for e in schema.validate({"scores": [1, "x"]})]
    [('.name', 'Value must be a non-empty string'), ('.scores.1', 'Value must be a number')]
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Self

from . import constants
from .exceptions import ValidationError
from .schema import Schema
from .sequence import SequenceSchema
from .utils import strict_key

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


def _child_path(path: str | None, segment: Any) -> str:
    return f"{path or ''}.{segment}"


def _distinct_count(values: Iterable[Any]) -> int:
    """Count distinct values, comparing unhashable values by equality.

    Booleans never match numbers.
    """
    hashable: set[Any] = set()
    unhashable: list[Any] = []
    for value in values:
        key = strict_key(value)
        try:
            hashable.add(key)
        except TypeError:
            if key not in unhashable:
                unhashable.append(key)
    return len(hashable) + len(unhashable)


class ArraySchema(SequenceSchema):
    """Schema for lists and tuples whose elements share one schema."""

    _default_type_message = constants.ARRAY_TYPE

    def __init__(self, element: Schema, message: str | None = None, throw: bool = False):
        """Initialize the schema.

        Args:
            element: Schema every element is validated against
            message: Override for the type check failure message
            throw: If True, ``validate`` always raises on the first failing rule
        """
        super().__init__(message, throw)
        self.element = element

    def validate(
        self,
        value: Any,
        path: str | None = None,
        throw: bool = False,
    ) -> list[ValidationError]:
        """Validate the array itself, then each element.

        Element errors are tagged with ``<path>.<index>``. In throw mode an
        invalid element raises an error tagged with the array's own path.
        """
        errors = super().validate(value, path, throw)

        elements = value if isinstance(value, (list, tuple)) else ()
        for i, element in enumerate(elements):
            result = self.element.validate(element, _child_path(path, i), throw)
            errors.extend(result)

            if result and (self.throw or throw):
                raise ValidationError(
                    f'Validation for index "{i}" failed with value "{element}".', path
                )

        return errors

    def contain(self, items: Iterable[Any], message: str | None = None) -> Self:
        """Require the array to contain every one of ``items`` (fluent API).

        The check passes when the distinct values of ``items`` and the array
        together are exactly as many as the array's elements, so an array
        holding duplicates fails even when it contains every item.

        Args:
            items: Values the array must contain
            message: Error message override

        Returns:
            Self for chaining
        """
        required_items = list(items)
        return self._append(
            "contain",
            self._contain(required_items),
            message or constants.ARRAY_CONTAIN.format(
                f"[{', '.join(str(item) for item in required_items)}]"
            ),
        )

    def _type(self) -> Callable[[Any], bool]:
        return lambda value: value is None or isinstance(value, (list, tuple))

    @staticmethod
    def _contain(items: list[Any]) -> Callable[[Any], bool]:
        def predicate(value: Any) -> bool:
            if value is None:
                return True
            if not isinstance(value, (list, tuple)):
                return False
            return _distinct_count([*items, *value]) == len(value)

        return predicate


class ObjectSchema(Schema):
    """Schema for mappings, validating mapped keys against child schemas.

    Keys missing from the value are validated as ``None``. Keys mapped to
    ``None`` are unconstrained, and keys absent from the shape are never
    inspected.
    """

    _default_type_message = constants.OBJECT_TYPE

    def __init__(
        self,
        shape: Mapping[str, Schema | None],
        message: str | None = None,
        throw: bool = False,
    ):
        """Initialize the schema.

        Args:
            shape: Mapping from key to the schema validating that key's value
            message: Override for the type check failure message
            throw: If True, ``validate`` always raises on the first failing rule
        """
        super().__init__(message, throw)
        self.shape = dict(shape)

    def validate(
        self,
        value: Any,
        path: str | None = None,
        throw: bool = False,
    ) -> list[ValidationError]:
        """Validate the object itself, then each mapped key in shape order.

        Field errors are tagged with ``<path>.<key>``. In throw mode an
        invalid field raises an error tagged with the object's own path.
        """
        errors = super().validate(value, path, throw)

        if not isinstance(value, Mapping):
            return errors

        for key, schema in self.shape.items():
            if schema is None:
                continue

            field = value.get(key)
            result = schema.validate(field, _child_path(path, key), throw)
            errors.extend(result)

            if result and (self.throw or throw):
                raise ValidationError(
                    f'Validation for key "{key}" failed with value "{field}".', path
                )

        return errors

    def keys(self) -> list[str]:
        """Return the mapped keys in order."""
        return list(self.shape)

    def _type(self) -> Callable[[Any], bool]:
        return lambda value: value is None or isinstance(value, Mapping)
