"""Entry points creating one schema of each kind.

Each builder accepts ``message`` (override for the type check failure
message) and ``throw`` (always raise on the first failing rule).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .composite import ArraySchema, ObjectSchema
from .dates import DateSchema
from .options import SelectOption, SelectSchema
from .scalars import BooleanSchema, NumberSchema
from .text import StringSchema

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .schema import Schema


def string(message: str | None = None, throw: bool = False) -> StringSchema:
    """Create a schema for strings."""
    return StringSchema(message, throw)


def number(message: str | None = None, throw: bool = False) -> NumberSchema:
    """Create a schema for real numbers (booleans excluded)."""
    return NumberSchema(message, throw)


def boolean(message: str | None = None, throw: bool = False) -> BooleanSchema:
    """Create a schema for booleans."""
    return BooleanSchema(message, throw)


def date(message: str | None = None, throw: bool = False) -> DateSchema:
    """Create a schema for dates, date strings and millisecond timestamps."""
    return DateSchema(message, throw)


def array(element: Schema, message: str | None = None, throw: bool = False) -> ArraySchema:
    """Create a schema for lists and tuples whose elements match ``element``."""
    return ArraySchema(element, message, throw)


def object(
    shape: Mapping[str, Schema | None],
    message: str | None = None,
    throw: bool = False,
) -> ObjectSchema:
    """Create a schema for mappings whose keys match the schemas in ``shape``."""
    return ObjectSchema(shape, message, throw)


def select(
    options: Iterable[SelectOption | Mapping[str, Any]],
    message: str | None = None,
    options_message: str | None = None,
    throw: bool = False,
) -> SelectSchema:
    """Create a schema accepting one of ``options`` by label and value."""
    return SelectSchema(options, message, options_message, throw)
