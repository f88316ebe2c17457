"""Helpers for comparing values and consuming validation results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .schema import Schema


def strict_key(value: Any) -> tuple[bool, Any]:
    """Return a comparison key that keeps booleans apart from equal numbers.

    ``True == 1`` holds in Python, so membership and distinct counts compare
    these keys instead of raw values.
    """
    return (isinstance(value, bool), value)


def flatten_errors_to_map(value: Any, schema: Schema) -> dict[str, str]:
    """Map the path of every field error to its message.

    Errors without a path (those of the root value itself) are left out, and
    the leading ``.`` of each path is stripped. When several errors share a
    path, the last one wins.

    Example:
        >>> schema = object({"email": string().required().email()})
        >>> flatten_errors_to_map({"email": "nope"}, schema)
        {'email': 'Value must be a valid email address'}

    Args:
        value: Value to validate
        schema: Schema to validate it against, usually an ObjectSchema

    Returns:
        Dictionary from field path to error message
    """
    errors_map: dict[str, str] = {}

    for error in schema.validate(value):
        if not error.path:
            continue
        path = error.path[1:] if error.path.startswith(".") else error.path
        errors_map[path] = error.message

    return errors_map
