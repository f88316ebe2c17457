"""DataKnobs Schema package.

Declarative validation for the DataKnobs ecosystem. Schemas are composed by
chaining configuration calls, then asked whether a value is valid or for the
list of errors, each located by its path within the value:

    >>> from dataknobs_schema import number, object, string
    >>> schema = object({"first": string().required(), "second": number()})
    >>> schema.is_valid({"first": "hello", "second": 1})
    True
    >>> [(e.path, e.message) for e in schema.validate({"second": "h1"})]
    [('.first', 'Value must be a non-empty string'), ('.second', 'Value must be a number')]
"""

from .builders import array, boolean, date, number, object, select, string
from .composite import ArraySchema, ObjectSchema
from .dates import DateSchema, cast_date
from .exceptions import SchemaConfigError, ValidationError
from .factory import SchemaFactory, load_schema, schema_factory
from .options import SelectOption, SelectSchema
from .scalars import BooleanSchema, NumberSchema
from .schema import Rule, Schema
from .sequence import SequenceSchema
from .text import StringSchema
from .utils import flatten_errors_to_map

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Builders
    "string",
    "number",
    "boolean",
    "date",
    "array",
    "object",
    "select",
    # Schemas
    "Rule",
    "Schema",
    "SequenceSchema",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "DateSchema",
    "SelectSchema",
    "SelectOption",
    "ArraySchema",
    "ObjectSchema",
    # Errors
    "ValidationError",
    "SchemaConfigError",
    # Helpers
    "cast_date",
    "flatten_errors_to_map",
    # Configuration
    "SchemaFactory",
    "schema_factory",
    "load_schema",
]
