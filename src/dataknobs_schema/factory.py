"""Factory building schemas from configuration."""

import json
import logging
import re
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from dataknobs_config import FactoryBase

from .composite import ArraySchema, ObjectSchema
from .dates import DateSchema
from .exceptions import SchemaConfigError
from .options import SelectSchema
from .scalars import BooleanSchema, NumberSchema
from .schema import Schema
from .text import StringSchema

logger = logging.getLogger(__name__)

# Rule type -> name of the config key holding its argument
RULE_ARGUMENTS: dict[str, str | None] = {
    "required": None,
    "min": "value",
    "max": "value",
    "length": "value",
    "match": "pattern",
    "email": None,
    "phone": None,
    "not_empty": None,
    "positive": None,
    "negative": None,
    "integer": None,
    "contain": "items",
}

SIMPLE_SCHEMAS: dict[str, type[Schema]] = {
    "string": StringSchema,
    "number": NumberSchema,
    "boolean": BooleanSchema,
    "date": DateSchema,
}


class SchemaFactory(FactoryBase):
    """Factory for creating schemas from configuration.

    Configuration Options:
        type (str): One of string, number, boolean, date, array, object, select
        message (str): Override for the type check failure message
        throw (bool): Always raise on the first failing rule (default: False)
        required (bool | str): Append the required rule; a string is used as
            its message
        rules (list): Rule definitions, applied in order
        fields (dict): Object only; key -> schema configuration or null
        element (dict): Array only; schema configuration of the elements
        options (list): Select only; allowed ``{label, value}`` options
        options_message (str): Select only; membership failure message

    Rule Definition Options:
        type (str): min, max, length, match, email, phone, not_empty,
            positive, negative, integer, contain or required
        value: Bound for min, max and length
        pattern (str): Regex for match
        items (list): Required items for contain
        message (str): Error message override

    Example Configuration:
        schemas:
          - name: user_schema
            factory: dataknobs_schema.factory.schema_factory
            type: object
            fields:
              username:
                type: string
                required: true
                rules:
                  - type: min
                    value: 3
                  - type: match
                    pattern: "^[a-zA-Z0-9_]+$"
              age:
                type: number
                rules:
                  - type: integer
                  - type: min
                    value: 13
              nickname: null
    """

    def create(self, **config: Any) -> Schema:
        """Create a Schema instance from configuration.

        Args:
            **config: Schema configuration

        Returns:
            Schema instance

        Raises:
            SchemaConfigError: If the configuration does not describe a schema
        """
        name = config.pop("name", None)
        config.pop("factory", None)

        schema = self._build(config, name or "<root>")
        logger.info(f"Created {type(schema).__name__} '{name or 'unnamed_schema'}'")
        return schema

    def _build(self, config: dict[str, Any], location: str) -> Schema:
        """Build one schema node and, recursively, its children."""
        schema_type = str(config.get("type", "")).lower()
        message = config.get("message")
        throw = bool(config.get("throw", False))

        schema: Schema
        if schema_type in SIMPLE_SCHEMAS:
            schema = SIMPLE_SCHEMAS[schema_type](message, throw)

        elif schema_type == "array":
            element = config.get("element")
            if not isinstance(element, dict):
                raise SchemaConfigError(
                    f"Array schema at '{location}' requires an 'element' schema",
                    context={"location": location},
                )
            schema = ArraySchema(self._build(element, f"{location}.element"), message, throw)

        elif schema_type == "object":
            fields = config.get("fields") or {}
            shape = {
                key: self._build(field_config, f"{location}.{key}") if field_config else None
                for key, field_config in fields.items()
            }
            schema = ObjectSchema(shape, message, throw)

        elif schema_type == "select":
            options = config.get("options")
            if not options:
                raise SchemaConfigError(
                    f"Select schema at '{location}' requires 'options'",
                    context={"location": location},
                )
            try:
                schema = SelectSchema(options, message, config.get("options_message"), throw)
            except ValueError as e:
                raise SchemaConfigError(str(e), context={"location": location}) from e

        else:
            raise SchemaConfigError(
                f"Unknown schema type {schema_type!r} at '{location}'",
                context={"location": location, "type": schema_type},
            )

        required = config.get("required", False)
        if required:
            schema.required(required if isinstance(required, str) else None)

        rules = config.get("rules") or []
        if not isinstance(rules, list):
            raise SchemaConfigError(
                f"Rules at '{location}' must be a list",
                context={"location": location},
            )
        for rule_config in rules:
            self._add_rule(schema, rule_config, location)

        return schema

    def _add_rule(self, schema: Schema, rule_config: dict[str, Any], location: str) -> None:
        """Apply one rule definition to the schema.

        Args:
            schema: Schema to add the rule to
            rule_config: Rule configuration
            location: Path of the schema within the configuration, for messages
        """
        rule_type = str(rule_config.get("type", "")).lower()
        if rule_type not in RULE_ARGUMENTS:
            logger.warning(f"Unknown rule type '{rule_type}' at '{location}', skipping")
            return

        method = getattr(schema, rule_type, None)
        if method is None:
            logger.warning(
                f"Rule '{rule_type}' is not supported by {type(schema).__name__} "
                f"at '{location}', skipping"
            )
            return

        message = rule_config.get("message")
        argument = RULE_ARGUMENTS[rule_type]
        if argument is None:
            method(message=message)
            return

        if argument not in rule_config:
            raise SchemaConfigError(
                f"Rule '{rule_type}' at '{location}' requires '{argument}'",
                context={"location": location, "rule": rule_type},
            )
        try:
            method(rule_config[argument], message=message)
        except (TypeError, re.error) as e:
            raise SchemaConfigError(
                f"Invalid '{argument}' for rule '{rule_type}' at '{location}': {e}",
                context={"location": location, "rule": rule_type},
            ) from e


def load_schema(path: str | Path) -> Schema:
    """Build a schema from a YAML or JSON file.

    Args:
        path: Path to a .yaml, .yml or .json file holding a schema configuration

    Returns:
        Schema instance

    Raises:
        SchemaConfigError: If the file is missing, has an unsupported format
            or does not hold a schema configuration
    """
    path = Path(path)
    if not path.exists():
        raise SchemaConfigError(f"Schema file not found: {path}", context={"path": str(path)})

    suffix = path.suffix.lower()
    with open(path) as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise SchemaConfigError(f"Unsupported file format: {suffix}", context={"path": str(path)})

    if not isinstance(data, dict):
        raise SchemaConfigError(
            f"Schema file must hold a mapping: {path}", context={"path": str(path)}
        )

    logger.debug(f"Loaded schema configuration from {path}")
    return schema_factory.create(**data)


# Create singleton instance for registration
schema_factory = SchemaFactory()
