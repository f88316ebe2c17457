"""Tests for the base schema: rule order, collect mode and throw mode."""

import pytest

from dataknobs_schema import (
    Rule,
    ValidationError,
    array,
    boolean,
    date,
    number,
    object,
    select,
    string,
)


def all_schemas():
    return [
        string(),
        number(),
        boolean(),
        date(),
        array(number()),
        object({"first": string()}),
        select([{"label": "One", "value": "1"}]),
    ]


class TestRule:
    """Test the Rule record."""

    def test_check(self):
        """Test check returns the predicate outcome as a bool."""
        rule = Rule("positive", lambda value: value > 0, "Must be positive")
        assert rule.check(1) is True
        assert rule.check(-1) is False

    def test_immutable(self):
        """Test rules cannot be changed once built."""
        rule = Rule("positive", lambda value: value > 0, "Must be positive")
        with pytest.raises(AttributeError):
            rule.message = "Other"  # type: ignore[misc]


class TestAbsence:
    """None is valid for every schema until required is attached."""

    @pytest.mark.parametrize("schema", all_schemas(), ids=lambda s: type(s).__name__)
    def test_none_is_valid(self, schema):
        """Test validating None yields no errors."""
        assert schema.validate(None) == []
        assert schema.is_valid(None)

    @pytest.mark.parametrize("schema", all_schemas(), ids=lambda s: type(s).__name__)
    def test_required_rejects_none(self, schema):
        """Test required makes None invalid."""
        schema.required()
        assert not schema.is_valid(None)
        assert schema.validate(None)


class TestFluentApi:
    """Configuration calls mutate and return the same schema."""

    def test_chaining_returns_same_instance(self):
        """Test each call returns self."""
        schema = number()
        assert schema.required() is schema
        assert schema.min(0) is schema
        assert schema.validate_function(lambda value: True) is schema
        assert schema.add_rule(lambda value: True, "never") is schema

    def test_type_rule_is_first(self):
        """Test the type rule is appended by the constructor."""
        schema = number().required().min(1)
        assert [rule.name for rule in schema.rules] == ["type", "required", "min"]

    def test_chained_number_rules(self):
        """Test a chain of rules on one schema."""
        schema = number().required().min(0).max(10)

        assert schema.is_valid(None) is False
        assert schema.is_valid(-1) is False
        assert schema.is_valid(11) is False
        assert schema.is_valid(1) is True


class TestValidateFunction:
    """Test user supplied rules."""

    def test_custom_rule(self):
        """Test a validating function decides validity."""
        schema = number().validate_function(lambda value: value == 1337)
        assert schema.is_valid(1337)
        assert not schema.is_valid(42)

    def test_default_and_custom_message(self):
        """Test the message of a validating function."""
        schema = number().validate_function(lambda value: False)
        assert schema.validate(1)[0].message == "Value did not pass the custom validation"

        schema = number().validate_function(lambda value: False, message="Not leet")
        assert schema.validate(1)[0].message == "Not leet"

    def test_raising_function_fails(self):
        """Test a function that raises counts as a failed rule."""
        schema = string().validate_function(lambda value: value.startswith("a"))
        assert not schema.is_valid(None)
        assert [error.message for error in schema.validate(None)] == [
            "Value did not pass the custom validation"
        ]

    def test_add_rule(self):
        """Test appending a rule with an explicit message."""
        schema = string().add_rule(lambda value: value != "admin", "Reserved name")
        assert schema.validate("admin") == [ValidationError("Reserved name")]
        assert schema.validate("ada") == []

    def test_raising_rule_fails(self):
        """Test a rule predicate that raises counts as a failed rule."""
        schema = string().add_rule(lambda value: value.startswith("a"), "Must start with a")
        assert schema.is_valid(None) is False
        assert schema.validate(None) == [ValidationError("Must start with a")]
        assert schema.is_valid("ada")


class TestErrors:
    """Test the errors returned by validate."""

    def test_number_errors(self):
        """Test messages of type and required rules."""
        schema = number(message="Must be number").required(message="Is required")

        assert schema.validate(123) == []
        assert len(schema.validate(None)) == 1
        assert schema.validate(None)[0].message == "Is required"
        assert schema.validate("hi")[0].message == "Must be number"

    def test_string_errors(self):
        """Test every failing rule is reported, in rule order."""
        schema = (
            string(message="Must be string")
            .min(1, message="Must be greater than 1")
            .required(message="Is required")
        )

        assert schema.validate("hello") == []
        assert len(schema.validate(None)) == 1
        assert [error.message for error in schema.validate("")] == [
            "Must be greater than 1",
            "Is required",
        ]
        assert schema.validate(123)[0].message == "Must be string"

    def test_rule_order_decides_first_message(self):
        """Test the first failing rule is the first error."""
        schema = (
            string(message="Must be string")
            .required(message="Is required")
            .min(1, message="Must be greater than 1")
        )
        assert schema.validate(None)[0].message == "Is required"

    def test_root_errors_have_no_path(self):
        """Test errors of the root value carry no path."""
        error = number().validate("x")[0]
        assert error.path is None

    def test_path_option(self):
        """Test the path given to validate is carried by errors."""
        error = number().validate("x", path=".amount")[0]
        assert error.path == ".amount"

    def test_idempotent(self, order_schema):
        """Test validating twice yields equal error lists."""
        value = {"lines": [{"sku": "ABC", "quantity": 1.5}, "x"]}
        assert order_schema.validate(value) == order_schema.validate(value)


class TestThrowMode:
    """Test raising on the first failing rule."""

    def test_instance_throw(self):
        """Test a throw schema raises from validate."""
        schema = (
            string(message="Must be string", throw=True)
            .min(1, message="Must be greater than 1")
            .required(message="Is required")
        )

        with pytest.raises(ValidationError) as exc_info:
            schema.validate(None)
        assert exc_info.value.message == "Is required"

    def test_call_throw(self):
        """Test throw requested by the caller."""
        schema = number().min(5, message="Too small").max(1, message="Too large")

        assert len(schema.validate(3)) == 2
        with pytest.raises(ValidationError, match="Too small"):
            schema.validate(3, throw=True)

    def test_throw_skips_later_rules(self):
        """Test rules after the first failure are not evaluated."""
        calls = []

        def spy(value):
            calls.append(value)
            return True

        schema = number(throw=True).min(5).validate_function(spy)
        with pytest.raises(ValidationError):
            schema.validate(1)
        assert calls == []

    def test_throw_passes_validation(self):
        """Test a throw schema returns an empty list for valid values."""
        assert number(throw=True).min(0).validate(1) == []

    def test_is_valid_never_raises(self):
        """Test is_valid absorbs errors of throw schemas."""
        schema = string(throw=True).required()
        assert schema.is_valid(None) is False
        assert schema.is_valid("x") is True


class TestSharedSchema:
    """Built schemas are read-only during validation."""

    def test_concurrent_validation(self, order_schema):
        """Test one schema validates from many threads with identical results."""
        from concurrent.futures import ThreadPoolExecutor

        value = {"id": None, "lines": [{"sku": "ABC", "quantity": -1}]}
        expected = order_schema.validate(value)
        rule_counts = [len(schema.rules) for schema in (order_schema, order_schema.shape["lines"])]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(order_schema.validate, [value] * 50))

        assert all(result == expected for result in results)
        assert [len(schema.rules) for schema in (order_schema, order_schema.shape["lines"])] == rule_counts
