"""Pytest configuration for dataknobs_schema tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_schema import SelectOption, array, number, object, string  # noqa: E402


@pytest.fixture
def select_options():
    """Options of a select field, as in a form definition."""
    return [
        SelectOption(label="Select", value="select"),
        SelectOption(label="String", value="string"),
        SelectOption(label="Number", value="number"),
    ]


@pytest.fixture
def person_schema():
    """Object schema with one required and one optional field."""
    return object({
        "first": string().required(),
        "second": number(),
    })


@pytest.fixture
def order_schema():
    """Nested schema: an object holding an array of objects."""
    return object({
        "id": string().required(),
        "lines": array(
            object({
                "sku": string().required().length(6),
                "quantity": number().required().integer().positive(),
            })
        ).required(),
        "note": None,
    })
