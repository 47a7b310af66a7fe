"""Tests for value encoding."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import BaseModel

from src.monitoring.encoding import (
    encode_event_attribute,
    encode_event_attributes,
    encode_parameter_value,
    is_numeric,
    to_json,
)


class Checkout(BaseModel):
    order_id: int
    total: float


@pytest.mark.parametrize("value", [True, False, 0, 42, 1.5, Decimal("2.50"), "", "text"])
def test_parameter_scalars_pass_through(value):
    """Test bool, numbers and strings reach the agent unchanged."""
    assert encode_parameter_value(value) is value


def test_parameter_mapping_encoded():
    """Test mappings are sent as compact JSON."""
    assert encode_parameter_value({"a": 1}) == '{"a":1}'


def test_parameter_other_values_encoded():
    """Test lists, None and models are sent as JSON."""
    assert encode_parameter_value([1, "two", None]) == '[1,"two",null]'
    assert encode_parameter_value(None) == "null"
    assert encode_parameter_value(Checkout(order_id=7, total=9.5)) == '{"order_id":7,"total":9.5}'


@pytest.mark.parametrize("value", [0, 42, 1.5, Decimal("2.50"), "text"])
def test_event_scalars_pass_through(value):
    """Test numbers and strings reach the agent unchanged."""
    assert encode_event_attribute(value) is value


def test_event_booleans_encoded():
    """Test booleans are encoded for events but not for parameters."""
    assert encode_event_attribute(True) == "true"
    assert encode_event_attribute(False) == "false"
    assert encode_parameter_value(True) is True


def test_event_attributes_new_mapping():
    """Test attribute mapping is copied with order preserved."""
    attributes = {"ok": True, "count": 3, "tags": ["a", "b"], "name": "x"}
    encoded = encode_event_attributes(attributes)

    assert list(encoded) == ["ok", "count", "tags", "name"]
    assert encoded == {"ok": "true", "count": 3, "tags": '["a","b"]', "name": "x"}
    assert attributes["ok"] is True


def test_is_numeric_excludes_bool():
    """Test bool is not treated as a number."""
    assert is_numeric(1)
    assert is_numeric(1.0)
    assert is_numeric(Decimal("1"))
    assert not is_numeric(True)
    assert not is_numeric("1")


def test_to_json_never_raises():
    """Test unknown and circular values still encode."""
    assert to_json({1, 2}) in ("[1,2]", "[2,1]")
    assert to_json({"d": Decimal("1.5")}) == '{"d":1.5}'
    assert to_json(object()).startswith('"<object object')

    circular = []
    circular.append(circular)
    assert to_json(circular) == '"[[...]]"'


def test_to_json_escapes_non_ascii():
    """Test non-ASCII text is escaped."""
    assert to_json(["café"]) == '["caf\\u00e9"]'


def nested_list(depth):
    value = []
    for _ in range(depth):
        value = [value]
    return value


def test_to_json_non_string_keys():
    """Test keys json cannot take are converted with str()."""
    assert to_json({date(2024, 1, 1): 5}) == '{"2024-01-01":5}'
    assert to_json({"grid": {(1, 2): "x"}}) == '{"grid":{"(1, 2)":"x"}}'
    assert to_json({1: "a", None: "b"}) == '{"1":"a","null":"b"}'


def test_to_json_deeply_nested():
    """Test very deep nesting still encodes to a JSON string."""
    assert to_json(nested_list(100000)) == '"<list>"'


def test_encoders_non_string_keys():
    """Test both coercion rules handle non-str keys."""
    assert encode_parameter_value({date(2024, 1, 1): 5}) == '{"2024-01-01":5}'
    assert encode_event_attributes({"grid": {(1, 2): "x"}}) == {"grid": '{"(1, 2)":"x"}'}


def test_encoders_deeply_nested():
    """Test both coercion rules handle deep nesting."""
    deep = nested_list(100000)
    assert encode_parameter_value(deep) == '"<list>"'
    assert encode_event_attributes({"deep": deep}) == {"deep": '"<list>"'}
