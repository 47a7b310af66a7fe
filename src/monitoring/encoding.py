"""Value coercion for agent calls.

The agent accepts only scalar values. Custom parameters take bool, int,
float and str; custom-event attributes take int, float and str, so booleans
are encoded there too. Anything else is sent as compact JSON text.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Dict, Mapping

from pydantic import BaseModel

from src.core.constants import JSON_SEPARATORS


_NUMERIC_TYPES = (int, float, Decimal)


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return list(value)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, Decimal):
        return float(value)
    return str(value)


def _stringify_keys(value: Any) -> Any:
    # json only accepts str, int, float, bool and None as keys
    if isinstance(value, Mapping):
        return {
            key if isinstance(key, (str, int, float, bool)) or key is None else str(key): _stringify_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_stringify_keys(item) for item in value]
    return value


def _fallback_text(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"


def to_json(value: Any) -> str:
    """Encode a value as compact JSON; never raises.

    Mapping keys json cannot take (dates, tuples, ...) go through ``str()``.
    Values that still cannot be encoded, such as circular or very deeply
    nested structures, are sent as their string form.
    """
    try:
        return json.dumps(_stringify_keys(value), separators=JSON_SEPARATORS, default=_json_default)
    except Exception:
        # circular or too deeply nested values
        return json.dumps(_fallback_text(value))


def is_numeric(value: Any) -> bool:
    """True for int, float and Decimal, but not bool."""
    return isinstance(value, _NUMERIC_TYPES) and not isinstance(value, bool)


def encode_parameter_value(value: Any) -> Any:
    """Coerce a custom parameter value: bool, numbers and str pass through."""
    if isinstance(value, (bool, str)) or is_numeric(value):
        return value
    return to_json(value)


def encode_event_attribute(value: Any) -> Any:
    """Coerce a custom event attribute: numbers and str pass through, bool is encoded."""
    if isinstance(value, str) or is_numeric(value):
        return value
    return to_json(value)


def encode_event_attributes(attributes: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new mapping with every attribute coerced, order preserved."""
    return {key: encode_event_attribute(value) for key, value in attributes.items()}
