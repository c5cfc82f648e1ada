"""JSON-ish rendering of document values and their runtime type names."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from jsonexplain.model import MISSING

# Floats print in positional notation for magnitudes in [_PLAIN_DECIMAL_FLOOR, _PLAIN_INTEGER_LIMIT).
_PLAIN_INTEGER_LIMIT: float = 1e21
_PLAIN_DECIMAL_FLOOR: float = 1e-6


def json_type_name(value: Any) -> str:
    """Return the JSON Schema type name of ``value`` (``undefined`` when absent)."""
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "integer" if value.is_integer() else "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence):
        return "array"
    return type(value).__name__


def format_value(value: Any) -> str:
    """Render a value for message text."""
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (int, str)):
        return str(value)
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    return str(value)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    if _PLAIN_DECIMAL_FLOOR <= abs(value) < _PLAIN_INTEGER_LIMIT:
        return format(Decimal(repr(value)), "f")
    return repr(value)
