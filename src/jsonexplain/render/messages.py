"""Message formatting for rendered failure codes."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from jsonexplain.constants.codes import (
    ENUM_SEPARATOR,
    INVALID_TYPE_UNION_PREFIX,
    MESSAGE_TEMPLATES,
    TYPE_UNION_SEPARATOR,
    ErrorCode,
)
from jsonexplain.exceptions import MessageParamsError
from jsonexplain.render.values import format_value

_PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def template_params(code: ErrorCode) -> frozenset[str]:
    """Return the placeholder names the template for ``code`` expects."""
    return frozenset(_PLACEHOLDER_PATTERN.findall(MESSAGE_TEMPLATES[code]))


def format_message(code: ErrorCode, params: Mapping[str, Any]) -> str:
    """Fill the template for ``code`` with ``params``.

    Raises:
        MessageParamsError: ``params`` does not name exactly the template placeholders.
    """
    expected = template_params(code)
    given = frozenset(params)
    if given != expected:
        missing = sorted(expected - given)
        extra = sorted(given - expected)
        raise MessageParamsError(f"{code}: missing params {missing}, unexpected params {extra}")

    rendered = {name: _render_param(code, name, value) for name, value in params.items()}
    return MESSAGE_TEMPLATES[code].format(**rendered)


def _render_param(code: ErrorCode, name: str, value: Any) -> str:
    match code, name:
        case ErrorCode.INVALID_TYPE, "expected":
            return _render_expected_type(value)
        case ErrorCode.INVALID_TYPE, "actual":
            return str(value)
        case ErrorCode.ENUM_MISMATCH, "allowed":
            return ENUM_SEPARATOR.join(format_value(item) for item in value)
        case _:
            return format_value(value)


def _render_expected_type(expected: str | Sequence[str]) -> str:
    if isinstance(expected, str):
        return expected
    return INVALID_TYPE_UNION_PREFIX + TYPE_UNION_SEPARATOR.join(expected)
