"""Shared exception hierarchy for jsonexplain."""

from __future__ import annotations

from .base import JsonExplainError
from .config import ConfigError
from .render import MalformedResultError, MessageParamsError, UnsupportedKeywordError

__all__ = [
    "ConfigError",
    "JsonExplainError",
    "MalformedResultError",
    "MessageParamsError",
    "UnsupportedKeywordError",
]
