"""Configuration-related exceptions."""

from __future__ import annotations

from jsonexplain.exceptions.base import JsonExplainError


class ConfigError(JsonExplainError, ValueError):
    """Raised when render options are invalid."""
