"""Render option model."""

from __future__ import annotations

import difflib
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from jsonexplain.constants.config import DEFAULT_FORMAT_PATH, OPTION_KEY_ALIASES, SUGGESTION_CUTOFF
from jsonexplain.exceptions import ConfigError


@dataclass(frozen=True)
class RenderOptions:
    """Resolved render options."""

    format_path: bool = DEFAULT_FORMAT_PATH

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> RenderOptions:
        """Build options from a plain mapping, accepting ``formatPath`` as an alias."""
        values: dict[str, Any] = {}
        for key, value in raw.items():
            field_name = OPTION_KEY_ALIASES.get(key)
            if field_name is None:
                hint = _suggest_key(str(key), frozenset(OPTION_KEY_ALIASES))
                message = f"unknown render option `{key}`"
                raise ConfigError(f"{message} ({hint})" if hint else message)
            if field_name in values:
                raise ConfigError(f"render option `{field_name}` given more than once")
            values[field_name] = value

        format_path = values.get("format_path", DEFAULT_FORMAT_PATH)
        if not isinstance(format_path, bool):
            raise ConfigError(f"`format_path` must be a boolean, got {type(format_path).__name__}")
        return cls(format_path=format_path)


def coerce_options(options: RenderOptions | Mapping[str, Any] | None) -> RenderOptions:
    """Normalize the ``options`` argument of ``render``."""
    if options is None:
        return RenderOptions()
    if isinstance(options, RenderOptions):
        return options
    if isinstance(options, Mapping):
        return RenderOptions.from_mapping(options)
    raise ConfigError(f"render options must be a mapping or RenderOptions, got {type(options).__name__}")


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=SUGGESTION_CUTOFF)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
