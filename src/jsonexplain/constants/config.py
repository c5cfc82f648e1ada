"""Constants for render option loading."""

from __future__ import annotations

DEFAULT_FORMAT_PATH: bool = True

# Accepted option keys -> RenderOptions field.
OPTION_KEY_ALIASES: dict[str, str] = {
    "format_path": "format_path",
    "formatPath": "format_path",
}

SUGGESTION_CUTOFF: float = 0.6
