"""Constants for rendering document paths."""

from __future__ import annotations

import re
from re import Pattern

ROOT_SYMBOL: str = "$"
SIMPLE_IDENTIFIER_PATTERN: Pattern[str] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
BRACKET_ESCAPE_PATTERN: Pattern[str] = re.compile(r'(["\\])')
