"""Render option loading and normalization.

Re-exports the public names so callers can use ``from jsonexplain.config import ...``.
"""

from __future__ import annotations

from jsonexplain.config.loader import load_options
from jsonexplain.config.model import RenderOptions, coerce_options

__all__ = [
    "RenderOptions",
    "coerce_options",
    "load_options",
]
