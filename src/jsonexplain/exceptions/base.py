"""Root of the jsonexplain exception hierarchy."""

from __future__ import annotations


class JsonExplainError(Exception):
    """Base class for all jsonexplain errors."""
