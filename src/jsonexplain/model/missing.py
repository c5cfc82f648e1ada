"""Sentinel for a document location that holds no value."""

from __future__ import annotations

from typing import Final


class _Missing:
    """Singleton marking an absent value, distinct from JSON ``null``."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()
