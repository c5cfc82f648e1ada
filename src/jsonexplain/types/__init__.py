"""Shared type aliases for jsonexplain."""

from .common import PathSegment, RenderedPath, ResultMapping

__all__ = [
    "PathSegment",
    "RenderedPath",
    "ResultMapping",
]
