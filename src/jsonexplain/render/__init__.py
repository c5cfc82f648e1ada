"""Rendering of validation result trees into flat error records."""

from __future__ import annotations

from jsonexplain.render.messages import format_message
from jsonexplain.render.path import ROOT, JsonPath
from jsonexplain.render.tree import parse_result
from jsonexplain.render.walker import render

__all__ = [
    "ROOT",
    "JsonPath",
    "format_message",
    "parse_result",
    "render",
]
