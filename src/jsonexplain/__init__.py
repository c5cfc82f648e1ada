"""Render JSON-Schema validation failure trees as flat error records."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from jsonexplain.adapters import build_result_tree, explain
from jsonexplain.config import RenderOptions, load_options
from jsonexplain.model import MISSING, ErrorRecord, format_records
from jsonexplain.render import render

__all__ = [
    "MISSING",
    "ErrorRecord",
    "RenderOptions",
    "__version__",
    "build_result_tree",
    "explain",
    "format_records",
    "load_options",
    "render",
]

try:
    __version__ = version("jsonexplain")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
