"""Core data models for jsonexplain."""

from .missing import MISSING
from .records import ErrorRecord, format_records

__all__ = [
    "MISSING",
    "ErrorRecord",
    "format_records",
]
