"""Rendered error record model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jsonexplain.model.missing import MISSING
from jsonexplain.types import RenderedPath


@dataclass(frozen=True)
class ErrorRecord:
    """One leaf validation failure with stable code and document location."""

    code: str
    message: str
    path: RenderedPath
    data: Any = field(default=MISSING)

    @property
    def has_data(self) -> bool:
        return self.data is not MISSING

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; ``data`` is omitted when there is no value."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.has_data:
            payload["data"] = self.data
        payload["path"] = self.path if isinstance(self.path, str) else list(self.path)
        return payload

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        return f"[{self.code}] {_path_label(self.path)} {self.message}"


def _path_label(path: RenderedPath) -> str:
    if isinstance(path, str):
        return path
    return "/" + "/".join(str(segment) for segment in path)


def format_records(records: list[ErrorRecord]) -> str:
    """Format records as a multi-line string, keeping traversal order."""
    return "\n".join(record.format() for record in records)
