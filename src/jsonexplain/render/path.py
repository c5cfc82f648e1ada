"""Document path accumulation and rendering.

A :class:`JsonPath` is immutable: descending into a property or array item
returns a new path, so each recursion frame owns its own location.
"""

from __future__ import annotations

from dataclasses import dataclass

from jsonexplain.constants.paths import BRACKET_ESCAPE_PATTERN, ROOT_SYMBOL, SIMPLE_IDENTIFIER_PATTERN
from jsonexplain.exceptions import MalformedResultError
from jsonexplain.types import PathSegment, RenderedPath


@dataclass(frozen=True)
class JsonPath:
    """Ordered property names and array indices from the document root."""

    segments: tuple[PathSegment, ...] = ()

    def with_property(self, name: str) -> JsonPath:
        if not isinstance(name, str):
            raise MalformedResultError(f"property name must be a string, got {name!r}")
        return JsonPath((*self.segments, name))

    def with_index(self, position: int) -> JsonPath:
        if isinstance(position, bool) or not isinstance(position, int) or position < 0:
            raise MalformedResultError(f"array index must be a non-negative integer, got {position!r}")
        return JsonPath((*self.segments, position))

    def render(self) -> str:
        """Render as ``$``-rooted string, bracket-quoting non-identifier names."""
        parts = [ROOT_SYMBOL]
        for segment in self.segments:
            if isinstance(segment, int):
                parts.append(f"[{segment}]")
            elif SIMPLE_IDENTIFIER_PATTERN.fullmatch(segment):
                parts.append(f".{segment}")
            else:
                parts.append(_bracket(segment))
        return "".join(parts)

    def snapshot(self, *, format_path: bool = True) -> RenderedPath:
        """Return the rendered string, or a fresh list of raw segments."""
        if format_path:
            return self.render()
        return list(self.segments)


ROOT: JsonPath = JsonPath()


def _bracket(name: str) -> str:
    escaped = BRACKET_ESCAPE_PATTERN.sub(r"\\\1", name)
    return f'["{escaped}"]'
