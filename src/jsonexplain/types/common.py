"""Cross-module type aliases."""

from __future__ import annotations

from typing import Any, TypeAlias

PathSegment: TypeAlias = str | int
RenderedPath: TypeAlias = str | list[PathSegment]

# Raw result node as handed over by a validator: failure keyword -> keyword data.
ResultMapping: TypeAlias = dict[str, Any]
