"""Flatten a validation result tree into ordered error records.

Records come out in traversal order: depth-first, and within one node in
the order the validator reported its keywords. Nothing is sorted afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence, Sized
from dataclasses import dataclass
from typing import Any

from jsonexplain.config import RenderOptions, coerce_options
from jsonexplain.constants.codes import ErrorCode
from jsonexplain.constants.keywords import LEAF_KEYWORD_CODES
from jsonexplain.exceptions import MalformedResultError
from jsonexplain.model import MISSING, ErrorRecord
from jsonexplain.render.messages import format_message
from jsonexplain.render.path import ROOT, JsonPath
from jsonexplain.render.schema import Schema, disallowed_properties, item_schema, property_schema
from jsonexplain.render.tree import (
    DisallowedProperties,
    IndexBranch,
    LeafFailure,
    MissingProperties,
    NotPassed,
    OneOfMismatch,
    PropertyBranch,
    ResultNode,
    parse_result,
)
from jsonexplain.render.values import json_type_name

logger = logging.getLogger(__name__)

# Leaf keywords whose message reports the size of the current value.
_SIZED_KEYWORDS: frozenset[str] = frozenset(
    {"minLength", "maxLength", "minItems", "maxItems", "minProperties", "maxProperties"}
)
_VALUE_LIMIT_KEYWORDS: frozenset[str] = frozenset(
    {"minimum", "maximum", "exclusiveMinimum", "exclusiveMaximum", "multipleOf"}
)


@dataclass(frozen=True)
class _Frame:
    """Walk position: document location, value there, and governing sub-schema."""

    path: JsonPath
    value: Any
    schema: Schema


def render(
    schema: Any,
    document: Any,
    validation_result: Any,
    options: RenderOptions | Mapping[str, Any] | None = None,
) -> list[ErrorRecord]:
    """Render every leaf failure in ``validation_result`` as an :class:`ErrorRecord`.

    Args:
        schema: Schema the document was validated against. Only consulted to
            work out which properties ``additionalProperties: false`` rejects.
        document: The validated data. Use :data:`MISSING` for an absent document.
        validation_result: Nested failure tree from the validator, or ``None`` /
            an empty mapping on success.
        options: :class:`RenderOptions` or a mapping such as ``{"formatPath": False}``.

    Returns:
        Records in traversal order; empty when validation succeeded.

    Raises:
        MalformedResultError: ``validation_result`` violates the node contract.
        ConfigError: ``options`` is invalid.
    """
    resolved = coerce_options(options)
    tree = parse_result(validation_result)
    if tree is None:
        return []

    walker = _Walker(root_schema=schema, format_path=resolved.format_path)
    records = walker.walk(tree, _Frame(ROOT, document, schema if isinstance(schema, Mapping) else None))
    logger.debug("Rendered %d validation error records", len(records))
    return records


class _Walker:
    """Single-call traversal state; the output list is the only thing mutated."""

    def __init__(self, *, root_schema: Any, format_path: bool) -> None:
        self._root_schema = root_schema
        self._format_path = format_path
        self._records: list[ErrorRecord] = []

    def walk(self, tree: ResultNode, frame: _Frame) -> list[ErrorRecord]:
        self._visit(tree, frame)
        return self._records

    def _visit(self, node: ResultNode, frame: _Frame) -> None:
        for failure in node.failures:
            match failure:
                case PropertyBranch(keyword=keyword, children=children):
                    for name, child in children:
                        self._visit(child, self._property_frame(frame, keyword, name))
                case IndexBranch(children=children):
                    for position, child in children:
                        self._visit(child, self._index_frame(frame, position))
                case MissingProperties(names=names):
                    for name in names:
                        self._emit(
                            ErrorCode.OBJECT_REQUIRED,
                            {"property": name},
                            frame.path.with_property(name),
                        )
                case DisallowedProperties(names=names):
                    if names is None:
                        names = tuple(disallowed_properties(self._root_schema, frame.schema, frame.value))
                    for name in names:
                        self._emit(
                            ErrorCode.ADDITIONAL_PROPERTIES,
                            {"property": name},
                            frame.path.with_property(name),
                            _child_value(frame.value, name),
                        )
                case NotPassed():
                    self._emit(ErrorCode.NOT_PASSED, {}, frame.path, frame.value)
                case OneOfMismatch(matches=matches):
                    code = ErrorCode.ONE_OF_MISSING if matches == 0 else ErrorCode.ONE_OF_MULTIPLE
                    self._emit(code, {}, frame.path, frame.value)
                case LeafFailure(keyword=keyword, expected=expected):
                    code = LEAF_KEYWORD_CODES[keyword]
                    self._emit(code, _leaf_params(keyword, expected, frame.value), frame.path, frame.value)
                case _:
                    raise MalformedResultError(f"unexpected failure variant {failure!r}")

    def _property_frame(self, frame: _Frame, keyword: str, name: str) -> _Frame:
        return _Frame(
            frame.path.with_property(name),
            _child_value(frame.value, name),
            property_schema(self._root_schema, frame.schema, keyword, name),
        )

    def _index_frame(self, frame: _Frame, position: int) -> _Frame:
        return _Frame(
            frame.path.with_index(position),
            _item_value(frame.value, position),
            item_schema(self._root_schema, frame.schema, position),
        )

    def _emit(self, code: ErrorCode, params: dict[str, Any], path: JsonPath, data: Any = MISSING) -> None:
        self._records.append(
            ErrorRecord(
                code=code.value,
                message=format_message(code, params),
                path=path.snapshot(format_path=self._format_path),
                data=data,
            )
        )


def _leaf_params(keyword: str, expected: Any, value: Any) -> dict[str, Any]:
    if keyword == "type":
        return {"actual": json_type_name(value), "expected": expected}
    if keyword in _VALUE_LIMIT_KEYWORDS:
        return {"value": value, "limit": expected}
    if keyword in _SIZED_KEYWORDS:
        return {"length": _size_of(keyword, value), "limit": expected}
    if keyword == "pattern":
        return {"pattern": expected}
    if keyword == "format":
        return {"format": expected}
    if keyword == "enum":
        return {"value": value, "allowed": expected}
    if keyword == "const":
        return {"value": value, "expected": expected}
    # uniqueItems, anyOf
    return {}


def _size_of(keyword: str, value: Any) -> int:
    if isinstance(value, Sized) and not isinstance(value, (bytes, bytearray)):
        return len(value)
    raise MalformedResultError(f"'{keyword}' failure reported for unsized value of type {json_type_name(value)}")


def _child_value(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name, MISSING)
    return MISSING


def _item_value(value: Any, position: int) -> Any:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)) and position < len(value):
        return value[position]
    return MISSING
