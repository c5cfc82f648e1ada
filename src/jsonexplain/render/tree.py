"""Typed view of a validator's nested failure report.

Raw result nodes are plain mappings from failure keyword to keyword data.
:func:`parse_result` turns them into a tree of tagged failure variants so
the walker can dispatch on type instead of probing keys. Shape violations
raise :class:`MalformedResultError`; nothing is dropped.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from jsonexplain.constants.keywords import (
    ADDITIONAL_PROPERTIES,
    ITEMS,
    LEAF_KEYWORD_CODES,
    NOT,
    ONE_OF,
    PROPERTY_BRANCH_KEYWORDS,
    REQUIRED,
)
from jsonexplain.exceptions import MalformedResultError, UnsupportedKeywordError


@dataclass(frozen=True)
class LeafFailure:
    """A keyword failing directly on the current value."""

    keyword: str
    expected: Any


@dataclass(frozen=True)
class MissingProperties:
    """Required property names absent from the current object."""

    names: tuple[str, ...]


@dataclass(frozen=True)
class DisallowedProperties:
    """``additionalProperties: false`` failure.

    ``names`` is ``None`` when the validator only reported the keyword and
    the offending names must be derived from the schema in scope.
    """

    names: tuple[str, ...] | None


@dataclass(frozen=True)
class NotPassed:
    """The value matched the schema under ``not``."""


@dataclass(frozen=True)
class OneOfMismatch:
    """``oneOf`` matched zero or several branches."""

    matches: int


@dataclass(frozen=True)
class PropertyBranch:
    """Nested failures per object property."""

    keyword: str
    children: tuple[tuple[str, ResultNode], ...]


@dataclass(frozen=True)
class IndexBranch:
    """Nested failures per array index."""

    children: tuple[tuple[int, ResultNode], ...]


Failure: TypeAlias = (
    LeafFailure | MissingProperties | DisallowedProperties | NotPassed | OneOfMismatch | PropertyBranch | IndexBranch
)


@dataclass(frozen=True)
class ResultNode:
    """Failures reported against one schema location, in reported order."""

    failures: tuple[Failure, ...] = ()


def is_success(raw: Any) -> bool:
    """Return True when ``raw`` is a validator's success indicator."""
    return raw is None or (isinstance(raw, Mapping) and not raw)


def parse_result(raw: Any) -> ResultNode | None:
    """Parse a raw result tree; ``None`` means validation succeeded."""
    if is_success(raw):
        return None
    return _parse_node(raw)


def _parse_node(raw: Any) -> ResultNode:
    if not isinstance(raw, Mapping):
        raise MalformedResultError(f"result node must be a mapping, got {type(raw).__name__}")
    return ResultNode(tuple(_parse_failure(keyword, value) for keyword, value in raw.items()))


def _parse_failure(keyword: Any, value: Any) -> Failure:
    if not isinstance(keyword, str):
        raise UnsupportedKeywordError(keyword)

    if keyword == ADDITIONAL_PROPERTIES and not isinstance(value, Mapping):
        return _parse_disallowed(value)
    if keyword in PROPERTY_BRANCH_KEYWORDS:
        return _parse_property_branch(keyword, value)
    if keyword == ITEMS:
        return _parse_index_branch(value)
    if keyword == REQUIRED:
        return MissingProperties(_parse_names(keyword, value))
    if keyword == NOT:
        return NotPassed()
    if keyword == ONE_OF:
        return _parse_one_of(value)
    if keyword == "type":
        if not (isinstance(value, str) or _is_string_sequence(value)):
            raise MalformedResultError(f"'type' failure must name a type or list of types, got {value!r}")
        return LeafFailure(keyword, value if isinstance(value, str) else tuple(value))
    if keyword == "enum":
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise MalformedResultError(f"'enum' failure must list the allowed values, got {value!r}")
        return LeafFailure(keyword, tuple(value))
    if keyword in LEAF_KEYWORD_CODES:
        return LeafFailure(keyword, value)
    raise UnsupportedKeywordError(keyword)


def _parse_property_branch(keyword: str, value: Any) -> PropertyBranch:
    if not isinstance(value, Mapping):
        raise MalformedResultError(f"'{keyword}' failure must map property names to result nodes")
    children: list[tuple[str, ResultNode]] = []
    for name, child in value.items():
        if not isinstance(name, str):
            raise MalformedResultError(f"'{keyword}' failure has non-string property name {name!r}")
        children.append((name, _parse_node(child)))
    return PropertyBranch(keyword, tuple(children))


def _parse_index_branch(value: Any) -> IndexBranch:
    children: list[tuple[int, ResultNode]] = []
    if isinstance(value, Mapping):
        for key, child in value.items():
            children.append((_parse_index(key), _parse_node(child)))
    elif isinstance(value, (list, tuple)):
        for position, child in enumerate(value):
            if child is not None:
                children.append((position, _parse_node(child)))
    else:
        raise MalformedResultError(f"'items' failure must map indices to result nodes, got {type(value).__name__}")
    return IndexBranch(tuple(children))


def _parse_index(key: Any) -> int:
    if isinstance(key, int) and not isinstance(key, bool) and key >= 0:
        return key
    if isinstance(key, str) and key.isdecimal():
        return int(key)
    raise MalformedResultError(f"'items' failure has invalid array index {key!r}")


def _parse_disallowed(value: Any) -> DisallowedProperties:
    if value is False:
        return DisallowedProperties(None)
    return DisallowedProperties(_parse_names(ADDITIONAL_PROPERTIES, value))


def _parse_names(keyword: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if _is_string_sequence(value):
        return tuple(value)
    raise MalformedResultError(f"'{keyword}' failure must list property names, got {value!r}")


def _parse_one_of(value: Any) -> OneOfMismatch:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0 or value == 1:
        raise MalformedResultError(f"'oneOf' failure must count zero or several matches, got {value!r}")
    return OneOfMismatch(value)


def _is_string_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value)
