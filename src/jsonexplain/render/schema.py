"""Schema lookups that follow the result walk.

The walker only needs the schema to work out which document properties an
``additionalProperties: false`` failure refers to. Sub-schemas are tracked
alongside the walk and local ``$ref`` pointers are followed; anything that
cannot be resolved yields ``None`` (no schema in scope).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, TypeAlias
from urllib.parse import unquote

from jsonexplain.constants.keywords import ADDITIONAL_PROPERTIES, ITEMS, PATTERN_PROPERTIES, PROPERTIES

logger = logging.getLogger(__name__)

Schema: TypeAlias = Mapping[str, Any] | None

# Bound on chained ``$ref`` hops; cyclic refs are rejected upstream.
_MAX_REF_HOPS: int = 64


def resolve(root: Any, schema: Any) -> Schema:
    """Return ``schema`` with local ``$ref`` indirection followed."""
    for _ in range(_MAX_REF_HOPS):
        if not isinstance(schema, Mapping):
            return None
        ref = schema.get("$ref")
        if not isinstance(ref, str):
            return schema
        target = _resolve_pointer(root, ref)
        if target is None:
            logger.debug("Cannot resolve schema reference %s", ref)
            return None
        schema = target
    logger.debug("Gave up resolving schema reference chain after %d hops", _MAX_REF_HOPS)
    return None


def property_schema(root: Any, schema: Schema, keyword: str, name: str) -> Schema:
    """Return the sub-schema governing property ``name``, preferring the reporting ``keyword``."""
    schema = resolve(root, schema)
    if schema is None:
        return None
    if keyword == ADDITIONAL_PROPERTIES:
        return resolve(root, schema.get(ADDITIONAL_PROPERTIES))
    properties = schema.get(PROPERTIES)
    if keyword == PROPERTIES and isinstance(properties, Mapping) and name in properties:
        return resolve(root, properties[name])
    for pattern, subschema in _pattern_properties(schema).items():
        if _matches(pattern, name):
            return resolve(root, subschema)
    if isinstance(properties, Mapping) and name in properties:
        return resolve(root, properties[name])
    return resolve(root, schema.get(ADDITIONAL_PROPERTIES))


def item_schema(root: Any, schema: Schema, position: int) -> Schema:
    """Return the sub-schema governing array element ``position``."""
    schema = resolve(root, schema)
    if schema is None:
        return None
    prefix = schema.get("prefixItems")
    if isinstance(prefix, list):
        if position < len(prefix):
            return resolve(root, prefix[position])
        return resolve(root, schema.get(ITEMS))
    items = schema.get(ITEMS)
    if isinstance(items, list):
        if position < len(items):
            return resolve(root, items[position])
        return resolve(root, schema.get("additionalItems"))
    return resolve(root, items)


def disallowed_properties(root: Any, schema: Schema, value: Any) -> list[str]:
    """List properties of ``value`` that an ``additionalProperties: false`` schema rejects."""
    return undeclared_properties(resolve(root, schema), value)


def undeclared_properties(schema: Schema, value: Any) -> list[str]:
    """List properties of ``value`` matched by neither ``properties`` nor ``patternProperties``.

    ``schema`` is taken as-is, without following ``$ref``. With no schema
    every property of ``value`` counts as undeclared.
    """
    if not isinstance(value, Mapping):
        return []
    declared: Mapping[str, Any] = {}
    patterns: Mapping[str, Any] = {}
    if isinstance(schema, Mapping):
        properties = schema.get(PROPERTIES)
        declared = properties if isinstance(properties, Mapping) else {}
        patterns = _pattern_properties(schema)
    return [
        name
        for name in value
        if name not in declared and not any(_matches(pattern, name) for pattern in patterns)
    ]


def _pattern_properties(schema: Mapping[str, Any]) -> Mapping[str, Any]:
    patterns = schema.get(PATTERN_PROPERTIES)
    return patterns if isinstance(patterns, Mapping) else {}


def _matches(pattern: str, name: str) -> bool:
    try:
        return re.search(pattern, name) is not None
    except re.error:
        logger.debug("Skipping uncompilable patternProperties pattern %r", pattern)
        return False


def _resolve_pointer(root: Any, ref: str) -> Any:
    if not ref.startswith("#"):
        return None
    fragment = unquote(ref[1:])
    if not fragment:
        return root
    if not fragment.startswith("/"):
        return None
    node = root
    for token in fragment[1:].split("/"):
        token = token.replace("~1", "/").replace("~0", "~")
        if isinstance(node, Mapping) and token in node:
            node = node[token]
        elif isinstance(node, list) and token.isdecimal() and int(token) < len(node):
            node = node[int(token)]
        else:
            return None
    return node
