"""Failure keywords understood in validation result trees."""

from __future__ import annotations

from jsonexplain.constants.codes import ErrorCode

PROPERTIES: str = "properties"
PATTERN_PROPERTIES: str = "patternProperties"
ADDITIONAL_PROPERTIES: str = "additionalProperties"
ITEMS: str = "items"
REQUIRED: str = "required"
NOT: str = "not"
ONE_OF: str = "oneOf"
PREFIX_ITEMS: str = "prefixItems"
ADDITIONAL_ITEMS: str = "additionalItems"
DEPENDENCIES: str = "dependencies"
DEPENDENT_REQUIRED: str = "dependentRequired"

# Keywords whose mapping value nests further result nodes keyed by property name.
PROPERTY_BRANCH_KEYWORDS: frozenset[str] = frozenset({PROPERTIES, PATTERN_PROPERTIES, ADDITIONAL_PROPERTIES})

# Leaf keyword -> code. ``required``, ``not``, ``oneOf`` and boolean
# ``additionalProperties`` have dedicated handling in the walker.
LEAF_KEYWORD_CODES: dict[str, ErrorCode] = {
    "type": ErrorCode.INVALID_TYPE,
    "minimum": ErrorCode.MINIMUM,
    "maximum": ErrorCode.MAXIMUM,
    "exclusiveMinimum": ErrorCode.EXCLUSIVE_MINIMUM,
    "exclusiveMaximum": ErrorCode.EXCLUSIVE_MAXIMUM,
    "multipleOf": ErrorCode.MULTIPLE_OF,
    "pattern": ErrorCode.PATTERN,
    "minLength": ErrorCode.MIN_LENGTH,
    "maxLength": ErrorCode.MAX_LENGTH,
    "minItems": ErrorCode.ARRAY_LENGTH_SHORT,
    "maxItems": ErrorCode.ARRAY_LENGTH_LONG,
    "uniqueItems": ErrorCode.ARRAY_UNIQUE,
    "minProperties": ErrorCode.OBJECT_PROPERTIES_MINIMUM,
    "maxProperties": ErrorCode.OBJECT_PROPERTIES_MAXIMUM,
    "enum": ErrorCode.ENUM_MISMATCH,
    "const": ErrorCode.CONST_MISMATCH,
    "anyOf": ErrorCode.ANY_OF_MISSING,
    "format": ErrorCode.FORMAT,
}

# Schema keyword -> result branch for keywords that descend into a document
# property or element.
DESCENT_BRANCHES: dict[str, str] = {
    PROPERTIES: PROPERTIES,
    PATTERN_PROPERTIES: PATTERN_PROPERTIES,
    ADDITIONAL_PROPERTIES: ADDITIONAL_PROPERTIES,
    ITEMS: ITEMS,
    PREFIX_ITEMS: ITEMS,
    ADDITIONAL_ITEMS: ITEMS,
}

# Schema keywords followed in a schema path by a name or index that is not a
# keyword itself.
NAMED_SUBSCHEMA_KEYWORDS: frozenset[str] = frozenset(
    {PROPERTIES, PATTERN_PROPERTIES, PREFIX_ITEMS, "allOf", "anyOf", ONE_OF, DEPENDENCIES, "dependentSchemas"}
)
