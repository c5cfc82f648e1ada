"""Stable error codes and message templates for rendered validation failures."""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Closed set of codes carried by rendered error records."""

    INVALID_TYPE = "VALIDATION_INVALID_TYPE"
    OBJECT_REQUIRED = "VALIDATION_OBJECT_REQUIRED"
    MINIMUM = "VALIDATION_MINIMUM"
    MAXIMUM = "VALIDATION_MAXIMUM"
    EXCLUSIVE_MINIMUM = "VALIDATION_EXCLUSIVE_MINIMUM"
    EXCLUSIVE_MAXIMUM = "VALIDATION_EXCLUSIVE_MAXIMUM"
    MULTIPLE_OF = "VALIDATION_MULTIPLE_OF"
    PATTERN = "VALIDATION_PATTERN"
    MIN_LENGTH = "VALIDATION_MIN_LENGTH"
    MAX_LENGTH = "VALIDATION_MAX_LENGTH"
    ARRAY_LENGTH_SHORT = "VALIDATION_ARRAY_LENGTH_SHORT"
    ARRAY_LENGTH_LONG = "VALIDATION_ARRAY_LENGTH_LONG"
    ARRAY_UNIQUE = "VALIDATION_ARRAY_UNIQUE"
    OBJECT_PROPERTIES_MINIMUM = "VALIDATION_OBJECT_PROPERTIES_MINIMUM"
    OBJECT_PROPERTIES_MAXIMUM = "VALIDATION_OBJECT_PROPERTIES_MAXIMUM"
    ENUM_MISMATCH = "VALIDATION_ENUM_MISMATCH"
    CONST_MISMATCH = "VALIDATION_CONST_MISMATCH"
    NOT_PASSED = "VALIDATION_NOT_PASSED"
    ANY_OF_MISSING = "VALIDATION_ANY_OF_MISSING"
    ONE_OF_MISSING = "VALIDATION_ONE_OF_MISSING"
    ONE_OF_MULTIPLE = "VALIDATION_ONE_OF_MULTIPLE"
    ADDITIONAL_PROPERTIES = "VALIDATION_ADDITIONAL_PROPERTIES"
    FORMAT = "VALIDATION_FORMAT"


# Placeholders are filled with already-rendered strings.
MESSAGE_TEMPLATES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_TYPE: "Invalid type: {actual} should be {expected}",
    ErrorCode.OBJECT_REQUIRED: "Missing required property: {property}",
    ErrorCode.MINIMUM: "Value {value} is less than minimum {limit}",
    ErrorCode.MAXIMUM: "Value {value} is greater than maximum {limit}",
    ErrorCode.EXCLUSIVE_MINIMUM: "Value {value} is less than or equal to exclusive minimum {limit}",
    ErrorCode.EXCLUSIVE_MAXIMUM: "Value {value} is greater than or equal to exclusive maximum {limit}",
    ErrorCode.MULTIPLE_OF: "Value {value} is not a multiple of {limit}",
    ErrorCode.PATTERN: "String does not match pattern: {pattern}",
    ErrorCode.MIN_LENGTH: "String is too short ({length} chars), minimum {limit}",
    ErrorCode.MAX_LENGTH: "String is too long ({length} chars), maximum {limit}",
    ErrorCode.ARRAY_LENGTH_SHORT: "Array is too short ({length}), minimum {limit}",
    ErrorCode.ARRAY_LENGTH_LONG: "Array is too long ({length}), maximum {limit}",
    ErrorCode.ARRAY_UNIQUE: "Array items are not unique",
    ErrorCode.OBJECT_PROPERTIES_MINIMUM: "Too few properties defined ({length}), minimum {limit}",
    ErrorCode.OBJECT_PROPERTIES_MAXIMUM: "Too many properties defined ({length}), maximum {limit}",
    ErrorCode.ENUM_MISMATCH: "No enum match ({value}), expects: {allowed}",
    ErrorCode.CONST_MISMATCH: "Value {value} does not equal constant {expected}",
    ErrorCode.NOT_PASSED: 'Data matches schema from "not"',
    ErrorCode.ANY_OF_MISSING: 'Data does not match any schemas from "anyOf"',
    ErrorCode.ONE_OF_MISSING: 'Data does not match any schemas from "oneOf"',
    ErrorCode.ONE_OF_MULTIPLE: 'Data is valid against more than one schema from "oneOf"',
    ErrorCode.ADDITIONAL_PROPERTIES: "Additional properties not allowed: {property}",
    ErrorCode.FORMAT: "Value does not satisfy format: {format}",
}

INVALID_TYPE_UNION_PREFIX: str = "one of "
TYPE_UNION_SEPARATOR: str = ","
ENUM_SEPARATOR: str = ", "
