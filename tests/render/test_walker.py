"""Tests for flattening result trees into error records."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from jsonexplain import MISSING, ErrorRecord, RenderOptions, render
from jsonexplain.exceptions import ConfigError, MalformedResultError, UnsupportedKeywordError


@pytest.mark.parametrize("result", [None, {}])
def test_success_renders_nothing(result: Any) -> None:
    assert render({"type": "object"}, {}, result) == []


def test_absent_document_has_no_data() -> None:
    records = render({"type": "object"}, MISSING, {"type": "object"})
    assert [record.to_dict() for record in records] == [
        {
            "code": "VALIDATION_INVALID_TYPE",
            "message": "Invalid type: undefined should be object",
            "path": "$",
        }
    ]


def test_null_document_is_a_value() -> None:
    (record,) = render({"type": "object"}, None, {"type": "object"})
    assert record.data is None
    assert record.has_data
    assert record.message == "Invalid type: null should be object"


def test_required_extends_path_and_omits_data() -> None:
    records = render({}, {"other": 1}, {"required": ["must", "also"]})
    assert records == [
        ErrorRecord(code="VALIDATION_OBJECT_REQUIRED", message="Missing required property: must", path="$.must"),
        ErrorRecord(code="VALIDATION_OBJECT_REQUIRED", message="Missing required property: also", path="$.also"),
    ]
    assert all(not record.has_data for record in records)


def test_deeply_nested_arrays(
    arrays_schema: dict[str, Any],
    arrays_document: dict[str, Any],
    arrays_result: dict[str, Any],
) -> None:
    records = render(arrays_schema, arrays_document, arrays_result)
    assert [record.to_dict() for record in records] == [
        {
            "code": "VALIDATION_INVALID_TYPE",
            "message": "Invalid type: integer should be boolean",
            "data": 0,
            "path": "$.one[0].two[1].ok",
        }
    ]


def test_raw_paths_when_formatting_disabled(
    arrays_schema: dict[str, Any],
    arrays_document: dict[str, Any],
    arrays_result: dict[str, Any],
) -> None:
    (record,) = render(arrays_schema, arrays_document, arrays_result, {"formatPath": False})
    assert record.path == ["one", 0, "two", 1, "ok"]


def test_raw_path_for_single_property() -> None:
    (record,) = render({}, {"one": "x"}, {"properties": {"one": {"type": "integer"}}}, RenderOptions(format_path=False))
    assert record.path == ["one"]


def test_raw_root_path_is_empty_list() -> None:
    (record,) = render({}, 1, {"type": "string"}, {"format_path": False})
    assert record.path == []


def test_quoted_property_names() -> None:
    result = {"properties": {"one": {"properties": {"two three": {"type": "string"}}}}}
    (record,) = render({}, {"one": {"two three": 5}}, result)
    assert record.path == '$.one["two three"]'
    assert record.data == 5


def test_additional_properties_false_derived_from_schema() -> None:
    schema = {"type": "object", "additionalProperties": False}
    records = render(schema, {"one": 1}, {"additionalProperties": False})
    assert [record.to_dict() for record in records] == [
        {
            "code": "VALIDATION_ADDITIONAL_PROPERTIES",
            "message": "Additional properties not allowed: one",
            "data": 1,
            "path": "$.one",
        }
    ]


def test_additional_properties_false_skips_declared_and_pattern_properties() -> None:
    schema = {
        "properties": {"keep": {}},
        "patternProperties": {"^x-": {}},
        "additionalProperties": False,
    }
    document = {"keep": 1, "x-ok": 2, "drop": 3, "also drop": 4}
    records = render(schema, document, {"additionalProperties": False})
    assert [(record.path, record.data) for record in records] == [("$.drop", 3), ('$["also drop"]', 4)]


def test_additional_properties_false_follows_refs() -> None:
    schema = {
        "properties": {"one": {"$ref": "#/definitions/strict"}},
        "definitions": {"strict": {"properties": {"a": {}}, "additionalProperties": False}},
    }
    document = {"one": {"a": 1, "b": 2}}
    result = {"properties": {"one": {"additionalProperties": False}}}
    (record,) = render(schema, document, result)
    assert record.path == "$.one.b"
    assert record.data == 2


def test_additional_properties_false_under_items_and_additional_schema() -> None:
    schema = {
        "additionalProperties": {
            "type": "array",
            "items": {"properties": {"id": {}}, "additionalProperties": False},
        }
    }
    document = {"rows": [{"id": 1}, {"id": 2, "extra": True}]}
    result = {"additionalProperties": {"rows": {"items": {1: {"additionalProperties": False}}}}}
    (record,) = render(schema, document, result)
    assert record.path == "$.rows[1].extra"
    assert record.data is True


def test_explicit_disallowed_names() -> None:
    records = render({}, {"a": 1, "b": 2}, {"additionalProperties": ["b"]})
    assert [(record.path, record.data) for record in records] == [("$.b", 2)]


def test_additional_properties_schema_recurses() -> None:
    document = {"one": "1", "two": {"one": "1", "two": 2}}
    result = {
        "properties": {"one": {"type": "integer"}},
        "additionalProperties": {
            "two": {
                "properties": {"one": {"type": "integer"}},
                "additionalProperties": {"two": {"type": "string"}},
            }
        },
    }
    records = render({}, document, result)
    assert [(record.path, record.message) for record in records] == [
        ("$.one", "Invalid type: string should be integer"),
        ("$.two.one", "Invalid type: string should be integer"),
        ("$.two.two", "Invalid type: integer should be string"),
    ]


def test_sibling_branches_keep_declaration_order() -> None:
    document = {"b": {"x": 1}, "a": {"y": 2}}
    result = {
        "properties": {
            "b": {"additionalProperties": ["x"]},
            "a": {"additionalProperties": ["y"], "minProperties": 2},
        },
        "maxProperties": 1,
    }
    records = render({}, document, result)
    assert [(record.code, record.path) for record in records] == [
        ("VALIDATION_ADDITIONAL_PROPERTIES", "$.b.x"),
        ("VALIDATION_ADDITIONAL_PROPERTIES", "$.a.y"),
        ("VALIDATION_OBJECT_PROPERTIES_MINIMUM", "$.a"),
        ("VALIDATION_OBJECT_PROPERTIES_MAXIMUM", "$"),
    ]


def test_not_does_not_walk_nested_detail() -> None:
    (record,) = render({}, "abc", {"not": {"type": "string", "pattern": "c$"}})
    assert record.code == "VALIDATION_NOT_PASSED"
    assert record.data == "abc"


def test_one_of_variants() -> None:
    missing, multiple = (render({}, 1, {"oneOf": count})[0] for count in (0, 3))
    assert missing.code == "VALIDATION_ONE_OF_MISSING"
    assert multiple.code == "VALIDATION_ONE_OF_MULTIPLE"


def test_sized_messages_use_current_value() -> None:
    result = {"properties": {"s": {"minLength": 5}, "a": {"maxItems": 1}, "o": {"maxProperties": 0}}}
    document = {"s": "abc", "a": [1, 2], "o": {"k": 1}}
    messages = [record.message for record in render({}, document, result)]
    assert messages == [
        "String is too short (3 chars), minimum 5",
        "Array is too long (2), maximum 1",
        "Too many properties defined (1), maximum 0",
    ]


def test_sized_keyword_on_unsized_value_is_malformed() -> None:
    with pytest.raises(MalformedResultError, match="minLength"):
        render({}, 5, {"minLength": 1})


def test_failure_under_absent_property_renders_undefined() -> None:
    (record,) = render({}, {}, {"properties": {"gone": {"type": "string"}}})
    assert record.message == "Invalid type: undefined should be string"
    assert not record.has_data


def test_unknown_keyword_is_fatal() -> None:
    with pytest.raises(UnsupportedKeywordError):
        render({}, {}, {"properties": {"one": {"contains": {}}}})


def test_bad_options_rejected() -> None:
    with pytest.raises(ConfigError, match="formatPath"):
        render({}, 1, {"type": "string"}, {"formatPth": False})


def test_render_is_idempotent_and_leaves_inputs_untouched(
    arrays_schema: dict[str, Any],
    arrays_document: dict[str, Any],
    arrays_result: dict[str, Any],
) -> None:
    snapshot = copy.deepcopy((arrays_schema, arrays_document, arrays_result))
    first = render(arrays_schema, arrays_document, arrays_result, {"formatPath": False})
    second = render(arrays_schema, arrays_document, arrays_result, {"formatPath": False})
    assert first == second
    assert first[0].path is not second[0].path
    assert (arrays_schema, arrays_document, arrays_result) == snapshot


def test_small_numbers_print_in_decimal_form() -> None:
    (record,) = render({}, 0.00001, {"minimum": 0.001})
    assert record.message == "Value 0.00001 is less than minimum 0.001"
