"""Kind admissibility and per-kind keywords, exercised through the converter."""

import io

import pytest

from schema_compiler import SchemaConstructionError, convert_json_schema
from conftest import Upload, accepts, messages


def check(schema, accepted, rejected):
    validator = convert_json_schema(schema)
    for value in accepted:
        assert validator.is_valid(value), f"{schema} should accept {value!r}"
    for value in rejected:
        assert not validator.is_valid(value), f"{schema} should reject {value!r}"


# =====================================================================
# const / enum
# =====================================================================

CONST_CASES = [
    ("string", {"const": "a"}, ["a"], ["b", 1, None]),
    ("number", {"const": 1}, [1, 1.0], [True, "1", 2]),
    ("null", {"const": None}, [None], [0, False, "null"]),
    ("array", {"const": [1, 2]}, [[1, 2], [1.0, 2]], [[2, 1], [1], "x"]),
    ("object", {"const": {"a": 1}}, [{"a": 1}], [{"a": 1, "b": 2}, {"a": 2}, []]),
    ("conflicting_type", {"const": "a", "type": "number"}, [], ["a", 1]),
]


@pytest.mark.parametrize("desc,schema,accepted,rejected", CONST_CASES, ids=[c[0] for c in CONST_CASES])
def test_const(desc, schema, accepted, rejected):
    check(schema, accepted, rejected)


ENUM_CASES = [
    ("strings_and_number", {"enum": ["a", "b", 1]}, ["a", "b", 1], ["c", 2, True, None]),
    ("with_null", {"enum": [None, "x"]}, [None, "x"], ["y", 0]),
    ("composite", {"enum": [[1], {"a": 1}, "x"]}, [[1], {"a": 1}, "x"], [[2], {"a": 2}, "y", 1]),
    ("empty", {"enum": []}, [], ["a", 0, None, [], {}]),
    ("empty_with_type", {"type": "string", "enum": []}, ["a"], [1]),
    ("integer_type", {"type": "integer", "enum": [1, 1.5, 2]}, [1, 2], [1.5, 3]),
]


@pytest.mark.parametrize("desc,schema,accepted,rejected", ENUM_CASES, ids=[c[0] for c in ENUM_CASES])
def test_enum(desc, schema, accepted, rejected):
    check(schema, accepted, rejected)


def test_const_array_still_allows_tuple_items():
    check(
        {"const": ["a", 1], "items": [{"type": "string"}, {"type": "number"}]},
        accepted=[["a", 1]],
        rejected=[["a", 2], ["b", 1]],
    )


# =====================================================================
# type
# =====================================================================

TYPE_CASES = [
    ("string", {"type": "string"}, ["", "a"], [1, None, b"a"]),
    ("list", {"type": ["string", "null"]}, ["a", None], [1, []]),
    ("integer", {"type": "integer"}, [3, -3, 3.0], [3.5, True, "3"]),
    ("integer_or_number", {"type": ["integer", "number"]}, [3, 3.5], ["3"]),
    ("number", {"type": "number"}, [1, 2.5], [True, "1", None]),
    ("boolean", {"type": "boolean"}, [True, False], [0, "true"]),
    ("null", {"type": "null"}, [None], [0, ""]),
    ("array", {"type": "array"}, [[], [1, "a"]], [{}, "a"]),
    ("object", {"type": "object"}, [{}, {"a": 1}], [[], "a"]),
    ("unknown_name", {"type": "whatever"}, [], ["a", 1, None]),
]


@pytest.mark.parametrize("desc,schema,accepted,rejected", TYPE_CASES, ids=[c[0] for c in TYPE_CASES])
def test_type(desc, schema, accepted, rejected):
    check(schema, accepted, rejected)


def test_integer_message():
    assert messages(convert_json_schema({"type": "integer"}), 1.5) == ["Expected integer, received float"]


# =====================================================================
# File
# =====================================================================

FILE_SCHEMA = {
    "type": "string",
    "format": "binary",
    "contentEncoding": "binary",
    "minLength": 2,
    "maxLength": 4,
}


def test_file_schema_replaces_string():
    check(FILE_SCHEMA, accepted=[b"abc", io.BytesIO(b"ab")], rejected=["abc", b"a", io.BytesIO(b"abcdef")])


def test_file_schema_media_type():
    schema = dict(FILE_SCHEMA, contentMediaType="image/png")
    check(schema, accepted=[Upload(b"abc", "image/png")], rejected=[Upload(b"abc", "image/gif"), b"abc"])


def test_binary_format_alone_is_a_plain_string():
    check({"type": "string", "format": "binary"}, accepted=["abc"], rejected=[b"abc"])


# =====================================================================
# Implicit kinds
# =====================================================================

IMPLICIT_CASES = [
    ("string_keyword", {"minLength": 2}, ["ab", 5, None, [1]], ["a"]),
    ("array_keyword", {"minItems": 1}, [[1], "x", {}], [[]]),
    ("object_keyword", {"required": ["a"]}, [{"a": None}, 1, "x"], [{}]),
    ("number_keyword", {"minimum": 5}, [5, "x", []], [4]),
]


@pytest.mark.parametrize("desc,schema,accepted,rejected", IMPLICIT_CASES, ids=[c[0] for c in IMPLICIT_CASES])
def test_implicit_kinds(desc, schema, accepted, rejected):
    check(schema, accepted, rejected)


# =====================================================================
# Strings
# =====================================================================

@pytest.mark.parametrize("value", [
    "e\u0301",                         # e + combining acute accent
    "\U0001F44D\U0001F3FD",             # thumbs up + skin tone modifier
    "\U0001F468\u200d\U0001F469\u200d\U0001F467",  # family (ZWJ sequence)
    "\U0001F1EF\U0001F1F5",             # regional indicator flag
])
def test_length_counts_grapheme_clusters(value):
    assert accepts({"type": "string", "maxLength": 1}, value)
    assert not accepts({"type": "string", "minLength": 2}, value)


def test_length_bounds():
    check({"type": "string", "minLength": 2, "maxLength": 3}, accepted=["ab", "abc"], rejected=["a", "abcd"])


def test_pattern_is_a_search():
    check({"type": "string", "pattern": "b"}, accepted=["abc", "b"], rejected=["ac"])
    check({"type": "string", "pattern": "^a$"}, accepted=["a"], rejected=["ab"])


def test_pattern_supports_unicode_properties():
    check({"type": "string", "pattern": "^\\p{L}+$"}, accepted=["h\u00e9llo"], rejected=["h3llo"])


def test_malformed_pattern_raises():
    with pytest.raises(SchemaConstructionError):
        convert_json_schema({"type": "string", "pattern": "("})


def test_malformed_pattern_is_ignored_when_strings_are_excluded():
    assert accepts({"type": "number", "pattern": "("}, 1)


def test_nested_malformed_pattern_raises():
    with pytest.raises(SchemaConstructionError):
        convert_json_schema({"type": "object", "properties": {"a": {"pattern": "[a-"}}})


# =====================================================================
# Numbers
# =====================================================================

NUMBER_CASES = [
    ("minimum", {"minimum": 1}, [1, 2.5], [0.9]),
    ("maximum", {"maximum": 1}, [1, -4], [1.01]),
    ("exclusive_minimum", {"exclusiveMinimum": 1}, [1.01], [1]),
    ("exclusive_maximum", {"exclusiveMaximum": 1}, [0.99], [1]),
    ("draft4_exclusive_minimum", {"minimum": 1, "exclusiveMinimum": True}, [1.1], [1]),
    ("draft4_exclusive_maximum", {"maximum": 1, "exclusiveMaximum": True}, [0.9], [1]),
    ("multiple_of_int", {"multipleOf": 3}, [0, 9, 9.0, -3], [10, 9.5]),
    ("multiple_of_decimal", {"multipleOf": 0.01}, [0.07, 19.99, 3], [0.001, 1.005]),
    ("multiple_of_small", {"multipleOf": 0.0001}, [0.0075, 12.3456], [0.00001]),
    ("multiple_of_zero", {"multipleOf": 0}, [], [0, 1, 0.5]),
]


@pytest.mark.parametrize("desc,schema,accepted,rejected", NUMBER_CASES, ids=[c[0] for c in NUMBER_CASES])
def test_number_constraints(desc, schema, accepted, rejected):
    check(dict(schema, type="number"), accepted, rejected)


def test_number_constraints_ignore_other_kinds():
    check({"minimum": 10, "multipleOf": 0}, accepted=["a", None, [], {}], rejected=[10, 0])


# =====================================================================
# Tuples
# =====================================================================

PAIR = [{"type": "string"}, {"type": "number"}]


def test_tuple_positions():
    check(
        {"type": "array", "items": PAIR},
        accepted=[["a", 1]],
        rejected=[["a"], ["a", 1, 2], [1, "a"], []],
    )


def test_tuple_additional_items():
    check(
        {"type": "array", "items": PAIR, "additionalItems": {"type": "boolean"}},
        accepted=[["a", 1], ["a", 1, True, False]],
        rejected=[["a", 1, "x"], ["a"]],
    )
    check(
        {"type": "array", "items": PAIR, "additionalItems": True, "maxItems": 3},
        accepted=[["a", 1, None]],
        rejected=[["a", 1, None, None]],
    )


@pytest.mark.parametrize("bounds", [{"minItems": 3}, {"maxItems": 1}], ids=["min_above", "max_below"])
def test_impossible_tuple_without_type_keeps_other_kinds(bounds):
    check(dict({"items": PAIR}, **bounds), accepted=["x", 1, {}], rejected=[["a", 1], []])


def test_tuple_bounds_matching_length():
    check({"type": "array", "items": PAIR, "minItems": 2, "maxItems": 2}, accepted=[["a", 1]], rejected=[["a"]])


def test_tuple_without_type_leaves_other_kinds():
    check({"items": PAIR}, accepted=[["a", 1], "x", None], rejected=[["a"]])


# =====================================================================
# Arrays
# =====================================================================

ARRAY_CASES = [
    ("items_schema", {"items": {"type": "number"}, "minItems": 1, "maxItems": 2},
     [[1], [1, 2]], [[], [1, 2, 3], ["a"]]),
    ("items_false", {"items": False}, [[]], [[1]]),
    ("items_false_with_min", {"items": False, "minItems": 1}, [], [[], [1]]),
    ("items_true", {"items": True}, [[1, "a", None]], [{}]),
    ("nested", {"items": {"type": "array", "items": {"type": "string"}}},
     [[["a"], []]], [[["a", 1]], ["a"]]),
]


@pytest.mark.parametrize("desc,schema,accepted,rejected", ARRAY_CASES, ids=[c[0] for c in ARRAY_CASES])
def test_array_constraints(desc, schema, accepted, rejected):
    check(dict(schema, type="array"), accepted, rejected)


def test_array_issue_paths():
    validator = convert_json_schema({"type": "array", "items": {"type": "object", "required": ["id"]}})
    issues = validator.validate([{"id": 1}, {}]).issues
    assert [(issue.path, issue.message) for issue in issues] == [("/1/id", "Missing required field 'id'")]


# =====================================================================
# Objects
# =====================================================================

PERSON = {
    "type": "object",
    "properties": {"name": {"type": "string"}, "age": {"type": "integer", "minimum": 0}},
    "required": ["name"],
}


def test_object_properties_and_required():
    check(PERSON, accepted=[{"name": "a"}, {"name": "a", "age": 3, "x": 1}],
          rejected=[{}, {"name": 1}, {"name": "a", "age": -1}, {"name": "a", "age": 1.5}])


def test_object_additional_properties_false():
    check(dict(PERSON, additionalProperties=False), accepted=[{"name": "a", "age": 1}],
          rejected=[{"name": "a", "x": 1}])


def test_object_additional_properties_schema():
    check(dict(PERSON, additionalProperties={"type": "boolean"}), accepted=[{"name": "a", "x": True}],
          rejected=[{"name": "a", "x": 1}])


def test_required_without_declared_property():
    check({"type": "object", "required": ["a", "b"]}, accepted=[{"a": None, "b": 0}], rejected=[{"a": 1}])


def test_object_defaults_fill_output():
    validator = convert_json_schema({
        "type": "object",
        "properties": {"port": {"type": "integer", "default": 80}, "host": {"type": "string"}},
    })
    assert validator.parse({}) == {"port": 80}
    assert validator.parse({"port": 1, "host": "h"}) == {"port": 1, "host": "h"}


def test_property_count_ignores_filled_defaults():
    validator = convert_json_schema({"type": "object", "maxProperties": 0, "properties": {"a": {"default": 1}}})
    assert validator.parse({}) == {"a": 1}


def test_object_missing_required_message():
    validator = convert_json_schema(PERSON)
    issues = validator.validate({}).issues
    assert [(issue.path, issue.message) for issue in issues] == [("/name", "Missing required field 'name'")]
