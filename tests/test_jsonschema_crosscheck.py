"""Accept/reject decisions compared with the ``jsonschema`` reference validator.

The corpus sticks to keywords whose semantics both implementations share:
no ``oneOf`` with overlapping branches, no fractional ``multipleOf`` (the
reference divides floats) and no multi-codepoint strings (the reference counts
code points).
"""

import pytest
from jsonschema import Draft202012Validator

from schema_compiler import convert_json_schema


CASES = [
    ("empty", {}, [None, 1, "a", [], {}]),
    ("string_bounds", {"type": "string", "minLength": 2, "maxLength": 3}, ["a", "ab", "abcd", 1]),
    ("pattern", {"pattern": "^[a-z]+$"}, ["abc", "aB", 5, ""]),
    ("integer", {"type": "integer", "minimum": 0, "exclusiveMaximum": 10}, [0, 9, 10, -1, 2.0, 2.5, True]),
    ("multiple_of", {"multipleOf": 3}, [0, 3, 4, 9.0, "3"]),
    ("type_list", {"type": ["number", "null"]}, [1, None, "1", False]),
    ("const_scalar", {"const": 1}, [1, 1.0, True, "1"]),
    ("const_object", {"const": {"a": [1, 2]}}, [{"a": [1, 2]}, {"a": [2, 1]}, {"a": [1, 2], "b": 1}]),
    ("enum_mixed", {"enum": ["a", 2, None, [1]]}, ["a", 2, None, [1], [2], "b", False]),
    ("array_items", {"type": "array", "items": {"type": "string"}, "minItems": 1}, [[], ["a"], ["a", 1], "a"]),
    ("prefix_items", {"prefixItems": [{"type": "number"}, {"type": "string"}], "items": False},
     [[1], [1, "a"], [1, "a", 2], ["a"], {}]),
    ("contains", {"contains": {"type": "integer"}, "minContains": 2, "maxContains": 3},
     [[1], [1, 2], [1, 2, 3, 4], ["a", 1, 2], "x"]),
    ("unique", {"uniqueItems": True}, [[1, 2], [1, 1], [{"a": 1}, {"a": 1}], [[1], [1, 2]]]),
    ("object", {
        "type": "object",
        "properties": {"a": {"type": "integer"}, "b": {"type": "string"}},
        "required": ["a"],
        "additionalProperties": False,
    }, [{"a": 1}, {"a": 1, "b": "x"}, {"b": "x"}, {"a": 1, "c": 1}, {"a": "1"}, []]),
    ("additional_schema", {"properties": {"a": {}}, "additionalProperties": {"type": "number"}},
     [{"a": "x", "b": 1}, {"b": "x"}, "x"]),
    ("pattern_properties", {
        "patternProperties": {"^s_": {"type": "string"}, "^n_": {"type": "number"}},
        "additionalProperties": False,
    }, [{"s_a": "x", "n_b": 1}, {"s_a": 1}, {"other": 1}, {}]),
    ("property_counts", {"minProperties": 1, "maxProperties": 2}, [{}, {"a": 1}, {"a": 1, "b": 2, "c": 3}, []]),
    ("all_of", {"allOf": [{"type": "number"}, {"maximum": 5}, {"minimum": 1}]}, [1, 5, 6, 0, "a"]),
    ("any_of", {"anyOf": [{"type": "string", "maxLength": 1}, {"type": "number"}]}, ["a", "ab", 3, None]),
    ("one_of_disjoint", {"oneOf": [{"type": "string"}, {"type": "array"}]}, ["a", [], 1]),
    ("not", {"not": {"type": ["string", "number"]}}, ["a", 1, None, []]),
    ("nested", {
        "type": "object",
        "properties": {
            "tags": {"type": "array", "items": {"enum": ["x", "y"]}, "uniqueItems": True},
            "meta": {"type": "object", "required": ["id"], "properties": {"id": {"type": "integer"}}},
        },
    }, [{"tags": ["x", "y"]}, {"tags": ["x", "x"]}, {"tags": ["z"]}, {"meta": {}}, {"meta": {"id": 1}}]),
    ("boolean_subschemas", {"properties": {"a": True, "b": False}}, [{"a": 1}, {"b": 1}, {}]),
]


def _pairs():
    for desc, schema, instances in CASES:
        for idx, instance in enumerate(instances):
            yield pytest.param(schema, instance, id=f"{desc}-{idx}")


@pytest.mark.parametrize("schema,instance", list(_pairs()))
def test_agrees_with_reference_implementation(schema, instance):
    expected = Draft202012Validator(schema).is_valid(instance)
    assert convert_json_schema(schema).is_valid(instance) is expected
