"""Input schema parser unit tests"""

import json

import pytest

from vitae.enums import FieldKind, ItemKind
from vitae.errors import MalformedJSONError
from vitae.form import parse_schema

FULL_SCHEMA = json.dumps(
    {
        "properties": {
            "name": {"type": "string", "description": "Who to greet", "default": "World"},
            "count": {"type": "integer", "default": 3},
            "ratio": {"type": "number", "default": 0.5},
            "loud": {"type": "boolean", "default": True},
            "tags": {"type": "array", "items": {"type": "string"}, "default": ["a", "b"]},
            "sizes": {"type": "array", "items": {"type": "integer", "enum": [1, 2, 4]}},
            "blob": {"type": "object"},
        },
        "required": ["name", "tags"],
    }
)


def test_parse_full_schema_keeps_declaration_order():
    fields, error = parse_schema(FULL_SCHEMA)

    assert error is None
    assert [f.name for f in fields] == [
        "name",
        "count",
        "ratio",
        "loud",
        "tags",
        "sizes",
        "blob",
    ]


def test_parse_full_schema_kinds():
    fields, _ = parse_schema(FULL_SCHEMA)
    by_name = {f.name: f for f in fields}

    assert by_name["name"].kind is FieldKind.STRING
    assert by_name["count"].kind is FieldKind.INTEGER
    assert by_name["ratio"].kind is FieldKind.NUMBER
    assert by_name["loud"].kind is FieldKind.BOOLEAN
    assert by_name["tags"].kind is FieldKind.ARRAY
    assert by_name["tags"].item_kind is ItemKind.STRING
    assert by_name["sizes"].item_kind is ItemKind.INTEGER
    assert by_name["sizes"].enum_values == (1, 2, 4)
    assert by_name["blob"].kind is FieldKind.UNSUPPORTED
    assert by_name["blob"].item_kind is None


def test_parse_required_description_and_defaults():
    fields, _ = parse_schema(FULL_SCHEMA)
    by_name = {f.name: f for f in fields}

    assert by_name["name"].required is True
    assert by_name["tags"].required is True
    assert by_name["count"].required is False
    assert by_name["name"].description == "Who to greet"
    assert by_name["count"].description is None
    assert by_name["name"].default == "World"
    assert by_name["count"].default == 3
    assert by_name["ratio"].default == 0.5
    assert by_name["loud"].default is True
    assert by_name["tags"].default == ["a", "b"]


def test_parse_boolean_default_stays_boolean():
    fields, _ = parse_schema('{"properties": {"flag": {"type": "boolean", "default": false}}}')

    assert fields[0].default is False


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[1, 2, 3]",
        '"a string"',
        "42",
        b"\xff\xfe",
        "",
        "[" * 100000,
    ],
)
def test_parse_malformed_input(raw):
    fields, error = parse_schema(raw)

    assert fields == []
    assert isinstance(error, MalformedJSONError)


def test_parse_accepts_utf8_bytes():
    fields, error = parse_schema('{"properties": {"café": {"type": "string"}}}'.encode("utf-8"))

    assert error is None
    assert fields[0].name == "café"


@pytest.mark.parametrize(
    "raw",
    [
        "{}",
        '{"required": ["x"]}',
        '{"properties": []}',
        '{"properties": null}',
    ],
)
def test_parse_missing_sections_is_empty(raw):
    fields, error = parse_schema(raw)

    assert error is None
    assert fields == []


def test_parse_ignores_invalid_required_entries():
    fields, error = parse_schema(
        '{"properties": {"a": {"type": "string"}}, "required": ["a", 1, null]}'
    )

    assert error is None
    assert fields[0].required is True


def test_parse_required_not_a_list():
    fields, _ = parse_schema('{"properties": {"a": {"type": "string"}}, "required": "a"}')

    assert fields[0].required is False


def test_parse_skips_non_object_properties():
    fields, _ = parse_schema('{"properties": {"a": "string", "b": {"type": "integer"}}}')

    assert [f.name for f in fields] == ["b"]


def test_parse_missing_type_is_unsupported():
    fields, _ = parse_schema('{"properties": {"a": {"description": "no type"}}}')

    assert fields[0].kind is FieldKind.UNSUPPORTED


def test_parse_array_without_items():
    fields, _ = parse_schema('{"properties": {"a": {"type": "array"}}}')

    assert fields[0].kind is FieldKind.ARRAY
    assert fields[0].item_kind is ItemKind.UNSUPPORTED


@pytest.mark.parametrize(
    "items,expected",
    [
        ({"type": "integer", "enum": [3, 5]}, (3, 5)),
        ({"type": "integer", "enum": []}, None),
        ({"type": "integer", "enum": [1, "2"]}, None),
        ({"type": "integer", "enum": [True, False]}, None),
        ({"type": "string", "enum": [1, 2]}, None),
        ({"type": "integer"}, None),
    ],
)
def test_parse_enum_values(items, expected):
    schema = json.dumps({"properties": {"a": {"type": "array", "items": items}}})
    fields, _ = parse_schema(schema)

    assert fields[0].enum_values == expected


def test_parse_drops_non_scalar_defaults():
    schema = json.dumps(
        {
            "properties": {
                "obj": {"type": "string", "default": {"x": 1}},
                "list": {"type": "array", "items": {"type": "string"}, "default": ["a", {}]},
                "notlist": {"type": "array", "items": {"type": "string"}, "default": "a"},
            }
        }
    )
    fields, _ = parse_schema(schema)
    by_name = {f.name: f for f in fields}

    assert by_name["obj"].default is None
    assert by_name["list"].default == ["a"]
    assert by_name["notlist"].default is None


@pytest.mark.parametrize("literal", ["1e400", "-1e400", "Infinity", "NaN"])
def test_parse_drops_non_finite_defaults(literal):
    schema = (
        '{"properties": {'
        f'"x": {{"type": "number", "default": {literal}}}, '
        f'"xs": {{"type": "array", "items": {{"type": "number"}}, "default": [1.5, {literal}]}}'
        "}}"
    )
    fields, error = parse_schema(schema)
    by_name = {f.name: f for f in fields}

    assert error is None
    assert by_name["x"].default is None
    assert by_name["xs"].default == [1.5]


def test_parse_ignores_extra_top_level_keys():
    fields, error = parse_schema(
        '{"$schema": "x", "type": "object", "properties": {"a": {"type": "number"}}}'
    )

    assert error is None
    assert fields[0].kind is FieldKind.NUMBER


def test_parse_is_idempotent():
    first, _ = parse_schema(FULL_SCHEMA)
    second, _ = parse_schema(FULL_SCHEMA)

    assert first == second
