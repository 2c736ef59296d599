"""Enumeration unit tests"""

import pytest

from vitae.enums import FieldKind, ItemKind


@pytest.mark.parametrize(
    "value,expected",
    [
        ("string", FieldKind.STRING),
        ("integer", FieldKind.INTEGER),
        ("number", FieldKind.NUMBER),
        ("boolean", FieldKind.BOOLEAN),
        ("array", FieldKind.ARRAY),
        ("object", FieldKind.UNSUPPORTED),
        ("String", FieldKind.UNSUPPORTED),
        (None, FieldKind.UNSUPPORTED),
        (["string", "null"], FieldKind.UNSUPPORTED),
    ],
)
def test_field_kind_from_schema(value, expected):
    assert FieldKind.from_schema(value) is expected


def test_item_kind_has_no_array():
    assert ItemKind.from_schema("array") is ItemKind.UNSUPPORTED
    assert ItemKind.from_schema("integer") is ItemKind.INTEGER


def test_textual_kinds():
    assert {k for k in FieldKind if k.is_textual} == {
        FieldKind.STRING,
        FieldKind.INTEGER,
        FieldKind.NUMBER,
    }
