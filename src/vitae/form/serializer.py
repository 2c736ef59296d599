"""Conversion of form values into the request ``input`` payload."""

from __future__ import annotations

from typing import Any, Iterable

from ..enums import FieldKind, ItemKind
from .fields import FieldDescriptor
from .numeric import parse_integer, parse_number
from .state import FormState


def serialize(fields: Iterable[FieldDescriptor], state: FormState) -> dict[str, Any]:
    """Build a JSON-ready mapping of field name to typed value.

    Meant to run after ``validate`` succeeded; numeric text that does not
    parse falls back to ``0``/``0.0``. Keys follow declaration order.
    """
    payload: dict[str, Any] = {}
    for field in fields:
        if field.is_array:
            payload[field.name] = _serialize_items(field, state.array_values.get(field.name, []))
        elif field.kind is not FieldKind.UNSUPPORTED:
            payload[field.name] = _coerce(field.kind.value, state.scalar_values.get(field.name))
    return payload


def _serialize_items(field: FieldDescriptor, items: list) -> list:
    if field.item_kind is ItemKind.UNSUPPORTED:
        return []
    if field.is_enum:
        return [_enum_value(field.enum_values, index) for index in items]
    return [_coerce(field.item_kind.value, value) for value in items]


def _enum_value(enum_values: tuple[int, ...], index):
    if isinstance(index, int) and 0 <= index < len(enum_values):
        return enum_values[index]
    return index


def _coerce(kind: str, value):
    if kind == "boolean":
        return bool(value)
    text = value if isinstance(value, str) else ""
    if kind == "integer":
        return parse_integer(text)
    if kind == "number":
        return parse_number(text)
    return text
