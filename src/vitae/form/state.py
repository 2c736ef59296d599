"""Mutable working set of form values for one parsed schema."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from ..enums import FieldKind, ItemKind
from .fields import FieldDescriptor

logger = logging.getLogger(__name__)

ScalarValue = Union[str, bool]
ItemValue = Union[str, bool, int, None]


def to_text(value) -> str:
    """Render a schema default as editable text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class FormState:
    """Current values of every field of one form.

    Text fields (string, integer, number) hold the raw text entered by the
    user until validation and serialization; boolean fields hold ``bool``.
    Array items follow the same rule per item kind, except enum-backed
    integer items, which hold the selected index into ``enum_values``.
    Unsupported items hold ``None``.
    """

    def __init__(self, fields: Iterable[FieldDescriptor]):
        self.fields: dict[str, FieldDescriptor] = {f.name: f for f in fields}
        self.scalar_values: dict[str, ScalarValue] = {}
        self.array_values: dict[str, list[ItemValue]] = {}

    @classmethod
    def initialize(cls, fields: Iterable[FieldDescriptor]) -> "FormState":
        """Create a state seeded from each field's default value."""
        state = cls(fields)
        for field in state.fields.values():
            if field.is_array:
                defaults = field.default_items
                if defaults:
                    state.array_values[field.name] = [
                        _seed_item(field, value) for value in defaults
                    ]
                else:
                    state.array_values[field.name] = [_seed_item(field, None)]
            elif field.kind is FieldKind.BOOLEAN:
                state.scalar_values[field.name] = (
                    field.default if isinstance(field.default, bool) else False
                )
            elif field.kind.is_textual:
                state.scalar_values[field.name] = to_text(field.default)
        logger.debug(
            f"Initialized form state: {len(state.scalar_values)} scalar field(s), "
            f"{len(state.array_values)} array field(s)"
        )
        return state

    def get_scalar(self, name: str) -> Optional[ScalarValue]:
        self._scalar_field(name)
        return self.scalar_values.get(name)

    def set_scalar(self, name: str, value: ScalarValue) -> None:
        field = self._scalar_field(name)
        if field.kind is FieldKind.UNSUPPORTED:
            raise TypeError(f"Field '{name}' has an unsupported type and holds no value")
        _check_value_type(name, field.kind is FieldKind.BOOLEAN, value)
        self.scalar_values[name] = value

    def array_items(self, name: str) -> list[ItemValue]:
        """Return a copy of the items of an array field."""
        self._array_field(name)
        return list(self.array_values[name])

    def append_array_item(self, name: str) -> int:
        """Append a zero-valued item and return its index."""
        field = self._array_field(name)
        items = self.array_values[name]
        items.append(_seed_item(field, None))
        return len(items) - 1

    def remove_last_array_item(self, name: str) -> bool:
        self._array_field(name)
        items = self.array_values[name]
        if not items:
            return False
        items.pop()
        return True

    def set_array_item(self, name: str, index: int, value: ItemValue) -> None:
        field = self._array_field(name)
        items = self.array_values[name]
        if not 0 <= index < len(items):
            raise IndexError(
                f"Item index {index} out of range for '{name}' ({len(items)} item(s))"
            )

        if field.item_kind is ItemKind.UNSUPPORTED:
            raise TypeError(f"Field '{name}' has an unsupported item type")
        if field.is_enum:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Item '{name}[{index}]' expects an enum selection index")
            if not 0 <= value < len(field.enum_values):
                raise ValueError(
                    f"Enum selection {value} out of range for '{name}' "
                    f"({len(field.enum_values)} choice(s))"
                )
        else:
            _check_value_type(
                f"{name}[{index}]", field.item_kind is ItemKind.BOOLEAN, value
            )
        items[index] = value

    def clear_array(self, name: str) -> None:
        self._array_field(name)
        self.array_values[name] = []

    def _scalar_field(self, name: str) -> FieldDescriptor:
        field = self.fields.get(name)
        if field is None or field.is_array:
            raise KeyError(f"Unknown scalar field: {name}")
        return field

    def _array_field(self, name: str) -> FieldDescriptor:
        field = self.fields.get(name)
        if field is None or not field.is_array:
            raise KeyError(f"Unknown array field: {name}")
        return field


def _check_value_type(label: str, boolean: bool, value) -> None:
    if boolean and not isinstance(value, bool):
        raise TypeError(f"Field '{label}' expects a boolean")
    if not boolean and not isinstance(value, str):
        raise TypeError(f"Field '{label}' expects text")


def _seed_item(field: FieldDescriptor, default) -> ItemValue:
    kind = field.item_kind
    if kind is ItemKind.UNSUPPORTED:
        return None
    if kind is ItemKind.BOOLEAN:
        return default if isinstance(default, bool) else False
    if field.is_enum:
        if isinstance(default, int) and not isinstance(default, bool):
            try:
                return field.enum_values.index(default)
            except ValueError:
                pass
        return 0
    return to_text(default)
