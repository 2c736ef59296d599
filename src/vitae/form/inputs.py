"""Applying textual ``NAME=VALUE`` input onto a form state."""

from __future__ import annotations

import logging
from typing import Iterable

from ..enums import FieldKind, ItemKind
from ..errors import FormInputException
from .fields import FieldDescriptor
from .state import FormState

logger = logging.getLogger(__name__)

TRUE_WORDS = frozenset({"true", "yes", "y", "on", "1"})
FALSE_WORDS = frozenset({"false", "no", "n", "off", "0"})


def parse_assignment(pair: str) -> tuple[str, str]:
    name, sep, value = pair.partition("=")
    name = name.strip()
    if not sep or not name:
        raise FormInputException(f"Invalid assignment '{pair}': expected NAME=VALUE")
    return name, value


def parse_bool(text: str) -> bool:
    word = text.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise FormInputException(f"Invalid boolean value '{text}': expected true or false")


def enum_index(field: FieldDescriptor, text: str) -> int:
    """Map an enum value given as text to its selection index."""
    try:
        return field.enum_values.index(int(text.strip()))
    except ValueError:
        choices = ", ".join(str(v) for v in field.enum_values)
        raise FormInputException(
            f"Invalid value '{text}' for '{field.name}': choose one of {choices}"
        ) from None


def set_scalar_text(state: FormState, field: FieldDescriptor, text: str) -> None:
    if field.kind is FieldKind.UNSUPPORTED:
        raise FormInputException(f"Field '{field.name}' has an unsupported type")
    if field.kind is FieldKind.BOOLEAN:
        state.set_scalar(field.name, parse_bool(text))
    else:
        state.set_scalar(field.name, text)


def set_item_text(state: FormState, field: FieldDescriptor, index: int, text: str) -> None:
    if field.item_kind is ItemKind.UNSUPPORTED:
        raise FormInputException(f"Field '{field.name}' has an unsupported item type")
    if field.is_enum:
        state.set_array_item(field.name, index, enum_index(field, text))
    elif field.item_kind is ItemKind.BOOLEAN:
        state.set_array_item(field.name, index, parse_bool(text))
    else:
        state.set_array_item(field.name, index, text)


def replace_items(state: FormState, field: FieldDescriptor, texts: list[str]) -> None:
    """Replace every item of an array field; ``[""]`` clears it."""
    state.clear_array(field.name)
    if texts == [""]:
        return
    for text in texts:
        index = state.append_array_item(field.name)
        set_item_text(state, field, index, text)


def apply_assignments(state: FormState, assignments: Iterable[str]) -> None:
    """Apply ``NAME=VALUE`` strings to ``state``.

    Repeated assignments to an array field become its items, in order. The
    last assignment to a scalar field wins.
    """
    grouped: dict[str, list[str]] = {}
    for pair in assignments:
        name, value = parse_assignment(pair)
        grouped.setdefault(name, []).append(value)

    for name, values in grouped.items():
        field = state.fields.get(name)
        if field is None:
            raise FormInputException(f"Unknown field '{name}'")
        if field.is_array:
            replace_items(state, field, values)
        else:
            set_scalar_text(state, field, values[-1])
        logger.debug(f"Applied {len(values)} value(s) to '{name}'")
