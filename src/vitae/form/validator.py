"""Form validation."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..enums import FieldKind, ItemKind
from ..errors import (
    FormValidationError,
    MissingRequiredArrayItemError,
    MissingRequiredError,
    TypeMismatchError,
)
from .fields import FieldDescriptor
from .numeric import is_integer, is_number
from .state import FormState

logger = logging.getLogger(__name__)


def validate(
    fields: Iterable[FieldDescriptor], state: FormState
) -> Optional[FormValidationError]:
    """Return the first violation in ``state``, or None when it is valid.

    Checks run in three passes over the fields in declaration order:
    required fields, then scalar type checks, then array item type checks.
    Only arrays listed as required must hold at least one item. Empty text
    is never a type error, and boolean or enum-backed values are always
    well typed.
    """
    fields = list(fields)
    error = (
        _check_required(fields, state)
        or _check_scalar_types(fields, state)
        or _check_item_types(fields, state)
    )
    if error is not None:
        logger.debug(f"Form validation failed: {error!r}")
    return error


def _check_required(fields, state: FormState) -> Optional[FormValidationError]:
    for field in fields:
        if not field.required:
            continue
        if field.is_array:
            if not state.array_values.get(field.name):
                return MissingRequiredArrayItemError(field.name)
        elif field.kind is FieldKind.UNSUPPORTED:
            return MissingRequiredArrayItemError(field.name)
        elif field.kind.is_textual and state.scalar_values.get(field.name, "") == "":
            return MissingRequiredError(field.name)
    return None


def _check_scalar_types(fields, state: FormState) -> Optional[FormValidationError]:
    for field in fields:
        if field.kind not in (FieldKind.INTEGER, FieldKind.NUMBER):
            continue
        text = state.scalar_values.get(field.name, "")
        error = _check_text(field.name, field.kind.value, text)
        if error is not None:
            return error
    return None


def _check_item_types(fields, state: FormState) -> Optional[FormValidationError]:
    for field in fields:
        if not field.is_array or field.is_enum:
            continue
        if field.item_kind not in (ItemKind.INTEGER, ItemKind.NUMBER):
            continue
        for index, text in enumerate(state.array_values.get(field.name, [])):
            error = _check_text(f"{field.name}[{index}]", field.item_kind.value, text)
            if error is not None:
                return error
    return None


def _check_text(label: str, expected: str, text) -> Optional[TypeMismatchError]:
    if not text:
        return None
    parses = is_integer(text) if expected == "integer" else is_number(text)
    if not parses:
        return TypeMismatchError(label, expected)
    return None
