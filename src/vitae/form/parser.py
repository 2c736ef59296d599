"""Input schema parsing."""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Optional

from ..enums import FieldKind, ItemKind
from ..errors import MalformedJSONError, SchemaParseError
from .fields import FieldDescriptor

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (bool, int, float, str)


def parse_schema(
    raw_schema: str | bytes,
) -> tuple[list[FieldDescriptor], Optional[SchemaParseError]]:
    """Parse a JSON input schema into field descriptors.

    Missing or ill-typed ``properties``/``required`` sections are treated as
    empty so partial schemas from the service still produce a usable form.

    Args:
        raw_schema: JSON document describing the sample input

    Returns:
        Tuple of (fields in declaration order, error). On error the field
        list is empty.
    """
    try:
        if isinstance(raw_schema, bytes):
            raw_schema = raw_schema.decode("utf-8")
        document = json.loads(raw_schema)
    except (UnicodeDecodeError, ValueError, TypeError, RecursionError) as e:
        logger.warning(f"Input schema is not valid JSON: {e}")
        return [], MalformedJSONError(f"Invalid input schema format: {e}")

    if not isinstance(document, dict):
        logger.warning(f"Input schema is a JSON {type(document).__name__}, not an object")
        return [], MalformedJSONError("Invalid input schema format: expected a JSON object")

    properties = document.get("properties")
    if not isinstance(properties, dict):
        if properties is not None:
            logger.warning("Ignoring non-object 'properties' in input schema")
        properties = {}

    required = document.get("required")
    if not isinstance(required, list):
        if required is not None:
            logger.warning("Ignoring non-list 'required' in input schema")
        required = []
    required_names = {name for name in required if isinstance(name, str)}

    fields = []
    for name, info in properties.items():
        if not isinstance(info, dict):
            logger.warning(f"Skipping property '{name}': schema is not an object")
            continue
        fields.append(_parse_field(name, info, name in required_names))

    logger.debug(
        f"Parsed input schema: {len(fields)} field(s), "
        f"required={sorted(required_names)}"
    )
    return fields, None


def _parse_field(name: str, info: dict[str, Any], required: bool) -> FieldDescriptor:
    kind = FieldKind.from_schema(info.get("type"))
    description = info.get("description")
    if not isinstance(description, str):
        description = None

    item_kind = None
    enum_values = None
    if kind is FieldKind.ARRAY:
        items = info.get("items")
        if not isinstance(items, dict):
            items = {}
        item_kind = ItemKind.from_schema(items.get("type"))
        if item_kind is ItemKind.INTEGER:
            enum_values = _parse_enum(items.get("enum"))

    return FieldDescriptor(
        name=name,
        kind=kind,
        required=required,
        description=description,
        default=_parse_default(name, kind, info.get("default")),
        item_kind=item_kind,
        enum_values=enum_values,
    )


def _parse_enum(value) -> Optional[tuple[int, ...]]:
    if not isinstance(value, list) or not value:
        return None
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in value):
        return None
    return tuple(value)


def _parse_default(name: str, kind: FieldKind, value):
    if value is None:
        return None

    if kind is FieldKind.ARRAY:
        if not isinstance(value, list):
            logger.warning(f"Ignoring non-list default for array field '{name}'")
            return None
        entries = [v for v in value if _is_scalar(v)]
        if len(entries) != len(value):
            logger.warning(f"Dropping non-scalar or non-finite default entries for field '{name}'")
        return entries

    if not _is_scalar(value):
        logger.warning(f"Ignoring non-scalar or non-finite default for field '{name}'")
        return None
    return value


def _is_scalar(value) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, _SCALAR_TYPES)
