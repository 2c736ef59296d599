from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr, model_validator

from ..enums import FieldKind, ItemKind

SchemaValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]


class FieldDescriptor(BaseModel):
    """Typed representation of one input schema property."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: FieldKind
    required: bool = False
    description: Optional[str] = None
    default: Optional[Union[SchemaValue, list[SchemaValue]]] = None
    item_kind: Optional[ItemKind] = None
    enum_values: Optional[tuple[int, ...]] = None

    @model_validator(mode="after")
    def check_item_shape(self) -> "FieldDescriptor":
        if (self.item_kind is not None) != (self.kind is FieldKind.ARRAY):
            raise ValueError("item_kind must be set if and only if kind is array")
        if self.enum_values is not None and self.item_kind is not ItemKind.INTEGER:
            raise ValueError("enum_values requires integer array items")
        return self

    @property
    def is_array(self) -> bool:
        return self.kind is FieldKind.ARRAY

    @property
    def is_enum(self) -> bool:
        return self.enum_values is not None

    @property
    def default_items(self) -> list:
        """Default array entries, empty when the schema declares none."""
        if self.is_array and isinstance(self.default, list):
            return list(self.default)
        return []
