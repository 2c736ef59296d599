"""Enumeration type definitions"""

from enum import Enum


class FieldKind(str, Enum):
    """Type of a top-level schema property."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_schema(cls, value) -> "FieldKind":
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.UNSUPPORTED

    @property
    def is_textual(self) -> bool:
        return self in (FieldKind.STRING, FieldKind.INTEGER, FieldKind.NUMBER)


class ItemKind(str, Enum):
    """Type of the elements of an array property."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_schema(cls, value) -> "ItemKind":
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.UNSUPPORTED
