from __future__ import annotations

from .fields import FieldDescriptor, SchemaValue
from .inputs import apply_assignments
from .parser import parse_schema
from .serializer import serialize
from .state import FormState
from .validator import validate

__all__ = [
    "FieldDescriptor",
    "FormState",
    "SchemaValue",
    "apply_assignments",
    "parse_schema",
    "serialize",
    "validate",
]
