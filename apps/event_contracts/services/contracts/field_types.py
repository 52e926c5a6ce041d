"""
Field Types
===========

Primitive type tags a contract may declare, and the classifier that maps any
structured (JSON-shaped) value onto a runtime kind.

Contracts only know string / number / boolean. Composite values and null get
their own kinds so they are reported as-is and always mismatch.
"""

from __future__ import annotations

from enum import Enum
from numbers import Real
from typing import Any, Mapping, Sequence


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class RuntimeKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"


def runtime_kind(value: Any) -> RuntimeKind:
    """
    Classify a structured value.

    bool is checked before numbers (bool is an int subclass in Python).
    int and float both map to NUMBER.
    """
    if value is None:
        return RuntimeKind.NULL
    if isinstance(value, bool):
        return RuntimeKind.BOOLEAN
    if isinstance(value, str):
        return RuntimeKind.STRING
    if isinstance(value, Real):
        return RuntimeKind.NUMBER
    if isinstance(value, Mapping):
        return RuntimeKind.OBJECT
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return RuntimeKind.ARRAY
    raise TypeError(f"not a structured value: {type(value).__name__}")


def matches(declared: FieldType, actual: RuntimeKind) -> bool:
    return declared.value == actual.value
