"""
Contract Validator (Canonical)
==============================

Purpose:
- Compare a candidate payload against the contract for its event type.
- Report every discrepancy in one pass: missing fields, type mismatches,
  unexpected fields. No short-circuiting.

This engine is a pure function of (event type, payload):
- No side effects, no I/O, no HTTP.
- Never mutates the payload or the contract.
- Identical inputs always produce equal results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .errors import MalformedInput
from .field_types import FieldType, RuntimeKind, matches, runtime_kind
from .registry import ContractRegistry, default_registry

log = logging.getLogger("event_contracts.validator")


@dataclass(frozen=True)
class TypeMismatch:
    field: str
    expected: FieldType
    actual: RuntimeKind

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "expected": self.expected.value,
            "actual": self.actual.value,
        }

    def describe(self) -> str:
        return f"{self.field} (expected {self.expected.value}, got {self.actual.value})"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of one validation call. Owned by the caller.
    """
    event_type: str
    missing_fields: Tuple[str, ...] = ()
    type_mismatches: Tuple[TypeMismatch, ...] = ()
    unexpected_fields: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not (self.missing_fields or self.type_mismatches or self.unexpected_fields)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "eventType": self.event_type,
            "missingFields": list(self.missing_fields),
            "typeMismatches": [m.to_dict() for m in self.type_mismatches],
            "unexpectedFields": list(self.unexpected_fields),
            "isValid": self.is_valid,
        }


class ContractValidator:
    """
    Shape validator bound to one contract registry.
    """

    def __init__(self, registry: ContractRegistry) -> None:
        self.registry = registry

    def validate(self, event_type: Any, payload: Mapping[str, Any]) -> ValidationResult:
        contract = self.registry.get_contract(event_type)

        if not isinstance(payload, Mapping):
            raise MalformedInput(f"payload must be an object, got {type(payload).__name__}")

        missing: List[str] = []
        mismatches: List[TypeMismatch] = []
        unexpected: List[str] = []

        # Required fields + types (contract order)
        for name, expected in contract.fields:
            if name not in payload:
                missing.append(name)
                continue
            actual = runtime_kind(payload[name])
            if not matches(expected, actual):
                mismatches.append(TypeMismatch(field=name, expected=expected, actual=actual))

        # Unexpected fields (payload order)
        for name in payload:
            if not contract.declares(name):
                unexpected.append(name)

        result = ValidationResult(
            event_type=contract.event_type,
            missing_fields=tuple(missing),
            type_mismatches=tuple(mismatches),
            unexpected_fields=tuple(unexpected),
        )

        log.debug(
            "validated %s: valid=%s missing=%d mismatches=%d unexpected=%d",
            result.event_type,
            result.is_valid,
            len(missing),
            len(mismatches),
            len(unexpected),
        )
        return result


def validate_event(
    event_type: Any,
    payload: Mapping[str, Any],
    registry: Optional[ContractRegistry] = None,
) -> ValidationResult:
    if registry is None:
        registry = default_registry()
    return ContractValidator(registry).validate(event_type, payload)
