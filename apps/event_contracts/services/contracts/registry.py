"""
Contract Registry (Canonical)
=============================

Single source of truth for the loyalty event contracts.

A contract is the fixed set of required field names and their expected
primitive types for one event type. Contracts are built once and never
mutated.

Non-goals:
- No schema language, no nested object / array contracts.
- No HTTP / FastAPI logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import UnknownEventType
from .field_types import FieldType


class EventType(str, Enum):
    EARN = "earn"
    REDEEM = "redeem"
    TIER_UPDATE = "tier_update"


def _key(event_type: Any) -> str:
    if isinstance(event_type, Enum):
        return str(event_type.value)
    return str(event_type)


@dataclass(frozen=True)
class Contract:
    """
    Required fields for one event type, in declaration order.

    Example:
        Contract.from_dict("redeem", {"user_id": "string", "points_used": "number"})
    """
    event_type: str
    fields: Tuple[Tuple[str, FieldType], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "event_type", _key(self.event_type))
        object.__setattr__(
            self,
            "fields",
            tuple((name, FieldType(kind)) for name, kind in self.fields),
        )
        self._validate()
        object.__setattr__(self, "_by_name", dict(self.fields))

    def _validate(self) -> None:
        if not self.event_type:
            raise ValueError("event_type cannot be empty")
        if not self.fields:
            raise ValueError(f"contract '{self.event_type}' must declare at least one field")

        seen = set()
        for name, _ in self.fields:
            if not isinstance(name, str) or not name:
                raise ValueError(f"contract '{self.event_type}' has an empty field name")
            if name in seen:
                raise ValueError(f"contract '{self.event_type}' declares '{name}' twice")
            seen.add(name)

    # -----------------------------
    # Lookups
    # -----------------------------
    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.fields)

    def expected_type(self, field_name: str) -> Optional[FieldType]:
        return self._by_name.get(field_name)

    def declares(self, field_name: str) -> bool:
        return field_name in self._by_name

    # -----------------------------
    # Serialization
    # -----------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type,
            "fields": {name: kind.value for name, kind in self.fields},
        }

    @staticmethod
    def from_dict(event_type: Any, fields: Mapping[str, Any]) -> "Contract":
        return Contract(event_type=_key(event_type), fields=tuple(fields.items()))


class ContractRegistry:
    """
    Read-only lookup table from event type to contract.
    """

    def __init__(self, contracts: Iterable[Contract]) -> None:
        table: Dict[str, Contract] = {}
        for contract in contracts:
            if contract.event_type in table:
                raise ValueError(f"duplicate contract for event type '{contract.event_type}'")
            table[contract.event_type] = contract
        self._contracts = table

    def get_contract(self, event_type: Any) -> Contract:
        key = _key(event_type) if event_type is not None else ""
        contract = self._contracts.get(key)
        if contract is None:
            raise UnknownEventType(key)
        return contract

    def event_types(self) -> Tuple[str, ...]:
        return tuple(self._contracts)

    def contracts(self) -> List[Contract]:
        return list(self._contracts.values())

    def __contains__(self, event_type: Any) -> bool:
        return _key(event_type) in self._contracts

    def __len__(self) -> int:
        return len(self._contracts)


# -------------------------------------------------
# Built-in loyalty contracts
# -------------------------------------------------
DEFAULT_CONTRACTS: Dict[EventType, Dict[str, str]] = {
    EventType.EARN: {
        "user_id": "string",
        "amount_spent": "number",
        "currency": "string",
        "partner_id": "string",
        "tier": "string",
        "timestamp": "string",
    },
    EventType.REDEEM: {
        "user_id": "string",
        "points_used": "number",
        "reward_id": "string",
        "partner_id": "string",
        "timestamp": "string",
    },
    EventType.TIER_UPDATE: {
        "user_id": "string",
        "old_tier": "string",
        "new_tier": "string",
        "partner_id": "string",
        "effective_date": "string",
    },
}


def build_registry(table: Mapping[Any, Mapping[str, Any]]) -> ContractRegistry:
    return ContractRegistry(Contract.from_dict(t, fields) for t, fields in table.items())


_DEFAULT = build_registry(DEFAULT_CONTRACTS)


def default_registry() -> ContractRegistry:
    return _DEFAULT
