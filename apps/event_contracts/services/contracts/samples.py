"""
Sample payloads shown when a user picks an event type.

"valid" samples match their contracts exactly. "drifted" samples carry one of
each discrepancy kind (missing field, wrong type, extra field).
"""

from __future__ import annotations

import copy
import json
from enum import Enum
from typing import Any, Dict

from .errors import UnknownEventType
from .registry import EventType, _key


class Scenario(str, Enum):
    VALID = "valid"
    DRIFTED = "drifted"


SAMPLES: Dict[str, Dict[Scenario, Dict[str, Any]]] = {
    EventType.EARN.value: {
        Scenario.VALID: {
            "user_id": "12345",
            "amount_spent": 100,
            "currency": "USD",
            "partner_id": "partner_001",
            "tier": "Gold",
            "timestamp": "2025-11-22T10:00:00Z",
        },
        Scenario.DRIFTED: {
            "user_id": "12345",
            "amount_spent": "100",
            "partner_id": "partner_001",
            "tier": "Gold",
            "timestamp": "2025-11-22T10:00:00Z",
            "debug_flag": True,
        },
    },
    EventType.REDEEM.value: {
        Scenario.VALID: {
            "user_id": "12345",
            "points_used": 500,
            "reward_id": "reward_abc",
            "partner_id": "partner_001",
            "timestamp": "2025-11-22T10:05:00Z",
        },
        Scenario.DRIFTED: {
            "user_id": 12345,
            "points_used": 500,
            "partner_id": "partner_001",
            "timestamp": "2025-11-22T10:05:00Z",
            "channel": "mobile",
        },
    },
    EventType.TIER_UPDATE.value: {
        Scenario.VALID: {
            "user_id": "12345",
            "old_tier": "Silver",
            "new_tier": "Gold",
            "partner_id": "partner_001",
            "effective_date": "2025-11-22",
        },
        Scenario.DRIFTED: {
            "user_id": "12345",
            "old_tier": "Silver",
            "new_tier": {"name": "Gold"},
            "effective_date": "2025-11-22",
            "reason": None,
        },
    },
}


def sample_payload(event_type: Any, scenario: Any = Scenario.VALID) -> Dict[str, Any]:
    key = _key(event_type) if event_type is not None else ""
    by_scenario = SAMPLES.get(key)
    if by_scenario is None:
        raise UnknownEventType(key)

    try:
        chosen = Scenario(_key(scenario))
    except ValueError:
        raise ValueError(f"unknown scenario '{_key(scenario)}' (expected one of: valid, drifted)")

    return copy.deepcopy(by_scenario[chosen])


def sample_text(event_type: Any, scenario: Any = Scenario.VALID) -> str:
    return json.dumps(sample_payload(event_type, scenario), indent=2)
