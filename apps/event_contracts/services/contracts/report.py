"""
Plain-text rendering of validation outcomes.

Layout:

    Event Type: earn

    Missing fields:
    - currency

    Type mismatches:
    - amount_spent (expected number, got string)
"""

from __future__ import annotations

from typing import List

from .errors import ContractError, MalformedInput, UnknownEventType
from .validator import ValidationResult

MATCH_LINE = "✓ Event matches the expected contract."
NO_TYPE_SELECTED = "Select an event type before validating."
INVALID_JSON = "Invalid JSON. Please fix formatting."


def _block(title: str, items: List[str]) -> str:
    return f"\n{title}:\n- " + "\n- ".join(items)


def render_report(result: ValidationResult) -> str:
    messages = [f"Event Type: {result.event_type}"]

    if result.is_valid:
        messages.append(MATCH_LINE)
        return "\n".join(messages)

    if result.missing_fields:
        messages.append(_block("Missing fields", list(result.missing_fields)))
    if result.type_mismatches:
        messages.append(_block("Type mismatches", [m.describe() for m in result.type_mismatches]))
    if result.unexpected_fields:
        messages.append(_block("Unexpected fields", list(result.unexpected_fields)))

    return "\n".join(messages)


def render_error(exc: ContractError) -> str:
    if isinstance(exc, UnknownEventType):
        if not exc.event_type:
            return NO_TYPE_SELECTED
        return f"Unknown event type: {exc.event_type}"
    if isinstance(exc, MalformedInput):
        return INVALID_JSON
    return exc.message
