from __future__ import annotations

import json
from typing import Any, Dict, Union

from .errors import MalformedInput


def _reject_constant(name: str) -> Any:
    raise MalformedInput(f"Invalid JSON: {name} is not a JSON value")


def parse_payload(text: Union[str, bytes, None]) -> Dict[str, Any]:
    """
    Turn editor / request text into a payload mapping.

    Anything that is not a single JSON object raises MalformedInput before the
    validator ever sees it. NaN / Infinity / -Infinity are rejected.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError:
            raise MalformedInput("Payload is not valid UTF-8")

    if text is None or not text.strip():
        raise MalformedInput("Payload is empty")

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise MalformedInput(f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})")
    except RecursionError:
        raise MalformedInput("Payload is nested too deeply")

    if not isinstance(data, dict):
        raise MalformedInput("Payload must be a JSON object")

    return data
