from __future__ import annotations


class ContractError(Exception):
    def __init__(self, message: str, status_code: int = 400, code: str = "error"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)


class UnknownEventType(ContractError):
    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(f"Unknown event type: {event_type!r}", 404, "unknown_event_type")


class MalformedInput(ContractError):
    def __init__(self, message: str = "Payload is not a well-formed JSON object"):
        super().__init__(message, 400, "malformed_input")
