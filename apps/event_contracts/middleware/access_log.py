import logging
import time
from typing import Any, Dict, Iterable, Mapping

from fastapi import Request, Response

log = logging.getLogger("event_contracts.access")

MASK = "***masked***"


def masked_headers(headers: Mapping[str, str], sensitive: Iterable[str]) -> Dict[str, str]:
    hidden = {name.lower() for name in sensitive}
    return {k: (MASK if k.lower() in hidden else v) for k, v in headers.items()}


def access_entry(
    request: Request,
    response: Response,
    started: float,
    sensitive: Iterable[str],
) -> Dict[str, Any]:
    return {
        "method": request.method,
        "path": request.url.path,
        "status_code": response.status_code,
        "duration_ms": int((time.time() - started) * 1000),
        "client": request.client.host if request.client else None,
        "headers": masked_headers(request.headers, sensitive),
    }


def access_logger(sensitive: Iterable[str]):
    """Build the http middleware that writes one entry per request."""
    hidden = frozenset(sensitive)

    async def middleware(request: Request, call_next):
        started = time.time()
        response = await call_next(request)
        log.info(access_entry(request, response, started, hidden))
        return response

    return middleware
