from fastapi.responses import JSONResponse

from apps.event_contracts.services.contracts.errors import ContractError


def ok(data=None, meta=None):
    return JSONResponse(
        content={
            "ok": True,
            "data": data,
            "meta": meta or {},
        }
    )


def error(message: str, code: str = "error", status: int = 400):
    return JSONResponse(
        status_code=status,
        content={
            "ok": False,
            "error": code,
            "message": message,
        },
    )


def contract_error(e: ContractError):
    return error(e.message, code=e.code, status=e.status_code)
