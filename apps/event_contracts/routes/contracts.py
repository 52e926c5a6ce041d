import logging

from fastapi import APIRouter, Request

from apps.event_contracts.routes.schemas import ContractOut, ValidationResultOut
from apps.event_contracts.services.contracts.errors import ContractError
from apps.event_contracts.services.contracts.parsing import parse_payload
from apps.event_contracts.services.contracts.registry import default_registry
from apps.event_contracts.services.contracts.samples import sample_payload
from apps.event_contracts.services.contracts.validator import ContractValidator
from apps.event_contracts.utils.envelope import ok, error, contract_error

log = logging.getLogger("event_contracts.routes")

router = APIRouter(prefix="/contracts", tags=["Contracts"])

registry = default_registry()
validator = ContractValidator(registry)


@router.get("")
async def contracts_list():
    data = [ContractOut.from_contract(c).model_dump() for c in registry.contracts()]
    return ok(data, meta={"event_types": list(registry.event_types())})


@router.get("/{event_type}")
async def contracts_get(event_type: str):
    try:
        contract = registry.get_contract(event_type)
        return ok(ContractOut.from_contract(contract).model_dump())
    except ContractError as e:
        return contract_error(e)


@router.get("/{event_type}/samples/{scenario}")
async def contracts_sample(event_type: str, scenario: str):
    try:
        return ok(sample_payload(event_type, scenario), meta={"event_type": event_type, "scenario": scenario})
    except ContractError as e:
        return contract_error(e)
    except ValueError as e:
        return error(str(e), code="unknown_scenario", status=400)


@router.post("/{event_type}/validate")
async def contracts_validate(event_type: str, request: Request):
    try:
        # Unknown type is reported before the body is parsed.
        registry.get_contract(event_type)
        payload = parse_payload(await request.body())
        result = validator.validate(event_type, payload)
        return ok(ValidationResultOut.from_result(result).model_dump())
    except ContractError as e:
        return contract_error(e)
    except Exception:
        log.exception("validation failed for %s", event_type)
        return error("Internal error", code="internal_error", status=500)
