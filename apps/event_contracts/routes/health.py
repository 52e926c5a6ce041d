from fastapi import APIRouter

from apps.event_contracts.services.contracts.registry import default_registry


router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_root():
    return {"ok": True}


@router.get("/contracts")
def health_contracts():
    registry = default_registry()
    return {"ok": len(registry) > 0, "event_types": list(registry.event_types())}
