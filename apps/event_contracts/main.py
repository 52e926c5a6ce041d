# apps/event_contracts/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.event_contracts.middleware.access_log import access_logger

from apps.event_contracts.routes.health import router as health_router
from apps.event_contracts.routes.contracts import router as contracts_router

from apps.event_contracts.services.contracts.registry import default_registry
from apps.event_contracts.utils.settings import Settings, settings

log = logging.getLogger("event_contracts.main")


def create_app(cfg: Settings = settings) -> FastAPI:
    logging.getLogger("event_contracts").setLevel(cfg.LOG_LEVEL)

    app = FastAPI(
        title="Loyalty Event Contracts",
        version=cfg.EVENT_CONTRACTS_VERSION,
        description="Shape checks for loyalty earn, redeem and tier_update events",
    )

    # -------------------------------------------------------------------
    # CORS (only when an allowlist is configured)
    # -------------------------------------------------------------------
    if cfg.CORS_ALLOW_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cfg.CORS_ALLOW_ORIGINS,
            allow_credentials=False,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    # -------------------------------------------------------------------
    # Access log (masked headers)
    # -------------------------------------------------------------------
    if cfg.ACCESS_LOG_ENABLED:
        app.middleware("http")(access_logger(cfg.ACCESS_LOG_MASKED_HEADERS))

    # -------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------
    app.include_router(health_router)
    app.include_router(contracts_router)

    # -------------------------------------------------------------------
    # Root
    # -------------------------------------------------------------------
    @app.get("/")
    async def root():
        return {
            "status": "Event Contracts Online",
            "version": cfg.EVENT_CONTRACTS_VERSION,
            "routes": [
                "/health",
                "/contracts",
                "/contracts/{event_type}",
                "/contracts/{event_type}/samples/{scenario}",
                "/contracts/{event_type}/validate",
            ],
        }

    # -------------------------------------------------------------------
    # Startup
    # -------------------------------------------------------------------
    @app.on_event("startup")
    async def startup_event():
        registry = default_registry()
        log.info(
            "Event contracts starting, %d contracts loaded: %s",
            len(registry),
            ", ".join(registry.event_types()),
        )

    return app


app = create_app()
