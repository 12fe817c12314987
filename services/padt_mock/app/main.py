"""PADT Mock — FastAPI application factory.

Mimics the downstream PADT endpoint by returning an XML document with a
fresh party ID substituted on every request.
"""

from __future__ import annotations

from collections.abc import Callable

from fastapi import FastAPI

from app.core.config import PadtMockSettings, get_settings
from app.core.events import lifespan
from app.routers import health, index
from app.routers.padt import router as padt_router

from shared.health import HealthState
from shared.logging import setup_logging
from shared.middleware import (
    AccessLogMiddleware,
    RequestContextMiddleware,
    time_request_id,
)


def create_app(
    settings: PadtMockSettings | None = None,
    *,
    health_state: HealthState | None = None,
    next_request_id: Callable[[], str] = time_request_id,
) -> FastAPI:
    settings = settings or get_settings()
    health_state = health_state or HealthState()

    setup_logging(
        log_level=settings.effective_log_level,
        json_logs=settings.json_logs,
        service_name=settings.service_name,
    )

    application = FastAPI(
        title="PADT Mock",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.health = health_state

    # Last added runs first: tracing wraps access logging
    application.add_middleware(AccessLogMiddleware)
    application.add_middleware(
        RequestContextMiddleware, next_request_id=next_request_id
    )

    application.include_router(index.router)
    application.include_router(health.build_router(health_state))
    application.include_router(padt_router)

    return application

