"""PADT Mock — application lifespan."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Flip the health flag on around the serving window."""
    health = app.state.health
    settings = app.state.settings

    log.info("padt_mock starting up", response_file=str(settings.response_file))
    health.mark_healthy()

    yield

    health.mark_unhealthy()
    log.info("padt_mock shutting down")
