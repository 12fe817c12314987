"""Reusable health-check router.

Provides ``/healthz``: 204 while the service is serving, 503 before
startup completes and from the moment shutdown begins.
"""

from __future__ import annotations

import threading

from fastapi import APIRouter, Response, status


class HealthState:
    """Process-wide healthy/unhealthy flag.

    Starts unhealthy. Safe to flip from a signal handler or another thread.
    """

    def __init__(self) -> None:
        self._healthy = threading.Event()

    @property
    def is_healthy(self) -> bool:
        return self._healthy.is_set()

    def mark_healthy(self) -> None:
        self._healthy.set()

    def mark_unhealthy(self) -> None:
        self._healthy.clear()


def create_health_router(state: HealthState) -> APIRouter:
    """Build a health router bound to ``state``.

    Args:
        state: The flag consulted on every probe.

    Returns:
        A FastAPI ``APIRouter`` with ``/healthz``.
    """
    router = APIRouter(tags=["health"])

    @router.api_route("/healthz", methods=["GET", "HEAD"], summary="Health probe")
    async def healthz() -> Response:
        if state.is_healthy:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    return router
