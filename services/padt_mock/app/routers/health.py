"""PADT Mock — health-check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from shared.health import HealthState, create_health_router


def build_router(state: HealthState) -> APIRouter:
    # No readiness probes: the only dependency is a file with a built-in fallback.
    return create_health_router(state)
