"""Shared service plumbing: configuration, logging, middleware and health."""

from shared.config import BaseServiceSettings, parse_listen_addr
from shared.health import HealthState, create_health_router
from shared.logging import setup_logging

__all__ = [
    "BaseServiceSettings",
    "HealthState",
    "create_health_router",
    "parse_listen_addr",
    "setup_logging",
]
