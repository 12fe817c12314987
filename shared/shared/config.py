"""Base configuration using Pydantic Settings.

All service-specific settings should inherit from ``BaseServiceSettings``.
Values are loaded from environment variables and .env files.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseServiceSettings(BaseSettings):
    """Common settings shared across mock services."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── General ───────────────────────────────
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    service_name: str = "padt_mock"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def json_logs(self) -> bool:
        return self.is_production

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


def parse_listen_addr(addr: str) -> tuple[str, int]:
    """Split a ``host:port`` listen address.

    An empty host means all interfaces, so ``":5000"`` binds
    ``0.0.0.0:5000``. IPv6 hosts are written in brackets (``"[::1]:80"``).

    Raises:
        ValueError: if the port is missing, not a plain decimal number or out
            of range, or if an IPv6 host is not bracketed.
    """
    host, sep, port_str = addr.rpartition(":")
    if not sep or not port_str:
        raise ValueError(f"missing port in address {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"too many colons in address {addr!r}")
    if not (port_str.isascii() and port_str.isdigit()):
        raise ValueError(f"invalid port {port_str!r} in address {addr!r}")
    port = int(port_str)
    if port > 65535:
        raise ValueError(f"port {port} out of range in address {addr!r}")
    return host or "0.0.0.0", port
