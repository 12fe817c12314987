"""PADT Mock — configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator

from shared.config import BaseServiceSettings, parse_listen_addr


class PadtMockSettings(BaseServiceSettings):
    """Settings for the PADT mock; CLI flags override these."""

    service_name: str = "padt_mock"

    listen_addr: str = ":5000"
    response_file: Path = Path("padt_response_file.xml")
    placeholder: str = "${PartyID}"

    # Seconds
    idle_timeout: float = 15.0
    shutdown_timeout: float = 30.0

    @field_validator("listen_addr")
    @classmethod
    def _check_listen_addr(cls, value: str) -> str:
        parse_listen_addr(value)
        return value

    @property
    def host(self) -> str:
        return parse_listen_addr(self.listen_addr)[0]

    @property
    def port(self) -> int:
        return parse_listen_addr(self.listen_addr)[1]


@lru_cache
def get_settings() -> PadtMockSettings:
    """Settings from the environment, built on first use."""
    return PadtMockSettings()
