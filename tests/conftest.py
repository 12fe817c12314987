"""
pytest configuration and fixtures.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import PadtMockSettings
from app.main import create_app
from shared.health import HealthState

SAMPLE_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    "<PadtResponse><PartyID>${PartyID}</PartyID></PadtResponse>\n"
)


class RecordingLogger:
    """Stand-in for a structlog logger that keeps every call."""

    def __init__(self):
        self.calls = []

    def _record(self, level):
        def method(event, **kw):
            self.calls.append((level, event, kw))
        return method

    def __getattr__(self, level):
        return self._record(level)


@pytest.fixture
def response_file(tmp_path: Path) -> Path:
    """A response template on disk."""
    path = tmp_path / "padt_response_file.xml"
    path.write_text(SAMPLE_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def settings(response_file: Path) -> PadtMockSettings:
    """Settings isolated from the environment and any .env file."""
    return PadtMockSettings(_env_file=None, response_file=response_file)


@pytest.fixture
def health_state() -> HealthState:
    return HealthState()


@pytest.fixture
def app(settings, health_state):
    return create_app(settings, health_state=health_state)


@pytest.fixture
def client(app):
    """Client inside the app lifespan, so the service reports healthy."""
    with TestClient(app) as c:
        yield c
