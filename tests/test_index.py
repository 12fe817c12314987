"""
Tests for the index route and routing fallbacks.
"""

from fastapi.testclient import TestClient

from app.core.config import PadtMockSettings
from app.main import create_app


def test_usage_hint(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "use /padt as the URL to POST to\n"
    assert response.headers["content-type"] == "text/plain; charset=utf-8"
    assert response.headers["x-content-type-options"] == "nosniff"


def test_unknown_path_is_404(client):
    assert client.get("/nothing-here").status_code == 404


def test_docs_hidden_without_debug(client):
    assert client.get("/docs").status_code == 404


def test_docs_served_in_debug(response_file):
    settings = PadtMockSettings(
        _env_file=None, response_file=response_file, debug=True
    )
    with TestClient(create_app(settings)) as client:
        assert client.get("/docs").status_code == 200
