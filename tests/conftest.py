"""
Global pytest fixtures for the Secret Server test suite.

Responsibilities:
    - Provide an explicit Settings instance (no environment reads)
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
"""

import base64

import pytest
from fastapi.testclient import TestClient

from main import create_app
from secret_server.config import Settings


def _basic_header(username: str, password: str) -> dict:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def basic_header():
    """Build an Authorization header for the given credentials."""
    return _basic_header


@pytest.fixture
def settings() -> Settings:
    """Configuration matching the documented admin/hunter2 scenario."""
    return Settings(username="admin", password="hunter2", secret_message="42")


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance.

    Notes:
        - Uses the app factory with injected settings, so tests never depend
          on the process environment.
    """
    app = create_app(settings)
    return TestClient(app)
