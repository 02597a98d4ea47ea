# tests/conftest.py
"""
Pytest configuration and fixtures.

Every test gets a freshly built application with its own in-memory
database, seeded with the default administrator.
"""

from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from breakway_api.app.core.config import settings
from breakway_api.app.core.db import Database, get_database, init_db
from breakway_api.app.main import create_app


@pytest.fixture
def client() -> TestClient:
    app = create_app()
    # Re-initialise explicitly so the admin is seeded whatever SEED_ADMIN says.
    init_db(seed_admin=True)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client: TestClient) -> Database:
    return get_database()


@pytest.fixture
def headers() -> Callable[[str], Dict[str, str]]:
    """Build the identity header for a user id."""

    def _headers(user_id: str) -> Dict[str, str]:
        return {settings.user_id_header: user_id}

    return _headers


@pytest.fixture
def admin_headers(client: TestClient, headers) -> Dict[str, str]:
    return headers(settings.admin_id)


@pytest.fixture
def register(client: TestClient) -> Callable[..., str]:
    """Register a user through the API and return its id."""

    def _register(name: str = "Alice", contact: str = "a@x.com", password: str = "p1") -> str:
        resp = client.post(
            "/api/users/register",
            json={"name": name, "contact": contact, "password": password},
        )
        assert resp.status_code == 201, resp.text
        return resp.json()["user"]["id"]

    return _register
