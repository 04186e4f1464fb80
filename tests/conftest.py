import asyncio
import os
import tempfile

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="screening-tests-")

# Settings are read at import time, so configure them before the app loads
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["API_PREFIX"] = "/api/v1"
os.environ["HIDDEN_SUPER_ADMIN_EMAIL"] = "Hidden.Admin@example.com"
os.environ["HIDDEN_SUPER_ADMIN_PASSWORD"] = "hidden-secret"
os.environ["OPENAI_API_KEY"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402

from main import app  # noqa: E402
from shared.db import drop_models, init_models  # noqa: E402

API = "/api/v1"
HIDDEN_EMAIL = "hidden.admin@example.com"
HIDDEN_PASSWORD = "hidden-secret"


async def _reset_database():
    await drop_models()
    await init_models()


@pytest.fixture
def client():
    asyncio.run(_reset_database())
    app.dependency_overrides.clear()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def login(client, email, password):
    response = client.post(f"{API}/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def super_admin(client):
    payload = {"email": "owner@example.com", "password": "owner-secret", "name": "Owner"}
    response = client.post(f"{API}/setup-super-admin", json=payload)
    assert response.status_code == 200, response.text
    headers = login(client, payload["email"], payload["password"])
    return {"id": response.json()["user"]["id"], "headers": headers}


@pytest.fixture
def hidden_admin(client):
    headers = login(client, HIDDEN_EMAIL, HIDDEN_PASSWORD)
    profile = client.get(f"{API}/profile", headers=headers).json()["profile"]
    return {"id": profile["userId"], "headers": headers}


@pytest.fixture
def make_user(client, super_admin):
    """Create a user with the given role through the admin API and sign in."""

    def _make(role, email=None):
        email = email or f"{role}@example.com"
        payload = {"email": email, "password": "user-secret", "name": role.title(), "role": role}
        response = client.post(f"{API}/admin/users", json=payload, headers=super_admin["headers"])
        assert response.status_code == 200, response.text
        return {"id": response.json()["user"]["id"], "headers": login(client, email, "user-secret")}

    return _make
