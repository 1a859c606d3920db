import os
import tempfile
import uuid

import pytest

# Settings are read at import time, so the database must be chosen first.
_DB_DIR = tempfile.mkdtemp(prefix="homecal-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/homecal.db"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["DEFAULT_TIMEZONE"] = "UTC"

from fastapi.testclient import TestClient  # noqa: E402

from homecal.main import app  # noqa: E402


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Create a user and return (auth headers, user json)."""

    def _register(household_code=None, display_name="Alex"):
        email = f"{uuid.uuid4().hex[:10]}@example.com"
        payload = {"email": email, "password": "s3cret-pass", "display_name": display_name}
        if household_code is not None:
            payload["household_code"] = household_code
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text

        login = client.post("/api/auth/login", json={"email": email, "password": "s3cret-pass"})
        assert login.status_code == 200, login.text
        token = login.json()["access_token"]
        return {"Authorization": f"Bearer {token}"}, response.json()

    return _register


@pytest.fixture
def auth_headers(register):
    headers, _ = register()
    return headers
