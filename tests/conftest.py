"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from run_tracker.config import Settings
from run_tracker.main import create_app
from run_tracker.services.auth import AuthService

SEED_EMAIL = "test@example.com"
SEED_PASSWORD = "password123"
OTHER_EMAIL = "other@example.com"
OTHER_PASSWORD = "otherpass123"


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the environment, with uploads under tmp_path."""
    return Settings(
        _env_file=None,
        environment="test",
        jwt_secret="test-secret",
        upload_dir=str(tmp_path / "uploads"),
        storage_backend="memory",
        seed_user_email=SEED_EMAIL,
        seed_user_password=SEED_PASSWORD,
        seed_demo_runs=False,
    )


@pytest.fixture
def client(settings):
    """Create a test client around a freshly seeded app."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def login(client, email: str, password: str) -> AuthHeaders:
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Log in as the seeded user and return auth headers with user info."""
    return login(client, SEED_EMAIL, SEED_PASSWORD)


@pytest.fixture
def other_auth_headers(client, settings):
    """Add a second user and return their auth headers."""
    AuthService(client.app.state.user_repository, settings).ensure_user(
        OTHER_EMAIL, OTHER_PASSWORD
    )
    return login(client, OTHER_EMAIL, OTHER_PASSWORD)


@pytest.fixture
def create_run(client):
    """Return a helper that posts a run with sensible defaults."""

    def _create_run(headers, files=None, **fields):
        data = {"distance": "5", "time": "25", "location": "Park"}
        data.update(fields)
        return client.post("/runs", headers=headers, data=data, files=files)

    return _create_run
