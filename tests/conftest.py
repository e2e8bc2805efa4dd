"""
Shared pytest fixtures for face detection backend tests.
"""
import os
from typing import Callable
from unittest.mock import MagicMock, patch

import pytest

TEST_JWT_SECRET = "test_secret_key_for_testing_only"


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET_KEY": TEST_JWT_SECRET,
        "PROCESSING_WORKER_URL": "",
        "SYSTEM_STATS_INTERVAL_SECONDS": "0",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.database_url = "sqlite://"
    mock.database_echo = False
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.processing_worker_url = ""
    mock.processing_worker_timeout = 5.0
    mock.system_stats_interval_seconds = 0
    mock.admin_username = "admin"
    mock.admin_password = "secret"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("face_detection_backend.core.config.get_settings", return_value=mock), patch(
        "face_detection_backend.core.security.get_settings", return_value=mock
    ), patch(
        "face_detection_backend.infrastructure.external.base_worker_client.get_settings",
        return_value=mock,
    ):
        yield mock


def _reset_globals() -> None:
    from face_detection_backend.core import config
    from face_detection_backend.di.container import reset_container
    from face_detection_backend.infrastructure.db.sql_connection import dispose_engine

    config._settings = None
    dispose_engine()
    reset_container()


@pytest.fixture
def app_env(tmp_path, monkeypatch):
    """Point the application at a throwaway SQLite file and fresh singletons."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("JWT_SECRET_KEY", TEST_JWT_SECRET)
    monkeypatch.setenv("PROCESSING_WORKER_URL", "")
    monkeypatch.setenv("SYSTEM_STATS_INTERVAL_SECONDS", "0")
    _reset_globals()
    yield
    _reset_globals()


@pytest.fixture
def client(app_env):
    """TestClient running the full application lifespan against the temporary database."""
    from fastapi.testclient import TestClient
    from face_detection_backend.main import create_application

    application = create_application()
    with TestClient(application) as test_client:
        yield test_client


@pytest.fixture
def create_user(client) -> Callable[..., str]:
    """Factory inserting a user row directly; returns the user ID."""
    from face_detection_backend.core.security import hash_password
    from face_detection_backend.infrastructure.db.orm_models import UserRecord
    from face_detection_backend.infrastructure.db.sql_connection import get_session_factory

    counter = {"n": 0}

    def _create(username: str, password: str = "password123") -> str:
        counter["n"] += 1
        user_id = f"USR-TEST{counter['n']}"
        with get_session_factory()() as session:
            session.add(UserRecord(id=user_id, username=username, hashed_password=hash_password(password)))
            session.commit()
        return user_id

    return _create


@pytest.fixture
def login(client):
    """Factory returning Authorization headers for a username/password."""

    def _login(username: str, password: str = "password123") -> dict:
        response = client.post("/api/auth/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login
