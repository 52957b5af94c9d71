"""Pytest fixtures for the city info API tests.

This module provides test fixtures that ensure:
1. Every test gets its own SQLite file database, seeded on app startup
2. Downloads and uploads use per-test temporary directories
3. Configuration is re-read from the environment for each test
"""

import os

import pytest

# Set test environment BEFORE importing application modules
os.environ.setdefault("SECRET_KEY", "test-secret-key-at-least-32-characters-long")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from fastapi.testclient import TestClient

from city_info.api import create_app
from city_info.config import get_settings

DOWNLOAD_FILE_NAME = "getting-acquainted-with-aspnet-core-slides.pdf"
DOWNLOAD_FILE_CONTENT = b"%PDF-1.4\n% demo slides\n"


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app_env(tmp_path, monkeypatch):
    """Point the database and file directories at a temporary location."""
    files_dir = tmp_path / "files"
    files_dir.mkdir()
    upload_dir = tmp_path / "uploads"

    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'city_info.db'}")
    monkeypatch.setenv("FILES_DIR", str(files_dir))
    monkeypatch.setenv("UPLOAD_DIR", str(upload_dir))
    get_settings.cache_clear()

    return {"files_dir": files_dir, "upload_dir": upload_dir}


@pytest.fixture
def download_file(app_env):
    """Place the demo download file in the files directory."""
    path = app_env["files_dir"] / DOWNLOAD_FILE_NAME
    path.write_bytes(DOWNLOAD_FILE_CONTENT)
    return path


# =============================================================================
# HTTP Fixtures
# =============================================================================


@pytest.fixture
def client(app_env):
    """Test client running the full app lifespan (tables + seed data)."""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def token(client) -> str:
    """A bearer token issued by the authentication endpoint."""
    response = client.post(
        "/api/authentication/authenticate",
        json={"userName": "kevin", "password": "secret"},
    )
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def auth_headers(token) -> dict[str, str]:
    """Authorization header carrying a valid bearer token."""
    return {"Authorization": f"Bearer {token}"}
