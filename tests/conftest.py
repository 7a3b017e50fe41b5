from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import resume_builder.data.db as app_db
from resume_builder.api.main import app
from resume_builder.data.db import init_db


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None]:
    """Use a temporary SQLite DB for API tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db.reset_engine()
    init_db()
    yield
    # Dispose engine to release connections
    app_db.reset_engine()


@pytest.fixture
def client(api_db: None) -> Generator[TestClient]:
    """Create a test client for the API.

    Backed by a temporary database. The lifespan is not entered, so no stock
    templates are seeded and route dependencies fall back to their defaults
    unless overridden.
    """
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client: TestClient) -> Callable[[str], dict[str, str]]:
    """Register a user and return the Authorization header for them."""

    def _register(username: str = "jane", password: str = "s3cret-pass") -> dict[str, str]:
        response = client.post(
            "/api/auth/register", json={"username": username, "password": password}
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register


@pytest.fixture
def auth_headers(register_user: Callable[[str], dict[str, str]]) -> dict[str, str]:
    return register_user("jane")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Automatically add api_db fixture to tests in API test files."""
    for item in items:
        # Check if test file name contains "api" (case-insensitive)
        test_file_path = Path(str(item.fspath))
        if "api" in test_file_path.stem.lower():
            item.add_marker(pytest.mark.usefixtures("api_db"))
