"""
Shared test fixtures for the homepage API tests.

Provides bootstrapped stores for both backends, a test client and auth helpers.
"""

from collections.abc import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from homepage.auth.dependencies import get_store
from homepage.auth.jwt import create_session_token
from homepage.config import settings
from homepage.main import app
from homepage.middleware.rate_limit import reset_limiter
from homepage.services.bootstrap import ensure_defaults
from homepage.store import CredentialStore, JSONFileStore, SQLStore

DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "admin123"
TEST_JWT_SECRET = "test-jwt-secret"


# --- Settings Fixture ---


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Pin settings that tests depend on, regardless of any local .env file."""
    monkeypatch.setattr(settings, "jwt_secret", TEST_JWT_SECRET)
    monkeypatch.setattr(settings, "jwt_algorithm", "HS256")
    monkeypatch.setattr(settings, "token_expire_days", 7)
    monkeypatch.setattr(settings, "admin_username", DEFAULT_USERNAME)
    monkeypatch.setattr(settings, "admin_password", DEFAULT_PASSWORD)
    return settings


# --- Rate Limiter Reset Fixture ---


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Reset rate limiter before each test to ensure test isolation."""
    reset_limiter()
    yield


# --- Store Fixtures ---


@pytest_asyncio.fixture
async def json_store(tmp_path) -> AsyncGenerator[JSONFileStore, None]:
    """Empty JSON file store in a temp directory."""
    store = JSONFileStore(tmp_path / "data" / "homepage.json")
    await store.init()
    yield store
    await store.close()


@pytest_asyncio.fixture
async def sql_store(tmp_path) -> AsyncGenerator[SQLStore, None]:
    """Empty SQLite-backed store in a temp directory."""
    store = SQLStore(f"sqlite+aiosqlite:///{tmp_path / 'homepage.db'}")
    await store.init()
    yield store
    await store.close()


@pytest_asyncio.fixture(params=["json", "sql"])
async def empty_store(request, tmp_path) -> AsyncGenerator[CredentialStore, None]:
    """Empty store, once per backend."""
    if request.param == "sql":
        store = SQLStore(f"sqlite+aiosqlite:///{tmp_path / 'homepage.db'}")
    else:
        store = JSONFileStore(tmp_path / "homepage.json")
    await store.init()
    yield store
    await store.close()


@pytest_asyncio.fixture
async def store(empty_store: CredentialStore) -> CredentialStore:
    """Store after first-startup initialization (default admin and profile)."""
    await ensure_defaults(empty_store)
    return empty_store


@pytest_asyncio.fixture
async def async_client(store: CredentialStore) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client configured for testing.
    Overrides the store dependency with the bootstrapped test store.
    """
    app.dependency_overrides[get_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=True,
    ) as client:
        yield client

    app.dependency_overrides.clear()


# --- Authentication Helper Fixtures ---


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Factory fixture for creating bearer Authorization headers."""

    def _auth_headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture
def admin_token(test_settings) -> str:
    """Session token for the default admin account."""
    return create_session_token(DEFAULT_USERNAME, "admin")


@pytest.fixture
def admin_headers(admin_token: str, auth_headers) -> dict[str, str]:
    return auth_headers(admin_token)


@pytest.fixture
def valid_login_data() -> dict[str, str]:
    """Valid login payload for the bootstrapped admin."""
    return {
        "username": DEFAULT_USERNAME,
        "password": DEFAULT_PASSWORD,
    }


# --- Utility Fixtures ---


@pytest.fixture
def frozen_time():
    """
    Fixture for time-based testing using freezegun.

    Usage:
        with frozen_time("2026-02-01 12:00:00"):
            # time is frozen
    """
    from freezegun import freeze_time

    return freeze_time
