"""
tests/conftest.py -- Shared test fixtures for the auth service.

This module provides:
  - store: a fresh UserStore on an isolated in-memory SQLite database
  - hasher / tokens / service: the auth core wired with cheap argon2 costs
  - client: TestClient over the real FastAPI app with a patched lifespan
  - signup(): helper that registers a user through the HTTP API

Design: Named shared-memory SQLite URIs (not plain :memory:) are required
because TestClient runs sync route handlers in a thread pool. Plain :memory:
DBs are per-connection and would present a blank schema to each worker
thread. The named URI format (file:name?mode=memory&cache=shared&uri=true)
shares one in-memory instance across all connections in the same process.
Each fixture instance gets a unique name so tests never see each other's rows.

The DEBUG env var must be set before api.main is imported so get_settings()
fills in a dev JWT_SECRET and DATABASE_URL instead of raising ValueError.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Generator
from contextlib import asynccontextmanager

# CRITICAL: Set DEBUG before any api/core import so get_settings() can
# auto-generate its secrets in dev mode instead of raising ValueError.
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from api.main import app
from auth.passwords import Hasher
from auth.service import AuthService
from auth.store import UserStore
from auth.tokens import TokenService
from core.config import Settings

TEST_SECRET = "test-signing-secret-0123456789abcdef0123456789"
VALID_PASSWORD = "Valid1Password"

# ---------------------------------------------------------------------------
# Core fixtures
# ---------------------------------------------------------------------------


def make_test_store() -> UserStore:
    """Create a UserStore on a uniquely named shared-memory SQLite database."""
    name = f"test_auth_{uuid.uuid4().hex}"
    return UserStore(db_url=f"sqlite:///file:{name}?mode=memory&cache=shared&uri=true")


@pytest.fixture
def store() -> Generator[UserStore, None, None]:
    s = make_test_store()
    yield s
    s.close()


@pytest.fixture
def hasher() -> Hasher:
    """argon2id with minimal cost so the suite stays fast."""
    return Hasher(time_cost=1, memory_cost=1024, parallelism=1)


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(TEST_SECRET)


@pytest.fixture
def service(store: UserStore, hasher: Hasher, tokens: TokenService) -> AuthService:
    return AuthService(store, hasher, tokens)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        debug=False,
        database_url="sqlite://",
        jwt_secret=TEST_SECRET,
        enforce_user_ownership=False,
    )


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------


def _patch_lifespan(service: AuthService, settings: Settings):
    """Return an async context manager that replaces the real lifespan.

    Wires the test store and services into app.state so TestClient routes use
    the isolated test database rather than the configured one.
    """

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.settings = settings
        app.state.user_store = service.store
        app.state.auth_service = service
        app.state.token_service = service.tokens
        yield

    return test_lifespan


@pytest.fixture
def client(service: AuthService, settings: Settings) -> Generator[TestClient, None, None]:
    """Yield a TestClient over the real app backed by the per-test store."""
    app.router.lifespan_context = _patch_lifespan(service, settings)
    with TestClient(app, raise_server_exceptions=True) as c:
        yield c


def signup(client: TestClient, email: str = "a@b.com", password: str = VALID_PASSWORD) -> dict:
    """Register a user over HTTP and return the envelope's data (token + user)."""
    resp = client.post("/auth/signup", json={"email": email, "password": password})
    assert resp.status_code == 201, f"Signup failed: {resp.status_code} {resp.text}"
    return resp.json()["data"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
