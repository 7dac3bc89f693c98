"""
Shared pytest fixtures for the Cotizador admin service test suite.

Architecture
------------
Configuration is read from the environment on every request, so tests set
it with ``monkeypatch.setenv`` instead of injecting module globals.

Unit tests never trigger the FastAPI lifespan; they use ``ASGITransport``
(which skips lifespan).  The startup hook itself is exercised with
``asgi-lifespan.LifespanManager``.

The Supabase Auth admin API is never called for real: endpoint tests patch
``auth_admin.AuthAdminClient.create_user`` with an ``AsyncMock``, and the
client's own tests route httpx through ``httpx.MockTransport``.
"""

from __future__ import annotations

import json

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ---------------------------------------------------------------------------
# Stable test identities
# ---------------------------------------------------------------------------

TEST_SUPABASE_URL = "https://test-project.supabase.co"
TEST_SERVICE_KEY  = "service-role-test-key-do-not-leak"

_CONFIG_ENV = (
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_TIMEOUT",
    "CORS_ALLOW_ORIGIN",
    "HOST",
    "PORT",
    "COTIZADOR_OPTIONS_PATH",
)


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch) -> pytest.MonkeyPatch:
    """No configuration at all – neither env vars nor an options file."""
    for name in _CONFIG_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def supabase_env(clean_env) -> pytest.MonkeyPatch:
    """Minimal valid configuration for the admin API."""
    clean_env.setenv("SUPABASE_URL", TEST_SUPABASE_URL)
    clean_env.setenv("SUPABASE_SERVICE_ROLE_KEY", TEST_SERVICE_KEY)
    return clean_env


# ---------------------------------------------------------------------------
# HTTP client fixtures (no lifespan)
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def unit_client(supabase_env) -> AsyncClient:
    """AsyncClient backed by ASGITransport with valid provider config."""
    import main as m
    async with AsyncClient(transport=ASGITransport(app=m.app), base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def unconfigured_client(clean_env) -> AsyncClient:
    """AsyncClient with no provider URL or service-role key configured."""
    import main as m
    async with AsyncClient(transport=ASGITransport(app=m.app), base_url="http://test") as c:
        yield c


# ---------------------------------------------------------------------------
# Helpers used by tests
# ---------------------------------------------------------------------------

def valid_body(**overrides) -> dict:
    body = {
        "email":      "a@b.com",
        "password":   "secret1",
        "nombre":     "Ana",
        "rol":        "admin",
        "empresa_id": "org-1",
    }
    body.update(overrides)
    return body


def make_gotrue_transport(
    status_code: int,
    payload,
    seen: list | None = None,
) -> httpx.MockTransport:
    """MockTransport answering every request with *payload* as JSON.

    Requests are appended to *seen* so tests can inspect what was sent.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if isinstance(payload, (bytes, str)):
            return httpx.Response(status_code, content=payload)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content)

