"""Integration test fixtures.

Each test gets a fresh application backed by its own in-memory SQLite
database; the lifespan runs around the HTTP client so the engine and schema
exist for the duration of the test.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from app.auth.jwt import create_access_token
from app.factory import create_app
from tests.conftest import TEST_USERNAME


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from app.core.config import Settings


pytestmark = pytest.mark.integration


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create FastAPI app with test settings."""
    return create_app(test_settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client with the application lifespan running."""
    async with (
        app.router.lifespan_context(app),
        AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac,
    ):
        yield ac


def _bearer(settings: Settings, *roles: str) -> dict[str, str]:
    token = create_access_token(TEST_USERNAME, roles=list(roles), settings=settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(test_settings: Settings) -> dict[str, str]:
    """Authorization header for a caller with the admin role."""
    return _bearer(test_settings, "admin")


@pytest.fixture
def user_headers(test_settings: Settings) -> dict[str, str]:
    """Authorization header for a caller with the user role."""
    return _bearer(test_settings, "user")


@pytest.fixture
def viewer_headers(test_settings: Settings) -> dict[str, str]:
    """Authorization header for a read-only caller."""
    return _bearer(test_settings, "viewer")
