"""
Shared fixtures for the Parking Finder test suite.

This conftest provides:
- A mock location provider (AsyncMock) with sensible defaults
- Sample coordinates
- A test app with the session dependencies overridden
"""
from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from parkfinder.dependencies import get_location_session, get_session_lock
from parkfinder.services.location import LocationSession, PermissionStatus
from parkfinder.spatial.region import Coordinate

# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------
SAMPLE_COORD = Coordinate(latitude=37.78825, longitude=-122.4324)
OTHER_COORD = Coordinate(latitude=51.50735, longitude=-0.12776)


def make_provider(
    *,
    status: PermissionStatus = PermissionStatus.GRANTED,
    requested: PermissionStatus | None = None,
    coordinate: Coordinate | None = SAMPLE_COORD,
) -> AsyncMock:
    """Return a mock that behaves like a LocationProvider."""
    provider = AsyncMock()
    provider.get_permission_status.return_value = status
    provider.request_permission.return_value = requested or status
    provider.get_current_position.return_value = coordinate
    return provider


@pytest.fixture()
def provider() -> AsyncMock:
    return make_provider()


@pytest.fixture()
def session(provider) -> LocationSession:
    return LocationSession(provider)


def make_test_app(*routers) -> FastAPI:
    app = FastAPI()
    for router in routers:
        app.include_router(router, prefix="/api")
    return app


def make_client(app: FastAPI, session: LocationSession) -> AsyncClient:
    """AsyncClient bound to *app* with the session dependencies overridden."""
    lock = asyncio.Lock()
    app.dependency_overrides[get_location_session] = lambda: session
    app.dependency_overrides[get_session_lock] = lambda: lock
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://testserver")
