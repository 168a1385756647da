"""
Request-scoped access to the screen's location session.

The session and its lock are created by the application lifespan and
live on ``app.state``; routers receive them through ``Depends`` so tests
can swap them via ``app.dependency_overrides``.
"""

from __future__ import annotations

import asyncio

from fastapi import Request

from parkfinder.services.location import LocationSession


def get_location_session(request: Request) -> LocationSession:
    return request.app.state.location_session


def get_session_lock(request: Request) -> asyncio.Lock:
    """Serialises session operations triggered by concurrent requests."""
    return request.app.state.session_lock
