"""
Location Session Endpoints
==========================
Read the session snapshot and trigger its two operations.  Both
operations always answer 200 with the resulting state; provider faults
show up in ``error``, never as an HTTP error.
"""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends

from parkfinder.dependencies import get_location_session, get_session_lock
from parkfinder.schemas.location import SessionStateOut
from parkfinder.services.location import LocationSession

router = APIRouter(prefix="/location", tags=["Location"])


@router.get("/state", response_model=SessionStateOut)
async def session_state(
    session: LocationSession = Depends(get_location_session),
):
    return SessionStateOut.model_validate(session.state)


@router.post("/refresh", response_model=SessionStateOut)
async def refresh_location(
    session: LocationSession = Depends(get_location_session),
    lock: asyncio.Lock = Depends(get_session_lock),
):
    """Re-read permission (no prompt) and fetch a fresh fix if granted."""
    async with lock:
        state = await session.query_and_fetch()
    return SessionStateOut.model_validate(state)


@router.post("/permission", response_model=SessionStateOut)
async def enable_location(
    session: LocationSession = Depends(get_location_session),
    lock: asyncio.Lock = Depends(get_session_lock),
):
    """
    Prompt for location permission, then fetch a fix if granted.

    The prompt can wait on the user indefinitely; clients own the UX
    for a prompt that never resolves.
    """
    async with lock:
        state = await session.request_permission_and_fetch()
    return SessionStateOut.model_validate(state)
