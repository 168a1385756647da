"""
Pydantic schemas for API request/response serialization.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from parkfinder.services.location import PermissionStatus


# ═══════════════════════════════════════════════════════════════════
# Geographic values
# ═══════════════════════════════════════════════════════════════════
class CoordinateOut(BaseModel):
    latitude: float
    longitude: float

    model_config = {"from_attributes": True}


class RegionOut(BaseModel):
    """Center plus angular span (degrees)."""

    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float

    model_config = {"from_attributes": True}


# ═══════════════════════════════════════════════════════════════════
# Session
# ═══════════════════════════════════════════════════════════════════
class SessionStateOut(BaseModel):
    """Snapshot of the location session."""

    permission: PermissionStatus | None = Field(
        default=None,
        description="Unset until the first permission query completes",
    )
    coordinate: CoordinateOut | None = None
    error: str | None = None
    loading: bool = False

    model_config = {"from_attributes": True}


# ═══════════════════════════════════════════════════════════════════
# Map view
# ═══════════════════════════════════════════════════════════════════
class MapViewResponse(BaseModel):
    """Everything the client needs to draw the map screen."""

    title: str
    status_text: str | None = Field(
        default=None,
        description="Permission prompt or formatted coordinate",
    )
    action: Literal["enable_location", "refresh_location"]
    action_disabled: bool
    session: SessionStateOut
    region: RegionOut
    surface: dict[str, Any] = Field(
        description="Surface-specific render payload",
    )


class ZoomResponse(BaseModel):
    latitude_delta: float
    zoom: int
