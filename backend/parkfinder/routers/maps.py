"""
Map View Endpoints
==================
Compose the session snapshot into what the map screen renders: status
line, primary action, region and the surface-specific payload.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from parkfinder.config import Settings, get_settings
from parkfinder.dependencies import get_location_session
from parkfinder.schemas.location import (
    MapViewResponse,
    RegionOut,
    SessionStateOut,
    ZoomResponse,
)
from parkfinder.services.location import LocationSession, SessionState
from parkfinder.spatial.region import MapChild, Region, region_for
from parkfinder.spatial.surfaces import select_surface
from parkfinder.spatial.viewport import ViewportProjector

router = APIRouter(prefix="/map", tags=["Map"])

PERMISSION_PROMPT = "To show nearby parking, we need access to your location."
YOU_ARE_HERE = "You are here"


def fallback_region(settings: Settings) -> Region:
    return Region(
        latitude=settings.fallback_latitude,
        longitude=settings.fallback_longitude,
        latitude_delta=settings.fallback_delta,
        longitude_delta=settings.fallback_delta,
    )


def build_projector(settings: Settings) -> ViewportProjector:
    return ViewportProjector(
        min_zoom=settings.min_zoom,
        max_zoom=settings.max_zoom,
        epsilon=settings.zoom_epsilon,
    )


def status_text(state: SessionState) -> str | None:
    if not state.granted:
        return PERMISSION_PROMPT
    if state.coordinate is not None:
        return state.coordinate.label()
    return None


def map_children(state: SessionState) -> list[MapChild]:
    if state.coordinate is None:
        return []
    return [MapChild.marker(state.coordinate, YOU_ARE_HERE)]


# ── Map view ──────────────────────────────────────────────────────
@router.get("/view", response_model=MapViewResponse)
async def map_view(
    surface: str | None = Query(
        default=None,
        description="native, projected or text (defaults to configured surface)",
    ),
    session: LocationSession = Depends(get_location_session),
    settings: Settings = Depends(get_settings),
):
    state = session.state
    kind = surface or settings.map_surface
    try:
        renderer = select_surface(
            kind,
            projector=build_projector(settings),
            api_key=settings.maps_api_key,
        )
    except ValueError as exc:
        raise HTTPException(400, str(exc)) from exc

    region = region_for(
        state.coordinate,
        located_delta=settings.located_delta,
        fallback=fallback_region(settings),
    )

    return MapViewResponse(
        title=settings.app_name,
        status_text=status_text(state),
        action="refresh_location" if state.granted else "enable_location",
        action_disabled=state.loading,
        session=SessionStateOut.model_validate(state),
        region=RegionOut.model_validate(region),
        surface=renderer.render(
            region,
            map_children(state),
            shows_user_location=state.granted,
        ),
    )


# ── Zoom for a span ───────────────────────────────────────────────
@router.get("/zoom", response_model=ZoomResponse)
async def zoom_for_span(
    latitude_delta: float = Query(description="Latitude span in degrees"),
    settings: Settings = Depends(get_settings),
):
    """Discrete zoom level a projected map would use for this span."""
    region = Region(0.0, 0.0, latitude_delta, latitude_delta)
    return ZoomResponse(
        latitude_delta=latitude_delta,
        zoom=build_projector(settings).region_to_zoom(region),
    )
