"""
Map Surfaces
============
One interface, three renderers, selected by capability rather than by
platform:

* ``native``    — the map control accepts a region directly.
* ``projected`` — a JS map API that only understands center + zoom; the
  region is projected through :class:`ViewportProjector`.
* ``text``      — no interactive map at all; a textual summary.

Each surface turns a region plus declared children into a JSON-ready
payload for the client.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Protocol

from parkfinder.spatial.region import MapChild, MarkerDescriptor, Region
from parkfinder.spatial.viewport import ViewportProjector, extract_markers

logger = logging.getLogger(__name__)

TEXT_UNAVAILABLE = "Map is not available in the web build yet."
TEXT_OPEN_NATIVE = "Open a native client to see the interactive map."


def marker_to_dict(
    marker: MarkerDescriptor, region: Region | None = None,
) -> dict[str, Any]:
    """JSON payload for a marker; ``in_view`` is false when it is off-screen."""
    return {
        "coordinate": marker.coordinate.as_dict(),
        "title": marker.title,
        "in_view": region is not None and region.contains(marker.coordinate),
    }


def _markers(
    region: Region | None, children: Iterable[MapChild] | None,
) -> list[dict[str, Any]]:
    return [marker_to_dict(m, region) for m in extract_markers(children)]


class MapSurface(Protocol):
    kind: str

    def render(
        self,
        region: Region | None,
        children: Iterable[MapChild] | None = None,
        *,
        shows_user_location: bool = False,
    ) -> dict[str, Any]: ...


class NativeRegionSurface:
    """Map control with native region support; the region passes through."""

    kind = "native"

    def render(
        self,
        region: Region | None,
        children: Iterable[MapChild] | None = None,
        *,
        shows_user_location: bool = False,
    ) -> dict[str, Any]:
        return {
            "surface": self.kind,
            "region": region.as_dict() if region is not None else None,
            "markers": _markers(region, children),
            "shows_user_location": shows_user_location,
        }


class ProjectedSurface:
    """
    JS map API driven by center + zoom.

    The API key is handed in by whoever builds the surface; the surface
    never looks it up in the process environment.
    """

    kind = "projected"

    def __init__(self, projector: ViewportProjector, api_key: str = "") -> None:
        self.projector = projector
        self.api_key = api_key

    def render(
        self,
        region: Region | None,
        children: Iterable[MapChild] | None = None,
        *,
        shows_user_location: bool = False,
    ) -> dict[str, Any]:
        if not self.api_key:
            logger.warning("Projected map surface rendered without an API key")
        payload: dict[str, Any] = {
            "surface": self.kind,
            "center": None,
            "zoom": None,
            "api_key": self.api_key or None,
            "markers": _markers(region, children),
            "shows_user_location": shows_user_location,
        }
        if region is not None:
            viewport = self.projector.project(region)
            payload["center"] = {
                "lat": viewport.center.latitude,
                "lng": viewport.center.longitude,
            }
            payload["zoom"] = viewport.zoom
        return payload


class TextSurface:
    """Textual fallback used where no map renderer exists."""

    kind = "text"

    def render(
        self,
        region: Region | None,
        children: Iterable[MapChild] | None = None,
        *,
        shows_user_location: bool = False,
    ) -> dict[str, Any]:
        if region is not None:
            subtitle = f"Center: {region.center.label()}"
        else:
            subtitle = TEXT_OPEN_NATIVE
        return {
            "surface": self.kind,
            "title": TEXT_UNAVAILABLE,
            "subtitle": subtitle,
        }


SURFACE_KINDS: tuple[str, ...] = ("native", "projected", "text")


def select_surface(
    kind: str,
    *,
    projector: ViewportProjector | None = None,
    api_key: str = "",
) -> MapSurface:
    """Build the surface for *kind*; raises ``ValueError`` for unknown kinds."""
    if kind == "native":
        return NativeRegionSurface()
    if kind == "projected":
        return ProjectedSurface(projector or ViewportProjector(), api_key=api_key)
    if kind == "text":
        return TextSurface()
    raise ValueError(
        f"Unknown map surface '{kind}'. Allowed: {', '.join(SURFACE_KINDS)}"
    )
