"""
Region → Viewport Projection
============================
Projection-based map renderers (JS map APIs, static tile maps) do not
accept a *region*; they want a center point and a discrete zoom level.
This module derives that viewport from a region's latitude span:

    zoom = round(log2(360 / max(latitude_delta, ε)))

clamped to ``[min_zoom, max_zoom]``.  At zoom *z* the world is 2^z tiles
wide, so a span of ``360 / 2^z`` degrees roughly fills one tile.  The
formula is the contract; it is an approximation and not the exact
inverse of any particular SDK's projection.

Everything here is pure: no settings lookup, no environment access.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from parkfinder.spatial.region import Coordinate, MapChild, MarkerDescriptor, Region

logger = logging.getLogger(__name__)

MIN_ZOOM = 1
MAX_ZOOM = 20
SPAN_EPSILON = 1e-6
WORLD_SPAN_DEG = 360.0


@dataclass(frozen=True, slots=True)
class Viewport:
    """Center point plus discrete zoom level."""

    center: Coordinate
    zoom: int


# ── Pure projection functions ─────────────────────────────────────

def region_to_zoom(
    region: Region,
    *,
    min_zoom: int = MIN_ZOOM,
    max_zoom: int = MAX_ZOOM,
    epsilon: float = SPAN_EPSILON,
) -> int:
    """
    Approximate a discrete zoom level from the region's latitude span.

    Only ``latitude_delta`` is consulted.  Degenerate spans (zero,
    negative, NaN) are floored at *epsilon* and therefore land on
    *max_zoom*; an infinite span lands on *min_zoom*.
    """
    span = region.latitude_delta
    if math.isnan(span) or span < epsilon:
        logger.debug("Flooring latitude_delta=%r at %g", span, epsilon)
        span = epsilon
    if math.isinf(span):
        return min_zoom

    zoom = round(math.log2(WORLD_SPAN_DEG / span))
    return max(min_zoom, min(max_zoom, zoom))


def region_to_center(region: Region) -> dict[str, float]:
    """``{lat, lng}`` literal as expected by JS map APIs."""
    return {"lat": region.latitude, "lng": region.longitude}


def extract_markers(
    children: Iterable[MapChild] | None,
) -> tuple[MarkerDescriptor, ...]:
    """
    Marker descriptors declared among *children*, in declaration order.

    Non-marker children are skipped.  The result is a tuple, so callers
    can iterate it any number of times and repeated calls on the same
    children return equal sequences.
    """
    if children is None:
        return ()
    return tuple(child.payload for child in children if child.is_marker)


def project_region(
    region: Region,
    *,
    min_zoom: int = MIN_ZOOM,
    max_zoom: int = MAX_ZOOM,
    epsilon: float = SPAN_EPSILON,
) -> Viewport:
    return Viewport(
        center=region.center,
        zoom=region_to_zoom(
            region, min_zoom=min_zoom, max_zoom=max_zoom, epsilon=epsilon
        ),
    )


# ── Configured projector ──────────────────────────────────────────
class ViewportProjector:
    """
    Binds a zoom range and span floor to the pure projection functions.

    Parameters
    ----------
    min_zoom, max_zoom : int
        Inclusive zoom range supported by the target renderer.
    epsilon : float
        Smallest latitude span considered before taking the logarithm.
    """

    def __init__(
        self,
        min_zoom: int = MIN_ZOOM,
        max_zoom: int = MAX_ZOOM,
        epsilon: float = SPAN_EPSILON,
    ) -> None:
        if min_zoom > max_zoom:
            raise ValueError(
                f"min_zoom ({min_zoom}) must not exceed max_zoom ({max_zoom})"
            )
        if epsilon <= 0:
            raise ValueError("epsilon must be positive")
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.epsilon = epsilon

    def region_to_zoom(self, region: Region) -> int:
        return region_to_zoom(
            region,
            min_zoom=self.min_zoom,
            max_zoom=self.max_zoom,
            epsilon=self.epsilon,
        )

    @staticmethod
    def region_to_center(region: Region) -> dict[str, float]:
        return region_to_center(region)

    @staticmethod
    def extract_markers(
        children: Iterable[MapChild] | None,
    ) -> tuple[MarkerDescriptor, ...]:
        return extract_markers(children)

    def project(self, region: Region) -> Viewport:
        return project_region(
            region,
            min_zoom=self.min_zoom,
            max_zoom=self.max_zoom,
            epsilon=self.epsilon,
        )
