"""
Geographic Value Types
======================
Plain, immutable values shared by the location session and the viewport
projector:

1. **Coordinate** — a WGS84 latitude / longitude pair in degrees.
2. **Region**     — a center coordinate plus the angular span shown on
   each axis (``latitude_delta`` × ``longitude_delta``).
3. **Marker**     — a point of interest declared on a map view.

A region's span is a full width, so its bounds extend half a delta on
either side of the center:

    south = latitude  - latitude_delta / 2
    west  = longitude - longitude_delta / 2
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shapely.geometry import Point, Polygon, box

MARKER_KIND = "marker"


# ── Coordinate ────────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class Coordinate:
    """A position fix in decimal degrees."""

    latitude: float
    longitude: float

    def as_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}

    def label(self, precision: int = 5) -> str:
        """Human-readable ``"lat, lng"`` string."""
        return f"{self.latitude:.{precision}f}, {self.longitude:.{precision}f}"


# ── Region (center + span) ────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class Region:
    """A map viewport expressed as center plus angular span (degrees)."""

    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float

    @classmethod
    def around(cls, coordinate: Coordinate, delta: float) -> Region:
        """Square region of *delta* degrees centered on *coordinate*."""
        return cls(
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            latitude_delta=delta,
            longitude_delta=delta,
        )

    @property
    def center(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)

    @property
    def south(self) -> float:
        return self.latitude - self.latitude_delta / 2

    @property
    def north(self) -> float:
        return self.latitude + self.latitude_delta / 2

    @property
    def west(self) -> float:
        return self.longitude - self.longitude_delta / 2

    @property
    def east(self) -> float:
        return self.longitude + self.longitude_delta / 2

    def to_shapely(self) -> Polygon:
        """Bounding box in (lng, lat) axis order."""
        return box(self.west, self.south, self.east, self.north)

    def contains(self, coordinate: Coordinate) -> bool:
        """True when *coordinate* lies inside or on the edge of the region."""
        return self.to_shapely().covers(Point(coordinate.longitude, coordinate.latitude))

    def as_dict(self) -> dict[str, float]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "latitude_delta": self.latitude_delta,
            "longitude_delta": self.longitude_delta,
        }


def region_for(
    coordinate: Coordinate | None,
    *,
    located_delta: float,
    fallback: Region,
) -> Region:
    """
    Region the map should show for the current fix.

    With a coordinate the region is centered on it using *located_delta*;
    without one the *fallback* region is returned unchanged.
    """
    if coordinate is None:
        return fallback
    return Region.around(coordinate, located_delta)


# ── Markers ───────────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class MarkerDescriptor:
    """A point of interest rendered on the map."""

    coordinate: Coordinate
    title: str | None = None


@dataclass(frozen=True, slots=True)
class MapChild:
    """
    One annotation declared on a map view.

    Only children whose ``kind`` is ``"marker"`` carry a
    :class:`MarkerDescriptor` payload; other kinds (callouts, overlays,
    free text) are opaque to the projector.
    """

    kind: str
    payload: Any = field(default=None)

    @classmethod
    def marker(cls, coordinate: Coordinate, title: str | None = None) -> MapChild:
        return cls(MARKER_KIND, MarkerDescriptor(coordinate, title))

    @property
    def is_marker(self) -> bool:
        return self.kind == MARKER_KIND and isinstance(self.payload, MarkerDescriptor)
