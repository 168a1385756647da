"""Spatial subpackage — geographic values, viewport projection, map surfaces."""

from parkfinder.spatial.region import (
    Coordinate,
    MapChild,
    MarkerDescriptor,
    Region,
    region_for,
)
from parkfinder.spatial.surfaces import (
    MapSurface,
    NativeRegionSurface,
    ProjectedSurface,
    TextSurface,
    select_surface,
)
from parkfinder.spatial.viewport import (
    Viewport,
    ViewportProjector,
    extract_markers,
    project_region,
    region_to_center,
    region_to_zoom,
)

__all__ = [
    "Coordinate",
    "MapChild",
    "MarkerDescriptor",
    "Region",
    "region_for",
    "MapSurface",
    "NativeRegionSurface",
    "ProjectedSurface",
    "TextSurface",
    "select_surface",
    "Viewport",
    "ViewportProjector",
    "extract_markers",
    "project_region",
    "region_to_center",
    "region_to_zoom",
]
