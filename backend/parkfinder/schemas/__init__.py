"""Schemas subpackage — Pydantic request/response models."""

from parkfinder.schemas.location import (
    CoordinateOut,
    MapViewResponse,
    RegionOut,
    SessionStateOut,
    ZoomResponse,
)

__all__ = [
    "CoordinateOut",
    "MapViewResponse",
    "RegionOut",
    "SessionStateOut",
    "ZoomResponse",
]
