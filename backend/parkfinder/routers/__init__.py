"""Routers subpackage — HTTP layer for all API endpoints."""

from parkfinder.routers import location, maps

__all__ = ["location", "maps"]
