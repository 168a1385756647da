"""
Parking Finder — Configuration via pydantic-settings.

Environment variables override defaults.  The fallback region is what the
map shows before the device has produced a position fix.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import ClassVar

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env_path: ClassVar[str] = str(Path(__file__).resolve().parents[2] / ".env")
    model_config = SettingsConfigDict(
        env_file=env_path,
        env_file_encoding="utf-8",
        env_prefix="PARKFINDER_",
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────
    app_name: str = "Parking Finder"
    debug: bool = False

    # ── Regions ────────────────────────────────────────────────────
    # Shown until a position fix exists (San Francisco).
    fallback_latitude: float = 37.7749
    fallback_longitude: float = -122.4194
    fallback_delta: float = 0.2
    # Span around the user's own position.
    located_delta: float = 0.015

    # ── Viewport projection ────────────────────────────────────────
    min_zoom: int = 1
    max_zoom: int = 20
    zoom_epsilon: float = 1e-6

    # ── Location provider ──────────────────────────────────────────
    # One of lowest, low, balanced, high, highest, best_for_navigation.
    accuracy_tier: str = "balanced"

    # Simulated device used by the in-process provider.
    device_permission: str = "undetermined"
    device_grant_on_request: bool = True
    device_latitude: float = 37.7793
    device_longitude: float = -122.4193

    # ── Map surface ────────────────────────────────────────────────
    # "native", "projected" or "text".
    map_surface: str = "native"
    # Passed explicitly to the projected (JS) surface; never read ambiently.
    maps_api_key: str = ""

    # ── CORS ───────────────────────────────────────────────────────
    cors_origins: str = "http://localhost:8081,http://localhost:19006"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse the comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
