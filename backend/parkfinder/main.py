"""
Parking Finder — FastAPI Application
====================================
Backend for the map screen: location permission / fix lifecycle and
map-surface rendering (native region, projected center + zoom, text).
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from parkfinder.config import get_settings
from parkfinder.routers import location, maps
from parkfinder.services.location import LocationSession
from parkfinder.services.providers import StaticLocationProvider

logger = logging.getLogger(__name__)
settings = get_settings()


# ── Lifespan (startup / shutdown) ─────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
        - Build the location provider and the screen's session.
        - Run the initial permission check + fetch (the "mount").
    Shutdown:
        - Close the session so late results are discarded.
    """
    logger.info("%s starting up...", settings.app_name)

    provider = StaticLocationProvider.from_settings(settings)
    session = LocationSession(provider, accuracy=settings.accuracy_tier)
    app.state.location_session = session
    app.state.session_lock = asyncio.Lock()

    state = await session.query_and_fetch()
    logger.info(
        "Initial location state: permission=%s coordinate=%s error=%s",
        state.permission.value if state.permission else None,
        state.coordinate,
        state.error,
    )

    yield

    session.close()
    logger.info("%s shut down.", settings.app_name)


# ── App factory ───────────────────────────────────────────────────
def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Shows the user's current position on a map, tracking the "
            "location permission and fix lifecycle."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(location.router, prefix="/api")
    app.include_router(maps.router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": settings.app_name}

    return app


# ── Module-level app instance (for `uvicorn parkfinder.main:app`) ─
app = create_app()  # pragma: no cover
