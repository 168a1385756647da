"""
In-process location provider.

Stands in for the device's location service when the backend runs
without one (development server, demos, tests).  The "device" is
described entirely by settings: its current permission, whether a
prompt grants access, and where it is.
"""

from __future__ import annotations

import asyncio
import logging

from parkfinder.config import Settings
from parkfinder.services.location import (
    AccuracyTier,
    PermissionStatus,
    PositionUnavailableError,
)
from parkfinder.spatial.region import Coordinate

logger = logging.getLogger(__name__)


class StaticLocationProvider:
    """
    A device parked at a fixed coordinate.

    ``request_permission`` flips an undetermined permission to granted
    (or denied, when ``grant_on_request`` is false).  A permission that
    is already decided is returned as-is, the way an OS only prompts
    once.  Setting ``position_error`` makes every fix fail with it.
    """

    def __init__(
        self,
        coordinate: Coordinate | None,
        permission: PermissionStatus | str = PermissionStatus.UNDETERMINED,
        *,
        grant_on_request: bool = True,
        position_error: Exception | None = None,
        latency: float = 0.0,
    ) -> None:
        self.coordinate = coordinate
        self.permission = PermissionStatus(permission)
        self.grant_on_request = grant_on_request
        self.position_error = position_error
        self.latency = latency

    @classmethod
    def from_settings(cls, settings: Settings) -> StaticLocationProvider:
        return cls(
            Coordinate(settings.device_latitude, settings.device_longitude),
            permission=settings.device_permission,
            grant_on_request=settings.device_grant_on_request,
        )

    async def _wait(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    async def get_permission_status(self) -> PermissionStatus:
        await self._wait()
        return self.permission

    async def request_permission(self) -> PermissionStatus:
        await self._wait()
        if self.permission is PermissionStatus.UNDETERMINED:
            self.permission = (
                PermissionStatus.GRANTED
                if self.grant_on_request
                else PermissionStatus.DENIED
            )
            logger.info("Simulated permission prompt answered: %s", self.permission.value)
        return self.permission

    async def get_current_position(self, accuracy: AccuracyTier) -> Coordinate:
        await self._wait()
        if self.position_error is not None:
            raise self.position_error
        if self.coordinate is None:
            raise PositionUnavailableError("Current location is unavailable")
        logger.debug("Simulated fix (accuracy=%s)", AccuracyTier(accuracy).value)
        return self.coordinate
