"""Services subpackage — location session and providers."""

from parkfinder.services.location import (
    AccuracyTier,
    LocationProvider,
    LocationProviderError,
    LocationSession,
    PermissionRequestError,
    PermissionStatus,
    PositionUnavailableError,
    SessionState,
)
from parkfinder.services.providers import StaticLocationProvider

__all__ = [
    "AccuracyTier",
    "LocationProvider",
    "LocationProviderError",
    "LocationSession",
    "PermissionRequestError",
    "PermissionStatus",
    "PositionUnavailableError",
    "SessionState",
    "StaticLocationProvider",
]
