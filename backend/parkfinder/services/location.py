"""
Location Session
================
Owns the permission / position-fix lifecycle for one map screen.

State Machine
-------------
Both public operations are complete transactions from one consistent
snapshot to the next:

    loading=True, error=None
        → read (or prompt for) permission, store it
        → not granted: clear coordinate
        → granted:     fetch one fix at the configured accuracy tier
                       success → store coordinate
                       fault   → store message, keep previous coordinate
    loading=False   (always, exactly once, in ``finally``)

"Not granted" is a state, not an error: it is surfaced through
``permission`` and leaves ``error`` empty.  Provider faults never escape
an operation; callers observe state, not exceptions.

Concurrency
-----------
Each operation is a single coroutine.  The session does not queue or
cancel overlapping calls; callers must not start a second operation
while one is in flight.  After :meth:`LocationSession.close` any result
that arrives is dropped instead of written; only the closing
``loading=False`` is still applied.

A fetch fault after an earlier success keeps the old coordinate on
screen without a staleness flag.  That mirrors the mobile client and is
recorded as an open product decision.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from typing import Protocol

from parkfinder.spatial.region import Coordinate

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to read location"
REQUEST_FAILED = "Failed to request permission"


# ── Enumerations ──────────────────────────────────────────────────
class PermissionStatus(str, enum.Enum):
    UNDETERMINED = "undetermined"
    GRANTED = "granted"
    DENIED = "denied"


class AccuracyTier(str, enum.Enum):
    """Coarse precision / power tradeoff requested from the provider."""

    LOWEST = "lowest"
    LOW = "low"
    BALANCED = "balanced"
    HIGH = "high"
    HIGHEST = "highest"
    BEST_FOR_NAVIGATION = "best_for_navigation"


# ── Provider errors ───────────────────────────────────────────────
class LocationProviderError(Exception):
    """Base class for faults raised by a location provider."""


class PermissionRequestError(LocationProviderError):
    """The OS permission query or prompt could not be completed."""


class PositionUnavailableError(LocationProviderError):
    """No position fix could be obtained (timeout, no signal, ...)."""


# ── Collaborator contract ─────────────────────────────────────────
class LocationProvider(Protocol):
    async def get_permission_status(self) -> PermissionStatus: ...

    async def request_permission(self) -> PermissionStatus: ...

    async def get_current_position(self, accuracy: AccuracyTier) -> Coordinate: ...


# ── Session state ─────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class SessionState:
    """Read-only snapshot of a location session."""

    permission: PermissionStatus | None = None
    coordinate: Coordinate | None = None
    error: str | None = None
    loading: bool = False

    @property
    def granted(self) -> bool:
        return self.permission is PermissionStatus.GRANTED


def _fault_message(exc: BaseException, default: str) -> str:
    message = str(exc).strip()
    return message or default


class LocationSession:
    """
    Permission and position state for a single screen.

    Parameters
    ----------
    provider : LocationProvider
        Platform location service.
    accuracy : AccuracyTier
        Tier requested for every position fix.
    """

    def __init__(
        self,
        provider: LocationProvider,
        accuracy: AccuracyTier | str = AccuracyTier.BALANCED,
    ) -> None:
        self.provider = provider
        self.accuracy = AccuracyTier(accuracy)
        self._state = SessionState()
        self._closed = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Detach the session; results of in-flight work are discarded."""
        self._closed = True

    # ── Public operations ─────────────────────────────────────

    async def query_and_fetch(self) -> SessionState:
        """Read permission without prompting and, if granted, fetch a fix."""
        self._commit(loading=True, error=None)
        try:
            status = await self.provider.get_permission_status()
            if self._store_permission(status):
                await self._fetch_and_store()
        except Exception as exc:
            self._record_fault(exc, FETCH_FAILED)
        finally:
            self._finish()
        return self._state

    async def request_permission_and_fetch(self) -> SessionState:
        """
        Prompt for permission and, if granted, fetch a fix.

        The prompt may wait on the user indefinitely; no timeout is
        applied here.
        """
        self._commit(loading=True, error=None)
        try:
            status = await self.provider.request_permission()
            if self._store_permission(status):
                await self._fetch_and_store()
        except Exception as exc:
            self._record_fault(exc, REQUEST_FAILED)
        finally:
            self._finish()
        return self._state

    # ── Internals ─────────────────────────────────────────────

    def _store_permission(self, status: PermissionStatus | str) -> bool:
        status = PermissionStatus(status)
        if status is not self._state.permission:
            logger.info("Location permission: %s", status.value)
        self._commit(permission=status)
        if status is not PermissionStatus.GRANTED:
            self._commit(coordinate=None)
            return False
        return True

    async def _fetch_and_store(self) -> None:
        # Does not touch ``loading``; the calling operation resets it.
        try:
            coordinate = await self.provider.get_current_position(self.accuracy)
        except Exception as exc:
            self._record_fault(exc, FETCH_FAILED)
            return
        self._commit(coordinate=coordinate)

    def _record_fault(self, exc: Exception, default: str) -> None:
        message = _fault_message(exc, default)
        logger.warning("Location provider fault: %s", message)
        self._commit(error=message)

    def _commit(self, **changes) -> None:
        if self._closed:
            logger.debug("Session closed; discarding update %s", changes)
            return
        self._state = replace(self._state, **changes)

    def _finish(self) -> None:
        # Applied even after close() so a finished operation never
        # reports itself as still loading.
        self._state = replace(self._state, loading=False)
