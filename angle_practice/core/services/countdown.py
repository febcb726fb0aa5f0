"""Clock and ticker collaborators used to drive the test countdown."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from angle_practice.core.models import utc_now


class Clock(Protocol):
    def now(self) -> datetime:
        """Return the current timezone-aware UTC time."""
        ...


class SystemClock:
    """Adapter clock (real wall-clock time)."""

    def now(self) -> datetime:
        return utc_now()


class Ticker(Protocol):
    """Cooperative 1 second ticker; stopping simply ends further callbacks."""

    def start(self, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...

    def is_running(self) -> bool: ...


class NullTicker:
    """Ticker that never fires, for headless use without an event loop."""

    def __init__(self) -> None:
        self._running = False

    def start(self, callback: Callable[[], None]) -> None:
        self._running = True

    def stop(self) -> None:
        self._running = False

    def is_running(self) -> bool:
        return self._running
