"""QTimer-backed ticker that drives the test countdown on the Qt event loop."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer

from angle_practice.constants.test_constants import TIMER_TICK_INTERVAL_MS


class QtTicker(QObject):
    """Fires ``callback`` every interval until stopped."""

    def __init__(self, interval_ms: int = TIMER_TICK_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._callback: Callable[[], None] | None = None
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._fire)

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        if not self._timer.isActive():
            self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def is_running(self) -> bool:
        return self._timer.isActive()

    def _fire(self) -> None:
        if self._callback is not None:
            self._callback()
