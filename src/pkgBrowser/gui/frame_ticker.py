"""Timer that drives the sync layer for hosts without a frame callback."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

from ..config import SYNC_TICK_INTERVAL_MS


class FrameTicker(QObject):
    """Invoke *callback* on every timer tick while started.

    Usually bound to :meth:`ModelViewSyncer.update` so pending refreshes are
    flushed once per tick.  Requires a running Qt event loop.
    """

    def __init__(self, callback: Callable[[], None], parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._callback = callback
        self._timer = QTimer(self)
        self._timer.setSingleShot(False)
        self._timer.timeout.connect(self._on_timeout)

    def start(self, interval_ms: Optional[int] = None) -> None:
        interval = SYNC_TICK_INTERVAL_MS if interval_ms is None else max(0, int(interval_ms))
        self._timer.start(interval)

    def stop(self) -> None:
        self._timer.stop()

    def is_active(self) -> bool:
        return self._timer.isActive()

    def interval(self) -> int:
        return self._timer.interval()

    def _on_timeout(self) -> None:
        self._callback()
