"""Frame-driven progress clock.

A ``ProgressClock`` turns a duration into a 0.0 → 1.0 progress signal,
emitted once per display frame.  It replaces a toolkit "animation
controller" with two Qt primitives:

- ``QTimer``         fires at the frame interval (~60 fps by default).
- ``QElapsedTimer``  monotonic elapsed time since ``start()``.

``stop()`` clears an explicit active flag, so a frame that Qt already
queued before the stop is dropped instead of delivered.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QElapsedTimer, QObject, Qt, QTimer, pyqtSignal

logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 16


class ProgressClock(QObject):
    """Monotonic progress source with completion and cancel.

    Signals
    -------
    progressed(progress: float)
        Emitted every frame while active, clamped to [0, 1].
    finished()
        Emitted once, right after the frame that reached 1.0.
    """

    progressed = pyqtSignal(float)
    finished = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = FRAME_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._duration_ms: int = 0
        self._active: bool = False
        self._last: float = 0.0
        self._elapsed = QElapsedTimer()

        self._qt_timer = QTimer(self)
        self._qt_timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._qt_timer.setInterval(max(1, interval_ms))
        self._qt_timer.timeout.connect(self._on_frame)

    # ── public ────────────────────────────────────────────────────────

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    def is_active(self) -> bool:
        return self._active

    def start(self, duration_ms: int) -> None:
        """Run from 0.0 to 1.0 over *duration_ms*, restarting if active."""
        if duration_ms <= 0:
            raise ValueError(f"duration_ms must be positive, got {duration_ms}")
        self._duration_ms = duration_ms
        self._last = 0.0
        self._active = True
        self._elapsed.start()
        self._qt_timer.start()
        logger.debug("clock started for %d ms", duration_ms)

    def stop(self) -> None:
        """Halt the clock.  No signal is emitted after this returns."""
        if self._active:
            logger.debug("clock stopped at %.3f", self._last)
        self._active = False
        self._qt_timer.stop()

    def progress_at(self, elapsed_ms: int) -> float:
        """Progress for *elapsed_ms* into the current run."""
        if self._duration_ms <= 0:
            return 0.0
        return max(0.0, min(1.0, elapsed_ms / self._duration_ms))

    # ── internal ──────────────────────────────────────────────────────

    def _on_frame(self) -> None:
        if not self._active:
            return
        self._last = max(self._last, self.progress_at(self._elapsed.elapsed()))
        self.progressed.emit(self._last)

        # A progressed slot may already have stopped us.
        if self._last >= 1.0 and self._active:
            self.stop()
            self.finished.emit()
