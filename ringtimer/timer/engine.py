"""Countdown state machine for RingTimer.

States
------
IDLE      Waiting for the user to enter a duration and press Start.
RUNNING   Progress animating from 0.0 to 1.0 over the configured time.

Transitions
-----------
IDLE → RUNNING      (start, total seconds > 0)
IDLE → IDLE         (start with total seconds <= 0, rejected)
RUNNING → IDLE      (cancel)
RUNNING → IDLE      (progress reaches 1.0)

The engine owns all timer state.  Views subscribe to
``snapshot_changed`` / ``status_changed`` or pull ``snapshot()``; they
never reach into the engine's fields.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from .bands import ColorBand, color_for, format_time
from .clock import FRAME_INTERVAL_MS, ProgressClock

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"


class StartResult(Enum):
    STARTED = "started"
    REJECTED = "rejected"


# ── value types ───────────────────────────────────────────────────────────


def parse_count(text: str) -> int:
    """Parse a non-negative whole number typed by the user.

    A single leading ``+`` is allowed.  Empty, non-numeric and negative
    input all come back as ``0``.
    """
    stripped = (text or "").strip()
    if stripped.startswith("+"):
        stripped = stripped[1:]
    if not stripped.isdecimal():
        return 0
    return int(stripped)


@dataclass(frozen=True)
class TimerConfig:
    minutes: int = 0
    seconds: int = 0

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds

    @classmethod
    def from_text(cls, minutes_text: str, seconds_text: str) -> TimerConfig:
        return cls(parse_count(minutes_text), parse_count(seconds_text))


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only view of the engine at one instant."""

    status: TimerStatus
    total_seconds: int
    remaining_seconds: int
    progress: float

    @property
    def is_running(self) -> bool:
        return self.status == TimerStatus.RUNNING

    @property
    def band(self) -> ColorBand:
        return color_for(self.progress)

    @property
    def time_text(self) -> str:
        return format_time(self.remaining_seconds)


def remaining_for(total_seconds: int, progress: float) -> int:
    """Whole seconds left after *progress* of *total_seconds*."""
    return total_seconds - math.floor(total_seconds * progress)


# ── engine ────────────────────────────────────────────────────────────────


class CountdownEngine(QObject):
    """Qt-based countdown with a two-state lifecycle.

    Signals
    -------
    snapshot_changed(snapshot: TimerSnapshot)
        Emitted on every frame while running and on every transition.
    status_changed(new_status: TimerStatus)
        Emitted on IDLE ↔ RUNNING transitions.
    completed()
        Emitted after the countdown reaches zero naturally.
    """

    snapshot_changed = pyqtSignal(object)
    status_changed = pyqtSignal(object)
    completed = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        clock: ProgressClock | None = None,
        frame_interval_ms: int = FRAME_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)

        self._status: TimerStatus = TimerStatus.IDLE
        self._config: TimerConfig = TimerConfig()
        self._progress: float = 0.0
        self._remaining: int = 0

        # The clock is a Qt child, so it dies with the engine.
        if clock is None:
            clock = ProgressClock(self, interval_ms=frame_interval_ms)
        elif clock.parent() is None:
            clock.setParent(self)
        self._clock = clock
        self._clock.progressed.connect(self.on_tick)
        self._clock.finished.connect(self.on_complete)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def status(self) -> TimerStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        return self._status == TimerStatus.RUNNING

    @property
    def config(self) -> TimerConfig:
        return self._config

    @property
    def total_seconds(self) -> int:
        return self._config.total_seconds

    @property
    def progress(self) -> float:
        """0.0 → 1.0 progress through the current run."""
        return self._progress

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def clock(self) -> ProgressClock:
        return self._clock

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            status=self._status,
            total_seconds=self._config.total_seconds,
            remaining_seconds=self._remaining,
            progress=self._progress,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def configure(self, minutes_text: str, seconds_text: str) -> TimerConfig:
        """Build a config from raw text; bad input counts as zero."""
        return TimerConfig.from_text(minutes_text, seconds_text)

    def start(self, config: TimerConfig) -> StartResult:
        """Begin a fresh run.  Only valid from IDLE with a positive total."""
        if self._status != TimerStatus.IDLE:
            logger.debug("start ignored: already running")
            return StartResult.REJECTED
        if config.total_seconds <= 0:
            logger.debug("start rejected: zero duration (%r)", config)
            return StartResult.REJECTED

        self._config = config
        self._progress = 0.0
        self._remaining = config.total_seconds
        self._set_status(TimerStatus.RUNNING)
        self._clock.start(config.total_seconds * 1000)
        logger.debug("started %s", format_time(config.total_seconds))
        return StartResult.STARTED

    def cancel(self) -> None:
        """Stop the run and show the full configured time again."""
        if self._status != TimerStatus.RUNNING:
            return
        self._clock.stop()
        self._progress = 0.0
        self._remaining = self._config.total_seconds
        logger.debug("cancelled with %d s left", self._remaining)
        self._set_status(TimerStatus.IDLE)

    # ══════════════════════════════════════════════════════════════════
    #  CLOCK CALLBACKS
    # ══════════════════════════════════════════════════════════════════

    def on_tick(self, current_progress: float) -> None:
        """Recompute remaining time for a new progress value."""
        if self._status != TimerStatus.RUNNING:
            return
        clamped = max(0.0, min(1.0, current_progress))
        self._progress = max(self._progress, clamped)
        self._remaining = remaining_for(self._config.total_seconds, self._progress)
        self.snapshot_changed.emit(self.snapshot())

    def on_complete(self) -> None:
        """Natural end of a run.  Remaining keeps its last value."""
        if self._status != TimerStatus.RUNNING:
            return
        self._clock.stop()
        logger.debug("completed %s", format_time(self._config.total_seconds))
        self._set_status(TimerStatus.IDLE)
        self.completed.emit()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _set_status(self, new_status: TimerStatus) -> None:
        self._status = new_status
        self.status_changed.emit(new_status)
        self.snapshot_changed.emit(self.snapshot())
