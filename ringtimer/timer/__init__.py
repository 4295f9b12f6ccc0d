"""Timer package."""

from .bands import (
    ColorBand,
    color_for,
    format_time,
    YELLOW_THRESHOLD,
    RED_THRESHOLD,
)
from .clock import ProgressClock, FRAME_INTERVAL_MS
from .engine import (
    CountdownEngine,
    TimerConfig,
    TimerSnapshot,
    TimerStatus,
    StartResult,
    parse_count,
    remaining_for,
)

__all__ = [
    "ColorBand",
    "color_for",
    "format_time",
    "YELLOW_THRESHOLD",
    "RED_THRESHOLD",
    "ProgressClock",
    "FRAME_INTERVAL_MS",
    "CountdownEngine",
    "TimerConfig",
    "TimerSnapshot",
    "TimerStatus",
    "StartResult",
    "parse_count",
    "remaining_for",
]
