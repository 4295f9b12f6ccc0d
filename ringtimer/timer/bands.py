"""Colour bands and time formatting for the countdown ring."""

from __future__ import annotations

from enum import Enum


class ColorBand(Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


# Upper bounds are inclusive: a progress of exactly 0.6 is still green.
YELLOW_THRESHOLD = 0.6
RED_THRESHOLD = 0.9


def color_for(progress: float) -> ColorBand:
    """Map elapsed progress (0..1) to an urgency band."""
    progress = max(0.0, min(1.0, progress))
    if progress <= YELLOW_THRESHOLD:
        return ColorBand.GREEN
    if progress <= RED_THRESHOLD:
        return ColorBand.YELLOW
    return ColorBand.RED


def format_time(total_seconds: int) -> str:
    """``75`` → ``"01:15"``."""
    minutes, seconds = divmod(max(0, total_seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"
