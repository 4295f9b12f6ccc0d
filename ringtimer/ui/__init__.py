"""UI package."""

from .timer_widget import TimerWidget
from .progress_ring import ProgressRing, ring_geometry

__all__ = [
    "TimerWidget",
    "ProgressRing",
    "ring_geometry",
]
