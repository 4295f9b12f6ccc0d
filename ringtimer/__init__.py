"""RingTimer: a circular countdown timer."""

__version__ = "0.1.0"
