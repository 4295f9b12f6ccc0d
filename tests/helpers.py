"""Shared test helpers for RingTimer."""

from ringtimer.timer.clock import ProgressClock


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class _FakeElapsed:
    """Stand-in for QElapsedTimer with a settable reading."""

    def __init__(self):
        self.value = 0

    def start(self):
        self.value = 0

    def elapsed(self):
        return self.value


class ManualClock(ProgressClock):
    """ProgressClock whose frames are pushed by the test."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._elapsed = _FakeElapsed()

    def start(self, duration_ms: int) -> None:
        """Arm the clock without the real frame timer."""
        super().start(duration_ms)
        self._qt_timer.stop()

    def frame_at(self, elapsed_ms: int) -> None:
        """Deliver one frame as if *elapsed_ms* had passed since start."""
        self._elapsed.value = elapsed_ms
        self._on_frame()

    def frame_at_progress(self, progress: float) -> None:
        self.frame_at(int(round(progress * self.duration_ms)))
