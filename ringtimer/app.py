"""Main application window for RingTimer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow

from .settings import Settings, load_settings
from .timer.engine import CountdownEngine, TimerSnapshot
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)


class RingTimerApp(QMainWindow):
    """Main application window.

    Owns the single ``CountdownEngine``; the engine (and its clock) are
    Qt children of the window, so no timer outlives it.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings: Settings = settings if settings is not None else load_settings()
        s = self._settings

        self.setWindowTitle("RingTimer")
        self.resize(s.window_width, s.window_height)
        if s.always_on_top:
            self.setWindowFlags(self.windowFlags() | Qt.WindowType.WindowStaysOnTopHint)

        self._engine = CountdownEngine(self, frame_interval_ms=s.frame_interval_ms)
        self._engine.snapshot_changed.connect(self._on_snapshot)

        self._timer_widget = TimerWidget(
            self._engine, self,
            stroke_width=s.stroke_width,
            ring_content_size=s.ring_content_size,
        )
        self.setCentralWidget(self._timer_widget)
        self.setStyleSheet(build_stylesheet())

        self._setup_shortcuts()

    @property
    def engine(self) -> CountdownEngine:
        return self._engine

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _setup_shortcuts(self) -> None:
        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)
        self.addAction(quit_action)

    def _on_escape(self) -> None:
        """Cancel the timer (no-op when idle)."""
        if self._engine.is_running:
            self._engine.cancel()

    # ══════════════════════════════════════════════════════════════════
    #  ENGINE SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_snapshot(self, snapshot: TimerSnapshot) -> None:
        """Mirror the countdown in the window title while running."""
        title = f"{snapshot.time_text} - RingTimer" if snapshot.is_running else "RingTimer"
        if title != self.windowTitle():
            self.setWindowTitle(title)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Stop any running countdown before the window goes away."""
        if self._engine.is_running:
            logger.info("window closed with %s left", self._engine.snapshot().time_text)
        self._engine.cancel()
        event.accept()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Escape cancels a running countdown."""
        if event.key() == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        super().keyPressEvent(event)
