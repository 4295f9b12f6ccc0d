"""Main timer screen.

Layout (top → bottom):
    - ProgressRing (large, centred), holding either
        * the Min / Sec inputs (idle), or
        * the MM:SS readout (running)
    - Start / Cancel button (full width)
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QStackedWidget, QSizePolicy,
)

from ..timer.engine import CountdownEngine, TimerSnapshot, TimerStatus
from .progress_ring import ProgressRing


BUTTON_LABELS: dict[TimerStatus, str] = {
    TimerStatus.IDLE:    "Start",
    TimerStatus.RUNNING: "Cancel",
}

_INPUTS_PAGE = 0
_READOUT_PAGE = 1


class TimerWidget(QWidget):
    """Countdown ring plus its single Start/Cancel control."""

    def __init__(
        self,
        engine: CountdownEngine,
        parent: QWidget | None = None,
        *,
        stroke_width: float = 20.0,
        ring_content_size: int = 160,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui(stroke_width, ring_content_size)
        self._connect_signals()
        self._on_status_changed(engine.status)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self, stroke_width: float, ring_content_size: int) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(0)

        root.addStretch(1)

        # ── progress ring (centrepiece) ──────────────────────────────
        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(
            self, stroke_width=stroke_width, content_size=ring_content_size,
        )
        ring_row.addWidget(self._ring)
        root.addLayout(ring_row)

        self._stack = QStackedWidget(self._ring)
        self._stack.setSizePolicy(
            QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Preferred,
        )
        self._ring.content_layout().addWidget(self._stack)

        # ── idle page: minutes / seconds inputs ──────────────────────
        inputs = QWidget(self._stack)
        inputs_row = QHBoxLayout(inputs)
        inputs_row.setContentsMargins(0, 0, 0, 0)
        inputs_row.setSpacing(20)
        inputs_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._minutes_input = self._make_field(inputs, inputs_row, "Min")
        self._seconds_input = self._make_field(inputs, inputs_row, "Sec")
        self._stack.insertWidget(_INPUTS_PAGE, inputs)

        # ── running page: MM:SS readout ──────────────────────────────
        self._time_label = QLabel("00:00", self._stack)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._stack.insertWidget(_READOUT_PAGE, self._time_label)

        root.addStretch(1)

        # ── start / cancel ───────────────────────────────────────────
        self._action_btn = QPushButton(BUTTON_LABELS[TimerStatus.IDLE], self)
        self._action_btn.setObjectName("primaryButton")
        self._action_btn.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed,
        )
        root.addWidget(self._action_btn)

    @staticmethod
    def _make_field(parent: QWidget, row: QHBoxLayout, caption: str) -> QLineEdit:
        column = QVBoxLayout()
        column.setSpacing(2)
        label = QLabel(caption, parent)
        label.setObjectName("fieldCaption")
        field = QLineEdit(parent)
        field.setFixedWidth(50)
        field.setAlignment(Qt.AlignmentFlag.AlignCenter)
        field.setInputMethodHints(Qt.InputMethodHint.ImhDigitsOnly)
        column.addWidget(label)
        column.addWidget(field)
        row.addLayout(column)
        return field

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._action_btn.clicked.connect(self._on_action)
        self._minutes_input.returnPressed.connect(self.start_from_inputs)
        self._seconds_input.returnPressed.connect(self.start_from_inputs)

        self._engine.snapshot_changed.connect(self._on_snapshot)
        self._engine.status_changed.connect(self._on_status_changed)

    # ── public ────────────────────────────────────────────────────────────

    def start_from_inputs(self) -> None:
        """Read both inputs and try to start a run."""
        if self._engine.is_running:
            return
        config = self._engine.configure(
            self._minutes_input.text(), self._seconds_input.text(),
        )
        self._engine.start(config)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_action(self) -> None:
        if self._engine.is_running:
            self._engine.cancel()
        else:
            self.start_from_inputs()

    def _on_status_changed(self, status: TimerStatus) -> None:
        self._action_btn.setText(BUTTON_LABELS[status])
        if status == TimerStatus.RUNNING:
            self._stack.setCurrentIndex(_READOUT_PAGE)
        else:
            self._stack.setCurrentIndex(_INPUTS_PAGE)
        self._on_snapshot(self._engine.snapshot())

    def _on_snapshot(self, snapshot: TimerSnapshot) -> None:
        self._time_label.setText(snapshot.time_text)
        # The ring only shows progress while a run is live.
        self._ring.set_progress(snapshot.progress if snapshot.is_running else 0.0)
