"""Circular progress ring widget rendered with QPainter.

- Full grey track behind everything.
- Arc starts at 12 o'clock and fills clockwise as time elapses.
- Arc colour follows the urgency band (green → yellow → red).
- Hosts a square content area at its centre (inputs or time readout).
  The ring's radius is measured from that area: ``side - stroke/2``, so
  the ring's outer diameter is twice the content side.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QColor, QPainter, QPen
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from ..timer.bands import color_for
from .styles import BAND_COLORS, TRACK_ALPHA, TRACK_COLOR


def ring_geometry(side: float, stroke_width: float) -> tuple[QPointF, float]:
    """Centre and radius of the ring for a square content area."""
    center = QPointF(side / 2, side / 2)
    radius = max(0.0, side - stroke_width / 2)
    return center, radius


class ProgressRing(QWidget):
    """Custom-painted countdown ring."""

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        stroke_width: float = 20.0,
        content_size: int = 160,
    ) -> None:
        super().__init__(parent)
        self._stroke_width = float(stroke_width)
        self._content_size = int(content_size)
        self._progress: float = 0.0

        side = 2 * self._content_size
        self.setFixedSize(side, side)

        # Centre area for caller-supplied widgets
        self._content_layout = QVBoxLayout(self)
        margin = (side - self._content_size) // 2
        self._content_layout.setContentsMargins(margin, margin, margin, margin)
        self._content_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def stroke_width(self) -> float:
        return self._stroke_width

    @property
    def content_size(self) -> int:
        return self._content_size

    def content_layout(self) -> QVBoxLayout:
        return self._content_layout

    def set_progress(self, progress: float) -> None:
        """Update the arc fill (0..1).  Repaints only on change."""
        if progress == self._progress:
            return
        self._progress = progress
        self.update()

    def content_rect(self) -> QRectF:
        side = float(self._content_size)
        return QRectF(
            (self.width() - side) / 2,
            (self.height() - side) / 2,
            side, side,
        )

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        area = self.content_rect()
        center, radius = ring_geometry(area.width(), self._stroke_width)
        center = center + area.topLeft()
        ring_rect = QRectF(
            center.x() - radius, center.y() - radius,
            radius * 2, radius * 2,
        )

        # ── background track ─────────────────────────────────────────
        track_color = QColor(TRACK_COLOR)
        track_color.setAlpha(TRACK_ALPHA)
        track_pen = QPen(track_color, self._stroke_width, Qt.PenStyle.SolidLine)
        track_pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        painter.setPen(track_pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(ring_rect)

        # ── progress arc ─────────────────────────────────────────────
        if self._progress > 0:
            arc_color = QColor(BAND_COLORS[color_for(self._progress)])
            arc_pen = QPen(arc_color, self._stroke_width, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)

            # Qt arcs: 1/16th degrees, 12 o'clock is 90°, clockwise is negative
            start_angle = 90 * 16
            span_angle = -int(self._progress * 360 * 16)
            painter.drawArc(ring_rect, start_angle, span_angle)

        painter.end()
