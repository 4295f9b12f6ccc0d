"""Tests for the ring renderer, the timer screen, the main window and
settings loading.
"""

from __future__ import annotations

import json

import pytest
from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtGui import QCloseEvent, QImage, QKeyEvent
from PyQt6.QtWidgets import QWidget

from ringtimer.app import RingTimerApp
from ringtimer.settings import Settings, load_settings
from ringtimer.timer.engine import TimerConfig, TimerStatus
from ringtimer.ui.progress_ring import ProgressRing, ring_geometry
from ringtimer.ui.styles import BAND_COLORS, TRACK_ALPHA
from ringtimer.timer.bands import ColorBand
from ringtimer.ui.timer_widget import TimerWidget


# ═══════════════════════════════════════════════════════════════════════
#  RING GEOMETRY & PAINTING
# ═══════════════════════════════════════════════════════════════════════


class TestRingGeometry:

    def test_centre_and_radius(self):
        center, radius = ring_geometry(160, 20)
        assert (center.x(), center.y()) == (80, 80)
        assert radius == 150

    def test_radius_clamped_at_zero(self):
        _, radius = ring_geometry(10, 40)
        assert radius == 0.0


@pytest.mark.usefixtures("qapp")
class TestProgressRing:

    def test_outer_diameter_fits_widget(self):
        ring = ProgressRing(content_size=160, stroke_width=20)
        assert ring.width() == 320
        assert ring.height() == 320
        assert ring.content_rect().width() == 160
        assert ring.content_rect().left() == 80

    def test_redraw_only_on_change(self):
        ring = ProgressRing()
        calls = []
        ring.update = lambda *a: calls.append(a)  # type: ignore[method-assign]

        ring.set_progress(0.25)
        ring.set_progress(0.25)
        ring.set_progress(0.5)

        assert len(calls) == 2
        assert ring.progress == 0.5

    def _render(self, progress: float) -> QImage:
        ring = ProgressRing(content_size=160, stroke_width=20)
        ring.set_progress(progress)
        img = QImage(ring.width(), ring.height(), QImage.Format.Format_ARGB32)
        img.fill(Qt.GlobalColor.transparent)
        # children only: no window background, so the track keeps its alpha
        ring.render(img, flags=QWidget.RenderFlag.DrawChildren)
        return img

    @pytest.mark.parametrize("progress, band", [
        (0.3, ColorBand.GREEN),
        (0.8, ColorBand.YELLOW),
        (0.95, ColorBand.RED),
    ])
    def test_arc_starts_at_top_in_band_colour(self, progress, band):
        img = self._render(progress)
        # top of the ring's stroke midline: centre (160, 160), radius 150
        assert img.pixelColor(160, 10).name() == BAND_COLORS[band].lower()

    def test_unfilled_part_shows_track(self):
        img = self._render(0.3)
        bottom = img.pixelColor(160, 310)
        assert 0 < bottom.alpha() <= TRACK_ALPHA + 1

    def test_zero_progress_draws_track_only(self):
        img = self._render(0.0)
        assert img.pixelColor(160, 10).alpha() <= TRACK_ALPHA + 1


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


class TestTimerWidget:

    @pytest.fixture
    def widget(self, engine):
        return TimerWidget(engine)

    def test_idle_shows_inputs(self, widget):
        assert widget._stack.currentIndex() == 0
        assert widget._action_btn.text() == "Start"
        assert widget._ring.progress == 0.0

    def test_start_shows_readout(self, widget, engine):
        widget._minutes_input.setText("1")
        widget._seconds_input.setText("5")
        widget._action_btn.click()

        assert engine.status == TimerStatus.RUNNING
        assert widget._stack.currentIndex() == 1
        assert widget._time_label.text() == "01:05"
        assert widget._action_btn.text() == "Cancel"

    def test_ticks_update_readout_and_ring(self, widget, engine, clock):
        widget._minutes_input.setText("1")
        widget._seconds_input.setText("5")
        widget._action_btn.click()

        clock.frame_at(32_500)

        assert widget._time_label.text() == "00:33"
        assert widget._ring.progress == pytest.approx(0.5)

    def test_cancel_returns_to_inputs(self, widget, engine, clock):
        widget._seconds_input.setText("10")
        widget._action_btn.click()
        clock.frame_at(4_000)

        widget._action_btn.click()

        assert engine.status == TimerStatus.IDLE
        assert widget._stack.currentIndex() == 0
        assert widget._action_btn.text() == "Start"
        assert widget._ring.progress == 0.0
        # inputs are kept for the next run
        assert widget._seconds_input.text() == "10"

    def test_empty_inputs_do_not_start(self, widget, engine):
        widget._action_btn.click()
        assert engine.status == TimerStatus.IDLE
        assert widget._stack.currentIndex() == 0

    def test_return_key_starts(self, widget, engine):
        widget._seconds_input.setText("3")
        widget._seconds_input.returnPressed.emit()
        assert engine.status == TimerStatus.RUNNING

    def test_completion_returns_to_inputs(self, widget, engine, clock):
        widget._seconds_input.setText("2")
        widget._action_btn.click()

        clock.frame_at(2_000)

        assert engine.status == TimerStatus.IDLE
        assert widget._stack.currentIndex() == 0
        assert widget._ring.progress == 0.0
        assert widget._time_label.text() == "00:00"

    def test_ring_settings_are_applied(self, engine):
        w = TimerWidget(engine, stroke_width=12, ring_content_size=100)
        assert w._ring.stroke_width == 12
        assert w._ring.width() == 200


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestMainWindow:

    def test_builds_from_settings(self):
        window = RingTimerApp(Settings(window_width=500, window_height=700))
        assert window.width() == 500
        assert window.height() == 700
        assert window.engine.clock.interval_ms == 16
        assert window.engine.parent() is window

    def test_title_follows_countdown(self):
        window = RingTimerApp(Settings())
        window.engine.start(TimerConfig(minutes=1, seconds=5))
        assert window.windowTitle() == "01:05 - RingTimer"
        window.engine.cancel()
        assert window.windowTitle() == "RingTimer"

    def test_escape_cancels(self):
        window = RingTimerApp(Settings())
        window.engine.start(TimerConfig(seconds=30))
        window.keyPressEvent(QKeyEvent(
            QEvent.Type.KeyPress, Qt.Key.Key_Escape, Qt.KeyboardModifier.NoModifier,
        ))
        assert window.engine.status == TimerStatus.IDLE

    def test_escape_when_idle_is_noop(self):
        window = RingTimerApp(Settings())
        window.keyPressEvent(QKeyEvent(
            QEvent.Type.KeyPress, Qt.Key.Key_Escape, Qt.KeyboardModifier.NoModifier,
        ))
        assert window.engine.status == TimerStatus.IDLE

    def test_close_stops_clock(self):
        window = RingTimerApp(Settings())
        window.engine.start(TimerConfig(seconds=30))
        window.closeEvent(QCloseEvent())
        assert window.engine.status == TimerStatus.IDLE
        assert not window.engine.clock.is_active()


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert s.stroke_width == 20.0
        assert s.ring_content_size == 160
        assert s.frame_interval_ms == 16
        assert s.always_on_top is False
        assert s.log_level == "INFO"

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "nope.json") == Settings()

    def test_loads_known_keys(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "stroke_width": 12,
            "window_width": 600,
            "theme": "ignored",
        }))
        s = load_settings(path)
        assert s.stroke_width == 12
        assert s.window_width == 600
        assert s.window_height == 640

    def test_malformed_json_gives_defaults(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        with caplog.at_level("WARNING", logger="ringtimer.settings"):
            assert load_settings(path) == Settings()
        assert "could not read" in caplog.text

    def test_non_object_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2, 3]")
        assert load_settings(path) == Settings()

    def test_invalid_values_fall_back(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"stroke_width": -4, "frame_interval_ms": "fast"}))
        with caplog.at_level("WARNING", logger="ringtimer.settings"):
            s = load_settings(path)
        assert s.stroke_width == 20.0
        assert s.frame_interval_ms == 16
        assert "invalid stroke_width" in caplog.text

    def test_default_path_is_used(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"always_on_top": True}))
        monkeypatch.setattr("ringtimer.settings.SETTINGS_PATH", path)
        assert load_settings().always_on_top is True
