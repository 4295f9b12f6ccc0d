"""QSS stylesheet and band colours for RingTimer."""

from __future__ import annotations

from ..timer.bands import ColorBand

# ── arc colours per urgency band (Material 500 shades) ──────────────────

BAND_COLORS: dict[ColorBand, str] = {
    ColorBand.GREEN:  "#4CAF50",
    ColorBand.YELLOW: "#FFEB3B",
    ColorBand.RED:    "#F44336",
}

# Background track: neutral grey at 20% opacity
TRACK_COLOR = "#9E9E9E"
TRACK_ALPHA = 51

# ── default palette (light, blue accent) ────────────────────────────────

DEFAULT_PALETTE: dict[str, str] = {
    "bg":          "#FAFAFA",
    "surface":     "#FFFFFF",
    "accent":      "#2196F3",
    "accent_dark": "#1976D2",
    "text":        "#212121",
    "text_muted":  "#757575",
    "border":      "#BDBDBD",
}


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or DEFAULT_PALETTE
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── minutes / seconds inputs ─────────────────── */
    QLineEdit {{
        background-color: transparent;
        border: none;
        border-bottom: 1px solid {p['border']};
        padding: 4px 2px;
        font-size: 18px;
    }}

    QLineEdit:focus {{
        border-bottom: 2px solid {p['accent']};
    }}

    QLabel#fieldCaption {{
        background-color: transparent;
        color: {p['text_muted']};
        font-size: 12px;
    }}

    QLabel#timeLabel {{
        background-color: transparent;
        font-size: 48px;
        font-weight: bold;
    }}

    /* ── start / cancel ───────────────────────────── */
    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['surface']};
        border: none;
        border-radius: 8px;
        min-height: 50px;
        font-size: 16px;
        font-weight: 600;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent_dark']};
    }}

    QPushButton#primaryButton:pressed {{
        background-color: {p['accent']};
    }}
    """
