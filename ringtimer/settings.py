"""Application settings loaded from JSON.

Settings are read (never written) from:
    ~/.config/RingTimer/settings.json

Usage::

    settings = load_settings()
    window.resize(settings.window_width, settings.window_height)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "RingTimer"
SETTINGS_PATH = CONFIG_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── ring ──────────────────────────────────────────────────────────
    stroke_width: float = 20.0
    ring_content_size: int = 160           # px, side of the inner area
    frame_interval_ms: int = 16            # ~60 fps

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 420
    window_height: int = 640
    always_on_top: bool = False

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "INFO"


_POSITIVE_FIELDS = (
    "stroke_width",
    "ring_content_size",
    "frame_interval_ms",
    "window_width",
    "window_height",
)


def _sanitise(settings: Settings) -> Settings:
    """Replace non-positive numeric values with their defaults."""
    defaults = Settings()
    for name in _POSITIVE_FIELDS:
        value = getattr(settings, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            logger.warning("settings: invalid %s=%r, using %r",
                           name, value, getattr(defaults, name))
            setattr(settings, name, getattr(defaults, name))
    if not isinstance(settings.log_level, str):
        logger.warning("settings: invalid log_level=%r", settings.log_level)
        settings.log_level = defaults.log_level
    return settings


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("settings: could not read %s (%s), using defaults", path, exc)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("settings: %s is not a JSON object, using defaults", path)
        return Settings()

    # Only use keys that exist in the dataclass
    valid_keys = {f.name for f in fields(Settings)}
    filtered = {k: v for k, v in data.items() if k in valid_keys}
    return _sanitise(Settings(**filtered))
