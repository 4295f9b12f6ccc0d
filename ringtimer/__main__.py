"""Allow running RingTimer as a module: python -m ringtimer."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .settings import load_settings
from .app import RingTimerApp


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("RingTimer ready")

    app = QApplication(sys.argv)
    app.setApplicationName("RingTimer")
    app.setOrganizationName("RingTimer")

    window = RingTimerApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
