"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "CHESSREVIEW_LOG_LEVEL"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level_name: str | None = None) -> int:
    """Configure root logging from *level_name* or ``CHESSREVIEW_LOG_LEVEL``.

    Unknown level names fall back to WARNING. Returns the level in effect.
    """
    name = (level_name or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger().setLevel(level)
    if name != logging.getLevelName(level):
        _LOGGER.warning("Unknown log level %r, using WARNING", name)
    return level


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessreview.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chess Review")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application.

    A first positional argument is treated as a review JSON file to open.
    """
    from PyQt6.QtWidgets import QApplication

    from chessreview.ui.main_window import ReviewWindow

    args = sys.argv if argv is None else argv
    configure_logging()

    app = QApplication(args)
    _configure_application(app)

    window = ReviewWindow()
    window.show()
    if len(args) > 1:
        _LOGGER.info("Opening review from command line: %s", args[1])
        window.open_review_file(args[1])

    return app.exec()
