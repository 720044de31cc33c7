"""Visual theme constants and QSS styles for the review window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    light_highlight: QColor  # last move on a light square
    dark_highlight: QColor  # last move on a dark square
    white_piece: QColor
    black_piece: QColor
    piece_outline: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor("#f0d9b5"),
            dark_square=QColor("#b58863"),
            light_highlight=QColor("#f7ec7a"),
            dark_highlight=QColor("#dac34b"),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(30, 30, 30),
            piece_outline=QColor(0, 0, 0, 160),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            light_highlight=QColor(205, 210, 106),
            dark_highlight=QColor(170, 162, 58),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(30, 30, 30),
            piece_outline=QColor(0, 0, 0, 160),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            light_highlight=QColor(246, 246, 130),
            dark_highlight=QColor(186, 202, 68),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(30, 30, 30),
            piece_outline=QColor(0, 0, 0, 160),
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 210, 184),
            dark_square=QColor(118, 74, 47),
            light_highlight=QColor(240, 226, 120),
            dark_highlight=QColor(176, 140, 50),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(30, 30, 30),
            piece_outline=QColor(0, 0, 0, 160),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            light_highlight=QColor(232, 226, 120),
            dark_highlight=QColor(160, 150, 60),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(30, 30, 30),
            piece_outline=QColor(0, 0, 0, 160),
        )


BOARD_THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
    "Green": BoardTheme.green(),
    "Walnut": BoardTheme.walnut(),
    "Slate": BoardTheme.slate(),
}


def qcolor(hex_color: str, alpha: float = 1.0) -> QColor:
    """Hex string plus 0..1 alpha → QColor."""
    color = QColor(hex_color)
    color.setAlphaF(alpha)
    return color


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QListWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Adwaita Sans", "Consolas", monospace;
    font-size: 13px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
