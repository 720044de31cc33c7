"""Dialog showing the coach's explanation of one move."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from chessreview.ui.i18n import t

_TEXT_STYLE = "color: #e4e4e7; font-size: 13px; line-height: 140%;"
_ERROR_STYLE = "color: #f87171; font-size: 13px;"


class CommentaryDialog(QDialog):
    """Non-modal window with the coach reply (or the error that replaced it)."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._move_label = ""
        self._is_error = False
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        self.setModal(False)
        self.resize(460, 320)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self._heading = QLabel()
        self._heading.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        layout.addWidget(self._heading)

        self._text = QLabel()
        self._text.setWordWrap(True)
        self._text.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self._text.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        scroll.setWidget(self._text)
        layout.addWidget(scroll, stretch=1)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def retranslate_ui(self) -> None:
        title = t().coach_title
        if self._move_label:
            title = f"{title} — {self._move_label}"
        self.setWindowTitle(title)
        self._heading.setText(title)

    def show_commentary(self, move_label: str, text: str, *, is_error: bool) -> None:
        """Fill in and show the dialog for the move called *move_label*."""
        self._move_label = move_label
        self._is_error = is_error
        self._text.setText(text)
        self._text.setStyleSheet(_ERROR_STYLE if is_error else _TEXT_STYLE)
        self.retranslate_ui()
        if not self.isVisible():
            self.show()
        self.raise_()

    def text(self) -> str:
        return self._text.text()

    def is_error(self) -> bool:
        return self._is_error
