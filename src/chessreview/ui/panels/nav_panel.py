"""NavPanel — move navigation buttons below the board."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from chessreview.ui.i18n import t


class NavPanel(QWidget):
    """First / previous / next / last buttons plus board flip."""

    first_clicked = pyqtSignal()
    prev_clicked = pyqtSignal()
    next_clicked = pyqtSignal()
    last_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._move_text: str | None = None
        self._setup_ui()
        self.retranslate_ui()
        self.set_position(at_start=True, at_end=True)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        btn_font = QFont("Adwaita Sans", 11)

        row = QHBoxLayout()
        self._btn_first = self._make_button("⏮", btn_font, self.first_clicked)
        self._btn_prev = self._make_button("◀", btn_font, self.prev_clicked)
        row.addWidget(self._btn_first)
        row.addWidget(self._btn_prev)

        self._label = QLabel()
        self._label.setFont(QFont("AdwaitaMono Nerd Font", 12, QFont.Weight.Bold))
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._label.setMinimumWidth(110)
        row.addWidget(self._label, stretch=1)

        self._btn_next = self._make_button("▶", btn_font, self.next_clicked)
        self._btn_last = self._make_button("⏭", btn_font, self.last_clicked)
        row.addWidget(self._btn_next)
        row.addWidget(self._btn_last)

        self._btn_flip = self._make_button("⇅", btn_font, self.flip_clicked)
        row.addWidget(self._btn_flip)
        layout.addLayout(row)

        self._hint = QLabel()
        self._hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._hint.setStyleSheet("color: #71717a; font-size: 11px;")
        layout.addWidget(self._hint)

    @staticmethod
    def _make_button(text: str, font: QFont, signal: object) -> QPushButton:
        btn = QPushButton(text)
        btn.setFont(font)
        btn.setMinimumHeight(34)
        btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        btn.clicked.connect(signal)
        return btn

    def retranslate_ui(self) -> None:
        s = t()
        self._hint.setText(s.nav_hint)
        self._label.setText(self._move_text or s.nav_start)

    def set_position(
        self,
        *,
        at_start: bool,
        at_end: bool,
        move_text: str | None = None,
    ) -> None:
        """Update the move label and the enabled state of the buttons."""
        self._move_text = move_text
        self._btn_first.setEnabled(not at_start)
        self._btn_prev.setEnabled(not at_start)
        self._btn_next.setEnabled(not at_end)
        self._btn_last.setEnabled(not at_end)
        self.retranslate_ui()

    def label_text(self) -> str:
        return self._label.text()

    def can_go_back(self) -> bool:
        return self._btn_prev.isEnabled()

    def can_go_forward(self) -> bool:
        return self._btn_next.isEnabled()
