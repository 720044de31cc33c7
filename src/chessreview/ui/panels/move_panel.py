"""MovePanel — scrollable list of reviewed moves in SAN notation."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from chessreview.core.enums import Color
from chessreview.review.annotation import style_for
from chessreview.review.models import MoveClassification, MoveRecord
from chessreview.ui.i18n import t

# Unicode figurine symbols: white = outline, black = filled
_FIGURINE: dict[Color, dict[str, str]] = {
    Color.WHITE: {"K": "♔", "Q": "♕", "R": "♖", "B": "♗", "N": "♘"},
    Color.BLACK: {"K": "♚", "Q": "♛", "R": "♜", "B": "♝", "N": "♞"},
}

_NAG: dict[MoveClassification, str] = {
    MoveClassification.BRILLIANT: "!!",
    MoveClassification.GREAT: "!",
    MoveClassification.INACCURACY: "?!",
    MoveClassification.MISTAKE: "?",
    MoveClassification.BLUNDER: "??",
}


def _figurine_san(san: str, color: Color) -> str:
    """Replace piece letters in *san* with Unicode figurine symbols for *color*."""
    table = _FIGURINE[color]

    # Replace leading piece letter (Nf3, Qxd5, Ke2…)
    if san and san[0] in table:
        san = table[san[0]] + san[1:]

    # Replace promotion target (e8=Q → e8=♕)
    if "=" in san:
        prefix, _, promo = san.partition("=")
        if promo:
            san = prefix + "=" + table.get(promo[0], promo[0]) + promo[1:]

    return san


def move_suffix(classification: MoveClassification) -> str:
    """Annotation symbol appended to the move text ("" for quiet moves)."""
    return _NAG.get(classification, "")


class MovePanel(QWidget):
    """Displays the reviewed moves; clicking one emits its index."""

    move_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._records: list[MoveRecord] = []
        self._move_buttons: dict[int, QToolButton] = {}
        self._row_of: dict[int, int] = {}
        self._active_index: int | None = None
        self._use_figurine_notation = True
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._list.setFont(QFont("AdwaitaMono Nerd Font", 12))
        # Arrow keys belong to the window for move navigation
        self._list.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        layout.addWidget(self._list)

    def retranslate_ui(self) -> None:
        self._header.setText(t().moves_header)

    def clear(self) -> None:
        self._records.clear()
        self._move_buttons.clear()
        self._row_of.clear()
        self._active_index = None
        self._list.clear()

    def button_text(self, index: int) -> str:
        return self._move_buttons[index].text()

    def active_index(self) -> int | None:
        return self._active_index

    def _create_move_button(self, record: MoveRecord, index: int) -> QToolButton:
        btn = QToolButton()
        btn.setText(
            self._format_san(record.san, record.color)
            + move_suffix(record.classification)
        )
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        btn.setProperty("activeMove", False)
        btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        text_color = (
            style_for(record.classification).accent
            if record.classification in _NAG
            else "#d4d4d4"
        )
        btn.setStyleSheet(
            f"""
            QToolButton {{
                background: transparent;
                color: {text_color};
                border: 1px solid transparent;
                border-radius: 4px;
                padding: 2px 8px;
                text-align: left;
                font-family: "AdwaitaMono Nerd Font", "Adwaita Sans", monospace;
                font-size: 13px;
            }}
            QToolButton:hover {{
                background: #3c3c3c;
                border-color: #555;
            }}
            QToolButton[activeMove="true"] {{
                background: #264f78;
                border-color: #3b79b7;
                color: #f0f6ff;
            }}
            """
        )
        btn.clicked.connect(
            lambda _checked=False, move_index=index: self._on_move_clicked(move_index)
        )
        return btn

    def set_active_index(self, index: int | None) -> None:
        """Highlight the move at *index*; ``None`` or ``-1`` clears it."""
        if index is not None and index < 0:
            index = None
        self._active_index = index
        for move_index, btn in self._move_buttons.items():
            btn.setProperty("activeMove", move_index == index)
            style = btn.style()
            if style is not None:
                style.unpolish(btn)
                style.polish(btn)
            btn.update()
        row = self._row_of.get(index) if index is not None else None
        if row is not None:
            self._list.scrollToItem(self._list.item(row))

    def _on_move_clicked(self, index: int) -> None:
        self.move_clicked.emit(index)

    def set_use_figurine_notation(self, enabled: bool) -> None:
        """Toggle move text style between figurines and standard SAN letters."""
        if self._use_figurine_notation == enabled:
            return
        self._use_figurine_notation = enabled
        self._rebuild_list()

    def _format_san(self, san: str, color: Color) -> str:
        if self._use_figurine_notation:
            return _figurine_san(san, color)
        return san

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._move_buttons.clear()
        self._row_of.clear()

        # Group by move number; a game may start with a black move
        rows: list[tuple[int, int | None, int | None]] = []
        for idx, record in enumerate(self._records):
            if record.color == Color.WHITE:
                rows.append((record.move_number, idx, None))
            elif rows and rows[-1][0] == record.move_number and rows[-1][2] is None:
                rows[-1] = (rows[-1][0], rows[-1][1], idx)
            else:
                rows.append((record.move_number, None, idx))

        for row_index, (move_num, white_idx, black_idx) in enumerate(rows):
            row_widget = QWidget()
            row_layout = QHBoxLayout(row_widget)
            row_layout.setContentsMargins(6, 2, 6, 2)
            row_layout.setSpacing(8)

            num_label = QLabel(f"{move_num}.")
            num_label.setFont(QFont("Adwaita Sans", 12))
            num_label.setFixedWidth(28)
            num_label.setAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )
            row_layout.addWidget(num_label)

            for idx in (white_idx, black_idx):
                if idx is None:
                    spacer = QWidget()
                    spacer.setSizePolicy(
                        QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed
                    )
                    row_layout.addWidget(spacer, 1)
                    continue
                btn = self._create_move_button(self._records[idx], idx)
                row_layout.addWidget(btn, 1)
                self._move_buttons[idx] = btn
                self._row_of[idx] = row_index

            item = QListWidgetItem()
            item.setSizeHint(row_widget.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row_widget)

        self.set_active_index(self._active_index)

    def set_history(self, records: list[MoveRecord] | tuple[MoveRecord, ...]) -> None:
        """Rebuild the entire move list."""
        self._records = list(records)
        self._active_index = None
        self._rebuild_list()
