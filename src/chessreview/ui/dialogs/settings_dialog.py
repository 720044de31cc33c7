"""SettingsDialog — review settings with a category sidebar."""

from __future__ import annotations

from dataclasses import dataclass, replace

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QPainter, QPaintEvent
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QDoubleSpinBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from chessreview.core.enums import Color, PieceType
from chessreview.core.piece import Piece
from chessreview.ui.i18n import LANGUAGES, t
from chessreview.ui.styles.theme import BOARD_THEMES, BoardTheme

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_arrows: bool = True
    show_eval_bar: bool = True
    use_figurine_notation: bool = True

    # Coach
    coach_command: str = "gemini"
    coach_timeout_s: float = 60.0


# ── Individual settings pages ────────────────────────────────────────────────


class _GeneralPage(QWidget):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)

        self._title = QLabel()
        self._title.setStyleSheet("font-size: 16px; font-weight: bold; color: #e0e0e0;")
        self._form.addRow(self._title)

        self._lang_label = QLabel()
        self._lang_combo = QComboBox()
        self._lang_combo.addItems(LANGUAGES)
        idx = self._lang_combo.findText(settings.language)
        self._lang_combo.setCurrentIndex(max(0, idx))
        self._form.addRow(self._lang_label, self._lang_combo)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.settings_language)
        self._lang_label.setText(s.settings_language)

    def apply(self, settings: AppSettings) -> None:
        settings.language = self._lang_combo.currentText()


class _BoardPage(QWidget):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)

        self._title = QLabel()
        self._title.setStyleSheet("font-size: 16px; font-weight: bold; color: #e0e0e0;")
        self._form.addRow(self._title)

        self._theme_label = QLabel()
        self._theme_combo = QComboBox()
        self._theme_combo.addItems(list(BOARD_THEMES))
        self._theme_combo.setCurrentText(settings.board_theme)
        self._preview = _BoardThemePreviewWidget(settings.board_theme)
        self._theme_combo.currentTextChanged.connect(self._preview.set_theme_name)

        theme_row = QWidget()
        theme_layout = QHBoxLayout(theme_row)
        theme_layout.setContentsMargins(0, 0, 0, 0)
        theme_layout.setSpacing(12)
        self._theme_combo.setMinimumWidth(220)
        theme_layout.addWidget(self._theme_combo)
        theme_layout.addWidget(self._preview)
        theme_layout.addStretch()
        self._form.addRow(self._theme_label, theme_row)

        self._coords_label = QLabel()
        self._coords_check = QCheckBox()
        self._coords_check.setChecked(settings.show_coordinates)
        self._form.addRow(self._coords_label, self._coords_check)

        self._arrows_label = QLabel()
        self._arrows_check = QCheckBox()
        self._arrows_check.setChecked(settings.show_arrows)
        self._form.addRow(self._arrows_label, self._arrows_check)

        self._eval_label = QLabel()
        self._eval_check = QCheckBox()
        self._eval_check.setChecked(settings.show_eval_bar)
        self._form.addRow(self._eval_label, self._eval_check)

        self._figurine_label = QLabel()
        self._figurine_check = QCheckBox()
        self._figurine_check.setChecked(settings.use_figurine_notation)
        self._form.addRow(self._figurine_label, self._figurine_check)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.settings_board)
        self._theme_label.setText(s.settings_board_theme)
        self._coords_label.setText(s.settings_show_coordinates)
        self._arrows_label.setText(s.settings_show_arrows)
        self._eval_label.setText(s.settings_show_eval_bar)
        self._figurine_label.setText(s.settings_figurines)

    def apply(self, settings: AppSettings) -> None:
        settings.board_theme = self._theme_combo.currentText()
        settings.show_coordinates = self._coords_check.isChecked()
        settings.show_arrows = self._arrows_check.isChecked()
        settings.show_eval_bar = self._eval_check.isChecked()
        settings.use_figurine_notation = self._figurine_check.isChecked()


class _BoardThemePreviewWidget(QWidget):
    """Compact board appearance preview for theme selection."""

    def __init__(self, theme_name: str) -> None:
        super().__init__()
        self._theme_name = theme_name
        self.setFixedSize(136, 72)

    def set_theme_name(self, theme_name: str) -> None:
        if self._theme_name == theme_name:
            return
        self._theme_name = theme_name
        self.update()

    def paintEvent(self, event: QPaintEvent | None) -> None:
        del event
        square = 64
        board_x = 2
        board_y = 2

        theme = BOARD_THEMES.get(self._theme_name, BoardTheme.default())
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        painter.fillRect(0, 0, square * 2 + 4, square + 4, Qt.GlobalColor.black)
        painter.fillRect(board_x, board_y, square, square, theme.light_square)
        painter.fillRect(board_x + square, board_y, square, square, theme.dark_square)

        painter.setFont(QFont("DejaVu Sans", 38))
        for offset, piece, color in (
            (0, Piece(Color.WHITE, PieceType.KING), theme.white_piece),
            (square, Piece(Color.BLACK, PieceType.QUEEN), theme.black_piece),
        ):
            painter.setPen(color)
            painter.drawText(
                board_x + offset,
                board_y,
                square,
                square,
                Qt.AlignmentFlag.AlignCenter,
                piece.symbol,
            )
        painter.end()


class _CoachPage(QWidget):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)

        self._title = QLabel()
        self._title.setStyleSheet("font-size: 16px; font-weight: bold; color: #e0e0e0;")
        self._form.addRow(self._title)

        self._command_label = QLabel()
        self._command_edit = QLineEdit(settings.coach_command)
        self._command_edit.setMinimumWidth(260)
        self._form.addRow(self._command_label, self._command_edit)

        self._timeout_label = QLabel()
        self._timeout_spin = QDoubleSpinBox()
        self._timeout_spin.setRange(5.0, 600.0)
        self._timeout_spin.setSingleStep(5.0)
        self._timeout_spin.setDecimals(0)
        self._timeout_spin.setValue(settings.coach_timeout_s)
        self._form.addRow(self._timeout_label, self._timeout_spin)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.settings_coach)
        self._command_label.setText(s.settings_coach_command)
        self._timeout_label.setText(s.settings_coach_timeout)
        self._timeout_spin.setSuffix(s.settings_coach_timeout_suffix)

    def apply(self, settings: AppSettings) -> None:
        settings.coach_command = self._command_edit.text().strip() or "gemini"
        settings.coach_timeout_s = self._timeout_spin.value()


# ── Main dialog ──────────────────────────────────────────────────────────────

_PAGE_FACTORIES: list[tuple[str, type[_GeneralPage | _BoardPage | _CoachPage]]] = [
    ("settings_language", _GeneralPage),
    ("settings_board", _BoardPage),
    ("settings_coach", _CoachPage),
]


class SettingsDialog(QDialog):
    """Modal settings dialog with a left category list and stacked pages.

    Works on a copy of *settings*; read the edited values back with
    :meth:`settings` after the dialog is accepted.
    """

    def __init__(
        self,
        settings: AppSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumSize(640, 380)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._settings = replace(settings)
        self._pages: list[_GeneralPage | _BoardPage | _CoachPage] = []
        self._page_attr_names: list[str] = []

        self._build_ui()
        self.retranslate_ui()

    def _build_ui(self) -> None:
        root = QHBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._sidebar = QListWidget()
        self._sidebar.setFixedWidth(150)
        self._sidebar.setStyleSheet(
            "QListWidget { background: #1e1e1e; border: none;"
            "  border-right: 1px solid #3c3c3c; }"
            "QListWidget::item { padding: 10px 14px; color: #c0c0c0; font-size: 13px; }"
            "QListWidget::item:selected { background: #264f78; color: #ffffff; }"
        )

        self._stack = QStackedWidget()
        self._stack.setStyleSheet("background: #2b2b2b;")

        for attr, PageClass in _PAGE_FACTORIES:
            self._page_attr_names.append(attr)
            item = QListWidgetItem()
            item.setTextAlignment(
                Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter
            )
            self._sidebar.addItem(item)

            page = PageClass(self._settings)
            self._pages.append(page)
            self._stack.addWidget(page)

        self._sidebar.setCurrentRow(0)
        self._sidebar.currentRowChanged.connect(self._stack.setCurrentIndex)

        root.addWidget(self._sidebar)

        right = QVBoxLayout()
        right.setContentsMargins(0, 0, 0, 0)
        right.setSpacing(0)
        right.addWidget(self._stack)

        self._btn_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._btn_box.setContentsMargins(12, 8, 12, 8)
        self._btn_box.accepted.connect(self._on_accept)
        self._btn_box.rejected.connect(self.reject)
        right.addWidget(self._btn_box)

        right_widget = QWidget()
        right_widget.setLayout(right)
        root.addWidget(right_widget)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.settings_title)
        for i, attr in enumerate(self._page_attr_names):
            item = self._sidebar.item(i)
            if item is not None:
                # Sidebar entries drop the trailing colon of form labels
                item.setText(getattr(s, attr).rstrip(":"))
        for page in self._pages:
            page.retranslate_ui()

    def settings(self) -> AppSettings:
        return self._settings

    def _on_accept(self) -> None:
        for page in self._pages:
            page.apply(self._settings)
        self.accept()
