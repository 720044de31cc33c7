"""SummaryPanel — accuracy, classification counts and game metadata."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from chessreview.review.annotation import style_for
from chessreview.review.models import GameReview, MoveClassification
from chessreview.ui.i18n import t

_COUNTED: tuple[MoveClassification, ...] = (
    MoveClassification.BRILLIANT,
    MoveClassification.GREAT,
    MoveClassification.BEST,
    MoveClassification.GOOD,
    MoveClassification.INACCURACY,
    MoveClassification.MISTAKE,
    MoveClassification.BLUNDER,
)


class _ClassificationRow(QWidget):
    """Glyph, label and count of one classification."""

    def __init__(
        self,
        classification: MoveClassification,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(2, 0, 2, 0)
        layout.setSpacing(4)

        style = style_for(classification)

        icon = QLabel(style.glyph)
        icon.setFixedWidth(22)
        icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(icon)

        name = QLabel(classification.label)
        name.setFont(QFont("Adwaita Sans", 9))
        name.setStyleSheet("color: #b0b0b0;")
        layout.addWidget(name, stretch=1)

        self._count = QLabel("0")
        self._count.setFont(QFont("Adwaita Sans", 10, QFont.Weight.Bold))
        self._count.setFixedWidth(24)
        self._count.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._count.setStyleSheet(f"color: {style.accent};")
        layout.addWidget(self._count)

    def count(self) -> int:
        return int(self._count.text())

    def set_count(self, n: int) -> None:
        self._count.setText(str(n))


class SummaryPanel(QWidget):
    """Whole-game overview shown beside the move list."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._review: GameReview | None = None
        self._setup_ui()

    def _setup_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._title = QLabel()
        self._title.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._title)

        self._players = QLabel()
        self._players.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._players.setStyleSheet("color: #c0c0c0;")
        root.addWidget(self._players)

        self._opening = QLabel()
        self._opening.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._opening.setWordWrap(True)
        self._opening.setStyleSheet("color: #a0a0a0; font-size: 11px;")
        root.addWidget(self._opening)

        accuracy_row = QHBoxLayout()
        self._accuracy_label = QLabel()
        self._accuracy_label.setFont(QFont("Adwaita Sans", 10, QFont.Weight.Bold))
        accuracy_row.addWidget(self._accuracy_label)

        self._accuracy_bar = QProgressBar()
        self._accuracy_bar.setRange(0, 1000)
        self._accuracy_bar.setTextVisible(False)
        self._accuracy_bar.setFixedHeight(14)
        self._accuracy_bar.setStyleSheet(
            """
            QProgressBar {
                background: #333;
                border: none;
                border-radius: 4px;
            }
            QProgressBar::chunk {
                background: #34d399;
                border-radius: 4px;
            }
            """
        )
        accuracy_row.addWidget(self._accuracy_bar, stretch=1)

        self._accuracy_pct = QLabel("—")
        self._accuracy_pct.setFixedWidth(46)
        self._accuracy_pct.setAlignment(Qt.AlignmentFlag.AlignRight)
        accuracy_row.addWidget(self._accuracy_pct)
        root.addLayout(accuracy_row)

        stats_frame = QFrame()
        stats_frame.setStyleSheet(
            """
            QFrame {
                background: #2a2a2a;
                border-radius: 6px;
                padding: 4px;
            }
            """
        )
        stats_layout = QVBoxLayout(stats_frame)
        stats_layout.setContentsMargins(4, 4, 4, 4)
        stats_layout.setSpacing(1)
        self._rows: dict[MoveClassification, _ClassificationRow] = {}
        for classification in _COUNTED:
            row = _ClassificationRow(classification)
            self._rows[classification] = row
            stats_layout.addWidget(row)
        root.addWidget(stats_frame)

        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Preferred)
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.summary_title)
        self._accuracy_label.setText(s.summary_accuracy)
        if self._review is not None:
            self._show_metadata(self._review)

    # ── Public API ───────────────────────────────────────────────────────

    def set_review(self, review: GameReview) -> None:
        self._review = review
        summary = review.summary
        self._accuracy_bar.setValue(int(summary.accuracy * 10))
        self._accuracy_pct.setText(f"{summary.accuracy:.1f}%")
        for classification, row in self._rows.items():
            row.set_count(summary.count_for(classification))
        self._show_metadata(review)

    def count_shown(self, classification: MoveClassification) -> int:
        return self._rows[classification].count()

    def clear(self) -> None:
        self._review = None
        self._accuracy_bar.setValue(0)
        self._accuracy_pct.setText("—")
        for row in self._rows.values():
            row.set_count(0)
        self._players.clear()
        self._opening.clear()

    def _show_metadata(self, review: GameReview) -> None:
        s = t()
        if review.white or review.black:
            self._players.setText(
                s.summary_players.format(
                    white=review.white or "?", black=review.black or "?"
                )
            )
        else:
            self._players.clear()
        opening = review.summary.opening_name
        if opening:
            self._opening.setText(s.summary_opening.format(name=opening))
        else:
            self._opening.clear()
