"""AnnotationBadge — classification card for the current move."""

from __future__ import annotations

from PyQt6.QtCore import QEvent, Qt, pyqtSignal
from PyQt6.QtGui import QEnterEvent, QFont
from PyQt6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessreview.review.annotation import BadgeContent, Tint
from chessreview.ui.i18n import t
from chessreview.ui.styles.theme import qcolor


def _rgba(tint: Tint, boost: float = 1.0) -> str:
    r, g, b, _ = tint.rgba()
    return f"rgba({r}, {g}, {b}, {min(1.0, tint.alpha * boost):.3f})"


class AnnotationBadge(QFrame):
    """Shows glyph, label, evaluation and move text of one annotated move.

    Hovering only changes how the card is painted; the content it was given
    stays untouched.
    """

    coach_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._content: BadgeContent | None = None
        self._emphasized = False
        self._busy = False
        self._setup_ui()
        self.retranslate_ui()
        self.set_content(None)

    def _setup_ui(self) -> None:
        self.setObjectName("annotationBadge")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(4)

        top = QHBoxLayout()
        top.setSpacing(8)
        self._glyph = QLabel()
        self._glyph.setFont(QFont("Noto Color Emoji", 16))
        top.addWidget(self._glyph)

        self._label = QLabel()
        self._label.setFont(QFont("Adwaita Sans", 13, QFont.Weight.Bold))
        top.addWidget(self._label)

        self._eval = QLabel()
        self._eval.setFont(QFont("AdwaitaMono Nerd Font", 11))
        self._eval.setStyleSheet("color: #a1a1aa;")
        top.addWidget(self._eval)
        top.addStretch(1)

        self._move = QLabel()
        self._move.setFont(QFont("AdwaitaMono Nerd Font", 12, QFont.Weight.Bold))
        top.addWidget(self._move)

        self._btn_coach = QPushButton()
        self._btn_coach.setCursor(Qt.CursorShape.PointingHandCursor)
        self._btn_coach.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self._btn_coach.clicked.connect(self.coach_clicked)
        top.addWidget(self._btn_coach)
        layout.addLayout(top)

        self._comment = QLabel()
        self._comment.setWordWrap(True)
        self._comment.setStyleSheet("color: #d4d4d8; font-size: 12px;")
        layout.addWidget(self._comment)

    def retranslate_ui(self) -> None:
        self._btn_coach.setText(t().btn_coach_busy if self._busy else t().btn_coach)

    # ── Public API ───────────────────────────────────────────────────────

    def content(self) -> BadgeContent | None:
        return self._content

    def is_emphasized(self) -> bool:
        return self._emphasized

    def set_content(self, content: BadgeContent | None) -> None:
        """Show *content*; ``None`` hides the badge (start position)."""
        self._content = content
        self.setVisible(content is not None)
        if content is None:
            return
        self._glyph.setText(content.glyph)
        self._label.setText(content.label)
        self._label.setStyleSheet(f"color: {content.style.accent};")
        self._eval.setText(content.eval_text or "")
        self._eval.setVisible(content.eval_text is not None)
        self._move.setText(content.move_text)
        self._comment.setText(content.comment or "")
        self._comment.setVisible(content.comment is not None)
        self._apply_style()

    def set_busy(self, busy: bool) -> None:
        """Coach request in flight: button shows a spinner text and is disabled."""
        self._busy = busy
        self._btn_coach.setEnabled(not busy)
        self.retranslate_ui()

    def is_busy(self) -> bool:
        return self._busy

    # ── Hover ────────────────────────────────────────────────────────────

    def enterEvent(self, event: QEnterEvent | None) -> None:
        self._emphasized = True
        self._apply_style()
        super().enterEvent(event)

    def leaveEvent(self, event: QEvent | None) -> None:
        self._emphasized = False
        self._apply_style()
        super().leaveEvent(event)

    def _apply_style(self) -> None:
        if self._content is None:
            return
        style = self._content.style
        boost = 1.6 if self._emphasized else 1.0
        self.setStyleSheet(
            f"""
            QFrame#annotationBadge {{
                background: {_rgba(style.background, boost)};
                border: 1px solid {_rgba(style.border, boost)};
                border-radius: 10px;
            }}
            """
        )
        if style.glow is None:
            self.setGraphicsEffect(None)
            return
        glow = QGraphicsDropShadowEffect(self)
        glow.setOffset(0, 0)
        glow.setBlurRadius(style.glow.radius * (1.5 if self._emphasized else 1.0))
        glow.setColor(qcolor(style.accent, style.glow.alpha))
        self.setGraphicsEffect(glow)
