"""EvalBar — vertical evaluation bar beside the board."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QColor, QFont, QPainter, QPaintEvent
from PyQt6.QtWidgets import QSizePolicy, QWidget

from chessreview.review.evaluation import EvalBarLayout, layout_eval_bar

_DARK = QColor(39, 39, 42)
_LIGHT = QColor(243, 244, 246)


class EvalBar(QWidget):
    """Bar split into a dark (black) segment and a light (white) segment.

    The dark segment is always on top and the light one at the bottom. When
    the board is flipped the light segment shows the complement of the
    white share. The magnitude label sits at the outer end of the segment of
    the side that is ahead.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._score: float | None = None
        self._flipped = False
        self.setFixedWidth(24)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Expanding)
        self.setMinimumHeight(200)

    def set_score(self, score: float | None) -> None:
        """Set evaluation in pawns (positive = white advantage); None = equal."""
        self._score = score
        self.update()

    def set_flipped(self, flipped: bool) -> None:
        self._flipped = flipped
        self.update()

    def score(self) -> float | None:
        return self._score

    def is_flipped(self) -> bool:
        return self._flipped

    def reset(self) -> None:
        self._score = None
        self.update()

    def layout_info(self) -> EvalBarLayout:
        return layout_eval_bar(self._score or 0.0, self._flipped)

    def paintEvent(self, event: QPaintEvent | None) -> None:
        h = self.height()
        w = self.width()
        info = self.layout_info()
        white_h = h * info.white_percent / 100.0

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        # Segments stay put; the flip is already in white_percent
        dark_rect = QRectF(0, 0, w, h - white_h)
        white_rect = QRectF(0, h - white_h, w, white_h)
        painter.fillRect(dark_rect, _DARK)
        painter.fillRect(white_rect, _LIGHT)

        if self._score is not None:
            painter.setFont(QFont("Adwaita Sans", 7, QFont.Weight.Bold))
            if info.label_on_white:
                painter.setPen(_DARK)
                target = white_rect
                align = Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignBottom
            else:
                painter.setPen(_LIGHT)
                target = dark_rect
                align = Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop
            painter.drawText(target.adjusted(0, 3, 0, -3), align, info.label)

        painter.end()
