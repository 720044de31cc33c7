"""KeyMomentsBar — game timeline with key-moment markers."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QLabel, QSizePolicy, QToolTip, QVBoxLayout, QWidget

from chessreview.review.models import KeyMoment
from chessreview.review.timeline import MomentMarker, layout_markers, progress_percent
from chessreview.ui.i18n import t

_TRACK_BG = QColor(63, 63, 70)
_PROGRESS = QColor(96, 165, 250, 140)


class _Timeline(QWidget):
    """Painted track; markers are hit-tested by horizontal distance."""

    marker_clicked = pyqtSignal(int)

    _MARGIN = 8.0
    _RADIUS = 5.0
    _HIT_SLOP = 6.0

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._markers: list[MomentMarker] = []
        self._progress = 0.0
        self.setFixedHeight(22)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setMouseTracking(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def set_state(self, markers: list[MomentMarker], progress: float) -> None:
        self._markers = markers
        self._progress = progress
        self.update()

    def markers(self) -> list[MomentMarker]:
        return list(self._markers)

    def marker_x(self, marker: MomentMarker) -> float:
        usable = max(1.0, self.width() - 2 * self._MARGIN)
        return self._MARGIN + usable * marker.position_percent / 100.0

    def marker_at(self, x: float) -> MomentMarker | None:
        best: MomentMarker | None = None
        best_dist = self._RADIUS + self._HIT_SLOP
        for marker in self._markers:
            dist = abs(self.marker_x(marker) - x)
            if dist <= best_dist:
                best, best_dist = marker, dist
        return best

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            marker = self.marker_at(event.position().x())
            if marker is not None:
                self.marker_clicked.emit(marker.moment_index)
                return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent | None) -> None:
        if event is not None:
            marker = self.marker_at(event.position().x())
            if marker is not None:
                QToolTip.showText(event.globalPosition().toPoint(), marker.tooltip, self)
            else:
                QToolTip.hideText()
        super().mouseMoveEvent(event)

    def paintEvent(self, event: QPaintEvent | None) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        mid = self.height() / 2.0
        usable = max(1.0, self.width() - 2 * self._MARGIN)
        track = QRectF(self._MARGIN, mid - 2, usable, 4)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(_TRACK_BG)
        painter.drawRoundedRect(track, 2, 2)

        done = QRectF(track.left(), track.top(), usable * self._progress / 100.0, 4)
        painter.setBrush(_PROGRESS)
        painter.drawRoundedRect(done, 2, 2)

        for marker in self._markers:
            center = QPointF(self.marker_x(marker), mid)
            radius = self._RADIUS + (2.0 if marker.active else 0.0)
            painter.setBrush(QColor(marker.color))
            if marker.active:
                painter.setPen(QPen(QColor("#ffffff"), 2))
            else:
                painter.setPen(Qt.PenStyle.NoPen)
            painter.drawEllipse(center, radius, radius)

        painter.end()


class KeyMomentsBar(QWidget):
    """Header plus timeline; emits the index of the clicked key moment."""

    moment_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 2, 4, 2)
        layout.setSpacing(2)

        self._header = QLabel()
        self._header.setFont(QFont("Adwaita Sans", 8, QFont.Weight.Bold))
        self._header.setStyleSheet("color: #71717a; letter-spacing: 1px;")
        layout.addWidget(self._header)

        self._timeline = _Timeline()
        self._timeline.marker_clicked.connect(self.moment_clicked)
        layout.addWidget(self._timeline)

        self.retranslate_ui()

    @property
    def timeline(self) -> _Timeline:
        return self._timeline

    def retranslate_ui(self) -> None:
        self._header.setText(t().key_moments_header)

    def set_moments(
        self,
        moments: tuple[KeyMoment, ...],
        move_count: int,
        pointer: int,
    ) -> None:
        """Lay out markers for *moments*; the bar hides when there are none."""
        self._timeline.set_state(
            layout_markers(moments, move_count, pointer),
            progress_percent(pointer, move_count),
        )
        self.setVisible(bool(moments))
