"""BoardView — QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from chessreview.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Displays the board scene, handles scaling to fit the widget."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
