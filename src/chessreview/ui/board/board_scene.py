"""BoardScene — QGraphicsScene that draws the reviewed position."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen, QPolygonF
from PyQt6.QtWidgets import (
    QGraphicsDropShadowEffect,
    QGraphicsPolygonItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
)

from chessreview.core.enums import Color
from chessreview.core.position import (
    Grid,
    display_to_square,
    highlight_set,
    piece_at,
    square_to_display,
)
from chessreview.core.types import ALL_SQUARES, Square, file_of, rank_of
from chessreview.review.arrows import ArrowLayer, layout_arrows
from chessreview.review.models import Arrow
from chessreview.ui.styles.theme import BoardTheme, qcolor


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, last-move tint, pieces and arrows."""

    TILE = 80  # px per square

    _Z_SQUARE = 0.0
    _Z_COORD = 0.3
    _Z_PIECE = 1.0
    _Z_ARROW = 1.5

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._grid: Grid | None = None
        self._flipped = False
        self._show_coordinates = True
        self._show_arrows = True
        self._highlights: frozenset[Square] = frozenset()
        self._arrows: list[Arrow] = []

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._arrow_items: list[QGraphicsPolygonItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board_size(self) -> float:
        return float(self.TILE * 8)

    def set_grid(self, grid: Grid) -> None:
        """Update the displayed position (full redraw of pieces)."""
        self._grid = grid
        self._sync_pieces()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        if flipped == self._flipped:
            return
        self._flipped = flipped
        self._draw_board()
        self._sync_pieces()
        self._sync_arrows()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_arrows(self, visible: bool) -> None:
        self._show_arrows = visible
        self._sync_arrows()

    def set_highlights(
        self,
        explicit: Iterable[Square] = (),
        last_move: tuple[Square, Square] | None = None,
    ) -> None:
        """Tint the given squares and both endpoints of *last_move*."""
        self._highlights = highlight_set(explicit, last_move)
        self._paint_squares()

    def set_arrows(self, arrows: Iterable[Arrow]) -> None:
        self._arrows = list(arrows)
        self._sync_arrows()

    def square_at(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        return display_to_square(int(pos.x() // t), int(pos.y() // t), self._flipped)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))
        font.setBold(True)

        for sq in ALL_SQUARES:
            col, row = square_to_display(sq, self._flipped)
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(self._Z_SQUARE)
            self.addItem(rect)
            self._square_items[sq] = rect

            label_color = (
                self._theme.dark_square if self._is_light(sq) else self._theme.light_square
            )
            # Rank numbers on the left edge, file letters on the bottom edge
            if col == 0:
                self._add_coord(str(rank_of(sq) + 1), col * t + 3, row * t + 2, font, label_color)
            if row == 7:
                letter = chr(ord("a") + file_of(sq))
                self._add_coord(letter, col * t + t - 12, row * t + t - 17, font, label_color)

        self._paint_squares()
        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self,
        text: str,
        x: float,
        y: float,
        font: QFont,
        color: QColor,
    ) -> None:
        item = QGraphicsSimpleTextItem(text)
        item.setFont(font)
        item.setBrush(QBrush(color))
        item.setOpacity(0.75)
        item.setPos(x, y)
        item.setZValue(self._Z_COORD)
        item.setVisible(self._show_coordinates)
        self.addItem(item)
        self._coord_items.append(item)

    def _paint_squares(self) -> None:
        theme = self._theme
        for sq, rect in self._square_items.items():
            light = self._is_light(sq)
            if sq in self._highlights:
                color = theme.light_highlight if light else theme.dark_highlight
            else:
                color = theme.light_square if light else theme.dark_square
            rect.setBrush(QBrush(color))

    @staticmethod
    def _is_light(sq: Square) -> bool:
        return (file_of(sq) + rank_of(sq)) % 2 == 1

    # ── Pieces ───────────────────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current grid."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._grid is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.62))
        for sq in ALL_SQUARES:
            piece = piece_at(self._grid, sq)
            if piece is None:
                continue
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            is_white = piece.color == Color.WHITE
            item.setBrush(
                QBrush(self._theme.white_piece if is_white else self._theme.black_piece)
            )
            item.setPen(QPen(self._theme.piece_outline, 1.2))
            col, row = square_to_display(sq, self._flipped)
            bounds = item.boundingRect()
            item.setPos(
                col * t + (t - bounds.width()) / 2,
                row * t + (t - bounds.height()) / 2,
            )
            item.setZValue(self._Z_PIECE)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Arrows ───────────────────────────────────────────────────────────

    def arrow_layer(self) -> ArrowLayer:
        arrows = self._arrows if self._show_arrows else []
        return layout_arrows(arrows, self.board_size, self._flipped)

    def _sync_arrows(self) -> None:
        for item in self._arrow_items:
            self.removeItem(item)
        self._arrow_items.clear()

        layer = self.arrow_layer()
        for z_offset, polygon in enumerate(layer.polygons):
            item = QGraphicsPolygonItem(
                QPolygonF([QPointF(x, y) for x, y in polygon.points])
            )
            item.setBrush(QBrush(qcolor(polygon.color)))
            item.setPen(QPen(Qt.PenStyle.NoPen))
            item.setOpacity(polygon.opacity)
            # Later polygons sit above earlier ones
            item.setZValue(self._Z_ARROW + z_offset * 0.01)
            if layer.glow:
                glow = QGraphicsDropShadowEffect()
                glow.setBlurRadius(layer.blur_radius * 2)
                glow.setOffset(0, 0)
                glow.setColor(qcolor(polygon.color, 0.8))
                item.setGraphicsEffect(glow)
            self.addItem(item)
            self._arrow_items.append(item)
