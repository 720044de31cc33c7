"""Arrow geometry for the played / best move overlay.

Arrows are turned into filled outlines in scene coordinates so that the
board scene only has to hand the points to a polygon item.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from chessreview.core.position import square_to_display
from chessreview.core.types import Square
from chessreview.review.annotation import is_favorable
from chessreview.review.models import Arrow

Point = tuple[float, float]

_MIN_LENGTH = 1.0  # px between square centres
_ARROW_OPACITY = 0.82
_GLOW_BLUR_RADIUS = 6.0


@dataclass(slots=True, frozen=True)
class ArrowMetrics:
    """Arrow proportions, all in scene units."""

    shaft_width: float
    head_length: float
    head_width: float
    start_offset: float  # keeps the tail off the origin piece
    end_offset: float  # keeps the tip off the destination piece

    @classmethod
    def for_square(cls, square_size: float) -> ArrowMetrics:
        return cls(
            shaft_width=square_size * 0.28,
            head_length=square_size * 0.45,
            head_width=square_size * 0.55,
            start_offset=square_size * 0.15,
            end_offset=square_size * 0.05,
        )


@dataclass(slots=True, frozen=True)
class ArrowPolygon:
    """Closed outline of one arrow, ready to fill."""

    points: tuple[Point, ...]
    color: str
    opacity: float = _ARROW_OPACITY

    @property
    def tip(self) -> Point:
        return self.points[3]

    @property
    def tail(self) -> Point:
        """Midpoint of the shaft's back edge."""
        (x1, y1), (x2, y2) = self.points[0], self.points[-1]
        return (x1 + x2) / 2.0, (y1 + y2) / 2.0


@dataclass(slots=True, frozen=True)
class ArrowLayer:
    polygons: tuple[ArrowPolygon, ...]
    glow: bool = True
    blur_radius: float = _GLOW_BLUR_RADIUS


def square_center(sq: Square, square_size: float, flipped: bool) -> Point:
    col, row = square_to_display(sq, flipped)
    return col * square_size + square_size / 2.0, row * square_size + square_size / 2.0


def stack_order(arrows: Iterable[Arrow]) -> list[Arrow]:
    """Paint order: everything else first, favourable suggestions on top."""
    items = list(arrows)
    others = [a for a in items if not is_favorable(a.color)]
    favorable = [a for a in items if is_favorable(a.color)]
    return others + favorable


def arrow_outline(
    start: Point,
    end: Point,
    metrics: ArrowMetrics,
) -> tuple[Point, ...] | None:
    """Shaft + head outline from *start* to *end*, or ``None`` if too short."""
    cx1, cy1 = start
    cx2, cy2 = end
    dx, dy = cx2 - cx1, cy2 - cy1
    length = math.hypot(dx, dy)
    if length < _MIN_LENGTH:
        return None

    ndx, ndy = dx / length, dy / length
    px, py = -ndy, ndx

    x1, y1 = cx1 + ndx * metrics.start_offset, cy1 + ndy * metrics.start_offset
    tip_x, tip_y = cx2 - ndx * metrics.end_offset, cy2 - ndy * metrics.end_offset
    body_x = tip_x - ndx * metrics.head_length
    body_y = tip_y - ndy * metrics.head_length

    hw = metrics.shaft_width / 2.0
    hhw = metrics.head_width / 2.0
    return (
        (x1 + px * hw, y1 + py * hw),
        (body_x + px * hw, body_y + py * hw),
        (body_x + px * hhw, body_y + py * hhw),
        (tip_x, tip_y),
        (body_x - px * hhw, body_y - py * hhw),
        (body_x - px * hw, body_y - py * hw),
        (x1 - px * hw, y1 - py * hw),
    )


def layout_arrows(
    arrows: Iterable[Arrow],
    board_size: float,
    flipped: bool = False,
) -> ArrowLayer:
    """Build the ordered polygons for *arrows* on a *board_size* px board."""
    square_size = board_size / 8.0
    metrics = ArrowMetrics.for_square(square_size)
    polygons: list[ArrowPolygon] = []
    for arrow in stack_order(arrows):
        outline = arrow_outline(
            square_center(arrow.from_sq, square_size, flipped),
            square_center(arrow.to_sq, square_size, flipped),
            metrics,
        )
        if outline is None:
            continue
        polygons.append(ArrowPolygon(points=outline, color=arrow.color))
    return ArrowLayer(polygons=tuple(polygons))
