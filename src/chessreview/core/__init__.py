"""Core domain layer — board decoding and square geometry, no Qt.

Quick start::

    from chessreview.core import STARTING_FEN, decode_placement, square_to_display

    grid = decode_placement(STARTING_FEN)
    col, row = square_to_display(parse_square("e4"), flipped=True)
"""

from chessreview.core.enums import Color, PieceType
from chessreview.core.piece import Piece
from chessreview.core.position import (
    STARTING_FEN,
    Grid,
    MalformedPositionError,
    decode_placement,
    display_to_square,
    highlight_set,
    piece_at,
    square_to_display,
)
from chessreview.core.types import (
    ALL_SQUARES,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Piece",
    # Position
    "STARTING_FEN",
    "Grid",
    "MalformedPositionError",
    "decode_placement",
    "display_to_square",
    "highlight_set",
    "piece_at",
    "square_to_display",
]
