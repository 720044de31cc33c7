"""Board-state decoding and square ↔ display coordinate mapping."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from chessreview.core.piece import Piece
from chessreview.core.types import Square, file_of, make_square, rank_of

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

Rank: TypeAlias = tuple[Piece | None, ...]
Grid: TypeAlias = tuple[Rank, ...]  # row 0 = rank 8, cell 0 = file a


class MalformedPositionError(ValueError):
    """Raised when a position string does not describe an 8×8 board."""


def decode_placement(position: str) -> Grid:
    """Decode the piece-placement field of *position* into an 8×8 grid.

    Only the first whitespace-separated field is read, so a full FEN and a
    bare placement string are both accepted.
    """
    fields = position.split()
    if not fields:
        raise MalformedPositionError(f"Empty position string: {position!r}")

    ranks = fields[0].split("/")
    if len(ranks) != 8:
        raise MalformedPositionError(
            f"Position must contain 8 ranks, got {len(ranks)}: {position!r}"
        )

    grid: list[Rank] = []
    for rank_text in ranks:
        cells: list[Piece | None] = []
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= 8):
                    raise MalformedPositionError(
                        f"Invalid empty-run digit {ch!r}: {position!r}"
                    )
                cells.extend([None] * step)
            else:
                try:
                    cells.append(Piece.from_char(ch))
                except ValueError:
                    raise MalformedPositionError(
                        f"Invalid piece character {ch!r}: {position!r}"
                    ) from None
            if len(cells) > 8:
                raise MalformedPositionError(f"Rank wider than 8: {rank_text!r}")
        if len(cells) != 8:
            raise MalformedPositionError(
                f"Rank {rank_text!r} covers {len(cells)} squares, expected 8"
            )
        grid.append(tuple(cells))
    return tuple(grid)


def piece_at(grid: Grid, sq: Square) -> Piece | None:
    """Look up the piece standing on *sq* in a decoded grid."""
    return grid[7 - rank_of(sq)][file_of(sq)]


def square_to_display(sq: Square, flipped: bool) -> tuple[int, int]:
    """Return the on-screen ``(col, row)`` of *sq*; row 0 is the top edge."""
    col, row = file_of(sq), 7 - rank_of(sq)
    if flipped:
        return 7 - col, 7 - row
    return col, row


def display_to_square(col: int, row: int, flipped: bool) -> Square | None:
    """Inverse of :func:`square_to_display`; ``None`` outside the board."""
    if not (0 <= col < 8 and 0 <= row < 8):
        return None
    if flipped:
        col, row = 7 - col, 7 - row
    return make_square(col, 7 - row)


def highlight_set(
    explicit: Iterable[Square] = (),
    last_move: tuple[Square, Square] | None = None,
) -> frozenset[Square]:
    """Squares to tint: *explicit* plus both endpoints of *last_move*."""
    squares = set(explicit)
    if last_move is not None:
        squares.update(last_move)
    return frozenset(squares)
