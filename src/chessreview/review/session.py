"""Move-review state machine: pointer navigation and coach commentary."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from chessreview.core.enums import Color
from chessreview.core.position import STARTING_FEN, Grid, decode_placement
from chessreview.core.types import Square
from chessreview.review import evaluation
from chessreview.review.annotation import (
    BEST_MOVE_ARROW_COLOR,
    BadgeContent,
    arrow_color_for,
    compose_badge,
)
from chessreview.review.models import (
    Arrow,
    GameReview,
    KeyMoment,
    MoveAnnotation,
    MoveClassification,
    MoveRecord,
)
from chessreview.review.timeline import progress_percent

_LOGGER = logging.getLogger(__name__)

ERROR_PREFIX = "⚠️ "


class NavKey(Enum):
    """Keyboard navigation commands."""

    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()


@dataclass(slots=True, frozen=True)
class CommentaryRequest:
    """Everything the coach needs to comment on one move."""

    generation: int
    game_url: str
    move_index: int
    fen_before: str
    played_san: str
    best_san: str | None
    classification: MoveClassification
    color: Color
    move_number: int


@dataclass(slots=True, frozen=True)
class CommentaryState:
    pending: bool = False
    text: str | None = None
    is_error: bool = False
    dialog_open: bool = False


_IDLE = CommentaryState()


class ReviewSession:
    """Holds the move pointer of one reviewed game.

    The pointer ranges over ``-1 .. N-1`` where ``-1`` is the starting
    position. Every effective pointer change bumps the generation counter and
    clears commentary, so a coach reply that arrives late is dropped instead
    of being shown against another move.
    """

    __slots__ = (
        "__weakref__",
        "_review",
        "_pointer",
        "_generation",
        "_commentary",
        "_dispatch",
        "_on_changed",
    )

    def __init__(
        self,
        *,
        dispatch_commentary: Callable[[CommentaryRequest], None] | None = None,
        on_changed: Callable[[], None] | None = None,
    ) -> None:
        self._review: GameReview | None = None
        self._pointer = -1
        self._generation = 0
        self._commentary = _IDLE
        self._dispatch = dispatch_commentary
        self._on_changed = on_changed

    # ── Loading ──────────────────────────────────────────────────────────

    def load(self, review: GameReview | None) -> None:
        """Replace the reviewed game; the pointer returns to the start."""
        self._review = review
        self._pointer = -1
        self._generation += 1
        self._commentary = _IDLE
        self._notify()

    @property
    def review(self) -> GameReview | None:
        return self._review

    @property
    def has_moves(self) -> bool:
        return self._review is not None and bool(self._review.moves)

    @property
    def move_count(self) -> int:
        return len(self._review.moves) if self._review is not None else 0

    @property
    def pointer(self) -> int:
        return self._pointer

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def at_start(self) -> bool:
        return self._pointer == -1

    @property
    def at_end(self) -> bool:
        return self._pointer == self.move_count - 1

    # ── Navigation ───────────────────────────────────────────────────────

    def first(self) -> None:
        self._set_pointer(-1)

    def last(self) -> None:
        self._set_pointer(self.move_count - 1)

    def prev(self) -> None:
        self._set_pointer(self._pointer - 1)

    def next(self) -> None:
        self._set_pointer(self._pointer + 1)

    def jump_to(self, index: int) -> None:
        """Move to *index*, clamped into ``-1 .. N-1``."""
        self._set_pointer(index)

    def jump_to_key_moment(self, moment_index: int) -> None:
        moments = self.key_moments()
        if 0 <= moment_index < len(moments):
            self._set_pointer(moments[moment_index].move_index)

    def handle_key(self, key: NavKey) -> bool:
        """Apply a navigation key; returns ``False`` when nothing is loaded."""
        if self._review is None:
            return False
        if key is NavKey.LEFT:
            self.prev()
        elif key is NavKey.RIGHT:
            self.next()
        elif key is NavKey.HOME:
            self.first()
        elif key is NavKey.END:
            self.last()
        return True

    def _set_pointer(self, index: int) -> None:
        clamped = max(-1, min(self.move_count - 1, index))
        if clamped == self._pointer:
            return
        self._pointer = clamped
        self._generation += 1
        self._commentary = _IDLE
        self._notify()

    def _notify(self) -> None:
        if self._on_changed is not None:
            self._on_changed()

    # ── Derived queries ──────────────────────────────────────────────────

    def current_move(self) -> MoveRecord | None:
        if self._review is None or self._pointer < 0:
            return None
        return self._review.moves[self._pointer]

    def current_position_string(self) -> str:
        move = self.current_move()
        if move is None or not move.fen_after:
            return STARTING_FEN
        return move.fen_after

    def current_grid(self) -> Grid:
        return decode_placement(self.current_position_string())

    def current_annotation(self) -> MoveAnnotation | None:
        move = self.current_move()
        if move is None:
            return None
        return MoveAnnotation(
            classification=move.classification,
            san=move.san,
            move_number=move.move_number,
            color=move.color,
            comment=move.comment,
        )

    def current_badge(self) -> BadgeContent | None:
        annotation = self.current_annotation()
        if annotation is None:
            return None
        return compose_badge(annotation, self.current_eval())

    def current_arrows(self) -> list[Arrow]:
        """Played-move arrow, plus the engine's suggestion when it differs."""
        move = self.current_move()
        if move is None:
            return []
        arrows: list[Arrow] = []
        if move.played is not None:
            arrows.append(
                Arrow(
                    move.played[0],
                    move.played[1],
                    arrow_color_for(move.classification),
                )
            )
        if move.best is not None and move.best != move.played:
            arrows.append(Arrow(move.best[0], move.best[1], BEST_MOVE_ARROW_COLOR))
        return arrows

    def current_last_move(self) -> tuple[Square, Square] | None:
        move = self.current_move()
        return move.played if move is not None else None

    def current_eval(self) -> float | None:
        move = self.current_move()
        return move.eval_score if move is not None else None

    def fill_percent(self, flipped: bool = False) -> float:
        return evaluation.bar_fill_percent(self.current_eval() or 0.0, flipped)

    def format_magnitude(self) -> str:
        return evaluation.format_magnitude(self.current_eval() or 0.0)

    def key_moments(self) -> tuple[KeyMoment, ...]:
        return self._review.key_moments if self._review is not None else ()

    def active_key_moment(self) -> KeyMoment | None:
        for moment in self.key_moments():
            if moment.move_index == self._pointer:
                return moment
        return None

    def progress_percent(self) -> float:
        return progress_percent(self._pointer, self.move_count)

    # ── Commentary ───────────────────────────────────────────────────────

    @property
    def commentary(self) -> CommentaryState:
        return self._commentary

    def request_commentary(self) -> bool:
        """Ask the coach about the current move; single-flight per pointer."""
        move = self.current_move()
        if move is None or self._commentary.pending:
            return False
        assert self._review is not None

        request = CommentaryRequest(
            generation=self._generation,
            game_url=self._review.game_url,
            move_index=self._pointer,
            fen_before=move.fen_before,
            played_san=move.san,
            best_san=move.best_san,
            classification=move.classification,
            color=move.color,
            move_number=move.move_number,
        )
        self._commentary = CommentaryState(pending=True)
        self._notify()

        if self._dispatch is None:
            self.apply_commentary_failure(request.generation, "No coach configured")
            return True
        try:
            self._dispatch(request)
        except Exception as exc:
            _LOGGER.exception("Commentary dispatch failed")
            self.apply_commentary_failure(request.generation, str(exc))
        return True

    def apply_commentary(self, generation: int, text: str) -> bool:
        """Store a coach reply; ignored unless *generation* is current."""
        if not self._accepts(generation):
            return False
        self._commentary = CommentaryState(text=text, dialog_open=True)
        self._notify()
        return True

    def apply_commentary_failure(self, generation: int, message: str) -> bool:
        if not self._accepts(generation):
            return False
        self._commentary = CommentaryState(
            text=f"{ERROR_PREFIX}{message}",
            is_error=True,
            dialog_open=True,
        )
        self._notify()
        return True

    def close_commentary(self) -> None:
        if not self._commentary.dialog_open:
            return
        self._commentary = CommentaryState(
            text=self._commentary.text,
            is_error=self._commentary.is_error,
        )
        self._notify()

    def _accepts(self, generation: int) -> bool:
        if generation != self._generation:
            _LOGGER.debug(
                "Dropping stale commentary (generation %d, current %d)",
                generation,
                self._generation,
            )
            return False
        return True
