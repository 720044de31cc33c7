"""Data models consumed from the upstream game analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from chessreview.core.enums import Color
from chessreview.core.types import Square


class MoveClassification(StrEnum):
    """Move quality labels assigned by the analysis provider."""

    BRILLIANT = "Brilliant"
    GREAT = "Great"
    BEST = "Best"
    GOOD = "Good"
    BOOK = "Book"
    INACCURACY = "Inaccuracy"
    MISTAKE = "Mistake"
    BLUNDER = "Blunder"
    FORCED_MOVE = "ForcedMove"

    @property
    def label(self) -> str:
        """Short label shown in badges and lists."""
        if self is MoveClassification.FORCED_MOVE:
            return "Forced"
        return self.value


class Severity(StrEnum):
    """Timeline emphasis tier of a key moment."""

    CRITICAL = "critical"
    MAJOR = "major"
    NOTABLE = "notable"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> Severity:
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(slots=True, frozen=True)
class Arrow:
    """Board arrow for the currently displayed move."""

    from_sq: Square
    to_sq: Square
    color: str  # hex, e.g. "#34d399"


@dataclass(slots=True, frozen=True)
class MoveRecord:
    """One analysed move as produced by the analysis provider."""

    move_number: int
    color: Color
    san: str
    classification: MoveClassification
    eval_score: float  # pawns, positive = white advantage
    fen_before: str
    fen_after: str
    comment: str | None = None
    played: tuple[Square, Square] | None = None
    best: tuple[Square, Square] | None = None
    best_san: str | None = None
    is_book_move: bool = False

    @property
    def move_label(self) -> str:
        """Numbered move text, e.g. ``"12. e4"`` or ``"12... Nf6"``."""
        dots = "..." if self.color == Color.BLACK else "."
        return f"{self.move_number}{dots} {self.san}"


@dataclass(slots=True, frozen=True)
class MoveAnnotation:
    """What the badge over the board needs to know about a move."""

    classification: MoveClassification
    san: str
    move_number: int
    color: Color
    comment: str | None = None


@dataclass(slots=True, frozen=True)
class KeyMoment:
    """A flagged move of elevated significance."""

    move_index: int
    move_number: int
    san: str
    color: Color
    classification: MoveClassification
    severity: Severity
    description: str


@dataclass(slots=True, frozen=True)
class GameSummary:
    """Aggregate figures for the whole game."""

    total_moves: int = 0
    brilliancies: int = 0
    great_moves: int = 0
    best_moves: int = 0
    good_moves: int = 0
    inaccuracies: int = 0
    mistakes: int = 0
    blunders: int = 0
    accuracy: float = 0.0
    opening_name: str | None = None

    def count_for(self, classification: MoveClassification) -> int:
        """Summary counter matching *classification*, 0 if it is not tracked."""
        counts = {
            MoveClassification.BRILLIANT: self.brilliancies,
            MoveClassification.GREAT: self.great_moves,
            MoveClassification.BEST: self.best_moves,
            MoveClassification.GOOD: self.good_moves,
            MoveClassification.INACCURACY: self.inaccuracies,
            MoveClassification.MISTAKE: self.mistakes,
            MoveClassification.BLUNDER: self.blunders,
        }
        return counts.get(classification, 0)


@dataclass(slots=True, frozen=True)
class GameReview:
    """Full move-by-move analysis of one game."""

    moves: tuple[MoveRecord, ...]
    key_moments: tuple[KeyMoment, ...] = ()
    summary: GameSummary = GameSummary()
    game_url: str = ""
    white: str = ""
    black: str = ""
    result: str = ""
    time_control: str = ""
    time_class: str = ""
    date: str = ""
