"""Classification styling and badge composition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from chessreview.core.enums import Color
from chessreview.review.models import MoveAnnotation, MoveClassification

BEST_MOVE_ARROW_COLOR = "#34d399"
NEUTRAL_ARROW_COLOR = "#cbd5e1"

# Suggestion-green family; arrows in these colours are painted last.
_FAVORABLE_COLORS = frozenset({"#34d399", "#a3e635"})


@dataclass(slots=True, frozen=True)
class Tint:
    """Translucent colour: hex plus alpha in 0..1."""

    color: str
    alpha: float

    def rgba(self) -> tuple[int, int, int, int]:
        h = self.color.lstrip("#")
        return (
            int(h[0:2], 16),
            int(h[2:4], 16),
            int(h[4:6], 16),
            round(self.alpha * 255),
        )


@dataclass(slots=True, frozen=True)
class Glow:
    radius: float
    alpha: float


@dataclass(slots=True, frozen=True)
class ClassificationStyle:
    accent: str
    background: Tint
    border: Tint
    glow: Glow | None  # None = no glow
    glyph: str


def style_for(classification: MoveClassification) -> ClassificationStyle:
    """Visual style of *classification*."""
    match classification:
        case MoveClassification.BRILLIANT:
            return _style("#67e8f9", 0.12, 0.25, Glow(20, 0.4), "💎")
        case MoveClassification.GREAT:
            return _style("#60a5fa", 0.12, 0.25, Glow(16, 0.3), "⭐")
        case MoveClassification.BEST:
            return _style("#34d399", 0.12, 0.2, Glow(12, 0.2), "✅")
        case MoveClassification.GOOD:
            return _style("#a3e635", 0.08, 0.15, None, "👍")
        case MoveClassification.BOOK:
            return _style("#fbbf24", 0.08, 0.15, None, "📖")
        case MoveClassification.INACCURACY:
            return _style("#facc15", 0.12, 0.2, Glow(12, 0.2), "⚠️")
        case MoveClassification.MISTAKE:
            return _style("#fb923c", 0.12, 0.25, Glow(16, 0.3), "❌")
        case MoveClassification.BLUNDER:
            return _style("#f87171", 0.15, 0.3, Glow(24, 0.5), "💀")
        case MoveClassification.FORCED_MOVE:
            return _style("#94a3b8", 0.08, 0.15, None, "🔒")
        case _:
            assert_never(classification)


def _style(
    accent: str,
    bg_alpha: float,
    border_alpha: float,
    glow: Glow | None,
    glyph: str,
) -> ClassificationStyle:
    return ClassificationStyle(
        accent=accent,
        background=Tint(accent, bg_alpha),
        border=Tint(accent, border_alpha),
        glow=glow,
        glyph=glyph,
    )


def arrow_color_for(classification: MoveClassification) -> str:
    """Colour of the played-move arrow."""
    match classification:
        case MoveClassification.BRILLIANT:
            return "#22d3ee"
        case MoveClassification.GREAT:
            return "#60a5fa"
        case MoveClassification.BEST:
            return "#34d399"
        case MoveClassification.GOOD:
            return "#a3e635"
        case MoveClassification.INACCURACY:
            return "#facc15"
        case MoveClassification.MISTAKE:
            return "#fb923c"
        case MoveClassification.BLUNDER:
            return "#f87171"
        case MoveClassification.BOOK | MoveClassification.FORCED_MOVE:
            return NEUTRAL_ARROW_COLOR
        case _:
            assert_never(classification)


def is_favorable(color: str) -> bool:
    return color.strip().lower() in _FAVORABLE_COLORS


def format_eval(score: float) -> str:
    """Signed one-decimal evaluation, ``+`` only for a positive score."""
    sign = "+" if score > 0 else ""
    return f"{sign}{score:.1f}"


@dataclass(slots=True, frozen=True)
class BadgeContent:
    """Text pieces of the badge shown above the board."""

    glyph: str
    label: str
    eval_text: str | None
    move_text: str
    san: str
    comment: str | None
    style: ClassificationStyle


def compose_badge(
    annotation: MoveAnnotation,
    eval_score: float | None = None,
) -> BadgeContent:
    style = style_for(annotation.classification)
    dots = "..." if annotation.color == Color.BLACK else "."
    return BadgeContent(
        glyph=style.glyph,
        label=annotation.classification.label,
        eval_text=format_eval(eval_score) if eval_score is not None else None,
        move_text=f"{annotation.move_number}{dots} {annotation.san}",
        san=annotation.san,
        comment=annotation.comment or None,
        style=style,
    )
