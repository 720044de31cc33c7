"""Evaluation score → evaluation-bar geometry and label text."""

from __future__ import annotations

import math
from dataclasses import dataclass

_MIN_PERCENT = 3.0
_MAX_PERCENT = 97.0


def to_fill_percent(score: float) -> float:
    """Map a white-positive score (pawns) to the white share of the bar.

    Near-linear around 0 and compressive at the extremes, so small swings
    stay visible while a ±20 swing cannot overflow the bar.
    """
    raw = 50.0 + (score / (1.0 + abs(score) / 4.0)) * 25.0
    return min(_MAX_PERCENT, max(_MIN_PERCENT, raw))


def bar_fill_percent(score: float, flipped: bool) -> float:
    """White segment height used for layout, honouring board orientation."""
    percent = to_fill_percent(score)
    return 100.0 - percent if flipped else percent


def format_magnitude(score: float) -> str:
    """Unsigned label: one decimal, or a whole number from 10 upwards."""
    magnitude = abs(score)
    if magnitude >= 10:
        return str(math.floor(magnitude + 0.5))
    return f"{magnitude:.1f}"


@dataclass(slots=True, frozen=True)
class EvalBarLayout:
    """Everything the bar widget needs to paint one evaluation."""

    white_percent: float
    label: str
    label_on_white: bool


def layout_eval_bar(score: float, flipped: bool = False) -> EvalBarLayout:
    return EvalBarLayout(
        white_percent=bar_fill_percent(score, flipped),
        label=format_magnitude(score),
        label_on_white=score > 0,
    )
