"""Tests for classification styles and badge composition."""

from __future__ import annotations

import pytest

from chessreview.core.enums import Color
from chessreview.review.annotation import (
    BEST_MOVE_ARROW_COLOR,
    NEUTRAL_ARROW_COLOR,
    Tint,
    arrow_color_for,
    compose_badge,
    format_eval,
    is_favorable,
    style_for,
)
from chessreview.review.models import MoveAnnotation, MoveClassification


@pytest.mark.parametrize("classification", list(MoveClassification))
def test_every_classification_has_a_style(classification: MoveClassification) -> None:
    style = style_for(classification)
    assert style.accent.startswith("#")
    assert style.glyph
    assert 0.0 < style.background.alpha <= style.border.alpha <= 1.0
    assert arrow_color_for(classification).startswith("#")


def test_quiet_classifications_have_no_glow() -> None:
    assert style_for(MoveClassification.GOOD).glow is None
    assert style_for(MoveClassification.BOOK).glow is None
    blunder_glow = style_for(MoveClassification.BLUNDER).glow
    assert blunder_glow is not None
    assert blunder_glow.radius > style_for(MoveClassification.BEST).glow.radius  # type: ignore[union-attr]


def test_book_and_forced_arrows_are_neutral() -> None:
    assert arrow_color_for(MoveClassification.BOOK) == NEUTRAL_ARROW_COLOR
    assert arrow_color_for(MoveClassification.FORCED_MOVE) == NEUTRAL_ARROW_COLOR


def test_favorable_colors() -> None:
    assert is_favorable(BEST_MOVE_ARROW_COLOR)
    assert is_favorable(" #A3E635 ")
    assert not is_favorable("#f87171")


def test_tint_rgba() -> None:
    assert Tint("#ff8000", 0.5).rgba() == (255, 128, 0, 128)


@pytest.mark.parametrize(
    ("score", "text"),
    [(0.0, "0.0"), (1.25, "+1.2"), (0.06, "+0.1"), (-3.0, "-3.0")],
)
def test_format_eval(score: float, text: str) -> None:
    assert format_eval(score) == text


def test_compose_badge_for_white_move() -> None:
    badge = compose_badge(
        MoveAnnotation(MoveClassification.MISTAKE, "Qh5", 4, Color.WHITE, "Too early"),
        eval_score=-0.8,
    )
    assert badge.glyph == style_for(MoveClassification.MISTAKE).glyph
    assert badge.label == "Mistake"
    assert badge.eval_text == "-0.8"
    assert badge.move_text == "4. Qh5"
    assert badge.san == "Qh5"
    assert badge.comment == "Too early"


def test_compose_badge_marks_black_moves() -> None:
    badge = compose_badge(
        MoveAnnotation(MoveClassification.FORCED_MOVE, "Kf8", 12, Color.BLACK)
    )
    assert badge.move_text == "12... Kf8"
    assert badge.label == "Forced"
    assert badge.eval_text is None
    assert badge.comment is None
