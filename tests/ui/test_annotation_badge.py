"""Tests for the annotation badge widget."""

from __future__ import annotations

from PyQt6.QtCore import QEvent, QPointF
from PyQt6.QtGui import QEnterEvent
from PyQt6.QtTest import QSignalSpy

from chessreview.core.enums import Color
from chessreview.review.annotation import BadgeContent, compose_badge
from chessreview.review.models import MoveAnnotation, MoveClassification
from chessreview.ui.i18n import t
from chessreview.ui.panels.annotation_badge import AnnotationBadge


def _badge_content(
    classification: MoveClassification = MoveClassification.BLUNDER,
) -> BadgeContent:
    annotation = MoveAnnotation(classification, "Qxf7", 9, Color.BLACK, "Hangs the queen")
    return compose_badge(annotation, eval_score=-4.2)


def test_shows_badge_text() -> None:
    badge = AnnotationBadge()
    badge.set_content(_badge_content())

    assert badge._label.text() == "Blunder"
    assert badge._move.text() == "9... Qxf7"
    assert badge._eval.text() == "-4.2"
    assert badge._comment.text() == "Hangs the queen"


def test_none_hides_badge() -> None:
    badge = AnnotationBadge()
    badge.set_content(_badge_content())
    badge.set_content(None)
    assert badge.content() is None
    assert badge.isHidden()


def test_hover_changes_emphasis_only() -> None:
    badge = AnnotationBadge()
    content = _badge_content()
    badge.set_content(content)
    before = badge.styleSheet()

    point = QPointF(2, 2)
    badge.enterEvent(QEnterEvent(point, point, point))
    assert badge.is_emphasized()
    assert badge.content() is content
    assert badge.styleSheet() != before

    badge.leaveEvent(QEvent(QEvent.Type.Leave))
    assert not badge.is_emphasized()
    assert badge.content() is content
    assert badge.styleSheet() == before


def test_busy_state_disables_coach_button() -> None:
    badge = AnnotationBadge()
    badge.set_busy(True)
    assert not badge._btn_coach.isEnabled()
    assert badge._btn_coach.text() == t().btn_coach_busy

    badge.set_busy(False)
    assert badge._btn_coach.isEnabled()
    assert badge._btn_coach.text() == t().btn_coach


def test_coach_button_emits_signal() -> None:
    badge = AnnotationBadge()
    spy = QSignalSpy(badge.coach_clicked)
    badge._btn_coach.click()
    assert len(spy) == 1
