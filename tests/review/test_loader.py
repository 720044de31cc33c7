"""Tests for review JSON loading and validation."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from chessreview.core.enums import Color
from chessreview.core.types import parse_square
from chessreview.review.loader import ReviewFormatError, load_review, review_from_dict
from chessreview.review.models import MoveClassification, Severity

Document = Callable[..., dict[str, object]]


def test_load_review_reads_file(tmp_path: Path, review_document: Document) -> None:
    path = tmp_path / "game.json"
    path.write_text(json.dumps(review_document(6)), encoding="utf-8")

    review = load_review(path)

    assert len(review.moves) == 6
    first = review.moves[0]
    assert first.san == "e4"
    assert first.color is Color.WHITE
    assert first.classification is MoveClassification.BEST
    assert first.played == (parse_square("e2"), parse_square("e4"))
    assert first.best == (parse_square("d2"), parse_square("d4"))
    assert first.best_san == "d4"
    assert review.moves[1].color is Color.BLACK
    assert review.white == "Alice"
    assert review.summary.accuracy == 87.5
    assert review.summary.opening_name == "Ruy Lopez"


def test_key_moments_are_parsed(review_document: Document) -> None:
    review = review_from_dict(review_document(10))
    assert [m.move_index for m in review.key_moments] == [3, 9]
    assert review.key_moments[1].severity is Severity.CRITICAL


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ReviewFormatError, match="invalid JSON"):
        load_review(path)


def test_non_utf8_file_is_a_format_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b"\xff\xfe{}")
    with pytest.raises(ReviewFormatError, match="not UTF-8"):
        load_review(path)


@pytest.mark.parametrize("score", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_eval_is_rejected(review_document: Document, score: float) -> None:
    doc = review_document(2)
    moves = doc["moves"]
    assert isinstance(moves, list)
    moves[0]["eval_score"] = score
    with pytest.raises(ReviewFormatError, match="eval_score must be finite"):
        review_from_dict(doc)


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_review(tmp_path / "nope.json")


def test_document_must_be_object() -> None:
    with pytest.raises(ReviewFormatError):
        review_from_dict([1, 2, 3])


def test_moves_list_required(review_document: Document) -> None:
    doc = review_document(2)
    del doc["moves"]
    with pytest.raises(ReviewFormatError, match="moves"):
        review_from_dict(doc)


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("played_from", "z9", "moves\\[0\\]"),
        ("classification", "Excellent", "unknown classification"),
        ("color", "green", "moves\\[0\\]"),
        ("fen_after", "8/8/8 w - - 0 1", "bad fen_after"),
        ("fen_before", "rnbqkbnr/ppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1", "bad fen_before"),
        ("move_number", "one", "moves\\[0\\]"),
    ],
)
def test_bad_move_fields_are_rejected(
    review_document: Document,
    field: str,
    value: str,
    message: str,
) -> None:
    doc = review_document(2)
    moves = doc["moves"]
    assert isinstance(moves, list)
    moves[0][field] = value
    with pytest.raises(ReviewFormatError, match=message):
        review_from_dict(doc)


def test_missing_required_move_field(review_document: Document) -> None:
    doc = review_document(2)
    moves = doc["moves"]
    assert isinstance(moves, list)
    del moves[1]["san"]
    with pytest.raises(ReviewFormatError, match="missing field 'san'"):
        review_from_dict(doc)


def test_key_moment_index_out_of_range(review_document: Document) -> None:
    doc = review_document(4)
    moments = doc["key_moments"]
    assert isinstance(moments, list)
    moments[0]["move_index"] = 4
    with pytest.raises(ReviewFormatError, match="outside"):
        review_from_dict(doc)


def test_unknown_severity_falls_back_with_warning(
    review_document: Document,
    caplog: pytest.LogCaptureFixture,
) -> None:
    doc = review_document(4)
    moments = doc["key_moments"]
    assert isinstance(moments, list)
    moments[0]["severity"] = "spicy"

    with caplog.at_level(logging.WARNING, logger="chessreview.review.loader"):
        review = review_from_dict(doc)

    assert review.key_moments[0].severity is Severity.OTHER
    assert "spicy" in caplog.text


def test_optional_squares_may_be_absent(review_document: Document) -> None:
    doc = review_document(1)
    moves = doc["moves"]
    assert isinstance(moves, list)
    for key in ("played_from", "played_to", "best_from", "best_to", "best_move_san"):
        del moves[0][key]

    move = review_from_dict(doc).moves[0]
    assert move.played is None
    assert move.best is None
    assert move.best_san is None


def test_empty_review_is_allowed(review_document: Document) -> None:
    review = review_from_dict(review_document(0, summary=None))
    assert review.moves == ()
    assert review.key_moments == ()
    assert review.summary.total_moves == 0
