"""Load a game review document produced by the analysis service."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from chessreview.core.enums import Color
from chessreview.core.position import MalformedPositionError, decode_placement
from chessreview.core.types import Square, parse_square
from chessreview.review.models import (
    GameReview,
    GameSummary,
    KeyMoment,
    MoveClassification,
    MoveRecord,
    Severity,
)

_LOGGER = logging.getLogger(__name__)


class ReviewFormatError(ValueError):
    """Raised when a review document is missing fields or holds bad values."""


def load_review(path: str | Path) -> GameReview:
    """Read and validate a review JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ReviewFormatError(f"{path.name}: not UTF-8 text ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise ReviewFormatError(f"{path.name}: invalid JSON ({exc})") from exc
    review = review_from_dict(data)
    _LOGGER.info(
        "Loaded review %s: %d moves, %d key moments",
        path.name,
        len(review.moves),
        len(review.key_moments),
    )
    return review


def review_from_dict(data: Any) -> GameReview:
    """Build a :class:`GameReview` from the decoded JSON document."""
    if not isinstance(data, Mapping):
        raise ReviewFormatError("Review document must be a JSON object")

    raw_moves = data.get("moves")
    if not isinstance(raw_moves, list):
        raise ReviewFormatError("Review document has no 'moves' list")
    moves = tuple(_move_from_dict(raw, idx) for idx, raw in enumerate(raw_moves))

    raw_moments = data.get("key_moments") or []
    if not isinstance(raw_moments, list):
        raise ReviewFormatError("'key_moments' must be a list")
    moments = tuple(
        _key_moment_from_dict(raw, idx, len(moves))
        for idx, raw in enumerate(raw_moments)
    )

    return GameReview(
        moves=moves,
        key_moments=moments,
        summary=_summary_from_dict(data.get("summary")),
        game_url=str(data.get("game_url") or ""),
        white=str(data.get("white") or ""),
        black=str(data.get("black") or ""),
        result=str(data.get("result") or ""),
        time_control=str(data.get("time_control") or ""),
        time_class=str(data.get("time_class") or ""),
        date=str(data.get("date") or ""),
    )


def _require(raw: Mapping[str, Any], key: str, where: str) -> Any:
    try:
        return raw[key]
    except KeyError:
        raise ReviewFormatError(f"{where}: missing field {key!r}") from None


def _classification(value: Any, where: str) -> MoveClassification:
    try:
        return MoveClassification(str(value))
    except ValueError:
        raise ReviewFormatError(f"{where}: unknown classification {value!r}") from None


def _color(value: Any, where: str) -> Color:
    try:
        return Color.from_name(str(value))
    except ValueError as exc:
        raise ReviewFormatError(f"{where}: {exc}") from None


def _square_pair(
    raw: Mapping[str, Any],
    from_key: str,
    to_key: str,
    where: str,
) -> tuple[Square, Square] | None:
    from_name, to_name = raw.get(from_key), raw.get(to_key)
    if not from_name or not to_name:
        return None
    try:
        return parse_square(str(from_name)), parse_square(str(to_name))
    except ValueError as exc:
        raise ReviewFormatError(f"{where}: {exc}") from None


def _fen(raw: Mapping[str, Any], key: str, where: str) -> str:
    fen = str(_require(raw, key, where))
    try:
        decode_placement(fen)
    except MalformedPositionError as exc:
        raise ReviewFormatError(f"{where}: bad {key}: {exc}") from exc
    return fen


def _move_from_dict(raw: Any, idx: int) -> MoveRecord:
    where = f"moves[{idx}]"
    if not isinstance(raw, Mapping):
        raise ReviewFormatError(f"{where}: expected an object")
    try:
        move_number = int(_require(raw, "move_number", where))
        eval_score = float(raw.get("eval_score") or 0.0)
    except (TypeError, ValueError) as exc:
        raise ReviewFormatError(f"{where}: {exc}") from None
    if not math.isfinite(eval_score):
        raise ReviewFormatError(f"{where}: eval_score must be finite, got {eval_score}")

    return MoveRecord(
        move_number=move_number,
        color=_color(_require(raw, "color", where), where),
        san=str(_require(raw, "san", where)),
        classification=_classification(_require(raw, "classification", where), where),
        eval_score=eval_score,
        fen_before=_fen(raw, "fen_before", where),
        fen_after=_fen(raw, "fen_after", where),
        comment=raw.get("comment") or None,
        played=_square_pair(raw, "played_from", "played_to", where),
        best=_square_pair(raw, "best_from", "best_to", where),
        best_san=raw.get("best_move_san") or None,
        is_book_move=bool(raw.get("is_book_move", False)),
    )


def _key_moment_from_dict(raw: Any, idx: int, move_count: int) -> KeyMoment:
    where = f"key_moments[{idx}]"
    if not isinstance(raw, Mapping):
        raise ReviewFormatError(f"{where}: expected an object")
    try:
        move_index = int(_require(raw, "move_index", where))
        move_number = int(raw.get("move_number") or 0)
    except (TypeError, ValueError) as exc:
        raise ReviewFormatError(f"{where}: {exc}") from None
    if not (0 <= move_index < move_count):
        raise ReviewFormatError(
            f"{where}: move_index {move_index} outside 0..{move_count - 1}"
        )

    severity_text = str(raw.get("severity") or "")
    severity = Severity.parse(severity_text)
    if severity is Severity.OTHER:
        _LOGGER.warning("%s: unrecognised severity %r", where, severity_text)

    return KeyMoment(
        move_index=move_index,
        move_number=move_number,
        san=str(raw.get("san") or ""),
        color=_color(raw.get("color") or "white", where),
        classification=_classification(_require(raw, "classification", where), where),
        severity=severity,
        description=str(raw.get("description") or ""),
    )


def _summary_from_dict(raw: Any) -> GameSummary:
    if not isinstance(raw, Mapping):
        return GameSummary()
    try:
        return GameSummary(
            total_moves=int(raw.get("total_moves") or 0),
            brilliancies=int(raw.get("brilliancies") or 0),
            great_moves=int(raw.get("great_moves") or 0),
            best_moves=int(raw.get("best_moves") or 0),
            good_moves=int(raw.get("good_moves") or 0),
            inaccuracies=int(raw.get("inaccuracies") or 0),
            mistakes=int(raw.get("mistakes") or 0),
            blunders=int(raw.get("blunders") or 0),
            accuracy=float(raw.get("accuracy") or 0.0),
            opening_name=raw.get("opening_name") or None,
        )
    except (TypeError, ValueError) as exc:
        raise ReviewFormatError(f"summary: {exc}") from None
