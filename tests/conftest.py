"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from chessreview.review.loader import review_from_dict
from chessreview.review.models import GameReview

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from chessreview.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


# ── Review fixtures ─────────────────────────────────────────────────────────

_AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"
_CYCLE = (
    ("e4", "e2", "e4", "Best"),
    ("e5", "e7", "e5", "Book"),
    ("Nf3", "g1", "f3", "Good"),
    ("Nc6", "b8", "c6", "Inaccuracy"),
    ("Bb5", "f1", "b5", "Great"),
)


def _move_dict(idx: int) -> dict[str, object]:
    san, src, dst, classification = _CYCLE[idx % len(_CYCLE)]
    return {
        "move_number": idx // 2 + 1,
        "color": "white" if idx % 2 == 0 else "black",
        "san": san,
        "classification": classification,
        "eval_score": 0.3 * (idx + 1) * (1 if idx % 2 == 0 else -1),
        "fen_before": "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
        "fen_after": _AFTER_E4,
        "played_from": src,
        "played_to": dst,
        "best_from": "d2",
        "best_to": "d4",
        "best_move_san": "d4",
        "comment": f"comment {idx}",
    }


@pytest.fixture
def review_document() -> Callable[..., dict[str, object]]:
    """Factory for a JSON-shaped review document with *moves* entries."""

    def build(moves: int = 10, **overrides: object) -> dict[str, object]:
        doc: dict[str, object] = {
            "game_url": "https://example.com/game/1",
            "white": "Alice",
            "black": "Bob",
            "result": "1-0",
            "moves": [_move_dict(i) for i in range(moves)],
            "key_moments": (
                [
                    {
                        "move_index": 3,
                        "move_number": 2,
                        "san": "Nc6",
                        "color": "black",
                        "classification": "Inaccuracy",
                        "severity": "notable",
                        "description": "Loosens the centre",
                    },
                    {
                        "move_index": moves - 1,
                        "move_number": (moves - 1) // 2 + 1,
                        "san": "x",
                        "color": "white",
                        "classification": "Blunder",
                        "severity": "critical",
                        "description": "Drops the queen",
                    },
                ]
                if moves >= 4
                else []
            ),
            "summary": {
                "total_moves": moves,
                "best_moves": 2,
                "inaccuracies": 2,
                "blunders": 1,
                "accuracy": 87.5,
                "opening_name": "Ruy Lopez",
            },
        }
        doc.update(overrides)
        return doc

    return build


@pytest.fixture
def make_review(
    review_document: Callable[..., dict[str, object]],
) -> Callable[..., GameReview]:
    """Factory for a validated :class:`GameReview` with *moves* moves."""

    def build(moves: int = 10, **overrides: object) -> GameReview:
        return review_from_dict(review_document(moves, **overrides))

    return build
