"""Integration tests for ReviewWindow wiring."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtTest import QTest
from PyQt6.QtWidgets import QMessageBox

from chessreview.review.models import GameReview
from chessreview.review.session import CommentaryRequest
from chessreview.ui.dialogs.settings_dialog import AppSettings
from chessreview.ui.main_window import ReviewWindow


class _StubProvider:
    def __init__(self, reply: str = "Solid developing move.") -> None:
        self.reply = reply
        self.requests: list[CommentaryRequest] = []

    def comment(self, request: CommentaryRequest) -> str:
        self.requests.append(request)
        return self.reply


def _press(window: ReviewWindow, key: Qt.Key | int) -> None:
    code = key.value if isinstance(key, Qt.Key) else key
    window.keyPressEvent(
        QKeyEvent(QEvent.Type.KeyPress, code, Qt.KeyboardModifier.NoModifier)
    )


def _window(provider: _StubProvider | None = None) -> ReviewWindow:
    return ReviewWindow(provider=provider or _StubProvider())


def test_window_starts_empty(qapp: object) -> None:
    del qapp
    window = _window()

    assert window.session.review is None
    assert window._eval_bar.score() is None
    assert not window._badge.isVisibleTo(window)
    assert not window._nav_panel.can_go_back()
    assert not window._nav_panel.can_go_forward()


def test_set_review_shows_start_position(
    qapp: object, make_review: Callable[..., GameReview]
) -> None:
    del qapp
    window = _window()
    window.set_review(make_review(10), "game.json")

    assert window.session.pointer == -1
    assert window._move_panel.active_index() is None
    assert window._summary_panel.count_shown(
        window.session.review.moves[3].classification
    ) == 2
    assert "game.json" in window._status_label.text()


def test_arrow_keys_drive_the_pointer(
    qapp: object, make_review: Callable[..., GameReview]
) -> None:
    del qapp
    window = _window()
    window.set_review(make_review(10))

    _press(window, Qt.Key.Key_Right)
    assert window.session.pointer == 0
    assert window._move_panel.active_index() == 0
    assert window._eval_bar.score() == pytest.approx(0.3)

    _press(window, Qt.Key.Key_End)
    assert window.session.pointer == 9

    _press(window, Qt.Key.Key_Left)
    assert window.session.pointer == 8

    _press(window, Qt.Key.Key_Home)
    assert window.session.pointer == -1
    assert window._eval_bar.score() is None


def test_navigation_keys_without_review_do_nothing(qapp: object) -> None:
    del qapp
    window = _window()
    generation = window.session.generation

    _press(window, Qt.Key.Key_Right)

    assert window.session.pointer == -1
    assert window.session.generation == generation


def test_move_panel_click_jumps(
    qapp: object, make_review: Callable[..., GameReview]
) -> None:
    del qapp
    window = _window()
    window.set_review(make_review(10))

    window._move_panel.move_clicked.emit(5)

    assert window.session.pointer == 5
    badge = window._badge.content()
    assert badge is not None
    assert badge.move_text == window.session.review.moves[5].move_label


def test_key_moment_click_jumps(
    qapp: object, make_review: Callable[..., GameReview]
) -> None:
    del qapp
    window = _window()
    window.set_review(make_review(10))

    window._key_moments.moment_clicked.emit(1)

    assert window.session.pointer == 9


def test_flip_updates_board_and_eval_bar(qapp: object) -> None:
    del qapp
    window = _window()

    window._nav_panel.flip_clicked.emit()

    assert window.board_view.board_scene.is_flipped()
    assert window._eval_bar.is_flipped()


def test_apply_settings_hides_arrows_and_eval_bar(
    qapp: object, make_review: Callable[..., GameReview]
) -> None:
    del qapp
    window = ReviewWindow(
        settings=AppSettings(show_arrows=False, show_eval_bar=False),
        provider=_StubProvider(),
    )
    window.set_review(make_review(10))
    window.session.jump_to(3)

    assert window.board_view.board_scene.arrow_layer().polygons == ()
    assert not window._eval_bar.isVisibleTo(window)


def test_apply_settings_switches_language(qapp: object) -> None:
    del qapp
    window = ReviewWindow(
        settings=AppSettings(language="Russian"), provider=_StubProvider()
    )

    assert window._menu_file.title() != "File"


def test_open_review_file_rejects_bad_json(
    qapp: object, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    del qapp
    warnings: list[str] = []
    monkeypatch.setattr(
        QMessageBox,
        "warning",
        lambda _parent, _title, text: warnings.append(text),
    )
    path = tmp_path / "broken.json"
    path.write_text("{ not json", encoding="utf-8")
    window = _window()

    assert window.open_review_file(path) is False
    assert len(warnings) == 1
    assert window.session.review is None


def test_open_review_file_loads_valid_document(
    qapp: object,
    tmp_path: Path,
    review_document: Callable[..., dict[str, object]],
) -> None:
    del qapp
    path = tmp_path / "review.json"
    path.write_text(json.dumps(review_document(6)), encoding="utf-8")
    window = _window()

    assert window.open_review_file(path) is True
    assert window.session.move_count == 6
    assert "review.json" in window._status_label.text()


def test_coach_reply_opens_commentary_dialog(
    qapp: object, make_review: Callable[..., GameReview]
) -> None:
    del qapp
    provider = _StubProvider("Controls the centre.")
    window = _window(provider)
    window.set_review(make_review(10))
    window.session.jump_to(0)

    window._badge.coach_clicked.emit()
    assert window._badge.is_busy()

    waited = 0
    while window.session.commentary.pending and waited < 3000:
        QTest.qWait(10)
        waited += 10

    assert provider.requests[0].played_san == "e4"
    assert window._commentary_dialog.isVisible()
    assert window._commentary_dialog.text() == "Controls the centre."
    assert not window._badge.is_busy()

    window._commentary_dialog.reject()
    assert not window.session.commentary.dialog_open


def test_stale_coach_reply_is_not_shown(
    qapp: object, make_review: Callable[..., GameReview]
) -> None:
    del qapp
    window = _window()
    window.set_review(make_review(10))
    window.session.jump_to(0)
    stale = window.session.generation

    window.session.jump_to(1)
    window._on_commentary_finished(stale, "Late reply")

    assert window.session.commentary.text is None
    assert not window._commentary_dialog.isVisible()


def test_unknown_key_code_is_ignored(
    qapp: object, make_review: Callable[..., GameReview]
) -> None:
    del qapp
    window = _window()
    window.set_review(make_review(4))

    _press(window, 0)
    _press(window, 0x01001250)  # dead key

    assert window.session.pointer == -1


def test_open_review_file_rejects_non_utf8(
    qapp: object, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    del qapp
    warnings: list[str] = []
    monkeypatch.setattr(
        QMessageBox,
        "warning",
        lambda _parent, _title, text: warnings.append(text),
    )
    path = tmp_path / "latin1.json"
    path.write_bytes(b"\xff\xfe{}")
    window = _window()

    assert window.open_review_file(path) is False
    assert len(warnings) == 1
