"""Tests for ReviewSession navigation and the commentary lifecycle."""

from __future__ import annotations

import weakref
from collections.abc import Callable

import pytest

from chessreview.core.position import STARTING_FEN, decode_placement
from chessreview.core.types import parse_square
from chessreview.review.loader import review_from_dict
from chessreview.review.annotation import BEST_MOVE_ARROW_COLOR
from chessreview.review.models import Arrow, GameReview, MoveClassification
from chessreview.review.session import (
    ERROR_PREFIX,
    CommentaryRequest,
    NavKey,
    ReviewSession,
)

ReviewFactory = Callable[..., GameReview]


class _Dispatcher:
    def __init__(self) -> None:
        self.requests: list[CommentaryRequest] = []

    def __call__(self, request: CommentaryRequest) -> None:
        self.requests.append(request)


@pytest.fixture
def dispatcher() -> _Dispatcher:
    return _Dispatcher()


@pytest.fixture
def session(make_review: ReviewFactory, dispatcher: _Dispatcher) -> ReviewSession:
    s = ReviewSession(dispatch_commentary=dispatcher)
    s.load(make_review(10))
    return s


class TestNavigation:
    def test_load_starts_before_first_move(self, session: ReviewSession) -> None:
        assert session.pointer == -1
        assert session.at_start
        assert session.current_move() is None
        assert session.current_annotation() is None
        assert session.current_arrows() == []
        assert session.current_position_string() == STARTING_FEN

    def test_prev_at_start_stays(self, session: ReviewSession) -> None:
        for _ in range(5):
            session.prev()
        assert session.pointer == -1

    def test_next_at_end_stays(self, session: ReviewSession) -> None:
        session.last()
        for _ in range(5):
            session.next()
        assert session.pointer == 9
        assert session.at_end

    def test_jump_to_clamps(self, session: ReviewSession) -> None:
        session.jump_to(42)
        assert session.pointer == 9
        session.jump_to(-7)
        assert session.pointer == -1

    def test_first_and_last(self, session: ReviewSession) -> None:
        session.last()
        assert session.pointer == 9
        session.first()
        assert session.pointer == -1

    def test_jump_to_key_moment(self, session: ReviewSession) -> None:
        session.jump_to_key_moment(1)
        assert session.pointer == 9
        assert session.active_key_moment() is session.key_moments()[1]
        session.jump_to_key_moment(5)
        assert session.pointer == 9

    def test_load_resets_pointer(
        self,
        session: ReviewSession,
        make_review: ReviewFactory,
    ) -> None:
        session.jump_to(5)
        session.load(make_review(3))
        assert session.pointer == -1
        assert session.move_count == 3

    def test_effective_moves_bump_generation(self, session: ReviewSession) -> None:
        gen = session.generation
        session.prev()  # already at start: no change
        assert session.generation == gen
        session.next()
        assert session.generation == gen + 1

    def test_on_changed_fires_only_on_change(self, make_review: ReviewFactory) -> None:
        calls: list[int] = []
        s = ReviewSession(on_changed=lambda: calls.append(1))
        s.load(make_review(2))
        s.prev()
        s.next()
        assert len(calls) == 2

    def test_session_is_weak_referenceable(self, session: ReviewSession) -> None:
        # Qt signal connections to bound methods hold weak references
        ref = weakref.ref(session)
        assert ref() is session


class TestKeys:
    def test_keys_map_to_navigation(self, session: ReviewSession) -> None:
        assert session.handle_key(NavKey.RIGHT)
        assert session.pointer == 0
        session.handle_key(NavKey.END)
        assert session.pointer == 9
        session.handle_key(NavKey.LEFT)
        assert session.pointer == 8
        session.handle_key(NavKey.HOME)
        assert session.pointer == -1

    def test_keys_without_review_are_ignored(self) -> None:
        s = ReviewSession()
        assert s.handle_key(NavKey.RIGHT) is False
        assert s.pointer == -1

    def test_navigation_on_empty_review(self, make_review: ReviewFactory) -> None:
        s = ReviewSession()
        s.load(make_review(0))
        s.next()
        s.last()
        assert s.pointer == -1


class TestDerivedQueries:
    def test_annotation_reflects_current_move(self, session: ReviewSession) -> None:
        session.jump_to(7)
        annotation = session.current_annotation()
        move = session.review.moves[7]  # type: ignore[union-attr]
        assert annotation is not None
        assert annotation.classification is move.classification
        assert annotation.san == move.san
        assert annotation.move_number == move.move_number

    def test_position_string_follows_pointer(self, session: ReviewSession) -> None:
        session.jump_to(0)
        assert session.current_position_string() == session.review.moves[0].fen_after  # type: ignore[union-attr]
        assert session.current_grid() == decode_placement(session.current_position_string())

    def test_arrows_include_best_move_when_different(self, session: ReviewSession) -> None:
        session.jump_to(3)  # Nc6, inaccuracy, best d2-d4
        arrows = session.current_arrows()
        assert arrows[0] == Arrow(parse_square("b8"), parse_square("c6"), "#facc15")
        assert arrows[1] == Arrow(parse_square("d2"), parse_square("d4"), BEST_MOVE_ARROW_COLOR)

    def test_best_arrow_omitted_when_move_was_best(
        self,
        review_document: Callable[..., dict[str, object]],
    ) -> None:
        doc = review_document(1)
        moves = doc["moves"]
        assert isinstance(moves, list)
        moves[0]["best_from"], moves[0]["best_to"] = "e2", "e4"
        s = ReviewSession()
        s.load(review_from_dict(doc))
        s.next()
        assert len(s.current_arrows()) == 1
        assert s.current_last_move() == (parse_square("e2"), parse_square("e4"))

    def test_eval_pass_throughs(self, session: ReviewSession) -> None:
        assert session.fill_percent() == 50.0
        assert session.format_magnitude() == "0.0"
        session.jump_to(1)
        score = session.current_eval()
        assert score is not None and score < 0
        assert session.fill_percent() < 50.0
        assert session.fill_percent(flipped=True) > 50.0

    def test_badge_and_progress(self, session: ReviewSession) -> None:
        assert session.current_badge() is None
        assert session.progress_percent() == 0.0
        session.jump_to(1)
        badge = session.current_badge()
        assert badge is not None
        assert badge.move_text == "1... e5"
        assert session.progress_percent() == pytest.approx(20.0)


class TestCommentary:
    def test_request_at_start_is_noop(
        self,
        session: ReviewSession,
        dispatcher: _Dispatcher,
    ) -> None:
        assert session.request_commentary() is False
        assert dispatcher.requests == []

    def test_request_carries_move_details(
        self,
        session: ReviewSession,
        dispatcher: _Dispatcher,
    ) -> None:
        session.jump_to(3)
        assert session.request_commentary() is True

        (request,) = dispatcher.requests
        assert request.generation == session.generation
        assert request.move_index == 3
        assert request.played_san == "Nc6"
        assert request.best_san == "d4"
        assert request.classification is MoveClassification.INACCURACY
        assert session.commentary.pending

    def test_single_flight(self, session: ReviewSession, dispatcher: _Dispatcher) -> None:
        session.jump_to(2)
        session.request_commentary()
        assert session.request_commentary() is False
        assert len(dispatcher.requests) == 1

    def test_result_opens_dialog(self, session: ReviewSession, dispatcher: _Dispatcher) -> None:
        session.jump_to(2)
        session.request_commentary()
        assert session.apply_commentary(dispatcher.requests[0].generation, "Nice")

        state = session.commentary
        assert state.text == "Nice"
        assert state.dialog_open
        assert not state.pending
        assert not state.is_error

    def test_failure_is_prefixed(self, session: ReviewSession, dispatcher: _Dispatcher) -> None:
        session.jump_to(2)
        session.request_commentary()
        session.apply_commentary_failure(dispatcher.requests[0].generation, "timeout")

        state = session.commentary
        assert state.text == f"{ERROR_PREFIX}timeout"
        assert state.is_error
        assert state.dialog_open
        assert not state.pending

    def test_stale_result_is_dropped(
        self,
        session: ReviewSession,
        dispatcher: _Dispatcher,
    ) -> None:
        session.jump_to(7)
        session.request_commentary()
        stale = dispatcher.requests[0].generation

        session.next()
        assert session.pointer == 8
        assert not session.commentary.pending
        assert session.commentary.text is None

        assert session.apply_commentary(stale, "late reply") is False
        assert session.commentary.text is None

        # A fresh request is allowed right away
        assert session.request_commentary() is True
        assert dispatcher.requests[1].move_index == 8

    def test_navigation_clears_shown_commentary(
        self,
        session: ReviewSession,
        dispatcher: _Dispatcher,
    ) -> None:
        session.jump_to(7)
        session.request_commentary()
        session.apply_commentary(dispatcher.requests[0].generation, "text")
        session.next()
        assert session.commentary.text is None
        assert not session.commentary.dialog_open

    def test_close_keeps_text(self, session: ReviewSession, dispatcher: _Dispatcher) -> None:
        session.jump_to(1)
        session.request_commentary()
        session.apply_commentary(dispatcher.requests[0].generation, "text")
        session.close_commentary()
        assert session.commentary.text == "text"
        assert not session.commentary.dialog_open

    def test_without_dispatcher_reports_error(self, make_review: ReviewFactory) -> None:
        s = ReviewSession()
        s.load(make_review(2))
        s.next()
        assert s.request_commentary() is True
        assert s.commentary.is_error
        assert s.commentary.text is not None
        assert s.commentary.text.startswith(ERROR_PREFIX)

    def test_dispatch_exception_becomes_error(self, make_review: ReviewFactory) -> None:
        def boom(_request: CommentaryRequest) -> None:
            raise RuntimeError("worker gone")

        s = ReviewSession(dispatch_commentary=boom)
        s.load(make_review(2))
        s.next()
        s.request_commentary()
        assert s.commentary.text == f"{ERROR_PREFIX}worker gone"
        assert not s.commentary.pending
