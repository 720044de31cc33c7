"""Background coach commentary requests for the UI thread."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from chessreview.coach import CommentaryError, CommentaryProvider
from chessreview.review.session import CommentaryRequest


class _CommentaryCommandBus(QObject):
    fetch_requested = pyqtSignal(object)
    provider_changed = pyqtSignal(object)


class _CommentaryWorker(QObject):
    finished = pyqtSignal(int, str)  # generation, text
    failed = pyqtSignal(int, str)  # generation, message

    __slots__ = ("_provider",)

    def __init__(self, provider: CommentaryProvider) -> None:
        super().__init__()
        self._provider = provider

    @pyqtSlot(object)
    def fetch(self, request_obj: object) -> None:
        if not isinstance(request_obj, CommentaryRequest):
            self.failed.emit(-1, "Invalid commentary request")
            return
        try:
            text = self._provider.comment(request_obj)
        except CommentaryError as exc:
            self.failed.emit(request_obj.generation, str(exc))
            return
        except Exception as exc:
            self.failed.emit(request_obj.generation, f"Unexpected coach error: {exc}")
            return
        self.finished.emit(request_obj.generation, text)

    @pyqtSlot(object)
    def set_provider(self, provider: object) -> None:
        self._provider = provider  # type: ignore[assignment]


class CommentarySession:
    """Owns the worker thread that talks to the coach.

    Results are handed back tagged with the request generation; deciding
    whether a reply is still relevant is the review session's job.
    """

    __slots__ = (
        "__weakref__",
        "_on_finished",
        "_on_failed",
        "_command_bus",
        "_thread",
        "_worker",
        "_is_started",
        "_is_shutting_down",
    )

    def __init__(
        self,
        *,
        provider: CommentaryProvider,
        on_finished: Callable[[int, str], None],
        on_failed: Callable[[int, str], None],
        parent: QObject | None = None,
    ) -> None:
        self._on_finished = on_finished
        self._on_failed = on_failed

        self._command_bus = _CommentaryCommandBus(parent)
        self._thread = QThread(parent)
        self._worker = _CommentaryWorker(provider)
        self._is_started = False
        self._is_shutting_down = False

    def setup(self) -> None:
        """Start worker thread and connect cross-thread signals."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._worker.moveToThread(self._thread)
        self._command_bus.fetch_requested.connect(self._worker.fetch)
        self._command_bus.provider_changed.connect(self._worker.set_provider)
        self._worker.finished.connect(self._on_worker_finished)
        self._worker.failed.connect(self._on_worker_failed)
        self._thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Stop the worker thread; replies still in flight are dropped."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        self._thread.quit()
        self._thread.wait(2000)
        self._is_started = False

    def set_provider(self, provider: CommentaryProvider) -> None:
        """Swap the coach used for subsequent requests."""
        if self._is_started:
            self._command_bus.provider_changed.emit(provider)
        else:
            self._worker.set_provider(provider)

    def submit(self, request: CommentaryRequest) -> None:
        """Queue *request* on the worker thread."""
        if not self._is_started:
            self.setup()
        if self._is_shutting_down:
            return
        self._command_bus.fetch_requested.emit(request)

    def _on_worker_finished(self, generation: int, text: str) -> None:
        if self._is_shutting_down:
            return
        self._on_finished(generation, text)

    def _on_worker_failed(self, generation: int, message: str) -> None:
        if self._is_shutting_down:
            return
        self._on_failed(generation, message)
