"""Commentary providers: an LLM command-line tool and an in-memory cache."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from typing import Protocol

from chessreview.coach.prompt import build_coach_prompt
from chessreview.review.session import CommentaryRequest

_LOGGER = logging.getLogger(__name__)


class CommentaryError(Exception):
    """Raised when the coach could not produce a comment."""


class CommentaryProvider(Protocol):
    """Anything that turns a commentary request into coach text."""

    def comment(self, request: CommentaryRequest) -> str: ...


class CliCommentaryProvider:
    """Pipes the coaching prompt to an LLM CLI on stdin and reads stdout."""

    __slots__ = ("_argv", "_timeout_s")

    def __init__(
        self,
        command: str | Sequence[str] = "gemini",
        *,
        timeout_s: float = 60.0,
    ) -> None:
        argv = shlex.split(command) if isinstance(command, str) else list(command)
        if not argv:
            raise ValueError("Coach command must not be empty")
        self._argv = argv
        self._timeout_s = timeout_s

    @property
    def argv(self) -> list[str]:
        return list(self._argv)

    def comment(self, request: CommentaryRequest) -> str:
        prompt = build_coach_prompt(request)
        _LOGGER.debug(
            "Running %s for move %d (%s)",
            self._argv[0],
            request.move_index,
            request.played_san,
        )
        try:
            completed = subprocess.run(
                self._argv,
                input=prompt,
                capture_output=True,
                text=True,
                timeout=self._timeout_s,
                check=False,
            )
        except FileNotFoundError:
            raise CommentaryError(
                f"Coach command not found: {self._argv[0]}"
            ) from None
        except subprocess.TimeoutExpired:
            raise CommentaryError(
                f"Coach did not answer within {self._timeout_s:g}s"
            ) from None
        except OSError as exc:
            raise CommentaryError(f"Failed to run coach command: {exc}") from exc

        if completed.returncode != 0:
            detail = completed.stderr.strip() or f"exit code {completed.returncode}"
            _LOGGER.warning("Coach command failed: %s", detail)
            raise CommentaryError(f"Coach command error: {detail}")

        text = completed.stdout.strip()
        if not text:
            raise CommentaryError("Coach returned an empty response")
        return text


class CachingCommentaryProvider:
    """Remembers comments per game move.

    The key includes the position so that reviews without a game URL do not
    share entries.
    """

    __slots__ = ("_inner", "_cache")

    def __init__(self, inner: CommentaryProvider) -> None:
        self._inner = inner
        self._cache: dict[tuple[str, int, str], str] = {}

    def comment(self, request: CommentaryRequest) -> str:
        key = (request.game_url, request.move_index, request.fen_before)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        text = self._inner.comment(request)
        self._cache[key] = text
        return text

    def clear(self) -> None:
        self._cache.clear()
