"""Coach commentary providers."""

from chessreview.coach.prompt import build_coach_prompt
from chessreview.coach.provider import (
    CachingCommentaryProvider,
    CliCommentaryProvider,
    CommentaryError,
    CommentaryProvider,
)

__all__ = [
    "CachingCommentaryProvider",
    "CliCommentaryProvider",
    "CommentaryError",
    "CommentaryProvider",
    "build_coach_prompt",
]
