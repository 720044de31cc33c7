"""Game review APIs: models, loading, rendering helpers and the session."""

from chessreview.review.annotation import (
    BEST_MOVE_ARROW_COLOR,
    BadgeContent,
    ClassificationStyle,
    arrow_color_for,
    compose_badge,
    is_favorable,
    style_for,
)
from chessreview.review.arrows import ArrowLayer, ArrowPolygon, layout_arrows
from chessreview.review.evaluation import (
    EvalBarLayout,
    bar_fill_percent,
    format_magnitude,
    layout_eval_bar,
    to_fill_percent,
)
from chessreview.review.loader import ReviewFormatError, load_review, review_from_dict
from chessreview.review.models import (
    Arrow,
    GameReview,
    GameSummary,
    KeyMoment,
    MoveAnnotation,
    MoveClassification,
    MoveRecord,
    Severity,
)
from chessreview.review.session import (
    CommentaryRequest,
    CommentaryState,
    NavKey,
    ReviewSession,
)

__all__ = [
    "Arrow",
    "ArrowLayer",
    "ArrowPolygon",
    "BEST_MOVE_ARROW_COLOR",
    "BadgeContent",
    "ClassificationStyle",
    "CommentaryRequest",
    "CommentaryState",
    "EvalBarLayout",
    "GameReview",
    "GameSummary",
    "KeyMoment",
    "MoveAnnotation",
    "MoveClassification",
    "MoveRecord",
    "NavKey",
    "ReviewFormatError",
    "ReviewSession",
    "Severity",
    "arrow_color_for",
    "bar_fill_percent",
    "compose_badge",
    "format_magnitude",
    "is_favorable",
    "layout_arrows",
    "layout_eval_bar",
    "load_review",
    "review_from_dict",
    "style_for",
    "to_fill_percent",
]
