"""Key-moment timeline layout."""

from __future__ import annotations

from dataclasses import dataclass

from chessreview.review.models import KeyMoment, MoveClassification, Severity


@dataclass(slots=True, frozen=True)
class MomentMarker:
    moment_index: int
    move_index: int
    position_percent: float
    color: str
    active: bool
    tooltip: str


def marker_color(moment: KeyMoment) -> str:
    if moment.severity is Severity.CRITICAL:
        return "#ef4444"
    if moment.severity is Severity.MAJOR:
        return "#fb923c"
    if moment.classification is MoveClassification.BRILLIANT:
        return "#22d3ee"
    return "#facc15"


def marker_position(move_index: int, move_count: int) -> float:
    """Horizontal position in percent of the timeline width."""
    return move_index / max(1, move_count - 1) * 100.0


def progress_percent(pointer: int, move_count: int) -> float:
    """Share of the game already stepped through; 0 at the start position."""
    if move_count <= 0:
        return 0.0
    return (pointer + 1) / move_count * 100.0


def layout_markers(
    moments: tuple[KeyMoment, ...],
    move_count: int,
    pointer: int,
) -> list[MomentMarker]:
    return [
        MomentMarker(
            moment_index=idx,
            move_index=moment.move_index,
            position_percent=marker_position(moment.move_index, move_count),
            color=marker_color(moment),
            active=moment.move_index == pointer,
            tooltip=moment.description,
        )
        for idx, moment in enumerate(moments)
    ]
