"""Coaching prompt construction."""

from __future__ import annotations

from chessreview.review.models import MoveClassification
from chessreview.review.session import CommentaryRequest

_CONTEXT: dict[MoveClassification, str] = {
    MoveClassification.BLUNDER: (
        "This was a BLUNDER — a serious mistake that significantly worsens "
        "the position."
    ),
    MoveClassification.MISTAKE: (
        "This was a MISTAKE — it gives away a meaningful advantage."
    ),
    MoveClassification.INACCURACY: (
        "This was an INACCURACY — a slightly imprecise move that misses a "
        "better option."
    ),
    MoveClassification.BRILLIANT: (
        "This was a BRILLIANT move — an exceptional and hard-to-find move!"
    ),
    MoveClassification.GREAT: "This was a GREAT move — strong and well-calculated.",
}
_DEFAULT_CONTEXT = "Analyze this chess move."

_TEMPLATE = """\
You are a friendly chess coach helping a player improve. Analyze this specific moment:

Position (FEN): {fen}
Move played: {move_number}. {san} ({color})
{best_line}Classification: {classification}

{context}

Give a short, educational explanation (2-3 sentences max) in a warm coaching tone. Focus on:
- WHY the played move is {classification_lower} (what does it miss or achieve?)
- WHAT the better alternative does (if applicable)
- A practical TIP the player can remember

Keep it concise, specific to this position, and avoid generic advice. \
Do NOT include the FEN or move notation in your response — the player already \
sees those. Do NOT use markdown formatting."""


def build_coach_prompt(request: CommentaryRequest) -> str:
    best_line = f"The best move was: {request.best_san}\n" if request.best_san else ""
    return _TEMPLATE.format(
        fen=request.fen_before,
        move_number=request.move_number,
        san=request.played_san,
        color=str(request.color),
        best_line=best_line,
        classification=request.classification.value,
        context=_CONTEXT.get(request.classification, _DEFAULT_CONTEXT),
        classification_lower=request.classification.value.lower(),
    )
