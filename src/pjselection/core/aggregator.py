"""Reduce raw per-question scores to category sub-scores."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Mapping

from ..rubric import CATEGORY_QUESTIONS


@dataclass(frozen=True, slots=True)
class SubScores:
    """Category averages on the 0-4 rubric scale."""

    principal: float
    debate: float
    support: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


def aggregate(raw_scores: Mapping[int, float] | None) -> SubScores:
    """Average each category's question scores.

    Unanswered questions count as 0, so a partially scored candidate still
    gets a (low) aggregate instead of an error.
    """
    scores = raw_scores or {}

    def get(question_id: int) -> float:
        value = scores.get(question_id)
        if value is None:
            # JSON round-trips turn integer keys into strings.
            value = scores.get(str(question_id))  # type: ignore[call-overload]
        return float(value or 0)

    def mean(category: str) -> float:
        question_ids = CATEGORY_QUESTIONS[category]  # type: ignore[index]
        return sum(get(question_id) for question_id in question_ids) / len(question_ids)

    return SubScores(
        principal=mean("principal"),
        debate=mean("debate"),
        support=mean("support"),
    )
