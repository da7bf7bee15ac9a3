"""Evaluation engine tying scoring, ranking, planning and validation together."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..rubric import PROFILE_KEYS
from ..schemas import Candidate, FinalOrderEntry
from .aggregator import aggregate
from .assignment import AssignmentPlanner
from .ordering import resolve_order
from .profiles import profile
from .ranking import RankingEngine, RankingTable, ScoredCandidate
from .validator import validate_final_order


def score_candidate(candidate: Candidate) -> ScoredCandidate:
    sub = aggregate(candidate.scores)
    return ScoredCandidate(
        id=candidate.id,
        name=candidate.name,
        profiles=profile(sub),
        sub=sub,
        status=candidate.status,
    )


class EvaluationEngine:
    """Stateless facade; every call recomputes from the raw scores it is given."""

    def __init__(
        self,
        *,
        ranking: RankingEngine | None = None,
        planner: AssignmentPlanner | None = None,
    ) -> None:
        self._ranking = ranking or RankingEngine()
        self._planner = planner or AssignmentPlanner(ranking=self._ranking)

    def evaluate(self, candidates: Iterable[Candidate]) -> list[ScoredCandidate]:
        return [score_candidate(candidate) for candidate in candidates]

    def rankings(self, candidates: Iterable[Candidate]) -> dict[str, RankingTable]:
        """Rank completed candidates under every profile key."""
        done = [c for c in self.evaluate(candidates) if c.status == "done"]
        return {key: self._ranking.table(done, key) for key in PROFILE_KEYS}

    def plan(self, candidates: Iterable[Candidate]) -> list[FinalOrderEntry]:
        return self._planner.plan(self.evaluate(candidates))

    def resolve(
        self,
        order: Iterable[FinalOrderEntry],
        candidates: Iterable[Candidate],
    ) -> list[tuple[FinalOrderEntry, ScoredCandidate]]:
        return resolve_order(order, self.evaluate(candidates))

    def validate(
        self,
        order: Sequence[FinalOrderEntry],
        candidates: Sequence[Candidate],
    ) -> list[str]:
        """Validate the order as consumed, i.e. after stale entries are dropped."""
        resolved = [entry for entry, _ in self.resolve(order, candidates)]
        return validate_final_order(resolved, [c.id for c in candidates])
