"""Greedy role assignment producing the suggested final order."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import structlog

from ..rubric import ALTERNATE_ROLE, CANDIDATE_COUNT, OVERALL_KEY, ROLE_PRIORITY
from ..schemas import FinalOrderEntry
from .ranking import RankingEngine, ScoredCandidate


class IncompleteDatasetError(ValueError):
    """Raised when the number of completed interviews is not exactly the required count."""

    code = "incomplete-dataset"

    def __init__(self, *, required: int, actual: int):
        super().__init__(
            f"Dataset incomplete: {actual} completed interviews, exactly {required} required"
        )
        self.required = required
        self.actual = actual

    @property
    def details(self) -> dict[str, Any]:
        return {"required": self.required, "actual": self.actual}


class AssignmentPlanner:
    """Assign each role to the best remaining candidate in priority order.

    Earlier roles pick first; a candidate taken for one role is no longer
    available to later roles. Whoever is left becomes an alternate, ranked
    by the overall score.
    """

    def __init__(
        self,
        *,
        ranking: RankingEngine | None = None,
        roles: Sequence[str] = ROLE_PRIORITY,
        required: int = CANDIDATE_COUNT,
    ) -> None:
        self._ranking = ranking or RankingEngine()
        self._roles = tuple(roles)
        self._required = required
        self._logger = structlog.get_logger(__name__)

    def plan(self, candidates: Iterable[ScoredCandidate]) -> list[FinalOrderEntry]:
        pool = [candidate for candidate in candidates if candidate.status == "done"]
        if len(pool) != self._required:
            raise IncompleteDatasetError(required=self._required, actual=len(pool))

        entries: list[FinalOrderEntry] = []
        for role in self._roles:
            if not pool:
                break
            best, *pool = self._ranking.rank(pool, role)
            entries.append(FinalOrderEntry(id=best.id, role_assigned=role))
            self._logger.debug(
                "assignment.role_selected",
                role=role,
                candidate_id=best.id,
                score=best.profiles.get(role),
            )

        for candidate in self._ranking.rank(pool, OVERALL_KEY):
            entries.append(FinalOrderEntry(id=candidate.id, role_assigned=ALTERNATE_ROLE))

        self._logger.info(
            "assignment.planned",
            order=[entry.id for entry in entries],
            roles=[entry.role_assigned for entry in entries],
        )
        return entries


def plan_assignment(candidates: Iterable[ScoredCandidate]) -> list[FinalOrderEntry]:
    """Plan with the default ranking thresholds and role priority."""
    return AssignmentPlanner().plan(candidates)
