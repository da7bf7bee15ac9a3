from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..rubric import CANDIDATE_COUNT, QUESTION_IDS, RoleLabel

StatusType = Literal["pending", "done"]


class Candidate(BaseModel):
    """One interviewed candidate and the raw rubric scores captured so far."""

    id: str
    name: str = ""
    scores: dict[int, int] = Field(default_factory=dict)
    notes: str = ""
    status: StatusType = "pending"

    model_config = ConfigDict(extra="ignore")

    def is_complete(self) -> bool:
        """Return True when every question has a recorded score."""
        return all(question_id in self.scores for question_id in QUESTION_IDS)


class ProjectInfo(BaseModel):
    """Project-level metadata shown alongside the final list."""

    name: str = "PJ 25/26 Literacia Financeira"
    school: str = ""
    strategy: str = "PRIORITIZE_PROFILES"

    model_config = ConfigDict(extra="ignore")


class FinalOrderEntry(BaseModel):
    """Reference to a candidate plus the role assigned in the final list."""

    id: str
    role_assigned: RoleLabel = Field(alias="roleAssigned")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class PersistedState(BaseModel):
    """Versioned snapshot exchanged with the state store."""

    version: int
    project: ProjectInfo = Field(default_factory=ProjectInfo)
    candidates: list[Candidate] = Field(default_factory=list)
    final_order: list[FinalOrderEntry] = Field(default_factory=list, alias="finalOrder")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def candidate(self, candidate_id: str) -> Candidate:
        for candidate in self.candidates:
            if candidate.id == candidate_id:
                return candidate
        raise KeyError(f"Unknown candidate: {candidate_id!r}")


def default_candidates() -> list[Candidate]:
    """Return the ten placeholder candidates of a fresh project."""
    return [
        Candidate(id=f"c-{idx}", name=f"Candidato {idx + 1}")
        for idx in range(CANDIDATE_COUNT)
    ]
