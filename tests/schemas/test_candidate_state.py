from __future__ import annotations

import pytest
from pydantic import ValidationError

from pjselection.schemas import (
    Candidate,
    FinalOrderEntry,
    PersistedState,
    ProjectInfo,
    default_candidates,
)


def test_default_candidates_are_placeholders():
    candidates = default_candidates()

    assert [c.id for c in candidates] == [f"c-{idx}" for idx in range(10)]
    assert candidates[0].name == "Candidato 1"
    assert candidates[9].name == "Candidato 10"
    assert all(c.scores == {} and c.status == "pending" and c.notes == "" for c in candidates)


def test_candidate_scores_accept_string_keys():
    candidate = Candidate.model_validate({"id": "c-0", "scores": {"1": 3, "10": 4}})

    assert candidate.scores == {1: 3, 10: 4}
    assert candidate.is_complete() is False


def test_candidate_is_complete_with_all_questions():
    candidate = Candidate(id="c-0", scores={qid: 2 for qid in range(1, 11)})

    assert candidate.is_complete() is True


def test_candidate_rejects_unknown_status():
    with pytest.raises(ValidationError):
        Candidate(id="c-0", status="archived")  # type: ignore[arg-type]


def test_final_order_entry_uses_persisted_alias():
    entry = FinalOrderEntry.model_validate({"id": "c-3", "roleAssigned": "tecnico"})

    assert entry.role_assigned == "tecnico"
    assert entry.model_dump(by_alias=True) == {"id": "c-3", "roleAssigned": "tecnico"}
    with pytest.raises(ValidationError):
        FinalOrderEntry(id="c-3", role_assigned="presidente")  # type: ignore[arg-type]


def test_persisted_state_shape():
    state = PersistedState(
        version=2,
        candidates=default_candidates(),
        final_order=[FinalOrderEntry(id="c-0", role_assigned="portavoz")],
    )

    dumped = state.model_dump(mode="json", by_alias=True)

    assert set(dumped) == {"version", "project", "candidates", "finalOrder"}
    assert dumped["project"] == ProjectInfo().model_dump()
    assert state.candidate("c-4").name == "Candidato 5"
    with pytest.raises(KeyError):
        state.candidate("missing")
