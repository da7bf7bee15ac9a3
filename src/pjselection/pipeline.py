"""Selection workflow: load state, apply one change, persist, report."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pendulum
import structlog

from . import __version__
from .core import EvaluationEngine, RankingTable, move_entry, validate_setup
from .rubric import QUESTION_IDS, SCORE_RANGE
from .schemas import Candidate, PersistedState, StatusType
from .storage import StateStore


class FinalOrderInvalidError(ValueError):
    """Raised when a report is requested for a final order with violations."""

    def __init__(self, violations: list[str]):
        super().__init__("Final order is invalid")
        self.violations = violations

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Final order is invalid: {self.violations}"


class OutputWriter:
    """Persist selection reports."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        entry = {"timestamp": pendulum.now().to_iso8601_string(), **record}
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(entry, ensure_ascii=False))
            handle.write("\n")


class SelectionPipeline:
    """Stateful seam around the pure evaluation engine."""

    def __init__(
        self,
        *,
        engine: EvaluationEngine,
        store: StateStore,
        writer: OutputWriter | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self._engine = engine
        self._store = store
        self._writer = writer or OutputWriter()
        self._audit = audit_logger
        self._logger = structlog.get_logger(__name__)

    def load(self) -> PersistedState:
        return self._store.load()

    def configure_project(
        self,
        *,
        name: str | None = None,
        school: str | None = None,
        strategy: str | None = None,
    ) -> PersistedState:
        state = self._store.load()
        updates = {
            key: value
            for key, value in {"name": name, "school": school, "strategy": strategy}.items()
            if value is not None
        }
        state.project = state.project.model_copy(update=updates)
        self._store.save(state)
        return state

    def rename_candidate(self, candidate_id: str, name: str) -> PersistedState:
        return self._update_candidate(candidate_id, name=name)

    def set_notes(self, candidate_id: str, notes: str) -> PersistedState:
        return self._update_candidate(candidate_id, notes=notes)

    def set_status(self, candidate_id: str, status: StatusType) -> PersistedState:
        return self._update_candidate(candidate_id, status=status)

    def complete_interview(self, candidate_id: str) -> PersistedState:
        """Mark an interview done; every question must have a score first."""
        candidate = self._store.load().candidate(candidate_id)
        if not candidate.is_complete():
            missing = [qid for qid in QUESTION_IDS if qid not in candidate.scores]
            raise ValueError(
                f"Interview for {candidate_id} is incomplete, unscored questions: {missing}"
            )
        return self.set_status(candidate_id, "done")

    def record_score(self, candidate_id: str, question_id: int, score: int) -> PersistedState:
        if question_id not in QUESTION_IDS:
            raise ValueError(f"Unknown question id: {question_id}")
        if score not in SCORE_RANGE:
            raise ValueError(
                f"Score must be between {SCORE_RANGE.start} and {SCORE_RANGE.stop - 1}, got {score}"
            )
        state = self._store.load()
        candidate = state.candidate(candidate_id)
        return self._update_candidate(
            candidate_id,
            state=state,
            scores={**candidate.scores, question_id: score},
        )

    def setup_violations(self) -> list[str]:
        return validate_setup(self._store.load().candidates)

    def rankings(self) -> dict[str, RankingTable]:
        return self._engine.rankings(self._store.load().candidates)

    def suggest_final_order(self) -> PersistedState:
        state = self._store.load()
        state.final_order = self._engine.plan(state.candidates)
        self._store.save(state)
        self._audit_event(
            "final_order.suggested",
            order=[entry.model_dump(by_alias=True) for entry in state.final_order],
        )
        return state

    def move(self, index: int, direction: int) -> PersistedState:
        state = self._store.load()
        state.final_order = move_entry(state.final_order, index, direction)
        self._store.save(state)
        self._audit_event("final_order.moved", index=index, direction=direction)
        return state

    def validate(self) -> list[str]:
        state = self._store.load()
        return self._engine.validate(state.final_order, state.candidates)

    def write_report(self, output_path: Path) -> dict[str, Any]:
        state = self._store.load()
        violations = self._engine.validate(state.final_order, state.candidates)
        if violations:
            self._logger.warning("report.blocked", violations=violations)
            raise FinalOrderInvalidError(violations)

        rows = [
            {
                "position": position,
                "id": entry.id,
                "name": scored.name,
                "role": entry.role_assigned,
                "profiles": scored.profiles.as_dict(),
                "sub_scores": scored.sub.as_dict() if scored.sub else None,
            }
            for position, (entry, scored) in enumerate(
                self._engine.resolve(state.final_order, state.candidates), start=1
            )
        ]
        payload = {
            "metadata": {
                "project": state.project.model_dump(),
                "candidate_count": len(rows),
                "violations": violations,
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "final_order": rows,
        }
        self._writer.write(output_path, payload)
        self._logger.info("report.written", path=str(output_path), candidate_count=len(rows))
        return payload

    def reset(self) -> PersistedState:
        self._store.reset()
        self._audit_event("state.reset")
        return self._store.load()

    def _update_candidate(
        self,
        candidate_id: str,
        *,
        state: PersistedState | None = None,
        **changes: Any,
    ) -> PersistedState:
        state = state or self._store.load()
        current = state.candidate(candidate_id)
        updated = Candidate.model_validate({**current.model_dump(), **changes})
        state.candidates = [
            updated if candidate.id == candidate_id else candidate
            for candidate in state.candidates
        ]
        self._store.save(state)
        self._logger.info("candidate.updated", candidate_id=candidate_id, fields=sorted(changes))
        return state

    def _audit_event(self, event: str, **fields: Any) -> None:
        if self._audit:
            self._audit.append({"event": event, **fields})
