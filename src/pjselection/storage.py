"""Versioned JSON state store with clean reset on mismatch or corruption."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from .rubric import CANDIDATE_COUNT
from .schemas import (
    Candidate,
    FinalOrderEntry,
    PersistedState,
    ProjectInfo,
    default_candidates,
)

DATA_VERSION = 2
DEFAULT_STATE_PATH = Path("pj_app_data_v2.json")


def default_state() -> PersistedState:
    return PersistedState(
        version=DATA_VERSION,
        project=ProjectInfo(),
        candidates=default_candidates(),
        final_order=[],
    )


class StateStore:
    """Load and save the project state as a single JSON document.

    Older versions are never migrated: a version mismatch or a structurally
    invalid document discards the stored data and yields the default state.
    """

    def __init__(self, path: str | Path = DEFAULT_STATE_PATH):
        self._path = Path(path)
        self._logger = structlog.get_logger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> PersistedState:
        if not self._path.exists():
            return default_state()

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            self._logger.warning("state.load_failed", path=str(self._path), error=str(exc))
            return default_state()

        if not isinstance(data, dict):
            self._logger.warning("state.load_failed", path=str(self._path), error="not an object")
            return default_state()

        if data.get("version") != DATA_VERSION:
            self._logger.warning(
                "state.version_mismatch",
                path=str(self._path),
                found=data.get("version"),
                expected=DATA_VERSION,
            )
            self.reset()
            return default_state()

        try:
            candidates = self._load_candidates(data.get("candidates"))
            project = ProjectInfo.model_validate(
                {**ProjectInfo().model_dump(), **(data.get("project") or {})}
            )
        except (TypeError, ValidationError) as exc:
            self._logger.warning("state.invalid", path=str(self._path), error=str(exc))
            return default_state()

        final_order = self._load_final_order(data.get("finalOrder"), candidates)
        return PersistedState(
            version=DATA_VERSION,
            project=project,
            candidates=candidates,
            final_order=final_order,
        )

    def save(self, state: PersistedState) -> None:
        payload = state.model_dump(mode="json", by_alias=True)
        payload["version"] = DATA_VERSION
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

    def reset(self) -> None:
        self._path.unlink(missing_ok=True)

    @staticmethod
    def _load_candidates(raw: Any) -> list[Candidate]:
        if not isinstance(raw, list) or len(raw) != CANDIDATE_COUNT:
            return default_candidates()
        candidates: list[Candidate] = []
        for idx, record in enumerate(raw):
            record = record if isinstance(record, dict) else {}
            candidates.append(
                Candidate(
                    id=record.get("id") or f"c-{idx}",
                    name=record.get("name") or "Sem Nome",
                    scores=record.get("scores") or {},
                    notes=record.get("notes") or "",
                    status=record.get("status") or "pending",
                )
            )
        return candidates

    @staticmethod
    def _load_final_order(raw: Any, candidates: list[Candidate]) -> list[FinalOrderEntry]:
        if not isinstance(raw, list) or len(raw) != CANDIDATE_COUNT:
            return []
        try:
            entries = [FinalOrderEntry.model_validate(item) for item in raw]
        except ValidationError:
            return []
        valid_ids = {candidate.id for candidate in candidates}
        order_ids = {entry.id for entry in entries}
        if len(order_ids) != CANDIDATE_COUNT or not order_ids <= valid_ids:
            return []
        return entries
