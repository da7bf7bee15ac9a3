from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from structlog.testing import capture_logs

from pjselection.schemas import FinalOrderEntry
from pjselection.storage import DATA_VERSION, StateStore, default_state


def write_state(path: Path, payload: Any) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


def build_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "version": DATA_VERSION,
        "project": {"name": "PJ Teste", "school": "Escola A"},
        "candidates": [
            {
                "id": f"c-{idx}",
                "name": f"Aluno {idx}",
                "scores": {"1": 3, "4": 2},
                "notes": "",
                "status": "done",
            }
            for idx in range(10)
        ],
        "finalOrder": [
            {"id": f"c-{idx}", "roleAssigned": "suplente"} for idx in range(10)
        ],
    }
    payload.update(overrides)
    return payload


def test_missing_file_yields_default_state(tmp_path: Path):
    store = StateStore(tmp_path / "state.json")

    assert store.load() == default_state()


def test_round_trip_preserves_state(tmp_path: Path):
    store = StateStore(tmp_path / "nested" / "state.json")
    state = default_state()
    state.candidates[0].scores = {1: 4, 10: 0}
    state.candidates[0].status = "done"
    state.final_order = [
        FinalOrderEntry(id=c.id, role_assigned="suplente") for c in state.candidates
    ]

    store.save(state)
    loaded = store.load()

    assert loaded == state
    raw = json.loads(store.path.read_text(encoding="utf-8"))
    assert raw["version"] == DATA_VERSION
    assert raw["finalOrder"][0] == {"id": "c-0", "roleAssigned": "suplente"}


def test_loads_valid_payload(tmp_path: Path):
    path = tmp_path / "state.json"
    write_state(path, build_payload())

    state = StateStore(path).load()

    assert state.project.name == "PJ Teste"
    assert state.project.strategy == "PRIORITIZE_PROFILES"
    assert state.candidates[0].scores == {1: 3, 4: 2}
    assert len(state.final_order) == 10


def test_version_mismatch_discards_data(tmp_path: Path):
    path = tmp_path / "state.json"
    write_state(path, build_payload(version=1))

    state = StateStore(path).load()

    assert state == default_state()
    assert not path.exists()


def test_corrupt_json_yields_default_state(tmp_path: Path):
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")

    with capture_logs() as logs:
        state = StateStore(path).load()

    assert state == default_state()
    assert [(log["event"], log["log_level"]) for log in logs] == [
        ("state.load_failed", "warning")
    ]


def test_non_object_document_yields_default_state(tmp_path: Path):
    path = tmp_path / "state.json"
    write_state(path, [1, 2, 3])

    with capture_logs() as logs:
        state = StateStore(path).load()

    assert state == default_state()
    assert logs[0]["log_level"] == "warning"


def test_wrong_candidate_count_resets_candidates(tmp_path: Path):
    path = tmp_path / "state.json"
    payload = build_payload()
    payload["candidates"] = payload["candidates"][:9]
    write_state(path, payload)

    state = StateStore(path).load()

    assert state.candidates[0].name == "Candidato 1"
    assert all(c.status == "pending" for c in state.candidates)
    assert state.project.name == "PJ Teste"


def test_missing_candidate_fields_are_filled(tmp_path: Path):
    path = tmp_path / "state.json"
    payload = build_payload()
    payload["candidates"][2] = {"name": ""}
    write_state(path, payload)

    state = StateStore(path).load()
    candidate = state.candidates[2]

    assert candidate.id == "c-2"
    assert candidate.name == "Sem Nome"
    assert candidate.scores == {}
    assert candidate.status == "pending"


def test_invalid_final_order_is_dropped(tmp_path: Path):
    path = tmp_path / "state.json"
    duplicated = build_payload()
    duplicated["finalOrder"][9] = {"id": "c-0", "roleAssigned": "suplente"}
    write_state(path, duplicated)
    assert StateStore(path).load().final_order == []

    unknown = build_payload()
    unknown["finalOrder"][9] = {"id": "ghost", "roleAssigned": "suplente"}
    write_state(path, unknown)
    assert StateStore(path).load().final_order == []

    short = build_payload()
    short["finalOrder"] = short["finalOrder"][:5]
    write_state(path, short)
    assert StateStore(path).load().final_order == []


def test_structurally_invalid_candidate_resets_everything(tmp_path: Path):
    path = tmp_path / "state.json"
    payload = build_payload()
    payload["candidates"][0]["status"] = "archived"
    write_state(path, payload)

    assert StateStore(path).load() == default_state()


def test_reset_removes_file(tmp_path: Path):
    store = StateStore(tmp_path / "state.json")
    store.save(default_state())

    store.reset()
    store.reset()

    assert not store.path.exists()
