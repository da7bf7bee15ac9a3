from __future__ import annotations

from pjselection.core import EvaluationEngine, move_entry, resolve_order
from pjselection.schemas import Candidate, FinalOrderEntry


def build_order() -> list[FinalOrderEntry]:
    return [
        FinalOrderEntry(id="a", role_assigned="portavoz"),
        FinalOrderEntry(id="b", role_assigned="debatedor"),
        FinalOrderEntry(id="c", role_assigned="suplente"),
    ]


def ids(order: list[FinalOrderEntry]) -> list[str]:
    return [entry.id for entry in order]


def test_move_up_and_down_swap_neighbours():
    order = build_order()

    assert ids(move_entry(order, 1, -1)) == ["b", "a", "c"]
    assert ids(move_entry(order, 1, 1)) == ["a", "c", "b"]
    assert ids(order) == ["a", "b", "c"]


def test_move_keeps_assigned_roles_with_entries():
    moved = move_entry(build_order(), 0, 1)

    assert moved[1].id == "a"
    assert moved[1].role_assigned == "portavoz"


def test_move_past_ends_is_noop():
    order = build_order()

    assert ids(move_entry(order, 0, -1)) == ["a", "b", "c"]
    assert ids(move_entry(order, 2, 1)) == ["a", "b", "c"]
    assert ids(move_entry(order, 7, -1)) == ["a", "b", "c"]


def test_resolve_order_drops_stale_references():
    scored = EvaluationEngine().evaluate(
        [Candidate(id="a", name="Ana"), Candidate(id="c", name="Carla")]
    )

    resolved = resolve_order(build_order(), scored)

    assert [(entry.id, candidate.name) for entry, candidate in resolved] == [
        ("a", "Ana"),
        ("c", "Carla"),
    ]
