"""Manual reordering of the final list and stale-reference resolution."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..schemas import FinalOrderEntry
from .ranking import ScoredCandidate


def move_entry(
    order: Sequence[FinalOrderEntry],
    index: int,
    direction: int,
) -> list[FinalOrderEntry]:
    """Swap the entry at ``index`` with its neighbour above (-1) or below (+1)."""
    if direction not in (-1, 1):
        raise ValueError(f"direction must be -1 or 1, got {direction!r}")
    moved = list(order)
    target = index + direction
    if 0 <= index < len(moved) and 0 <= target < len(moved):
        moved[index], moved[target] = moved[target], moved[index]
    return moved


def resolve_order(
    order: Iterable[FinalOrderEntry],
    scored: Iterable[ScoredCandidate],
) -> list[tuple[FinalOrderEntry, ScoredCandidate]]:
    """Pair entries with their candidates, dropping ids that no longer resolve."""
    by_id = {candidate.id: candidate for candidate in scored}
    return [
        (entry, by_id[entry.id])
        for entry in order
        if entry.id in by_id
    ]
