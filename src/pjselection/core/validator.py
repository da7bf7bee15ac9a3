"""Structural checks on the final list and on the candidate setup."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Sequence

from ..rubric import CANDIDATE_COUNT
from ..schemas import Candidate, FinalOrderEntry

_PLACEHOLDER_NAME = re.compile(r"^Candidato \d+$")


def validate_final_order(
    entries: Sequence[FinalOrderEntry],
    candidate_ids: Iterable[str] | None = None,
) -> list[str]:
    """Return human-readable violations; an empty list means the order is valid."""
    errors: list[str] = []
    if len(entries) != CANDIDATE_COUNT:
        errors.append(
            f"A lista final tem de ter exatamente {CANDIDATE_COUNT} candidatos "
            f"(tem {len(entries)})."
        )

    counts = Counter(entry.id for entry in entries)
    for candidate_id, count in counts.items():
        if count > 1:
            errors.append(f"Candidato '{candidate_id}' aparece {count} vezes na lista final.")

    if candidate_ids is not None:
        known = set(candidate_ids)
        for candidate_id in counts:
            if candidate_id not in known:
                errors.append(f"Candidato '{candidate_id}' não existe.")

    return errors


def validate_setup(candidates: Sequence[Candidate]) -> list[str]:
    """Check candidate names before interviews start."""
    errors: list[str] = []
    names = [candidate.name.strip() for candidate in candidates]

    if any(not name for name in names):
        errors.append("Todos os candidatos têm de ter nome.")

    counts = Counter(name.lower() for name in names if name)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        errors.append(f"Nomes duplicados: {', '.join(duplicates)}.")

    if any(_PLACEHOLDER_NAME.match(name) for name in names):
        errors.append("Substitua os nomes por defeito ('Candidato N') pelos nomes reais.")

    return errors
