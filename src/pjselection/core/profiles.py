"""Weighted role-fitness profiles derived from sub-scores."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from ..rubric import PROFILE_KEYS
from .aggregator import SubScores

# Each row sums to 1.0 so a uniform candidate keeps the same value everywhere.
PROFILE_WEIGHTS: dict[str, dict[str, float]] = {
    "portavoz": {"principal": 0.60, "debate": 0.30, "support": 0.10},
    "debatedor": {"principal": 0.30, "debate": 0.60, "support": 0.10},
    "tecnico": {"principal": 0.20, "debate": 0.40, "support": 0.40},
    "redator": {"principal": 0.25, "debate": 0.15, "support": 0.60},
    "organizacao": {"principal": 0.30, "debate": 0.15, "support": 0.55},
}


@dataclass(frozen=True, slots=True)
class ProfileScores:
    """Five role profiles plus the overall score."""

    portavoz: float
    debatedor: float
    tecnico: float
    redator: float
    organizacao: float
    geral: float

    def get(self, key: str) -> float:
        if key not in PROFILE_KEYS:
            raise ValueError(f"Unknown profile key: {key!r}")
        return getattr(self, key)

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


def profile(sub: SubScores) -> ProfileScores:
    """Apply the fixed profile weights to a set of sub-scores."""
    weighted = {
        key: (
            sub.principal * weights["principal"]
            + sub.debate * weights["debate"]
            + sub.support * weights["support"]
        )
        for key, weights in PROFILE_WEIGHTS.items()
    }
    return ProfileScores(
        **weighted,
        geral=(sub.principal + sub.debate + sub.support) / 3,
    )
