"""Deterministic per-profile ranking of scored candidates."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Iterable

from ..rubric import OVERALL_KEY, PROFILE_KEYS
from .aggregator import SubScores
from .profiles import ProfileScores


@dataclass
class RankingConfig:
    """Comparison thresholds for ranking.

    ``epsilon`` only absorbs floating-point noise. ``tie_band`` is the width
    under which two role scores count as a practical tie and the overall
    score decides instead.
    """

    tie_band: float = 0.2
    epsilon: float = 1e-6


@dataclass(slots=True)
class ScoredCandidate:
    """Candidate view carrying its derived scores."""

    id: str
    name: str
    profiles: ProfileScores
    sub: SubScores | None = None
    status: str = "done"


@dataclass(slots=True)
class RankingTable:
    """Ranked candidates for one profile key."""

    key: str
    entries: list[ScoredCandidate] = field(default_factory=list)
    top_tie: bool = False


def collation_key(name: str) -> tuple[str, str, str]:
    """Locale-style sort key: letters first, then accents, lowercase before uppercase."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), decomposed.swapcase()


def compare_names(a: str, b: str) -> int:
    key_a, key_b = collation_key(a), collation_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


class RankingEngine:
    """Sort candidates by fitness for a profile with deterministic tie-breaks."""

    def __init__(self, *, config: RankingConfig | None = None) -> None:
        self._config = config or RankingConfig()

    @property
    def config(self) -> RankingConfig:
        return self._config

    def compare(self, a: ScoredCandidate, b: ScoredCandidate, key: str) -> int:
        """Return a negative number when ``a`` ranks ahead of ``b``."""
        epsilon = self._config.epsilon
        geral_diff = b.profiles.geral - a.profiles.geral

        if key == OVERALL_KEY:
            if abs(geral_diff) > epsilon:
                return _sign(geral_diff)
            return compare_names(a.name, b.name)

        score_a = a.profiles.get(key)
        score_b = b.profiles.get(key)

        if abs(score_a - score_b) < self._config.tie_band:
            if abs(geral_diff) > epsilon:
                return _sign(geral_diff)
            if abs(score_a - score_b) > epsilon:
                return _sign(score_b - score_a)
            return compare_names(a.name, b.name)

        return _sign(score_b - score_a)

    def rank(self, candidates: Iterable[ScoredCandidate], key: str) -> list[ScoredCandidate]:
        """Return a new list ordered best-first for ``key``."""
        if key not in PROFILE_KEYS:
            raise ValueError(f"Unknown profile key: {key!r}")
        pool = list(candidates)
        if len(pool) < 2:
            return pool
        return sorted(pool, key=cmp_to_key(lambda a, b: self.compare(a, b, key)))

    def is_practical_tie(self, a: ScoredCandidate, b: ScoredCandidate, key: str) -> bool:
        return abs(a.profiles.get(key) - b.profiles.get(key)) < self._config.tie_band

    def table(self, candidates: Iterable[ScoredCandidate], key: str) -> RankingTable:
        entries = self.rank(candidates, key)
        top_tie = len(entries) >= 2 and self.is_practical_tie(entries[0], entries[1], key)
        return RankingTable(key=key, entries=entries, top_tie=top_tie)


_DEFAULT_ENGINE = RankingEngine()


def rank(candidates: Iterable[ScoredCandidate], key: str) -> list[ScoredCandidate]:
    """Rank with the default thresholds."""
    return _DEFAULT_ENGINE.rank(candidates, key)
