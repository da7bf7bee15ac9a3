"""Core evaluation engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .aggregator import SubScores, aggregate
from .assignment import AssignmentPlanner, IncompleteDatasetError, plan_assignment
from .engine import EvaluationEngine, score_candidate
from .ordering import move_entry, resolve_order
from .profiles import PROFILE_WEIGHTS, ProfileScores, profile
from .ranking import (
    RankingConfig,
    RankingEngine,
    RankingTable,
    ScoredCandidate,
    rank,
)
from .validator import validate_final_order, validate_setup

__all__ = [
    "AssignmentPlanner",
    "EvaluationEngine",
    "IncompleteDatasetError",
    "PROFILE_WEIGHTS",
    "ProfileScores",
    "RankingConfig",
    "RankingEngine",
    "RankingTable",
    "ScoredCandidate",
    "SubScores",
    "aggregate",
    "move_entry",
    "plan_assignment",
    "profile",
    "rank",
    "resolve_order",
    "score_candidate",
    "validate_final_order",
    "validate_setup",
]
