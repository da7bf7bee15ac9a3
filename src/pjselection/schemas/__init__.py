"""Pydantic schema definitions for persisted project data."""

from __future__ import annotations

from .candidate import (
    Candidate,
    FinalOrderEntry,
    PersistedState,
    ProjectInfo,
    StatusType,
    default_candidates,
)

__all__ = [
    "Candidate",
    "FinalOrderEntry",
    "PersistedState",
    "ProjectInfo",
    "StatusType",
    "default_candidates",
]
