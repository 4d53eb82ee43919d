"""Persisted pet state."""

from .persistence import StateStore
from .schema import (
    SCHEMA_VERSION,
    BestSession,
    DailyChallengeState,
    DailyCounters,
    FocusStats,
    PetState,
    migrate,
)

__all__ = [
    "BestSession",
    "DailyChallengeState",
    "DailyCounters",
    "FocusStats",
    "PetState",
    "SCHEMA_VERSION",
    "StateStore",
    "migrate",
]
