"""Versioned schema of the persisted pet record."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..constants import DEFAULT_HP
from ..core import utils
from ..game_elements.level_calculator import LevelCalculator

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 2


class BestSession(BaseModel):
    """Most productive focus session so far."""

    commits: int = 0
    lines: int = 0
    minutes: int = 0
    date: str = ""


class FocusStats(BaseModel):
    """Aggregate focus session counters."""

    total: int = Field(default=0, ge=0)
    total_minutes: int = Field(default=0, ge=0)
    best_session: Optional[BestSession] = None
    today_sessions: int = Field(default=0, ge=0)
    last_session_date: str = ""


class DailyCounters(BaseModel):
    """Counters scoped to one calendar day."""

    date: str = ""
    feeds: int = 0
    plays: int = 0
    focus_sessions: int = 0
    smart_commits: int = 0
    todos_fixed: int = 0
    commits: int = 0
    # TODO count seen at the first scan of the day; fixes are measured against it
    todo_baseline: Optional[int] = None

    @classmethod
    def for_day(cls, day: str) -> "DailyCounters":
        return cls(date=day)


class DailyChallengeState(BaseModel):
    """The challenge selected for one day and its progress."""

    date: str
    challenge_id: str
    completed: bool = False
    progress: int = Field(default=0, ge=0)


class PetState(BaseModel):
    """Persisted pet record.

    ``level`` is always recomputed from ``xp`` on validation, and
    ``achievements`` keeps first-seen order without duplicates.
    """

    schema_version: int = SCHEMA_VERSION
    name: str
    xp: int = Field(default=0, ge=0)
    level: int = 1
    hp: int = Field(default=DEFAULT_HP, ge=0, le=100)
    last_visit: datetime = Field(default_factory=utils.now)
    created_at: datetime = Field(default_factory=utils.now)
    total_feeds: int = 0
    total_plays: int = 0
    total_scans: int = 0
    total_smart_commits: int = 0
    clean_tree_count: int = 0
    longest_streak: int = 0
    challenges_completed: int = 0
    achievements: List[str] = Field(default_factory=list)
    focus_sessions: FocusStats = Field(default_factory=FocusStats)
    daily_counters: DailyCounters = Field(default_factory=DailyCounters)
    daily_challenge: Optional[DailyChallengeState] = None
    actions_this_session: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that the pet has a name."""
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()

    @field_validator("last_visit", "created_at")
    @classmethod
    def to_local_naive(cls, v: datetime) -> datetime:
        """Store timestamps as naive local time."""
        if v.tzinfo is not None:
            return v.astimezone().replace(tzinfo=None)
        return v

    @field_validator("achievements", "actions_this_session")
    @classmethod
    def dedupe(cls, v: List[str]) -> List[str]:
        """Drop repeated ids while keeping order."""
        return list(dict.fromkeys(v))

    @model_validator(mode="after")
    def sync_level(self) -> "PetState":
        """Keep the level derived from XP."""
        self.level = LevelCalculator.level_from_xp(self.xp)
        return self


# -----------------------------------------------------------------------------
# Migrations
# -----------------------------------------------------------------------------

LEGACY_KEYS = {
    "lastVisit": "last_visit",
    "createdAt": "created_at",
    "totalFeeds": "total_feeds",
    "totalPlays": "total_plays",
    "totalScans": "total_scans",
    "totalSmartCommits": "total_smart_commits",
    "cleanTreeCount": "clean_tree_count",
    "longestStreak": "longest_streak",
    "focusSessions": "focus_sessions",
    "dailyCounters": "daily_counters",
    "dailyChallenge": "daily_challenge",
    "actionsThisSession": "actions_this_session",
}

LEGACY_NESTED_KEYS = {
    "totalMinutes": "total_minutes",
    "bestSession": "best_session",
    "todaySessions": "today_sessions",
    "lastSessionDate": "last_session_date",
    "focusSessions": "focus_sessions",
    "smartCommits": "smart_commits",
    "todosFixed": "todos_fixed",
    "challengeId": "challenge_id",
}


def _rename(data: Dict[str, Any], mapping: Dict[str, str]) -> Dict[str, Any]:
    return {mapping.get(key, key): value for key, value in data.items()}


def _migrate_v1(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Convert the camelCase record written by the first releases."""
    data = _rename(raw, LEGACY_KEYS)
    for section in ("focus_sessions", "daily_counters", "daily_challenge"):
        if isinstance(data.get(section), dict):
            data[section] = _rename(data[section], LEGACY_NESTED_KEYS)
    # Session actions were saved by mistake in v1.
    data["actions_this_session"] = []
    data["challenges_completed"] = data.get("challenges_completed", 0)
    data["schema_version"] = 2
    return data


MIGRATIONS: Dict[int, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
    1: _migrate_v1,
}


def detect_version(raw: Dict[str, Any]) -> int:
    """Records without ``schema_version`` predate versioning (v1)."""
    version = raw.get("schema_version", 1)
    return version if isinstance(version, int) else 1


def migrate(raw: Dict[str, Any]) -> PetState:
    """Upgrade a raw record to the current schema and validate it.

    Args:
        raw: Decoded JSON object

    Returns:
        Validated current-version PetState

    Raises:
        ValueError: If the record is from a newer release or fails validation
    """
    version = detect_version(raw)
    if version > SCHEMA_VERSION:
        raise ValueError(f"State schema v{version} is newer than supported v{SCHEMA_VERSION}")

    data = dict(raw)
    while version < SCHEMA_VERSION:
        logger.info("Migrating pet state from schema v%d", version)
        data = MIGRATIONS[version](data)
        version = detect_version(data)

    return PetState.model_validate(data)


__all__ = [
    "BestSession",
    "DailyChallengeState",
    "DailyCounters",
    "FocusStats",
    "PetState",
    "SCHEMA_VERSION",
    "migrate",
]
