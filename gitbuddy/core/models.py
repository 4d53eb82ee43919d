"""Domain models shared across GitBuddy."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class HealthStatus(str, Enum):
    """Display tier of a single health check."""

    GREAT = "great"
    OK = "ok"
    WARNING = "warning"
    BAD = "bad"


class Mood(str, Enum):
    """Discrete display state of the pet."""

    EXCITED = "excited"
    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    SICK = "sick"
    SLEEPING = "sleeping"


@dataclass(slots=True)
class RepoHealthInput:
    """Flat record of raw repository observations for one scan."""

    is_git_repo: bool = True
    weekly_commits: int = 0
    streak: int = 0
    dirty_files: int = 0
    has_tests: bool = False
    test_file_count: int = 0
    has_readme: bool = False
    hours_since_last_commit: Optional[float] = None
    total_commits: int = 0
    last_commit_date: Optional[datetime] = None

    @classmethod
    def not_a_repo(cls) -> "RepoHealthInput":
        """Observation record used when the directory is not a repository."""

        return cls(is_git_repo=False)


@dataclass(slots=True)
class HealthCheck:
    """Result of one weighted health check."""

    name: str
    status: HealthStatus
    value: str
    weight: float
    score: float


@dataclass(slots=True)
class RepoHealth:
    """Complete repository health report."""

    is_git_repo: bool
    checks: List[HealthCheck] = field(default_factory=list)
    total_score: int = 0
    commit_count: int = 0
    last_commit_date: Optional[datetime] = None
    streak: int = 0
    dirty_files: int = 0

    @classmethod
    def not_a_repo(cls) -> "RepoHealth":
        """Sentinel report for directories outside a git work tree."""

        return cls(is_git_repo=False)

    def get_check(self, name: str) -> Optional[HealthCheck]:
        """Find a check by display name."""

        for check in self.checks:
            if check.name == name:
                return check
        return None


@dataclass(slots=True)
class MoodState:
    """Mood together with the HP it was derived from and a line of dialogue."""

    mood: Mood
    hp: int
    message: str


@dataclass(slots=True)
class LevelProgress:
    """XP progress inside the current level.

    ``maximum`` is ``None`` at the max level, where the bar is always full.
    """

    level: int
    current: int
    maximum: Optional[int]
    percentage: float

    @property
    def is_max_level(self) -> bool:
        return self.maximum is None


@dataclass(slots=True)
class RepoData:
    """Repository facts consumed by achievement and challenge rules."""

    total_commits: int = 0
    streak: int = 0
    commits_today: int = 0
    dirty_files: int = 0
    # None when the marker search failed
    debug_prints: Optional[int] = 0
    todos: Optional[int] = 0
    is_weekend: bool = False
    hour: int = 12


@dataclass(slots=True)
class ChallengeProgress:
    """Outcome of evaluating the daily challenge once."""

    progress: int
    completed: bool
    just_completed: bool


@dataclass(slots=True)
class RepoSnapshot:
    """Point-in-time repository counters used to measure focus sessions."""

    last_commit_hash: str = ""
    total_commits: int = 0


@dataclass(slots=True)
class FocusResult:
    """Work done during a finished focus session."""

    minutes: int
    commits: int = 0
    files_changed: int = 0
    lines_added: int = 0
    lines_removed: int = 0


@dataclass(slots=True)
class MarkedLine:
    """A grep hit for a marker such as TODO or FIXME."""

    file: str
    line: int
    content: str


@dataclass(slots=True)
class FeedIssue:
    """Single code issue the pet "eats" during a feed."""

    kind: str
    file: str
    line: int
    content: str


@dataclass(slots=True)
class FeedResult:
    """Issues found by the feed action and the XP they are worth."""

    issues: List[FeedIssue] = field(default_factory=list)
    xp_gained: int = 0


@dataclass(slots=True)
class StagedFileChange:
    """Per-file numstat line of the staged diff."""

    file: str
    additions: int = 0
    deletions: int = 0


@dataclass(slots=True)
class StagedDiffSummary:
    """Staged changes as reported by ``git diff --cached``."""

    files: List[StagedFileChange] = field(default_factory=list)
    diff_text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.files

    @property
    def additions(self) -> int:
        return sum(change.additions for change in self.files)

    @property
    def deletions(self) -> int:
        return sum(change.deletions for change in self.files)


@dataclass(slots=True)
class CommitSuggestion:
    """Conventional commit message proposed for the staged changes."""

    type: str
    scope: Optional[str]
    description: str
    body: List[str] = field(default_factory=list)
    files_changed: List[StagedFileChange] = field(default_factory=list)

    def format_message(self) -> str:
        """Render the suggestion as a commit message."""

        scope = f"({self.scope})" if self.scope else ""
        header = f"{self.type}{scope}: {self.description}"
        if not self.body:
            return header
        bullets = "\n".join(f"- {line}" for line in self.body)
        return f"{header}\n\n{bullets}"


@dataclass(slots=True)
class FunStats:
    """Trivia about the repository shown on the stats screen."""

    repo_age_days: int = 0
    total_commits: int = 0
    top_extension: str = "unknown"
    top_extension_count: int = 0
    avg_message_length: int = 0


@dataclass(slots=True)
class TrickResult:
    """Output of a git trick performed by the pet."""

    trick_id: str
    name: str
    output: str
    success: bool
    message: str


__all__ = [
    "ChallengeProgress",
    "CommitSuggestion",
    "FeedIssue",
    "FeedResult",
    "FocusResult",
    "FunStats",
    "HealthCheck",
    "HealthStatus",
    "LevelProgress",
    "MarkedLine",
    "Mood",
    "MoodState",
    "RepoData",
    "RepoHealth",
    "RepoHealthInput",
    "RepoSnapshot",
    "StagedDiffSummary",
    "StagedFileChange",
    "TrickResult",
]
