"""Daily challenge catalog and progress tracking."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, List, Optional

from ..core import utils
from ..core.models import ChallengeProgress, RepoData
from ..state.schema import DailyChallengeState, PetState

Tracker = Callable[[PetState, RepoData], int]


@dataclass(frozen=True, slots=True)
class Challenge:
    """Static catalog entry; ``tracker`` measures progress toward ``goal``."""

    id: str
    name: str
    description: str
    goal: int
    xp_reward: int
    icon: str
    tracker: Tracker


CHALLENGES: List[Challenge] = [
    # Commits
    Challenge("commits_3", "Triple Threat", "Make 3 commits today", 3, 30, "📝",
              lambda state, repo: repo.commits_today),
    Challenge("commits_5", "Commit Champion", "Make 5 commits today", 5, 50, "🏆",
              lambda state, repo: repo.commits_today),
    # Cleanup
    Challenge("clean_console", "Console Cleaner", "Remove all debug print statements", 1, 25, "🧹",
              lambda state, repo: 1 if repo.debug_prints == 0 else 0),
    Challenge("fix_todos", "Todo Terminator", "Fix 3 TODOs in your code", 3, 35, "✅",
              lambda state, repo: state.daily_counters.todos_fixed),
    # Focus
    Challenge("focus_1", "Focus Finder", "Complete a focus session", 1, 25, "🍅",
              lambda state, repo: state.daily_counters.focus_sessions),
    Challenge("focus_2", "Double Focus", "Complete 2 focus sessions", 2, 45, "🍅",
              lambda state, repo: state.daily_counters.focus_sessions),
    # Smart commits
    Challenge("smart_commit_1", "Smart Starter", "Use smart commit once", 1, 20, "🐕",
              lambda state, repo: state.daily_counters.smart_commits),
    Challenge("smart_commit_3", "Smart Cookie", "Use smart commit 3 times", 3, 40, "🐕",
              lambda state, repo: state.daily_counters.smart_commits),
    # Habits
    Challenge("keep_streak", "Streak Keeper", "Maintain your commit streak", 1, 20, "🔥",
              lambda state, repo: 1 if repo.streak > 0 else 0),
    Challenge("clean_tree", "Clean Machine", "Commit all changes (clean tree)", 1, 20, "✨",
              lambda state, repo: 1 if repo.dirty_files == 0 else 0),
    Challenge("feed_play", "Pet Parent", "Feed and play with your buddy", 2, 25, "💕",
              lambda state, repo: state.daily_counters.feeds + state.daily_counters.plays),
    Challenge("early_commit", "Early Bird", "Make a commit before 9 AM", 1, 30, "🐦",
              lambda state, repo: 1 if repo.hour < 9 and repo.commits_today > 0 else 0),
]

_BY_ID: Dict[str, Challenge] = {challenge.id: challenge for challenge in CHALLENGES}


def get_challenge(challenge_id: str) -> Optional[Challenge]:
    return _BY_ID.get(challenge_id)


def challenge_for_day(day: date) -> Challenge:
    """Pick the challenge for ``day``: ``int(YYYYMMDD) % len(CHALLENGES)``."""
    seed = int(day.strftime("%Y%m%d"))
    return CHALLENGES[seed % len(CHALLENGES)]


def get_daily_challenge(state: PetState, today: Optional[date] = None) -> DailyChallengeState:
    """Return today's challenge record.

    An existing record for today is returned unchanged; otherwise a fresh
    record is built for the day's deterministic challenge.
    """
    day = today or utils.now().date()
    day_iso = day.isoformat()

    current = state.daily_challenge
    if current is not None and current.date == day_iso and get_challenge(current.challenge_id):
        return current

    return DailyChallengeState(date=day_iso, challenge_id=challenge_for_day(day).id)


def check_challenge_progress(
    state: PetState, repo_data: RepoData, today: Optional[date] = None
) -> ChallengeProgress:
    """Evaluate today's challenge.

    Progress is clamped to the goal. A completed challenge stays completed,
    and ``just_completed`` is only true on the evaluation that completes it.

    Args:
        state: Current pet state
        repo_data: Repository facts
        today: Day to evaluate (defaults to the local date)

    Returns:
        ChallengeProgress for the caller to persist
    """
    record = get_daily_challenge(state, today)
    challenge = _BY_ID[record.challenge_id]

    if record.completed:
        return ChallengeProgress(progress=record.progress, completed=True, just_completed=False)

    raw = max(0, challenge.tracker(state, repo_data))
    completed = raw >= challenge.goal
    return ChallengeProgress(
        progress=min(raw, challenge.goal),
        completed=completed,
        just_completed=completed,
    )


__all__ = [
    "CHALLENGES",
    "Challenge",
    "challenge_for_day",
    "check_challenge_progress",
    "get_challenge",
    "get_daily_challenge",
]
