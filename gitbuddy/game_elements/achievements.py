"""Achievement catalog and unlock rules.

Each catalog entry is paired with a predicate over ``(PetState, RepoData)``.
The registry is checked when the module is imported: every catalog id must
have exactly one predicate and no predicate may be orphaned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from ..core.models import RepoData
from ..exceptions import UnknownAchievementError

if TYPE_CHECKING:
    from ..state.schema import PetState

Predicate = Callable[["PetState", RepoData], bool]


@dataclass(frozen=True, slots=True)
class Achievement:
    """Static catalog entry."""

    id: str
    name: str
    description: str
    icon: str
    xp_reward: int = 0


@dataclass(frozen=True, slots=True)
class AchievementRule:
    """An achievement together with the condition that unlocks it."""

    achievement: Achievement
    predicate: Predicate


ACHIEVEMENTS: List[Achievement] = [
    # Getting started
    Achievement("first_feed", "First Meal", "Feed your buddy for the first time", "🍖", 10),
    Achievement("first_play", "Playtime!", "Play with your buddy for the first time", "🎾", 10),
    Achievement("first_commit_msg", "Good Boy Speaks", "Use smart commit message", "💬", 15),
    Achievement("first_focus", "Deep Focus", "Complete your first focus session", "🍅", 20),
    # Streaks
    Achievement("streak_3", "Hat Trick", "3-day commit streak", "🔥", 20),
    Achievement("streak_7", "On Fire", "7-day commit streak", "🔥", 50),
    Achievement("streak_14", "Unstoppable", "14-day commit streak", "💪", 100),
    Achievement("streak_30", "Legendary Coder", "30-day commit streak", "👑", 200),
    # Commits
    Achievement("commits_10", "Getting Started", "10 commits in this repo", "📝", 15),
    Achievement("commits_50", "Committed", "50 commits in this repo", "📝", 30),
    Achievement("commits_100", "Centurion", "100 commits in this repo", "🏛️", 50),
    Achievement("commits_500", "Commit Machine", "500 commits in this repo", "⚙️", 100),
    # Productivity
    Achievement("clean_tree_5", "Clean Freak", "Scan a clean tree 5 times", "🧹", 25),
    Achievement("focus_5", "Focus Master", "Complete 5 focus sessions", "🧘", 40),
    Achievement("focus_marathon", "Marathon", "Focus for 60 minutes in total", "🏃", 50),
    Achievement("feed_10", "Code Cleaner", "Feed your buddy 10 times", "🍖", 30),
    # Time of day
    Achievement("night_owl", "Night Owl", "Use GitBuddy after midnight", "🦉", 15),
    Achievement("early_bird", "Early Bird", "Use GitBuddy before 7 AM", "🐦", 15),
    Achievement("weekend_warrior", "Weekend Warrior", "Code on the weekend", "⚔️", 20),
    # Evolution
    Achievement("level_2", "Growing Up", "Reach Level 2", "📈", 0),
    Achievement("level_3", "Maturity", "Reach Level 3", "📈", 0),
    Achievement("level_4", "So Cool", "Reach Level 4", "😎", 0),
    Achievement("level_5", "LEGENDARY", "Reach Level 5", "👑", 0),
    # Fun
    Achievement("daily_challenge_3", "Challenger", "Complete 3 daily challenges", "🎯", 30),
    Achievement("all_actions", "Jack of All Trades", "Use Feed, Play, Focus, Commit in one session", "🃏", 40),
]

SESSION_ACTIONS = ("feed", "play", "focus", "commit")


def _streak_at_least(days: int) -> Predicate:
    return lambda state, repo: repo.streak >= days


def _commits_at_least(count: int) -> Predicate:
    return lambda state, repo: repo.total_commits >= count


def _level_at_least(level: int) -> Predicate:
    return lambda state, repo: state.level >= level


PREDICATES: Dict[str, Predicate] = {
    "first_feed": lambda state, repo: state.total_feeds >= 1,
    "first_play": lambda state, repo: state.total_plays >= 1,
    "first_commit_msg": lambda state, repo: state.total_smart_commits >= 1,
    "first_focus": lambda state, repo: state.focus_sessions.total >= 1,
    "streak_3": _streak_at_least(3),
    "streak_7": _streak_at_least(7),
    "streak_14": _streak_at_least(14),
    "streak_30": _streak_at_least(30),
    "commits_10": _commits_at_least(10),
    "commits_50": _commits_at_least(50),
    "commits_100": _commits_at_least(100),
    "commits_500": _commits_at_least(500),
    "clean_tree_5": lambda state, repo: state.clean_tree_count >= 5,
    "focus_5": lambda state, repo: state.focus_sessions.total >= 5,
    "focus_marathon": lambda state, repo: (
        state.focus_sessions.best_session is not None and state.focus_sessions.total_minutes >= 60
    ),
    "feed_10": lambda state, repo: state.total_feeds >= 10,
    "night_owl": lambda state, repo: 0 <= repo.hour < 5,
    "early_bird": lambda state, repo: 5 <= repo.hour < 7,
    "weekend_warrior": lambda state, repo: repo.is_weekend,
    "level_2": _level_at_least(2),
    "level_3": _level_at_least(3),
    "level_4": _level_at_least(4),
    "level_5": _level_at_least(5),
    "daily_challenge_3": lambda state, repo: state.challenges_completed >= 3,
    "all_actions": lambda state, repo: all(action in state.actions_this_session for action in SESSION_ACTIONS),
}


def build_registry(
    catalog: List[Achievement], predicates: Dict[str, Predicate]
) -> Tuple[AchievementRule, ...]:
    """Pair every catalog entry with its predicate.

    Raises:
        UnknownAchievementError: If an id is duplicated, lacks a predicate,
            or a predicate has no catalog entry
    """
    ids = [achievement.id for achievement in catalog]
    duplicates = sorted({achievement_id for achievement_id in ids if ids.count(achievement_id) > 1})
    if duplicates:
        raise UnknownAchievementError(f"Duplicate achievement ids: {', '.join(duplicates)}")

    missing = [achievement_id for achievement_id in ids if achievement_id not in predicates]
    if missing:
        raise UnknownAchievementError(f"Achievements without a rule: {', '.join(missing)}")

    orphaned = sorted(set(predicates) - set(ids))
    if orphaned:
        raise UnknownAchievementError(f"Rules without an achievement: {', '.join(orphaned)}")

    return tuple(AchievementRule(achievement, predicates[achievement.id]) for achievement in catalog)


REGISTRY: Tuple[AchievementRule, ...] = build_registry(ACHIEVEMENTS, PREDICATES)
_BY_ID: Dict[str, Achievement] = {rule.achievement.id: rule.achievement for rule in REGISTRY}


def check_achievements(
    state: "PetState",
    repo_data: RepoData,
    registry: Tuple[AchievementRule, ...] = REGISTRY,
) -> List[Achievement]:
    """Return achievements whose condition holds and that are not yet unlocked.

    Pure: recording the ids and granting XP is up to the caller.

    Args:
        state: Current pet state
        repo_data: Repository facts for this evaluation
        registry: Rules to evaluate, in catalog order

    Returns:
        Newly unlocked achievements in catalog order
    """
    unlocked = set(state.achievements)
    return [
        rule.achievement
        for rule in registry
        if rule.achievement.id not in unlocked and rule.predicate(state, repo_data)
    ]


def get_achievement(achievement_id: str) -> Optional[Achievement]:
    return _BY_ID.get(achievement_id)


def unlocked_achievements(state: "PetState") -> List[Achievement]:
    """Unlocked achievements in unlock order, skipping unknown ids."""
    return [_BY_ID[achievement_id] for achievement_id in state.achievements if achievement_id in _BY_ID]


def achievement_progress(state: "PetState") -> Tuple[int, int]:
    """``(unlocked, total)`` counts for the catalog."""
    return len(unlocked_achievements(state)), len(ACHIEVEMENTS)


__all__ = [
    "ACHIEVEMENTS",
    "Achievement",
    "AchievementRule",
    "REGISTRY",
    "achievement_progress",
    "build_registry",
    "check_achievements",
    "get_achievement",
    "unlocked_achievements",
]
