"""Weighted health scoring of repository observations."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..constants import (
    COMMIT_FREQUENCY_TIERS,
    COMMIT_STREAK_TIERS,
    HEALTH_CHECK_NAMES,
    HEALTH_CHECK_WEIGHTS,
    MAX_HEALTH_SCORE,
    MIN_HEALTH_SCORE,
    PRESENCE_SCORES,
    RECENT_ACTIVITY_FLOOR,
    RECENT_ACTIVITY_TIERS,
    WORKING_TREE_FLOOR,
    WORKING_TREE_TIERS,
)
from ..core.models import HealthCheck, HealthStatus, RepoHealth, RepoHealthInput

Tier = Tuple[str, int]


def _tier_at_least(value: float, tiers: Sequence[Tuple[int, str, int]]) -> Tier:
    """Pick the first tier whose minimum ``value`` reaches."""
    for minimum, status, score in tiers:
        if value >= minimum:
            return status, score
    _, status, score = tiers[-1]
    return status, score


def _tier_below(value: float, tiers: Sequence[Tuple[int, str, int]], floor: Tier) -> Tier:
    """Pick the first tier whose exclusive maximum is above ``value``."""
    for maximum, status, score in tiers:
        if value < maximum:
            return status, score
    return floor


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


class HealthScorer:
    """Turn a :class:`RepoHealthInput` into a weighted 0-100 report."""

    @staticmethod
    def _check(key: str, tier: Tier, value: str) -> HealthCheck:
        status, tier_score = tier
        weight = HEALTH_CHECK_WEIGHTS[key]
        return HealthCheck(
            name=HEALTH_CHECK_NAMES[key],
            status=HealthStatus(status),
            value=value,
            weight=weight,
            score=weight * tier_score,
        )

    @staticmethod
    def commit_frequency(weekly_commits: int) -> HealthCheck:
        return HealthScorer._check(
            "commit_frequency",
            _tier_at_least(weekly_commits, COMMIT_FREQUENCY_TIERS),
            f"{_plural(weekly_commits, 'commit')} this week",
        )

    @staticmethod
    def commit_streak(streak: int) -> HealthCheck:
        return HealthScorer._check(
            "commit_streak",
            _tier_at_least(streak, COMMIT_STREAK_TIERS),
            _plural(streak, "day"),
        )

    @staticmethod
    def working_tree(dirty_files: int) -> HealthCheck:
        value = "clean" if dirty_files == 0 else f"{_plural(dirty_files, 'changed file')}"
        return HealthScorer._check(
            "working_tree",
            _tier_below(dirty_files, WORKING_TREE_TIERS, WORKING_TREE_FLOOR),
            value,
        )

    @staticmethod
    def test_files(has_tests: bool, test_file_count: int = 0) -> HealthCheck:
        if has_tests:
            value = _plural(test_file_count, "test file") if test_file_count else "present"
        else:
            value = "no tests found"
        return HealthScorer._check("test_files", PRESENCE_SCORES[has_tests], value)

    @staticmethod
    def readme(has_readme: bool) -> HealthCheck:
        return HealthScorer._check(
            "readme", PRESENCE_SCORES[has_readme], "present" if has_readme else "missing"
        )

    @staticmethod
    def recent_activity(hours_since_last_commit: Optional[float]) -> HealthCheck:
        if hours_since_last_commit is None:
            return HealthScorer._check("recent_activity", RECENT_ACTIVITY_FLOOR, "no commits")

        hours = max(0.0, hours_since_last_commit)
        if hours < 24:
            value = "today"
        else:
            value = f"{_plural(int(hours // 24), 'day')} ago"
        return HealthScorer._check(
            "recent_activity",
            _tier_below(hours, RECENT_ACTIVITY_TIERS, RECENT_ACTIVITY_FLOOR),
            value,
        )

    @staticmethod
    def scan(health_input: RepoHealthInput) -> RepoHealth:
        """Score a repository.

        Each check contributes ``weight * tier_score``; the total is the
        rounded sum clamped to 0-100. A not-a-repo input yields the sentinel
        report with no checks.

        Args:
            health_input: Raw observations for one scan

        Returns:
            RepoHealth report
        """
        if not health_input.is_git_repo:
            return RepoHealth.not_a_repo()

        checks: List[HealthCheck] = [
            HealthScorer.commit_frequency(health_input.weekly_commits),
            HealthScorer.commit_streak(health_input.streak),
            HealthScorer.working_tree(health_input.dirty_files),
            HealthScorer.test_files(health_input.has_tests, health_input.test_file_count),
            HealthScorer.readme(health_input.has_readme),
            HealthScorer.recent_activity(health_input.hours_since_last_commit),
        ]
        total = round(sum(check.score for check in checks))

        return RepoHealth(
            is_git_repo=True,
            checks=checks,
            total_score=max(MIN_HEALTH_SCORE, min(MAX_HEALTH_SCORE, total)),
            commit_count=health_input.total_commits,
            last_commit_date=health_input.last_commit_date,
            streak=health_input.streak,
            dirty_files=health_input.dirty_files,
        )


def hp_from_health(health: RepoHealth) -> int:
    """HP equals the health score, clamped to 0-100."""
    return max(MIN_HEALTH_SCORE, min(MAX_HEALTH_SCORE, int(health.total_score)))


__all__ = ["HealthScorer", "hp_from_health"]
