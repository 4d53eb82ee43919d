from __future__ import annotations

import pytest

from gitbuddy.constants import HEALTH_CHECK_WEIGHTS
from gitbuddy.core.models import HealthStatus, RepoHealthInput
from gitbuddy.health import HealthScorer, hp_from_health


def _input(**overrides) -> RepoHealthInput:
    values = dict(
        weekly_commits=7,
        streak=7,
        dirty_files=0,
        has_tests=True,
        test_file_count=4,
        has_readme=True,
        hours_since_last_commit=2.0,
        total_commits=40,
    )
    values.update(overrides)
    return RepoHealthInput(**values)


def test_weights_sum_to_one():
    assert sum(HEALTH_CHECK_WEIGHTS.values()) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "weekly, status, points",
    [
        (12, HealthStatus.GREAT, 100),
        (7, HealthStatus.GREAT, 100),
        (6, HealthStatus.OK, 70),
        (3, HealthStatus.OK, 70),
        (2, HealthStatus.WARNING, 40),
        (1, HealthStatus.WARNING, 40),
        (0, HealthStatus.BAD, 0),
    ],
)
def test_commit_frequency_tiers(weekly, status, points):
    check = HealthScorer.commit_frequency(weekly)

    assert check.status is status
    assert check.score == pytest.approx(0.30 * points)


@pytest.mark.parametrize(
    "streak, status, points",
    [
        (30, HealthStatus.GREAT, 100),
        (7, HealthStatus.GREAT, 100),
        (6, HealthStatus.OK, 70),
        (3, HealthStatus.OK, 70),
        (2, HealthStatus.WARNING, 40),
        (1, HealthStatus.WARNING, 40),
        (0, HealthStatus.BAD, 0),
    ],
)
def test_commit_streak_tiers(streak, status, points):
    check = HealthScorer.commit_streak(streak)

    assert check.status is status
    assert check.score == pytest.approx(0.15 * points)


@pytest.mark.parametrize(
    "dirty, status",
    [
        (0, HealthStatus.GREAT),
        (4, HealthStatus.OK),
        (5, HealthStatus.WARNING),
        (9, HealthStatus.WARNING),
        (10, HealthStatus.BAD),
    ],
)
def test_working_tree_tiers(dirty, status):
    assert HealthScorer.working_tree(dirty).status is status


@pytest.mark.parametrize(
    "hours, status",
    [
        (None, HealthStatus.BAD),
        (0.0, HealthStatus.GREAT),
        (23.9, HealthStatus.GREAT),
        (24.0, HealthStatus.OK),
        (71.9, HealthStatus.OK),
        (72.0, HealthStatus.WARNING),
        (167.0, HealthStatus.WARNING),
        (168.0, HealthStatus.BAD),
    ],
)
def test_recent_activity_tiers(hours, status):
    assert HealthScorer.recent_activity(hours).status is status


def test_missing_tests_and_readme_score_nothing():
    assert HealthScorer.test_files(False).score == 0
    assert HealthScorer.readme(False).score == 0
    assert HealthScorer.readme(True).score == pytest.approx(5.0)


def test_each_check_scores_weight_times_tier():
    health = HealthScorer.scan(_input(weekly_commits=3, dirty_files=6))

    frequency = health.get_check("Commit Frequency")
    tree = health.get_check("Working Tree")
    assert frequency is not None and frequency.score == pytest.approx(0.30 * 70)
    assert tree is not None and tree.score == pytest.approx(0.20 * 30)


def test_perfect_repository_scores_100():
    health = HealthScorer.scan(_input())

    assert health.is_git_repo
    assert health.total_score == 100
    assert len(health.checks) == 6


def test_clean_tested_documented_active_repository_is_healthy():
    health = HealthScorer.scan(_input(weekly_commits=3, streak=3))

    assert health.total_score >= 80


def test_neglected_repository_scores_zero():
    health = HealthScorer.scan(
        _input(
            weekly_commits=0,
            streak=0,
            dirty_files=25,
            has_tests=False,
            has_readme=False,
            hours_since_last_commit=None,
        )
    )

    assert health.total_score == 0


@pytest.mark.parametrize("weekly", [0, 2, 5, 50])
@pytest.mark.parametrize("dirty", [0, 3, 100])
@pytest.mark.parametrize("hours", [None, 1.0, 100.0, 10_000.0])
def test_total_is_bounded(weekly, dirty, hours):
    health = HealthScorer.scan(_input(weekly_commits=weekly, dirty_files=dirty, hours_since_last_commit=hours))

    assert 0 <= health.total_score <= 100


def test_not_a_repo_yields_sentinel():
    health = HealthScorer.scan(RepoHealthInput.not_a_repo())

    assert not health.is_git_repo
    assert health.checks == []
    assert health.total_score == 0


def test_hp_follows_health_score():
    health = HealthScorer.scan(_input(weekly_commits=3, streak=3))

    assert hp_from_health(health) == health.total_score
