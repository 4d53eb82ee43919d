from __future__ import annotations

import pytest

from gitbuddy.core.models import RepoData
from gitbuddy.exceptions import UnknownAchievementError
from gitbuddy.game_elements.achievements import (
    ACHIEVEMENTS,
    PREDICATES,
    REGISTRY,
    Achievement,
    achievement_progress,
    build_registry,
    check_achievements,
    unlocked_achievements,
)
from gitbuddy.state.schema import FocusStats, PetState


def _ids(achievements):
    return {achievement.id for achievement in achievements}


def test_registry_covers_the_whole_catalog():
    assert len(REGISTRY) == len(ACHIEVEMENTS) == 25
    assert [rule.achievement.id for rule in REGISTRY] == [a.id for a in ACHIEVEMENTS]


def test_duplicate_ids_are_rejected():
    catalog = [*ACHIEVEMENTS, Achievement("first_feed", "Again", "dup", "x")]

    with pytest.raises(UnknownAchievementError, match="Duplicate"):
        build_registry(catalog, PREDICATES)


def test_achievement_without_rule_is_rejected():
    catalog = [*ACHIEVEMENTS, Achievement("moon_landing", "Moon", "Land on the moon", "🌕")]

    with pytest.raises(UnknownAchievementError, match="moon_landing"):
        build_registry(catalog, PREDICATES)


def test_rule_without_achievement_is_rejected():
    predicates = {**PREDICATES, "ghost": lambda state, repo: True}

    with pytest.raises(UnknownAchievementError, match="ghost"):
        build_registry(ACHIEVEMENTS, predicates)


def test_fresh_pet_unlocks_nothing():
    assert check_achievements(PetState(name="Rex"), RepoData()) == []


def test_seven_day_streak_unlocks_streak_achievements_once():
    state = PetState(name="Rex")
    repo = RepoData(streak=7)

    unlocked = check_achievements(state, repo)
    assert {"streak_3", "streak_7"} <= _ids(unlocked)
    assert "streak_14" not in _ids(unlocked)

    state = state.model_copy(update={"achievements": [a.id for a in unlocked]})
    assert check_achievements(state, repo) == []


def test_already_unlocked_is_never_returned():
    state = PetState(name="Rex", total_feeds=12, achievements=["first_feed"])

    assert _ids(check_achievements(state, RepoData())) == {"feed_10"}


@pytest.mark.parametrize(
    "repo, expected",
    [
        (RepoData(hour=2), "night_owl"),
        (RepoData(hour=6), "early_bird"),
        (RepoData(is_weekend=True), "weekend_warrior"),
        (RepoData(total_commits=120), "commits_100"),
    ],
)
def test_repository_driven_achievements(repo, expected):
    assert expected in _ids(check_achievements(PetState(name="Rex"), repo))


def test_level_achievements_follow_xp():
    unlocked = _ids(check_achievements(PetState(name="Rex", xp=650), RepoData()))

    assert {"level_2", "level_3", "level_4"} <= unlocked
    assert "level_5" not in unlocked


def test_all_actions_needs_every_session_action():
    partial = PetState(name="Rex", actions_this_session=["feed", "play", "focus"])
    complete = partial.model_copy(update={"actions_this_session": ["feed", "play", "focus", "commit"]})

    assert "all_actions" not in _ids(check_achievements(partial, RepoData()))
    assert "all_actions" in _ids(check_achievements(complete, RepoData()))


def test_focus_marathon_needs_an_hour_of_focus():
    short = PetState(name="Rex", focus_sessions=FocusStats(total=2, total_minutes=45))
    long = PetState(name="Rex", focus_sessions=FocusStats.model_validate(
        {"total": 3, "total_minutes": 75, "best_session": {"commits": 2, "minutes": 30}}
    ))

    assert "focus_marathon" not in _ids(check_achievements(short, RepoData()))
    assert "focus_marathon" in _ids(check_achievements(long, RepoData()))


def test_unknown_ids_in_state_are_skipped():
    state = PetState(name="Rex", achievements=["first_feed", "retired_badge"])

    assert [a.id for a in unlocked_achievements(state)] == ["first_feed"]
    assert achievement_progress(state) == (1, 25)
