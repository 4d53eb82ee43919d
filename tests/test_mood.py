from __future__ import annotations

import pytest

from gitbuddy.constants import MOOD_MESSAGES
from gitbuddy.core.models import Mood
from gitbuddy.game_elements import calculate_mood, mood_state
from gitbuddy.game_elements.mood import pick_message


@pytest.mark.parametrize(
    "hp, expected",
    [
        (100, Mood.EXCITED),
        (90, Mood.EXCITED),
        (89, Mood.HAPPY),
        (70, Mood.HAPPY),
        (69, Mood.NEUTRAL),
        (50, Mood.NEUTRAL),
        (49, Mood.SAD),
        (25, Mood.SAD),
        (24, Mood.SICK),
        (0, Mood.SICK),
    ],
)
def test_mood_thresholds_belong_to_higher_tier(hp, expected):
    assert calculate_mood(hp) is expected


def test_idle_long_enough_means_sleeping_regardless_of_hp():
    assert calculate_mood(100, is_idle=True, idle_seconds=60, idle_threshold=60) is Mood.SLEEPING
    assert calculate_mood(5, is_idle=True, idle_seconds=600, idle_threshold=60) is Mood.SLEEPING


def test_short_idle_does_not_sleep():
    assert calculate_mood(95, is_idle=True, idle_seconds=59, idle_threshold=60) is Mood.EXCITED


def test_idle_seconds_without_idle_flag_is_ignored():
    assert calculate_mood(95, is_idle=False, idle_seconds=10_000) is Mood.EXCITED


def test_messages_are_deterministic_per_seed():
    first = pick_message(Mood.HAPPY, seed=3)

    assert first == pick_message(Mood.HAPPY, seed=3)
    assert first in MOOD_MESSAGES["happy"]


def test_mood_state_carries_hp_and_dialogue():
    state = mood_state(40)

    assert state.mood is Mood.SAD
    assert state.hp == 40
    assert state.message in MOOD_MESSAGES["sad"]
