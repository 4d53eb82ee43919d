"""Mood derived from HP and idle time."""
from __future__ import annotations

from typing import Optional

from ..constants import IDLE_SLEEP_SECONDS, MOOD_MESSAGES
from ..core.models import Mood, MoodState

# (minimum hp, mood), checked top to bottom
MOOD_TIERS = [
    (90, Mood.EXCITED),
    (70, Mood.HAPPY),
    (50, Mood.NEUTRAL),
    (25, Mood.SAD),
]


def calculate_mood(
    hp: float,
    is_idle: bool = False,
    idle_seconds: float = 0,
    idle_threshold: int = IDLE_SLEEP_SECONDS,
) -> Mood:
    """Map HP and idleness to a mood.

    Sleeping wins over every HP tier once the pet has been idle long enough.
    Threshold values belong to the higher tier.

    Args:
        hp: Current HP
        is_idle: Whether the user has been inactive
        idle_seconds: How long the user has been inactive
        idle_threshold: Idle seconds before the pet falls asleep

    Returns:
        Mood
    """
    if is_idle and idle_seconds >= idle_threshold:
        return Mood.SLEEPING

    for minimum, mood in MOOD_TIERS:
        if hp >= minimum:
            return mood
    return Mood.SICK


def pick_message(mood: Mood, seed: int = 0) -> str:
    """Deterministically pick a dialogue line for ``mood``."""
    messages = MOOD_MESSAGES[mood.value]
    return messages[seed % len(messages)]


def mood_state(
    hp: int,
    is_idle: bool = False,
    idle_seconds: float = 0,
    idle_threshold: int = IDLE_SLEEP_SECONDS,
    seed: Optional[int] = None,
) -> MoodState:
    """Mood together with HP and a line of dialogue."""
    mood = calculate_mood(hp, is_idle, idle_seconds, idle_threshold)
    message = pick_message(mood, hp if seed is None else seed)
    return MoodState(mood=mood, hp=hp, message=message)


__all__ = ["MOOD_TIERS", "calculate_mood", "mood_state", "pick_message"]
