"""Level, XP and HP decay calculations."""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from ..constants import (
    FEATURE_UNLOCK_LEVELS,
    HP_DECAY,
    HP_FLOOR,
    LEVEL_DESCRIPTIONS,
    LEVEL_THRESHOLDS,
    LEVEL_TITLES,
    MAX_LEVEL,
)
from ..core.models import LevelProgress
from ..exceptions import InvalidTransitionError

if TYPE_CHECKING:
    from ..state.schema import PetState


@dataclass(slots=True)
class XpGrant:
    """Result of granting XP: the new state and whether a level was gained."""

    state: "PetState"
    leveled_up: bool


class LevelCalculator:
    """Level and progression utilities."""

    @staticmethod
    def level_from_xp(xp: int) -> int:
        """Derive the level (1-5) from total XP.

        The highest threshold not above ``xp`` wins, so exactly 100 XP is
        level 2.

        Args:
            xp: Total experience points

        Returns:
            Level number
        """
        level = 1
        for index, threshold in enumerate(LEVEL_THRESHOLDS):
            if xp >= threshold:
                level = index + 1
        return level

    @staticmethod
    def add_xp(state: "PetState", amount: int) -> XpGrant:
        """Grant XP without persisting.

        Crossing several thresholds at once still reports a single level-up;
        the returned state carries the final level.

        Args:
            state: Current pet state
            amount: XP to add (zero allowed)

        Returns:
            XpGrant with the updated state copy

        Raises:
            InvalidTransitionError: If ``amount`` is negative
        """
        if amount < 0:
            raise InvalidTransitionError(f"XP grant must not be negative, got {amount}")

        old_level = LevelCalculator.level_from_xp(state.xp)
        new_xp = state.xp + amount
        new_level = LevelCalculator.level_from_xp(new_xp)
        new_state = state.model_copy(update={"xp": new_xp, "level": new_level})
        return XpGrant(state=new_state, leveled_up=new_level > old_level)

    @staticmethod
    def level_progress(xp: int) -> LevelProgress:
        """XP progress inside the current level.

        At the max level there is no next threshold, so ``maximum`` is
        ``None`` and the bar is full.
        """
        level = LevelCalculator.level_from_xp(xp)
        start = LEVEL_THRESHOLDS[level - 1]
        current = xp - start

        if level >= MAX_LEVEL:
            return LevelProgress(level=level, current=current, maximum=None, percentage=100.0)

        span = LEVEL_THRESHOLDS[level] - start
        percentage = min(100.0, current / span * 100)
        return LevelProgress(level=level, current=current, maximum=span, percentage=percentage)

    @staticmethod
    def hp_decay(last_visit: datetime, now: datetime) -> int:
        """HP lost while the user was away.

        Nothing is lost within the grace period; after it, a fixed amount per
        whole extra day, capped.

        Args:
            last_visit: Time of the previous session
            now: Current time

        Returns:
            Decay amount between 0 and the cap
        """
        hours_away = (now - last_visit).total_seconds() / 3600
        grace = HP_DECAY["grace_hours"]
        if hours_away <= grace:
            return 0

        extra_days = math.floor((hours_away - grace) / 24)
        return min(HP_DECAY["max_total"], extra_days * HP_DECAY["per_day"])

    @staticmethod
    def apply_decay(hp: int, decay: int) -> int:
        return max(HP_FLOOR, hp - decay)

    @staticmethod
    def level_title(level: int) -> str:
        return LEVEL_TITLES.get(level, LEVEL_TITLES[1])

    @staticmethod
    def level_description(level: int) -> str:
        return LEVEL_DESCRIPTIONS.get(level, "")

    @staticmethod
    def is_unlocked(feature: str, level: int) -> bool:
        """Check whether a gated feature is available at ``level``."""
        return level >= FEATURE_UNLOCK_LEVELS.get(feature, 1)

    @staticmethod
    def required_level(feature: str) -> int:
        return FEATURE_UNLOCK_LEVELS.get(feature, 1)


__all__ = ["LevelCalculator", "XpGrant"]
