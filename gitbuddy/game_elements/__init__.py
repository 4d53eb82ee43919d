"""Game rules for the pet.

This package provides:
- Level and XP calculation with HP decay
- Mood selection
- Achievement and daily challenge catalogs (imported from their modules)
"""
from __future__ import annotations

from .level_calculator import LevelCalculator, XpGrant
from .mood import calculate_mood, mood_state

__all__ = ["LevelCalculator", "XpGrant", "calculate_mood", "mood_state"]
