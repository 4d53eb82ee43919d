"""Constants and configuration values for GitBuddy.

This package organizes constants into logical modules:
- scoring: Health check weights and tier tables
- progression: Level thresholds, XP rewards, HP decay
- limits: Git timeouts, scan limits, session defaults
- messages: Pet dialogue and user-facing messages
- ui_styles: Console theme and rendering glyphs
- sprites: ASCII pet art per level and mood
"""

from __future__ import annotations

from gitbuddy.constants.limits import (
    DEBUG_PRINT_PATTERNS,
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_MARKER_PATTERNS,
    FOCUS_DURATIONS,
    GIT_TIMEOUTS,
    HEATMAP_WEEKS,
    IDLE_SLEEP_SECONDS,
    README_NAMES,
    SCAN_LIMITS,
    SOURCE_GLOBS,
)
from gitbuddy.constants.messages import (
    ACHIEVEMENT_UNLOCKED_MESSAGE,
    BELLY_RUB_MESSAGES,
    CHALLENGE_COMPLETE_MESSAGE,
    COMMIT_FAILED_MESSAGE,
    COMMIT_SUCCESS_MESSAGE,
    CORRUPT_STATE_MESSAGE,
    EMPTY_BOWL_MESSAGE,
    FEED_MESSAGE,
    FOCUS_MESSAGES,
    FUN_FACT_FALLBACK,
    FUN_FACT_TEMPLATES,
    LEVEL_UP_MESSAGE,
    LOCKED_FEATURE_MESSAGE,
    MOOD_MESSAGES,
    NO_PET_MESSAGE,
    NO_STAGED_CHANGES_MESSAGE,
    NOT_A_REPO_MESSAGE,
    WELCOME_BACK_MESSAGES,
)
from gitbuddy.constants.progression import (
    DEFAULT_HP,
    FEATURE_UNLOCK_LEVELS,
    HP_DECAY,
    HP_FLOOR,
    LEVEL_DESCRIPTIONS,
    LEVEL_THRESHOLDS,
    LEVEL_TITLES,
    MAX_LEVEL,
    XP_REWARDS,
)
from gitbuddy.constants.scoring import (
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
from gitbuddy.constants.sprites import PET_SPRITES, SPRITE_EYE_OVERRIDES, SPRITE_FEATURES
from gitbuddy.constants.ui_styles import (
    BAR_CONFIG,
    CONSOLE_THEME,
    HEATMAP_GLYPHS,
    MOOD_STYLES,
    STATUS_ICONS,
    STATUS_STYLES,
)

__all__ = [
    # limits
    "DEBUG_PRINT_PATTERNS",
    "DEFAULT_FOCUS_MINUTES",
    "DEFAULT_MARKER_PATTERNS",
    "FOCUS_DURATIONS",
    "GIT_TIMEOUTS",
    "HEATMAP_WEEKS",
    "IDLE_SLEEP_SECONDS",
    "README_NAMES",
    "SCAN_LIMITS",
    "SOURCE_GLOBS",
    # messages
    "ACHIEVEMENT_UNLOCKED_MESSAGE",
    "BELLY_RUB_MESSAGES",
    "CHALLENGE_COMPLETE_MESSAGE",
    "COMMIT_FAILED_MESSAGE",
    "COMMIT_SUCCESS_MESSAGE",
    "CORRUPT_STATE_MESSAGE",
    "EMPTY_BOWL_MESSAGE",
    "FEED_MESSAGE",
    "FOCUS_MESSAGES",
    "FUN_FACT_FALLBACK",
    "FUN_FACT_TEMPLATES",
    "LEVEL_UP_MESSAGE",
    "LOCKED_FEATURE_MESSAGE",
    "MOOD_MESSAGES",
    "NO_PET_MESSAGE",
    "NO_STAGED_CHANGES_MESSAGE",
    "NOT_A_REPO_MESSAGE",
    "WELCOME_BACK_MESSAGES",
    # progression
    "DEFAULT_HP",
    "FEATURE_UNLOCK_LEVELS",
    "HP_DECAY",
    "HP_FLOOR",
    "LEVEL_DESCRIPTIONS",
    "LEVEL_THRESHOLDS",
    "LEVEL_TITLES",
    "MAX_LEVEL",
    "XP_REWARDS",
    # scoring
    "COMMIT_FREQUENCY_TIERS",
    "COMMIT_STREAK_TIERS",
    "HEALTH_CHECK_NAMES",
    "HEALTH_CHECK_WEIGHTS",
    "MAX_HEALTH_SCORE",
    "MIN_HEALTH_SCORE",
    "PRESENCE_SCORES",
    "RECENT_ACTIVITY_FLOOR",
    "RECENT_ACTIVITY_TIERS",
    "WORKING_TREE_FLOOR",
    "WORKING_TREE_TIERS",
    # sprites
    "PET_SPRITES",
    "SPRITE_EYE_OVERRIDES",
    "SPRITE_FEATURES",
    # ui_styles
    "BAR_CONFIG",
    "CONSOLE_THEME",
    "HEATMAP_GLYPHS",
    "MOOD_STYLES",
    "STATUS_ICONS",
    "STATUS_STYLES",
]
