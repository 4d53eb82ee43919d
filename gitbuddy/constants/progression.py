"""Level thresholds, XP rewards and HP decay constants."""

from __future__ import annotations

# =============================================================================
# Levels
# =============================================================================

# Minimum XP for levels 1..5
LEVEL_THRESHOLDS = (0, 100, 300, 600, 1000)
MAX_LEVEL = len(LEVEL_THRESHOLDS)

LEVEL_TITLES = {
    1: "Puppy",
    2: "Young Dog",
    3: "Adult Dog",
    4: "Cool Dog",
    5: "Legendary Doge",
}

LEVEL_DESCRIPTIONS = {
    1: "A tiny adorable puppy just starting out!",
    2: "Growing up! Unlocked: Play",
    3: "A mature and capable companion. Unlocked: Stats",
    4: "So cool it wears sunglasses.",
    5: "The ultimate form. Crown and sparkles!",
}

# Minimum level required for gated actions
FEATURE_UNLOCK_LEVELS = {
    'play': 2,
    'stats': 3,
}

# =============================================================================
# XP Rewards
# =============================================================================

XP_REWARDS = {
    'scan': 2,
    'feed_base': 5,
    'feed_per_issue': 2,
    'play': 3,  # belly rub
    'fetch': 10,
    'trick_success': 15,
    'trick_failure': 5,
    'smart_commit': 15,
    'focus_per_minute': 2,
    'focus_per_commit': 10,
}

# =============================================================================
# HP
# =============================================================================

DEFAULT_HP = 100
HP_FLOOR = 10
HP_DECAY = {
    'grace_hours': 24,
    'per_day': 5,
    'max_total': 30,
}
