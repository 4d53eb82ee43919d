"""Health check weights and tier tables used by the health scorer."""

from __future__ import annotations

# =============================================================================
# Health Check Weights
# =============================================================================

# Fractions of the final score; must sum to 1.0
HEALTH_CHECK_WEIGHTS = {
    'commit_frequency': 0.30,
    'commit_streak': 0.15,
    'working_tree': 0.20,
    'test_files': 0.15,
    'readme': 0.05,
    'recent_activity': 0.15,
}

HEALTH_CHECK_NAMES = {
    'commit_frequency': 'Commit Frequency',
    'commit_streak': 'Commit Streak',
    'working_tree': 'Working Tree',
    'test_files': 'Test Files',
    'readme': 'README',
    'recent_activity': 'Recent Activity',
}

# =============================================================================
# Tier Tables
# =============================================================================

# (minimum value, status, tier score), checked top to bottom
COMMIT_FREQUENCY_TIERS = [
    (7, 'great', 100),
    (3, 'ok', 70),
    (1, 'warning', 40),
    (0, 'bad', 0),
]

COMMIT_STREAK_TIERS = [
    (7, 'great', 100),
    (3, 'ok', 70),
    (1, 'warning', 40),
    (0, 'bad', 0),
]

# (maximum dirty files exclusive, status, tier score)
WORKING_TREE_TIERS = [
    (1, 'great', 100),
    (5, 'ok', 60),
    (10, 'warning', 30),
]
WORKING_TREE_FLOOR = ('bad', 0)

# (maximum hours exclusive, status, tier score)
RECENT_ACTIVITY_TIERS = [
    (24, 'great', 100),
    (72, 'ok', 70),
    (168, 'warning', 40),
]
RECENT_ACTIVITY_FLOOR = ('bad', 0)

PRESENCE_SCORES = {
    True: ('great', 100),
    False: ('bad', 0),
}

MAX_HEALTH_SCORE = 100
MIN_HEALTH_SCORE = 0
