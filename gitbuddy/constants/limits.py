"""Timeouts, scan limits and display limits."""

from __future__ import annotations

# =============================================================================
# Git Scanning
# =============================================================================

GIT_TIMEOUTS = {
    'default': 5,  # seconds, overridable through scanner.timeout_seconds
    'diff': 10,
}

SCAN_LIMITS = {
    'streak_history': 100,  # Most recent commits inspected for the streak
    'marker_matches': 10,  # Lines kept per marker search
    'feed_issues': 8,  # Issues shown on the feed screen
    'issue_content_length': 60,
    'staged_diff_lines': 200,
    'commit_body_files': 5,
}

DEFAULT_MARKER_PATTERNS = ['TODO', 'FIXME']
DEBUG_PRINT_PATTERNS = ['console.log', 'print(']

SOURCE_GLOBS = ['*.py', '*.ts', '*.js', '*.tsx', '*.jsx', '*.rb', '*.go']

README_NAMES = ('README.md', 'README.rst', 'README.txt', 'README', 'readme.md', 'Readme.md')

# =============================================================================
# Session
# =============================================================================

IDLE_SLEEP_SECONDS = 60
FOCUS_DURATIONS = (15, 25, 45, 60)
DEFAULT_FOCUS_MINUTES = 25
HEATMAP_WEEKS = 12
