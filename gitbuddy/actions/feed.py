"""Feed: collect TODO/FIXME markers and debug prints as pet food."""

from __future__ import annotations

from typing import Iterable, List

from ..collectors.repo_observer import RepoObserver
from ..constants import DEBUG_PRINT_PATTERNS, DEFAULT_MARKER_PATTERNS, SCAN_LIMITS, XP_REWARDS
from ..core.models import FeedIssue, FeedResult, MarkedLine
from ..core.utils import safe_truncate_str


def classify_marker(content: str) -> str:
    return "fixme" if "FIXME" in content.upper() else "todo"


def _to_issue(kind: str, match: MarkedLine) -> FeedIssue:
    return FeedIssue(
        kind=kind,
        file=match.file,
        line=match.line,
        content=safe_truncate_str(match.content, SCAN_LIMITS["issue_content_length"]),
    )


def feed_xp(issue_count: int) -> int:
    return XP_REWARDS["feed_base"] + issue_count * XP_REWARDS["feed_per_issue"]


def find_code_issues(
    observer: RepoObserver,
    marker_patterns: Iterable[str] = DEFAULT_MARKER_PATTERNS,
) -> FeedResult:
    """Find markers and debug prints, capped, and price them in XP.

    Args:
        observer: Repository observer
        marker_patterns: Comment markers to look for

    Returns:
        FeedResult with at most ``SCAN_LIMITS['feed_issues']`` issues
    """
    issues: List[FeedIssue] = [
        _to_issue(classify_marker(match.content), match)
        for match in observer.find_marked_comments(marker_patterns)
    ]
    issues.extend(
        _to_issue("debug", match) for match in observer.find_marked_comments(DEBUG_PRINT_PATTERNS)
    )

    limited = issues[: SCAN_LIMITS["feed_issues"]]
    return FeedResult(issues=limited, xp_gained=feed_xp(len(limited)))


__all__ = ["classify_marker", "feed_xp", "find_code_issues"]
