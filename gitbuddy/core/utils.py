"""Time and text helpers shared across GitBuddy."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

SECONDS_PER_HOUR = 3600
HOURS_PER_DAY = 24


def now() -> datetime:
    """Return the current local time.

    Wrapped so tests can monkeypatch a fixed clock.
    """
    return datetime.now()


def today_iso(moment: Optional[datetime] = None) -> str:
    """Return the local calendar day as ``YYYY-MM-DD``."""
    return (moment or now()).date().isoformat()


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``.

    Aware values are converted to naive local time so they compare with
    :func:`now`.
    """
    if value.endswith("Z"):
        value = value.replace("Z", "+00:00")
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def hours_between(start: datetime, end: datetime) -> float:
    """Hours elapsed from ``start`` to ``end`` (negative if reversed)."""
    return (end - start).total_seconds() / SECONDS_PER_HOUR


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def format_time_ago(moment: Optional[datetime], reference: Optional[datetime] = None) -> str:
    """Format a timestamp as a short relative phrase.

    Args:
        moment: Timestamp to describe
        reference: Time to measure from (defaults to now)

    Returns:
        Human-readable relative time (e.g. "3h ago", "2d ago", "never")
    """
    if moment is None:
        return "never"

    hours = hours_between(moment, reference or now())
    if hours < 1:
        return "just now"
    if hours < HOURS_PER_DAY:
        return f"{int(hours)}h ago"
    days = int(hours // HOURS_PER_DAY)
    if days == 1:
        return "yesterday"
    return f"{days}d ago"


def safe_truncate_str(text: str, max_length: int) -> str:
    """Truncate text to ``max_length`` characters with an ellipsis."""
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[: max_length - 3] + "..."
