"""Commit heatmap over the last few weeks."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional

from ..constants import HEATMAP_GLYPHS, HEATMAP_WEEKS

# (minimum commits, glyph index), checked top to bottom
INTENSITY_TIERS = [(6, 4), (4, 3), (2, 2), (1, 1)]
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(slots=True)
class Heatmap:
    """Commit counts laid out as weekday rows by week columns.

    ``rows[weekday][week]`` is ``None`` for days after ``end``.
    """

    start: date
    end: date
    rows: List[List[Optional[int]]] = field(default_factory=list)
    total: int = 0
    active_days: int = 0
    busiest_day: Optional[date] = None
    busiest_count: int = 0


def intensity(count: int) -> int:
    for minimum, level in INTENSITY_TIERS:
        if count >= minimum:
            return level
    return 0


def glyph(count: Optional[int]) -> str:
    if count is None:
        return " "
    return HEATMAP_GLYPHS[intensity(count)]


def build_heatmap(counts: Dict[date, int], end: date, weeks: int = HEATMAP_WEEKS) -> Heatmap:
    """Lay out ``counts`` in full Monday-to-Sunday weeks ending with ``end``'s week.

    Args:
        counts: Commits per day
        end: Last day to show (usually today)
        weeks: Number of week columns

    Returns:
        Heatmap
    """
    start = end - timedelta(days=end.weekday()) - timedelta(weeks=weeks - 1)
    rows: List[List[Optional[int]]] = [[] for _ in WEEKDAY_LABELS]
    heatmap = Heatmap(start=start, end=end, rows=rows)

    for week in range(weeks):
        for weekday in range(7):
            day = start + timedelta(weeks=week, days=weekday)
            if day > end:
                rows[weekday].append(None)
                continue
            count = counts.get(day, 0)
            rows[weekday].append(count)
            heatmap.total += count
            if count:
                heatmap.active_days += 1
            if count > heatmap.busiest_count:
                heatmap.busiest_day, heatmap.busiest_count = day, count

    return heatmap


def render_rows(heatmap: Heatmap) -> List[str]:
    """Plain text rows, one per weekday."""
    return [
        f"{label} " + " ".join(glyph(count) for count in row)
        for label, row in zip(WEEKDAY_LABELS, heatmap.rows)
    ]


__all__ = ["Heatmap", "build_heatmap", "glyph", "intensity", "render_rows"]
