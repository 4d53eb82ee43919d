"""Focus sessions measured by wall clock and repository snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..collectors.repo_observer import RepoObserver
from ..constants import FOCUS_MESSAGES, XP_REWARDS
from ..core import utils
from ..core.models import FocusResult, RepoSnapshot
from ..exceptions import InvalidTransitionError


@dataclass(slots=True)
class FocusSession:
    """A running focus session.

    Elapsed time is ``now - started_at - paused_total``, minus the current
    pause when paused, so pausing and resuming never loses or gains time.
    """

    minutes: int
    started_at: datetime
    start_snapshot: RepoSnapshot
    paused_total: timedelta = timedelta(0)
    paused_at: Optional[datetime] = None

    @classmethod
    def start(cls, minutes: int, observer: RepoObserver, now: Optional[datetime] = None) -> "FocusSession":
        """Begin a session, snapshotting the repository."""
        if minutes <= 0:
            raise InvalidTransitionError(f"Focus session length must be positive, got {minutes}")
        return cls(minutes=minutes, started_at=now or utils.now(), start_snapshot=observer.snapshot())

    @property
    def is_paused(self) -> bool:
        return self.paused_at is not None

    @property
    def planned(self) -> timedelta:
        return timedelta(minutes=self.minutes)

    def elapsed(self, now: Optional[datetime] = None) -> timedelta:
        moment = now or utils.now()
        elapsed = moment - self.started_at - self.paused_total
        if self.paused_at is not None:
            elapsed -= moment - self.paused_at
        return max(timedelta(0), elapsed)

    def remaining(self, now: Optional[datetime] = None) -> timedelta:
        return max(timedelta(0), self.planned - self.elapsed(now))

    def is_complete(self, now: Optional[datetime] = None) -> bool:
        return self.elapsed(now) >= self.planned

    def progress(self, now: Optional[datetime] = None) -> float:
        """Fraction of the planned time done, 0.0 to 1.0."""
        return min(1.0, self.elapsed(now) / self.planned)

    def pause(self, now: Optional[datetime] = None) -> None:
        if self.paused_at is None:
            self.paused_at = now or utils.now()

    def resume(self, now: Optional[datetime] = None) -> None:
        if self.paused_at is not None:
            self.paused_total += (now or utils.now()) - self.paused_at
            self.paused_at = None

    def encouragement(self, now: Optional[datetime] = None) -> str:
        """Dialogue line that changes every few minutes of focus."""
        step = int(self.elapsed(now).total_seconds() // 300)
        return FOCUS_MESSAGES[step % len(FOCUS_MESSAGES)]

    def finish(self, observer: RepoObserver, now: Optional[datetime] = None) -> FocusResult:
        """End the session and measure the work done during it.

        Args:
            observer: Repository observer for the end snapshot
            now: Optional end time

        Returns:
            FocusResult with whole minutes focused and commit statistics
        """
        minutes = int(self.elapsed(now).total_seconds() // 60)
        end_snapshot = observer.snapshot()
        commits = max(0, end_snapshot.total_commits - self.start_snapshot.total_commits)

        files_changed = lines_added = lines_removed = 0
        if commits > 0 and self.start_snapshot.last_commit_hash:
            files_changed, lines_added, lines_removed = observer.diff_stat_since(
                self.start_snapshot.last_commit_hash
            )

        return FocusResult(
            minutes=minutes,
            commits=commits,
            files_changed=files_changed,
            lines_added=lines_added,
            lines_removed=lines_removed,
        )


def focus_xp(result: FocusResult) -> int:
    return result.minutes * XP_REWARDS["focus_per_minute"] + result.commits * XP_REWARDS["focus_per_commit"]


__all__ = ["FocusSession", "focus_xp"]
