"""Fail-soft repository introspection built on the git command runner."""

from __future__ import annotations

import logging
import re
from collections import Counter
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from ..constants import (
    DEBUG_PRINT_PATTERNS,
    DEFAULT_MARKER_PATTERNS,
    GIT_TIMEOUTS,
    README_NAMES,
    SCAN_LIMITS,
    SOURCE_GLOBS,
)
from ..core import utils
from ..core.models import (
    FunStats,
    MarkedLine,
    RepoData,
    RepoHealthInput,
    RepoSnapshot,
    StagedDiffSummary,
    StagedFileChange,
)
from ..exceptions import GitCommandError, GitCommandTimeoutError
from .git_runner import GitCommandRunner

logger = logging.getLogger(__name__)

TEST_DIR_PATTERN = re.compile(r"/tests?/.*\.(js|ts|jsx|tsx|py|rb)$")
PYTHON_TEST_PATTERN = re.compile(r"(^|/)test_[^/]+\.py$")
SHORTSTAT_PATTERN = re.compile(
    r"(?:(\d+) files? changed)?(?:, )?(?:(\d+) insertions?\(\+\))?(?:, )?(?:(\d+) deletions?\(-\))?"
)


def is_test_file(path: str) -> bool:
    """Check whether a tracked path looks like a test file."""
    return (
        ".test." in path
        or ".spec." in path
        or "__tests__" in path
        or bool(TEST_DIR_PATTERN.search(path))
        or bool(PYTHON_TEST_PATTERN.search(path))
    )


class RepoObserver:
    """Query a git working tree for health signals.

    Every public method absorbs :class:`GitCommandError` and returns an empty
    or zero default, so callers never see git failures.
    """

    def __init__(self, runner: Optional[GitCommandRunner] = None) -> None:
        """Initialize the observer.

        Args:
            runner: Command runner (defaults to one rooted at the current directory)
        """
        self.runner = runner or GitCommandRunner()

    @property
    def root(self) -> Path:
        return self.runner.cwd

    def _git(self, args: Sequence[str], default: str = "", timeout: Optional[int] = None) -> str:
        try:
            return self.runner.run(args, timeout=timeout)
        except GitCommandError as exc:
            logger.debug("git %s failed: %s", " ".join(args), exc)
            return default

    @staticmethod
    def _lines(output: str) -> List[str]:
        return [line for line in output.splitlines() if line.strip()]

    # ------------------------------------------------------------------
    # Repository presence and commit history
    # ------------------------------------------------------------------

    def is_git_repo(self) -> bool:
        return self._git(["rev-parse", "--is-inside-work-tree"]) == "true"

    def commit_count_since(self, since: datetime) -> int:
        """Count commits made at or after ``since``."""
        output = self._git(["log", f"--since={since.isoformat(timespec='seconds')}", "--format=%H"])
        return len(self._lines(output))

    def weekly_commits(self) -> int:
        return self.commit_count_since(utils.now() - timedelta(days=7))

    def commits_today(self) -> int:
        midnight = datetime.combine(utils.now().date(), datetime.min.time())
        return self.commit_count_since(midnight)

    def total_commits(self) -> int:
        output = self._git(["rev-list", "--count", "HEAD"], default="0")
        try:
            return int(output)
        except ValueError:
            return 0

    def last_commit_hash(self) -> str:
        return self._git(["rev-parse", "HEAD"])

    def last_commit_date(self) -> Optional[datetime]:
        """Return the committer date of HEAD, or ``None`` without commits."""
        output = self._git(["log", "-1", "--format=%cI"])
        if not output:
            return None
        try:
            return utils.parse_timestamp(output)
        except ValueError:
            logger.debug("Unparseable commit date: %r", output)
            return None

    def hours_since_last_commit(self) -> Optional[float]:
        last = self.last_commit_date()
        if last is None:
            return None
        return max(0.0, utils.hours_between(last, utils.now()))

    def commit_dates(self, limit: int = SCAN_LIMITS["streak_history"]) -> List[date]:
        """Distinct commit days (newest first) among the last ``limit`` commits."""
        output = self._git(["log", "--format=%ad", "--date=short", f"-{limit}"])
        days: List[date] = []
        for line in self._lines(output):
            try:
                day = date.fromisoformat(line.strip())
            except ValueError:
                continue
            if day not in days:
                days.append(day)
        return days

    def streak_days(self) -> int:
        """Count consecutive commit days ending today.

        A streak whose latest day is yesterday is still alive, so a user who
        has not committed yet today keeps it.
        """
        days = set(self.commit_dates())
        if not days:
            return 0

        cursor = utils.now().date()
        if cursor not in days:
            cursor -= timedelta(days=1)

        streak = 0
        while cursor in days:
            streak += 1
            cursor -= timedelta(days=1)
        return streak

    def daily_commit_counts(self, days: int) -> Dict[date, int]:
        """Commits per calendar day over the last ``days`` days."""
        start = utils.now().date() - timedelta(days=days - 1)
        output = self._git(
            ["log", f"--since={start.isoformat()}T00:00:00", "--format=%ad", "--date=short"]
        )
        counts: Counter[date] = Counter()
        for line in self._lines(output):
            try:
                day = date.fromisoformat(line.strip())
            except ValueError:
                continue
            if day >= start:
                counts[day] += 1
        return dict(counts)

    # ------------------------------------------------------------------
    # Working tree and tracked files
    # ------------------------------------------------------------------

    def dirty_file_count(self) -> int:
        return len(self._lines(self._git(["status", "--porcelain"])))

    def tracked_files(self) -> List[str]:
        return self._lines(self._git(["ls-files"]))

    def test_file_count(self) -> int:
        return sum(1 for path in self.tracked_files() if is_test_file(path))

    def has_test_files(self) -> bool:
        return self.test_file_count() > 0

    def has_readme(self) -> bool:
        return any((self.root / name).is_file() for name in README_NAMES)

    def _grep(self, args: Sequence[str]) -> Optional[str]:
        """Run ``git grep``; ``None`` when the search itself failed.

        git grep exits 1 when nothing matches, which is an empty result.
        """
        try:
            return self.runner.run(args)
        except GitCommandTimeoutError as exc:
            logger.debug("git %s timed out: %s", " ".join(args), exc)
            return None
        except GitCommandError as exc:
            if exc.returncode == 1:
                return ""
            logger.debug("git %s failed: %s", " ".join(args), exc)
            return None

    def _search_markers(
        self, patterns: Iterable[str], globs: Sequence[str], limit: Optional[int]
    ) -> Optional[List[MarkedLine]]:
        args: List[str] = ["grep", "-n", "-F"]
        for pattern in patterns:
            args.extend(["-e", pattern])
        args.append("--")
        args.extend(globs)

        output = self._grep(args)
        if output is None:
            return None

        matches: List[MarkedLine] = []
        for line in self._lines(output):
            parts = line.split(":", 2)
            if len(parts) != 3:
                continue
            file, line_number, content = parts
            try:
                number = int(line_number)
            except ValueError:
                continue
            matches.append(MarkedLine(file=file, line=number, content=content.strip()))
            if limit is not None and len(matches) >= limit:
                break
        return matches

    def find_marked_comments(
        self,
        patterns: Iterable[str] = DEFAULT_MARKER_PATTERNS,
        globs: Sequence[str] = SOURCE_GLOBS,
        limit: Optional[int] = SCAN_LIMITS["marker_matches"],
    ) -> List[MarkedLine]:
        """Find tracked lines containing any of ``patterns``.

        Args:
            patterns: Fixed strings to search for (e.g. ``TODO``)
            globs: Pathspecs restricting the search
            limit: Maximum number of matches returned; ``None`` for all

        Returns:
            Matches in ``git grep`` order, empty if the search failed
        """
        return self._search_markers(patterns, globs, limit) or []

    def count_markers(self, patterns: Iterable[str], globs: Sequence[str] = SOURCE_GLOBS) -> Optional[int]:
        """Number of marked lines, or ``None`` when the search failed."""
        matches = self._search_markers(patterns, globs, limit=None)
        return None if matches is None else len(matches)

    # ------------------------------------------------------------------
    # Staged changes and commits
    # ------------------------------------------------------------------

    def staged_diff_summary(self) -> StagedDiffSummary:
        """Summarise ``git diff --cached`` for commit message suggestions."""
        files: List[StagedFileChange] = []
        for line in self._lines(self._git(["diff", "--cached", "--numstat"])):
            parts = line.split("\t")
            if len(parts) < 3:
                continue
            added, deleted, path = parts[0], parts[1], parts[-1]
            files.append(
                StagedFileChange(
                    file=path,
                    # binary files report "-"
                    additions=int(added) if added.isdigit() else 0,
                    deletions=int(deleted) if deleted.isdigit() else 0,
                )
            )

        if not files:
            return StagedDiffSummary()

        diff_text = self._git(["diff", "--cached"], timeout=GIT_TIMEOUTS["diff"])
        diff_lines = diff_text.splitlines()[: SCAN_LIMITS["staged_diff_lines"]]
        return StagedDiffSummary(files=files, diff_text="\n".join(diff_lines))

    def commit(self, message: str) -> bool:
        """Create a commit from the staged changes."""
        try:
            self.runner.run(["commit", "-m", message])
        except GitCommandError as exc:
            logger.warning("git commit failed: %s", exc)
            return False
        return True

    def run_readonly(self, args: Sequence[str]) -> Optional[str]:
        """Run a read-only git command for a trick, ``None`` on failure."""
        try:
            return self.runner.run(args)
        except GitCommandError as exc:
            logger.debug("Trick command failed: %s", exc)
            return None

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def snapshot(self) -> RepoSnapshot:
        return RepoSnapshot(
            last_commit_hash=self.last_commit_hash(),
            total_commits=self.total_commits(),
        )

    def diff_stat_since(self, commit_hash: str) -> tuple[int, int, int]:
        """Files changed, insertions and deletions between ``commit_hash`` and HEAD."""
        if not commit_hash:
            return (0, 0, 0)
        output = self._git(["diff", "--shortstat", f"{commit_hash}..HEAD"], timeout=GIT_TIMEOUTS["diff"])
        match = SHORTSTAT_PATTERN.search(output.strip())
        if not output or match is None:
            return (0, 0, 0)
        files, insertions, deletions = (int(group or 0) for group in match.groups())
        return (files, insertions, deletions)

    def collect_health_input(self) -> RepoHealthInput:
        """Gather every signal the health scorer needs.

        Directories outside a work tree, and repositories without a single
        commit, produce the not-a-repo record.
        """
        if not self.is_git_repo():
            return RepoHealthInput.not_a_repo()

        total = self.total_commits()
        if total == 0:
            logger.info("Repository at %s has no commits yet", self.root)
            return RepoHealthInput.not_a_repo()

        test_count = self.test_file_count()
        last_commit = self.last_commit_date()
        hours = None
        if last_commit is not None:
            hours = max(0.0, utils.hours_between(last_commit, utils.now()))

        return RepoHealthInput(
            is_git_repo=True,
            weekly_commits=self.weekly_commits(),
            streak=self.streak_days(),
            dirty_files=self.dirty_file_count(),
            has_tests=test_count > 0,
            test_file_count=test_count,
            has_readme=self.has_readme(),
            hours_since_last_commit=hours,
            total_commits=total,
            last_commit_date=last_commit,
        )

    def collect_repo_data(self, marker_patterns: Iterable[str] = DEFAULT_MARKER_PATTERNS) -> RepoData:
        """Gather the facts achievement and challenge rules look at."""
        moment = utils.now()
        return RepoData(
            total_commits=self.total_commits(),
            streak=self.streak_days(),
            commits_today=self.commits_today(),
            dirty_files=self.dirty_file_count(),
            debug_prints=self.count_markers(DEBUG_PRINT_PATTERNS),
            todos=self.count_markers(marker_patterns),
            is_weekend=utils.is_weekend(moment.date()),
            hour=moment.hour,
        )

    def fun_stats(self) -> FunStats:
        """Repository age, dominant file type and commit message length."""
        stats = FunStats(total_commits=self.total_commits())

        first = self._git(["log", "--reverse", "--format=%cI"])
        first_lines = self._lines(first)
        if first_lines:
            try:
                created = utils.parse_timestamp(first_lines[0])
                stats.repo_age_days = max(0, (utils.now() - created).days)
            except ValueError:
                logger.debug("Unparseable first commit date: %r", first_lines[0])

        extensions: Counter[str] = Counter(
            Path(path).suffix for path in self.tracked_files() if Path(path).suffix
        )
        if extensions:
            stats.top_extension, stats.top_extension_count = extensions.most_common(1)[0]

        subjects = self._lines(self._git(["log", "--format=%s", "-50"]))
        if subjects:
            stats.avg_message_length = round(sum(len(s) for s in subjects) / len(subjects))

        return stats


__all__ = ["RepoObserver", "is_test_file"]
