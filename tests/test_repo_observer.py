from __future__ import annotations

import subprocess
from datetime import date
from pathlib import Path

import pytest

from gitbuddy.collectors import GitCommandRunner, RepoObserver
from gitbuddy.collectors.repo_observer import is_test_file
from gitbuddy.exceptions import GitCommandError, GitCommandTimeoutError

from .conftest import FakeGitRunner, healthy_repo


def _observer(repo_dir: Path, **overrides) -> RepoObserver:
    return RepoObserver(FakeGitRunner(healthy_repo(**overrides), cwd=repo_dir))  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Command runner
# ---------------------------------------------------------------------------

class DummyCompleted:
    def __init__(self, returncode: int, stdout: str = "", stderr: str = "") -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def test_runner_returns_stripped_stdout(monkeypatch, tmp_path):
    calls = []

    def fake_run(command, **kwargs):
        calls.append((command, kwargs))
        return DummyCompleted(0, stdout="true\n")

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert GitCommandRunner(tmp_path, timeout=3).run(["rev-parse", "--is-inside-work-tree"]) == "true"
    command, kwargs = calls[0]
    assert command == ["git", "rev-parse", "--is-inside-work-tree"]
    assert kwargs["timeout"] == 3
    assert kwargs["cwd"] == tmp_path


def test_runner_raises_on_nonzero_exit(monkeypatch, tmp_path):
    monkeypatch.setattr(subprocess, "run", lambda command, **kwargs: DummyCompleted(128, stderr="fatal: nope"))

    with pytest.raises(GitCommandError) as excinfo:
        GitCommandRunner(tmp_path).run(["status"])
    assert excinfo.value.returncode == 128
    assert "fatal: nope" in str(excinfo.value)


def test_runner_raises_on_timeout(monkeypatch, tmp_path):
    def fake_run(command, **kwargs):
        raise subprocess.TimeoutExpired(command, kwargs["timeout"])

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(GitCommandTimeoutError):
        GitCommandRunner(tmp_path).run(["log"])


def test_runner_raises_when_git_is_missing(monkeypatch, tmp_path):
    def fake_run(command, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(GitCommandError):
        GitCommandRunner(tmp_path).run(["log"])


# ---------------------------------------------------------------------------
# Observer
# ---------------------------------------------------------------------------

def test_outside_repository_everything_defaults(tmp_path):
    observer = RepoObserver(FakeGitRunner(cwd=tmp_path))  # type: ignore[arg-type]

    assert not observer.is_git_repo()
    assert observer.total_commits() == 0
    assert observer.dirty_file_count() == 0
    assert observer.streak_days() == 0
    assert observer.last_commit_date() is None
    assert observer.hours_since_last_commit() is None
    assert observer.find_marked_comments() == []
    assert not observer.collect_health_input().is_git_repo


def test_repository_without_commits_is_not_scored(repo_dir):
    observer = _observer(repo_dir, **{r"rev-list --count HEAD": "0"})

    assert observer.is_git_repo()
    assert not observer.collect_health_input().is_git_repo


def test_health_input_for_healthy_repository(observer):
    health_input = observer.collect_health_input()

    assert health_input.is_git_repo
    assert health_input.weekly_commits == 8
    assert health_input.streak == 7
    assert health_input.dirty_files == 0
    assert health_input.has_tests and health_input.test_file_count == 1
    assert health_input.has_readme
    assert health_input.hours_since_last_commit == pytest.approx(2.0)
    assert health_input.total_commits == 12


def test_missing_readme_is_detected(tmp_path):
    observer = RepoObserver(FakeGitRunner(healthy_repo(), cwd=tmp_path))  # type: ignore[arg-type]

    assert not observer.has_readme()


def test_streak_survives_until_end_of_next_day(repo_dir):
    observer = _observer(repo_dir, **{r"log --format=%ad --date=short": "2024-03-12\n2024-03-11\n2024-03-09"})

    assert observer.streak_days() == 2


def test_streak_broken_by_missed_day(repo_dir):
    observer = _observer(repo_dir, **{r"log --format=%ad --date=short": "2024-03-11\n2024-03-10"})

    assert observer.streak_days() == 0


def test_unparseable_commit_count_defaults_to_zero(repo_dir):
    assert _observer(repo_dir, **{r"rev-list --count HEAD": "lots"}).total_commits() == 0


def test_daily_commit_counts(observer):
    counts = observer.daily_commit_counts(14)

    assert counts == {date(2024, 3, 13): 2, date(2024, 3, 12): 1, date(2024, 3, 4): 1}


def test_dirty_files_are_counted(repo_dir):
    observer = _observer(repo_dir, **{r"status --porcelain": " M src/app.py\n?? notes.txt\n"})

    assert observer.dirty_file_count() == 2


@pytest.mark.parametrize(
    "path, expected",
    [
        ("src/app.test.ts", True),
        ("web/button.spec.js", True),
        ("src/__tests__/button.js", True),
        ("tests/test_app.py", True),
        ("pkg/test_utils.py", True),
        ("lib/tests/helpers.rb", True),
        ("src/contest.py", False),
        ("README.md", False),
    ],
)
def test_is_test_file(path, expected):
    assert is_test_file(path) is expected


def test_marked_comments_are_parsed_and_limited(repo_dir):
    grep_output = "\n".join(f"src/app.py:{n}:    # TODO: item {n}" for n in range(1, 15))
    observer = _observer(repo_dir, **{r"grep -n -F -e TODO": grep_output + "\nbroken line"})

    matches = observer.find_marked_comments(["TODO", "FIXME"], limit=5)

    assert len(matches) == 5
    assert matches[0].file == "src/app.py"
    assert matches[0].line == 1
    assert matches[0].content == "# TODO: item 1"
    assert observer.count_markers(["TODO", "FIXME"]) == 14


def test_marker_search_passes_patterns_and_globs(observer, runner):
    observer.find_marked_comments(["TODO"], globs=["*.py"])

    assert ["grep", "-n", "-F", "-e", "TODO", "--", "*.py"] in runner.calls


def test_grep_without_matches_counts_zero(repo_dir):
    observer = _observer(repo_dir, **{r"grep -n -F -e TODO": GitCommandError("", returncode=1)})

    assert observer.count_markers(["TODO"]) == 0
    assert observer.find_marked_comments(["TODO"]) == []


@pytest.mark.parametrize(
    "error",
    [GitCommandTimeoutError("git grep timed out"), GitCommandError("fatal: bad pathspec", returncode=128)],
)
def test_failed_grep_count_is_unknown(repo_dir, error):
    observer = _observer(repo_dir, **{r"grep -n -F -e TODO": error})

    assert observer.count_markers(["TODO"]) is None
    assert observer.find_marked_comments(["TODO"]) == []
    assert observer.collect_repo_data(["TODO"]).todos is None


def test_staged_diff_summary(repo_dir):
    observer = _observer(
        repo_dir,
        **{
            r"diff --cached --numstat": "10\t2\tsrc/app.py\n-\t-\tassets/logo.png",
            r"diff --cached$": "+def login():\n+    pass",
        },
    )

    summary = observer.staged_diff_summary()

    assert [change.file for change in summary.files] == ["src/app.py", "assets/logo.png"]
    assert summary.additions == 10
    assert summary.deletions == 2
    assert "def login" in summary.diff_text


def test_nothing_staged_is_empty(observer):
    assert observer.staged_diff_summary().is_empty


def test_commit_failure_returns_false(repo_dir):
    observer = _observer(repo_dir, **{r"commit -m": GitCommandError("nothing to commit", returncode=1)})

    assert observer.commit("feat: x") is False


def test_commit_success(repo_dir):
    runner = FakeGitRunner(healthy_repo(**{r"commit -m": ""}), cwd=repo_dir)

    assert RepoObserver(runner).commit("feat: x") is True  # type: ignore[arg-type]
    assert ["commit", "-m", "feat: x"] in runner.calls


def test_diff_stat_since(repo_dir):
    observer = _observer(
        repo_dir, **{r"diff --shortstat": " 3 files changed, 40 insertions(+), 7 deletions(-)"}
    )

    assert observer.diff_stat_since("abc1234") == (3, 40, 7)
    assert observer.diff_stat_since("") == (0, 0, 0)


def test_snapshot(observer):
    snapshot = observer.snapshot()

    assert snapshot.total_commits == 12
    assert snapshot.last_commit_hash == "abc1234"


def test_repo_data_reads_clock_and_markers(repo_dir):
    observer = _observer(
        repo_dir,
        **{
            r"grep -n -F -e TODO": "a.py:1:# TODO one\nb.py:2:# FIXME two",
            r"grep -n -F -e console\.log": "c.js:3:console.log(x)",
        },
    )

    data = observer.collect_repo_data(["TODO", "FIXME"])

    assert data.todos == 2
    assert data.debug_prints == 1
    assert data.commits_today == 8
    assert data.hour == 12
    assert not data.is_weekend


def test_fun_stats(observer):
    stats = observer.fun_stats()

    assert stats.repo_age_days == 60
    assert stats.total_commits == 12
    assert stats.top_extension == ".py"
    assert stats.top_extension_count == 3
    assert stats.avg_message_length == 17
