from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

from gitbuddy.collectors.repo_observer import RepoObserver
from gitbuddy.config import Config
from gitbuddy.core import utils
from gitbuddy.exceptions import GitCommandError
from gitbuddy.game import GameController
from gitbuddy.state.persistence import StateStore

# A Wednesday, midday: no time-of-day or weekend achievements fire.
FIXED_NOW = datetime(2024, 3, 13, 12, 0, 0)


class FakeGitRunner:
    """Stand-in for GitCommandRunner answering from a regex table.

    Keys are matched with ``re.match`` against the space-joined arguments in
    insertion order. A value that is an exception is raised; unmatched
    commands fail like git outside a repository.
    """

    def __init__(self, responses: Optional[Dict[str, object]] = None, cwd: Optional[Path] = None) -> None:
        self.responses: Dict[str, object] = dict(responses or {})
        self.cwd = Path(cwd) if cwd is not None else Path(".")
        self.timeout = 5
        self.calls: List[List[str]] = []

    def run(self, args: Sequence[str], timeout: Optional[int] = None) -> str:
        args = list(args)
        self.calls.append(args)
        joined = " ".join(args)
        for pattern, output in self.responses.items():
            if re.match(pattern, joined):
                if isinstance(output, Exception):
                    raise output
                return str(output).strip()
        raise GitCommandError("fatal: not a git repository", command=["git", *args], returncode=128)

    def ran(self, prefix: str) -> bool:
        return any(" ".join(call).startswith(prefix) for call in self.calls)


def healthy_repo(**overrides: object) -> Dict[str, object]:
    """Responses for a busy, clean repository with a 7-day streak."""
    streak_days = [f"2024-03-{day:02d}" for day in range(13, 6, -1)]
    responses: Dict[str, object] = {
        r"rev-parse --is-inside-work-tree": "true",
        r"rev-parse HEAD": "abc1234",
        r"rev-list --count HEAD": "12",
        r"log -1 --format=%cI": "2024-03-13T10:00:00",
        r"log --format=%ad --date=short": "\n".join(streak_days),
        r"log --since=\S+ --format=%H": "\n".join(f"hash{i}" for i in range(8)),
        r"log --since=\S+ --format=%ad": "2024-03-13\n2024-03-13\n2024-03-12\n2024-03-04",
        r"log --reverse --format=%cI": "2024-01-13T09:00:00\n2024-03-13T10:00:00",
        r"log --format=%s": "feat: add login\nfix: crash on start",
        r"status --porcelain": "",
        r"ls-files": "README.md\nsrc/app.py\nsrc/util.py\ntests/test_app.py",
        r"grep -n -F -e TODO": "",
        r"grep -n -F -e console\.log": "",
        r"diff --cached --numstat": "",
        r"config user\.name": "Ada",
    }
    # Overrides go first so they win the in-order match.
    return {**overrides, **{key: value for key, value in responses.items() if key not in overrides}}


@pytest.fixture(autouse=True)
def fixed_clock(monkeypatch: pytest.MonkeyPatch) -> datetime:
    monkeypatch.setattr(utils, "now", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    path = tmp_path / "repo"
    path.mkdir()
    (path / "README.md").write_text("# demo\n", encoding="utf-8")
    return path


@pytest.fixture
def runner(repo_dir: Path) -> FakeGitRunner:
    return FakeGitRunner(healthy_repo(), cwd=repo_dir)


@pytest.fixture
def observer(runner: FakeGitRunner) -> RepoObserver:
    return RepoObserver(runner)  # type: ignore[arg-type]


@pytest.fixture
def store(tmp_path: Path) -> StateStore:
    return StateStore(tmp_path / "home" / "state.json")


@pytest.fixture
def controller(store: StateStore, observer: RepoObserver) -> GameController:
    game = GameController(store, observer, Config())
    game.start("Rex")
    return game


@pytest.fixture
def gitbuddy_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point state and config at a temporary home."""
    home = tmp_path / "gitbuddy-home"
    monkeypatch.setenv("GITBUDDY_HOME", str(home / "state"))
    monkeypatch.setenv("GITBUDDY_CONFIG_DIR", str(home / "config"))
    return home
