from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from gitbuddy.cli import commands
from gitbuddy.cli import helpers
from gitbuddy.cli.main import app
from gitbuddy.collectors import RepoObserver

from .conftest import FakeGitRunner, healthy_repo

cli = CliRunner()


@pytest.fixture
def git(monkeypatch, gitbuddy_env, repo_dir) -> FakeGitRunner:
    """Serve every CLI command from a fake healthy repository."""
    runner = FakeGitRunner(healthy_repo(), cwd=repo_dir)
    monkeypatch.setattr(helpers, "build_observer", lambda config, cwd=None: RepoObserver(runner))
    return runner


def _state_file(home: Path) -> Path:
    return home / "state" / "state.json"


def test_status_adopts_a_named_pet(git, gitbuddy_env):
    result = cli.invoke(app, ["status", "--name", "Rex"])

    assert result.exit_code == 0, result.output
    assert "Meet Rex" in result.output
    assert json.loads(_state_file(gitbuddy_env).read_text())["name"] == "Rex"


def test_scan_reports_health(git, gitbuddy_env):
    result = cli.invoke(app, ["scan"])

    assert result.exit_code == 0, result.output
    assert "Commit Frequency" in result.output
    assert json.loads(_state_file(gitbuddy_env).read_text())["hp"] == 100


def test_quiet_flag_silences_output(git, gitbuddy_env):
    result = cli.invoke(app, ["--quiet", "scan"])

    assert result.exit_code == 0, result.output
    assert "Commit Frequency" not in result.output
    assert json.loads(_state_file(gitbuddy_env).read_text())["total_scans"] == 1


def test_scan_outside_repository_fails(monkeypatch, gitbuddy_env, tmp_path):
    monkeypatch.setattr(
        helpers, "build_observer", lambda config, cwd=None: RepoObserver(FakeGitRunner(cwd=tmp_path))
    )

    result = cli.invoke(app, ["scan"])

    assert result.exit_code == 1
    assert "head tilt" in result.output


def test_play_is_locked_for_puppies(git):
    result = cli.invoke(app, ["play", "belly"])

    assert result.exit_code == 1
    assert "too little" in result.output


def test_unknown_play_activity(git):
    result = cli.invoke(app, ["play", "juggle"])

    assert result.exit_code == 1
    assert "Unknown activity" in result.output


def test_commit_without_staged_changes(git):
    result = cli.invoke(app, ["commit", "--yes"])

    assert result.exit_code == 0
    assert "staged changes" in result.output
    assert not git.ran("commit")


def test_commit_with_confirmation(git):
    git.responses = healthy_repo(**{
        r"diff --cached --numstat": "12\t1\tsrc/auth/login.py",
        r"diff --cached$": "+def login():\n+    # add new session handling",
        r"commit -m": "",
    })

    result = cli.invoke(app, ["commit"], input="y\n")

    assert result.exit_code == 0, result.output
    assert "feat(auth): add login" in result.output
    assert "Committed!" in result.output
    assert git.ran("commit -m")


def _interrupt(*args, **kwargs):
    raise KeyboardInterrupt


def test_focus_can_be_stopped_from_the_pause_prompt(git, monkeypatch):
    monkeypatch.setattr(commands.time, "sleep", _interrupt)

    result = cli.invoke(app, ["focus", "--minutes", "5"], input="stop\n")

    assert result.exit_code == 0, result.output
    assert "Paused" in result.output


def test_second_interrupt_at_the_pause_prompt_stops_focus(controller, monkeypatch):
    monkeypatch.setattr(commands.time, "sleep", _interrupt)
    monkeypatch.setattr(commands.Prompt, "ask", _interrupt)

    commands.focus(controller, 5)

    assert controller.focus_session is None


def test_achievements_and_challenge_views(git):
    assert cli.invoke(app, ["achievements"]).exit_code == 0

    result = cli.invoke(app, ["challenge"])

    assert result.exit_code == 0
    assert "Clean Machine" in result.output


def test_heatmap_weeks_are_bounded(git):
    assert cli.invoke(app, ["heatmap", "--weeks", "4"]).exit_code == 0
    assert cli.invoke(app, ["heatmap", "--weeks", "60"]).exit_code != 0


def test_reset_without_a_pet(gitbuddy_env):
    result = cli.invoke(app, ["reset", "--force"])

    assert result.exit_code == 0
    assert "empty kennel" in result.output


def test_reset_asks_before_deleting(git, gitbuddy_env):
    cli.invoke(app, ["status"])

    cancelled = cli.invoke(app, ["reset"], input="n\n")
    assert "cancelled" in cancelled.output
    assert _state_file(gitbuddy_env).exists()

    forced = cli.invoke(app, ["reset", "--force"])
    assert forced.exit_code == 0
    assert not _state_file(gitbuddy_env).exists()


def test_interactive_session_quits(git):
    result = cli.invoke(app, [], input="quit\n")

    assert result.exit_code == 0, result.output
    assert "See you later" in result.output


def test_interactive_session_runs_menu_choices(git, gitbuddy_env):
    result = cli.invoke(app, [], input="scan\nquit\n")

    assert result.exit_code == 0, result.output
    assert json.loads(_state_file(gitbuddy_env).read_text())["total_scans"] == 1


def test_interactive_focus_offers_standard_durations(git, monkeypatch):
    monkeypatch.setattr(commands.time, "sleep", _interrupt)

    result = cli.invoke(app, [], input="focus\n45\nstop\nquit\n")

    assert result.exit_code == 0, result.output
    assert "15/25/45/60" in result.output
    assert "45 minutes" in result.output


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def test_config_set_and_get(gitbuddy_env):
    assert cli.invoke(app, ["config", "set", "pet.default_name", "Biscuit"]).exit_code == 0

    result = cli.invoke(app, ["config", "get", "pet.default_name"])

    assert result.exit_code == 0
    assert "pet.default_name = Biscuit" in result.output
    assert (gitbuddy_env / "config" / "config.toml").exists()


def test_config_get_joins_lists(gitbuddy_env):
    cli.invoke(app, ["config", "set", "scanner.marker_patterns", "TODO,HACK"])

    result = cli.invoke(app, ["config", "get", "scanner.marker_patterns"])

    assert "TODO, HACK" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["config", "set", "pet.nope", "x"],
        ["config", "set", "pet.idle_seconds", "0"],
        ["config", "get", "nodots"],
    ],
)
def test_invalid_config_keys_fail(gitbuddy_env, args):
    result = cli.invoke(app, args)

    assert result.exit_code == 1
    assert "Error" in result.output


def test_config_show(gitbuddy_env):
    result = cli.invoke(app, ["config", "show"])

    assert result.exit_code == 0
    assert "Buddy" in result.output
