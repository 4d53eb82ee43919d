from __future__ import annotations

import random

import pytest

from gitbuddy.actions.feed import classify_marker, feed_xp, find_code_issues
from gitbuddy.actions.play import fun_facts, pick_fun_fact
from gitbuddy.actions.tricks import TRICKS, available_tricks, get_trick, perform_trick, pick_trick, trick_xp
from gitbuddy.collectors import RepoObserver
from gitbuddy.constants import FUN_FACT_FALLBACK
from gitbuddy.core.models import FunStats

from .conftest import FakeGitRunner, healthy_repo


def _observer(repo_dir, **overrides) -> RepoObserver:
    return RepoObserver(FakeGitRunner(healthy_repo(**overrides), cwd=repo_dir))  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Feed
# ---------------------------------------------------------------------------

def test_marker_classification():
    assert classify_marker("# FIXME: race") == "fixme"
    assert classify_marker("// fixme later") == "fixme"
    assert classify_marker("# TODO: docs") == "todo"


def test_empty_bowl_still_earns_base_xp(observer):
    result = find_code_issues(observer)

    assert result.issues == []
    assert result.xp_gained == feed_xp(0) == 5


def test_feed_collects_markers_and_debug_prints(repo_dir):
    observer = _observer(
        repo_dir,
        **{
            r"grep -n -F -e TODO": "a.py:1:# TODO: one\nb.py:7:# FIXME: two",
            r"grep -n -F -e console\.log": "c.js:3:console.log('hi')",
        },
    )

    result = find_code_issues(observer, ["TODO", "FIXME"])

    assert [issue.kind for issue in result.issues] == ["todo", "fixme", "debug"]
    assert result.issues[1].file == "b.py" and result.issues[1].line == 7
    assert result.xp_gained == 5 + 3 * 2


def test_feed_is_capped(repo_dir):
    grep = "\n".join(f"a.py:{n}:# TODO {'x' * 100}" for n in range(1, 11))
    observer = _observer(repo_dir, **{r"grep -n -F -e TODO": grep})

    result = find_code_issues(observer)

    assert len(result.issues) == 8
    assert result.xp_gained == 5 + 8 * 2
    assert all(len(issue.content) <= 60 for issue in result.issues)


# ---------------------------------------------------------------------------
# Tricks
# ---------------------------------------------------------------------------

def test_tricks_unlock_with_level():
    assert {trick.id for trick in available_tricks(1)} == {"fetch", "status"}
    assert len(available_tricks(5)) == len(TRICKS)
    assert get_trick("nope") is None


def test_pick_trick_only_from_unlocked(observer):
    rng = random.Random(7)

    for _ in range(20):
        assert pick_trick(2, rng).unlock_level <= 2


def test_every_trick_runs_git_without_a_shell():
    for trick in TRICKS:
        assert all(isinstance(arg, str) and ";" not in arg and "|" not in arg for arg in trick.args)


def test_successful_trick(repo_dir):
    observer = _observer(repo_dir, **{r"status --short": " M src/app.py"})

    result = perform_trick(get_trick("status"), observer)

    assert result.success
    assert result.output == "M src/app.py"
    assert trick_xp(result) == 15


def test_trick_output_is_truncated(repo_dir):
    shortlog = "\n".join(f"{n}\tDev {n}" for n in range(10, 0, -1))
    observer = _observer(repo_dir, **{r"shortlog -sn": shortlog})

    result = perform_trick(get_trick("contributors"), observer)

    assert len(result.output.splitlines()) == 5


def test_failed_trick_earns_consolation_xp(observer):
    result = perform_trick(get_trick("remote"), observer)

    assert not result.success
    assert trick_xp(result) == 5


def test_play_dead_filters_by_author(repo_dir):
    runner = FakeGitRunner(healthy_repo(**{r"log --oneline -5": "abc fix"}), cwd=repo_dir)

    result = perform_trick(get_trick("blame_self"), RepoObserver(runner))  # type: ignore[arg-type]

    assert result.success
    assert ["log", "--oneline", "-5", "--author=Ada"] in runner.calls


# ---------------------------------------------------------------------------
# Fetch
# ---------------------------------------------------------------------------

def test_fun_facts_from_stats():
    stats = FunStats(repo_age_days=60, total_commits=12, top_extension=".py", top_extension_count=3,
                     avg_message_length=17)

    facts = fun_facts(stats)

    assert len(facts) == 4
    assert any("60 days" in fact for fact in facts)
    assert pick_fun_fact(stats, random.Random(1)) in facts


@pytest.mark.parametrize("stats", [FunStats(), FunStats(top_extension=".py")])
def test_fun_fact_fallback(stats):
    assert pick_fun_fact(stats) == FUN_FACT_FALLBACK
