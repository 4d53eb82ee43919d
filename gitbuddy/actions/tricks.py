"""Git tricks: read-only git commands performed by the pet."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..collectors.repo_observer import RepoObserver
from ..constants import XP_REWARDS
from ..core.models import TrickResult


@dataclass(frozen=True, slots=True)
class Trick:
    """A git command the pet can run once it reaches ``unlock_level``."""

    id: str
    name: str
    args: Tuple[str, ...]
    description: str
    icon: str
    unlock_level: int
    success_message: str
    max_lines: Optional[int] = None


TRICKS: List[Trick] = [
    Trick("fetch", "Fetch", ("fetch", "--all", "--dry-run"), "Check remotes for updates", "🎾", 1,
          "*runs back with remote updates*"),
    Trick("status", "Sniff", ("status", "--short"), "Show repository status", "👃", 1,
          "*sniff sniff* I smell the repo status!"),
    Trick("branch", "Roll Over", ("branch", "-a"), "List all branches", "🔀", 2,
          "*rolls over* Here are all your branches!"),
    Trick("stash", "Bury Bone", ("stash", "list"), "Show stashed changes", "🦴", 2,
          "*digs up stashes* Found your buried changes!"),
    Trick("log", "Sit & Show", ("log", "--oneline", "-10"), "Show recent commits", "📜", 2,
          "*sits proudly* Here is your commit history!"),
    Trick("diff", "Point", ("diff", "--stat"), "Show uncommitted changes", "👆", 3,
          "*points* Look at those changes!"),
    Trick("remote", "Howl", ("remote", "-v"), "Show remote repositories", "🐺", 3,
          "*AWOOOO* Calling out to remotes!"),
    Trick("contributors", "Pack Call", ("shortlog", "-sn", "--no-merges", "HEAD"), "Show top contributors",
          "👥", 4, "*gathers the pack* Here are your contributors!", max_lines=5),
    Trick("blame_self", "Play Dead", ("log", "--oneline", "-5"), "Show your recent commits", "💀", 4,
          "*plays dead* ...but here are YOUR commits!"),
    Trick("prune", "Shake", ("remote", "prune", "origin", "--dry-run"), "Show stale remote branches", "🤝", 5,
          "*shakes paw* Found stale branches to prune!"),
]


def available_tricks(level: int) -> List[Trick]:
    return [trick for trick in TRICKS if trick.unlock_level <= level]


def get_trick(trick_id: str) -> Optional[Trick]:
    for trick in TRICKS:
        if trick.id == trick_id:
            return trick
    return None


def pick_trick(level: int, rng: Optional[random.Random] = None) -> Trick:
    """Pick a random trick unlocked at ``level``."""
    return (rng or random).choice(available_tricks(level))


def _trick_args(trick: Trick, observer: RepoObserver) -> List[str]:
    args = list(trick.args)
    if trick.id == "blame_self":
        author = observer.run_readonly(["config", "user.name"])
        if author:
            args.append(f"--author={author}")
    return args


def perform_trick(trick: Trick, observer: RepoObserver) -> TrickResult:
    """Run the trick's command and describe the outcome.

    Args:
        trick: Trick to perform
        observer: Repository observer used to run git

    Returns:
        TrickResult; failed commands still earn consolation XP
    """
    output = observer.run_readonly(_trick_args(trick, observer))
    if output is None:
        return TrickResult(
            trick_id=trick.id,
            name=trick.name,
            output="Command failed",
            success=False,
            message="*whimper* I couldn't do that trick...",
        )

    lines = output.splitlines()
    if trick.max_lines is not None:
        lines = lines[: trick.max_lines]
    return TrickResult(
        trick_id=trick.id,
        name=trick.name,
        output="\n".join(lines) or "(No output)",
        success=True,
        message=trick.success_message,
    )


def trick_xp(result: TrickResult) -> int:
    return XP_REWARDS["trick_success"] if result.success else XP_REWARDS["trick_failure"]


__all__ = [
    "TRICKS",
    "Trick",
    "available_tricks",
    "get_trick",
    "perform_trick",
    "pick_trick",
    "trick_xp",
]
