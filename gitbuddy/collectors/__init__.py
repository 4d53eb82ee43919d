"""Git repository observation."""

from .git_runner import GitCommandRunner
from .repo_observer import RepoObserver

__all__ = ["GitCommandRunner", "RepoObserver"]
