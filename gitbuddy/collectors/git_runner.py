"""Thin subprocess wrapper for running git."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from ..constants import GIT_TIMEOUTS
from ..exceptions import GitCommandError, GitCommandTimeoutError

logger = logging.getLogger(__name__)


class GitCommandRunner:
    """Run git commands in a working directory and return their stdout."""

    def __init__(self, cwd: Optional[Path] = None, timeout: int = GIT_TIMEOUTS["default"]) -> None:
        """Initialize the runner.

        Args:
            cwd: Directory to run git in (defaults to the process cwd)
            timeout: Seconds before a command is abandoned
        """
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.timeout = timeout

    def run(self, args: Sequence[str], timeout: Optional[int] = None) -> str:
        """Run ``git <args>`` and return stripped stdout.

        Args:
            args: Arguments passed after ``git``
            timeout: Optional per-call timeout override

        Returns:
            Command output without surrounding whitespace

        Raises:
            GitCommandTimeoutError: If the command exceeds the timeout
            GitCommandError: If git is missing or exits non-zero
        """
        command: List[str] = ["git", *args]
        logger.debug("Running %s in %s", " ".join(command), self.cwd)

        try:
            completed = subprocess.run(
                command,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=timeout or self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise GitCommandTimeoutError(
                f"git command timed out after {exc.timeout}s", command=command
            ) from exc
        except (FileNotFoundError, OSError) as exc:
            raise GitCommandError(f"Unable to execute git: {exc}", command=command) from exc

        if completed.returncode != 0:
            raise GitCommandError(
                completed.stderr.strip() or f"git exited with status {completed.returncode}",
                command=command,
                returncode=completed.returncode,
            )

        return completed.stdout.strip()


__all__ = ["GitCommandRunner"]
