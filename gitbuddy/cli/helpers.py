"""Shared wiring and error handling for the CLI commands."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.logging import RichHandler

from ..collectors.git_runner import GitCommandRunner
from ..collectors.repo_observer import RepoObserver
from ..config import Config
from ..constants import CORRUPT_STATE_MESSAGE, LOCKED_FEATURE_MESSAGE, NOT_A_REPO_MESSAGE
from ..core.console import Console
from ..exceptions import (
    FeatureLockedError,
    GitBuddyError,
    PersistenceCorruptError,
    RepositoryUnavailableError,
)
from ..game import GameController, StartupReport
from ..state.persistence import StateStore

console = Console()
logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich, at DEBUG when verbose."""
    root = logging.getLogger("gitbuddy")
    root.handlers = [RichHandler(console=console, show_path=False, rich_tracebacks=verbose)]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def load_config() -> Config:
    """Load configuration, exiting with a message when it is invalid.

    Raises:
        typer.Exit: If configuration is invalid
    """
    try:
        return Config.load()
    except ValueError as exc:
        console.print(f"[danger]Configuration error:[/] {exc}")
        console.print("[info]Fix it with [accent]gitbuddy config set <key> <value>[/] or edit the file.")
        raise typer.Exit(code=1) from exc


def build_observer(config: Config, cwd: Optional[Path] = None) -> RepoObserver:
    runner = GitCommandRunner(cwd=cwd or Path.cwd(), timeout=config.scanner.timeout_seconds)
    return RepoObserver(runner)


def build_controller(config: Optional[Config] = None) -> GameController:
    """Wire configuration, state store and repository observer together."""
    config = config or load_config()
    return GameController(StateStore.from_config(config), build_observer(config), config)


def start_game(controller: GameController, name: Optional[str] = None) -> StartupReport:
    """Start the controller and greet the user."""
    report = controller.start(name)
    if report.recovered_from_corruption:
        console.print_warning(CORRUPT_STATE_MESSAGE)
    if report.is_new:
        console.print_success(f"🐶 Meet {report.state.name}, your new GitBuddy!")
    elif report.welcome_message:
        console.say(report.welcome_message)
    if report.hp_lost:
        console.print(f"[warning]{report.state.name} lost {report.hp_lost} HP while you were away.[/]")
    return report


def report_error(exc: GitBuddyError) -> None:
    """Print a friendly message for a domain error."""
    if isinstance(exc, FeatureLockedError):
        console.say(LOCKED_FEATURE_MESSAGE.format(level=exc.required_level, feature=exc.feature), style="warning")
    elif isinstance(exc, RepositoryUnavailableError):
        console.say(NOT_A_REPO_MESSAGE, style="warning")
    elif isinstance(exc, PersistenceCorruptError):
        console.print_error(exc, context=CORRUPT_STATE_MESSAGE)
    else:
        console.print_error(exc)
    logger.debug("Command failed", exc_info=exc)


@contextmanager
def handle_game_errors() -> Iterator[None]:
    """Turn domain errors into a friendly message and exit code 1.

    Raises:
        typer.Exit: When a GitBuddyError escapes the block
    """
    try:
        yield
    except GitBuddyError as exc:
        report_error(exc)
        raise typer.Exit(code=1) from exc


@contextmanager
def handle_user_interruption(message: str = "*wags tail* See you later!") -> Iterator[None]:
    """Exit quietly when the user aborts a prompt.

    Raises:
        typer.Exit: Always exits with code 0 when interrupted
    """
    try:
        yield
    except (typer.Abort, KeyboardInterrupt, EOFError):
        console.print(f"\n[warning]{message}[/]")
        raise typer.Exit(code=0)


__all__ = [
    "build_controller",
    "build_observer",
    "configure_logging",
    "console",
    "handle_game_errors",
    "handle_user_interruption",
    "load_config",
    "report_error",
    "start_game",
]
