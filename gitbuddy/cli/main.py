"""Command line interface for GitBuddy."""

from __future__ import annotations

import os
from typing import Optional

import typer
from rich.prompt import Confirm

from ..actions.play import PLAY_ACTIONS
from ..constants import HEATMAP_WEEKS, NO_PET_MESSAGE
from ..state.persistence import StateStore
from . import commands
from . import display
from .helpers import (
    build_controller,
    configure_logging,
    console,
    handle_game_errors,
    handle_user_interruption,
    load_config,
    start_game,
)
from .interactive import run_session

# Create Typer app instances
app = typer.Typer(help="A virtual dog that lives in your git repository.")
config_app = typer.Typer(help="Manage configuration settings")
app.add_typer(config_app, name="config")


# ============================================================================
# Main Commands
# ============================================================================

@app.command()
def status(
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Name for a newly adopted pet",
    ),
) -> None:
    """Show your pet, adopting one on first run."""
    with handle_game_errors():
        controller = build_controller()
        start_game(controller, name)
        commands.show_status(controller)


@app.command()
def scan() -> None:
    """Check repository health and turn it into HP."""
    with handle_game_errors():
        controller = build_controller()
        start_game(controller)
        commands.scan(controller)


@app.command()
def feed() -> None:
    """Feed your pet the TODOs and debug prints in this repository."""
    with handle_game_errors():
        controller = build_controller()
        start_game(controller)
        commands.feed(controller)


@app.command()
def play(
    activity: str = typer.Argument(
        "trick",
        help=f"What to play ({', '.join(PLAY_ACTIONS)})",
    ),
    trick: Optional[str] = typer.Option(
        None,
        "--trick",
        "-t",
        help="Specific trick to perform (random when omitted)",
    ),
    list_only: bool = typer.Option(
        False,
        "--list",
        help="List the tricks your pet knows",
    ),
) -> None:
    """Play with your pet (unlocks at level 2)."""
    if activity not in PLAY_ACTIONS:
        console.print_error(f"Unknown activity '{activity}'. Choose from: {', '.join(PLAY_ACTIONS)}")
        raise typer.Exit(code=1)

    with handle_game_errors():
        controller = build_controller()
        start_game(controller)
        if list_only:
            commands.list_tricks(controller)
            return
        commands.play(controller, activity, trick)


@app.command()
def commit(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Commit without asking for confirmation",
    ),
) -> None:
    """Suggest a conventional commit message for the staged changes."""
    with handle_user_interruption(), handle_game_errors():
        controller = build_controller()
        start_game(controller)
        commands.commit(controller, yes)


@app.command()
def focus(
    minutes: Optional[int] = typer.Option(
        None,
        "--minutes",
        "-m",
        min=1,
        help="Session length in minutes (defaults to focus.default_minutes)",
    ),
) -> None:
    """Start a focus session; Ctrl+C pauses it."""
    with handle_user_interruption(), handle_game_errors():
        controller = build_controller()
        start_game(controller)
        commands.focus(controller, minutes)


@app.command()
def stats() -> None:
    """Show lifetime stats and repository fun facts (unlocks at level 3)."""
    with handle_game_errors():
        controller = build_controller()
        start_game(controller)
        commands.stats(controller)


@app.command()
def achievements() -> None:
    """List unlocked and locked achievements."""
    with handle_game_errors():
        controller = build_controller()
        start_game(controller)
        commands.achievements(controller)


@app.command()
def heatmap(
    weeks: int = typer.Option(
        HEATMAP_WEEKS,
        "--weeks",
        "-w",
        min=1,
        max=52,
        help="Number of weeks to show",
    ),
) -> None:
    """Show a commit heatmap for recent weeks."""
    with handle_game_errors():
        controller = build_controller()
        start_game(controller)
        commands.heatmap(controller, weeks)


@app.command()
def challenge() -> None:
    """Show today's challenge and your progress."""
    with handle_game_errors():
        controller = build_controller()
        start_game(controller)
        commands.challenge(controller)


@app.command()
def reset(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Delete without asking for confirmation",
    ),
) -> None:
    """Say goodbye to your pet and delete its saved state."""
    with handle_user_interruption(), handle_game_errors():
        store = StateStore.from_config(load_config())
        if not store.exists():
            console.say(NO_PET_MESSAGE, style="muted")
            return
        if not force and not Confirm.ask("Really reset your pet? This cannot be undone", default=False,
                                         console=console):
            console.print("[muted]Reset cancelled.[/]")
            return
        store.reset()
        console.print_success("*waves paw* Goodbye! Your pet has been reset.")


# ============================================================================
# Config Commands
# ============================================================================

@config_app.command("show")
def show_config() -> None:
    """Display current configuration settings."""
    display.print_config_summary(load_config(), console)


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key in dot notation (e.g. pet.default_name)"),
    value: str = typer.Argument(..., help="Value to set"),
) -> None:
    """Set a configuration value."""
    try:
        config = load_config()
        config.set_value(key, value)
        config.dump()
        console.print(f"[success]✓ Configuration updated:[/] {key} = {value}")
    except ValueError as exc:
        console.print_error(exc)
        raise typer.Exit(code=1) from exc


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Configuration key in dot notation (e.g. scanner.timeout_seconds)"),
) -> None:
    """Get a configuration value."""
    try:
        value = load_config().get_value(key)
    except ValueError as exc:
        console.print_error(exc)
        raise typer.Exit(code=1) from exc
    shown = ", ".join(value) if isinstance(value, list) else value
    console.print(f"{key} = {shown}")


# ============================================================================
# App Callback
# ============================================================================

@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output for debugging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-essential output",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Run the interactive menu when no command is given."""
    console.set_quiet(quiet)
    configure_logging(verbose)

    if no_color:
        os.environ["NO_COLOR"] = "1"
        console.no_color = True

    if ctx.invoked_subcommand is not None:
        return

    with handle_user_interruption(), handle_game_errors():
        controller = build_controller()
        start_game(controller)
        run_session(controller)


__all__ = ["app"]
