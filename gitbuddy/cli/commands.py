"""Command handlers shared by the one-shot commands and the interactive menu."""

from __future__ import annotations

import random
import time
from typing import Optional

from rich.progress import BarColumn, Progress, TextColumn, TimeRemainingColumn
from rich.prompt import Confirm, Prompt

from ..actions.tricks import available_tricks
from ..constants import COMMIT_FAILED_MESSAGE, COMMIT_SUCCESS_MESSAGE, NO_STAGED_CHANGES_MESSAGE
from ..game import GameController
from . import display
from .helpers import console

# Seconds between countdown refreshes
FOCUS_TICK_SECONDS = 1.0


# ============================================================================
# Pet
# ============================================================================

def show_status(controller: GameController, idle_seconds: float = 0) -> None:
    """Render the pet card, sleeping once the user has been idle too long."""
    state = controller.pet
    is_idle = idle_seconds >= controller.config.pet.idle_seconds
    mood = controller.mood(is_idle=is_idle, idle_seconds=idle_seconds)
    display.print_pet_status(state, mood, console, controller.health)


def scan(controller: GameController) -> None:
    outcome = controller.scan()
    display.print_health(outcome.health, console)
    display.print_rewards(outcome.rewards, console)


# ============================================================================
# Actions
# ============================================================================

def feed(controller: GameController) -> None:
    outcome = controller.feed()
    display.print_feed(outcome.result, console)
    display.print_rewards(outcome.rewards, console)


def play(
    controller: GameController,
    activity: str = "trick",
    trick_id: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> None:
    outcome = controller.play(activity, trick_id, rng)
    if outcome.trick_result is not None:
        display.print_trick(outcome.trick_result, console)
    else:
        console.say(outcome.message)
    display.print_rewards(outcome.rewards, console)


def list_tricks(controller: GameController) -> None:
    for trick in available_tricks(controller.pet.level):
        console.print(f"{trick.icon} [accent]{trick.id}[/] {trick.name} [muted]{trick.description}[/]")


def commit(controller: GameController, yes: bool = False) -> None:
    """Suggest a message for the staged changes and commit on confirmation.

    Args:
        controller: Started game controller
        yes: Commit without asking
    """
    suggestion = controller.suggest_commit()
    if suggestion is None:
        console.say(NO_STAGED_CHANGES_MESSAGE, style="warning")
        return

    display.print_commit_suggestion(suggestion, console)
    if not yes and not Confirm.ask("Commit with this message?", default=True, console=console):
        console.print("[muted]Commit cancelled.[/]")
        return

    outcome = controller.commit(suggestion.format_message())
    if not outcome.success:
        console.say(COMMIT_FAILED_MESSAGE, style="danger")
        return
    console.say(COMMIT_SUCCESS_MESSAGE, style="success")
    display.print_rewards(outcome.rewards, console)


def focus(controller: GameController, minutes: Optional[int] = None) -> None:
    """Run a focus countdown until the time is up or the user stops it.

    Ctrl+C pauses the session and asks whether to resume or stop.
    """
    session = controller.start_focus(minutes)
    console.print(f"[accent]🎯 Focus session started:[/] {session.minutes} minutes. Ctrl+C to pause.")

    while not session.is_complete():
        try:
            with Progress(
                TextColumn("[pet]{task.description}[/]"),
                BarColumn(),
                TimeRemainingColumn(),
                console=console,
                transient=True,
            ) as progress:
                task = progress.add_task(session.encouragement(), total=session.planned.total_seconds())
                while not session.is_complete():
                    progress.update(
                        task,
                        completed=session.elapsed().total_seconds(),
                        description=session.encouragement(),
                    )
                    time.sleep(FOCUS_TICK_SECONDS)
        except KeyboardInterrupt:
            session.pause()
            remaining = int(session.remaining().total_seconds() // 60)
            try:
                choice = Prompt.ask(
                    f"⏸  Paused with about {remaining} min left. Resume or stop?",
                    choices=["resume", "stop"],
                    default="resume",
                    console=console,
                )
            except (KeyboardInterrupt, EOFError):
                choice = "stop"
            if choice == "stop":
                break
            session.resume()

    outcome = controller.finish_focus()
    display.print_focus_result(outcome.result, outcome.counted, console)
    display.print_rewards(outcome.rewards, console)


# ============================================================================
# Views
# ============================================================================

def stats(controller: GameController) -> None:
    fun = controller.fun_stats()
    display.print_stats(controller.pet, fun, console)


def achievements(controller: GameController) -> None:
    display.print_achievements(controller.pet, console)


def heatmap(controller: GameController, weeks: Optional[int] = None) -> None:
    display.print_heatmap(controller.heatmap(weeks) if weeks else controller.heatmap(), console)


def challenge(controller: GameController) -> None:
    definition, record = controller.daily_challenge()
    display.print_challenge(definition, record, console)


__all__ = [
    "achievements",
    "challenge",
    "commit",
    "feed",
    "focus",
    "heatmap",
    "list_tricks",
    "play",
    "scan",
    "show_status",
    "stats",
]
