"""Interactive menu session.

One controller lives for the whole loop, so actions accumulate in
``actions_this_session`` and idle time can put the pet to sleep.
"""

from __future__ import annotations

import time
from typing import Callable, Dict

from rich.prompt import Prompt

from ..constants import FOCUS_DURATIONS
from ..exceptions import GitBuddyError
from ..game import GameController
from . import commands
from .helpers import console, report_error


def focus_with_duration(controller: GameController) -> None:
    """Ask for one of the standard session lengths, then run the countdown."""
    default = controller.config.focus.default_minutes
    durations = sorted({*FOCUS_DURATIONS, default})
    choice = Prompt.ask(
        "How many minutes?",
        choices=[str(minutes) for minutes in durations],
        default=str(default),
        console=console,
    )
    commands.focus(controller, int(choice))


MENU: Dict[str, Callable[[GameController], None]] = {
    "scan": commands.scan,
    "feed": commands.feed,
    "play": commands.play,
    "commit": commands.commit,
    "focus": focus_with_duration,
    "stats": commands.stats,
    "achievements": commands.achievements,
    "heatmap": commands.heatmap,
    "challenge": commands.challenge,
}
QUIT = "quit"
WAKE_UP_MESSAGE = "*yawns and stretches* Oh! You're back!"


def run_session(controller: GameController, clock: Callable[[], float] = time.monotonic) -> None:
    """Show the pet and dispatch menu choices until the user quits.

    A reply that took longer than ``pet.idle_seconds`` finds the pet asleep.

    Args:
        controller: Started game controller
        clock: Monotonic clock used to measure idle time at the prompt
    """
    commands.show_status(controller)
    while True:
        asked_at = clock()
        choice = Prompt.ask(
            "What should we do?",
            choices=[*MENU, QUIT],
            default="scan",
            console=console,
        )
        idle_seconds = clock() - asked_at
        if idle_seconds >= controller.config.pet.idle_seconds:
            commands.show_status(controller, idle_seconds=idle_seconds)
            console.say(WAKE_UP_MESSAGE)
        if choice == QUIT:
            console.say("*wags tail* See you later!")
            return
        try:
            MENU[choice](controller)
        except GitBuddyError as exc:
            report_error(exc)
        commands.show_status(controller)


__all__ = ["MENU", "focus_with_duration", "run_session"]
