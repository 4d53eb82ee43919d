"""Rich renderers for the GitBuddy screens."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from rich import box
from rich.align import Align
from rich.cells import cell_len
from rich.console import Group
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from ..actions.heatmap import WEEKDAY_LABELS, Heatmap, glyph, intensity
from ..actions.play import fun_facts
from ..constants import (
    ACHIEVEMENT_UNLOCKED_MESSAGE,
    BAR_CONFIG,
    CHALLENGE_COMPLETE_MESSAGE,
    EMPTY_BOWL_MESSAGE,
    FEED_MESSAGE,
    LEVEL_UP_MESSAGE,
    MOOD_STYLES,
    PET_SPRITES,
    SPRITE_EYE_OVERRIDES,
    SPRITE_FEATURES,
    STATUS_ICONS,
    STATUS_STYLES,
)
from ..core.models import CommitSuggestion, FeedResult, FocusResult, FunStats, MoodState, RepoHealth, TrickResult
from ..core.utils import format_time_ago
from ..game_elements.achievements import ACHIEVEMENTS, achievement_progress
from ..game_elements.level_calculator import LevelCalculator

if TYPE_CHECKING:
    from ..config import Config
    from ..core.console import Console
    from ..game import Rewards
    from ..game_elements.challenges import Challenge
    from ..state.schema import DailyChallengeState, PetState

HEAT_STYLES = ("divider", "success", "success", "accent", "xp")


def pet_sprite(level: int, mood: str) -> List[str]:
    """ASCII art for the dog at ``level`` showing ``mood``, padded to one width."""
    template = PET_SPRITES.get(level, PET_SPRITES[1])
    features = dict(SPRITE_FEATURES.get(mood, SPRITE_FEATURES["neutral"]))
    features["eye"] = SPRITE_EYE_OVERRIDES.get(level, {}).get(mood, features["eye"])
    lines = [line.format(**features).rstrip() for line in template]
    width = max(cell_len(line) for line in lines)
    return [line + " " * (width - cell_len(line)) for line in lines]


def progress_bar(fraction: float, width: int = BAR_CONFIG["width"]) -> str:
    """Text bar filled to ``fraction`` (clamped to 0..1)."""
    fraction = max(0.0, min(1.0, fraction))
    filled = round(fraction * width)
    return BAR_CONFIG["filled"] * filled + BAR_CONFIG["empty"] * (width - filled)


def _hp_style(hp: int) -> str:
    if hp >= 70:
        return "success"
    if hp >= 40:
        return "warning"
    return "danger"


# ============================================================================
# Pet
# ============================================================================

def print_pet_status(
    state: "PetState",
    mood: MoodState,
    console: "Console",
    health: Optional[RepoHealth] = None,
) -> None:
    """Render the pet card: sprite, dialogue, HP and XP bars.

    Args:
        state: Current pet state
        mood: Mood derived from the state's HP
        console: Console instance for printing
        health: Latest health report, shown as a one-line summary when given
    """
    mood_style = MOOD_STYLES.get(mood.mood.value, "value")
    progress = LevelCalculator.level_progress(state.xp)

    if progress.is_max_level:
        xp_text = f"{state.xp} XP (max level)"
    else:
        xp_text = f"{progress.current}/{progress.maximum} XP"

    grid = Table.grid(padding=(0, 2))
    grid.add_column(justify="right", style="label")
    grid.add_column(style="value")
    grid.add_row("Mood", Text(mood.mood.value.title(), style=mood_style))
    grid.add_row("HP", Text(f"{progress_bar(state.hp / 100)} {state.hp}/100", style=_hp_style(state.hp)))
    grid.add_row("Level", f"{state.level} · {LevelCalculator.level_title(state.level)}")
    grid.add_row("XP", Text(f"{progress_bar(progress.percentage / 100)} {xp_text}", style="xp"))
    if health is not None and health.is_git_repo:
        grid.add_row("Repo", f"health {health.total_score}/100 · {health.commit_count} commits")

    card = Panel(
        Group(
            Align.center(Text("\n".join(pet_sprite(state.level, mood.mood.value)), style="pet")),
            Align.center(Text(mood.message, style=mood_style)),
            Rule(style="divider"),
            grid,
        ),
        title=f"[pet]{state.name}[/]",
        subtitle=f"[muted]{LevelCalculator.level_description(state.level)}[/]",
        border_style="frame",
        padding=(1, 2),
    )
    console.print(card)


def print_health(health: RepoHealth, console: "Console") -> None:
    """Render the weighted health checks as a table."""
    table = Table(
        title=f"Repository health · {health.total_score}/100",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("", width=2)
    table.add_column("Check", style="label")
    table.add_column("Value", style="value")
    table.add_column("Weight", justify="right", style="muted")
    table.add_column("Score", justify="right")

    for check in health.checks:
        style = STATUS_STYLES[check.status.value]
        table.add_row(
            Text(STATUS_ICONS[check.status.value], style=style),
            check.name,
            check.value,
            f"{check.weight:.0%}",
            Text(f"{check.score:.1f}", style=style),
        )

    console.print(table)
    if health.last_commit_date is not None:
        console.print(f"[muted]Last commit {format_time_ago(health.last_commit_date)}[/]")


def print_rewards(rewards: "Rewards", console: "Console") -> None:
    """Announce XP, level ups, achievements and a completed challenge."""
    if rewards.xp_gained:
        console.print(f"[xp]+{rewards.xp_gained} XP[/]")
    if rewards.leveled_up:
        console.say(LEVEL_UP_MESSAGE, style="xp")
        console.print(
            f"[accent]Level {rewards.level}: {LevelCalculator.level_title(rewards.level)}[/] "
            f"[muted]{LevelCalculator.level_description(rewards.level)}[/]"
        )
    if rewards.challenge_completed is not None:
        challenge = rewards.challenge_completed
        console.say(CHALLENGE_COMPLETE_MESSAGE, style="success")
        console.print(f"  {challenge.icon} {challenge.name} [xp]+{challenge.xp_reward} XP[/]")
    if rewards.achievements:
        console.say(ACHIEVEMENT_UNLOCKED_MESSAGE, style="accent")
        for achievement in rewards.achievements:
            console.print(
                f"  {achievement.icon} [accent]{achievement.name}[/] "
                f"[muted]{achievement.description}[/] [xp]+{achievement.xp_reward} XP[/]"
            )


# ============================================================================
# Actions
# ============================================================================

def print_feed(result: FeedResult, console: "Console") -> None:
    if not result.issues:
        console.say(EMPTY_BOWL_MESSAGE)
        return

    console.say(FEED_MESSAGE)
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan")
    table.add_column("Kind", style="warning")
    table.add_column("Location", style="info", no_wrap=True)
    table.add_column("Line", style="muted")
    for issue in result.issues:
        table.add_row(issue.kind, f"{issue.file}:{issue.line}", issue.content)
    console.print(table)


def print_trick(result: TrickResult, console: "Console") -> None:
    style = "success" if result.success else "warning"
    console.say(result.message, style=style)
    if result.output:
        console.print(Panel(Text(result.output, style="value"), title=result.name, border_style="frame"))


def print_commit_suggestion(suggestion: CommitSuggestion, console: "Console") -> None:
    """Show the proposed message and the staged files it covers."""
    console.print(Panel(Text(suggestion.format_message(), style="value"), title="Suggested commit",
                        border_style="accent"))

    table = Table(box=box.MINIMAL, show_edge=False, pad_edge=False)
    table.add_column("File", style="info")
    table.add_column("+", justify="right", style="success")
    table.add_column("-", justify="right", style="danger")
    for change in suggestion.files_changed:
        table.add_row(change.file, str(change.additions), str(change.deletions))
    console.print(table)


def print_focus_result(result: FocusResult, counted: bool, console: "Console") -> None:
    if not counted:
        console.print_warning("*yawn* That was too short to count. Focus for at least a minute!")
        return

    grid = Table.grid(padding=(0, 2))
    grid.add_column(justify="right", style="label")
    grid.add_column(style="value")
    grid.add_row("Focused", f"{result.minutes} min")
    grid.add_row("Commits", str(result.commits))
    grid.add_row("Files", str(result.files_changed))
    grid.add_row("Lines", f"[success]+{result.lines_added}[/] [danger]-{result.lines_removed}[/]")
    console.print(Panel(grid, title="Focus session complete", border_style="success"))


# ============================================================================
# Views
# ============================================================================

def print_stats(state: "PetState", stats: FunStats, console: "Console") -> None:
    """Lifetime counters plus repository trivia."""
    table = Table(box=box.MINIMAL, show_edge=False, pad_edge=False, expand=True)
    table.add_column("Stat", style="label")
    table.add_column("Value", justify="right", style="value")

    unlocked, total = achievement_progress(state)
    focus = state.focus_sessions
    rows = [
        ("Scans", state.total_scans),
        ("Feeds", state.total_feeds),
        ("Plays", state.total_plays),
        ("Smart commits", state.total_smart_commits),
        ("Clean trees", state.clean_tree_count),
        ("Longest streak", f"{state.longest_streak} days"),
        ("Focus sessions", f"{focus.total} ({focus.total_minutes} min)"),
        ("Challenges completed", state.challenges_completed),
        ("Achievements", f"{unlocked}/{total}"),
        ("Adopted", format_time_ago(state.created_at)),
    ]
    for label, value in rows:
        table.add_row(label, str(value))
    if focus.best_session is not None:
        best = focus.best_session
        table.add_row("Best focus", f"{best.commits} commits in {best.minutes} min ({best.date})")

    console.print(Panel(table, title=f"[pet]{state.name}[/] stats", border_style="accent", padding=(0, 1)))

    facts = fun_facts(stats)
    if facts:
        console.print(Panel(Text("\n".join(f"• {fact}" for fact in facts), style="value"),
                            title="Fun facts", border_style="frame"))


def print_achievements(state: "PetState", console: "Console") -> None:
    unlocked_ids = set(state.achievements)
    unlocked, total = achievement_progress(state)

    table = Table(
        title=f"Achievements · {unlocked}/{total}",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("", width=2)
    table.add_column("Name")
    table.add_column("Description", style="muted")
    table.add_column("XP", justify="right", style="xp")

    for achievement in ACHIEVEMENTS:
        if achievement.id in unlocked_ids:
            table.add_row(achievement.icon, Text(achievement.name, style="success"),
                          achievement.description, str(achievement.xp_reward))
        else:
            table.add_row("🔒", Text(achievement.name, style="muted"), achievement.description,
                          str(achievement.xp_reward))
    console.print(table)


def heatmap_rows(heatmap: Heatmap) -> List[Text]:
    """Styled weekday rows for the heatmap grid."""
    rows: List[Text] = []
    for label, counts in zip(WEEKDAY_LABELS, heatmap.rows):
        text = Text(f"{label} ", style="label")
        for count in counts:
            style = HEAT_STYLES[intensity(count)] if count is not None else "muted"
            text.append(glyph(count) + " ", style=style)
        rows.append(text)
    return rows


def print_heatmap(heatmap: Heatmap, console: "Console") -> None:
    body = Group(*heatmap_rows(heatmap))
    summary = f"{heatmap.total} commits on {heatmap.active_days} days"
    if heatmap.busiest_day is not None:
        summary += f" · busiest {heatmap.busiest_day.isoformat()} ({heatmap.busiest_count})"

    console.print(
        Panel(
            body,
            title=f"Commits {heatmap.start.isoformat()} → {heatmap.end.isoformat()}",
            subtitle=f"[muted]{summary}[/]",
            border_style="frame",
        )
    )


def print_challenge(challenge: "Challenge", record: "DailyChallengeState", console: "Console") -> None:
    status = "[success]Complete![/]" if record.completed else f"{record.progress}/{challenge.goal}"
    grid = Table.grid(padding=(0, 2))
    grid.add_column(justify="right", style="label")
    grid.add_column(style="value")
    grid.add_row("Goal", challenge.description)
    grid.add_row("Progress", f"{progress_bar(record.progress / challenge.goal)} {status}")
    grid.add_row("Reward", f"[xp]{challenge.xp_reward} XP[/]")
    console.print(
        Panel(grid, title=f"{challenge.icon} Daily challenge: {challenge.name}", border_style="accent")
    )


def print_config_summary(config: "Config", console: "Console") -> None:
    """Show every configuration section as a key/value table."""
    for section, values in config.to_display_dict().items():
        if not isinstance(values, dict):
            console.print(f"[label]{section}[/] = {values}")
            continue
        table = Table(box=box.MINIMAL, show_edge=False, pad_edge=False)
        table.add_column("Key", style="label")
        table.add_column("Value", style="value")
        for key, value in values.items():
            shown = ", ".join(value) if isinstance(value, list) else str(value)
            table.add_row(f"{section}.{key}", shown)
        console.print(Panel(table, title=section, title_align="left", border_style="frame"))


__all__ = [
    "heatmap_rows",
    "pet_sprite",
    "print_achievements",
    "print_challenge",
    "print_commit_suggestion",
    "print_config_summary",
    "print_feed",
    "print_focus_result",
    "print_health",
    "print_heatmap",
    "print_pet_status",
    "print_rewards",
    "print_stats",
    "print_trick",
    "progress_bar",
]
