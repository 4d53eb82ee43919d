"""Console helper pre-configured with the GitBuddy theme."""

from __future__ import annotations

from typing import Any

from rich.console import Console as RichConsole
from rich.theme import Theme

from ..constants import CONSOLE_THEME

_default_theme = Theme(CONSOLE_THEME)


class Console(RichConsole):
    """Rich console pre-configured with a custom theme."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:  # noqa: D401 - mirror rich API
        theme = kwargs.pop("theme", None) or _default_theme
        super().__init__(*args, theme=theme, **kwargs)
        self._quiet = False

    def set_quiet(self, quiet: bool) -> None:
        """Enable or disable quiet mode."""
        self._quiet = quiet

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print with respect to quiet mode."""
        if not self._quiet:
            super().print(*args, **kwargs)

    def print_error(self, error: Exception | str, context: str = "") -> None:
        """Print error message with consistent formatting.

        Args:
            error: Exception instance or error message string
            context: Optional context prefix (e.g., "Config error:")
        """
        if context:
            self.print(f"[danger]{context}[/] {error}")
        else:
            self.print(f"[danger]Error:[/] {error}")

    def print_success(self, message: str) -> None:
        """Print success message with consistent formatting."""
        self.print(f"[success]{message}[/]")

    def print_warning(self, message: str) -> None:
        """Print warning message with consistent formatting."""
        self.print(f"[warning]{message}[/]")

    def say(self, message: str, style: str = "pet") -> None:
        """Print a line of pet dialogue."""
        self.print(f"[{style}]💬 {message}[/]")


__all__ = ["Console"]
