"""Command line interface for GitBuddy.

- main         - Typer app and command definitions
- commands     - Command handlers shared with the interactive menu
- interactive  - Menu loop for a whole play session
- display      - Rich renderers
- helpers      - Wiring, logging and error handling
"""

from __future__ import annotations

from .main import app

__all__ = ["app"]
