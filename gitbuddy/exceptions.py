"""Custom exceptions for the GitBuddy toolkit."""

from __future__ import annotations


class GitBuddyError(Exception):
    """Base exception for all GitBuddy errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GitBuddyError, ValueError):
    """Raised when the configuration file or a configuration key is invalid."""
    pass


# =============================================================================
# Repository Errors
# =============================================================================


class RepositoryUnavailableError(GitBuddyError):
    """Raised when no git repository is detected in the working directory."""

    def __init__(self, message: str, path: str | None = None):
        """Initialize repository error.

        Args:
            message: Error message
            path: Directory that was inspected
        """
        super().__init__(message)
        self.path = path


class GitCommandError(GitBuddyError):
    """Raised by the command runner when a git invocation fails.

    The repository observer absorbs this error and returns defaults, so it
    never crosses into scoring or progression code.
    """

    def __init__(self, message: str, command: list[str] | None = None, returncode: int | None = None):
        """Initialize git command error.

        Args:
            message: Error message
            command: Argument vector that was executed
            returncode: Process exit status if the process ran at all
        """
        super().__init__(message)
        self.command = command or []
        self.returncode = returncode


class GitCommandTimeoutError(GitCommandError):
    """Raised when a git command exceeds the configured timeout."""
    pass


# =============================================================================
# Persistence Errors
# =============================================================================


class PersistenceError(GitBuddyError):
    """Base exception for state storage errors."""
    pass


class PersistenceCorruptError(PersistenceError):
    """Raised when the stored pet state cannot be parsed or validated."""
    pass


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(GitBuddyError):
    """Base exception for validation errors."""
    pass


class InvalidTransitionError(ValidationError):
    """Raised when a state change would break a game invariant (e.g. negative XP)."""
    pass


class UnknownAchievementError(ValidationError):
    """Raised when an achievement id has no registered rule."""
    pass


class FeatureLockedError(ValidationError):
    """Raised when an action needs a higher pet level."""

    def __init__(self, feature: str, required_level: int):
        """Initialize locked feature error.

        Args:
            feature: Name of the gated action
            required_level: Level that unlocks it
        """
        super().__init__(f"'{feature}' unlocks at level {required_level}")
        self.feature = feature
        self.required_level = required_level
