"""GitBuddy: a terminal dog that lives in your git repository."""

__all__ = ["__version__"]

__version__ = "0.4.0"
