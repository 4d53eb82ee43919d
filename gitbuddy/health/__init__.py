"""Repository health scoring."""

from .scoring import HealthScorer, hp_from_health

__all__ = ["HealthScorer", "hp_from_health"]
