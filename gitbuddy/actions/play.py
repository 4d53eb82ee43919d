"""Play activities that do not run git commands."""

from __future__ import annotations

import random
from typing import List, Optional

from ..constants import BELLY_RUB_MESSAGES, FUN_FACT_FALLBACK, FUN_FACT_TEMPLATES
from ..core.models import FunStats

PLAY_ACTIONS = ("trick", "fetch", "belly")


def fun_facts(stats: FunStats) -> List[str]:
    """Every fun fact the statistics can support."""
    facts: List[str] = []
    if stats.repo_age_days:
        facts.append(FUN_FACT_TEMPLATES["age"].format(days=stats.repo_age_days))
    if stats.total_commits:
        facts.append(FUN_FACT_TEMPLATES["commits"].format(commits=stats.total_commits))
    if stats.avg_message_length:
        facts.append(FUN_FACT_TEMPLATES["message_length"].format(length=stats.avg_message_length))
    if stats.top_extension_count:
        facts.append(
            FUN_FACT_TEMPLATES["extension"].format(
                extension=stats.top_extension, count=stats.top_extension_count
            )
        )
    return facts


def pick_fun_fact(stats: FunStats, rng: Optional[random.Random] = None) -> str:
    facts = fun_facts(stats)
    if not facts:
        return FUN_FACT_FALLBACK
    return (rng or random).choice(facts)


def belly_rub_message(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(BELLY_RUB_MESSAGES)


__all__ = ["PLAY_ACTIONS", "belly_rub_message", "fun_facts", "pick_fun_fact"]
