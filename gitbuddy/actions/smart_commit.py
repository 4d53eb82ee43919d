"""Conventional commit suggestions from staged changes."""

from __future__ import annotations

import re
from collections import Counter
from typing import Dict, List, Optional, Pattern

from ..constants import SCAN_LIMITS
from ..core.models import CommitSuggestion, StagedDiffSummary, StagedFileChange

FILE_PATTERNS: Dict[str, Pattern[str]] = {
    "test": re.compile(r"\.(test|spec)\.(ts|js|tsx|jsx)$|(^|/)test_[^/]+\.py$", re.IGNORECASE),
    "config": re.compile(r"\.(json|yml|yaml|toml|ini|env|cfg)$|config", re.IGNORECASE),
    "docs": re.compile(r"\.(md|txt|rst)$|README|CHANGELOG|LICENSE", re.IGNORECASE),
    "style": re.compile(r"\.(css|scss|less|sass|styled)", re.IGNORECASE),
    "ci": re.compile(r"\.github|\.gitlab|circleci|Dockerfile|docker-compose", re.IGNORECASE),
}

# Config-only changes are housekeeping
FILE_TYPES = {"test": "test", "config": "chore", "docs": "docs", "style": "style", "ci": "ci"}

CONTENT_PATTERNS: Dict[str, Pattern[str]] = {
    "fix": re.compile(r"fix(?:ed|es|ing)?|bug|patch|issue|error|crash|wrong|broken", re.IGNORECASE),
    "feat": re.compile(r"add(?:ed|s|ing)?|new|create|implement|introduce|feature", re.IGNORECASE),
    "refactor": re.compile(r"refactor|rename|move|restructure|reorganize|clean", re.IGNORECASE),
    "docs": re.compile(r"document|readme|comment|docstring|jsdoc", re.IGNORECASE),
    "test": re.compile(r"test|spec|describe|it\(|expect\(|assert", re.IGNORECASE),
    "style": re.compile(r"format|indent|whitespace|lint|prettier|eslint|black|ruff", re.IGNORECASE),
    "chore": re.compile(r"package\.json|lock|dependencies|upgrade|update|bump|version", re.IGNORECASE),
    "perf": re.compile(r"performance|optimi[sz]e|cache|speed|faster|memo", re.IGNORECASE),
    "remove": re.compile(r"delete|remove|drop|deprecate", re.IGNORECASE),
}

ACTION_VERBS = {
    "feat": "add",
    "fix": "fix",
    "docs": "update",
    "style": "format",
    "refactor": "refactor",
    "test": "add tests for",
    "chore": "update",
    "perf": "optimize",
    "remove": "remove",
    "ci": "update",
}


def detect_type(files: List[str], diff_text: str) -> str:
    """Pick the commit type.

    A file-name match scores 1; each content keyword hit in the diff scores 1
    for its type. The highest score wins, earlier patterns winning ties.
    """
    detected = "chore"
    best = 0

    for path in files:
        for kind, pattern in FILE_PATTERNS.items():
            if best < 1 and pattern.search(path):
                detected, best = FILE_TYPES[kind], 1

    for kind, pattern in CONTENT_PATTERNS.items():
        hits = sum(1 for _ in pattern.finditer(diff_text))
        if hits > best:
            detected, best = kind, hits

    return detected


def detect_scope(files: List[str]) -> Optional[str]:
    """Most common top-level directory, looking inside ``src/``."""
    dirs: Counter[str] = Counter()
    for path in files:
        parts = path.split("/")
        if len(parts) > 1:
            dirs[parts[1] if parts[0] == "src" and len(parts) > 2 else parts[0]] += 1
    if not dirs:
        return None
    # most_common keeps insertion order for ties
    return dirs.most_common(1)[0][0]


def generate_description(commit_type: str, files: List[str], additions: int, deletions: int) -> str:
    main_file = "code"
    if files:
        main_file = re.sub(r"\.[^.]+$", "", files[0].split("/")[-1]) or "code"

    verb = ACTION_VERBS.get(commit_type, "update")
    if len(files) == 1:
        return f"{verb} {main_file}"
    if additions > deletions * 2:
        return f"{verb} {main_file} and related files"
    if deletions > additions * 2:
        return f"remove unused code from {main_file}"
    return f"{verb} {main_file} ({len(files)} files)"


def generate_body(changes: List[StagedFileChange]) -> List[str]:
    """One bullet per changed file, capped, with an overflow line."""
    limit = SCAN_LIMITS["commit_body_files"]
    bullets: List[str] = []
    for change in changes[:limit]:
        short = "/".join(change.file.split("/")[-2:])
        if change.additions > 0 and change.deletions > 0:
            bullets.append(f"Update {short}")
        elif change.additions > 0:
            bullets.append(f"Add {short}")
        elif change.deletions > 0:
            bullets.append(f"Remove from {short}")

    if len(changes) > limit:
        bullets.append(f"...and {len(changes) - limit} more files")
    return bullets


def suggest_commit(summary: StagedDiffSummary) -> Optional[CommitSuggestion]:
    """Build a commit suggestion, or ``None`` when nothing is staged."""
    if summary.is_empty:
        return None

    files = [change.file for change in summary.files]
    commit_type = detect_type(files, summary.diff_text)
    return CommitSuggestion(
        type=commit_type,
        scope=detect_scope(files),
        description=generate_description(commit_type, files, summary.additions, summary.deletions),
        body=generate_body(summary.files),
        files_changed=list(summary.files),
    )


__all__ = [
    "detect_scope",
    "detect_type",
    "generate_body",
    "generate_description",
    "suggest_commit",
]
