"""JSON persistence of the pet record."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from ..config import Config
from ..core import utils
from ..exceptions import PersistenceCorruptError, PersistenceError
from .schema import DailyCounters, PetState, migrate

logger = logging.getLogger(__name__)


class StateStore:
    """Load and save the single pet record.

    Writes are last-writer-wins; the file is replaced atomically so a crash
    mid-write never leaves half a record behind.
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: Location of the state JSON file
        """
        self.path = Path(path).expanduser()
        self.recovered_from_corruption = False

    @classmethod
    def from_config(cls, config: Config) -> "StateStore":
        return cls(config.state.path)

    def exists(self) -> bool:
        return self.path.exists()

    def load_strict(self) -> Optional[PetState]:
        """Load the record, raising on corruption.

        Returns:
            PetState, or ``None`` when no record exists

        Raises:
            PersistenceCorruptError: If the file cannot be decoded or validated
            PersistenceError: If the file cannot be read
        """
        if not self.path.exists():
            return None

        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Failed to read {self.path}: {exc}") from exc

        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PersistenceCorruptError(f"State file is not valid JSON: {exc}") from exc

        if not isinstance(raw, dict):
            raise PersistenceCorruptError("State file does not contain an object")

        try:
            return migrate(raw)
        except (ValidationError, ValueError, KeyError, TypeError) as exc:
            raise PersistenceCorruptError(f"State file failed validation: {exc}") from exc

    def load(self) -> Optional[PetState]:
        """Load the record, treating a corrupt file as a first run."""
        try:
            state = self.load_strict()
        except PersistenceCorruptError as exc:
            logger.warning("Ignoring corrupt state at %s: %s", self.path, exc)
            self.recovered_from_corruption = True
            return None
        return state

    def save(self, state: PetState) -> None:
        """Persist ``state`` as pretty-printed, key-sorted JSON.

        Raises:
            PersistenceError: If the file cannot be written
        """
        payload = json.dumps(state.model_dump(mode="json"), indent=2, sort_keys=True, ensure_ascii=False)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".state-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload + "\n")
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError(f"Failed to write {self.path}: {exc}") from exc

        logger.debug("Saved pet state to %s", self.path)

    def reset(self) -> bool:
        """Delete the record. Returns ``True`` if one existed."""
        if not self.path.exists():
            return False
        try:
            self.path.unlink()
        except OSError as exc:
            raise PersistenceError(f"Failed to delete {self.path}: {exc}") from exc
        logger.info("Deleted pet state at %s", self.path)
        return True

    def create(self, name: str) -> PetState:
        """Create and save a brand new pet."""
        moment = utils.now()
        state = PetState(
            name=name,
            last_visit=moment,
            created_at=moment,
            daily_counters=DailyCounters.for_day(utils.today_iso(moment)),
        )
        self.save(state)
        logger.info("Created new pet %r", state.name)
        return state

    def update(self, state: PetState, **changes: Any) -> PetState:
        """Merge ``changes`` into ``state``, validate, save and return it.

        ``created_at`` never changes after creation.

        Raises:
            PersistenceError: If validation or writing fails
        """
        changes.pop("created_at", None)
        merged = {**state.model_dump(), **{key: _plain(value) for key, value in changes.items()}}
        try:
            updated = PetState.model_validate(merged)
        except ValidationError as exc:
            raise PersistenceError(f"Invalid state update: {exc}") from exc
        self.save(updated)
        return updated


def _plain(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump()
    return value


__all__ = ["StateStore"]
