"""Configuration utilities for the GitBuddy CLI."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

try:
    import tomllib as tomli  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes
    import tomli  # type: ignore[no-redef]
from pydantic import BaseModel, Field, ValidationError, field_validator
from tomli_w import dump as toml_dump

from .constants import (
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_MARKER_PATTERNS,
    GIT_TIMEOUTS,
    IDLE_SLEEP_SECONDS,
)
from .exceptions import ConfigurationError

CONFIG_VERSION = "1.0.0"
CONFIG_FILENAME = "config.toml"
STATE_FILENAME = "state.json"


def config_path() -> Path:
    """Config file location, honouring $GITBUDDY_CONFIG_DIR."""
    base = os.getenv("GITBUDDY_CONFIG_DIR")
    directory = Path(base) if base else Path.home() / ".config" / "gitbuddy"
    return directory / CONFIG_FILENAME


def default_state_dir() -> str:
    """State directory, honouring $GITBUDDY_HOME."""
    return os.getenv("GITBUDDY_HOME") or str(Path.home() / ".gitbuddy")


class StateConfig(BaseModel):
    """Where the pet state file lives."""

    directory: str = Field(default_factory=default_state_dir)
    filename: str = STATE_FILENAME

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Validate that the filename has no directory part."""
        if not v or Path(v).name != v:
            raise ValueError(f"filename must be a bare file name, got: {v!r}")
        return v

    @property
    def path(self) -> Path:
        return Path(self.directory).expanduser() / self.filename


class ScannerConfig(BaseModel):
    """Configuration for git repository scanning."""

    timeout_seconds: int = GIT_TIMEOUTS["default"]
    marker_patterns: List[str] = list(DEFAULT_MARKER_PATTERNS)

    @field_validator("timeout_seconds")
    @classmethod
    def validate_positive(cls, v: int, info) -> int:
        """Validate that numeric fields are positive."""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive, got {v}")
        return v

    @field_validator("marker_patterns")
    @classmethod
    def validate_patterns(cls, v: List[str]) -> List[str]:
        """Drop blank patterns and require at least one."""
        patterns = [pattern.strip() for pattern in v if pattern.strip()]
        if not patterns:
            raise ValueError("marker_patterns must contain at least one pattern")
        return patterns


class FocusConfig(BaseModel):
    """Defaults for focus sessions."""

    default_minutes: int = DEFAULT_FOCUS_MINUTES

    @field_validator("default_minutes")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate that the session length is positive."""
        if v <= 0:
            raise ValueError(f"default_minutes must be positive, got {v}")
        return v


class PetConfig(BaseModel):
    """Pet defaults."""

    default_name: str = "Buddy"
    idle_seconds: int = IDLE_SLEEP_SECONDS

    @field_validator("default_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that the default name is not blank."""
        if not v.strip():
            raise ValueError("default_name must not be blank")
        return v.strip()

    @field_validator("idle_seconds")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate that idle threshold is positive."""
        if v <= 0:
            raise ValueError(f"idle_seconds must be positive, got {v}")
        return v


@dataclass(slots=True)
class Config:
    """Top-level configuration container."""

    version: str = CONFIG_VERSION
    state: StateConfig = field(default_factory=StateConfig)
    scanner: ScannerConfig = field(default_factory=ScannerConfig)
    focus: FocusConfig = field(default_factory=FocusConfig)
    pet: PetConfig = field(default_factory=PetConfig)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration data from disk.

        Args:
            path: Optional override for the configuration file path.

        Returns:
            Config: The loaded configuration object.

        Raises:
            ConfigurationError: If configuration file is corrupted or invalid.
        """

        path = path or config_path()
        if not path.exists():
            return cls()

        try:
            with path.open("rb") as handle:
                raw: Dict[str, Any] = tomli.load(handle)
        except Exception as exc:
            raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

        version = raw.get("version", CONFIG_VERSION)

        try:
            state = StateConfig(**raw.get("state", {}))
            scanner = ScannerConfig(**raw.get("scanner", {}))
            focus = FocusConfig(**raw.get("focus", {}))
            pet = PetConfig(**raw.get("pet", {}))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

        return cls(version=version, state=state, scanner=scanner, focus=focus, pet=pet)

    def dump(self, path: Optional[Path] = None, backup: bool = True) -> None:
        """Persist the configuration to disk.

        Args:
            path: Path to save the configuration file.
            backup: If True and config file exists, create a backup before overwriting.
        """

        path = path or config_path()
        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            backup_path = path.parent / f"{path.stem}.{timestamp}.bak"
            shutil.copy2(path, backup_path)

        with path.open("wb") as handle:
            toml_dump(self.to_display_dict(), handle)

    def to_display_dict(self) -> Dict[str, Any]:
        """Return a serialisable representation for display and persistence."""

        return {
            "version": self.version,
            "state": self.state.model_dump(),
            "scanner": self.scanner.model_dump(),
            "focus": self.focus.model_dump(),
            "pet": self.pet.model_dump(),
        }

    def _sections(self) -> Dict[str, BaseModel]:
        return {
            "state": self.state,
            "scanner": self.scanner,
            "focus": self.focus,
            "pet": self.pet,
        }

    def _resolve(self, key: str) -> tuple[BaseModel, str]:
        parts = key.split(".")
        if len(parts) != 2:
            raise ConfigurationError(f"Invalid key format '{key}'. Expected format: section.field")

        section, field_name = parts
        sections = self._sections()

        if section not in sections:
            valid_sections = ", ".join(sections.keys())
            raise ConfigurationError(f"Invalid section '{section}'. Valid sections: {valid_sections}")

        config_obj = sections[section]
        if field_name not in type(config_obj).model_fields:
            valid_fields = ", ".join(type(config_obj).model_fields.keys())
            raise ConfigurationError(f"Invalid field '{field_name}' for section '{section}'. Valid fields: {valid_fields}")

        return config_obj, field_name

    def set_value(self, key: str, value: str) -> None:
        """Set a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., 'scanner.timeout_seconds')
            value: Value to set (will be converted to appropriate type)

        Raises:
            ConfigurationError: If key is invalid or value cannot be converted
        """
        config_obj, field_name = self._resolve(key)
        field_type = type(config_obj).model_fields[field_name].annotation

        try:
            if field_type is int:
                converted_value: Any = int(value)
            elif field_type is float:
                converted_value = float(value)
            elif field_type is bool:
                converted_value = value.lower() in ("true", "1", "yes", "on")
            elif field_type in (List[str], list[str]):
                converted_value = [item.strip() for item in value.split(",")]
            else:
                converted_value = value
        except (ValueError, TypeError) as exc:
            raise ConfigurationError(f"Cannot convert '{value}' to {field_type} for {key}") from exc

        current_data = config_obj.model_dump()
        current_data[field_name] = converted_value
        try:
            validated_model = type(config_obj).model_validate(current_data)
        except ValidationError as exc:
            error_msg = "; ".join(
                f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
            )
            raise ConfigurationError(f"Validation error for {key}: {error_msg}") from exc

        for name in type(validated_model).model_fields:
            setattr(config_obj, name, getattr(validated_model, name))

    def get_value(self, key: str) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., 'pet.default_name')

        Returns:
            The configuration value

        Raises:
            ConfigurationError: If key is invalid
        """
        config_obj, field_name = self._resolve(key)
        return getattr(config_obj, field_name)
