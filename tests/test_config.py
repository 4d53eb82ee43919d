from __future__ import annotations

from pathlib import Path

import pytest

from gitbuddy.config import Config, config_path
from gitbuddy.constants import DEFAULT_FOCUS_MINUTES, DEFAULT_MARKER_PATTERNS
from gitbuddy.exceptions import ConfigurationError, GitBuddyError


def test_defaults_without_file(tmp_path: Path):
    config = Config.load(tmp_path / "missing.toml")

    assert config.pet.default_name == "Buddy"
    assert config.focus.default_minutes == DEFAULT_FOCUS_MINUTES
    assert config.scanner.marker_patterns == DEFAULT_MARKER_PATTERNS


def test_environment_overrides_locations(gitbuddy_env: Path):
    config = Config()

    assert config_path() == gitbuddy_env / "config" / "config.toml"
    assert config.state.path == gitbuddy_env / "state" / "state.json"


def test_dump_and_load_round_trip(tmp_path: Path):
    path = tmp_path / "config.toml"
    config = Config()
    config.set_value("pet.default_name", "Biscuit")
    config.set_value("scanner.timeout_seconds", "9")
    config.dump(path)

    loaded = Config.load(path)

    assert loaded.pet.default_name == "Biscuit"
    assert loaded.scanner.timeout_seconds == 9


def test_dump_backs_up_existing_file(tmp_path: Path):
    path = tmp_path / "config.toml"
    Config().dump(path)
    Config().dump(path)

    assert list(tmp_path.glob("config.*.bak"))


def test_set_value_coerces_lists():
    config = Config()
    config.set_value("scanner.marker_patterns", "TODO, HACK ,XXX")

    assert config.get_value("scanner.marker_patterns") == ["TODO", "HACK", "XXX"]


@pytest.mark.parametrize(
    "key, value, message",
    [
        ("pet", "x", "Invalid key format"),
        ("kennel.size", "3", "Invalid section"),
        ("pet.colour", "brown", "Invalid field"),
        ("focus.default_minutes", "soon", "Cannot convert"),
        ("focus.default_minutes", "0", "Validation error"),
        ("scanner.marker_patterns", " , ", "Validation error"),
    ],
)
def test_set_value_rejects_bad_input(key, value, message):
    with pytest.raises(ConfigurationError, match=message):
        Config().set_value(key, value)


def test_state_filename_must_be_bare(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text('[state]\nfilename = "../escape.json"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid configuration"):
        Config.load(path)


def test_unparseable_file_is_reported(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text("[pet\nname =", encoding="utf-8")

    with pytest.raises(ValueError, match="Failed to parse"):
        Config.load(path)


def test_configuration_errors_are_value_errors():
    error = ConfigurationError("bad")

    assert isinstance(error, ValueError)
    assert isinstance(error, GitBuddyError)
