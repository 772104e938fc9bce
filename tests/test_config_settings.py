"""
Tests for src/config/settings.py

Environment variables are set with monkeypatch so tests never depend on the
developer's shell or .env file.
"""

from pathlib import Path

import pytest

from src.config import settings as settings_module
from src.config.settings import (
    DEFAULT_ROSTER_PATH,
    RosterSettings,
    Settings,
    get_settings,
    parse_bool,
    reset_settings,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all ROSTER_* variables and the cached settings singleton."""
    for name in ("ROSTER_PATH", "ROSTER_RUNNER", "ROSTER_ARCHIVE"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield monkeypatch
    reset_settings()


def test_defaults_when_environment_is_empty(clean_env):
    """Test that the built-in roster path and runner are used by default."""
    settings = RosterSettings.from_env()

    assert settings.roster_path == Path(DEFAULT_ROSTER_PATH).expanduser()
    assert settings.runner == ("cargo", "run")
    assert settings.archive_on_rotate is True


def test_roster_path_expands_home(clean_env):
    """Test that a leading ~ in ROSTER_PATH is expanded."""
    clean_env.setenv("ROSTER_PATH", "~/s25/roster.csv")

    settings = RosterSettings.from_env()

    assert settings.roster_path == Path.home() / "s25" / "roster.csv"
    assert "~" not in str(settings.roster_path)


def test_runner_is_split_shell_style(clean_env):
    """Test that ROSTER_RUNNER is split like a shell command line."""
    clean_env.setenv("ROSTER_RUNNER", "cargo run --release --bin 'particip tool'")

    settings = RosterSettings.from_env()

    assert settings.runner == ("cargo", "run", "--release", "--bin", "particip tool")


@pytest.mark.parametrize("value, expected", [
    ("false", False),
    ("0", False),
    ("No", False),
    ("TRUE", True),
    ("yes", True),
])
def test_archive_flag_parsing(clean_env, value, expected):
    """Test that ROSTER_ARCHIVE accepts common boolean spellings."""
    clean_env.setenv("ROSTER_ARCHIVE", value)
    assert RosterSettings.from_env().archive_on_rotate is expected


def test_invalid_archive_flag_raises(clean_env):
    """Test that an unparseable ROSTER_ARCHIVE fails at startup."""
    clean_env.setenv("ROSTER_ARCHIVE", "sometimes")

    with pytest.raises(ValueError, match="ROSTER_ARCHIVE"):
        RosterSettings.from_env()


def test_empty_roster_path_raises(clean_env):
    clean_env.setenv("ROSTER_PATH", "   ")

    with pytest.raises(ValueError, match="ROSTER_PATH"):
        RosterSettings.from_env()


def test_empty_runner_raises(clean_env):
    clean_env.setenv("ROSTER_RUNNER", "")

    with pytest.raises(ValueError, match="ROSTER_RUNNER"):
        RosterSettings.from_env()


def test_unbalanced_quotes_in_runner_raise(clean_env):
    clean_env.setenv("ROSTER_RUNNER", "cargo run 'oops")

    with pytest.raises(ValueError, match="ROSTER_RUNNER"):
        RosterSettings.from_env()


def test_settings_are_immutable(tmp_path):
    """Test that settings can't be changed after construction."""
    settings = RosterSettings(roster_path=tmp_path / "roster.csv")

    with pytest.raises(Exception):
        settings.roster_path = tmp_path / "other.csv"


def test_parse_bool_rejects_garbage():
    with pytest.raises(ValueError):
        parse_bool("X", "maybe")


def test_get_settings_is_cached(clean_env, tmp_path):
    """Test that get_settings() loads once and then reuses the same object."""
    clean_env.setenv("ROSTER_PATH", str(tmp_path / "roster.csv"))

    first = get_settings()
    clean_env.setenv("ROSTER_PATH", str(tmp_path / "changed.csv"))
    second = get_settings()

    assert first is second
    assert isinstance(first, Settings)
    assert first.roster.roster_path == tmp_path / "roster.csv"


def test_reset_settings_reloads_environment(clean_env, tmp_path):
    clean_env.setenv("ROSTER_PATH", str(tmp_path / "roster.csv"))
    get_settings()

    clean_env.setenv("ROSTER_PATH", str(tmp_path / "changed.csv"))
    reset_settings()

    assert get_settings().roster.roster_path == tmp_path / "changed.csv"
    assert settings_module._default_settings is not None
