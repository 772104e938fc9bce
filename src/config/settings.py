"""
Configuration settings for the roster rotator.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). All settings are validated
at startup, so a bad value is reported before any file is renamed or any
external command is started.

The roster path is fixed per environment: it comes from ROSTER_PATH (or the
built-in default) and is never taken from a command-line flag.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


DEFAULT_ROSTER_PATH = "~/docs/teaching/f24_3411/roster.csv"
DEFAULT_RUNNER = "cargo run"

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


def parse_bool(name: str, value: str) -> bool:
    """
    Parse a boolean environment value.

    Accepts true/1/yes and false/0/no (case-insensitive).

    Raises:
        ValueError: If the value is anything else.
    """
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(
        f"{name} must be one of {_TRUE_VALUES + _FALSE_VALUES}, got: {value!r}"
    )


@dataclass(frozen=True)
class RosterSettings:
    """
    Configuration for the roster file and the external runner.

    **Conceptual**: The roster is a single CSV file maintained by an external
    program. `run` hands its path to that program, `rotate` promotes the
    program's `.out` file into place, and `rm` discards it. These settings
    pin down which file and which program.

    Attributes:
        roster_path: Path to the active roster CSV (already `~`-expanded).
        runner: The external command as an argv tuple, without the roster path.
                The roster path is appended at invocation time.
        archive_on_rotate: If True (default), `rotate` keeps a dated backup of
                           the previous roster. If False, the previous roster
                           is overwritten.
    """
    roster_path: Path
    runner: Tuple[str, ...] = tuple(shlex.split(DEFAULT_RUNNER))
    archive_on_rotate: bool = True

    def __post_init__(self):
        """Validate settings after initialization."""
        if not str(self.roster_path).strip():
            raise ValueError(
                "ROSTER_PATH is required but empty. "
                "Please set it in your .env file or environment variables."
            )
        if not self.runner:
            raise ValueError(
                "ROSTER_RUNNER is required but empty. "
                "Please set it in your .env file (e.g. ROSTER_RUNNER='cargo run')."
            )

    @classmethod
    def from_env(cls) -> "RosterSettings":
        """
        Load roster settings from environment variables.

        **Environment variables**:
          - ROSTER_PATH (optional): Path to the roster CSV.
            Defaults to "~/docs/teaching/f24_3411/roster.csv".
          - ROSTER_RUNNER (optional): Command that processes the roster,
            split shell-style. Defaults to "cargo run".
          - ROSTER_ARCHIVE (optional): Whether `rotate` archives the old
            roster. Defaults to "true".

        Returns:
            RosterSettings object with values loaded from environment.

        Raises:
            ValueError: If a variable is set to an empty or unparseable value.

        Usage example:
            >>> # In .env file:
            >>> # ROSTER_PATH=~/teaching/s25/roster.csv
            >>> # ROSTER_RUNNER=./target/release/particip
            >>>
            >>> settings = RosterSettings.from_env()
            >>> print(settings.roster_path.name)  # "roster.csv"
        """
        raw_path = os.getenv("ROSTER_PATH", DEFAULT_ROSTER_PATH)
        raw_runner = os.getenv("ROSTER_RUNNER", DEFAULT_RUNNER)
        archive_str = os.getenv("ROSTER_ARCHIVE", "true")

        if not raw_path.strip():
            raise ValueError(
                "ROSTER_PATH is required but empty. "
                "Please set it in your .env file or environment variables."
            )

        try:
            runner = tuple(shlex.split(raw_runner))
        except ValueError as e:
            raise ValueError(f"ROSTER_RUNNER could not be parsed: {e}")

        return cls(
            roster_path=Path(raw_path).expanduser(),
            runner=runner,
            archive_on_rotate=parse_bool("ROSTER_ARCHIVE", archive_str),
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the roster rotator.

    **Usage pattern**:
      ```python
      from src.config.settings import Settings

      settings = Settings.from_env()
      roster_settings = settings.roster
      ```

    Attributes:
        roster: Roster file and runner settings.
    """
    roster: RosterSettings

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Raises:
            ValueError: If any roster setting is invalid.
        """
        return cls(roster=RosterSettings.from_env())


# Lazily loaded on first get_settings() call.
# Tests construct Settings/RosterSettings directly instead of using this.
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from environment on first call, then cached for reuse.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds invalid roster settings.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _default_settings
    _default_settings = None
