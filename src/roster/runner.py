"""
Invocation of the external roster-processing command.

The runner is opaque: it receives the roster path as its only extra argument,
inherits stdin/stdout/stderr, and is expected to write `<roster>.out`. Its
exit status is propagated unchanged. There are no retries.
"""

import subprocess
from pathlib import Path
from typing import List, Sequence

from src.roster.errors import (
    ExternalCommandFailure,
    RunnerNotExecutableError,
    RunnerNotFoundError,
)


def build_command(runner: Sequence[str], roster_path: Path) -> List[str]:
    """Return the argv for running `runner` on `roster_path`."""
    return [*runner, str(roster_path)]


def run_external(command: Sequence[str]) -> int:
    """
    Run a command built by build_command().

    Args:
        command: Full argv, roster path included as the last element.

    Returns:
        0 when the command succeeds.

    Raises:
        RunnerNotFoundError: If the executable does not exist (exit 127).
        RunnerNotExecutableError: If it exists but can't be executed (exit 126).
        ExternalCommandFailure: If the command exits nonzero; its exit_code
                                is the command's exit code.
    """
    command = list(command)
    try:
        completed = subprocess.run(command)
    except FileNotFoundError:
        raise RunnerNotFoundError(command)
    except OSError as e:
        raise RunnerNotExecutableError(command, e)

    if completed.returncode != 0:
        raise ExternalCommandFailure(command, completed.returncode)

    return completed.returncode
