"""
Error taxonomy for roster operations.

**Conceptual**: Every failure a roster command can hit is a RosterError.
Each error carries the process exit code the command-line entry point uses
for it, so library code only raises and the entry point only maps errors
to messages and exit codes.

  - UsageError: unrecognized or missing subcommand (exit 1).
  - ExternalCommandFailure: the runner exited nonzero (exit = runner's code).
  - RunnerNotFoundError: the runner executable is missing (exit 127).
  - RunnerNotExecutableError: the runner exists but cannot run (exit 126).
  - FilesystemError: a rename/delete failed (exit 1).
  - RosterFileMissingError: the source of a rename/delete does not exist.
  - BackupExistsError: today's dated backup is already on disk.
  - RosterFormatError: a roster file cannot be parsed (exit 1).
"""

from pathlib import Path


class RosterError(Exception):
    """Base class for roster command failures."""

    exit_code = 1


class UsageError(RosterError):
    """Raised when the subcommand is missing or not recognized."""
    pass


class ExternalCommandFailure(RosterError):
    """
    Raised when the external runner exits with a nonzero status.

    The runner's exit code is propagated verbatim as this error's exit_code.
    A runner killed by signal N (returncode -N) maps to 128 + N, as in a shell.
    """

    def __init__(self, command, returncode: int):
        self.command = tuple(command)
        self.returncode = returncode
        self.exit_code = returncode if returncode >= 0 else 128 - returncode
        super().__init__(
            f"Command {' '.join(self.command)!r} exited with status {returncode}"
        )


class RunnerNotFoundError(ExternalCommandFailure):
    """Raised when the runner executable cannot be found (shell code 127)."""

    def __init__(self, command):
        super().__init__(command, 127)
        self.args = (f"Command not found: {self.command[0]!r}",)


class RunnerNotExecutableError(ExternalCommandFailure):
    """Raised when the runner exists but can't be executed (shell code 126)."""

    def __init__(self, command, cause: OSError):
        super().__init__(command, 126)
        self.args = (f"Cannot execute {self.command[0]!r}: {cause.strerror or cause}",)


class FilesystemError(RosterError):
    """Raised when renaming or deleting a roster file fails."""
    pass


class RosterFileMissingError(FilesystemError):
    """Raised when the source file of a rename or delete does not exist."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"No such file: {self.path}")


class BackupExistsError(FilesystemError):
    """Raised when the dated backup for today is already on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(
            f"Backup already exists: {self.path}. "
            "Move or delete it before rotating again today."
        )


class RosterFormatError(RosterError):
    """Raised when a roster file cannot be parsed as a tab-delimited roster."""
    pass
