"""
Roster rotation and pending-output removal.

**Conceptual**: After the external runner writes `roster.csv.out`, rotation
promotes it to be the active `roster.csv`. Two modes exist:

  - archive=True: the old roster is first renamed to `<date>.roster.csv`,
    then `.out` is renamed onto the roster path.
  - archive=False: `.out` is renamed straight onto the roster path and the
    old roster is discarded.

All source files are checked before the first rename, so a missing file
fails the operation with nothing moved. The two renames of the archive mode
are still not atomic as a pair: if the second rename fails, the old roster
sits only in its backup, and the raised error names it.
"""

from pathlib import Path
from typing import Optional

from src.roster.errors import (
    BackupExistsError,
    FilesystemError,
    RosterFileMissingError,
)
from src.roster.paths import RosterPaths
from src.utils.time import Clock, RealClock, date_stamp


def _require_file(path: Path) -> None:
    if not path.is_file():
        raise RosterFileMissingError(path)


def _rename(source: Path, target: Path) -> None:
    # Path.replace overwrites the target, like mv.
    try:
        source.replace(target)
    except FileNotFoundError:
        raise RosterFileMissingError(source)
    except OSError as e:
        raise FilesystemError(f"Failed to rename {source} -> {target}: {e}")


def rotate_roster(
    paths: RosterPaths,
    archive: bool = True,
    clock: Optional[Clock] = None,
) -> Optional[Path]:
    """
    Replace the active roster with the pending `.out` roster.

    Args:
        paths: Roster paths to operate on.
        archive: If True, keep the previous roster as a dated backup.
                 If False, the previous roster (if any) is overwritten.
        clock: Time source for the backup date. Defaults to RealClock().

    Returns:
        The backup path when archive=True, otherwise None.

    Raises:
        RosterFileMissingError: If `.out` is missing, or archive=True and the
                                roster itself is missing. Nothing is renamed.
        BackupExistsError: If archive=True and today's backup already exists.
        FilesystemError: If a rename fails at the OS level.
    """
    _require_file(paths.output)

    if not archive:
        _rename(paths.output, paths.roster)
        return None

    _require_file(paths.roster)

    backup = paths.dated_backup(date_stamp(clock or RealClock()))
    if backup.exists():
        raise BackupExistsError(backup)

    _rename(paths.roster, backup)
    try:
        _rename(paths.output, paths.roster)
    except FilesystemError as e:
        raise FilesystemError(
            f"{e}. The previous roster was archived to {backup} "
            f"and {paths.roster} is now missing; restore it from the backup."
        )

    return backup


def remove_output(paths: RosterPaths) -> Path:
    """
    Delete the pending `.out` roster.

    Returns:
        The deleted path.

    Raises:
        RosterFileMissingError: If `.out` does not exist.
        FilesystemError: If deletion fails at the OS level.
    """
    try:
        paths.output.unlink()
    except FileNotFoundError:
        raise RosterFileMissingError(paths.output)
    except OSError as e:
        raise FilesystemError(f"Failed to delete {paths.output}: {e}")
    return paths.output
