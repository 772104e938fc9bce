"""
Read-only roster inspection for the `status` command.

**Conceptual**: Before rotating, it is useful to see whether the runner
produced a `.out` file and whether it holds about as many students as the
active roster. This module reads roster files through pandas and counts
records. It never modifies a roster.

**Roster format**: tab-delimited, `#` starts a comment line, rows may be
ragged. The header names `name`, `email`, `participation_score`,
`deferrals` and `absent`; only `email` is needed here, to skip blank rows.
"""

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import pandas as pd

from src.roster.errors import RosterFormatError
from src.roster.paths import RosterPaths

ROSTER_COLUMNS = [
    'name',
    'email',
    'participation_score',
    'deferrals',
    'absent',
]

KEY_COLUMN = 'email'


def _strip_comment_lines(text: str) -> str:
    """Drop lines whose first non-blank character is `#`; `#` elsewhere is data."""
    return "".join(
        line for line in text.splitlines(keepends=True)
        if not line.lstrip().startswith('#')
    )


def read_roster(path: Path | str) -> pd.DataFrame:
    """
    Read a roster file into a DataFrame.

    Args:
        path: Path to a tab-delimited roster.

    Returns:
        DataFrame with one row per student. String cells are stripped and
        rows without an email are dropped.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        RosterFormatError: If the file can't be read or parsed, or has no
                           email column.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Roster file not found: {path}")

    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise RosterFormatError(f"Failed to read roster {path}: {e}")

    try:
        df = pd.read_csv(
            io.StringIO(_strip_comment_lines(text)),
            sep='\t',
            dtype=str,
            skipinitialspace=True,
            on_bad_lines='skip',
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=ROSTER_COLUMNS)
    except pd.errors.ParserError as e:
        raise RosterFormatError(f"Failed to parse roster {path}: {e}")

    df.columns = [str(c).strip() for c in df.columns]
    if KEY_COLUMN not in df.columns:
        raise RosterFormatError(
            f"Roster {path} has no '{KEY_COLUMN}' column. "
            f"Found columns: {list(df.columns)}"
        )

    if df.empty:
        return df

    df = df.apply(lambda col: col.map(lambda v: v.strip() if isinstance(v, str) else v))
    df = df[df[KEY_COLUMN].notna() & (df[KEY_COLUMN] != '')]
    return df.reset_index(drop=True)


def count_students(path: Path | str) -> int:
    """Number of student records in a roster file."""
    return len(read_roster(path))


@dataclass(frozen=True)
class FileStatus:
    """Existence and record count of one roster file."""
    path: Path
    exists: bool
    students: Optional[int] = None

    def describe(self) -> str:
        if not self.exists:
            return f"{self.path}: missing"
        return f"{self.path}: {self.students} students"


@dataclass(frozen=True)
class RosterStatus:
    """Snapshot of the roster, its pending output, and its backups."""
    roster: FileStatus
    output: FileStatus
    backups: List[Path] = field(default_factory=list)

    @property
    def ready_to_rotate(self) -> bool:
        return self.output.exists


def _file_status(path: Path) -> FileStatus:
    if not path.is_file():
        return FileStatus(path=path, exists=False)
    return FileStatus(path=path, exists=True, students=count_students(path))


def collect_status(paths: RosterPaths) -> RosterStatus:
    """
    Build a RosterStatus for the given roster.

    Raises:
        RosterFormatError: If an existing roster or `.out` file can't be parsed.
    """
    return RosterStatus(
        roster=_file_status(paths.roster),
        output=_file_status(paths.output),
        backups=paths.list_backups(),
    )
