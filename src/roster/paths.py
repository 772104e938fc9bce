"""
Path derivation for the roster, its pending output, and its dated backups.

Layout in the roster's directory:

    roster.csv                 active roster
    roster.csv.out             pending roster written by the external runner
    2024-09-03.roster.csv      backup taken when rotating on 2024-09-03
"""

import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List

OUTPUT_SUFFIX = ".out"

_BACKUP_DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})\.")


@dataclass(frozen=True)
class RosterPaths:
    """
    The file paths derived from one roster path.

    Attributes:
        roster: The active roster CSV.
    """
    roster: Path

    @property
    def output(self) -> Path:
        """The pending roster: the roster path with `.out` appended."""
        return self.roster.with_name(self.roster.name + OUTPUT_SUFFIX)

    def dated_backup(self, day: date | str) -> Path:
        """
        Backup path for the given day, next to the roster.

        Args:
            day: A date, or an already formatted `YYYY-MM-DD` string.

        Returns:
            e.g. `/teaching/2024-09-03.roster.csv` for `/teaching/roster.csv`.
        """
        stamp = day.isoformat() if isinstance(day, date) else day
        return self.roster.with_name(f"{stamp}.{self.roster.name}")

    def list_backups(self) -> List[Path]:
        """
        Return the existing dated backups of this roster, oldest first.

        Only files named `<YYYY-MM-DD>.<roster name>` count, so backups of
        other rosters in the same directory are ignored.
        """
        directory = self.roster.parent
        if not directory.is_dir():
            return []

        backups = []
        for candidate in directory.iterdir():
            match = _BACKUP_DATE_RE.match(candidate.name)
            if match is None or not candidate.is_file():
                continue
            if candidate.name[match.end():] != self.roster.name:
                continue
            try:
                date.fromisoformat(match.group(1))
            except ValueError:
                continue
            backups.append(candidate)

        return sorted(backups, key=lambda p: p.name)
