"""
Tests for src/roster/paths.py
"""

from datetime import date
from pathlib import Path

from src.roster.paths import RosterPaths


def test_output_appends_out_suffix():
    paths = RosterPaths(Path("/teaching/f24/roster.csv"))
    assert paths.output == Path("/teaching/f24/roster.csv.out")


def test_dated_backup_lives_next_to_roster():
    """Test that the backup is <date>.<name> in the roster's own directory."""
    paths = RosterPaths(Path("/teaching/f24/roster.csv"))

    assert paths.dated_backup(date(2024, 9, 3)) == Path("/teaching/f24/2024-09-03.roster.csv")
    assert paths.dated_backup("2024-12-01") == Path("/teaching/f24/2024-12-01.roster.csv")


def test_relative_roster_path():
    paths = RosterPaths(Path("roster.csv"))

    assert paths.output == Path("roster.csv.out")
    assert paths.dated_backup("2024-09-03") == Path("2024-09-03.roster.csv")


def test_list_backups_sorted_oldest_first(tmp_path):
    paths = RosterPaths(tmp_path / "roster.csv")
    for stamp in ("2024-10-01", "2024-09-03", "2025-01-15"):
        paths.dated_backup(stamp).write_text("x")

    backups = paths.list_backups()

    assert [b.name for b in backups] == [
        "2024-09-03.roster.csv",
        "2024-10-01.roster.csv",
        "2025-01-15.roster.csv",
    ]


def test_list_backups_ignores_unrelated_files(tmp_path):
    """Test that other rosters, bad dates, and directories are not backups."""
    paths = RosterPaths(tmp_path / "roster.csv")
    paths.roster.write_text("current")
    paths.output.write_text("pending")
    (tmp_path / "2024-09-03.other.csv").write_text("x")
    (tmp_path / "2024-13-45.roster.csv").write_text("x")
    (tmp_path / "notes-2024-09-03.roster.csv").write_text("x")
    (tmp_path / "2024-09-04.roster.csv.out").write_text("x")
    (tmp_path / "2024-09-05.roster.csv").mkdir()
    paths.dated_backup("2024-09-06").write_text("x")

    assert paths.list_backups() == [tmp_path / "2024-09-06.roster.csv"]


def test_list_backups_missing_directory(tmp_path):
    paths = RosterPaths(tmp_path / "nowhere" / "roster.csv")
    assert paths.list_backups() == []
