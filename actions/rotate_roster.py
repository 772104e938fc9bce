#!/usr/bin/env python3
"""
Run the roster processor, or rotate/discard its output.

**Purpose**: The course roster lives in one CSV file (ROSTER_PATH). An
external program reads it and writes a pending roster next to it at
`<roster>.out`. This script wraps that cycle:

  run      invoke the external runner with the roster path
  rotate   promote `<roster>.out` to be the roster (keeps a dated backup
           unless --no-archive is given or ROSTER_ARCHIVE=false)
  rm       delete `<roster>.out`
  status   show the roster, the pending output, and existing backups

**Usage**:
    From project root:
    ```bash
    python actions/rotate_roster.py run
    python actions/rotate_roster.py status
    python actions/rotate_roster.py rotate
    python actions/rotate_roster.py rotate --no-archive
    python actions/rotate_roster.py rm
    ```

**Exit codes**:
  - 0: Success
  - 1: Usage error, configuration error, or missing/unmovable roster file
  - N: `run` propagates the runner's exit code (127 if it is not installed)
  - 130: Interrupted by user
"""

import argparse
import sys
import traceback
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from src.config.settings import Settings, get_settings
from src.roster.errors import RosterError, UsageError
from src.roster.paths import RosterPaths
from src.roster.rotation import remove_output, rotate_roster
from src.roster.runner import build_command, run_external
from src.roster.summary import collect_status
from src.utils.time import Clock, RealClock

COMMANDS = ("run", "rotate", "rm", "status")


class RosterArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = RosterArgumentParser(
        prog="rotate_roster",
        description="Run the roster processor, or rotate/discard its output.",
        epilog="""
Examples:
  # Process the roster; the runner writes <roster>.out
  python actions/rotate_roster.py run

  # Keep a dated backup of the old roster and promote <roster>.out
  python actions/rotate_roster.py rotate

  # Promote <roster>.out, discarding the old roster
  python actions/rotate_roster.py rotate --no-archive

  # Throw away <roster>.out
  python actions/rotate_roster.py rm
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", metavar=" | ".join(COMMANDS))
    subparsers.required = True

    subparsers.add_parser("run", help="Invoke the external runner on the roster")

    rotate_parser = subparsers.add_parser(
        "rotate", help="Replace the roster with <roster>.out"
    )
    rotate_parser.add_argument(
        "--archive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Keep the previous roster as <date>.<roster>; unset means ROSTER_ARCHIVE",
    )

    subparsers.add_parser("rm", help="Delete <roster>.out")
    subparsers.add_parser("status", help="Show roster, pending output and backups")

    return parser


def cmd_run(settings: Settings, paths: RosterPaths) -> int:
    command = build_command(settings.roster.runner, paths.roster)
    print(f"Running: {' '.join(command)}")
    run_external(command)
    if paths.output.exists():
        print(f"  ✓ Pending roster written to {paths.output}")
    else:
        print("  ✓ Runner finished")
    return 0


def cmd_rotate(settings: Settings, paths: RosterPaths, archive: Optional[bool], clock: Clock) -> int:
    if archive is None:
        archive = settings.roster.archive_on_rotate

    backup = rotate_roster(paths, archive=archive, clock=clock)
    if backup is not None:
        print(f"  ✓ Archived {paths.roster} -> {backup}")
    print(f"  ✓ Rotated {paths.output} -> {paths.roster}")
    return 0


def cmd_rm(paths: RosterPaths) -> int:
    removed = remove_output(paths)
    print(f"  ✓ Removed {removed}")
    return 0


def cmd_status(paths: RosterPaths) -> int:
    status = collect_status(paths)

    print(f"Roster:  {status.roster.describe()}")
    print(f"Pending: {status.output.describe()}")

    if status.backups:
        print(f"Backups ({len(status.backups)}):")
        for backup in status.backups:
            print(f"  {backup.name}")
    else:
        print("Backups: none")

    if status.ready_to_rotate:
        print("Ready to rotate: run `rotate` to promote the pending roster")
    else:
        print("Nothing to rotate")
    return 0


def main(
    argv: Optional[List[str]] = None,
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
) -> int:
    """
    Main entry point for the script.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:]).
        settings: Injected settings (default: loaded from environment).
        clock: Injected clock for backup dates (default: RealClock()).

    Returns:
        Process exit code.
    """
    parser = build_parser()

    try:
        try:
            args = parser.parse_args(argv)
        except UsageError as e:
            print(parser.format_usage(), end="")
            print(f"Error: {e}", file=sys.stderr)
            return e.exit_code

        if settings is None:
            try:
                settings = get_settings()
            except ValueError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1

        paths = RosterPaths(settings.roster.roster_path)

        if args.command == "run":
            return cmd_run(settings, paths)
        if args.command == "rotate":
            return cmd_rotate(settings, paths, args.archive, clock or RealClock())
        if args.command == "rm":
            return cmd_rm(paths)
        return cmd_status(paths)

    except RosterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting...")
        return 130

    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 2


if __name__ == "__main__":
    sys.exit(main())
