"""
roster_rotator – Main entry point.

Thin wrapper around actions/rotate_roster.py so the tool can be run as
`python main.py <run|rotate|rm|status>` from the project root.
"""

import sys

from actions.rotate_roster import main

if __name__ == "__main__":
    sys.exit(main())
