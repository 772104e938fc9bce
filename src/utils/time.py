"""
Time and clock abstractions for deterministic backup naming.

This module provides a simple, testable way to obtain "now" via a clock object
rather than calling datetime.now() directly. Rotation stamps the archived
roster with today's date, so tests freeze the clock to get a known file name.
"""

from datetime import date, datetime
from typing import Protocol


class Clock(Protocol):
    """
    Abstract time source protocol.

    **Conceptual**: A Clock is any object that can answer the question "what time
    is it right now?" Code that names files by date accepts a Clock and calls
    clock.now(). In production, pass a RealClock; in tests, pass a FrozenClock.

    **Example**:
        def rotate(paths, clock: Clock):
            stamp = date_stamp(clock)
            # ... 2024-09-03.roster.csv

        rotate(paths, RealClock())
        rotate(paths, FrozenClock(datetime(2024, 9, 3)))
    """

    def now(self) -> datetime:
        """
        Return the current time according to this clock.

        Returns:
            datetime object representing "now".
        """
        ...


class RealClock:
    """
    Clock that returns the actual current system time in the local timezone.

    Backups are named after the user's calendar day, so this clock is local
    (timezone-aware, via astimezone()) rather than UTC.
    """

    def now(self) -> datetime:
        """Return the current local time from the system clock."""
        return datetime.now().astimezone()


class FrozenClock:
    """
    Clock that always returns a fixed timestamp (for deterministic tests).

    **Usage**:
        clock = FrozenClock(datetime(2024, 9, 3, 10, 0))
        clock.now()  # Always returns 2024-09-03T10:00:00
    """

    def __init__(self, fixed_now: datetime):
        """
        Initialize a FrozenClock with a fixed timestamp.

        Args:
            fixed_now: The datetime to return on every call to now().
        """
        self._fixed_now = fixed_now

    def now(self) -> datetime:
        """Return the configured fixed timestamp."""
        return self._fixed_now


def today(clock: Clock) -> date:
    """Return the calendar date of clock.now()."""
    return clock.now().date()


def date_stamp(clock: Clock) -> str:
    """
    Format today's date as an ISO `YYYY-MM-DD` string.

    Args:
        clock: Time source.

    Returns:
        e.g. "2024-09-03".
    """
    return today(clock).isoformat()
