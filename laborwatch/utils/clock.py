"""
Time sources for the contraction timer.

Every component that needs "now" receives a Clock instead of calling
datetime.now() directly, so timing logic can be driven deterministically.

Classes:
    Clock: Protocol for anything with a now() method
    SystemClock: Wall-clock time source
    ManualClock: Settable time source for tests and replays

Example:
    >>> clock = ManualClock(datetime(2026, 3, 1, 8, 0, 0))
    >>> clock.advance(65)
    >>> clock.now()
    datetime.datetime(2026, 3, 1, 8, 1, 5)
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """
    Wall-clock time source.

    Returns timezone-aware UTC instants so durations stay correct across
    daylight-saving changes. Convert with to_local() only for display.
    """

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return "SystemClock()"


class ManualClock:
    """
    Time source that only moves when told to.

    Attributes:
        current: The time returned by now().
    """

    def __init__(self, start: Optional[datetime] = None):
        self.current = start if start is not None else datetime(2000, 1, 1)

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> datetime:
        """Move the clock by `seconds` (negative values move it backwards)."""
        self.current = self.current + timedelta(seconds=seconds)
        return self.current

    def set(self, when: datetime) -> None:
        self.current = when

    def __repr__(self) -> str:
        return f"ManualClock({self.current.isoformat()})"


__all__ = [
    'Clock',
    'SystemClock',
    'ManualClock',
]
