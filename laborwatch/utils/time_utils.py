"""
Time arithmetic and formatting helpers.

Functions:
    seconds_between: Whole seconds between two instants, clamped at zero
    format_mmss: Format seconds as MM:SS
    format_interval_minutes: Format an average interval as "N min"
    is_timer_available: Whether the due date is close enough to offer the timer
    to_local: Convert an instant to local wall time for display

Example:
    >>> format_mmss(65)
    '01:05'
    >>> format_interval_minutes(None)
    'N/A'
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta
from typing import Optional

from laborwatch.config import TIMER

logger = logging.getLogger(__name__)


def seconds_between(earlier: datetime, later: datetime) -> int:
    """
    Compute whole seconds from `earlier` to `later`.

    The result is floored to whole seconds. If the clock moved backwards
    (later < earlier) the result is clamped to 0 and a warning is logged.

    Args:
        earlier: The first instant.
        later: The second instant.

    Returns:
        Non-negative number of whole seconds.

    Example:
        >>> seconds_between(datetime(2026, 1, 1, 8, 0, 0),
        ...                 datetime(2026, 1, 1, 8, 1, 5, 900000))
        65
    """
    delta = (later - earlier).total_seconds()
    if delta < 0:
        logger.warning(
            f"Clock moved backwards by {-delta:.3f}s; clamping to 0"
        )
        return 0
    return int(math.floor(delta))


def format_mmss(seconds: Optional[float]) -> str:
    """
    Format a number of seconds as MM:SS.

    Args:
        seconds: Seconds to format. None and negatives are shown as 00:00.

    Returns:
        Zero-padded "MM:SS" string. Minutes are not wrapped at 60.
    """
    if seconds is None or seconds < 0:
        seconds = 0
    total = int(round(seconds))
    mins, secs = divmod(total, 60)
    return f"{mins:02d}:{secs:02d}"


def format_interval_minutes(seconds: Optional[float]) -> str:
    """
    Format an average interval in whole minutes.

    Args:
        seconds: Interval in seconds, or None when not available.

    Returns:
        "N min" (floored minutes), or "N/A".
    """
    if seconds is None:
        return "N/A"
    return f"{int(max(seconds, 0) // 60)} min"


def to_local(when: datetime) -> datetime:
    """
    Convert an instant to the local time zone for display.

    Aware datetimes (what SystemClock returns) are converted; naive ones are
    taken to be local time already and gain the local offset.
    """
    return when.astimezone()


def is_timer_available(
    due_date: Optional[date],
    today: date,
    window_days: int = TIMER.DUE_DATE_WINDOW_DAYS
) -> bool:
    """
    Check whether the contraction timer should be offered.

    The timer is offered from `window_days` before the due date onwards,
    including after the due date has passed.

    Args:
        due_date: Expected due date, or None if unknown.
        today: Current date.
        window_days: Days before the due date the timer becomes available.

    Returns:
        True if today is on or after (due_date - window_days).
    """
    if due_date is None:
        return False
    if isinstance(due_date, datetime):
        due_date = due_date.date()
    if isinstance(today, datetime):
        today = to_local(today).date()
    return today >= due_date - timedelta(days=window_days)


__all__ = [
    'seconds_between',
    'format_mmss',
    'format_interval_minutes',
    'is_timer_available',
    'to_local',
]
