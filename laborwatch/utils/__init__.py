"""
Utility functions for LaborWatch.

This package contains reusable utility functions organized by domain:
- clock: Injectable time sources (SystemClock, ManualClock)
- time_utils: Time arithmetic, formatting and the due-date gate
- stats: Aggregates over values that may be missing

Usage:
    from laborwatch.utils import ManualClock, format_mmss, safe_mean
"""

from laborwatch.utils.clock import Clock, SystemClock, ManualClock
from laborwatch.utils.time_utils import (
    seconds_between,
    format_mmss,
    format_interval_minutes,
    is_timer_available,
    to_local,
)
from laborwatch.utils.stats import (
    get_valid_values,
    safe_mean,
)

__all__ = [
    'Clock',
    'SystemClock',
    'ManualClock',
    'seconds_between',
    'format_mmss',
    'format_interval_minutes',
    'is_timer_available',
    'to_local',
    'get_valid_values',
    'safe_mean',
]
