"""
Statistics helpers for contraction aggregates.

Aggregates are taken over optional values (an open contraction has no
duration, the first contraction has no interval), so these helpers
drop None/NaN before computing.

Functions:
    get_valid_values: Extract non-missing values as a float array
    safe_mean: Mean ignoring missing values, with fallback

Example:
    >>> safe_mean([70, None, 80])
    75.0
    >>> safe_mean([None, None]) is None
    True
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np


def get_valid_values(values: Iterable[Optional[float]]) -> np.ndarray:
    """
    Extract non-missing values.

    Args:
        values: Iterable that may contain None or NaN.

    Returns:
        Float array containing only the valid values.

    Example:
        >>> get_valid_values([120, None, float('nan'), 130])
        array([120., 130.])
    """
    arr = np.array(
        [np.nan if v is None else v for v in values],
        dtype=float
    )
    return arr[~np.isnan(arr)]


def safe_mean(
    values: Iterable[Optional[float]],
    default: Optional[float] = None
) -> Optional[float]:
    """
    Calculate mean ignoring missing values, with fallback for empty input.

    Args:
        values: Iterable that may contain None or NaN.
        default: Value to return if no valid values exist.

    Returns:
        Mean of valid values as a float, or default if none exist.
    """
    valid = get_valid_values(values)
    if len(valid) == 0:
        return default
    return float(np.mean(valid))


__all__ = [
    'get_valid_values',
    'safe_mean',
]
