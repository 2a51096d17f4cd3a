"""
Contraction Session Store.

Holds the in-memory log of completed contractions for the current tracking
session, most-recent-first, plus the contraction currently in progress.
Nothing here is persisted: dropping the store drops the session.

Example:
    >>> store = SessionStore()
    >>> store.push(completed_event)
    >>> store.average_duration()
    65.0
"""

from __future__ import annotations

import itertools
import logging
from typing import Iterator, List, Optional

import pandas as pd

from laborwatch.tracking.events import ContractionEvent
from laborwatch.utils.stats import safe_mean

logger = logging.getLogger(__name__)

DATAFRAME_COLUMNS = [
    'id', 'start', 'end', 'duration', 'interval_from_previous', 'intensity'
]


class SessionStore:
    """
    Ordered log of contractions for one session.

    Attributes:
        open_event: The contraction in progress, or None.
    """

    def __init__(self):
        self._events: List[ContractionEvent] = []
        self._ids = itertools.count(1)
        self.open_event: Optional[ContractionEvent] = None

    def next_id(self) -> int:
        """Allocate the next event id. Ids are never reused in one store."""
        return next(self._ids)

    # ------------------------------------------------------------------
    # Log access
    # ------------------------------------------------------------------

    def completed_events(self) -> List[ContractionEvent]:
        """Completed events, most recent first (a copy)."""
        return list(self._events)

    def head(self) -> Optional[ContractionEvent]:
        """The most recently completed event, or None if the log is empty."""
        return self._events[0] if self._events else None

    def recent(self, limit: int) -> List[ContractionEvent]:
        return self._events[:max(limit, 0)]

    @property
    def count(self) -> int:
        return len(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[ContractionEvent]:
        return iter(list(self._events))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def push(self, event: ContractionEvent) -> None:
        """Insert a completed event at the head of the log."""
        if event.is_open:
            raise ValueError(f"Cannot log open contraction {event.id}")
        self._events.insert(0, event)

    def remove(self, event_id: int) -> bool:
        """
        Delete a completed event by id.

        Returns:
            True if an event was removed, False if the id was not in the log.
        """
        for i, event in enumerate(self._events):
            if event.id == event_id:
                del self._events[i]
                logger.debug(f"Removed contraction {event_id}")
                return True
        return False

    def clear(self) -> None:
        """Drop every completed event and the open event."""
        self._events.clear()
        self.open_event = None

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def average_duration(self) -> Optional[float]:
        """Mean duration in seconds, or None if no completed events."""
        return safe_mean(e.duration for e in self._events)

    def average_interval(self) -> Optional[float]:
        """Mean interval in seconds, or None if no event has an interval."""
        return safe_mean(e.interval_from_previous for e in self._events)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabular view of the completed log, most recent first.

        Returns:
            DataFrame with one row per completed contraction.
        """
        rows = [event.to_dict() for event in self._events]
        df = pd.DataFrame(rows, columns=DATAFRAME_COLUMNS)
        return df.astype({'duration': 'Int64', 'interval_from_previous': 'Int64'})

    def __repr__(self) -> str:
        status = "open" if self.open_event is not None else "idle"
        return f"SessionStore({self.count} completed, {status})"
