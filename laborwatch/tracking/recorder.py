"""
Contraction Recorder.

Owns the open/closed state of contraction timing and turns user intent
(start, stop, cancel, reset, remove) into changes to the session log.

State Machine:
    IDLE     --start-->  TRACKING
    TRACKING --stop--->  IDLE      (event logged)
    TRACKING --cancel->  IDLE      (event discarded)
    any      --reset-->  IDLE      (log cleared)

Transitions that are not legal in the current state are rejected as
no-ops: a warning is logged and None is returned. The UI is expected to
make them unreachable by only offering the buttons that apply.

Timing:
    - duration = end - start, floored to whole seconds, clamped at 0
    - interval_from_previous = start - end of the most recently completed
      event, floored, clamped at 0; None when the log is empty
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from laborwatch.tracking.events import ContractionEvent, Intensity
from laborwatch.tracking.session import SessionStore
from laborwatch.utils.clock import Clock, SystemClock
from laborwatch.utils.time_utils import seconds_between

logger = logging.getLogger(__name__)


class TrackerState(Enum):
    """Contraction timer state."""

    IDLE = 'idle'
    TRACKING = 'tracking'


class ContractionRecorder:
    """
    Records contractions into a SessionStore.

    Attributes:
        store: Session log this recorder writes to.
        clock: Time source for timestamps.
        state: Current TrackerState.

    Example:
        >>> recorder = ContractionRecorder(SessionStore(), clock=ManualClock())
        >>> recorder.start()
        >>> recorder.clock.advance(65)
        >>> recorder.stop().duration
        65
    """

    def __init__(self, store: SessionStore, clock: Optional[Clock] = None):
        self.store = store
        self.clock = clock if clock is not None else SystemClock()
        self.state = TrackerState.IDLE

    @property
    def is_tracking(self) -> bool:
        return self.state == TrackerState.TRACKING

    def start(self) -> Optional[ContractionEvent]:
        """
        Begin timing a contraction.

        Returns:
            The new open event, or None if a contraction is already open.
        """
        if self.state != TrackerState.IDLE:
            logger.warning("start() ignored: a contraction is already being timed")
            return None

        now = self.clock.now()
        previous = self.store.head()
        interval = seconds_between(previous.end, now) if previous is not None else None

        event = ContractionEvent(
            id=self.store.next_id(),
            start=now,
            interval_from_previous=interval,
        )
        self.store.open_event = event
        self.state = TrackerState.TRACKING

        logger.info(f"Contraction {event.id} started (interval={interval}s)")
        return event

    def stop(
        self,
        intensity: Union[Intensity, str, None] = None
    ) -> Optional[ContractionEvent]:
        """
        Finish the open contraction and log it.

        Args:
            intensity: Optional perceived intensity ('mild', 'moderate',
                'strong' or an Intensity).

        Returns:
            The completed event, or None if no contraction was open.

        Raises:
            ContractionTimingError: If intensity is not a known value.
        """
        level = Intensity.coerce(intensity)

        if self.state != TrackerState.TRACKING:
            logger.warning("stop() ignored: no contraction is being timed")
            return None
        if self.store.open_event is None:
            # Store cleared underneath us; fall back to IDLE so start() works again
            logger.warning("stop() ignored: open contraction is missing, returning to idle")
            self.state = TrackerState.IDLE
            return None

        now = self.clock.now()
        open_event = self.store.open_event
        duration = seconds_between(open_event.start, now)
        event = open_event.completed(end=now, duration=duration, intensity=level)

        self.store.push(event)
        self.store.open_event = None
        self.state = TrackerState.IDLE

        logger.info(
            f"Contraction {event.id} stopped: {duration}s"
            + (f" ({level.value})" if level else "")
        )
        return event

    def cancel(self) -> Optional[ContractionEvent]:
        """
        Discard the open contraction without logging it.

        Returns:
            The discarded event, or None if no contraction was open.
        """
        if self.state != TrackerState.TRACKING:
            logger.warning("cancel() ignored: no contraction is being timed")
            return None

        discarded = self.store.open_event
        self.store.open_event = None
        self.state = TrackerState.IDLE
        logger.info(f"Contraction {discarded.id if discarded else '?'} cancelled")
        return discarded

    def reset(self) -> None:
        """Clear the whole session, including any open contraction."""
        cleared = self.store.count
        self.store.clear()
        self.state = TrackerState.IDLE
        logger.info(f"Session reset ({cleared} contractions cleared)")

    def remove(self, event_id: int) -> bool:
        """
        Delete a completed contraction by id.

        Unknown ids, and the id of the open contraction, are ignored.

        Returns:
            True if a contraction was removed.
        """
        removed = self.store.remove(event_id)
        if not removed:
            logger.debug(f"remove({event_id}) ignored: not in log")
        return removed

    def current_elapsed(self, now: Optional[datetime] = None) -> int:
        """
        Seconds since the open contraction started.

        Args:
            now: Instant to measure against (defaults to clock.now()).

        Returns:
            Whole elapsed seconds while tracking, 0 while idle.
        """
        open_event = self.store.open_event
        if self.state != TrackerState.TRACKING or open_event is None:
            return 0
        if now is None:
            now = self.clock.now()
        return seconds_between(open_event.start, now)

    def __repr__(self) -> str:
        return f"ContractionRecorder(state={self.state.value}, {self.store!r})"
