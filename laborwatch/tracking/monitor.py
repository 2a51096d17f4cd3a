"""
Labor Contraction Monitor.

Facade wiring the session store, the recorder and the stage classifier
together. The rendering layer sends user intent (start, stop, cancel,
reset, remove) and reads back an immutable MonitorSnapshot.

The periodic display tick only calls snapshot(now); it never changes the
log.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple, Union

from laborwatch.analysis.stage import classify_labor_stage, StageClassification
from laborwatch.config import STAGE, StageThresholds
from laborwatch.tracking.events import ContractionEvent, Intensity
from laborwatch.tracking.recorder import ContractionRecorder, TrackerState
from laborwatch.tracking.session import SessionStore
from laborwatch.utils.clock import Clock


@dataclass(frozen=True)
class MonitorSnapshot:
    """
    Read-only view of the monitor for rendering.

    Attributes:
        state: Current TrackerState.
        events: Completed contractions, most recent first.
        open_event: The contraction in progress, if any.
        elapsed_seconds: Live elapsed time of the open contraction (0 if idle).
        avg_duration: Mean duration in seconds, or None.
        avg_interval: Mean interval in seconds, or None.
        classification: Current labor-stage classification.
        taken_at: The instant this snapshot describes.
    """

    state: TrackerState
    events: Tuple[ContractionEvent, ...]
    open_event: Optional[ContractionEvent]
    elapsed_seconds: int
    avg_duration: Optional[float]
    avg_interval: Optional[float]
    classification: StageClassification
    taken_at: datetime

    @property
    def completed_count(self) -> int:
        return len(self.events)

    @property
    def is_tracking(self) -> bool:
        return self.state == TrackerState.TRACKING


class LaborContractionMonitor:
    """
    Session-local contraction monitor.

    Example:
        >>> clock = ManualClock()
        >>> monitor = LaborContractionMonitor(clock=clock)
        >>> monitor.start()
        >>> clock.advance(70)
        >>> monitor.stop('strong')
        >>> monitor.snapshot().avg_duration
        70.0
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        thresholds: StageThresholds = STAGE
    ):
        self.store = SessionStore()
        self.recorder = ContractionRecorder(self.store, clock=clock)
        self.thresholds = thresholds

    @property
    def clock(self) -> Clock:
        return self.recorder.clock

    @property
    def state(self) -> TrackerState:
        return self.recorder.state

    @property
    def is_tracking(self) -> bool:
        return self.recorder.is_tracking

    def start(self) -> Optional[ContractionEvent]:
        return self.recorder.start()

    def stop(
        self,
        intensity: Union[Intensity, str, None] = None
    ) -> Optional[ContractionEvent]:
        return self.recorder.stop(intensity)

    def cancel(self) -> Optional[ContractionEvent]:
        return self.recorder.cancel()

    def reset(self) -> None:
        self.recorder.reset()

    def remove(self, event_id: int) -> bool:
        return self.recorder.remove(event_id)

    def classify(self) -> StageClassification:
        return classify_labor_stage(self.store.completed_events(), self.thresholds)

    def snapshot(self, now: Optional[datetime] = None) -> MonitorSnapshot:
        """
        Build a read-only view of the current session.

        Args:
            now: Instant used for the live elapsed time (default: clock.now()).

        Returns:
            MonitorSnapshot for the rendering layer.
        """
        if now is None:
            now = self.clock.now()

        events = tuple(self.store.completed_events())
        return MonitorSnapshot(
            state=self.recorder.state,
            events=events,
            open_event=self.store.open_event,
            elapsed_seconds=self.recorder.current_elapsed(now),
            avg_duration=self.store.average_duration(),
            avg_interval=self.store.average_interval(),
            classification=classify_labor_stage(events, self.thresholds),
            taken_at=now,
        )

    def __repr__(self) -> str:
        return f"LaborContractionMonitor({self.recorder!r})"
