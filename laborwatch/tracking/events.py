"""
Contraction Event Model.

A contraction is a timed event with a start and end instant. Events are
immutable: stopping an open contraction produces a new, completed event
rather than mutating the open one.

This module provides:
    - Intensity: How strong the contraction felt (chosen on stop)
    - ContractionEvent: Frozen dataclass for a single contraction
    - ContractionTimingError: Raised for invalid recorder input
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional, Union


class ContractionTimingError(ValueError):
    """Raised when contraction timing input is invalid."""
    pass


class Intensity(Enum):
    """Perceived contraction intensity."""

    MILD = 'mild'
    MODERATE = 'moderate'
    STRONG = 'strong'

    @classmethod
    def coerce(cls, value: Union[Intensity, str, None]) -> Optional[Intensity]:
        """
        Convert user input to an Intensity.

        Args:
            value: An Intensity, its string value (case-insensitive), or None.

        Returns:
            The matching Intensity, or None if value is None.

        Raises:
            ContractionTimingError: If the value is not a known intensity.
        """
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ContractionTimingError(
            f"Intensity must be one of {[i.value for i in cls]}, got {value!r}"
        )


@dataclass(frozen=True)
class ContractionEvent:
    """
    A single timed contraction.

    Attributes:
        id: Session-local identifier, unique within one store.
        start: When the contraction began.
        end: When it ended; None while the contraction is in progress.
        duration: Whole seconds from start to end; None while open.
        interval_from_previous: Whole seconds from the end of the previous
            completed contraction to this start; None for the first one.
        intensity: Perceived intensity, chosen when stopping.
    """

    id: int
    start: datetime
    end: Optional[datetime] = None
    duration: Optional[int] = None
    interval_from_previous: Optional[int] = None
    intensity: Optional[Intensity] = None

    @property
    def is_open(self) -> bool:
        return self.end is None

    def completed(
        self,
        end: datetime,
        duration: int,
        intensity: Optional[Intensity] = None
    ) -> ContractionEvent:
        """Return the completed form of this event."""
        if not self.is_open:
            raise ContractionTimingError(f"Contraction {self.id} already ended")
        return replace(self, end=end, duration=duration, intensity=intensity)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'start': self.start,
            'end': self.end,
            'duration': self.duration,
            'interval_from_previous': self.interval_from_previous,
            'intensity': self.intensity.value if self.intensity else None,
        }

    def __repr__(self) -> str:
        if self.is_open:
            return f"ContractionEvent(#{self.id}, started {self.start:%H:%M:%S}, open)"
        return (
            f"ContractionEvent(#{self.id}, {self.duration}s, "
            f"interval={self.interval_from_previous})"
        )
