"""
Labor-Stage Classifier.

Derives a coarse advisory label from the completed contraction log.

Algorithm:
    1. Require at least 3 completed contractions, otherwise
       INSUFFICIENT_DATA
    2. avg_duration = mean of all known durations
    3. avg_interval = mean of all known intervals (the earliest
       contraction has none)
    4. Ordered rules, first match wins:
       - ACTIVE_LABOR: avg_interval <= 120s AND avg_duration >= 60s
       - EARLY_LABOR:  avg_interval <= 300s AND avg_duration >= 45s
       - PRE_LABOR:    everything else

Averages cover the whole session history, not a sliding window, so an
atypical early contraction keeps influencing the label until it is
removed or the session is reset.

The result is advisory only. ACTIVE_LABOR is the single stage that
recommends contacting a care provider.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional

from laborwatch.config import STAGE, MESSAGES, StageThresholds
from laborwatch.utils.stats import safe_mean

if TYPE_CHECKING:
    from laborwatch.tracking.events import ContractionEvent

logger = logging.getLogger(__name__)


class LaborStage(Enum):
    """Advisory labor stages, from least to most advanced."""

    INSUFFICIENT_DATA = 0
    PRE_LABOR = 1
    EARLY_LABOR = 2
    ACTIVE_LABOR = 3

    @property
    def label(self) -> str:
        return {
            LaborStage.INSUFFICIENT_DATA: MESSAGES.LABEL_INSUFFICIENT,
            LaborStage.PRE_LABOR: MESSAGES.LABEL_PRE_LABOR,
            LaborStage.EARLY_LABOR: MESSAGES.LABEL_EARLY_LABOR,
            LaborStage.ACTIVE_LABOR: MESSAGES.LABEL_ACTIVE_LABOR,
        }[self]


@dataclass(frozen=True)
class StageClassification:
    """
    Result of labor-stage classification.

    Attributes:
        stage: The classified LaborStage.
        description: Fixed human-readable rationale for the stage.
        contact_provider: True only for ACTIVE_LABOR.
        avg_duration: Mean contraction duration in seconds (None if unknown).
        avg_interval: Mean interval between contractions in seconds
            (None if unknown).
        event_count: Number of completed contractions considered.
    """

    stage: LaborStage
    description: str
    contact_provider: bool
    avg_duration: Optional[float]
    avg_interval: Optional[float]
    event_count: int

    @property
    def label(self) -> str:
        return self.stage.label

    @property
    def is_classified(self) -> bool:
        return self.stage != LaborStage.INSUFFICIENT_DATA

    def __repr__(self) -> str:
        return (
            f"StageClassification({self.stage.name}, n={self.event_count}, "
            f"avg_duration={self.avg_duration}, avg_interval={self.avg_interval})"
        )


def _description_for(stage: LaborStage, thresholds: StageThresholds) -> str:
    if stage == LaborStage.ACTIVE_LABOR:
        return f"{MESSAGES.DESC_ACTIVE_LABOR} {MESSAGES.CONTACT_PROVIDER}"
    if stage == LaborStage.EARLY_LABOR:
        return MESSAGES.DESC_EARLY_LABOR
    if stage == LaborStage.PRE_LABOR:
        return MESSAGES.DESC_PRE_LABOR
    return MESSAGES.DESC_INSUFFICIENT.format(count=thresholds.MIN_COMPLETED_EVENTS)


def _match_stage(
    avg_duration: Optional[float],
    avg_interval: Optional[float],
    thresholds: StageThresholds
) -> LaborStage:
    if avg_duration is None or avg_interval is None:
        return LaborStage.PRE_LABOR

    if (avg_interval <= thresholds.ACTIVE_MAX_INTERVAL_SECONDS
            and avg_duration >= thresholds.ACTIVE_MIN_DURATION_SECONDS):
        return LaborStage.ACTIVE_LABOR

    if (avg_interval <= thresholds.EARLY_MAX_INTERVAL_SECONDS
            and avg_duration >= thresholds.EARLY_MIN_DURATION_SECONDS):
        return LaborStage.EARLY_LABOR

    return LaborStage.PRE_LABOR


def classify_labor_stage(
    events: Iterable[ContractionEvent],
    thresholds: StageThresholds = STAGE
) -> StageClassification:
    """
    Classify the labor stage from a contraction log.

    Open contractions in `events` are ignored. The function has no side
    effects: the same log always yields the same classification.

    Args:
        events: Contraction events (any order).
        thresholds: Stage thresholds (default: config.STAGE).

    Returns:
        StageClassification with stage, rationale and the averages used.

    Example:
        >>> result = classify_labor_stage(store.completed_events())
        >>> if result.contact_provider:
        ...     print(result.description)
    """
    completed = [e for e in events if not e.is_open]
    count = len(completed)

    avg_duration = safe_mean(e.duration for e in completed)
    avg_interval = safe_mean(e.interval_from_previous for e in completed)

    if count < thresholds.MIN_COMPLETED_EVENTS:
        stage = LaborStage.INSUFFICIENT_DATA
    else:
        stage = _match_stage(avg_duration, avg_interval, thresholds)

    logger.debug(
        f"Stage classification: {stage.name} from {count} contractions "
        f"(avg_duration={avg_duration}, avg_interval={avg_interval})"
    )

    return StageClassification(
        stage=stage,
        description=_description_for(stage, thresholds),
        contact_provider=stage == LaborStage.ACTIVE_LABOR,
        avg_duration=avg_duration,
        avg_interval=avg_interval,
        event_count=count,
    )
