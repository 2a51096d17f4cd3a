"""
Stage Alert Engine for LaborWatch.

This module turns a labor-stage classification into the alert shown
next to the contraction timer: a headline, the rationale, supporting
findings and recommendations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from laborwatch.analysis.stage import LaborStage, StageClassification
from laborwatch.config import COLORS, MESSAGES
from laborwatch.utils.clock import SystemClock
from laborwatch.utils.time_utils import format_mmss, format_interval_minutes


@dataclass
class StageAlert:
    """
    Represents a labor-stage alert with explanation.

    Attributes:
        stage: Classified labor stage.
        headline: Short headline describing the alert.
        explanation: Rationale text for the stage.
        findings: Averages and counts supporting the stage.
        recommendations: Suggested next steps.
        contact_provider: Whether contacting a care provider is advised.
        timestamp: ISO format timestamp of alert generation.
    """
    stage: LaborStage
    headline: str
    explanation: str
    findings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    contact_provider: bool = False
    timestamp: str = field(default_factory=lambda: SystemClock().now().isoformat())

    def __post_init__(self):
        """Validate stage and provider flag."""
        if not isinstance(self.stage, LaborStage):
            raise ValueError(f"Stage must be a LaborStage, got {self.stage!r}")
        if self.contact_provider and self.stage != LaborStage.ACTIVE_LABOR:
            raise ValueError(
                f"contact_provider is only valid for ACTIVE_LABOR, got {self.stage.name}"
            )


def generate_stage_alert(
    classification: StageClassification,
    generated_at: Optional[datetime] = None
) -> StageAlert:
    """
    Generate the display alert for a classification.

    Args:
        classification: Result of classify_labor_stage().
        generated_at: Timestamp for the alert (default: SystemClock().now()).

    Returns:
        StageAlert with headline, explanation, findings and recommendations.

    Example:
        >>> alert = generate_stage_alert(classify_labor_stage(events))
        >>> alert.headline
        'Active Labor'
    """
    stage = classification.stage
    findings: List[str] = []

    findings.append(MESSAGES.FINDING_COUNT.format(count=classification.event_count))
    if classification.avg_duration is not None:
        findings.append(
            MESSAGES.FINDING_AVG_DURATION.format(
                value=format_mmss(classification.avg_duration)
            )
        )
    if classification.avg_interval is not None:
        findings.append(
            MESSAGES.FINDING_AVG_INTERVAL.format(
                value=format_interval_minutes(classification.avg_interval)
            )
        )

    if stage == LaborStage.ACTIVE_LABOR:
        recommendations = [MESSAGES.CONTACT_PROVIDER]
    elif stage == LaborStage.EARLY_LABOR:
        recommendations = [MESSAGES.REC_EARLY_LABOR, MESSAGES.REC_EARLY_LABOR_BAG]
    elif stage == LaborStage.PRE_LABOR:
        recommendations = [MESSAGES.REC_PRE_LABOR]
    else:
        recommendations = [MESSAGES.REC_INSUFFICIENT]

    if generated_at is None:
        generated_at = SystemClock().now()
    timestamp = generated_at.isoformat()

    return StageAlert(
        stage=stage,
        headline=classification.label,
        explanation=classification.description,
        findings=findings,
        recommendations=recommendations,
        contact_provider=classification.contact_provider,
        timestamp=timestamp,
    )


def get_stage_color(stage: LaborStage) -> str:
    """
    Get the display color for a stage.

    Args:
        stage: Labor stage.

    Returns:
        Hex color string.
    """
    colors = {
        LaborStage.INSUFFICIENT_DATA: COLORS.STAGE_INSUFFICIENT,
        LaborStage.PRE_LABOR: COLORS.STAGE_PRE_LABOR,
        LaborStage.EARLY_LABOR: COLORS.STAGE_EARLY_LABOR,
        LaborStage.ACTIVE_LABOR: COLORS.STAGE_ACTIVE_LABOR,
    }
    return colors.get(stage, COLORS.STAGE_INSUFFICIENT)


def get_stage_emoji(stage: LaborStage) -> str:
    """Get the emoji indicator for a stage."""
    emojis = {
        LaborStage.INSUFFICIENT_DATA: '⏳',
        LaborStage.PRE_LABOR: '🟢',
        LaborStage.EARLY_LABOR: '🟠',
        LaborStage.ACTIVE_LABOR: '🔴',
    }
    return emojis.get(stage, '⚪')
