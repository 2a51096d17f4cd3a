"""
Centralized configuration for LaborWatch.

This module contains all hardcoded constants used throughout the application.
Centralizing configuration enables easy modification and ensures consistency.

Usage:
    from laborwatch.config import STAGE, TIMER, COLORS

    min_events = STAGE.MIN_COMPLETED_EVENTS
    tick = TIMER.TICK_SECONDS
"""

from dataclasses import dataclass
from typing import Dict, Final


# =============================================================================
# Labor-Stage Thresholds
# =============================================================================

@dataclass(frozen=True)
class StageThresholds:
    """Threshold values for labor-stage classification (seconds)."""

    # Minimum completed contractions before any classification
    MIN_COMPLETED_EVENTS: int = 3

    # Active labor: contractions ~2 min apart, lasting a minute or more
    ACTIVE_MAX_INTERVAL_SECONDS: float = 120.0
    ACTIVE_MIN_DURATION_SECONDS: float = 60.0

    # Early labor: contractions ~5 min apart, lasting 45 s or more
    EARLY_MAX_INTERVAL_SECONDS: float = 300.0
    EARLY_MIN_DURATION_SECONDS: float = 45.0


STAGE: Final[StageThresholds] = StageThresholds()


# =============================================================================
# Timer Configuration
# =============================================================================

@dataclass(frozen=True)
class TimerConfig:
    """Contraction timer constants."""

    # Display refresh while a contraction is open
    TICK_SECONDS: float = 1.0

    # Number of contractions listed under "Recent Contractions"
    RECENT_DISPLAY_LIMIT: int = 5

    # Timer is only offered in the final two weeks before the due date
    DUE_DATE_WINDOW_DAYS: int = 14


TIMER: Final[TimerConfig] = TimerConfig()


# =============================================================================
# UI Colors
# =============================================================================

@dataclass(frozen=True)
class UIColors:
    """Color scheme for UI components."""

    # Intensity colors
    MILD: str = '#EAB308'        # Yellow
    MODERATE: str = '#F97316'    # Orange
    STRONG: str = '#EF4444'      # Red
    UNRATED: str = '#94A3B8'     # Slate

    # Chart
    INTERVAL_LINE: str = '#1E90FF'
    GRID: str = '#E5E5E5'
    BACKGROUND: str = '#FAFAFA'

    # Stage colors
    STAGE_INSUFFICIENT: str = '#6c757d'  # Gray
    STAGE_PRE_LABOR: str = '#28a745'     # Green
    STAGE_EARLY_LABOR: str = '#fd7e14'   # Orange
    STAGE_ACTIVE_LABOR: str = '#dc3545'  # Red

    @property
    def intensity_colors(self) -> Dict[str, str]:
        """Get color mapping for intensity values."""
        return {
            'mild': self.MILD,
            'moderate': self.MODERATE,
            'strong': self.STRONG,
        }


COLORS: Final[UIColors] = UIColors()


# =============================================================================
# Stage Strings
# =============================================================================

@dataclass(frozen=True)
class StageMessages:
    """User-facing strings for stage classification and alerts."""

    # Labels
    LABEL_INSUFFICIENT: str = "Not enough data"
    LABEL_PRE_LABOR: str = "Pre-labor"
    LABEL_EARLY_LABOR: str = "Early Labor"
    LABEL_ACTIVE_LABOR: str = "Active Labor"

    # Fixed descriptions
    DESC_INSUFFICIENT: str = (
        "Time at least {count} contractions to see a labor-stage estimate."
    )
    DESC_PRE_LABOR: str = (
        "Contractions are still short or far apart. This pattern is typical "
        "of pre-labor or practice contractions."
    )
    DESC_EARLY_LABOR: str = (
        "Contractions are becoming regular, about 5 minutes apart and lasting "
        "45 seconds or more. This pattern is typical of early labor."
    )
    DESC_ACTIVE_LABOR: str = (
        "Contractions are about 2 minutes apart and lasting a minute or more. "
        "This pattern is typical of active labor."
    )

    # Provider advisory (active labor only)
    CONTACT_PROVIDER: str = "Contact your healthcare provider or go to your birthing location."

    # Findings
    FINDING_AVG_DURATION: str = "Average duration: {value}"
    FINDING_AVG_INTERVAL: str = "Average time between: {value}"
    FINDING_COUNT: str = "Contractions timed: {count}"

    # Recommendations
    REC_INSUFFICIENT: str = "Keep timing contractions as they come"
    REC_PRE_LABOR: str = "Rest, hydrate and keep timing if contractions continue"
    REC_EARLY_LABOR: str = "Stay comfortable at home and review your birth plan"
    REC_EARLY_LABOR_BAG: str = "Make sure your hospital bag is ready"


MESSAGES: Final[StageMessages] = StageMessages()


# =============================================================================
# Convenience Exports
# =============================================================================

__all__ = [
    'STAGE',
    'TIMER',
    'COLORS',
    'MESSAGES',
    'StageThresholds',
    'TimerConfig',
    'UIColors',
    'StageMessages',
]
