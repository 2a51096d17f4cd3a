"""
Analysis module for LaborWatch.

This module provides:
    - Labor-stage classification from the contraction log
    - Alert generation for the classified stage

Usage:
    >>> from laborwatch.analysis import classify_labor_stage, generate_stage_alert
    >>> result = classify_labor_stage(events)
    >>> alert = generate_stage_alert(result)
"""

from .stage import classify_labor_stage, LaborStage, StageClassification
from .alerts import generate_stage_alert, StageAlert, get_stage_color, get_stage_emoji

__all__ = [
    # Stage classifier
    'classify_labor_stage',
    'LaborStage',
    'StageClassification',
    # Alerts
    'generate_stage_alert',
    'StageAlert',
    'get_stage_color',
    'get_stage_emoji',
]
