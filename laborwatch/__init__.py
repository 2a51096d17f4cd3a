"""
LaborWatch - Labor Contraction Monitor.

A small session-local contraction timer combining:
- Contraction recording with an explicit Idle/Tracking state machine
- Whole-history labor-stage classification
- Streamlit dashboard with Plotly charts

Modules:
    config: Centralized configuration constants
    tracking: Contraction events, session store, recorder and monitor
    analysis: Labor-stage classifier and display alerts
    ui: Streamlit dashboard and visualizations
    utils: Clock, time formatting and statistics helpers

Quick Start:
    >>> from laborwatch.tracking import LaborContractionMonitor
    >>> from laborwatch.utils import ManualClock

    >>> clock = ManualClock()
    >>> monitor = LaborContractionMonitor(clock=clock)
    >>> monitor.start()
    >>> clock.advance(65)
    >>> monitor.stop()
    >>> monitor.snapshot().classification.label
    'Not enough data'
"""

__version__ = "1.0.0"

# Expose main configuration
from laborwatch.config import STAGE, TIMER, COLORS, MESSAGES

__all__ = [
    '__version__',
    'STAGE',
    'TIMER',
    'COLORS',
    'MESSAGES',
]
