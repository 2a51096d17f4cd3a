"""
Contraction Tracking Module for LaborWatch.

This package owns the session-local contraction log.

Modules:
    - events: ContractionEvent and Intensity
    - session: SessionStore, the ordered in-memory log
    - recorder: ContractionRecorder and its Idle/Tracking state machine
    - monitor: LaborContractionMonitor facade and MonitorSnapshot

Example:
    >>> from laborwatch.tracking import LaborContractionMonitor
    >>> monitor = LaborContractionMonitor()
    >>> monitor.start()
    >>> monitor.stop('moderate')
    >>> snapshot = monitor.snapshot()
"""

from .events import ContractionEvent, ContractionTimingError, Intensity
from .session import SessionStore
from .recorder import ContractionRecorder, TrackerState
from .monitor import LaborContractionMonitor, MonitorSnapshot

__all__ = [
    # Events
    "ContractionEvent",
    "ContractionTimingError",
    "Intensity",
    # Session
    "SessionStore",
    # Recorder
    "ContractionRecorder",
    "TrackerState",
    # Monitor
    "LaborContractionMonitor",
    "MonitorSnapshot",
]
