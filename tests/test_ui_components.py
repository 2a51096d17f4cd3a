"""
Tests for UI Components and the Stage Alert Engine.

This module tests the alert generation strings and the Plotly figures
used by the dashboard.
"""

from __future__ import annotations

import sys
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from laborwatch.analysis.stage import (
    classify_labor_stage,
    LaborStage,
    StageClassification,
)
from laborwatch.tracking.events import ContractionEvent, Intensity


@pytest.fixture
def active_events():
    """Three strong contractions ~90s apart, most recent first."""
    t = datetime(2026, 3, 1, 8, 0, 0)
    events = []
    interval = None
    for i, duration in enumerate([70, 65, 80], start=1):
        events.append(ContractionEvent(
            id=i,
            start=t,
            end=t + timedelta(seconds=duration),
            duration=duration,
            interval_from_previous=interval,
            intensity=Intensity.STRONG if i > 1 else None,
        ))
        t = t + timedelta(seconds=duration + 90)
        interval = 90
    return list(reversed(events))


class TestAlertGeneration:
    """Tests for stage alert strings."""

    def test_active_labor_alert(self, active_events):
        from laborwatch.analysis.alerts import generate_stage_alert

        alert = generate_stage_alert(classify_labor_stage(active_events))

        assert alert.headline == 'Active Labor'
        assert alert.contact_provider is True
        assert alert.recommendations == [
            'Contact your healthcare provider or go to your birthing location.'
        ]

    def test_active_labor_findings(self, active_events):
        from laborwatch.analysis.alerts import generate_stage_alert

        alert = generate_stage_alert(classify_labor_stage(active_events))

        assert alert.findings == [
            'Contractions timed: 3',
            'Average duration: 01:12',
            'Average time between: 1 min',
        ]

    def test_insufficient_data_alert(self):
        from laborwatch.analysis.alerts import generate_stage_alert

        alert = generate_stage_alert(classify_labor_stage([]))

        assert alert.headline == 'Not enough data'
        assert alert.contact_provider is False
        assert alert.findings == ['Contractions timed: 0']
        assert alert.recommendations == ['Keep timing contractions as they come']

    def test_early_labor_recommendations(self):
        from laborwatch.analysis.alerts import generate_stage_alert

        classification = StageClassification(
            stage=LaborStage.EARLY_LABOR,
            description='early',
            contact_provider=False,
            avg_duration=50.0,
            avg_interval=270.0,
            event_count=3,
        )
        alert = generate_stage_alert(classification)

        assert alert.headline == 'Early Labor'
        assert alert.recommendations == [
            'Stay comfortable at home and review your birth plan',
            'Make sure your hospital bag is ready',
        ]

    def test_explanation_is_rationale(self, active_events):
        from laborwatch.analysis.alerts import generate_stage_alert

        classification = classify_labor_stage(active_events)
        alert = generate_stage_alert(classification)

        assert alert.explanation == classification.description

    def test_timestamp_override(self):
        from laborwatch.analysis.alerts import generate_stage_alert

        when = datetime(2026, 3, 1, 8, 30, 0)
        alert = generate_stage_alert(classify_labor_stage([]), generated_at=when)
        assert alert.timestamp == when.isoformat()


class TestAlertDataclass:
    """Tests for StageAlert validation."""

    def test_alert_creation(self):
        from laborwatch.analysis.alerts import StageAlert

        alert = StageAlert(
            stage=LaborStage.PRE_LABOR,
            headline='Pre-labor',
            explanation='Test',
        )
        assert alert.findings == []
        assert alert.contact_provider is False

    def test_invalid_stage_raises(self):
        from laborwatch.analysis.alerts import StageAlert

        with pytest.raises(ValueError):
            StageAlert(stage=2, headline='x', explanation='y')

    def test_contact_provider_only_for_active(self):
        from laborwatch.analysis.alerts import StageAlert

        with pytest.raises(ValueError):
            StageAlert(
                stage=LaborStage.EARLY_LABOR,
                headline='Early Labor',
                explanation='y',
                contact_provider=True,
            )

    def test_timestamp_auto_generated(self):
        from laborwatch.analysis.alerts import StageAlert

        alert = StageAlert(stage=LaborStage.PRE_LABOR, headline='x', explanation='y')
        datetime.fromisoformat(alert.timestamp)

    def test_default_timestamps_are_utc(self):
        from laborwatch.analysis.alerts import StageAlert, generate_stage_alert

        alert = StageAlert(stage=LaborStage.PRE_LABOR, headline='x', explanation='y')
        generated = generate_stage_alert(classify_labor_stage([]))

        assert datetime.fromisoformat(alert.timestamp).utcoffset() == timedelta(0)
        assert datetime.fromisoformat(generated.timestamp).utcoffset() == timedelta(0)


class TestStageHelpers:
    """Tests for stage color and emoji helpers."""

    def test_get_stage_color(self):
        from laborwatch.analysis.alerts import get_stage_color

        assert get_stage_color(LaborStage.PRE_LABOR) == '#28a745'
        assert get_stage_color(LaborStage.EARLY_LABOR) == '#fd7e14'
        assert get_stage_color(LaborStage.ACTIVE_LABOR) == '#dc3545'
        assert get_stage_color(LaborStage.INSUFFICIENT_DATA) == '#6c757d'

    def test_get_stage_emoji(self):
        from laborwatch.analysis.alerts import get_stage_emoji

        assert get_stage_emoji(LaborStage.PRE_LABOR) == '🟢'
        assert get_stage_emoji(LaborStage.EARLY_LABOR) == '🟠'
        assert get_stage_emoji(LaborStage.ACTIVE_LABOR) == '🔴'


class TestPlotFunctions:
    """Tests for plot generation."""

    def test_contraction_timeline_returns_figure(self, active_events):
        from laborwatch.ui.plots import create_contraction_timeline
        import plotly.graph_objects as go

        fig = create_contraction_timeline(active_events)

        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 2

    def test_contraction_timeline_chronological(self, active_events):
        from laborwatch.ui.plots import create_contraction_timeline

        fig = create_contraction_timeline(active_events)
        bars = fig.data[0]

        assert list(bars.y) == [70, 65, 80]
        assert list(bars.customdata) == ['unrated', 'strong', 'strong']

    def test_contraction_timeline_skips_open(self, active_events):
        from laborwatch.ui.plots import create_contraction_timeline

        open_event = ContractionEvent(id=10, start=datetime(2026, 3, 1, 9, 0, 0))
        fig = create_contraction_timeline([open_event] + active_events)

        assert len(fig.data[0].y) == 3

    def test_contraction_timeline_empty(self):
        from laborwatch.ui.plots import create_contraction_timeline
        import plotly.graph_objects as go

        fig = create_contraction_timeline([])
        assert isinstance(fig, go.Figure)

    def test_stage_indicator(self, active_events):
        from laborwatch.ui.plots import create_stage_indicator
        import plotly.graph_objects as go

        fig = create_stage_indicator(classify_labor_stage(active_events))

        assert isinstance(fig, go.Figure)
        assert fig.data[0].value == LaborStage.ACTIVE_LABOR.value


class TestAppImports:
    """Tests for dashboard module imports."""

    def test_app_module_imports(self):
        from laborwatch.ui import app
        assert hasattr(app, 'main')
        assert hasattr(app, 'get_monitor')

    def test_plots_module_imports(self):
        from laborwatch.ui import plots
        assert hasattr(plots, 'create_contraction_timeline')


# =============================================================================
# Dashboard Page Tests
# =============================================================================

APP_PATH = Path(__file__).parent.parent / "laborwatch" / "ui" / "app.py"


def build_monitor(clock, durations_and_gaps):
    """Monitor on `clock` holding one completed contraction per (duration, gap)."""
    from laborwatch.tracking.monitor import LaborContractionMonitor

    monitor = LaborContractionMonitor(clock=clock)
    for duration, gap in durations_and_gaps:
        clock.advance(gap)
        monitor.start()
        clock.advance(duration)
        monitor.stop()
    return monitor


@pytest.fixture
def app_test():
    from streamlit.testing.v1 import AppTest

    return AppTest.from_file(str(APP_PATH), default_timeout=30)


class TestDashboardPage:
    """Tests that run the Streamlit page against a ManualClock-driven monitor."""

    def test_delete_contraction_outside_recent_list(self, app_test):
        from laborwatch.utils.clock import ManualClock

        clock = ManualClock(datetime(2026, 5, 1, 8, 0, 0))
        # One long gap early on, then five contractions 90s apart
        monitor = build_monitor(clock, [(65, 0), (65, 1200)] + [(65, 90)] * 5)
        assert monitor.classify().stage == LaborStage.EARLY_LABOR

        app_test.session_state["contraction_monitor"] = monitor
        app_test.session_state["due_date"] = clock.now().date()
        app_test.run()
        assert not app_test.exception

        # Id 2 is the sixth most recent, so it has no row in the recent list
        recent_keys = {b.key for b in app_test.button}
        assert "remove_2" not in recent_keys

        picker = app_test.selectbox(key="history_remove_id")
        ids = [e.id for e in monitor.store.completed_events()]
        picker.select_index(ids.index(2))
        app_test.button(key="history_remove").click()
        app_test.run()

        assert not app_test.exception
        monitor = app_test.session_state["contraction_monitor"]
        assert 2 not in [e.id for e in monitor.store.completed_events()]
        assert monitor.store.count == 6
        assert monitor.classify().stage == LaborStage.ACTIVE_LABOR

    def test_due_date_defaults_from_monitor_clock(self, app_test):
        from laborwatch.tracking.monitor import LaborContractionMonitor
        from laborwatch.utils.clock import ManualClock

        clock = ManualClock(datetime(2001, 6, 1, 9, 0, 0))
        app_test.session_state["contraction_monitor"] = LaborContractionMonitor(clock=clock)
        app_test.run()

        assert not app_test.exception
        assert app_test.session_state["due_date"] == date(2001, 6, 8)
        assert any(b.label.startswith("▶ Start") for b in app_test.button)

    def test_due_date_gate_uses_monitor_clock(self, app_test):
        from laborwatch.tracking.monitor import LaborContractionMonitor
        from laborwatch.utils.clock import ManualClock

        # A month out by the monitor's clock, long past by the machine's
        clock = ManualClock(datetime(2001, 6, 1, 9, 0, 0))
        app_test.session_state["contraction_monitor"] = LaborContractionMonitor(clock=clock)
        app_test.session_state["due_date"] = date(2001, 7, 1)
        app_test.run()

        assert not app_test.exception
        assert any("will be available" in info.value for info in app_test.info)
        assert not any(b.label.startswith("▶ Start") for b in app_test.button)
