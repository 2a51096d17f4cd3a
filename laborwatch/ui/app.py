"""
LaborWatch Dashboard - Streamlit Application.

The contraction timer page: start/stop timing, pick an intensity when a
contraction ends, review recent contractions, and see the labor-stage
estimate with its rationale.

The monitor lives in st.session_state, so each browser session has its own
log and loses it on reload. While a contraction is open the page reruns
once per tick to refresh the elapsed time; the tick never changes the log.

Usage:
    streamlit run laborwatch/ui/app.py
"""

from __future__ import annotations

import logging
import sys
import time
from datetime import date, timedelta
from pathlib import Path
from typing import Optional

import streamlit as st

# Add project root to path so `streamlit run laborwatch/ui/app.py` resolves the package
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from laborwatch.analysis.alerts import (
    generate_stage_alert,
    get_stage_color,
    get_stage_emoji,
    StageAlert,
)
from laborwatch.analysis.stage import LaborStage
from laborwatch.config import TIMER
from laborwatch.tracking.events import Intensity
from laborwatch.tracking.monitor import LaborContractionMonitor, MonitorSnapshot
from laborwatch.ui.plots import create_contraction_timeline, create_stage_indicator
from laborwatch.utils.time_utils import (
    format_mmss,
    format_interval_minutes,
    is_timer_available,
    to_local,
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MONITOR_KEY = "contraction_monitor"
DUE_DATE_KEY = "due_date"


# ============================================================================
# State Management
# ============================================================================

def get_monitor() -> LaborContractionMonitor:
    """Get this session's monitor, creating it on first use."""
    if MONITOR_KEY not in st.session_state:
        st.session_state[MONITOR_KEY] = LaborContractionMonitor()
        logger.info("New contraction session started")
    return st.session_state[MONITOR_KEY]


# ============================================================================
# UI Components
# ============================================================================

def render_sidebar(monitor: LaborContractionMonitor, today: date) -> Optional[date]:
    """Render the sidebar with the due date and session controls."""
    st.sidebar.title("🤰 My Pregnancy")
    st.sidebar.markdown("---")

    # Seed the widget through session_state, not value=, so reruns keep the pick
    if DUE_DATE_KEY not in st.session_state:
        st.session_state[DUE_DATE_KEY] = today + timedelta(days=7)
    due_date = st.sidebar.date_input("Due date", key=DUE_DATE_KEY)

    st.sidebar.markdown("---")
    st.sidebar.subheader("⚙️ Session")
    if st.sidebar.button("Reset session", disabled=monitor.store.count == 0 and not monitor.is_tracking):
        monitor.reset()
        st.rerun()

    st.sidebar.markdown("---")
    st.sidebar.caption("Contractions are kept for this browser session only.")

    return due_date


def render_tracking(monitor: LaborContractionMonitor, snapshot: MonitorSnapshot):
    """Render the timer while a contraction is in progress."""
    st.markdown(
        f"<h1 style='text-align: center; margin-bottom: 0;'>{format_mmss(snapshot.elapsed_seconds)}</h1>",
        unsafe_allow_html=True
    )
    st.caption("Contraction in progress...")

    st.write("When contraction ends, select intensity:")
    cols = st.columns(3)
    for col, level in zip(cols, Intensity):
        with col:
            if st.button(level.value.capitalize(), key=f"stop_{level.value}", use_container_width=True):
                monitor.stop(level)
                st.rerun()

    if st.button("⏹ Cancel Timing", key="cancel"):
        monitor.cancel()
        st.rerun()


def render_idle(monitor: LaborContractionMonitor, snapshot: MonitorSnapshot):
    """Render the start button and the session averages."""
    if st.button("▶ Start Timing Contraction", type="primary", use_container_width=True):
        monitor.start()
        st.rerun()

    if snapshot.completed_count > 0:
        col_a, col_b = st.columns(2)
        with col_a:
            st.metric("Avg. Duration", format_mmss(snapshot.avg_duration))
        with col_b:
            st.metric("Avg. Time Between", format_interval_minutes(snapshot.avg_interval))


def render_stage(alert: StageAlert, snapshot: MonitorSnapshot):
    """Render the labor-stage alert."""
    color = get_stage_color(alert.stage)
    emoji = get_stage_emoji(alert.stage)

    st.markdown(
        f"""
        <div style="background-color: {color}; padding: 15px; border-radius: 10px; margin-bottom: 20px;">
            <h3 style="color: white; margin: 0;">{emoji} {alert.headline}</h3>
            <p style="color: white; margin: 5px 0 0 0;">{alert.explanation}</p>
        </div>
        """,
        unsafe_allow_html=True
    )

    if alert.contact_provider:
        st.error(f"📞 {alert.recommendations[0]}")

    if snapshot.classification.stage != LaborStage.INSUFFICIENT_DATA:
        st.plotly_chart(create_stage_indicator(snapshot.classification), use_container_width=True)

    for finding in alert.findings:
        st.write(f"• {finding}")

    for rec in alert.recommendations:
        if alert.stage == LaborStage.ACTIVE_LABOR:
            continue
        elif alert.stage == LaborStage.EARLY_LABOR:
            st.warning(f"• {rec}")
        else:
            st.info(f"• {rec}")


def render_history(monitor: LaborContractionMonitor, snapshot: MonitorSnapshot):
    """Render recent contractions, the history chart and the CSV download."""
    if snapshot.completed_count == 0:
        return

    st.subheader("Recent Contractions")
    for event in snapshot.events[:TIMER.RECENT_DISPLAY_LIMIT]:
        col_time, col_dur, col_level, col_del = st.columns([2, 2, 2, 1])
        with col_time:
            st.write(to_local(event.start).strftime("%I:%M %p").lstrip("0"))
        with col_dur:
            st.write(format_mmss(event.duration))
        with col_level:
            st.write(event.intensity.value if event.intensity else "—")
        with col_del:
            if st.button("🗑", key=f"remove_{event.id}", help="Delete this contraction"):
                monitor.remove(event.id)
                st.rerun()

    with st.expander("📊 History"):
        st.plotly_chart(create_contraction_timeline(snapshot.events), use_container_width=True)

        # Any logged contraction can be deleted here, not only the recent ones
        by_id = {event.id: event for event in snapshot.events}
        selected = st.selectbox(
            "Delete a contraction",
            options=list(by_id),
            format_func=lambda event_id: (
                f"#{event_id} - "
                f"{to_local(by_id[event_id].start).strftime('%I:%M %p').lstrip('0')} "
                f"({format_mmss(by_id[event_id].duration)})"
            ),
            key="history_remove_id",
        )
        if st.button("Delete", key="history_remove") and selected is not None:
            monitor.remove(selected)
            st.rerun()

        df = monitor.store.to_dataframe()
        st.dataframe(df, hide_index=True)
        st.download_button(
            "Download CSV",
            data=df.to_csv(index=False),
            file_name="contractions.csv",
            mime="text/csv",
        )


# ============================================================================
# Main Application
# ============================================================================

def main():
    """Main Streamlit application."""
    st.set_page_config(
        page_title="LaborWatch - Contraction Timer",
        page_icon="⏱️",
        layout="wide",
    )

    st.title("⏱️ Contraction Timer")
    st.markdown("---")

    monitor = get_monitor()
    today = to_local(monitor.clock.now()).date()
    due_date = render_sidebar(monitor, today)

    if not is_timer_available(due_date, today):
        st.info(
            f"This feature will be available in the last "
            f"{TIMER.DUE_DATE_WINDOW_DAYS // 7} weeks before your due date"
        )
        return

    snapshot = monitor.snapshot()
    alert = generate_stage_alert(snapshot.classification, generated_at=snapshot.taken_at)

    col1, col2 = st.columns([3, 2])

    with col1:
        if snapshot.is_tracking:
            render_tracking(monitor, snapshot)
        else:
            render_idle(monitor, snapshot)
        render_history(monitor, snapshot)

    with col2:
        st.subheader("🔍 Labor Stage")
        render_stage(alert, snapshot)

    if snapshot.is_tracking:
        time.sleep(TIMER.TICK_SECONDS)
        st.rerun()


if __name__ == "__main__":
    main()
