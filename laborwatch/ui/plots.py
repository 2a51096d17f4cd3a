"""
Contraction Visualization Utilities for LaborWatch.

This module provides Plotly-based visualizations for the contraction log:
- Bars for contraction durations, colored by intensity
- Blue line for the interval since the previous contraction
- Dashed lines for the active/early labor thresholds
"""

from __future__ import annotations

from typing import List, Sequence

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from laborwatch.analysis.alerts import get_stage_color
from laborwatch.analysis.stage import LaborStage, StageClassification
from laborwatch.config import COLORS, STAGE
from laborwatch.tracking.events import ContractionEvent
from laborwatch.utils.time_utils import to_local


def _intensity_color(event: ContractionEvent) -> str:
    if event.intensity is None:
        return COLORS.UNRATED
    return COLORS.intensity_colors.get(event.intensity.value, COLORS.UNRATED)


def create_contraction_timeline(
    events: Sequence[ContractionEvent],
    title: str = "Contraction History",
    height: int = 420
) -> go.Figure:
    """
    Create a chart of contraction durations and intervals over time.

    Args:
        events: Completed contractions in any order (open ones are skipped).
        title: Plot title.
        height: Plot height in pixels.

    Returns:
        Plotly Figure with a duration bar trace and an interval line trace.

    Example:
        >>> fig = create_contraction_timeline(snapshot.events)
        >>> st.plotly_chart(fig)
    """
    completed: List[ContractionEvent] = sorted(
        (e for e in events if not e.is_open),
        key=lambda e: e.start
    )

    starts = [to_local(e.start) for e in completed]
    durations = [e.duration for e in completed]
    intervals = [e.interval_from_previous for e in completed]

    fig = make_subplots(specs=[[{"secondary_y": True}]])

    fig.add_trace(
        go.Bar(
            x=starts,
            y=durations,
            name='Duration',
            marker_color=[_intensity_color(e) for e in completed],
            customdata=[e.intensity.value if e.intensity else 'unrated' for e in completed],
            hovertemplate='%{x|%H:%M:%S}<br>Duration: %{y}s<br>%{customdata}<extra></extra>'
        ),
        secondary_y=False
    )

    fig.add_trace(
        go.Scatter(
            x=starts,
            y=intervals,
            mode='lines+markers',
            name='Time between',
            line=dict(color=COLORS.INTERVAL_LINE, width=1.5),
            connectgaps=False,
            hovertemplate='%{x|%H:%M:%S}<br>Interval: %{y}s<extra></extra>'
        ),
        secondary_y=True
    )

    # Threshold guides (y = duration axis, y2 = interval axis)
    guides = [
        (STAGE.ACTIVE_MIN_DURATION_SECONDS, 'y', COLORS.STAGE_ACTIVE_LABOR,
         'dash', 'Active labor duration'),
        (STAGE.EARLY_MAX_INTERVAL_SECONDS, 'y2', COLORS.STAGE_EARLY_LABOR,
         'dot', 'Early labor interval'),
    ]
    for value, yref, color, dash, label in guides:
        fig.add_shape(
            type='line',
            xref='paper', x0=0, x1=1,
            yref=yref, y0=value, y1=value,
            line=dict(color=color, width=1, dash=dash)
        )
        fig.add_annotation(
            xref='paper', x=1 if yref == 'y2' else 0,
            yref=yref, y=value,
            text=label,
            showarrow=False,
            font=dict(size=9, color=color),
            xanchor='right' if yref == 'y2' else 'left',
            yanchor='bottom'
        )

    fig.update_layout(
        title=dict(text=title, font=dict(size=18), x=0.5),
        height=height,
        showlegend=True,
        legend=dict(orientation='h', yanchor='bottom', y=1.02, xanchor='right', x=1),
        hovermode='x unified',
        paper_bgcolor=COLORS.BACKGROUND,
        plot_bgcolor='white'
    )
    fig.update_yaxes(title_text='Duration (s)', gridcolor=COLORS.GRID, secondary_y=False)
    fig.update_yaxes(title_text='Interval (s)', showgrid=False, secondary_y=True)
    fig.update_xaxes(title_text='Start time', gridcolor=COLORS.GRID)

    return fig


def create_stage_indicator(
    classification: StageClassification,
    height: int = 200
) -> go.Figure:
    """
    Create a labor-stage gauge.

    Args:
        classification: Current stage classification.
        height: Height of the indicator in pixels.

    Returns:
        Plotly Figure object.
    """
    stage = classification.stage
    color = get_stage_color(stage)

    fig = go.Figure(go.Indicator(
        mode="gauge",
        value=stage.value,
        title={'text': stage.label},
        gauge={
            'axis': {
                'range': [0, LaborStage.ACTIVE_LABOR.value],
                'tickvals': [s.value for s in LaborStage],
                'ticktext': [s.label for s in LaborStage],
            },
            'bar': {'color': color},
            'steps': [
                {'range': [0.5, 1.5], 'color': 'rgba(40, 167, 69, 0.2)'},
                {'range': [1.5, 2.5], 'color': 'rgba(253, 126, 20, 0.2)'},
                {'range': [2.5, 3], 'color': 'rgba(220, 53, 69, 0.2)'}
            ],
        }
    ))

    fig.update_layout(
        height=height,
        margin=dict(l=20, r=20, t=50, b=20)
    )

    return fig
