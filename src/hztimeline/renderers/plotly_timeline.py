"""Plotly interactive planet-temperature timeline renderer.

Draws the annotated track (planet °C against star age) over a fixed 0–100 °C
band, with a vertical marker at the scrub position.
"""

import numpy as np
import plotly.graph_objects as go

from hztimeline.formatting import format_axis_tick
from hztimeline.models import TimelineData

_BG = "#ffffff"
_LINE_COLOR = "#222222"
_MARKER_COLOR = "red"
_COLD_AXIS = "#0000FF"
_HOT_AXIS = "#FF0000"
_TICK_COUNT = 8


def render_plotly_timeline(data: TimelineData, position: float) -> go.Figure:
    """Render a TimelineData as a Plotly line chart.

    Args:
        data: Fully derived timeline.
        position: Scrub position in [0, 1].

    Returns:
        Plotly Figure object.
    """
    span = data.timeline_span
    times = np.array([s.time for s in data.track])
    temps = np.array([s.temp for s in data.track])

    temp_trace = go.Scatter(
        x=times,
        y=temps,
        mode="lines",
        line=dict(color=_LINE_COLOR, width=2, shape="spline"),
        hovertemplate="%{x:.0f} My<br>%{y:.0f} °C<extra></extra>",
        name="planet temperature",
    )

    marker_x = position * span
    marker_trace = go.Scatter(
        x=[marker_x, marker_x],
        y=[0, 100],
        mode="lines",
        line=dict(color=_MARKER_COLOR, width=2),
        hoverinfo="skip",
        name="now",
    )

    tick_vals = np.linspace(0, span, _TICK_COUNT)

    fig = go.Figure(data=[temp_trace, marker_trace])
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=60, r=20, t=30, b=40),
        height=260,
        xaxis=dict(
            range=[0, span],
            tickvals=list(tick_vals),
            ticktext=[format_axis_tick(v) for v in tick_vals],
            showgrid=False,
        ),
        # Only the habitable band is shown; the line clips above and below
        yaxis=dict(range=[0, 100], showticklabels=False, showgrid=False),
        shapes=[
            dict(type="line", xref="paper", yref="paper", x0=0, x1=1, y0=0, y1=0,
                 line=dict(color=_COLD_AXIS, width=2)),
            dict(type="line", xref="paper", yref="paper", x0=0, x1=1, y0=1, y1=1,
                 line=dict(color=_HOT_AXIS, width=2)),
        ],
        annotations=[
            dict(text="Too cold", xref="paper", yref="paper", x=0.5, y=0,
                 yshift=-28, showarrow=False, font=dict(color=_COLD_AXIS)),
            dict(text="Too hot", xref="paper", yref="paper", x=0.5, y=1,
                 yshift=14, showarrow=False, font=dict(color=_HOT_AXIS)),
        ],
    )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]

    return fig
