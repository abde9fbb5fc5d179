"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from hztimeline.compute import locate
from hztimeline.formatting import format_age, format_axis_tick
from hztimeline.models import TimelineData
from hztimeline.renderers.svg_legend import gradient_stops

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(data: TimelineData, position: float = 0.0) -> Figure:
    """Render a TimelineData as a two-panel static image.

    Top panel: planet temperature over the star's lifespan, clipped to 0–100 °C.
    Bottom panel: the zone legend bar.

    Args:
        data: Fully derived timeline.
        position: Scrub position in [0, 1] to mark.

    Returns:
        matplotlib Figure object.
    """
    span = data.timeline_span
    times = np.array([s.time for s in data.track])
    temps = np.array([s.temp for s in data.track])

    fig, (ax, legend_ax) = plt.subplots(
        2, 1, figsize=(10, 3.5), sharex=True, gridspec_kw={"height_ratios": [8, 1]}
    )

    ax.plot(times, temps, color="#222222", linewidth=1.5)
    ax.axvline(position * span, color="red", linewidth=2)
    ax.set_ylim(0, 100)
    ax.set_xlim(0, span)
    ax.set_yticks([])
    ax.spines["bottom"].set_color("#0000FF")
    ax.spines["top"].set_color("#FF0000")
    ax.set_title(f"{data.profile.label}: planet temperature (°C)")
    ax.text(0.5, 1.02, "Too hot", color="#FF0000", ha="center", transform=ax.transAxes)
    ax.text(0.5, 0.02, "Too cold", color="#0000FF", ha="center", transform=ax.transAxes)

    # Stops come in colour pairs at each boundary; fill between consecutive offsets
    stops = gradient_stops(data.zones)
    edges = [0] + [offset for _, offset in stops[::2]] + [100]
    colors = [stops[0][0]] + [color for color, _ in stops[1::2]]
    for color, lo, hi in zip(colors, edges, edges[1:]):
        if hi > lo:
            legend_ax.axvspan(lo / 100 * span, hi / 100 * span, color=color)
    legend_ax.set_yticks([])

    tick_vals = np.linspace(0, span, 8)
    legend_ax.set_xticks(tick_vals)
    legend_ax.set_xticklabels([format_axis_tick(v) for v in tick_vals])

    current = data.track[locate(data.track, position * span)]
    legend_ax.set_xlabel(f"Time since star system formation: {format_age(current.time)}")

    fig.tight_layout()
    return fig


def save_static_chart(
    data: TimelineData, position: float = 0.0, output_path: Path | None = None
) -> Path:
    """Save a TimelineData chart as a PNG file.

    Args:
        data: Fully derived timeline.
        position: Scrub position in [0, 1] to mark.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        filename = f"hz_{data.profile.mass:g}Msun_{round(position * 100)}pct.png"
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(data, position)
    fig.savefig(output_path)
    plt.close(fig)
    return output_path
