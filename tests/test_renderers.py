from pathlib import Path

import matplotlib.pyplot as plt
import pytest

from hztimeline.catalog import load_catalog
from hztimeline.compute import derive_timeline
from hztimeline.models import TimelineInputs, ZoneBoundaries
from hztimeline.renderers.plotly_timeline import render_plotly_timeline
from hztimeline.renderers.static import render_static_chart, save_static_chart
from hztimeline.renderers.svg_legend import gradient_stops, render_zone_legend_svg


@pytest.fixture
def sun_data():
    return derive_timeline(load_catalog(), TimelineInputs(0, 1.0, 0.0))


def test_gradient_stops_pair_each_boundary() -> None:
    stops = gradient_stops(ZoneBoundaries(37, 89, 100))
    assert stops == [
        ("lightblue", 37),
        ("blue", 37),
        ("blue", 89),
        ("red", 89),
        ("red", 100),
        ("grey", 100),
    ]


def test_gradient_stops_missing_boundaries_run_to_the_end() -> None:
    offsets = [offset for _, offset in gradient_stops(ZoneBoundaries(None, None, None))]
    assert offsets == [100] * 6
    offsets = [offset for _, offset in gradient_stops(ZoneBoundaries(20, None, 60))]
    assert offsets == [20, 20, 100, 100, 100, 100]


def test_gradient_stops_never_decrease() -> None:
    offsets = [offset for _, offset in gradient_stops(ZoneBoundaries(50, 100, 0))]
    assert offsets == sorted(offsets)


def test_svg_legend_contains_zone_offsets_and_marker(sun_data) -> None:
    svg = render_zone_legend_svg(sun_data, len(sun_data.track) - 1)
    assert svg.startswith("<svg")
    assert 'id="temp-gradient"' in svg
    assert 'offset="37%"' in svg
    assert 'offset="89%"' in svg
    # Marker at the final sample sits at the right edge
    assert 'x="959.00"' in svg


def test_plotly_timeline(sun_data) -> None:
    fig = render_plotly_timeline(sun_data, 0.5)
    temp_trace, marker_trace = fig.data
    assert len(temp_trace.x) == len(sun_data.track)
    assert list(marker_trace.x) == [6150.0, 6150.0]
    assert list(fig.layout.xaxis.range) == [0, 12300]
    assert list(fig.layout.yaxis.range) == [0, 100]


def test_static_chart(sun_data, tmp_path: Path) -> None:
    fig = render_static_chart(sun_data, 0.372)
    chart_ax, legend_ax = fig.axes
    assert chart_ax.get_ylim() == (0, 100)
    assert "4.57 Gy" in legend_ax.get_xlabel()
    plt.close(fig)

    path = save_static_chart(sun_data, 0.37, tmp_path / "out" / "sun.png")
    assert path.exists()
    assert path.stat().st_size > 0
