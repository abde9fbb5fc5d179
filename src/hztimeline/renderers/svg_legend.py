"""SVG zone legend renderer.

Produces a standalone SVG string: a horizontal bar spanning the star's
lifespan, filled with a hard-edged linear gradient (too cold → temperate →
too hot → white dwarf) and a thin marker at the current sample's time.

Coordinate system:
  x ∈ [0, 960]  (0 = formation, 960 = end of modelled lifespan)
  y ∈ [0, 25]
"""

from __future__ import annotations

from hztimeline.models import TimelineData, ZoneBoundaries

COLD_COLOR = "lightblue"
TEMPERATE_COLOR = "blue"
HOT_COLOR = "red"
WHITE_DWARF_COLOR = "grey"
_MARKER_COLOR = "red"

_WIDTH = 960
_HEIGHT = 25
_BAR_Y = 7
_BAR_HEIGHT = 10


def gradient_stops(zones: ZoneBoundaries) -> list[tuple[str, int]]:
    """Paired colour stops for the legend gradient, as (colour, percent).

    Each boundary appears twice so that colours switch sharply. A boundary that
    never occurs is pushed to 100%, so the preceding colour runs to the end.
    Offsets are made non-decreasing, which SVG requires anyway.
    """
    bounds = [zones.temperate_zone_pct, zones.hot_zone_pct, zones.white_dwarf_pct]
    colors = [COLD_COLOR, TEMPERATE_COLOR, HOT_COLOR, WHITE_DWARF_COLOR]
    stops: list[tuple[str, int]] = []
    floor = 0
    for i, pct in enumerate(bounds):
        offset = max(floor, 100 if pct is None else pct)
        stops.append((colors[i], offset))
        stops.append((colors[i + 1], offset))
        floor = offset
    return stops


def render_zone_legend_svg(data: TimelineData, sample_index: int) -> str:
    """Return an SVG string with the zone gradient and a current-time marker.

    Args:
        data: Derived timeline.
        sample_index: Index into ``data.track`` of the sample being displayed.

    Returns:
        SVG markup suitable for st.markdown(..., unsafe_allow_html=True).
    """
    stop_parts = [
        f'<stop offset="{offset}%" style="stop-color: {color}"/>'
        for color, offset in gradient_stops(data.zones)
    ]
    span = data.timeline_span or 1
    marker_x = data.track[sample_index].time / span * _WIDTH
    marker_x = min(_WIDTH, max(0.0, marker_x))
    stops_svg = "\n      ".join(stop_parts)

    return f"""<svg xmlns="http://www.w3.org/2000/svg" width="100%" height="{_HEIGHT}"
     viewBox="0 0 {_WIDTH} {_HEIGHT}" preserveAspectRatio="none">
  <defs>
    <linearGradient id="temp-gradient">
      {stops_svg}
    </linearGradient>
  </defs>
  <rect x="0" y="{_BAR_Y}" width="{_WIDTH}" height="{_BAR_HEIGHT}" fill="url(#temp-gradient)"/>
  <rect x="{marker_x - 1:.2f}" y="0" width="2" height="{_HEIGHT}" fill="{_MARKER_COLOR}"/>
</svg>"""
