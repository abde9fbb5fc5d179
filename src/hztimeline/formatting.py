"""Display helpers shared by the app and the renderers."""

import math


def force_number(value: object) -> float:
    """Coerce typed input to a float. Anything unparseable becomes 0.0."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(number) else number


def round_to_two_places(value: float) -> float:
    return math.floor(value * 100 + 0.5) / 100


def format_age(time_my: float) -> str:
    """Human-readable elapsed time: "850 My" or "4.57 Gy"."""
    age = math.floor(time_my)
    if age < 1000:
        return f"{age} My"
    gy = round_to_two_places(age / 1000)
    text = f"{gy:.2f}".rstrip("0").rstrip(".")
    return f"{text} Gy"


def format_axis_tick(value: float) -> str:
    """Coarser label for chart ticks: whole My below 1000, whole Gy above."""
    if value < 1000:
        return f"{math.floor(value + 0.5)} My"
    return f"{math.floor(value / 1000 + 0.5)} Gy"
