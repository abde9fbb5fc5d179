"""Habitable-zone computation layer — planet temperatures, zone boundaries, and timeline lookup."""

import logging
import math
from bisect import bisect_right
from collections.abc import Sequence
from operator import attrgetter

from hztimeline.models import (
    AnnotatedSample,
    EvolutionSample,
    StarProfile,
    TimelineData,
    TimelineInputs,
    ZoneBoundaries,
)

logger = logging.getLogger(__name__)

LOG_BASE = 10
SOLAR_RADIUS_IN_METERS = 6.96e8
AU_IN_METERS = 1.495978707e11
KELVIN_OFFSET = 273

TEMPERATE_THRESHOLD_C = 0
HOT_THRESHOLD_C = 100


class TrackError(ValueError):
    """Track or lifespan that violates the engine's preconditions."""


def _round_half_up(value: float) -> int:
    """Round half up, like JavaScript's Math.round."""
    return math.floor(value + 0.5)


def _pow(base: float, exponent: float) -> float:
    """Float power that overflows to inf instead of raising."""
    try:
        return base**exponent
    except OverflowError:
        return math.inf


def _require_track(track: Sequence[AnnotatedSample]) -> None:
    if len(track) < 2:
        raise TrackError(f"track needs at least 2 samples, got {len(track)}")


def planet_temperature(solar_radii: float, star_temp: float, planet_distance: float) -> float:
    """Equilibrium temperature of a planet in °C.

    T(planet) = [R(star)^2 x T(star)^4 / 4 d(planet)^2]^0.25

    Args:
        solar_radii: Stellar radius in solar radii.
        star_temp: Stellar effective temperature in kelvin.
        planet_distance: Orbital distance in meters.

    Returns:
        Planet temperature in °C. Invalid inputs give nan/inf rather than raising.
    """
    radius = solar_radii * SOLAR_RADIUS_IN_METERS
    flux = _pow(radius, 2) * _pow(star_temp, 4)
    denom = 4 * _pow(planet_distance, 2)
    if denom == 0:
        # Float division would raise; follow IEEE semantics instead
        ratio = math.inf if flux else math.nan
    else:
        ratio = flux / denom
    return _pow(ratio, 0.25) - KELVIN_OFFSET


def annotate(
    samples: Sequence[EvolutionSample], planet_distance_au: float
) -> tuple[AnnotatedSample, ...]:
    """Pair each track sample's time with the planet temperature at that moment.

    Args:
        samples: Evolutionary track ordered by time.
        planet_distance_au: Planet orbital distance in astronomical units.

    Returns:
        Tuple of AnnotatedSample, same length and order as ``samples``.
    """
    distance = planet_distance_au * AU_IN_METERS
    return tuple(
        AnnotatedSample(
            time=s.time,
            temp=planet_temperature(
                _pow(LOG_BASE, s.log_radius), _pow(LOG_BASE, s.log_temp), distance
            ),
        )
        for s in samples
    )


def zone_boundaries(
    track: Sequence[AnnotatedSample], lifespan: float
) -> ZoneBoundaries:
    """Scan a track once for the temperate, hot, and white-dwarf offsets.

    Per sample the first matching rule wins: temperate onset (temp > 0), then hot
    onset (temp > 100), then a new running maximum. The white-dwarf offset
    therefore ends at the global maximum temperature reached after both onsets
    have been consumed.

    Raises:
        TrackError: Track shorter than 2 samples or lifespan not a positive number.
    """
    _require_track(track)
    if not (lifespan > 0 and math.isfinite(lifespan)):
        raise TrackError(f"lifespan must be positive and finite, got {lifespan!r}")

    def pct(time: float) -> int:
        return _round_half_up(time / lifespan * 100)

    temperate: int | None = None
    hot: int | None = None
    white_dwarf: int | None = None
    max_temp = -math.inf
    for sample in track:
        if temperate is None and sample.temp > TEMPERATE_THRESHOLD_C:
            temperate = pct(sample.time)
        elif hot is None and sample.temp > HOT_THRESHOLD_C:
            hot = pct(sample.time)
        elif sample.temp > max_temp:
            white_dwarf = pct(sample.time)
            max_temp = sample.temp

    return ZoneBoundaries(
        temperate_zone_pct=temperate, hot_zone_pct=hot, white_dwarf_pct=white_dwarf
    )


def locate(track: Sequence[AnnotatedSample], target_time: float) -> int:
    """Return the index i with track[i].time <= target_time < track[i+1].time.

    The target is clamped first: anything before the first sample resolves to 0
    and anything at or past the last sample resolves to the last index.

    Raises:
        TrackError: Track shorter than 2 samples, or target_time is NaN.
    """
    _require_track(track)
    if math.isnan(target_time):
        raise TrackError("target time is NaN")

    last = len(track) - 1
    if target_time < track[0].time:
        return 0
    if target_time >= track[last].time:
        return last
    # track[0].time <= target < track[last].time, so the result lies in [0, last)
    return bisect_right(track, target_time, 0, last, key=attrgetter("time")) - 1


def derive_timeline(
    catalog: Sequence[StarProfile], inputs: TimelineInputs
) -> TimelineData:
    """Derive every output the timeline renders from the watched inputs.

    Args:
        catalog: Ordered star profiles.
        inputs: Star index, planet distance, and star age.

    Returns:
        TimelineData with the annotated track and its zone boundaries.

    Raises:
        IndexError: star_mass_idx is outside the catalog.
        TrackError: The selected profile violates the engine's preconditions.
    """
    if not 0 <= inputs.star_mass_idx < len(catalog):
        raise IndexError(f"star index {inputs.star_mass_idx} out of range")
    profile = catalog[inputs.star_mass_idx]
    track = annotate(profile.data_table, inputs.planet_distance)
    zones = zone_boundaries(track, profile.timespan)
    logger.debug(
        "Derived %s at %.2f AU: %d samples, zones=%s",
        profile.label,
        inputs.planet_distance,
        len(track),
        zones,
    )
    return TimelineData(profile=profile, track=track, zones=zones)
