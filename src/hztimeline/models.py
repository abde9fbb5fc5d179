"""Data model definitions — explicit boundaries between catalog, compute, and render layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EvolutionSample:
    """One point of a star's evolutionary track."""

    time: float  # Millions of years since formation
    log_radius: float  # log10 of radius in solar radii
    log_temp: float  # log10 of effective temperature in kelvin


@dataclass(frozen=True)
class AnnotatedSample:
    """Planet surface temperature at one point of the track."""

    time: float  # Millions of years since formation
    temp: float  # Planet equilibrium temperature (°C)


@dataclass(frozen=True)
class ZoneBoundaries:
    """Percent offsets along the star's lifespan. None if never reached."""

    temperate_zone_pct: int | None
    hot_zone_pct: int | None
    white_dwarf_pct: int | None


@dataclass(frozen=True)
class StarProfile:
    """Precomputed evolutionary track for one catalog star. Read-only input."""

    label: str  # Display name ("1.0 M☉")
    mass: float  # Solar masses
    timespan: float  # Total modelled lifespan (My)
    data_table: tuple[EvolutionSample, ...]  # Ordered by increasing time


@dataclass(frozen=True)
class TimelineInputs:
    """Watched inputs. Any change triggers a full recompute."""

    star_mass_idx: int  # Position in the catalog
    planet_distance: float  # AU
    star_age: float  # Externally selected age; a change resets the scrubber


@dataclass(frozen=True)
class TimelineData:
    """The sole input to renderers. Fully derived state."""

    profile: StarProfile
    track: tuple[AnnotatedSample, ...]
    zones: ZoneBoundaries

    @property
    def timeline_span(self) -> int:
        """Lifespan rounded to whole My, the span the scrubber maps onto."""
        # Round half up to match the catalog's source rounding
        return int(self.profile.timespan + 0.5)
