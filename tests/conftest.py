import matplotlib
import pytest

from hztimeline.models import AnnotatedSample, EvolutionSample, StarProfile

matplotlib.use("Agg")


def make_track(temps, times=None) -> tuple[AnnotatedSample, ...]:
    if times is None:
        times = [10.0 * i for i in range(len(temps))]
    return tuple(AnnotatedSample(time=float(x), temp=float(y)) for x, y in zip(times, temps))


def make_profile(label: str, mass: float, timespan: float, n: int = 11) -> StarProfile:
    """Flat sun-like track sampled evenly over the timespan."""
    step = timespan / (n - 1)
    samples = tuple(
        EvolutionSample(time=i * step, log_radius=0.01 * i, log_temp=3.76)
        for i in range(n)
    )
    return StarProfile(label=label, mass=mass, timespan=timespan, data_table=samples)


@pytest.fixture
def small_catalog() -> tuple[StarProfile, ...]:
    return (
        make_profile("1.0 M☉", 1.0, 100.0),
        make_profile("2.0 M☉", 2.0, 50.0, n=6),
    )
