"""Star catalog loading — per-mass evolutionary tracks from the bundled JSON data file."""

import json
import logging
import math
from functools import lru_cache
from pathlib import Path

from hztimeline.models import EvolutionSample, StarProfile

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "shz_stars.json"


class CatalogError(Exception):
    """Catalog file missing, unreadable, or structurally invalid."""


def _parse_profile(index: int, raw: dict) -> StarProfile:
    try:
        samples = tuple(
            EvolutionSample(
                time=float(row["time"]),
                log_radius=float(row["logRadius"]),
                log_temp=float(row["logTemp"]),
            )
            for row in raw["dataTable"]
        )
        profile = StarProfile(
            label=str(raw.get("label") or f"{raw['mass']} M☉"),
            mass=float(raw["mass"]),
            timespan=float(raw["timespan"]),
            data_table=samples,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise CatalogError(f"star #{index}: malformed entry ({e!r})") from e

    if not all(math.isfinite(s.time) for s in samples):
        raise CatalogError(f"star #{index}: track times must be finite numbers")
    if len(samples) < 2:
        raise CatalogError(f"star #{index}: track needs at least 2 samples")
    if any(b.time < a.time for a, b in zip(samples, samples[1:])):
        raise CatalogError(f"star #{index}: track times must not decrease")
    if not (profile.timespan > 0 and math.isfinite(profile.timespan)):
        raise CatalogError(f"star #{index}: timespan must be a positive finite number")
    return profile


@lru_cache(maxsize=8)
def load_catalog(path: Path = DEFAULT_CATALOG_PATH) -> tuple[StarProfile, ...]:
    """Parse a star catalog JSON file.

    File format: a list of ``{"label", "mass", "timespan", "dataTable"}`` objects,
    where ``dataTable`` is a list of ``{"time", "logRadius", "logTemp"}`` records
    ordered by time. List order is the star-mass index.

    Returns:
        Tuple of StarProfile objects, in file order.

    Raises:
        CatalogError: On a missing file, invalid JSON, or an invalid entry.
    """
    try:
        with Path(path).open(encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise CatalogError(f"cannot read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"invalid JSON in {path}: {e}") from e

    if not isinstance(raw, list) or not raw:
        raise CatalogError(f"{path}: expected a non-empty list of stars")

    profiles = tuple(_parse_profile(i, entry) for i, entry in enumerate(raw))
    logger.info("Loaded %d star profiles from %s", len(profiles), path)
    return profiles
