"""CLI entry point for habitable-zone timeline charts.

    hztimeline --star 0 --distance 1.0 --position 0.37
    uv run python src/hztimeline/timeline.py --list
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from hztimeline.catalog import CatalogError, load_catalog
from hztimeline.compute import TrackError, derive_timeline
from hztimeline.config import load_settings
from hztimeline.formatting import format_age
from hztimeline.logging_config import setup_logging
from hztimeline.models import TimelineInputs
from hztimeline.playback import TimelineCursor
from hztimeline.renderers.static import save_static_chart

logger = logging.getLogger(__name__)


def _parser(default_distance: float) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hztimeline",
        description="Plot a planet's temperature over its star's lifetime.",
    )
    parser.add_argument("--star", type=int, default=0, help="catalog index (see --list)")
    parser.add_argument(
        "--distance", type=float, default=default_distance, help="planet distance in AU"
    )
    parser.add_argument(
        "--position", type=float, default=0.0, help="scrub position in [0, 1] to mark"
    )
    parser.add_argument("--output", default=None, help="PNG path (default: results/)")
    parser.add_argument("--list", action="store_true", help="list catalog stars and exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)
    args = _parser(settings.default_distance).parse_args(argv)

    try:
        catalog = load_catalog(settings.catalog_path)
    except CatalogError as e:
        logger.error("%s", e)
        return 1

    if args.list:
        for i, profile in enumerate(catalog):
            print(f"{i}: {profile.label} ({format_age(profile.timespan)})")
        return 0

    try:
        data = derive_timeline(
            catalog, TimelineInputs(args.star, args.distance, star_age=0.0)
        )
    except IndexError as e:
        logger.error("%s (catalog has %d stars)", e, len(catalog))
        return 2
    except TrackError as e:
        logger.error("%s: %s", catalog[args.star].label, e)
        return 2

    cursor = TimelineCursor(data)
    cursor.seek(args.position)
    sample = cursor.current_sample
    print(f"{data.profile.label} at {args.distance:g} AU, {format_age(sample.time)}: "
          f"{sample.temp:.1f} °C")
    print(f"Zones: {data.zones}")

    if args.output:
        output = Path(args.output)
    else:
        filename = f"hz_{data.profile.mass:g}Msun_{args.distance:g}AU.png"
        output = settings.results_dir / filename
    path = save_static_chart(data, cursor.position, output)
    print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
