"""Runtime settings read from the environment (populate it with a .env file via python-dotenv)."""

import os
from dataclasses import dataclass
from pathlib import Path

from hztimeline.catalog import DEFAULT_CATALOG_PATH
from hztimeline.formatting import force_number

_ROOT = Path(__file__).parent.parent.parent


@dataclass(frozen=True)
class Settings:
    catalog_path: Path  # Star catalog JSON
    log_level: str  # "DEBUG", "INFO", ...
    log_file: str | None  # Extra log destination, if any
    default_distance: float  # Planet distance (AU) preselected in the app
    results_dir: Path  # Where the CLI writes PNG charts


def load_settings() -> Settings:
    """Build Settings from HZT_* environment variables, falling back to defaults.

    A non-positive or unparseable HZT_DEFAULT_DISTANCE falls back to 1 AU.
    """
    distance = force_number(os.environ.get("HZT_DEFAULT_DISTANCE", "1.0"))
    return Settings(
        catalog_path=Path(os.environ.get("HZT_CATALOG_PATH") or DEFAULT_CATALOG_PATH),
        log_level=os.environ.get("HZT_LOG_LEVEL", "INFO").upper(),
        log_file=os.environ.get("HZT_LOG_FILE") or None,
        default_distance=distance if distance > 0 else 1.0,
        results_dir=Path(os.environ.get("HZT_RESULTS_DIR") or _ROOT / "results"),
    )
