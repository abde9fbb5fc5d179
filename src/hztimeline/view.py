"""Recompute-on-change controller tying the catalog, derived timeline, and playback together."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from hztimeline.compute import derive_timeline
from hztimeline.models import StarProfile, TimelineData, TimelineInputs
from hztimeline.playback import IndexCallback, Playback, TimelineCursor

logger = logging.getLogger(__name__)


class TimelineView:
    """Owns one derived timeline, its cursor, and its playback handle.

    Watched inputs are compared on every update. Any difference recomputes the
    whole timeline. A new star or star age rewinds the scrubber to 0; a new
    planet distance keeps the current position.
    """

    def __init__(
        self,
        catalog: Sequence[StarProfile],
        inputs: TimelineInputs,
        on_index: IndexCallback | None = None,
    ) -> None:
        self.catalog = catalog
        self.inputs = inputs
        self.data: TimelineData = derive_timeline(catalog, inputs)
        self.cursor = TimelineCursor(self.data, on_index=on_index)
        self.playback = Playback(self.cursor)

    def update(self, inputs: TimelineInputs) -> bool:
        """Apply new inputs. Returns True if anything was recomputed."""
        if inputs == self.inputs:
            return False
        data = derive_timeline(self.catalog, inputs)
        reset = (
            inputs.star_age != self.inputs.star_age
            or inputs.star_mass_idx != self.inputs.star_mass_idx
        )
        self.inputs, self.data = inputs, data
        self.cursor.retarget(self.data, reset_position=reset)
        logger.info(
            "Timeline recomputed for %s at %.2f AU (position %s)",
            self.data.profile.label,
            inputs.planet_distance,
            "reset" if reset else "kept",
        )
        return True

    def scrub(self, position: float) -> int:
        return self.cursor.seek(position)

    def close(self) -> None:
        self.playback.stop()
