"""Timeline scrubbing and timed playback.

TimelineCursor holds the scrub position and playback rate for one derived
timeline and turns positions into sample indices. Playback owns the single
repeating timer task that advances a cursor. Both run on one thread; the timer
is an asyncio task on the caller's event loop.
"""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Callable

from hztimeline.compute import locate
from hztimeline.formatting import force_number
from hztimeline.models import TimelineData

logger = logging.getLogger(__name__)

# Seconds between playback ticks
TICK_INTERVAL = 0.025
# How far the timeline moves per tick at rate 1.0, as a fraction of the lifespan
ANIMATION_INCREMENT = 0.005

MIN_RATE = 0.1
MAX_RATE = 2.0

IndexCallback = Callable[[int], None]


class TimelineCursor:
    """Scrub position (0..1) along one star's lifespan and the sample it lands on."""

    def __init__(
        self,
        data: TimelineData,
        on_index: IndexCallback | None = None,
        rate: float = 1.0,
    ) -> None:
        self.data = data
        self.on_index = on_index
        self.rate = rate
        self.position = 0.0
        self.sample_index = 0

    def target_time(self, position: float) -> float:
        """Years after formation (My) that a scrub position points at."""
        return position * self.data.timeline_span

    def _relocate(self) -> int:
        self.sample_index = locate(self.data.track, self.target_time(self.position))
        if self.on_index is not None:
            self.on_index(self.sample_index)
        return self.sample_index

    def seek(self, position: float) -> int:
        """Move to a scrub position (manual drag) and return the sample index."""
        self.position = min(1.0, max(0.0, position))
        return self._relocate()

    def advance(self) -> bool:
        """Run one playback tick.

        Returns:
            True while playback should continue, False once the end is reached.
        """
        if self.position >= 1:
            self.position = 1.0
            return False
        next_position = self.position + ANIMATION_INCREMENT * self.rate
        if next_position >= 1 or math.isclose(next_position, 1.0):
            next_position = 1.0
        self.position = next_position
        self._relocate()
        return self.position < 1

    def set_rate(self, value: object) -> bool:
        """Accept a typed rate in [MIN_RATE, MAX_RATE]; anything else is ignored."""
        rate = force_number(value)
        if not MIN_RATE <= rate <= MAX_RATE:
            logger.debug("Ignoring playback rate %r", value)
            return False
        self.rate = rate
        return True

    def retarget(self, data: TimelineData, reset_position: bool) -> int:
        """Swap in a freshly derived timeline, optionally rewinding to the start."""
        self.data = data
        if reset_position:
            self.position = 0.0
        return self._relocate()

    @property
    def current_sample(self):
        return self.data.track[self.sample_index]


class Playback:
    """Stopped/Playing state machine around one cancellable timer task."""

    def __init__(self, cursor: TimelineCursor, interval: float = TICK_INTERVAL) -> None:
        self.cursor = cursor
        self.interval = interval
        self._task: asyncio.Task | None = None

    @property
    def task(self) -> asyncio.Task | None:
        return self._task

    @property
    def playing(self) -> bool:
        return self._task is not None

    def start(self) -> None:
        """Begin ticking from the current position. No-op while already playing.

        Must be called from inside a running event loop.
        """
        if self._task is not None:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("Playback started at position %.3f", self.cursor.position)

    def stop(self) -> None:
        """Cancel the timer task, if any. Safe to call repeatedly."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            logger.debug("Playback stopped at position %.3f", self.cursor.position)

    def toggle(self) -> None:
        if self.playing:
            self.stop()
        else:
            self.start()

    async def _run(self) -> None:
        try:
            while True:
                await asyncio.sleep(self.interval)
                if not self.cursor.advance():
                    logger.debug("Playback reached the end of the timeline")
                    break
        finally:
            # A stop()/start() pair may already have installed a newer task
            if self._task is asyncio.current_task():
                self._task = None
