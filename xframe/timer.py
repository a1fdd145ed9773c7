"""Frame timer tracking elapsed time, total time and frame rate."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures time between updates and averages frames per second."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.perf_counter
        self._last_tick = 0.0
        self.elapsed_time = 0.0
        self.total_time = 0.0
        self._last_update_time = 0.0
        self._frames_since_last_second = 0.0
        self.frames_per_second = 0.0

    def initialize(self) -> None:
        """Start timing from now and reset all counters."""
        self._last_tick = self._clock()
        self.elapsed_time = 0.0
        self.total_time = 0.0
        self._last_update_time = 0.0
        self._frames_since_last_second = 0.0
        self.frames_per_second = 0.0

    def update(self) -> None:
        """Advance one frame."""
        current = self._clock()
        self.elapsed_time = current - self._last_tick
        self.total_time += self.elapsed_time
        self._last_tick = current

        self._frames_since_last_second += 1.0
        if self.total_time >= self._last_update_time + 1.0:
            self.frames_per_second = self._frames_since_last_second / (
                self.total_time - self._last_update_time
            )
            self._frames_since_last_second = 0.0
            self._last_update_time = self.total_time