"""Frame delta time and countdown timers."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field


class DeltaClock:
    """Tracks the time between consecutive frames, in seconds."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._now = clock()
        self._last = self._now

    def update(self) -> None:
        """Advance to the current frame."""
        self._last = self._now
        self._now = self._clock()

    def delta_time(self) -> float:
        """Seconds between the last two updates."""
        return self._now - self._last


@dataclass
class Timer:
    """A countdown that either stops at zero or starts over."""

    duration: float
    loop: bool = False
    remaining: float = field(init=False)

    def __post_init__(self) -> None:
        self.remaining = self.duration

    def reset(self) -> None:
        self.remaining = self.duration

    def is_finished(self) -> bool:
        return self.remaining <= 0.0

    def update(self, dt: float) -> None:
        """Count down by ``dt`` seconds."""
        self.remaining -= dt
        if self.remaining < 0.0:
            self.remaining = self.duration if self.loop else 0.0

    def elapsed(self) -> float:
        return max(0.0, self.duration - self.remaining)