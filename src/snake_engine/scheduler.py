# scheduler.py
from __future__ import annotations
from typing import Optional, Protocol
import time

import pygame  # type: ignore


class Clock(Protocol):
    def now(self) -> float: ...  # milliseconds


class MonotonicClock:
    def now(self) -> float:
        return time.monotonic() * 1000.0


class PygameClock:
    """Milliseconds since pygame.init()."""
    def now(self) -> float:
        return float(pygame.time.get_ticks())


def should_step(now: float, last_step_time: float, interval: float) -> bool:
    return now - last_step_time >= interval


class TickScheduler:
    """
    Fixed-interval gate deciding when a simulation step happens,
    independent of how often the surrounding loop polls it.

    On an admitted step the reference time jumps to `now`, so ticks missed
    while the loop was stalled are dropped rather than replayed.
    """

    def __init__(self, interval_ms: float, clock: Optional[Clock] = None):
        self.interval_ms = interval_ms
        self.clock = clock or MonotonicClock()
        self.last_step = self.clock.now()

    def ready(self) -> bool:
        now = self.clock.now()
        if not should_step(now, self.last_step, self.interval_ms):
            return False
        self.last_step = now
        return True

    def restart(self) -> None:
        """Rearm from the current time (e.g. after a game reset)."""
        self.last_step = self.clock.now()
