"""
cooldown.py
-----------
Millisecond interval gate used to pace periodic actions such as sprite swaps.

Each owner builds its own Cooldown; timers never share phase.
"""

import random
import time
from typing import Callable, Optional


def monotonic_ms() -> float:
    """Process-wide monotonic clock in milliseconds."""
    return time.perf_counter() * 1000


class Cooldown:
    """
    Interval timer with an optional randomized duration.

    A cooldown that has never been reset reports finished, so the first
    check_finished() of a fresh instance lets the gated action through.
    """

    __slots__ = ('milliseconds', 'variance', '_duration', '_start', '_clock')

    def __init__(self, milliseconds: int, variance: int = 0,
                 clock: Optional[Callable[[], float]] = None):
        """
        Args:
            milliseconds: Base interval length
            variance: Half-width of the random spread applied on each reset
            clock: Zero-argument callable returning milliseconds (monotonic)
        """
        self.milliseconds = milliseconds
        self.variance = variance
        self._duration = milliseconds
        self._start = None
        self._clock = clock if clock is not None else monotonic_ms

    @property
    def duration(self) -> int:
        """Length of the interval currently being timed."""
        return self._duration

    def reset(self):
        """Start a new interval at the current clock reading."""
        self._start = self._clock()
        if self.variance:
            spread = abs(self.variance)
            self._duration = max(0, random.randint(
                self.milliseconds - spread,
                self.milliseconds + spread
            ))

    def check_finished(self) -> bool:
        """True once the current interval has fully elapsed."""
        if self._start is None:
            return True
        return self._clock() - self._start >= self._duration

    def __repr__(self) -> str:
        return f"<Cooldown duration={self._duration}ms started={self._start}>"
