"""Deferred actions on a virtual millisecond clock.

Every delay in the animation (ripple reveals, hides, hover pulses, the
continuous ripple's next hop) goes through one Scheduler. The render loop
advances it by the elapsed frame time, so ordering is deterministic and tests
can drive time directly.
"""

import heapq
import itertools
from typing import Any, Callable


class Timer:
    """Handle for a scheduled action. Cancelled timers are skipped when due."""

    __slots__ = ("when", "callback", "args", "cancelled")

    def __init__(self, when: float, callback: Callable[..., Any], args: tuple):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    """Priority queue of (fire time, action) entries."""

    def __init__(self, now: float = 0.0):
        self.now = now
        self._queue: list[tuple[float, int, Timer]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Timer:
        """Run callback(*args) once `delay` ms from now."""
        timer = Timer(self.now + max(0.0, delay), callback, args)
        heapq.heappush(self._queue, (timer.when, next(self._seq), timer))
        return timer

    def advance(self, elapsed: float) -> int:
        """Move the clock forward by `elapsed` ms, firing everything that came due.

        While an action runs, `now` reads that action's fire time, so delays it
        schedules are measured from its own offset rather than the frame end.
        Actions scheduled inside the window also fire in this call.
        Returns the number of actions fired.
        """
        target = self.now + max(0.0, elapsed)
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            when, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = when
            timer.callback(*timer.args)
            fired += 1
        self.now = target
        return fired

    def clear(self) -> None:
        """Drop every pending action."""
        for _, _, timer in self._queue:
            timer.cancel()
        self._queue.clear()

    def __len__(self) -> int:
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)
