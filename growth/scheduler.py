"""
Cooperative timer queue on a virtual millisecond clock.

Growth steps never call each other directly: each one registers its
continuation here with a delay. Callers advance the clock, either by a fixed
amount per animation frame or from wall-clock time, and every timer that
became due runs in due-time order. Timers with equal due times run in the
order they were scheduled.
"""

import heapq
import itertools
from typing import Callable, List, Optional

# Browsers clamp nested setTimeout delays to 4ms
MIN_DELAY_MS = 4.0


class SchedulerError(RuntimeError):
    pass


class TimerHandle:
    __slots__ = ('callback', 'due', 'interval', 'cancelled')

    def __init__(self, callback: Callable[[], None], due: float, interval: Optional[float] = None):
        self.callback = callback
        self.due = due
        self.interval = interval
        self.cancelled = False

    @property
    def periodic(self) -> bool:
        return self.interval is not None

    def __repr__(self) -> str:
        kind = f"every {self.interval}ms" if self.periodic else "once"
        status = "cancelled" if self.cancelled else f"due {self.due:.1f}"
        return f"TimerHandle({kind}, {status})"


class VirtualScheduler:
    def __init__(self, min_delay_ms: float = MIN_DELAY_MS):
        if min_delay_ms < 0:
            raise ValueError(f"min_delay_ms must be >= 0, got {min_delay_ms}")
        self.min_delay_ms = min_delay_ms
        self.now: float = 0.0
        self._queue: List[tuple] = []
        self._counter = itertools.count()
        self.fired = 0

    def _push(self, handle: TimerHandle):
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle))

    def schedule_delayed(self, callback: Callable[[], None], delay_ms: float) -> TimerHandle:
        """Run callback once, delay_ms (at least min_delay_ms) after the current time."""
        handle = TimerHandle(callback, self.now + max(self.min_delay_ms, delay_ms))
        self._push(handle)
        return handle

    def schedule_interval(self, callback: Callable[[], None], interval_ms: float) -> TimerHandle:
        """Run callback every interval_ms until cancelled."""
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be > 0, got {interval_ms}")
        handle = TimerHandle(callback, self.now + interval_ms, interval=interval_ms)
        self._push(handle)
        return handle

    def cancel(self, handle: Optional[TimerHandle]):
        if handle is not None:
            handle.cancelled = True

    cancel_interval = cancel

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    @property
    def has_periodic(self) -> bool:
        return any(h.periodic and not h.cancelled for _, _, h in self._queue)

    def _run_next(self):
        due, _, handle = heapq.heappop(self._queue)
        if handle.cancelled:
            return
        self.now = max(self.now, due)
        if handle.periodic:
            handle.due = due + handle.interval
            self._push(handle)
        self.fired += 1
        handle.callback()

    def advance(self, ms: float) -> int:
        """Move the clock forward by ms, running every timer that falls due."""
        if ms < 0:
            raise ValueError(f"Cannot move the clock backwards ({ms}ms)")
        target = self.now + ms
        fired_before = self.fired
        while self._queue and self._queue[0][0] <= target:
            self._run_next()
        self.now = target
        return self.fired - fired_before

    def run_until_idle(self, max_events: int = 1_000_000) -> int:
        """Drain all one-shot timers. Only valid while no interval is active."""
        if self.has_periodic:
            raise SchedulerError("run_until_idle() would never return with active intervals")
        fired_before = self.fired
        while self._queue:
            if self.fired - fired_before >= max_events:
                raise SchedulerError(f"Still busy after {max_events} events")
            self._run_next()
        return self.fired - fired_before
