"""
Keyed one-shot timers driven by the frame loop
"""

import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


TimerCallback = Callable[[float], None]


@dataclass(order=True)
class _PendingTimer:
    deadline: float
    sequence: int
    key: str = field(compare=False)
    callback: TimerCallback = field(compare=False)


class TimerWheel:
    """
    Single owner of every deferred callback in a session.

    Timers are keyed by purpose ("hint_hide", "intro_meeting", ...).
    Scheduling a key that is already pending replaces the old timer,
    so re-arming never leaves a stale timer racing the new one.

    Nothing fires on its own: the frame loop calls advance(now) and due
    timers run there, in deadline order (ties in scheduling order).
    Callbacks receive their deadline, not the loop time, so chained
    timers stay on schedule even when a frame runs late.

    Example:
        wheel = TimerWheel()
        wheel.schedule("hint_hide", 3.0, lambda at: hide_hint())
        ...
        wheel.advance()   # once per frame
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, logger=None):
        self.clock = clock
        self.logger = logger
        self._timers: Dict[str, _PendingTimer] = {}
        self._sequence = itertools.count()

    def schedule(self, key: str, delay: float, callback: TimerCallback,
                 now: Optional[float] = None) -> float:
        """
        Schedule (or re-arm) a one-shot timer.

        Args:
            key: Purpose of the timer; replaces any pending timer with this key
            delay: Seconds from `now` until the callback fires
            callback: Called with the deadline when the timer fires
            now: Base time (read from the clock when omitted)

        Returns:
            The absolute deadline
        """
        if delay < 0:
            raise ValueError(f"Timer delay must be non-negative, got {delay}")
        base = self.clock() if now is None else now
        deadline = base + delay
        if key in self._timers and self.logger:
            self.logger.debug(f"Re-arming timer '{key}'")
        self._timers[key] = _PendingTimer(deadline, next(self._sequence), key, callback)
        return deadline

    def cancel(self, key: str) -> bool:
        """Cancel a pending timer. Returns True if one was pending."""
        return self._timers.pop(key, None) is not None

    def cancel_prefix(self, prefix: str) -> List[str]:
        """Cancel every pending timer whose key starts with prefix"""
        keys = [key for key in self._timers if key.startswith(prefix)]
        for key in keys:
            del self._timers[key]
        return keys

    def deadline_of(self, key: str) -> Optional[float]:
        timer = self._timers.get(key)
        return timer.deadline if timer else None

    def pending_keys(self) -> List[str]:
        """Pending keys in firing order"""
        return [timer.key for timer in sorted(self._timers.values())]

    def advance(self, now: Optional[float] = None) -> int:
        """
        Fire every timer whose deadline is <= now.

        Timers scheduled by a callback are fired in the same call if they
        are already due.

        Returns:
            Number of callbacks fired
        """
        current = self.clock() if now is None else now
        fired = 0
        while True:
            due = [timer for timer in self._timers.values() if timer.deadline <= current]
            if not due:
                return fired
            timer = min(due)
            del self._timers[timer.key]
            timer.callback(timer.deadline)
            fired += 1

    def clear(self) -> None:
        self._timers.clear()

    def __len__(self) -> int:
        return len(self._timers)
