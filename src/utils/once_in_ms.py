"""
Throttling utility for rate-limited work inside the frame loop
"""

import time
from typing import Callable, Optional


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    Calls that arrive too early are dropped, never queued: a throttled
    caller simply skips the work this time around.

    Example:
        # 32 Hz haptic throttle:
        self.haptic_throttle = OnceInMs(1000 / 32)

        # On every pointer move:
        if self.haptic_throttle.should_execute():
            sink.haptic_pulse(intensity, 0.5)
    """

    def __init__(self, interval_ms: float, clock: Callable[[], float] = time.monotonic):
        """
        Initialize timer with interval.

        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Monotonic clock returning seconds
        """
        self.interval_ms = interval_ms
        self.interval = interval_ms / 1000.0
        self.clock = clock
        self.last_execution: Optional[float] = None

    def should_execute(self, now: Optional[float] = None) -> bool:
        """
        Check if enough time has passed and update timer if so.

        Args:
            now: Clock reading to test against (read from the clock when omitted)

        Returns:
            True if interval has passed (and timer is updated), False otherwise
        """
        current = self.clock() if now is None else now
        if self.last_execution is None or current - self.last_execution >= self.interval:
            self.last_execution = current
            return True
        return False

    def reset(self) -> None:
        """Force next should_execute() call to return True"""
        self.last_execution = None

    def elapsed_ms(self) -> Optional[float]:
        """Milliseconds since last execution, None if it never executed"""
        if self.last_execution is None:
            return None
        return (self.clock() - self.last_execution) * 1000

    def remaining_ms(self) -> float:
        """Milliseconds until next execution is allowed (negative if overdue)"""
        elapsed = self.elapsed_ms()
        if elapsed is None:
            return 0.0
        return self.interval_ms - elapsed
