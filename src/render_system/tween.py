"""
Time-based interpolation between two values
"""

import math


def ease_in_out(progress: float) -> float:
    """Cosine ease-in-out, monotonic on [0, 1]"""
    progress = max(0.0, min(1.0, progress))
    return 0.5 - 0.5 * math.cos(math.pi * progress)


class Tween:
    """
    A single scalar moving from `start` to `end` over `duration` seconds.

    Example:
        offset = Tween(-390.0, 0.0, duration=3.0, started_at=now)
        x = offset.value_at(now + 1.5)   # halfway, eased
    """

    def __init__(self, start: float, end: float, duration: float, started_at: float):
        self.start = start
        self.end = end
        self.duration = duration
        self.started_at = started_at

    @classmethod
    def hold(cls, value: float, now: float = 0.0) -> 'Tween':
        return cls(value, value, 0.0, now)

    def value_at(self, now: float) -> float:
        if self.duration <= 0:
            return self.end
        progress = (now - self.started_at) / self.duration
        return self.start + (self.end - self.start) * ease_in_out(progress)

    def retarget(self, end: float, duration: float, now: float) -> 'Tween':
        """New tween starting from the current value"""
        return Tween(self.value_at(now), end, duration, now)
