"""
Long-press detection with a strict, uninterrupted hold requirement
"""

import enum
from typing import List, Optional

from .pointer_event import PointerEvent, PointerEventKind


class LongPressPhase(enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    FIRED = "fired"


class LongPressUpdate(enum.Enum):
    BEGAN = "began"          # countdown started
    CANCELLED = "cancelled"  # released before the countdown elapsed
    FIRED = "fired"          # held for the full duration
    ENDED = "ended"          # released after firing


class LongPressDetector:
    """
    Detects a press held for `duration_s` without release.

    Observes the same event stream as the drag tracker but ignores
    movement entirely, so dragging never cancels a long-press.

    The countdown is internal to the detector: the frame loop calls
    check(now) and the detector fires once the hold has lasted long
    enough. A release restarts from zero; there is no carry-over
    between presses.
    """

    def __init__(self, duration_s: float, logger=None):
        self.duration_s = duration_s
        self.phase = LongPressPhase.IDLE
        self.press_started_at: Optional[float] = None
        self.logger = logger

    def handle(self, event: PointerEvent) -> List[LongPressUpdate]:
        """
        Feed one pointer event.

        A due countdown is fired before the event itself is applied, so a
        release that arrives after the deadline but before the next frame
        still counts as a completed long-press.

        Returns:
            Updates produced by this event, in order
        """
        updates = self.check(event.timestamp)

        if event.kind is PointerEventKind.DOWN:
            self.phase = LongPressPhase.PENDING
            self.press_started_at = event.timestamp
            updates.append(LongPressUpdate.BEGAN)
        elif event.kind is PointerEventKind.UP:
            if self.phase is LongPressPhase.PENDING:
                held = event.timestamp - self.press_started_at
                if self.logger:
                    self.logger.debug(f"Long-press cancelled after {held:.3f}s")
                updates.append(LongPressUpdate.CANCELLED)
            elif self.phase is LongPressPhase.FIRED:
                updates.append(LongPressUpdate.ENDED)
            self.phase = LongPressPhase.IDLE
            self.press_started_at = None

        return updates

    def check(self, now: float) -> List[LongPressUpdate]:
        """Fire the long-press if the pending hold has reached the duration"""
        if self.phase is LongPressPhase.PENDING and now - self.press_started_at >= self.duration_s:
            self.phase = LongPressPhase.FIRED
            return [LongPressUpdate.FIRED]
        return []

    def reset(self) -> None:
        """Abandon any pending countdown without effect"""
        self.phase = LongPressPhase.IDLE
        self.press_started_at = None
