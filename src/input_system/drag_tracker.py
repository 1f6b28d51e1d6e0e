"""
Drag tracker - follows the active pointer and throttles derived haptics
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from utils import OnceInMs
from .pointer_event import PointerEvent, PointerEventKind


class DragPhase(enum.Enum):
    IDLE = "idle"
    TRACKING = "tracking"


class DragUpdateKind(enum.Enum):
    STARTED = "started"
    MOVED = "moved"
    ENDED = "ended"


@dataclass(frozen=True)
class DragUpdate:
    kind: DragUpdateKind
    timestamp: float
    position: Optional[Tuple[float, float]] = None
    haptic_due: bool = False


class DragTracker:
    """
    Zero-distance drag recognizer.

    IDLE --down/move--> TRACKING --move--> TRACKING --up--> IDLE

    A MOVE while IDLE also starts tracking: after a logical reset the
    finger may still be on the glass, and the next movement is a fresh
    contact. An UP while IDLE is ignored, so repeated releases are inert.

    Every STARTED/MOVED update asks the haptic throttle whether a pulse
    is due; pulses arriving faster than the rate limit are dropped.
    """

    def __init__(self, haptic_interval: float, logger=None):
        self.phase = DragPhase.IDLE
        self.position: Optional[Tuple[float, float]] = None
        self.haptic_throttle = OnceInMs(haptic_interval * 1000.0)
        self.logger = logger

    def handle(self, event: PointerEvent) -> Optional[DragUpdate]:
        """
        Feed one pointer event.

        Returns:
            DragUpdate describing the transition, or None if the event is ignored
        """
        if event.kind is PointerEventKind.UP:
            if self.phase is DragPhase.IDLE:
                return None
            self.phase = DragPhase.IDLE
            return DragUpdate(DragUpdateKind.ENDED, event.timestamp, self.position)

        kind = DragUpdateKind.MOVED if self.phase is DragPhase.TRACKING else DragUpdateKind.STARTED
        self.phase = DragPhase.TRACKING
        self.position = event.position
        haptic_due = self.haptic_throttle.should_execute(event.timestamp)
        if not haptic_due and self.logger:
            self.logger.debug(f"Haptic dropped at t={event.timestamp:.3f}")
        return DragUpdate(kind, event.timestamp, self.position, haptic_due)

    def reset(self) -> None:
        """Forget the current contact and re-arm the haptic throttle"""
        self.phase = DragPhase.IDLE
        self.position = None
        self.haptic_throttle.reset()
