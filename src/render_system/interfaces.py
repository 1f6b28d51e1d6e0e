"""
Render Surface Interface - consumer of visual frames
"""

from abc import ABC, abstractmethod

from .visual_frame import VisualFrame


class IRenderSurface(ABC):
    """
    Receives a stream of VisualFrames and draws them.

    The sequencer only publishes start/end values and nominal durations;
    easing and drawing are the surface's business.
    """

    @abstractmethod
    def apply(self, frame: VisualFrame, now: float) -> None:
        """
        Set a new target frame.

        Args:
            frame: Target values and transition duration
            now: Session clock reading when the frame was produced
        """
        pass

    @abstractmethod
    def render(self, now: float) -> None:
        """Draw the surface as of `now` (called once per loop frame)"""
        pass

    def cleanup(self) -> None:
        """Release display resources (override if needed)"""
        pass
