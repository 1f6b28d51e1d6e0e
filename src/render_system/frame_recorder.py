"""
Frame recorder - headless render surface that keeps every frame it receives
"""

from typing import List, Optional, Tuple

from .interfaces import IRenderSurface
from .visual_frame import VisualFrame


class FrameRecorder(IRenderSurface):
    """Headless surface for demo runs without a display, and for tests"""

    def __init__(self, logger=None, max_frames: Optional[int] = None):
        self.logger = logger
        self.max_frames = max_frames
        self.frames: List[Tuple[float, VisualFrame]] = []
        self.render_count = 0

    @property
    def last(self) -> Optional[VisualFrame]:
        return self.frames[-1][1] if self.frames else None

    def apply(self, frame: VisualFrame, now: float) -> None:
        if self.frames and self.frames[-1][1] == frame:
            return
        self.frames.append((now, frame))
        if self.max_frames is not None and len(self.frames) > self.max_frames:
            del self.frames[0]
        if self.logger:
            self.logger.debug(f"Frame at t={now:.3f}: {frame}")

    def render(self, now: float) -> None:
        self.render_count += 1
