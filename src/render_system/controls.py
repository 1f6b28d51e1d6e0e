"""
On-screen controls shared by the surface that draws them and the
pointer source that hit-tests them
"""

import math
from dataclasses import dataclass
from typing import Tuple

CONTROL_MARGIN = 36
CONTROL_RADIUS = 20


@dataclass(frozen=True)
class ResetControl:
    """Round reset button in the top-right corner"""
    center: Tuple[float, float]
    radius: float = CONTROL_RADIUS

    @classmethod
    def for_surface(cls, width: float, height: float) -> 'ResetControl':
        return cls((width - CONTROL_MARGIN, CONTROL_MARGIN))

    def contains(self, position: Tuple[float, float]) -> bool:
        return math.hypot(position[0] - self.center[0], position[1] - self.center[1]) <= self.radius
