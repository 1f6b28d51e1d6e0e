"""
VisualFrame - everything the render surface needs to draw one state
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class HintVariant(enum.Enum):
    NONE = "none"
    IDLE = "idle"
    LONG_PRESS = "long_press"

    @property
    def text(self) -> str:
        return HINT_TEXTS[self]


HINT_TEXTS = {
    HintVariant.NONE: "",
    HintVariant.IDLE: "Tap and explore around",
    HintVariant.LONG_PRESS: "Hey! Long Press \nTo reveal something",
}

REVEAL_TITLE = "Hello!"
REVEAL_SUBTITLE = "Tap here then scroll around"


@dataclass(frozen=True)
class VisualFrame:
    """
    Target visual parameters plus the nominal time to animate toward them.

    The surface interpolates from whatever it is showing to these values
    over `transition_s`; 0 means jump.
    """
    light_intensity: float = 0.0
    light_position: Optional[Tuple[float, float]] = None
    light_visible: bool = False
    spread_radius: float = 150.0
    revealed: bool = False
    spreading: bool = False
    hint_variant: HintVariant = HintVariant.NONE
    intro_offsets: Optional[Tuple[float, float]] = None
    reset_available: bool = False
    transition_s: float = 0.0
