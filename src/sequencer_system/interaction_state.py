"""
InteractionState - live state of the steady-state interaction loop
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from render_system import HintVariant


@dataclass(frozen=True)
class InteractionState:
    """
    Immutable snapshot; transitions produce a new instance.

    Invariants:
        light_intensity == 0 while not pointer_active and not revealed
        spreading implies revealed
    """
    pointer_active: bool = False
    pointer_position: Optional[Tuple[float, float]] = None
    light_intensity: float = 0.0
    long_press_active: bool = False
    revealed: bool = False
    spreading: bool = False
    spread_radius: float = 150.0
    hint_visible: bool = True
    last_haptic_emit_time: Optional[float] = None

    @classmethod
    def initial(cls, initial_spread_radius: float) -> 'InteractionState':
        return cls(spread_radius=initial_spread_radius)

    def hint_variant(self, dark_mode: bool, reveal_threshold: float) -> HintVariant:
        """
        Which hint the surface should show.

        The long-press hint wins over the idle hint. In dark mode the idle
        hint is additionally suppressed while a touch is brighter than
        `reveal_threshold`, even before the hint timer expires.
        """
        if self.revealed:
            return HintVariant.NONE
        if self.long_press_active:
            return HintVariant.LONG_PRESS
        if not self.hint_visible:
            return HintVariant.NONE
        if dark_mode and self.pointer_active and self.light_intensity > reveal_threshold:
            return HintVariant.NONE
        return HintVariant.IDLE

    def __str__(self) -> str:
        return (
            f"InteractionState(active={self.pointer_active}, intensity={self.light_intensity:.2f}, "
            f"long_press={self.long_press_active}, revealed={self.revealed}, hint={self.hint_visible})"
        )


def light_intensity_at(position: Tuple[float, float], width: float, height: float,
                       floor: float = 0.3) -> float:
    """
    Torch brightness for a touch at `position`.

    1.0 exactly at the surface center, falling off linearly with distance
    and never below `floor` while touching.
    """
    distance = math.hypot(position[0] - width / 2, position[1] - height / 2)
    max_distance = min(width, height) / 2
    return max(floor, 1.0 - distance / max_distance)
