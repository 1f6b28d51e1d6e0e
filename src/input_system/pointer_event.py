"""
PointerEvent - Immutable snapshot of a single pointer input
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class PointerEventKind(enum.Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"


class HostCommand(enum.Enum):
    """Non-pointer requests coming from the host window"""
    RESET = "reset"
    QUIT = "quit"


@dataclass(frozen=True)
class PointerEvent:
    """
    One pointer input event in surface coordinates.

    DOWN and MOVE carry a position; UP may omit it.

    Usage:
        event = PointerEvent(PointerEventKind.DOWN, 195.0, 422.0, timestamp=clock())
        print(event.position)
    """
    kind: PointerEventKind
    x: Optional[float] = None
    y: Optional[float] = None
    timestamp: float = 0.0

    def __post_init__(self):
        """Validate inputs after construction"""
        if not isinstance(self.kind, PointerEventKind):
            raise TypeError(f"kind must be a PointerEventKind, got {type(self.kind).__name__}")

        if self.kind is not PointerEventKind.UP and (self.x is None or self.y is None):
            raise ValueError(f"{self.kind.name} event requires a position")

        for name in ("x", "y"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
                raise TypeError(f"{name} must be a number, got {type(value).__name__}")

    @property
    def position(self) -> Optional[Tuple[float, float]]:
        if self.x is None or self.y is None:
            return None
        return (float(self.x), float(self.y))

    @classmethod
    def down(cls, x: float, y: float, timestamp: float) -> 'PointerEvent':
        return cls(PointerEventKind.DOWN, x, y, timestamp)

    @classmethod
    def move(cls, x: float, y: float, timestamp: float) -> 'PointerEvent':
        return cls(PointerEventKind.MOVE, x, y, timestamp)

    @classmethod
    def up(cls, timestamp: float, x: Optional[float] = None, y: Optional[float] = None) -> 'PointerEvent':
        return cls(PointerEventKind.UP, x, y, timestamp)

    def __str__(self) -> str:
        where = f"@({self.x:.0f},{self.y:.0f})" if self.position else ""
        return f"PointerEvent({self.kind.name}{where}, t={self.timestamp:.3f})"
