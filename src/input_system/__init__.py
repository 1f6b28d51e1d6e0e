"""
Input System Package

Pointer input events plus the two gesture recognizers that share them:
drag tracking and long-press detection.
"""

from .pointer_event import PointerEvent, PointerEventKind, HostCommand
from .interfaces import IPointerSource
from .drag_tracker import DragTracker, DragUpdate, DragUpdateKind, DragPhase
from .long_press_detector import LongPressDetector, LongPressUpdate, LongPressPhase
from .scripted_pointer_source import ScriptedPointerSource, ScriptStep

__all__ = [
    "PointerEvent",
    "PointerEventKind",
    "HostCommand",
    "IPointerSource",
    "DragTracker",
    "DragUpdate",
    "DragUpdateKind",
    "DragPhase",
    "LongPressDetector",
    "LongPressUpdate",
    "LongPressPhase",
    "ScriptedPointerSource",
    "ScriptStep"
]
