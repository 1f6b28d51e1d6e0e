"""
Render System Package

Visual frames published by the sequencer and the surfaces that draw them.
"""

from .visual_frame import VisualFrame, HintVariant, HINT_TEXTS, REVEAL_TITLE, REVEAL_SUBTITLE
from .interfaces import IRenderSurface
from .tween import Tween, ease_in_out
from .frame_recorder import FrameRecorder
from .controls import ResetControl

__all__ = [
    'VisualFrame',
    'HintVariant',
    'HINT_TEXTS',
    'REVEAL_TITLE',
    'REVEAL_SUBTITLE',
    'IRenderSurface',
    'Tween',
    'ease_in_out',
    'FrameRecorder',
    'ResetControl'
]
