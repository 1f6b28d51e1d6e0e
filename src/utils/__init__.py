"""
Utilities package - Common utilities for The Dark sequencer
"""

from .hybrid_logger import HybridLogger, ClassLogger, SessionFormatter
from .once_in_ms import OnceInMs
from .timer_wheel import TimerWheel

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'SessionFormatter',
    'OnceInMs',
    'TimerWheel'
]
