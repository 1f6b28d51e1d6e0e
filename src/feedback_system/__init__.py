"""
Feedback System Module

Audio cues and haptic pulses for The Dark, behind a single sink interface.
"""

from .interfaces import IFeedbackSink
from .mock_feedback_sink import MockFeedbackSink
from .sound_controller import SoundController, FeedbackSounds, clamp_volume

__all__ = [
    'IFeedbackSink',
    'MockFeedbackSink',
    'SoundController',
    'FeedbackSounds',
    'clamp_volume'
]
