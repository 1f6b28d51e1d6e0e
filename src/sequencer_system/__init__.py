"""
Sequencer System - intro timeline and interaction engine

Explicit state machines for the two stages of a session of The Dark:
the scripted intro, then the torch/long-press interaction loop.
"""

from .config import AppConfig, IntroConfig, InteractionConfig, FeedbackConfig, SurfaceConfig
from .effects import Cue, PlayCue, HapticPulse, HapticContinuous, ScheduleTimer, AnimateTransition
from .interaction_state import InteractionState, light_intensity_at
from .reducer import reduce, ReduceContext, HINT_HIDE_TIMER
from .interaction_engine import InteractionEngine
from .intro_sequencer import IntroSequencer, IntroPhase, IntroState
from .stages import Stage, IntroStage, InteractionStage
from .session_manager import SessionManager

__all__ = [
    # Configuration
    "AppConfig",
    "IntroConfig",
    "InteractionConfig",
    "FeedbackConfig",
    "SurfaceConfig",
    # Effects
    "Cue",
    "PlayCue",
    "HapticPulse",
    "HapticContinuous",
    "ScheduleTimer",
    "AnimateTransition",
    # Interaction
    "InteractionState",
    "light_intensity_at",
    "reduce",
    "ReduceContext",
    "HINT_HIDE_TIMER",
    "InteractionEngine",
    # Intro
    "IntroSequencer",
    "IntroPhase",
    "IntroState",
    # Session
    "Stage",
    "IntroStage",
    "InteractionStage",
    "SessionManager"
]
