"""
Pure transition function of the interaction engine
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple, Union

from .config import InteractionConfig, SurfaceConfig
from .effects import AnimateTransition, Cue, Effect, HapticPulse, PlayCue, ScheduleTimer
from .interaction_state import InteractionState, light_intensity_at


HINT_HIDE_TIMER = "hint_hide"


@dataclass(frozen=True)
class EngineActivated:
    at: float


@dataclass(frozen=True)
class PointerTracked:
    """The drag tracker saw the pointer at `position`"""
    position: Tuple[float, float]
    at: float
    haptic_due: bool = False


@dataclass(frozen=True)
class PointerReleased:
    at: float


@dataclass(frozen=True)
class LongPressBegan:
    at: float


@dataclass(frozen=True)
class LongPressCancelled:
    at: float


@dataclass(frozen=True)
class LongPressFired:
    at: float


@dataclass(frozen=True)
class HintTimerExpired:
    at: float


@dataclass(frozen=True)
class ResetRequested:
    at: float


Action = Union[EngineActivated, PointerTracked, PointerReleased, LongPressBegan,
               LongPressCancelled, LongPressFired, HintTimerExpired, ResetRequested]


@dataclass(frozen=True)
class ReduceContext:
    config: InteractionConfig
    surface: SurfaceConfig


def reduce(state: InteractionState, action: Action,
           context: ReduceContext) -> Tuple[InteractionState, List[Effect]]:
    """
    Compute the next state and the side effects of one action.

    Effects are returned, never performed, so every cue and pulse is
    emitted exactly once per transition. Actions whose guard does not
    hold return the state unchanged with no effects.
    """
    config = context.config
    effects: List[Effect] = []

    if isinstance(action, EngineActivated):
        return (replace(state, hint_visible=True),
                [ScheduleTimer(HINT_HIDE_TIMER, config.hint_display_duration)])

    if isinstance(action, PointerTracked):
        if not state.pointer_active:
            effects.append(PlayCue(Cue.TORCH_ON))
        intensity = light_intensity_at(action.position, context.surface.width,
                                       context.surface.height, config.min_touch_intensity)
        last_haptic: Optional[float] = state.last_haptic_emit_time
        if action.haptic_due:
            effects.append(HapticPulse(intensity, config.pulse_sharpness))
            last_haptic = action.at
        return (replace(state, pointer_active=True, pointer_position=action.position,
                        light_intensity=intensity, last_haptic_emit_time=last_haptic),
                effects)

    if isinstance(action, PointerReleased):
        if not state.pointer_active:
            return state, effects
        return (replace(state, pointer_active=False, light_intensity=0.0),
                [PlayCue(Cue.TORCH_OFF)])

    if isinstance(action, LongPressBegan):
        return replace(state, long_press_active=True), effects

    if isinstance(action, LongPressCancelled):
        return replace(state, long_press_active=False), effects

    if isinstance(action, LongPressFired):
        state = replace(state, long_press_active=False)
        if state.revealed:
            return state, effects
        surface = context.surface
        return (replace(state, revealed=True, light_intensity=1.0, spreading=True,
                        spread_radius=float(max(surface.width, surface.height))),
                [AnimateTransition(config.spread_transition),
                 HapticPulse(config.reveal_pulse_intensity, config.pulse_sharpness),
                 PlayCue(Cue.WELCOME)])

    if isinstance(action, HintTimerExpired):
        if not state.hint_visible:
            return state, effects
        return replace(state, hint_visible=False), [AnimateTransition(config.hint_fade_transition)]

    if isinstance(action, ResetRequested):
        return (InteractionState.initial(config.initial_spread_radius),
                [AnimateTransition(config.reset_transition),
                 ScheduleTimer(HINT_HIDE_TIMER, config.hint_display_duration),
                 PlayCue(Cue.TORCH_OFF),
                 HapticPulse(config.reset_pulse_intensity, config.pulse_sharpness)])

    raise TypeError(f"Unknown action: {action!r}")
