"""
Interaction engine - torch light, haptics, long-press reveal and reset
"""

import time
from typing import Callable, List, Optional, TYPE_CHECKING

from input_system import (DragTracker, DragUpdateKind, LongPressDetector, LongPressUpdate,
                          PointerEvent)
from render_system import VisualFrame
from .config import InteractionConfig, SurfaceConfig
from .effects import ScheduleTimer, apply_feedback, transition_duration
from .interaction_state import InteractionState
from .reducer import (HINT_HIDE_TIMER, Action, EngineActivated, HintTimerExpired, LongPressBegan,
                      LongPressCancelled, LongPressFired, PointerReleased, PointerTracked,
                      ReduceContext, ResetRequested, reduce)

if TYPE_CHECKING:
    from feedback_system import IFeedbackSink
    from render_system import IRenderSurface
    from utils import ClassLogger, TimerWheel


LONG_PRESS_ACTIONS = {
    LongPressUpdate.BEGAN: LongPressBegan,
    LongPressUpdate.CANCELLED: LongPressCancelled,
    LongPressUpdate.FIRED: LongPressFired,
}


class InteractionEngine:
    """
    Steady-state gesture and feedback loop.

    Two recognizers watch the same pointer stream and never cancel each
    other:
    - DragTracker moves the light and produces throttled haptic pulses
    - LongPressDetector reveals the scene after an uninterrupted hold

    Their updates become reducer actions; the reducer's effects are sent
    to the feedback sink, timers go to the shared TimerWheel, and a new
    VisualFrame is published whenever the state changes.
    """

    def __init__(self,
                 config: InteractionConfig,
                 surface_config: SurfaceConfig,
                 sink: 'IFeedbackSink',
                 surface: 'IRenderSurface',
                 timers: 'TimerWheel',
                 logger: 'ClassLogger',
                 clock: Callable[[], float] = time.monotonic):
        self.config = config
        self.surface_config = surface_config
        self.sink = sink
        self.surface = surface
        self.timers = timers
        self.logger = logger
        self.clock = clock

        self.context = ReduceContext(config, surface_config)
        self.state = InteractionState.initial(config.initial_spread_radius)
        self.drag_tracker = DragTracker(config.haptic_interval, logger)
        self.long_press = LongPressDetector(config.long_press_duration, logger)
        self.active = False

    @property
    def reset_available(self) -> bool:
        """The reset control only exists in the base (dark) visual mode"""
        return self.config.dark_mode

    def activate(self, now: Optional[float] = None) -> None:
        """Become the active surface: show the idle hint and arm its timer"""
        current = self.clock() if now is None else now
        self.active = True
        self.logger.info("Interaction engine active")
        self._dispatch(EngineActivated(current), force_publish=True)

    def handle_pointer(self, event: PointerEvent) -> None:
        """Feed one pointer event to both recognizers, then reduce"""
        if not self.config.dark_mode:
            return

        actions: List[Action] = [LONG_PRESS_ACTIONS[update](event.timestamp)
                                 for update in self.long_press.check(event.timestamp)]

        drag_update = self.drag_tracker.handle(event)
        if drag_update is not None:
            if drag_update.kind is DragUpdateKind.ENDED:
                actions.append(PointerReleased(event.timestamp))
            else:
                actions.append(PointerTracked(drag_update.position, event.timestamp,
                                              drag_update.haptic_due))

        for update in self.long_press.handle(event):
            if update in LONG_PRESS_ACTIONS:
                actions.append(LONG_PRESS_ACTIONS[update](event.timestamp))

        for action in actions:
            self._dispatch(action)

    def tick(self, now: Optional[float] = None) -> None:
        """Advance recognizer countdowns and due timers"""
        current = self.clock() if now is None else now
        if self.config.dark_mode:
            for update in self.long_press.check(current):
                self._dispatch(LONG_PRESS_ACTIONS[update](current))
        self.timers.advance(current)

    def reset(self, now: Optional[float] = None) -> bool:
        """
        Return to the unrevealed idle state and re-arm the hint timer.

        Returns:
            False if the reset control is unavailable in the current mode
        """
        if not self.reset_available:
            self.logger.debug("Reset ignored: control unavailable outside dark mode")
            return False
        current = self.clock() if now is None else now
        self.drag_tracker.reset()
        self.long_press.reset()
        self._dispatch(ResetRequested(current))
        self.logger.info("Scene reset")
        return True

    def _on_hint_timer(self, deadline: float) -> None:
        self._dispatch(HintTimerExpired(deadline))

    def _dispatch(self, action: Action, force_publish: bool = False) -> None:
        previous = self.state
        self.state, effects = reduce(previous, action, self.context)

        if self.state.revealed and not previous.revealed:
            self.logger.info("Long-press fired: scene revealed")

        for effect in apply_feedback(self.sink, effects):
            if isinstance(effect, ScheduleTimer) and effect.key == HINT_HIDE_TIMER:
                self.timers.schedule(effect.key, effect.delay, self._on_hint_timer, now=action.at)

        if force_publish or self.state != previous:
            self.surface.apply(self.frame(transition_duration(effects)), action.at)

    def frame(self, transition_s: float = 0.0) -> VisualFrame:
        """Visual parameters for the current state"""
        state = self.state
        return VisualFrame(
            light_intensity=state.light_intensity,
            light_position=state.pointer_position,
            light_visible=state.pointer_active,
            spread_radius=state.spread_radius,
            revealed=state.revealed,
            spreading=state.spreading,
            hint_variant=state.hint_variant(self.config.dark_mode, self.config.hint_reveal_threshold),
            reset_available=self.reset_available,
            transition_s=transition_s,
        )
