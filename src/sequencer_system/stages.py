"""
Session stages - intro playback, then the interaction engine
"""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

from input_system import HostCommand, PointerEvent
from .interaction_engine import InteractionEngine
from .intro_sequencer import IntroSequencer

if TYPE_CHECKING:
    from sequencer_system.session_manager import SessionManager


class Stage(ABC):
    """
    Abstract base class for the stages of a session.

    Only one stage is active at a time. Each frame the session feeds it
    pointer events and host commands, then calls update(), which returns
    the next stage when a transition is due.
    """

    def __init__(self, session: 'SessionManager'):
        self.session: 'SessionManager' = session

    @abstractmethod
    def handle_pointer(self, event: PointerEvent) -> None:
        pass

    def handle_command(self, command: HostCommand) -> None:
        """Host commands are ignored unless a stage overrides this"""
        pass

    @abstractmethod
    def update(self, now: float) -> Optional['Stage']:
        """
        Advance time-driven logic.

        Returns:
            New Stage instance if transition needed, None to stay
        """
        pass

    def on_enter(self) -> None:
        self.custom_on_enter()

    def on_exit(self) -> None:
        self.custom_on_exit()

    @abstractmethod
    def custom_on_enter(self) -> None:
        pass

    def custom_on_exit(self) -> None:
        pass


class IntroStage(Stage):
    """
    Plays the intro timeline once.

    Transitions:
    - intro DONE → InteractionStage
    """

    def __init__(self, session: 'SessionManager'):
        super().__init__(session)
        self.logger = session.logger.create_class_logger("IntroSequencer")
        self.sequencer = IntroSequencer(
            config=session.config.intro,
            surface_width=session.config.surface.width,
            sink=session.sink,
            surface=session.surface,
            timers=session.timers,
            logger=self.logger,
            clock=session.clock,
        )

    def custom_on_enter(self) -> None:
        self.sequencer.start()

    def handle_pointer(self, event: PointerEvent) -> None:
        self.logger.debug(f"Ignoring {event} during intro")

    def update(self, now: float) -> Optional[Stage]:
        self.sequencer.tick(now)
        if self.sequencer.is_done:
            return InteractionStage(self.session)
        return None


class InteractionStage(Stage):
    """
    Steady state for the rest of the session.

    Transitions: none
    """

    def __init__(self, session: 'SessionManager'):
        super().__init__(session)
        self.engine = InteractionEngine(
            config=session.config.interaction,
            surface_config=session.config.surface,
            sink=session.sink,
            surface=session.surface,
            timers=session.timers,
            logger=session.logger.create_class_logger("InteractionEngine"),
            clock=session.clock,
        )

    def custom_on_enter(self) -> None:
        self.engine.activate()

    def handle_pointer(self, event: PointerEvent) -> None:
        self.engine.handle_pointer(event)

    def handle_command(self, command: HostCommand) -> None:
        if command is HostCommand.RESET:
            self.engine.reset()

    def update(self, now: float) -> Optional[Stage]:
        self.engine.tick(now)
        return None
