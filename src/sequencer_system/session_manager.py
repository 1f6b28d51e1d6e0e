"""
Session manager - orchestrates stages, pointer input, timers and rendering
"""

import time
from typing import Callable, TYPE_CHECKING

import psutil

from input_system import HostCommand
from utils import OnceInMs, TimerWheel
from .stages import InteractionStage, IntroStage, Stage

if TYPE_CHECKING:
    from feedback_system import IFeedbackSink
    from input_system import IPointerSource
    from render_system import IRenderSurface
    from utils import ClassLogger
    from .config import AppConfig


class SessionManager:
    """
    Owns one session of The Dark.

    Responsibilities:
    - Run the intro, then hand off to the interaction engine
    - Dispatch pointer events and host commands to the active stage
    - Keep the shared TimerWheel and consistent frame timing

    Everything runs on the loop thread; there is no other thread of
    sequencer logic.
    """

    def __init__(self,
                 config: 'AppConfig',
                 pointer_source: 'IPointerSource',
                 sink: 'IFeedbackSink',
                 surface: 'IRenderSurface',
                 logger: 'ClassLogger',
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize the session manager.

        Args:
            config: Validated AppConfig
            pointer_source: Where pointer events and host commands come from
            sink: Audio and haptic feedback
            surface: Where visual frames go
            logger: Logger for the session
            clock: Monotonic clock shared by every component
        """
        self.config = config
        self.pointer_source = pointer_source
        self.sink = sink
        self.surface = surface
        self.logger = logger
        self.clock = clock
        self.target_frame_duration = config.frame_duration_ms / 1000.0
        self.running = True

        self.timers = TimerWheel(clock, logger.create_class_logger("TimerWheel"))

        self._usage_monitor = OnceInMs(60000, clock)
        self._process = psutil.Process()

        if config.skip_intro:
            self.logger.info("Intro skipped")
            self.current_stage: Stage = InteractionStage(self)
        else:
            self.current_stage = IntroStage(self)
        self.current_stage.on_enter()

        self.logger.info(f"SessionManager initialized: {config.frame_duration_ms}ms frame duration")

    def run_loop(self) -> None:
        """
        Run the session loop with frame duration limiting until quit.
        """
        self.logger.info(f"Starting session loop with {int(self.target_frame_duration * 1000)}ms frames")

        try:
            while self.running:
                frame_start = time.monotonic()

                self.update()

                sleep_time = self.target_frame_duration - (time.monotonic() - frame_start)
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Session stopped by user (Ctrl+C)")
        except Exception as e:
            self.logger.error(f"Session loop error: {e}", exception=e)
            self.logger.flush()
            raise
        finally:
            self.stop()

    def update(self) -> None:
        """
        One loop frame: input → stage → timers → render.
        """
        if self._usage_monitor.should_execute():
            self._log_resource_usage()

        events = self.pointer_source.poll()
        for command in self.pointer_source.drain_commands():
            if command is HostCommand.QUIT:
                self.logger.info("Quit requested")
                self.running = False
                return
            self.current_stage.handle_command(command)

        for event in events:
            self.current_stage.handle_pointer(event)

        now = self.clock()
        new_stage = self.current_stage.update(now)
        if new_stage:
            self._transition_to_stage(new_stage)

        self.surface.render(now)

    def stop(self) -> None:
        """Stop the session and release resources"""
        self.running = False
        self.timers.clear()
        self.sink.cleanup()
        self.pointer_source.cleanup()
        self.surface.cleanup()
        self.logger.info("Session stopped")

    def _log_resource_usage(self) -> None:
        """Log process memory and CPU usage"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu = self._process.cpu_percent(interval=None)
            sys_mem = psutil.virtual_memory()
            self.logger.info(
                f"💾 Memory - Process: {process_mb:.1f}MB | System: {sys_mem.percent:.1f}% used | "
                f"⚙️  CPU - Process: {process_cpu:.1f}%"
            )
        except psutil.Error as e:
            self.logger.warning(f"Failed to log resource usage: {e}")

    def _transition_to_stage(self, new_stage: Stage) -> None:
        self.current_stage.on_exit()

        old_name = self.current_stage.__class__.__name__
        new_name = new_stage.__class__.__name__
        self.logger.info(f"Stage transition: {old_name} → {new_name}")

        self.current_stage = new_stage
        self.current_stage.on_enter()

    def get_current_stage_name(self) -> str:
        return self.current_stage.__class__.__name__
