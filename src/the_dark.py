#!/usr/bin/env python3
"""
The Dark - ambient torch toy

A dark canvas that lights up under the pointer. Hold still for half a
second to reveal what is hidden. Opens with a short scripted intro.
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from feedback_system import IFeedbackSink, MockFeedbackSink, SoundController
from input_system import HostCommand, IPointerSource, PointerEventKind, ScriptedPointerSource, ScriptStep
from render_system import FrameRecorder, IRenderSurface, ResetControl
from sequencer_system import AppConfig, FeedbackConfig, IntroConfig, SessionManager, SurfaceConfig
from utils import HybridLogger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="The Dark - touch the darkness, find the light")
    parser.add_argument("--width", type=int, default=390, help="Surface width in points")
    parser.add_argument("--height", type=int, default=844, help="Surface height in points")
    parser.add_argument("--fps", type=float, default=60.0, help="Target frames per second")
    parser.add_argument("--skip-intro", action="store_true", help="Start directly in the interaction stage")
    parser.add_argument("--mock-audio", action="store_true", help="Log cues instead of playing them")
    parser.add_argument("--sounds-folder", default="sounds", help="Folder holding the cue mp3 files")
    parser.add_argument("--headless", action="store_true",
                        help="No window: replay a scripted press-and-hold and record frames")
    parser.add_argument("--log-dir", default="logs", help="Folder for log files ('' disables file logging)")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    return parser.parse_args(argv)


def create_app_config(args: argparse.Namespace) -> AppConfig:
    """Build and validate the configuration from command-line arguments"""
    config = AppConfig(
        surface=SurfaceConfig(width=args.width, height=args.height),
        intro=IntroConfig(),
        feedback=FeedbackConfig(sounds_folder=args.sounds_folder),
        frame_duration_ms=1000.0 / args.fps if args.fps > 0 else 0,
        skip_intro=args.skip_intro,
    )
    config.validate()
    return config


def headless_script(config: AppConfig) -> List[ScriptStep]:
    """Press near the center, drift, hold until the reveal, release, then quit"""
    start = 0.0 if config.skip_intro else config.intro.total_duration + 0.5
    cx, cy = config.surface.center
    return [
        ScriptStep(start, PointerEventKind.DOWN, cx + 40, cy + 40),
        ScriptStep(start + 0.1, PointerEventKind.MOVE, cx + 20, cy + 20),
        ScriptStep(start + 0.2, PointerEventKind.MOVE, cx, cy),
        ScriptStep(start + 1.0, PointerEventKind.UP, cx, cy),
        ScriptStep(start + 2.0, command=HostCommand.RESET),
        ScriptStep(start + 2.5, command=HostCommand.QUIT),
    ]


def create_session(config: AppConfig, args: argparse.Namespace, main_logger) -> SessionManager:
    """
    Wire the feedback sink, render surface and pointer source into a session.

    Returns:
        SessionManager ready to run
    """
    level = logging.DEBUG if args.debug else logging.INFO
    clock = time.monotonic

    if args.mock_audio or args.headless:
        sink: IFeedbackSink = MockFeedbackSink(main_logger.create_class_logger("MockFeedbackSink", level))
    else:
        sink = SoundController(config.feedback, main_logger.create_class_logger("SoundController", level))

    if args.headless:
        surface: IRenderSurface = FrameRecorder(main_logger.create_class_logger("FrameRecorder", level))
        source: IPointerSource = ScriptedPointerSource(
            headless_script(config), clock, main_logger.create_class_logger("ScriptedPointerSource", level))
    else:
        from input_system.pygame_pointer_source import PygamePointerSource
        from render_system.pygame_surface import PygameRenderSurface

        reset_control = ResetControl.for_surface(config.surface.width, config.surface.height)
        surface = PygameRenderSurface(config.surface.width, config.surface.height,
                                      main_logger.create_class_logger("PygameRenderSurface", level),
                                      reset_control=reset_control)
        # The reset control only exists in dark mode
        source = PygamePointerSource(main_logger.create_class_logger("PygamePointerSource", level), clock,
                                     reset_control if config.interaction.dark_mode else None)

    return SessionManager(
        config=config,
        pointer_source=source,
        sink=sink,
        surface=surface,
        logger=main_logger.create_class_logger("SessionManager", level),
        clock=clock,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    hybrid_logger = HybridLogger("TheDark", log_dir=args.log_dir or None)
    app_logger = hybrid_logger.get_class_logger("TheDark", logging.DEBUG if args.debug else logging.INFO)
    app_logger.info("🔦 THE DARK")

    try:
        config = create_app_config(args)
    except ValueError as e:
        app_logger.error(f"Invalid configuration: {e}")
        hybrid_logger.cleanup()
        return 2

    try:
        app_logger.info(f"Surface {config.surface.width}x{config.surface.height}, "
                        f"{config.target_fps:.0f} FPS, intro {'skipped' if config.skip_intro else 'on'}")

        session = create_session(config, args, app_logger)
        session.run_loop()
        return 0
    except Exception as e:
        app_logger.error(f"The Dark crashed: {e}", exception=e)
        raise
    finally:
        app_logger.info("✅ The Dark shut down")
        hybrid_logger.cleanup()


if __name__ == "__main__":
    sys.exit(main())
