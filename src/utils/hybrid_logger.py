"""
Hybrid logger - console and file output with per-component loggers

Every line carries both wall-clock time and seconds since the session
started, so intro phases and gesture timings can be read straight off
the log:

    [14:02:11] [+3.001s] [INFO] [IntroSequencer] Intro phase → MEETING at +3.00s
"""

import logging
import sys
import time
import traceback
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Optional


ANSI_RESET = '\033[0m'
LEVEL_COLORS = {
    logging.DEBUG: '\033[94m',     # Blue
    logging.INFO: '\033[92m',      # Green
    logging.WARNING: '\033[93m',   # Yellow
    logging.ERROR: '\033[91m',     # Red
    logging.CRITICAL: '\033[95m',  # Magenta
}


class SessionFormatter(logging.Formatter):
    """[wall] [+session] [LEVEL] [Component] message, optionally ANSI-colored"""

    def __init__(self, use_colors: bool = False):
        super().__init__('[%(asctime)s] [+%(session_time).3fs] [%(levelname)s] [%(component)s] %(message)s',
                         datefmt='%H:%M:%S')
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        # Records from plain stdlib loggers lack our extra fields
        for name, default in (('component', 'Main'), ('session_time', 0.0)):
            if not hasattr(record, name):
                setattr(record, name, default)

        line = super().format(record)
        if self.use_colors and record.levelno in LEVEL_COLORS:
            line = f"{LEVEL_COLORS[record.levelno]}{line}{ANSI_RESET}"
        return line


class ClassLogger:
    """
    Logger handed to one component, with its own minimum level.

    All ClassLoggers of a session write through the same stdlib logger,
    so they share handlers and the session time origin.
    """

    def __init__(self, main_logger: logging.Logger, component: str, level: int,
                 elapsed: Callable[[], float] = lambda: 0.0):
        self.main_logger = main_logger
        self.component = component
        self.level = level
        self._elapsed = elapsed

    def is_enabled_for(self, level: int) -> bool:
        return level >= self.level

    def _emit(self, level: int, message: str, exc_info=None) -> None:
        if not self.is_enabled_for(level):
            return
        record = self.main_logger.makeRecord(self.main_logger.name, level, self.component, 0,
                                             message, (), exc_info)
        record.component = self.component
        record.session_time = self._elapsed()
        self.main_logger.handle(record)

    def debug(self, message: str) -> None:
        self._emit(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._emit(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._emit(logging.WARNING, message)

    def error(self, message: str, exception: Optional[BaseException] = None) -> None:
        """
        Log an error. With `exception`, the message gets the exception
        type and the innermost frame, and the traceback is attached.
        """
        if exception is None:
            self._emit(logging.ERROR, message)
            return
        frames = traceback.extract_tb(exception.__traceback__)
        where = f"{frames[-1].filename}:{frames[-1].lineno}" if frames else "unknown"
        self._emit(logging.ERROR, f"{message} | {type(exception).__name__} at {where}",
                   (type(exception), exception, exception.__traceback__))

    def create_class_logger(self, component: str, level: Optional[int] = None) -> 'ClassLogger':
        """Sibling logger for a sub-component, inheriting this one's level unless given"""
        return ClassLogger(self.main_logger, component, self.level if level is None else level,
                           self._elapsed)

    def flush(self) -> None:
        for handler in self.main_logger.handlers:
            with suppress(OSError, ValueError):
                handler.flush()


class HybridLogger:
    """
    Session logging setup: colored console handler, optional plain-text
    file under `log_dir`, and a cache of per-component loggers.

    Args:
        name: stdlib logger name, also the log file prefix
        log_dir: Folder for the session log file, None for no file
        console: Whether to log to stdout
        clock: Monotonic clock whose first reading is the session time origin
    """

    def __init__(self, name: str = "TheDark", log_dir: Optional[str] = "logs", console: bool = True,
                 clock: Callable[[], float] = time.monotonic):
        self.name = name
        self.log_dir = log_dir
        self.clock = clock
        self.started_at = clock()
        self.log_file: Optional[Path] = None
        self.class_loggers: Dict[str, ClassLogger] = {}

        self.main_logger = logging.getLogger(name)
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        self.main_logger.handlers.clear()

        if console:
            stdout_handler = logging.StreamHandler(sys.stdout)
            stdout_handler.setFormatter(SessionFormatter(use_colors=sys.stdout.isatty()))
            self.main_logger.addHandler(stdout_handler)

        if log_dir:
            Path(log_dir).mkdir(parents=True, exist_ok=True)
            self.log_file = Path(log_dir) / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setFormatter(SessionFormatter())
            self.main_logger.addHandler(file_handler)

    def session_time(self) -> float:
        """Seconds since this logger was created"""
        return self.clock() - self.started_at

    def get_class_logger(self, component: str, level: int = logging.INFO) -> ClassLogger:
        """
        Logger for one component. Repeated calls with the same name return
        the same instance, at the level it was first created with.
        """
        if component not in self.class_loggers:
            self.class_loggers[component] = ClassLogger(self.main_logger, component, level,
                                                        self.session_time)
        return self.class_loggers[component]

    def cleanup(self) -> None:
        """Flush and close every handler"""
        for handler in list(self.main_logger.handlers):
            with suppress(OSError, ValueError):
                handler.flush()
                handler.close()
        self.main_logger.handlers.clear()
