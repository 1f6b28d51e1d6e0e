"""HybridLogger file output, level filtering and session-relative timestamps."""

import logging

from utils import HybridLogger


def read_log(hybrid):
    hybrid.cleanup()
    return hybrid.log_file.read_text(encoding="utf-8").splitlines()


def test_lines_carry_component_and_session_time(tmp_path, clock):
    hybrid = HybridLogger("session", log_dir=str(tmp_path), console=False, clock=clock)
    engine_logger = hybrid.get_class_logger("InteractionEngine")

    clock.advance(3.25)
    engine_logger.info("Long-press fired: scene revealed")

    (line,) = read_log(hybrid)
    assert "[+3.250s]" in line
    assert "[INFO] [InteractionEngine] Long-press fired: scene revealed" in line


def test_level_filtering_and_children(tmp_path):
    hybrid = HybridLogger("levels", log_dir=str(tmp_path), console=False)
    parent = hybrid.get_class_logger("SessionManager", logging.INFO)
    child = parent.create_class_logger("TimerWheel")
    verbose = parent.create_class_logger("DragTracker", logging.DEBUG)

    parent.debug("hidden")
    child.debug("hidden too")
    verbose.debug("shown")
    child.warning("careful")

    lines = read_log(hybrid)
    assert len(lines) == 2
    assert "[DEBUG] [DragTracker] shown" in lines[0]
    assert "[WARNING] [TimerWheel] careful" in lines[1]


def test_error_with_exception_names_type(tmp_path):
    hybrid = HybridLogger("errors", log_dir=str(tmp_path), console=False)
    logger = hybrid.get_class_logger("TheDark")

    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        logger.error("Session loop error", exception=e)

    text = "\n".join(read_log(hybrid))
    assert "Session loop error | RuntimeError at" in text
    assert "Traceback" in text


def test_same_component_returns_cached_logger():
    hybrid = HybridLogger("cache", log_dir=None, console=False)
    assert hybrid.get_class_logger("A") is hybrid.get_class_logger("A", logging.DEBUG)
    assert hybrid.log_file is None
    hybrid.cleanup()
