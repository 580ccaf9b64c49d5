"""Logging setup for the tgf command.

Messages go to a stream as "LEVEL: message", with the level name in bold color
when the stream is a terminal. Records at or above a configurable level end the
program, which lets the command treat errors as fatal unless asked to keep
going.
"""

import logging
import sys
from typing import NoReturn, Optional, TextIO

# ANSI color codes by level.
LEVEL_COLORS = {
    logging.DEBUG: 35,
    logging.INFO: 32,
    logging.WARNING: 33,
    logging.ERROR: 31,
    logging.FATAL: 31,
}


class ColorFormatter(logging.Formatter):

    """Formats records as "LEVEL: message", coloring LEVEL if enabled."""

    def __init__(self, use_color: bool):
        super().__init__("%(message)s")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        label = f"{record.levelname}:"
        code = LEVEL_COLORS.get(record.levelno)
        if self.use_color and code is not None:
            label = f"\x1b[{code};1m{label}\x1b[0m"
        return f"{label} {super().format(record)}"


class ExitStreamHandler(logging.StreamHandler):

    """Stream handler that exits with status 1 after severe records."""

    def __init__(
        self, stream: Optional[TextIO] = None, exit_level: int = logging.FATAL
    ):
        super().__init__(stream)
        self.exit_level = exit_level

    def emit(self, record: logging.LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def setup_logging(stream: TextIO, log_level: int, exit_level: int):
    """Route root logger output to stream.

    Replaces any handler installed by an earlier call. Requires
    log_level <= exit_level <= FATAL, so that nothing exits before printing.
    """
    assert log_level <= exit_level <= logging.FATAL
    logging.addLevelName(logging.FATAL, "FATAL")
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in list(root.handlers):
        if isinstance(handler, ExitStreamHandler):
            root.removeHandler(handler)
    handler = ExitStreamHandler(stream, exit_level)
    handler.setFormatter(ColorFormatter(use_color=stream.isatty()))
    root.addHandler(handler)


def fatal(msg: str, *args) -> NoReturn:
    """Log msg at the FATAL level and exit.

    setup_logging makes the log itself exit. The explicit exit covers callers
    that never installed the handler.
    """
    logging.fatal(msg, *args)
    sys.exit(1)
