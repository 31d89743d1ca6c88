"""
UTIL: Logger
PURPOSE: Colorized console logging from import time; the file log (horoscope.log)
         is attached by main.run once Config says where local files live.
"""

import logging
import os
import sys
import colorlog

LOGGER_NAME = "daily_horoscope"
LOG_FILE_NAME = "horoscope.log"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
CONSOLE_FORMAT = "%(log_color)s%(asctime)s | %(message)s"

DATE_FORMAT_FILE = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT_CONSOLE = "%H:%M:%S"

COLORS = {
    'DEBUG':    'cyan',
    'INFO':     'green',
    'WARNING':  'yellow',
    'ERROR':    'red',
    'CRITICAL': 'red,bg_white',
}


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the project logger with its console handler (INFO+)."""
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.INFO)
    console.setFormatter(colorlog.ColoredFormatter(
        CONSOLE_FORMAT,
        datefmt=DATE_FORMAT_CONSOLE,
        log_colors=COLORS,
        reset=True,
    ))
    logger.addHandler(console)

    return logger


def attach_log_file(log_dir: str, name: str = LOGGER_NAME) -> str:
    """
    Send DEBUG+ records to <log_dir>/horoscope.log.

    Calling again with another directory swaps the file; the previous
    handler is closed.

    Returns:
        Path of the log file.
    """
    logger = get_logger(name)
    log_dir = log_dir or "."
    os.makedirs(log_dir, exist_ok=True)
    path = os.path.abspath(os.path.join(log_dir, LOG_FILE_NAME))

    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            if handler.baseFilename == path:
                return path
            logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT_FILE))
    logger.addHandler(file_handler)
    return path


# ── Convenience shortcuts ────────────────────────────────────
_log = get_logger()

log_info = _log.info
log_error = _log.error
log_warning = _log.warning
log_debug = _log.debug

def log_section(title: str):
    """Print a visual separator line to the log."""
    _log.info(f"\n{'─'*15} {title} {'─'*15}")
