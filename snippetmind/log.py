"""
log.py: Logging setup for SnippetMind.

Provides a 'logger' instance preconfigured with:
1. A colorized console handler (DEBUG level when SNIPPETMIND_DEBUG is true).
2. An optional TimedRotatingFileHandler when SNIPPETMIND_LOG_FILE is set.

Usage:
    from snippetmind.log import logger
    logger.info("Hello, world!")
"""

import logging
import os
import sys
from logging.handlers import TimedRotatingFileHandler

from colorlog import ColoredFormatter

from .config import get_bool, merged_environment


LOGGER_NAME = "snippetmind"

FILE_FORMAT = "[%(asctime)s] %(levelname)s in %(name)s [%(filename)s:%(lineno)d]: %(message)s"
CONSOLE_FORMAT = "%(log_color)s[%(asctime)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(debug=None, log_file=None):
    """Attach console (and optional file) handlers once; later calls only adjust the level"""
    env = merged_environment()
    if debug is None:
        debug = get_bool(env, "SNIPPETMIND_DEBUG", False)
    if log_file is None:
        log_file = env.get("SNIPPETMIND_LOG_FILE") or None

    level = logging.DEBUG if debug else logging.INFO
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)

    if log.handlers:
        return log

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ColoredFormatter(
        CONSOLE_FORMAT,
        datefmt=DATE_FORMAT,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
    ))
    log.addHandler(console_handler)

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        log.addHandler(file_handler)

    log.propagate = False
    return log


logger = setup_logger()
