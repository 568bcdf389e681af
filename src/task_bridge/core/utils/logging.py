"""
Diagnostic logging setup for the task bridge.

Console output is colored with colorlog; a rotating file handler is added
when a log directory is configured.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import colorlog

CONSOLE_FORMAT = "%(log_color)s%(asctime)s - %(name)s - %(levelname)s%(reset)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "purple",
}


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``task_bridge`` logger hierarchy.

    Diagnostics go to stderr so they never mix with task results on stdout.

    Args:
        level: Log level name
        log_dir: Directory for ``task_bridge.log``; no file handler if None

    Returns:
        logging.Logger: The package logger
    """
    logger = logging.getLogger("task_bridge")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        colorlog.ColoredFormatter(CONSOLE_FORMAT, datefmt="%H:%M:%S", log_colors=LOG_COLORS)
    )
    logger.addHandler(console_handler)

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            Path(log_dir) / "task_bridge.log",
            maxBytes=5*1024*1024,  # 5MB
            backupCount=3
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger
