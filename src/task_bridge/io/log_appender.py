"""
Log Appender Module

This module appends plain text lines to the log files the test runner
keeps for application outcomes and for its own progress. Appending is
best-effort: a failed append is reported on the diagnostic logger and
never fails the task that asked for it.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from task_bridge.core.utils.text import to_text
from task_bridge.io.filesystem import ensure_directory_existence

logger = logging.getLogger(__name__)

APP_INFO = "app-info"
APP_ERROR = "app-error"
TEST_INFO = "test-info"
TEST_ERROR = "test-error"

STREAM_IDS = (APP_INFO, APP_ERROR, TEST_INFO, TEST_ERROR)


def append_to_file(file_path: Union[str, Path], message: Any) -> bool:
    """
    Append one line to a file.

    Args:
        file_path: Target file
        message: Text to write, a newline is added

    Returns:
        bool: True if appended, False otherwise
    """
    try:
        with open(file_path, "a", encoding="utf-8") as f:
            f.write(f"{to_text(message)}\n")
        return True
    except Exception as e:
        logger.error(f"Error appending to file {file_path}: {str(e)}")
        return False


class LogAppender:
    """Routes messages to the four runner log streams."""

    def __init__(
        self,
        base_dir: Union[str, Path] = ".",
        app_log_dir: str = "applylogs",
        test_log_dir: str = "cypress/logs",
    ):
        """
        Initialize the log appender.

        Args:
            base_dir: Directory the log trees are relative to
            app_log_dir: Tree for application outcome logs
            test_log_dir: Tree for test progress logs
        """
        base = Path(base_dir)
        self.stream_paths: Dict[str, Path] = {
            APP_INFO: base / app_log_dir / "info.log",
            APP_ERROR: base / app_log_dir / "error.log",
            TEST_INFO: base / test_log_dir / "info.log",
            TEST_ERROR: base / test_log_dir / "error.log",
        }

    def get_stream_path(self, stream_id: str) -> Path:
        if stream_id not in self.stream_paths:
            raise ValueError(f"Unknown log stream '{stream_id}', expected one of {STREAM_IDS}")
        return self.stream_paths[stream_id]

    def append(self, stream_id: str, message: Any) -> bool:
        """
        Append a message to a log stream.

        Args:
            stream_id: One of app-info, app-error, test-info, test-error
            message: Line to append

        Returns:
            bool: True if appended, False if the write failed
        """
        log_path = self.get_stream_path(stream_id)
        try:
            ensure_directory_existence(log_path)
        except OSError as e:
            logger.error(f"Cannot create log directory for {stream_id}: {str(e)}")
            return False
        return append_to_file(log_path, message)


def create_log_appender(
    base_dir: Union[str, Path] = ".",
    app_log_dir: Optional[str] = None,
    test_log_dir: Optional[str] = None,
) -> LogAppender:
    """
    Create a LogAppender instance.

    Args:
        base_dir: Directory the log trees are relative to
        app_log_dir: Optional override for the application log tree
        test_log_dir: Optional override for the test log tree

    Returns:
        LogAppender: Configured appender
    """
    return LogAppender(
        base_dir,
        app_log_dir or "applylogs",
        test_log_dir or "cypress/logs",
    )
