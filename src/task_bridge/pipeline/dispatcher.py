"""
Task Dispatcher

This module registers the bridge operations under the task names used by
the test specifications and routes each invocation to its handler.

Directory listing and file deletion run on a worker pool and hand back a
``concurrent.futures.Future``; every other task returns its result directly.
"""

import sys
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Set

from pydantic import ValidationError

from task_bridge.core.status_counter import StatusCounter
from task_bridge.core.utils.run_summary import RunSummaryWriter
from task_bridge.io import filesystem
from task_bridge.io.log_appender import (
    APP_ERROR,
    APP_INFO,
    TEST_ERROR,
    TEST_INFO,
    LogAppender,
    create_log_appender,
)
from task_bridge.io.schema import WriteCsvPayload, WriteJsonPayload
from task_bridge.io.writers.csv import CSVWriter, create_csv_writer
from task_bridge.io.writers.json import JSONWriter, create_json_writer
from task_bridge.pipeline.config import BridgeConfig

logger = logging.getLogger(__name__)

TaskHandler = Callable[[Any], Any]


class UnknownTaskError(LookupError):
    """Raised when a task name has no registered handler."""

    def __init__(self, name: str):
        super().__init__(f"Unknown task: {name}")
        self.name = name


class TaskDispatcher:
    """Routes named task invocations to their handlers."""

    def __init__(
        self,
        status_counter: StatusCounter,
        csv_writer: Optional[CSVWriter] = None,
        json_writer: Optional[JSONWriter] = None,
        summary_writer: Optional[RunSummaryWriter] = None,
        log_appender: Optional[LogAppender] = None,
        max_workers: int = 2,
        exit_func: Callable[[int], Any] = sys.exit,
    ):
        """
        Initialize the dispatcher and register the built-in tasks.

        Args:
            status_counter: The run's single status counter
            csv_writer: CSV persistence service
            json_writer: JSON persistence service
            summary_writer: Run summary writer
            log_appender: Runner log streams
            max_workers: Worker threads for asynchronous tasks
            exit_func: Called with the exit status by ``exitProcess``
        """
        self.status_counter = status_counter
        self.csv_writer = csv_writer or create_csv_writer()
        self.json_writer = json_writer or create_json_writer()
        self.summary_writer = summary_writer or RunSummaryWriter()
        self.log_appender = log_appender or create_log_appender()
        self.exit_func = exit_func

        self._handlers: Dict[str, TaskHandler] = {}
        self._async_tasks: Set[str] = set()
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="task-bridge")

        self._register_builtin_tasks()

    def register(self, name: str, handler: TaskHandler, asynchronous: bool = False) -> None:
        """
        Register a handler under a task name.

        Args:
            name: Task name, unique per dispatcher
            handler: Callable taking the task argument
            asynchronous: Run on the worker pool and return a Future

        Raises:
            ValueError: If the name is already registered
        """
        if name in self._handlers:
            raise ValueError(f"Task already registered: {name}")
        self._handlers[name] = handler
        if asynchronous:
            self._async_tasks.add(name)

    def task_names(self) -> List[str]:
        return list(self._handlers)

    def is_async(self, name: str) -> bool:
        return name in self._async_tasks

    def dispatch(self, name: str, arg: Any = None) -> Any:
        """
        Route an invocation to its handler.

        Args:
            name: Registered task name
            arg: Task argument

        Returns:
            Any: The handler result, or a Future for asynchronous tasks

        Raises:
            UnknownTaskError: If no handler is registered under the name
        """
        handler = self._handlers.get(name)
        if handler is None:
            logger.error(f"Rejected unknown task: {name}")
            raise UnknownTaskError(name)

        logger.debug(f"Dispatching task {name}")
        if name in self._async_tasks:
            return self._executor.submit(handler, arg)
        return handler(arg)

    def invoke(self, name: str, arg: Any = None) -> Any:
        """Dispatch a task and wait for asynchronous results."""
        result = self.dispatch(name, arg)
        if isinstance(result, Future):
            return result.result()
        return result

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)

    def _register_builtin_tasks(self) -> None:
        self.register("ensureDirectoryExistence", self._ensure_directory_existence)
        self.register("incrementStatusCount", self._increment_status_count)
        self.register("getStatusCounts", self._get_status_counts)
        self.register("writeAppliedCounts", self._write_applied_counts)
        self.register("listFilesInDir", filesystem.list_files_in_dir, asynchronous=True)
        self.register("readJsonFile", self.json_writer.read)
        self.register("writeJsonFile", self._write_json_file)
        self.register("getHomeDir", self._get_home_dir)
        self.register("logApplicationInfo", self._log_to(APP_INFO))
        self.register("logApplicationError", self._log_to(APP_ERROR))
        self.register("logInfo", self._log_to(TEST_INFO))
        self.register("logError", self._log_to(TEST_ERROR))
        self.register("writeCSV", self._write_csv)
        self.register("deleteFile", self._delete_file, asynchronous=True)
        self.register("exitProcess", self._exit_process)

    def _ensure_directory_existence(self, file_path: str) -> None:
        filesystem.ensure_directory_existence(file_path)
        return None

    def _increment_status_count(self, category: str) -> None:
        self.status_counter.increment(category)
        return None

    def _get_status_counts(self, _arg: Any = None) -> Dict[str, int]:
        return self.status_counter.snapshot()

    def _write_applied_counts(self, counts: Dict[str, Any]) -> None:
        return self.summary_writer.write(counts)

    def _write_json_file(self, payload: Dict[str, Any]) -> Optional[str]:
        try:
            request = WriteJsonPayload.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Invalid writeJsonFile payload: {str(e)}")
            return str(e)
        return self.json_writer.write(request.file_path, request.data)

    def _get_home_dir(self, _arg: Any = None) -> str:
        return filesystem.get_home_dir()

    def _log_to(self, stream_id: str) -> TaskHandler:
        def handler(message: Any) -> None:
            self.log_appender.append(stream_id, message)
            return None

        return handler

    def _write_csv(self, payload: Dict[str, Any]) -> bool:
        try:
            request = WriteCsvPayload.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Invalid writeCSV payload: {str(e)}")
            return False
        return self.csv_writer.write(
            request.file_path,
            request.data,
            request.headers,
            append=request.resolved_append(),
        )

    def _delete_file(self, file_path: str) -> None:
        filesystem.delete_file(file_path)
        return None

    def _exit_process(self, _arg: Any = None) -> None:
        logger.info("exitProcess requested, terminating with status 0")
        self.exit_func(0)


def create_dispatcher(
    config: Optional[BridgeConfig] = None,
    exit_func: Callable[[int], Any] = sys.exit,
) -> TaskDispatcher:
    """
    Build a dispatcher with all components wired from the configuration.

    Args:
        config: Bridge settings, defaults if None
        exit_func: Called with the exit status by ``exitProcess``

    Returns:
        TaskDispatcher: Ready-to-use dispatcher owning a fresh status counter
    """
    config = config or BridgeConfig()
    base_dir = Path(config.base_dir)
    return TaskDispatcher(
        status_counter=StatusCounter(),
        csv_writer=create_csv_writer(),
        json_writer=create_json_writer(),
        summary_writer=RunSummaryWriter(base_dir / config.summary_file),
        log_appender=create_log_appender(base_dir, config.app_log_dir, config.test_log_dir),
        max_workers=config.max_workers,
        exit_func=exit_func,
    )
