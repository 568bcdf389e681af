"""
Task Bridge Runner

Host entry point for the dispatcher. A test runner either calls one task
per process (``--task``) or keeps a bridge process alive and talks to it
over JSON lines on stdin/stdout (``--serve``).

Request line:   {"id": 1, "task": "writeCSV", "arg": {...}}
Response line:  {"id": 1, "ok": true, "result": ...}
                {"id": 1, "ok": false, "error": "..."}

``exitProcess`` ends the process with status 0 and writes no response.
"""

import sys
import json
import logging
from typing import Any, Dict, IO, List, Optional

from task_bridge.core.utils.logging import configure_logging
from task_bridge.pipeline.config import create_config_loader
from task_bridge.pipeline.dispatcher import TaskDispatcher, create_dispatcher

logger = logging.getLogger(__name__)


def handle_request(dispatcher: TaskDispatcher, line: str) -> Dict[str, Any]:
    """
    Run one JSON-lines request and build its response.

    Args:
        dispatcher: Dispatcher to route the task through
        line: Raw request line

    Returns:
        Dict[str, Any]: Response object
    """
    request_id = None
    try:
        request = json.loads(line)
        if not isinstance(request, dict) or "task" not in request:
            raise ValueError("Request must be an object with a 'task' field")
        request_id = request.get("id")
        result = dispatcher.invoke(request["task"], request.get("arg"))
        return {"id": request_id, "ok": True, "result": result}
    except Exception as e:
        logger.error(f"Task request failed: {str(e)}")
        return {"id": request_id, "ok": False, "error": str(e)}


def serve(dispatcher: TaskDispatcher, stdin: IO[str], stdout: IO[str]) -> int:
    """
    Answer JSON-lines requests until stdin closes.

    Args:
        dispatcher: Dispatcher to route tasks through
        stdin: Request stream
        stdout: Response stream

    Returns:
        int: Exit status
    """
    logger.info(f"Serving {len(dispatcher.task_names())} tasks on stdin/stdout")
    for line in stdin:
        if not line.strip():
            continue
        response = handle_request(dispatcher, line)
        stdout.write(json.dumps(response, ensure_ascii=False, default=str) + "\n")
        stdout.flush()
    logger.info("Input closed, stopping task bridge")
    return 0


def run_single_task(dispatcher: TaskDispatcher, task: str, raw_arg: Optional[str]) -> int:
    """Run one task and print its JSON result."""
    try:
        arg = json.loads(raw_arg) if raw_arg is not None else None
        result = dispatcher.invoke(task, arg)
    except Exception as e:
        logger.error(f"Task {task} failed: {str(e)}")
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False, default=str))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the task bridge."""
    import argparse

    parser = argparse.ArgumentParser(description="Task bridge for end-to-end test runners")
    parser.add_argument("--config", default="config/config.yaml", help="Configuration file path")
    parser.add_argument("--serve", action="store_true", help="Serve JSON-lines task requests on stdin/stdout")
    parser.add_argument("--task", help="Run a single task by name")
    parser.add_argument("--arg", help="JSON-encoded argument for --task")
    parser.add_argument("--list-tasks", action="store_true", help="List registered task names")

    args = parser.parse_args(argv)

    bridge_config = create_config_loader(args.config).get_bridge_config()
    configure_logging(bridge_config.log_level, bridge_config.log_dir)

    dispatcher = create_dispatcher(bridge_config)
    try:
        if args.list_tasks:
            for name in dispatcher.task_names():
                print(name)
            return 0

        if args.task:
            return run_single_task(dispatcher, args.task, args.arg)

        if args.serve:
            return serve(dispatcher, sys.stdin, sys.stdout)

        parser.print_help()
        return 2
    finally:
        dispatcher.shutdown()


if __name__ == "__main__":
    sys.exit(main())
