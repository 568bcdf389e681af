import os
import sys
import logging

import pytest

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from task_bridge.pipeline.config import BridgeConfig
from task_bridge.pipeline.dispatcher import create_dispatcher


class ExitRecorder:
    """Stands in for sys.exit so exitProcess can be observed."""

    def __init__(self):
        self.codes = []

    def __call__(self, code):
        self.codes.append(code)


@pytest.fixture(autouse=True)
def _reset_bridge_logger():
    yield
    logging.getLogger("task_bridge").handlers.clear()


@pytest.fixture
def exit_recorder():
    return ExitRecorder()


@pytest.fixture
def bridge_config(tmp_path):
    return BridgeConfig(base_dir=str(tmp_path))


@pytest.fixture
def dispatcher(bridge_config, exit_recorder):
    d = create_dispatcher(bridge_config, exit_func=exit_recorder)
    yield d
    d.shutdown()
