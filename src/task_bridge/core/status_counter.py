"""
Status counter for run outcomes.

One instance is created when the bridge starts and handed to the
dispatcher; it lives for the rest of the process and is never reset.
"""

import logging
import threading
from typing import Dict

from task_bridge.io.schema import StatusCategory

logger = logging.getLogger(__name__)


class StatusCounter:
    """Tallies outcome categories for the current run."""

    def __init__(self):
        self._counts: Dict[str, int] = {name: 0 for name in StatusCategory.names()}
        self.lock = threading.Lock()

    def increment(self, category: str) -> None:
        """Add one to a category. Unknown categories are ignored."""
        with self.lock:
            if category in self._counts:
                self._counts[category] += 1
            else:
                logger.debug(f"Ignoring unknown status category: {category}")

    def snapshot(self) -> Dict[str, int]:
        """Return a copy of the current counts."""
        with self.lock:
            return dict(self._counts)
