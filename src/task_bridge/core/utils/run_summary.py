"""
Run-level summary writer.

Writes the final outcome tally of a test run to a single JSON file
(``appliedCount.json`` in the working directory by default). Each write
replaces the previous snapshot; no history is kept.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

from task_bridge.io.schema import RunSummary

logger = logging.getLogger(__name__)


class RunSummaryWriter:
    """Utility to persist the run summary to disk."""

    def __init__(self, summary_path: Union[str, Path] = "appliedCount.json") -> None:
        self.summary_path = Path(summary_path)

    def write(self, counts: Union[RunSummary, Mapping[str, Any]]) -> None:
        """Overwrite the summary file with the given counts."""
        summary = counts if isinstance(counts, RunSummary) else RunSummary.model_validate(dict(counts))
        path = self.summary_path.resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(summary.to_file_dict(), f, indent=2, ensure_ascii=False)
        logger.info(f"Run summary written to: {path}")
        return None

    def get_summary_path(self) -> Path:
        return self.summary_path.resolve()
