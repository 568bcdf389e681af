"""
JSON Writer Module

This module reads and writes whole-document JSON snapshots on behalf of
the test runner. There is no merge: every write replaces the file.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from task_bridge.io.filesystem import ensure_directory_existence

logger = logging.getLogger(__name__)


class JSONWriter:
    """Handles reading and writing JSON documents."""

    def __init__(self, indent: int = 2):
        """
        Initialize the JSON writer.

        Args:
            indent: Indentation used when serializing
        """
        self.indent = indent

    def read(self, file_path: Union[str, Path]) -> Optional[Any]:
        """
        Read and parse a JSON file.

        A missing file and an unparseable file both yield None; the
        difference only shows up in the error log.

        Args:
            file_path: Path to the JSON file, resolved against the working directory

        Returns:
            Optional[Any]: Parsed JSON value, None if failed
        """
        absolute_path = Path(file_path).resolve()
        try:
            if not absolute_path.exists():
                raise FileNotFoundError(f"File not found: {absolute_path}")

            with open(absolute_path, "r", encoding="utf-8") as f:
                return json.load(f)

        except Exception as e:
            logger.error(f"Error reading JSON file: {str(e)}")
            return None

    def write(self, file_path: Union[str, Path], data: Any) -> Optional[str]:
        """
        Serialize a value to a JSON file, replacing any previous content.

        Args:
            file_path: Target path
            data: JSON-serializable value

        Returns:
            Optional[str]: None on success, the error message on failure
        """
        try:
            json_data = json.dumps(data, indent=self.indent, ensure_ascii=False)
            ensure_directory_existence(file_path)
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(json_data)

            logger.info(f"JSON file written successfully: {file_path}")
            return None

        except Exception as e:
            logger.error(f"Error writing JSON file: {str(e)}")
            return str(e)


def create_json_writer(indent: int = 2) -> JSONWriter:
    """
    Factory function to create a JSON writer.

    Args:
        indent: Indentation used when serializing

    Returns:
        JSONWriter: Configured JSON writer
    """
    return JSONWriter(indent)
