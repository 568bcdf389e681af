"""
CSV Writer Module

This module converts flat records to CSV text and persists them for the
test runner. Rows are fully quoted and embedded double quotes are escaped
with a backslash (\\"), which is what the downstream consumers of these
files parse. It is not RFC-4180 quote doubling.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Union

from task_bridge.core.utils.text import MISSING, to_text
from task_bridge.io.filesystem import ensure_directory_existence, is_blank_file

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]


def _quote(value: Any) -> str:
    escaped = to_text(value).replace('"', '\\"')
    return f'"{escaped}"'


def convert_to_csv(records: Sequence[Record], headers: Sequence[str]) -> str:
    """
    Convert records to CSV body text.

    Args:
        records: Flat records, one per row
        headers: Keys to emit, in column order

    Returns:
        str: Rows joined by newlines, no header line and no trailing newline
    """
    rows = []
    for record in records:
        values = [_quote(record.get(header, MISSING)) for header in headers]
        rows.append(",".join(values))
    return "\n".join(rows)


class CSVWriter:
    """Writes header-once CSV files with append or overwrite semantics."""

    def write(
        self,
        file_path: Union[str, Path],
        data: Union[Record, Sequence[Record]],
        headers: Sequence[str],
        append: bool = True,
    ) -> bool:
        """
        Write one or more records to a CSV file.

        The header line is written only when the file is new or blank.
        With ``append=False`` the file is truncated and rewritten as
        header plus body in one go.

        Args:
            file_path: Target CSV path
            data: A single record or a sequence of records
            headers: Column keys in order
            append: Append rows to the existing file instead of replacing it

        Returns:
            bool: True if written successfully, False otherwise
        """
        try:
            rows: List[Dict[str, Any]] = [data] if isinstance(data, Mapping) else list(data)
            body = convert_to_csv(rows, headers)
            header_line = ",".join(headers) + "\n"
            path = Path(file_path)
            ensure_directory_existence(path)

            if not append:
                with open(path, "w", encoding="utf-8") as f:
                    f.write(header_line)
                    f.write(body + "\n")
            else:
                if is_blank_file(path):
                    with open(path, "w", encoding="utf-8") as f:
                        f.write(header_line)
                with open(path, "a", encoding="utf-8") as f:
                    f.write(body + "\n")

            logger.info(f"CSV file written successfully: {path} ({len(rows)} rows)")
            return True

        except Exception as e:
            logger.error(f"Error writing CSV file {file_path}: {str(e)}")
            return False


def create_csv_writer() -> CSVWriter:
    """Factory function to create a CSV writer."""
    return CSVWriter()
