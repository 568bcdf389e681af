"""
Filesystem Adapter Module

Thin wrappers around the filesystem primitives exposed to the test runner:
directory creation, listing, deletion and home-directory lookup.
"""

import os
import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def ensure_directory_existence(file_path: PathLike) -> Path:
    """
    Make sure every ancestor directory of a file path exists.

    Args:
        file_path: Path of a file that is about to be written

    Returns:
        Path: The parent directory

    Raises:
        OSError: If the directory chain cannot be created
    """
    directory = Path(file_path).parent
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created directory chain: {directory}")
    return directory


def list_files_in_dir(directory: PathLike) -> List[str]:
    """Return the entry names of a directory, sorted by name."""
    return sorted(os.listdir(directory))


def delete_file(file_path: PathLike) -> None:
    """Remove a single file. Missing files raise FileNotFoundError."""
    Path(file_path).unlink()
    logger.info(f"Deleted file: {file_path}")


def get_home_dir() -> str:
    return str(Path.home())


def is_blank_file(file_path: PathLike) -> bool:
    """
    Check whether a file is absent or holds only whitespace.

    Args:
        file_path: Path to check

    Returns:
        bool: True if the file does not exist or is whitespace-only
    """
    path = Path(file_path)
    if not path.exists():
        return True
    # Undecodable bytes still count as content.
    return len(path.read_bytes().strip()) == 0
