"""
File reading with path and size checks.

Commit message files come from git (usually ``.git/COMMIT_EDITMSG``, or a
path relative to a separate git dir such as ``../repo.git/COMMIT_EDITMSG``),
so commit file reads only reject unusable paths and oversized files. General
reads are also guarded against directory traversal.
"""

import logging
import os
from pathlib import Path
from typing import Union

from ..errors import FileAccessError

logger = logging.getLogger(__name__)

# 1MB
MAX_FILE_SIZE = 1024 * 1024
# 64KB
MAX_COMMIT_FILE_SIZE = 64 * 1024

PathLike = Union[str, Path]


def _check_path_string(path: PathLike) -> str:
    path_str = str(path)
    if not path_str:
        raise FileAccessError("file path cannot be empty")

    if "\x00" in path_str:
        raise FileAccessError(f"file path contains null bytes: {path_str!r}")

    return path_str


def validate_file_path(path: PathLike) -> None:
    """
    Reject empty paths, paths with ``..`` components and paths with null bytes.

    Raises:
        FileAccessError: If the path is unsafe
    """
    path_str = _check_path_string(path)

    cleaned = os.path.normpath(path_str)
    if ".." in Path(cleaned).parts:
        raise FileAccessError(f"file path contains directory traversal: {path_str}")


def validate_file_size(path: PathLike, max_size: int) -> None:
    """
    Check that the file exists and is no larger than ``max_size`` bytes.

    Raises:
        FileAccessError: If the file cannot be accessed or is too large
    """
    try:
        size = os.stat(path).st_size
    except OSError as e:
        raise FileAccessError(f"cannot access file {path}", cause=e)

    if size > max_size:
        raise FileAccessError(
            f"file {path} is too large ({size} bytes, max {max_size} bytes)"
        )


def _read_text(path: PathLike, max_size: int) -> str:
    validate_file_size(path, max_size)

    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(f"reading file {path}", cause=e)

    logger.debug(f"Read {len(content)} characters from {path}")
    return content


def safe_read_file(path: PathLike, max_size: int = MAX_FILE_SIZE) -> str:
    """
    Read a UTF-8 text file after validating its path and size.

    Args:
        path: File to read
        max_size: Maximum allowed size in bytes

    Returns:
        File contents

    Raises:
        FileAccessError: If validation or reading fails
    """
    validate_file_path(path)
    return _read_text(path, max_size)


def safe_read_commit_file(path: PathLike) -> str:
    """
    Read a commit message file, limited to MAX_COMMIT_FILE_SIZE.

    Relative paths may point outside the working directory; git passes
    them that way when the git dir lives elsewhere.
    """
    _check_path_string(path)
    return _read_text(path, MAX_COMMIT_FILE_SIZE)
