"""
Utility modules for fast-cc-hooks.
"""

from .files import (
    MAX_FILE_SIZE,
    MAX_COMMIT_FILE_SIZE,
    validate_file_path,
    validate_file_size,
    safe_read_file,
    safe_read_commit_file
)

__all__ = [
    "MAX_FILE_SIZE",
    "MAX_COMMIT_FILE_SIZE",
    "validate_file_path",
    "validate_file_size",
    "safe_read_file",
    "safe_read_commit_file",
]
