"""
Error types and formatting for fast-cc-hooks.
"""

from .categories import (
    ErrorCategory,
    FastCCError,
    ConfigError,
    PatternError,
    FileAccessError,
    CommitParseError,
    EmptyMessageError,
    InvalidFormatError,
    CommitValidationError,
    EmptyCommitMessageError,
    categorize_error
)
from .formatter import ErrorFormatter, format_error_for_user

__all__ = [
    "ErrorCategory",
    "FastCCError",
    "ConfigError",
    "PatternError",
    "FileAccessError",
    "CommitParseError",
    "EmptyMessageError",
    "InvalidFormatError",
    "CommitValidationError",
    "EmptyCommitMessageError",
    "categorize_error",
    "ErrorFormatter",
    "format_error_for_user",
]
