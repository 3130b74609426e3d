"""
Error categories and the exception hierarchy for fast-cc-hooks.

Construction-time problems (bad configuration, unreadable files, messages that
cannot be parsed) are raised as exceptions from this hierarchy. Policy
violations found while validating a commit are never raised; they are
collected into a ValidationResult instead.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ErrorCategory(Enum):
    """Categories of errors that can occur in fast-cc-hooks"""
    VALIDATION = "validation"
    CONFIG = "config"
    FILE = "file"
    INTERNAL = "internal"


class FastCCError(Exception):
    """
    Base error carrying a category, an optional cause and free-form context.

    Rendered as ``<category>: <message>`` or ``<category>: <message>: <cause>``.
    """

    category = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.context: Dict[str, Any] = dict(context or {})

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.category.value}: {self.message}: {self.cause}"
        return f"{self.category.value}: {self.message}"

    def with_context(self, key: str, value: Any) -> "FastCCError":
        """Attach a context value and return the same error."""
        self.context[key] = value
        return self


class ConfigError(FastCCError):
    """Invalid or unreadable configuration."""
    category = ErrorCategory.CONFIG


class PatternError(ConfigError):
    """A configured regular expression failed to compile."""

    def __init__(self, message: str, pattern: str, cause: Optional[BaseException] = None):
        super().__init__(message, cause=cause, context={"pattern": pattern})
        self.pattern = pattern


class FileAccessError(FastCCError):
    """A file could not be validated or read."""
    category = ErrorCategory.FILE


class CommitParseError(FastCCError):
    """A commit message could not be parsed."""
    category = ErrorCategory.VALIDATION

    def __str__(self) -> str:
        # Parser errors surface verbatim as format-field messages
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class EmptyMessageError(CommitParseError):
    """The commit message is the empty string."""

    def __init__(self, message: str = "empty commit message"):
        super().__init__(message)


class InvalidFormatError(CommitParseError):
    """The header does not follow ``type(scope): description``."""

    def __init__(
        self,
        message: str = "invalid conventional commit format: "
                       "expected 'type(scope): description' format",
        header: Optional[str] = None
    ):
        super().__init__(message, context={"header": header} if header is not None else None)
        self.header = header


class CommitValidationError(FastCCError):
    """A commit message failed validation; ``result`` holds every violation."""
    category = ErrorCategory.VALIDATION

    def __init__(self, message: str, result: Any = None):
        super().__init__(message)
        self.result = result


class EmptyCommitMessageError(CommitValidationError):
    """Nothing is left of a commit message file once comments are stripped."""


def categorize_error(error: BaseException) -> Tuple[ErrorCategory, str]:
    """
    Categorize an error and provide a user-friendly explanation.

    Args:
        error: The exception to categorize

    Returns:
        Tuple of (ErrorCategory, explanation)
    """
    if isinstance(error, PatternError):
        return (
            ErrorCategory.CONFIG,
            "A regular expression in the configuration does not compile"
        )

    if isinstance(error, ConfigError):
        return (
            ErrorCategory.CONFIG,
            "Configuration error - please check your .fast-cc-hooks.yaml"
        )

    if isinstance(error, (FileAccessError, OSError)):
        return (
            ErrorCategory.FILE,
            "The commit message file could not be read"
        )

    if isinstance(error, EmptyCommitMessageError):
        return (
            ErrorCategory.VALIDATION,
            "Aborting commit due to empty commit message"
        )

    if isinstance(error, (CommitParseError, CommitValidationError)):
        return (
            ErrorCategory.VALIDATION,
            "Commit message does not follow the conventional commit format"
        )

    if isinstance(error, FastCCError):
        return (error.category, "An error occurred")

    return (
        ErrorCategory.INTERNAL,
        "An unexpected error occurred"
    )
