"""
Error message formatting for commit-msg hook output.
"""

from typing import List

from .categories import ErrorCategory, categorize_error


class ErrorFormatter:
    """
    Formats errors into user-friendly messages for the terminal.
    """

    # Suggestions for each error category
    SUGGESTIONS = {
        ErrorCategory.CONFIG: [
            "Check `.fast-cc-hooks.yaml` (or the file named by FASTCC_CONFIG)",
            "Make sure every custom rule has a name and a pattern",
            "Verify that all regular expressions compile"
        ],
        ErrorCategory.FILE: [
            "Check that the commit message file exists and is readable",
            "Commit message files are limited to 64KB"
        ],
        ErrorCategory.VALIDATION: [
            "Use the format: type(scope): description",
            "Example: feat(auth): add login endpoint"
        ],
        ErrorCategory.INTERNAL: [
            "Run again with FASTCC_LOG_LEVEL=DEBUG for more details",
            "Report this issue if it persists"
        ]
    }

    # Tags for each category
    TAGS = {
        ErrorCategory.CONFIG: "[CONFIG]",
        ErrorCategory.FILE: "[FILE]",
        ErrorCategory.VALIDATION: "[INVALID]",
        ErrorCategory.INTERNAL: "[ERROR]"
    }

    @staticmethod
    def format_error_detailed(error: BaseException) -> str:
        """
        Format an error with its explanation and suggestions.

        Args:
            error: The exception to format

        Returns:
            Multi-line string for terminal display
        """
        category, explanation = categorize_error(error)
        tag = ErrorFormatter.TAGS.get(category, "[ERROR]")
        suggestions: List[str] = ErrorFormatter.SUGGESTIONS.get(category, [])

        lines = [
            f"{tag} {explanation}",
            f"  {error}",
        ]

        if suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    @staticmethod
    def format_error_concise(error: BaseException) -> str:
        """
        Format an error concisely for logs or inline display.

        Args:
            error: The exception to format

        Returns:
            Concise error string
        """
        category, explanation = categorize_error(error)
        tag = ErrorFormatter.TAGS.get(category, "[ERROR]")

        return f"{tag} {category.value.upper()}: {explanation} - {str(error)[:200]}"


def format_error_for_user(error: BaseException, format_type: str = "detailed") -> str:
    """
    Convenience function to format an error for display to users.

    Args:
        error: The exception to format
        format_type: Format type ("detailed" or "concise")

    Returns:
        Formatted error message
    """
    if format_type == "detailed":
        return ErrorFormatter.format_error_detailed(error)
    else:
        return ErrorFormatter.format_error_concise(error)
