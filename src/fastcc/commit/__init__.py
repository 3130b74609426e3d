"""
Commit message parsing and validation module.

Provides conventional commits support: parsing raw messages into structured
commits, extracting ticket references and validating against a rule set.

**Key Features:**
- Conventional Commits header, body and footer parsing
- JIRA, GitHub and bracketed ticket reference extraction
- Configurable validation that reports every violation at once

**Main Components:**
- **tickets**: Ticket reference extraction
- **conventional**: Conventional commits parsing and formatting
- **validator**: Message validation against a Config
"""

from .tickets import (
    TicketType,
    TicketReference,
    extract_refs
)

from .conventional import (
    Commit,
    Parser,
    is_footer_line,
    parse_commit,
    format_commit
)

from .validator import (
    ValidationField,
    ValidationError,
    ValidationResult,
    Validator,
    validate_message,
    is_conventional_commit
)

__all__ = [
    # Ticket references
    "TicketType",
    "TicketReference",
    "extract_refs",
    # Conventional commits
    "Commit",
    "Parser",
    "is_footer_line",
    "parse_commit",
    "format_commit",
    # Validation
    "ValidationField",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "validate_message",
    "is_conventional_commit",
]
