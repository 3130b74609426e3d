"""
Conventional Commits parsing for fast-cc-hooks.

Parses raw commit messages into a structured Commit following the Conventional
Commits specification (https://www.conventionalcommits.org/).

Standard format: type(scope)!: description

where:
- type: The kind of change (feat, fix, docs, etc.)
- scope: Optional context in parentheses (may be empty)
- !: Optional breaking change marker
- description: Everything after the first colon, leading whitespace removed

The header is followed by an optional body and an optional footer made of
trailer lines such as ``Signed-off-by: ...`` or ``BREAKING CHANGE: ...``.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..errors import EmptyMessageError, InvalidFormatError
from .tickets import TicketReference, TicketType, extract_refs

logger = logging.getLogger(__name__)


# Groups: 1=type, 2=scope with parens, 3=scope, 4=breaking marker, 5=description
HEADER_PATTERN = re.compile(r"^(\w+)(\(([^)]*)\))?(!)?:\s*(.+)", re.ASCII)

BREAKING_CHANGE_TOKENS = ("BREAKING CHANGE:", "BREAKING-CHANGE:")

FOOTER_TOKENS = (
    "Signed-off-by:",
    "Co-authored-by:",
    "Fixes:",
    "Closes:",
    "Refs:",
    "See-also:",
)

# Generic git trailer: Word: or Word-Word:
GENERIC_TRAILER_PATTERN = re.compile(r"^[A-Z][a-z]+(-[A-Z][a-z]+)*:\s+", re.ASCII)


@dataclass(frozen=True)
class Commit:
    """
    A parsed conventional commit message.

    ``breaking`` is true when the header carries ``!`` or the footer carries a
    BREAKING CHANGE trailer. ``header_breaking`` records the header marker
    alone and is what ``header()`` renders; it defaults to ``breaking`` when a
    Commit is built by hand.
    """

    type: str = ""
    scope: str = ""
    breaking: bool = False
    description: str = ""
    body: str = ""
    footer: str = ""
    raw: str = ""
    ticket_refs: Tuple[TicketReference, ...] = field(default_factory=tuple)
    header_breaking: Optional[bool] = None

    def __post_init__(self):
        if self.header_breaking is None:
            object.__setattr__(self, "header_breaking", self.breaking)
        if not isinstance(self.ticket_refs, tuple):
            object.__setattr__(self, "ticket_refs", tuple(self.ticket_refs))

    def header(self) -> str:
        """Rebuild the header line from type, scope, marker and description."""
        header = self.type
        if self.scope:
            header += f"({self.scope})"
        if self.header_breaking:
            header += "!"
        header += f": {self.description}"
        return header

    def format(self) -> str:
        """Format as conventional commit string."""
        parts = [self.header()]
        if self.body:
            parts.append("")
            parts.append(self.body)
        if self.footer:
            parts.append("")
            parts.append(self.footer)

        return "\n".join(parts)

    def has_ticket_refs(self) -> bool:
        return len(self.ticket_refs) > 0

    def has_jira_ticket(self) -> bool:
        return any(ref.type == TicketType.JIRA for ref in self.ticket_refs)

    def jira_tickets(self) -> List[TicketReference]:
        """JIRA references in extraction order."""
        return [ref for ref in self.ticket_refs if ref.type == TicketType.JIRA]


def is_footer_line(line: str) -> bool:
    """
    Check whether a line looks like a footer trailer.

    Args:
        line: A single line of the commit message

    Returns:
        True for BREAKING CHANGE trailers, known git trailers and lines shaped
        like ``Word-Word: value``
    """
    if line.startswith(BREAKING_CHANGE_TOKENS) or line.startswith(FOOTER_TOKENS):
        return True

    return GENERIC_TRAILER_PATTERN.match(line) is not None


def split_body_and_footer(lines: List[str]) -> Tuple[str, str]:
    """
    Split the lines after the header into body and footer.

    A single blank separator line after the header is skipped. Lines are then
    scanned from the bottom: blank lines are passed over, footer lines move
    the footer start up, and the first other line ends the scan.

    Args:
        lines: All lines of the message, header included

    Returns:
        Tuple of (body, footer), both trimmed
    """
    if len(lines) <= 1:
        return "", ""

    body_start = 1
    if lines[body_start] == "":
        body_start += 1

    footer_start = -1
    for i in range(len(lines) - 1, body_start - 1, -1):
        line = lines[i]
        if is_footer_line(line):
            footer_start = i
        elif line != "":
            break

    body = ""
    footer = ""
    if footer_start == -1:
        body = "\n".join(lines[body_start:]).strip()
    else:
        if footer_start > body_start:
            body = "\n".join(lines[body_start:footer_start]).strip()
        footer = "\n".join(lines[footer_start:]).strip()

    return body, footer


class Parser:
    """
    Conventional commit parser.

    In strict mode a header that does not match ``type(scope)!: description``
    raises InvalidFormatError. In non-strict mode the whole header becomes the
    description and type and scope stay empty.
    """

    def __init__(self, strict: bool = True):
        self.strict = strict

    def parse(self, message: str) -> Commit:
        """
        Parse a commit message.

        Args:
            message: Full commit message

        Returns:
            Parsed Commit

        Raises:
            EmptyMessageError: If the message is empty
            InvalidFormatError: If strict and the header does not match
        """
        if message == "":
            raise EmptyMessageError()

        lines = message.split("\n")
        header = lines[0]

        match = HEADER_PATTERN.match(header)
        if not match:
            if self.strict:
                raise InvalidFormatError(header=header)
            logger.debug("Header is not conventional, using it as description")
            return Commit(description=header, raw=message)

        commit_type, _, scope, marker, description = match.groups()
        header_breaking = marker == "!"

        body, footer = split_body_and_footer(lines)

        breaking = header_breaking
        if footer and any(token in footer for token in BREAKING_CHANGE_TOKENS):
            breaking = True

        ticket_refs = extract_refs(message)

        logger.debug(
            f"Parsed commit: type={commit_type!r} scope={scope or ''!r} "
            f"breaking={breaking} refs={len(ticket_refs)}"
        )

        return Commit(
            type=commit_type,
            scope=scope or "",
            breaking=breaking,
            description=description,
            body=body,
            footer=footer,
            raw=message,
            ticket_refs=tuple(ticket_refs),
            header_breaking=header_breaking
        )


def parse_commit(message: str, strict: bool = True) -> Commit:
    """
    Parse a conventional commit message.

    Args:
        message: Full commit message
        strict: Reject headers that are not conventional (default: True)

    Returns:
        Parsed Commit

    Raises:
        EmptyMessageError: If the message is empty
        InvalidFormatError: If strict and the header does not match
    """
    return Parser(strict=strict).parse(message)


def format_commit(
    commit_type: str,
    description: str,
    scope: str = "",
    body: str = "",
    footer: str = "",
    breaking: bool = False
) -> str:
    """
    Format a conventional commit message.

    Args:
        commit_type: Type of commit, e.g. "feat"
        description: Brief description in imperative mood
        scope: Optional scope
        body: Optional detailed body
        footer: Optional footer (e.g., BREAKING CHANGE, issue refs)
        breaking: Whether to add the ``!`` marker

    Returns:
        Formatted conventional commit message
    """
    commit = Commit(
        type=commit_type,
        scope=scope,
        breaking=breaking,
        description=description,
        body=body,
        footer=footer
    )
    return commit.format()
