"""
Ticket reference extraction for commit messages.

Three reference shapes are recognized, in this priority order:

- GitHub: ``#123`` or ``GH-123`` (id is the digits)
- Generic bracketed: ``[PROJ-123]`` (id is the bracket interior)
- JIRA: ``PROJ-123`` (3-4 upper-case letters, hyphen, digits)

Each pass scans the whole message in document order. A JIRA match whose id was
already claimed by a GitHub or generic match is dropped, so ``[PROJ-789]`` is
reported once as GENERIC. Keys are case-sensitive: ``proj-123`` and
``Proj-123`` never match.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Set, Tuple


class TicketType(Enum):
    """Issue tracker styles a reference can belong to."""

    JIRA = "JIRA"
    GITHUB = "GITHUB"
    GENERIC = "GENERIC"


@dataclass(frozen=True)
class TicketReference:
    """A ticket reference found in a commit message."""

    type: TicketType
    id: str   # Canonical identifier, e.g. "PROJ-123" or "123"
    raw: str  # Exact text matched, e.g. "[PROJ-123]" or "#123"

    def __str__(self) -> str:
        return f"{self.type.value}:{self.id}"


GITHUB_TICKET_PATTERN = re.compile(r"(?:#(\d+)|GH-(\d+))\b", re.ASCII)
GENERIC_TICKET_PATTERN = re.compile(r"\[([A-Z]{3,4}-\d+)\]", re.ASCII)
JIRA_TICKET_PATTERN = re.compile(r"\b([A-Z]{3,4}-\d+)\b", re.ASCII)


def extract_refs(message: str) -> List[TicketReference]:
    """
    Extract ticket references from a commit message.

    Args:
        message: Raw commit message (header, body and footer)

    Returns:
        De-duplicated references: GitHub matches first, then generic, then
        JIRA, each group in document order
    """
    refs: List[TicketReference] = []
    seen: Set[Tuple[TicketType, str]] = set()

    def add(ref: TicketReference) -> None:
        key = (ref.type, ref.id)
        if key not in seen:
            seen.add(key)
            refs.append(ref)

    for match in GITHUB_TICKET_PATTERN.finditer(message):
        ticket_id = match.group(1) or match.group(2)
        if ticket_id:
            add(TicketReference(TicketType.GITHUB, ticket_id, match.group(0)))

    for match in GENERIC_TICKET_PATTERN.finditer(message):
        add(TicketReference(TicketType.GENERIC, match.group(1), match.group(0)))

    for match in JIRA_TICKET_PATTERN.finditer(message):
        ticket_id = match.group(1)
        if (TicketType.GENERIC, ticket_id) in seen or (TicketType.GITHUB, ticket_id) in seen:
            continue
        add(TicketReference(TicketType.JIRA, ticket_id, match.group(0)))

    return refs


def jira_project(ticket_id: str) -> str:
    """
    Project key of a JIRA id (text before the first hyphen).

    Returns an empty string for ids without a hyphen.
    """
    project, sep, _ = ticket_id.partition("-")
    return project if sep else ""
