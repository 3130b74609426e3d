"""
Commit message validation against a configurable rule set.

A Validator compiles its configuration once and can then validate any number of
messages, from any number of threads. Every rule runs on every message and all
violations are collected, so a commit with three problems is reported three
times instead of stopping at the first one.
"""

import logging
import re
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..config import Config, default_config
from ..errors import (
    CommitParseError,
    CommitValidationError,
    ConfigError,
    EmptyCommitMessageError,
    PatternError
)
from ..utils.files import safe_read_commit_file
from .conventional import Commit, Parser
from .tickets import jira_project

logger = logging.getLogger(__name__)


class ValidationField(Enum):
    """Part of the commit a validation error refers to."""
    FORMAT = "format"
    TYPE = "type"
    SCOPE = "scope"
    SUBJECT = "subject"
    BREAKING = "breaking"
    CUSTOM = "custom"
    TICKET = "ticket"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ValidationError:
    """A single rule violation."""

    field: ValidationField
    message: str
    value: Optional[str] = None

    def __str__(self) -> str:
        """Format error for display."""
        if self.value:
            return f"{self.field.value}: {self.message} (got: {self.value!r})"
        return f"{self.field.value}: {self.message}"


@dataclass
class ValidationResult:
    """Result of commit message validation."""

    valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)

    def add(self, error_field: ValidationField, message: str, value: Optional[str] = None) -> None:
        self.errors.append(ValidationError(error_field, message, value))
        self.valid = False

    def fields(self) -> List[ValidationField]:
        """Fields of all errors, in reporting order."""
        return [error.field for error in self.errors]

    def error_message(self) -> str:
        """All errors joined with ``; `` (empty when valid)."""
        return "; ".join(str(error) for error in self.errors)

    def format_report(self) -> str:
        """Format validation report for display."""
        if self.valid:
            return "[VALID] Commit message is valid"

        lines = [f"[ERROR] Commit message validation failed ({len(self.errors)} problem(s)):", ""]
        for error in self.errors:
            lines.append(f"  - {error}")

        return "\n".join(lines)


CompiledRule = Tuple[str, str, re.Pattern]  # (name, message, pattern)


def _compile(pattern: str, what: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(f"compiling {what}", pattern=pattern, cause=e)


class Validator:
    """
    Validates commit messages according to a Config.

    Patterns are compiled in the constructor and stored as tuples, so a
    Validator is read-only once built and safe to share between threads.
    """

    def __init__(self, config: Optional[Config]):
        """
        Args:
            config: Rules to enforce

        Raises:
            ConfigError: If config is None
            PatternError: If a custom rule, the JIRA ticket pattern or an
                ignore pattern is not a valid regular expression
        """
        if config is None:
            raise ConfigError("config is required")

        self.config = config
        self.parser = Parser(strict=True)

        self._types: Tuple[str, ...] = tuple(config.types)
        self._scopes: Tuple[str, ...] = tuple(config.scopes)
        self._jira_projects: Tuple[str, ...] = tuple(config.jira_projects)

        self._custom_rules: Tuple[CompiledRule, ...] = tuple(
            (rule.name, rule.message, _compile(rule.pattern, f"custom rule {rule.name}"))
            for rule in config.custom_rules
        )

        self._jira_pattern: Optional[re.Pattern] = None
        if config.jira_ticket_pattern:
            self._jira_pattern = _compile(config.jira_ticket_pattern, "JIRA ticket pattern")

        self._ignore_patterns: Tuple[re.Pattern, ...] = tuple(
            _compile(pattern, f"ignore pattern {pattern!r}")
            for pattern in config.ignore_patterns
        )

        logger.debug(
            f"Validator ready: {len(self._types)} types, {len(self._custom_rules)} custom rules, "
            f"{len(self._ignore_patterns)} ignore patterns"
        )

    def validate(
        self,
        message: str,
        cancel_event: Optional[threading.Event] = None
    ) -> ValidationResult:
        """
        Validate a commit message.

        Never raises for rule violations; every problem found is recorded in
        the returned result.

        Args:
            message: Full commit message
            cancel_event: If already set, validation is skipped and the result
                records the cancellation

        Returns:
            ValidationResult with all violations
        """
        result = ValidationResult()

        # Sampled once; setting the event later does not abort this call
        if cancel_event is not None and cancel_event.is_set():
            result.add(ValidationField.CANCELLED, "validation cancelled")
            return result

        if self.should_ignore(message):
            logger.debug("Message matches an ignore pattern, skipping validation")
            return result

        try:
            commit = self.parser.parse(message)
        except CommitParseError as e:
            result.add(ValidationField.FORMAT, str(e))
            return result

        self._check_type(commit, result)
        self._check_scope(commit, result)
        self._check_subject(commit, result)
        self._check_breaking(commit, result)
        self._check_custom_rules(message, result)
        self._check_tickets(commit, result)

        if not result.valid:
            logger.debug(f"Commit message invalid: {result.error_message()}")

        return result

    def validate_file(
        self,
        path: Union[str, Path],
        cancel_event: Optional[threading.Event] = None
    ) -> ValidationResult:
        """
        Validate the commit message stored in a file.

        Lines starting with ``#`` (git comments) are removed and the rest is
        trimmed before validation.

        Raises:
            FileAccessError: If the file cannot be read
            EmptyCommitMessageError: If nothing is left after stripping comments
        """
        content = safe_read_commit_file(path)

        lines = [line for line in content.split("\n") if not line.strip().startswith("#")]
        message = "\n".join(lines).strip()

        if not message:
            raise EmptyCommitMessageError(f"commit message is empty: {path}")

        return self.validate(message, cancel_event=cancel_event)

    def should_ignore(self, message: str) -> bool:
        """Check if a message matches any ignore pattern."""
        return any(pattern.search(message) for pattern in self._ignore_patterns)

    def _check_type(self, commit: Commit, result: ValidationResult) -> None:
        if commit.type and commit.type not in self._types:
            result.add(
                ValidationField.TYPE,
                f"invalid type (allowed: {', '.join(self._types)})",
                commit.type
            )

    def _check_scope(self, commit: Commit, result: ValidationResult) -> None:
        if self.config.scope_required and not commit.scope:
            result.add(ValidationField.SCOPE, "scope is required")
        elif commit.scope and self._scopes and commit.scope not in self._scopes:
            result.add(
                ValidationField.SCOPE,
                f"invalid scope (allowed: {', '.join(self._scopes)})",
                commit.scope
            )

    def _check_subject(self, commit: Commit, result: ValidationResult) -> None:
        # len() counts code points
        length = len(commit.header())
        if length > self.config.max_subject_length:
            result.add(
                ValidationField.SUBJECT,
                f"exceeds maximum length of {self.config.max_subject_length} characters",
                f"{length} characters"
            )

    def _check_breaking(self, commit: Commit, result: ValidationResult) -> None:
        if commit.breaking and not self.config.allow_breaking_changes:
            result.add(ValidationField.BREAKING, "breaking changes are not allowed")

    def _check_custom_rules(self, message: str, result: ValidationResult) -> None:
        for name, rule_message, pattern in self._custom_rules:
            if not pattern.search(message):
                result.add(ValidationField.CUSTOM, rule_message or f"failed custom rule: {name}")

    def _check_tickets(self, commit: Commit, result: ValidationResult) -> None:
        has_jira = commit.has_jira_ticket()

        if self.config.require_jira_ticket and not has_jira:
            result.add(ValidationField.TICKET, "JIRA ticket reference is required")

        if self.config.require_ticket_ref and not commit.has_ticket_refs():
            result.add(ValidationField.TICKET, "ticket reference is required")

        if self._jira_pattern is not None and has_jira:
            for ticket in commit.jira_tickets():
                if not self._jira_pattern.search(ticket.id):
                    result.add(
                        ValidationField.TICKET,
                        f"JIRA ticket '{ticket.id}' does not match required pattern",
                        ticket.id
                    )

        if self._jira_projects and has_jira:
            for ticket in commit.jira_tickets():
                project = jira_project(ticket.id)
                if not project:
                    continue
                if project not in self._jira_projects:
                    result.add(
                        ValidationField.TICKET,
                        f"JIRA project '{project}' is not allowed "
                        f"(allowed: {', '.join(self._jira_projects)})",
                        ticket.id
                    )


def validate_message(message: str, config: Optional[Config] = None) -> ValidationResult:
    """
    Validate a message and raise if it breaks any rule.

    Args:
        message: Commit message to check
        config: Rules to apply (default configuration if omitted)

    Returns:
        The (valid) ValidationResult

    Raises:
        CommitValidationError: If the message is invalid; ``result`` holds
            every violation
    """
    validator = Validator(config if config is not None else default_config())
    result = validator.validate(message)
    if not result.valid:
        raise CommitValidationError(result.error_message(), result=result)
    return result


def is_conventional_commit(message: str) -> bool:
    """
    Quick check if message follows conventional commit format.

    Args:
        message: Commit message to check

    Returns:
        True if the header parses in strict mode
    """
    try:
        Parser(strict=True).parse(message)
    except CommitParseError:
        return False
    return True
