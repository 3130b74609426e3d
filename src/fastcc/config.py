"""
Configuration for fast-cc-hooks.

Rules are read from a YAML file (``.fast-cc-hooks.yaml`` by default). Keys
that are missing keep their defaults, so an empty file gives the default rule
set. The file location can be overridden with the FASTCC_CONFIG environment
variable.

Example:

    types: [feat, fix, docs, chore]
    scopes: [api, cli]
    scope_required: false
    max_subject_length: 72
    allow_breaking_changes: true
    custom_rules:
      - name: no-wip
        pattern: "^(?!.*WIP)"
        message: "WIP commits are not allowed"
    ignore_patterns: ["^Merge branch"]
    require_jira_ticket: false
    require_ticket_ref: false
    jira_ticket_pattern: "^[A-Z]+-[0-9]+$"
    jira_projects: [PROJ]
"""

import logging
import os
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, IO, List, Optional, Union

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".fast-cc-hooks.yaml"
DEFAULT_MAX_SUBJECT_LENGTH = 72
CONFIG_ENV_VAR = "FASTCC_CONFIG"


class CommitType(Enum):
    """Standard conventional commit types."""

    FEAT = "feat"        # New feature
    FIX = "fix"          # Bug fix
    DOCS = "docs"        # Documentation only changes
    STYLE = "style"      # Code style/formatting (no logic change)
    REFACTOR = "refactor"  # Code restructuring (no behavior change)
    TEST = "test"        # Adding or updating tests
    CHORE = "chore"      # Maintenance tasks, dependencies
    PERF = "perf"        # Performance improvements
    CI = "ci"            # CI/CD configuration changes
    BUILD = "build"      # Build system or external dependencies
    REVERT = "revert"    # Reverting previous commits


def default_types() -> List[str]:
    """The standard conventional commit types."""
    return [commit_type.value for commit_type in CommitType]


@dataclass
class CustomRule:
    """A named regular expression every commit message must match."""
    name: str
    pattern: str
    message: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "pattern": self.pattern, "message": self.message}


@dataclass
class Config:
    """Validation rules applied to commit messages."""

    types: List[str] = field(default_factory=default_types)
    scopes: List[str] = field(default_factory=list)  # empty means any scope
    scope_required: bool = False
    max_subject_length: int = DEFAULT_MAX_SUBJECT_LENGTH
    allow_breaking_changes: bool = True
    custom_rules: List[CustomRule] = field(default_factory=list)
    ignore_patterns: List[str] = field(default_factory=list)

    # Ticket reference validation
    require_jira_ticket: bool = False
    require_ticket_ref: bool = False
    jira_ticket_pattern: str = ""
    jira_projects: List[str] = field(default_factory=list)

    def validate(self) -> None:
        """
        Check that the configuration is usable.

        Raises:
            ConfigError: If no types are defined, the subject length is not
                positive or a custom rule lacks a name or pattern
        """
        if not self.types:
            raise ConfigError("at least one commit type must be defined")

        if self.max_subject_length <= 0:
            raise ConfigError("max_subject_length must be positive")

        for i, rule in enumerate(self.custom_rules):
            if not rule.name:
                raise ConfigError(f"custom rule {i}: name is required")
            if not rule.pattern:
                raise ConfigError(f"custom rule {rule.name}: pattern is required")

    def to_dict(self) -> Dict[str, Any]:
        """Mapping in the YAML file layout."""
        data: Dict[str, Any] = {
            "types": list(self.types),
            "scope_required": self.scope_required,
            "max_subject_length": self.max_subject_length,
            "allow_breaking_changes": self.allow_breaking_changes,
            "require_jira_ticket": self.require_jira_ticket,
            "require_ticket_ref": self.require_ticket_ref,
        }
        # Optional keys are left out when empty
        if self.scopes:
            data["scopes"] = list(self.scopes)
        if self.custom_rules:
            data["custom_rules"] = [rule.to_dict() for rule in self.custom_rules]
        if self.ignore_patterns:
            data["ignore_patterns"] = list(self.ignore_patterns)
        if self.jira_ticket_pattern:
            data["jira_ticket_pattern"] = self.jira_ticket_pattern
        if self.jira_projects:
            data["jira_projects"] = list(self.jira_projects)
        return data


def default_config() -> Config:
    """Return a fresh default configuration."""
    return Config()


_LIST_KEYS = {"types", "scopes", "ignore_patterns", "jira_projects"}
_BOOL_KEYS = {"scope_required", "allow_breaking_changes", "require_jira_ticket", "require_ticket_ref"}


def _string_list(key: str, value: Any) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key} must be a list of strings")
    return list(value)


def _custom_rules(value: Any) -> List[CustomRule]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("custom_rules must be a list")

    rules = []
    for i, item in enumerate(value):
        if not isinstance(item, dict):
            raise ConfigError(f"custom rule {i}: must be a mapping")
        unknown = set(item) - {"name", "pattern", "message"}
        if unknown:
            raise ConfigError(f"custom rule {i}: unknown keys: {', '.join(sorted(unknown))}")
        rules.append(CustomRule(
            name=str(item.get("name") or ""),
            pattern=str(item.get("pattern") or ""),
            message=str(item.get("message") or "")
        ))
    return rules


def config_from_dict(data: Dict[str, Any]) -> Config:
    """
    Build a Config from a mapping, starting from the defaults.

    Raises:
        ConfigError: On unknown keys, wrongly typed values or invalid rules
    """
    known = {f.name for f in fields(Config)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(sorted(unknown))}")

    config = default_config()
    for key, value in data.items():
        if key in _LIST_KEYS:
            setattr(config, key, _string_list(key, value))
        elif key in _BOOL_KEYS:
            if not isinstance(value, bool):
                raise ConfigError(f"{key} must be true or false")
            setattr(config, key, value)
        elif key == "max_subject_length":
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError("max_subject_length must be an integer")
            config.max_subject_length = value
        elif key == "jira_ticket_pattern":
            if value is not None and not isinstance(value, str):
                raise ConfigError("jira_ticket_pattern must be a string")
            config.jira_ticket_pattern = value or ""
        elif key == "custom_rules":
            config.custom_rules = _custom_rules(value)

    config.validate()
    return config


def parse_config(source: Union[str, IO[str]]) -> Config:
    """
    Parse YAML configuration text or stream.

    Args:
        source: YAML document as a string or open text stream

    Returns:
        Validated Config

    Raises:
        ConfigError: If the YAML is malformed or the configuration is invalid
    """
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise ConfigError("parsing config", cause=e)

    if data is None:
        return default_config()

    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping")

    return config_from_dict(data)


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Explicit path, then FASTCC_CONFIG, then DEFAULT_CONFIG_FILE."""
    if path:
        return Path(path)
    return Path(os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE)


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration from a YAML file.

    A missing file is not an error: the default configuration is returned.

    Args:
        path: Config file; see resolve_config_path for the fallbacks

    Returns:
        Validated Config

    Raises:
        ConfigError: If the file cannot be read or is invalid
    """
    config_path = resolve_config_path(path)

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return default_config()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = parse_config(f)
    except OSError as e:
        raise ConfigError(f"opening config file {config_path}", cause=e)
    except UnicodeDecodeError as e:
        raise ConfigError(f"reading config file {config_path}", cause=e)
    except ConfigError as e:
        raise e.with_context("path", str(config_path))

    logger.info(f"Loaded config from {config_path}")
    return config


def save_config(config: Config, path: Optional[Union[str, Path]] = None) -> Path:
    """
    Write configuration to a YAML file, creating parent directories.

    Returns:
        The path written

    Raises:
        ConfigError: If the file cannot be written
    """
    config_path = resolve_config_path(path)

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(config.to_dict(), f, indent=2, sort_keys=False, default_flow_style=False)
    except OSError as e:
        raise ConfigError(f"writing config file {config_path}", cause=e)

    logger.info(f"Saved config to {config_path}")
    return config_path
