"""
Tests for configuration defaults, parsing, loading and saving.
"""

import io

import pytest

from fastcc.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILE,
    CommitType,
    Config,
    CustomRule,
    config_from_dict,
    default_config,
    load_config,
    parse_config,
    save_config
)
from fastcc.errors import ConfigError


FULL_CONFIG = """
types: [feat, fix, docs]
scopes: [api, cli]
scope_required: true
max_subject_length: 50
allow_breaking_changes: false
custom_rules:
  - name: no-wip
    pattern: "^(?!.*WIP)"
    message: WIP commits are not allowed
  - name: signed
    pattern: "Signed-off-by:"
ignore_patterns:
  - "^Merge branch"
require_jira_ticket: true
require_ticket_ref: true
jira_ticket_pattern: "^[A-Z]+-[0-9]+$"
jira_projects: [PROJ, OPS]
"""


class TestDefaults:
    def test_default_values(self):
        config = default_config()

        assert config.types == [t.value for t in CommitType]
        assert "feat" in config.types and "revert" in config.types
        assert len(config.types) == 11
        assert config.scopes == []
        assert config.scope_required is False
        assert config.max_subject_length == 72
        assert config.allow_breaking_changes is True
        assert config.custom_rules == []
        assert config.ignore_patterns == []
        assert config.require_jira_ticket is False
        assert config.require_ticket_ref is False
        assert config.jira_ticket_pattern == ""
        assert config.jira_projects == []

    def test_defaults_are_not_shared(self):
        first = default_config()
        first.types.append("wip")

        assert "wip" not in default_config().types


class TestValidate:
    def test_types_required(self):
        with pytest.raises(ConfigError, match="at least one commit type"):
            Config(types=[]).validate()

    @pytest.mark.parametrize("length", [0, -5])
    def test_subject_length_positive(self, length):
        with pytest.raises(ConfigError, match="max_subject_length must be positive"):
            Config(max_subject_length=length).validate()

    def test_rule_name_required(self):
        with pytest.raises(ConfigError, match="custom rule 0: name is required"):
            Config(custom_rules=[CustomRule(name="", pattern="x")]).validate()

    def test_rule_pattern_required(self):
        with pytest.raises(ConfigError, match="custom rule tag: pattern is required"):
            Config(custom_rules=[CustomRule(name="tag", pattern="")]).validate()


class TestParse:
    def test_full_config(self):
        config = parse_config(FULL_CONFIG)

        assert config.types == ["feat", "fix", "docs"]
        assert config.scopes == ["api", "cli"]
        assert config.scope_required is True
        assert config.max_subject_length == 50
        assert config.allow_breaking_changes is False
        assert config.custom_rules == [
            CustomRule(name="no-wip", pattern="^(?!.*WIP)", message="WIP commits are not allowed"),
            CustomRule(name="signed", pattern="Signed-off-by:", message=""),
        ]
        assert config.ignore_patterns == ["^Merge branch"]
        assert config.require_jira_ticket is True
        assert config.require_ticket_ref is True
        assert config.jira_ticket_pattern == "^[A-Z]+-[0-9]+$"
        assert config.jira_projects == ["PROJ", "OPS"]

    def test_stream_input(self):
        config = parse_config(io.StringIO("max_subject_length: 100\n"))

        assert config.max_subject_length == 100
        assert config.types == default_config().types

    @pytest.mark.parametrize("text", ["", "# only a comment\n"])
    def test_empty_document_gives_defaults(self, text):
        assert parse_config(text) == default_config()

    def test_malformed_yaml(self):
        with pytest.raises(ConfigError, match="parsing config"):
            parse_config("types: [feat\n")

    def test_document_must_be_mapping(self):
        with pytest.raises(ConfigError, match="must be a mapping"):
            parse_config("- feat\n- fix\n")

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="unknown configuration keys: colour"):
            parse_config("colour: blue\n")

    @pytest.mark.parametrize("text, message", [
        ("types: feat\n", "types must be a list of strings"),
        ("scope_required: maybe\n", "scope_required must be true or false"),
        ("max_subject_length: long\n", "max_subject_length must be an integer"),
        ("max_subject_length: true\n", "max_subject_length must be an integer"),
        ("custom_rules: {name: x}\n", "custom_rules must be a list"),
        ("custom_rules: [x]\n", "custom rule 0: must be a mapping"),
        ("custom_rules: [{name: x, pattern: y, level: 2}]\n", "unknown keys: level"),
        ("jira_ticket_pattern: [1]\n", "jira_ticket_pattern must be a string"),
    ])
    def test_wrong_shapes(self, text, message):
        with pytest.raises(ConfigError, match=message):
            parse_config(text)

    def test_parsed_config_is_validated(self):
        with pytest.raises(ConfigError, match="at least one commit type"):
            parse_config("types: []\n")

    def test_null_lists_become_empty(self):
        config = config_from_dict({"scopes": None, "jira_projects": None})

        assert config.scopes == []
        assert config.jira_projects == []


class TestLoadAndSave:
    def test_missing_file_gives_defaults(self, isolated_cwd):
        assert load_config() == default_config()
        assert load_config(isolated_cwd / "nope.yaml") == default_config()

    def test_default_file_in_cwd(self, isolated_cwd):
        (isolated_cwd / DEFAULT_CONFIG_FILE).write_text("types: [feat]\n", encoding="utf-8")

        assert load_config().types == ["feat"]

    def test_env_var_overrides_default_file(self, isolated_cwd, monkeypatch):
        custom = isolated_cwd / "hooks.yaml"
        custom.write_text("types: [fix]\n", encoding="utf-8")
        (isolated_cwd / DEFAULT_CONFIG_FILE).write_text("types: [feat]\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))

        assert load_config().types == ["fix"]

    def test_invalid_file_error_carries_path(self, isolated_cwd):
        path = isolated_cwd / DEFAULT_CONFIG_FILE
        path.write_text("max_subject_length: 0\n", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config()

        assert exc_info.value.context["path"] == DEFAULT_CONFIG_FILE

    def test_non_utf8_file_is_a_config_error(self, isolated_cwd):
        (isolated_cwd / DEFAULT_CONFIG_FILE).write_bytes(b"types: [caf\xe9]\n")

        with pytest.raises(ConfigError, match="reading config file"):
            load_config()

    def test_save_and_load_round_trip(self, isolated_cwd):
        config = parse_config(FULL_CONFIG)
        path = isolated_cwd / "nested" / "dir" / "config.yaml"

        written = save_config(config, path)

        assert written == path
        assert load_config(path) == config

    def test_saved_file_omits_empty_optional_keys(self, isolated_cwd):
        path = save_config(default_config(), isolated_cwd / "c.yaml")
        text = path.read_text(encoding="utf-8")

        assert "types:" in text
        assert "max_subject_length: 72" in text
        assert "scopes" not in text
        assert "custom_rules" not in text
