"""Tests for policy file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from satpam.config import Policy, load_policy, parse_token_lines, policy_from_mapping
from satpam.core.abilities import AbilitiesOptions
from satpam.exceptions import ConfigError, InvalidTokenError


class TestParseTokenLines:

    def test_skips_blanks_and_comments(self) -> None:
        lines = ["# heading", "", "  app/list:read  ", "   # indented comment", "app/a:x"]
        assert parse_token_lines(lines) == ("app/list:read", "app/a:x")


class TestLoadPolicy:

    def test_text_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tokens.txt"
        path.write_text("# abilities\n@/home:read\n\n@/home:write\n")
        policy = load_policy(path)
        assert policy.options == AbilitiesOptions()
        assert policy.tokens == ("@/home:read", "@/home:write")

    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "policy.yaml"
        path.write_text(
            "root: app\n"
            "default_actions: [view]\n"
            "ignore_invalid_token: true\n"
            "abilities:\n"
            "  - app/list:read\n"
            "  - outside/app/login:signin\n"
        )
        policy = load_policy(path)
        assert policy.options.root == "app"
        assert policy.options.default_actions == ("view",)
        assert policy.options.ignore_invalid_token is True
        assert len(policy.tokens) == 2

    def test_quoted_boolean_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "policy.yaml"
        path.write_text('ignore_invalid_token: "false"\n')
        with pytest.raises(ConfigError, match="ignore_invalid_token"):
            load_policy(path)

    def test_empty_yaml_is_default_policy(self, tmp_path: Path) -> None:
        path = tmp_path / "policy.yml"
        path.write_text("")
        assert load_policy(path) == Policy()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="cannot read"):
            load_policy(tmp_path / "absent.yaml")

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "policy.yaml"
        path.write_text("root: [unclosed\n")
        with pytest.raises(ConfigError, match="malformed YAML"):
            load_policy(path)


class TestPolicyFromMapping:

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ConfigError):
            policy_from_mapping(["app/list:read"])

    def test_abilities_must_be_strings(self) -> None:
        with pytest.raises(ConfigError, match="abilities"):
            policy_from_mapping({"abilities": [{"app": "read"}]})

    def test_unknown_option(self) -> None:
        with pytest.raises(ConfigError, match="unknown"):
            policy_from_mapping({"roots": "app"})

    def test_invalid_option_value(self) -> None:
        with pytest.raises(ConfigError):
            policy_from_mapping({"root": ""})


class TestPolicy:

    def test_build(self) -> None:
        policy = Policy(AbilitiesOptions(root="app"), ("app/list:read", "outside/app/login:signin"))
        store = policy.build()
        assert store.count == 2
        assert store.exist("app/login")

    def test_build_strict_raises(self) -> None:
        policy = Policy(AbilitiesOptions(root="app"), ("outside/login:signin",))
        with pytest.raises(InvalidTokenError):
            policy.build()

    def test_overrides(self) -> None:
        policy = Policy().with_overrides(root="app", ignore_invalid_token=True)
        assert policy.options.root == "app"
        assert policy.options.ignore_invalid_token is True
        assert policy.options.default_actions == ("read", "write", "delete")

    def test_no_overrides_returns_same_policy(self) -> None:
        policy = Policy()
        assert policy.with_overrides() is policy

    def test_invalid_override(self) -> None:
        with pytest.raises(ConfigError):
            Policy().with_overrides(root="a/b")
