"""Tests for yr.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from yr.core.config import (
    Config,
    GatesConfig,
    PublishConfig,
    ReleaseConfig,
    load_config,
    load_project_config,
)
from yr.core.result import Err, Ok


class TestDefaults:
    def test_release(self) -> None:
        config = ReleaseConfig()
        assert config.branches == ("main", "master")
        assert config.required_tools == ("cargo", "git")
        assert config.version_file == "Cargo.toml"
        assert config.tag_prefix == "v"

    def test_gates(self) -> None:
        config = GatesConfig()
        assert config.unit_tests == ("cargo", "test")
        assert config.doc_tests == ("cargo", "test", "--doc")
        assert config.lint[-2:] == ("-D", "warnings")
        assert config.audit_tool == "cargo-audit"

    def test_publish(self) -> None:
        assert PublishConfig().commands[0] == ("cargo", "publish")

    def test_frozen(self) -> None:
        config = ReleaseConfig()
        with pytest.raises(AttributeError):
            config.tag_prefix = "release-"  # type: ignore[misc]


class TestFromDict:
    def test_empty_dict_gives_defaults(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_partial_override(self) -> None:
        config = Config.from_dict(
            {
                "release": {"branches": ["trunk"], "tag_prefix": ""},
                "gates": {"lint": ["cargo", "clippy"]},
                "docs": {"tracked": ["readme", "contributing"]},
            }
        )
        assert config.release.branches == ("trunk",)
        assert config.release.tag_prefix == ""
        assert config.release.version_file == "Cargo.toml"
        assert config.gates.lint == ("cargo", "clippy")
        assert config.gates.unit_tests == ("cargo", "test")
        assert config.docs.tracked == ("readme", "contributing")

    def test_empty_audit_tool_disables_audit(self) -> None:
        config = Config.from_dict({"gates": {"audit_tool": ""}})
        assert config.gates.audit_tool is None

    def test_empty_publish_list(self) -> None:
        config = Config.from_dict({"publish": {"commands": []}})
        assert config.publish.commands == ()

    def test_invalid_values_fall_back(self) -> None:
        config = Config.from_dict({"release": {"branches": "main"}, "gates": {"audit": [1]}})
        assert config.release.branches == ("main", "master")
        assert config.gates.audit == ("cargo", "audit")


class TestLoadConfig:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "yr.toml"
        path.write_text(
            '[publish]\ncommands = [["cargo", "publish", "--dry-run"]]\n', encoding="utf-8"
        )

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.publish.commands == (("cargo", "publish", "--dry-run"),)

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "yr.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "yr.toml"
        path.write_text("[release\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_project_config_defaults_when_absent(self, tmp_path: Path) -> None:
        assert load_project_config(tmp_path) == Ok(Config())
