"""Typed tool configuration.

The tools read an optional ``yr.toml`` at the project root. Every key has a
default suited to a Cargo crate released from ``main``, so a repository
without ``yr.toml`` works as is. The defaults are:

    [release]
    branches = ["main", "master"]
    required_tools = ["cargo", "git"]
    version_file = "Cargo.toml"
    changelog = "CHANGELOG.md"
    tag_prefix = "v"

    [gates]
    unit_tests = ["cargo", "test"]
    doc_tests = ["cargo", "test", "--doc"]
    lint = ["cargo", "clippy", "--all-targets", "--all-features", "--", "-D", "warnings"]
    audit = ["cargo", "audit"]
    audit_tool = "cargo-audit"

    [publish]
    commands = [["cargo", "publish"], ["git", "push"], ["git", "push", "--tags"]]

    [docs]
    language_config = "docs/language-config.json"
    tracked = ["readme", "changelog"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import (
    StrDict,
    as_str_dict,
    get_command,
    get_command_list,
    get_str,
    get_str_list,
    get_table,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "Config",
    "ConfigError",
    "DocsConfig",
    "GatesConfig",
    "PublishConfig",
    "ReleaseConfig",
    "load_config",
    "load_project_config",
]

CONFIG_FILE_NAME = "yr.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Release prerequisites and version resources."""

    branches: tuple[str, ...] = ("main", "master")
    required_tools: tuple[str, ...] = ("cargo", "git")
    version_file: str = "Cargo.toml"
    changelog: str = "CHANGELOG.md"
    tag_prefix: str = "v"


@dataclass(frozen=True, slots=True)
class GatesConfig:
    """Commands for each quality gate, in execution order."""

    unit_tests: tuple[str, ...] = ("cargo", "test")
    doc_tests: tuple[str, ...] = ("cargo", "test", "--doc")
    lint: tuple[str, ...] = (
        "cargo",
        "clippy",
        "--all-targets",
        "--all-features",
        "--",
        "-D",
        "warnings",
    )
    audit: tuple[str, ...] = ("cargo", "audit")
    # The audit gate is skipped (with a warning) when this is not on PATH.
    audit_tool: str | None = "cargo-audit"


@dataclass(frozen=True, slots=True)
class PublishConfig:
    """Commands run after the release tag has been created."""

    commands: tuple[tuple[str, ...], ...] = (
        ("cargo", "publish"),
        ("git", "push"),
        ("git", "push", "--tags"),
    )


@dataclass(frozen=True, slots=True)
class DocsConfig:
    """Bilingual documentation settings."""

    language_config: str = "docs/language-config.json"
    tracked: tuple[str, ...] = ("readme", "changelog")


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    release: ReleaseConfig = field(default_factory=ReleaseConfig)
    gates: GatesConfig = field(default_factory=GatesConfig)
    publish: PublishConfig = field(default_factory=PublishConfig)
    docs: DocsConfig = field(default_factory=DocsConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML, falling back to defaults per key."""
        release: StrDict = get_table(data, "release") or {}
        gates: StrDict = get_table(data, "gates") or {}
        publish: StrDict = get_table(data, "publish") or {}
        docs: StrDict = get_table(data, "docs") or {}

        rd = ReleaseConfig()
        gd = GatesConfig()
        pd = PublishConfig()
        dd = DocsConfig()

        audit_tool: str | None = gd.audit_tool
        if "audit_tool" in gates:
            # An explicit empty string disables the PATH lookup.
            audit_tool = get_str(gates, "audit_tool")

        publish_commands = get_command_list(publish, "commands")

        return cls(
            release=ReleaseConfig(
                branches=_str_tuple(release, "branches") or rd.branches,
                required_tools=_str_tuple(release, "required_tools") or rd.required_tools,
                version_file=get_str(release, "version_file") or rd.version_file,
                changelog=get_str(release, "changelog") or rd.changelog,
                tag_prefix=_tag_prefix(release, rd.tag_prefix),
            ),
            gates=GatesConfig(
                unit_tests=get_command(gates, "unit_tests") or gd.unit_tests,
                doc_tests=get_command(gates, "doc_tests") or gd.doc_tests,
                lint=get_command(gates, "lint") or gd.lint,
                audit=get_command(gates, "audit") or gd.audit,
                audit_tool=audit_tool,
            ),
            publish=PublishConfig(
                commands=publish_commands if publish_commands is not None else pd.commands,
            ),
            docs=DocsConfig(
                language_config=get_str(docs, "language_config") or dd.language_config,
                tracked=_str_tuple(docs, "tracked") or dd.tracked,
            ),
        )


def _str_tuple(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    items = get_str_list(table, key)
    if not items:
        return None
    return tuple(items)


def _tag_prefix(table: Mapping[str, object], default: str) -> str:
    value = table.get("tag_prefix")
    if isinstance(value, str):
        return value.strip()
    return default


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to yr.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    match _parse_toml(path):
        case Err(e):
            return Err(e)
        case Ok(data):
            return Ok(Config.from_dict(data))


def load_project_config(root: Path) -> Result[Config, ConfigError]:
    """Load ``yr.toml`` from a project root, or defaults when it is absent."""
    path = root / CONFIG_FILE_NAME
    if not path.exists():
        return Ok(Config())
    return load_config(path)
