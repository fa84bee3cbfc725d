from datetime import date
from pathlib import Path

from yr.core.result import Err, Ok
from yr.release.semver import SemVer
from yr.release.version_files import (
    add_changelog_entry,
    read_version,
    render_changelog_entry,
    write_version,
)

CARGO_TOML = """\
[package]
name = "yimi-rutool"
# bumped by the release tool
version = "0.2.3"
edition = "2021"

[dependencies]
serde = { version = "1.0", features = ["derive"] }
"""

TODAY = date(2026, 3, 14)


def test_read_version(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text(CARGO_TOML, encoding="utf-8")

    assert read_version(manifest) == Ok(SemVer(0, 2, 3))


def test_read_version_ignores_dependency_versions(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nname = "x"\n\n[dependencies]\nversion = "9.9.9"\n')

    result = read_version(manifest)

    assert isinstance(result, Err)
    assert result.error.kind == "invalid_version"


def test_read_version_missing_file(tmp_path: Path) -> None:
    result = read_version(tmp_path / "Cargo.toml")

    assert isinstance(result, Err)
    assert result.error.kind == "version_file_failed"


def test_read_version_rejects_prerelease(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nversion = "1.0.0-rc.1"\n')

    result = read_version(manifest)

    assert isinstance(result, Err)
    assert "1.0.0-rc.1" in result.error.message


def test_write_version_keeps_everything_else(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text(CARGO_TOML, encoding="utf-8")

    assert write_version(manifest, SemVer(0, 3, 0)) == Ok(True)
    assert manifest.read_text(encoding="utf-8") == CARGO_TOML.replace(
        'version = "0.2.3"', 'version = "0.3.0"'
    )
    assert write_version(manifest, SemVer(0, 3, 0)) == Ok(False)


def test_write_version_reads_project_table(tmp_path: Path) -> None:
    manifest = tmp_path / "pyproject.toml"
    manifest.write_text('[project]\nname = "x"\nversion = "1.4.2"\n')

    write_version(manifest, SemVer(2, 0, 0)).unwrap()

    assert read_version(manifest) == Ok(SemVer(2, 0, 0))


def test_changelog_entry_below_unreleased() -> None:
    text = "# Changelog\n\n## [Unreleased]\n\n- new hashing API\n\n## [0.2.3] - 2026-01-02\n"

    rendered = render_changelog_entry(text, SemVer(0, 2, 4), today=TODAY)

    assert rendered == (
        "# Changelog\n\n## [Unreleased]\n\n## [0.2.4] - 2026-03-14\n\n"
        "- new hashing API\n\n## [0.2.3] - 2026-01-02\n"
    )


def test_changelog_entry_before_first_release() -> None:
    text = "# Changelog\n\n## [0.2.3] - 2026-01-02\n- fix\n"

    rendered = render_changelog_entry(text, SemVer(0, 2, 4), today=TODAY)

    assert rendered == "# Changelog\n\n## [0.2.4] - 2026-03-14\n\n## [0.2.3] - 2026-01-02\n- fix\n"


def test_changelog_entry_appended_without_headings() -> None:
    assert render_changelog_entry("# Changelog", SemVer(1, 0, 0), today=TODAY) == (
        "# Changelog\n\n## [1.0.0] - 2026-03-14\n"
    )
    assert render_changelog_entry("", SemVer(1, 0, 0), today=TODAY) == "## [1.0.0] - 2026-03-14\n"


def test_add_changelog_entry_is_idempotent(tmp_path: Path) -> None:
    changelog = tmp_path / "CHANGELOG.md"
    changelog.write_text("# Changelog\n\n## [Unreleased]\n", encoding="utf-8")

    assert add_changelog_entry(changelog, SemVer(0, 3, 0), today=TODAY) == Ok(True)
    once = changelog.read_bytes()
    assert add_changelog_entry(changelog, SemVer(0, 3, 0), today=TODAY) == Ok(False)
    assert changelog.read_bytes() == once


def test_version_with_trailing_comment(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nversion = "0.2.3" # bumped by yr\n', encoding="utf-8")

    assert read_version(manifest) == Ok(SemVer(0, 2, 3))
    write_version(manifest, SemVer(0, 2, 4)).unwrap()
    assert manifest.read_text(encoding="utf-8") == '[package]\nversion = "0.2.4" # bumped by yr\n'


def test_version_literal_string(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text("[package]\nversion = '0.2.3'\n", encoding="utf-8")

    assert read_version(manifest) == Ok(SemVer(0, 2, 3))
    write_version(manifest, SemVer(1, 0, 0)).unwrap()
    assert manifest.read_text(encoding="utf-8") == "[package]\nversion = '1.0.0'\n"


def test_version_in_crlf_manifest(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_bytes(b'[package]\r\nname = "x"\r\nversion = "0.2.3"\r\n')

    write_version(manifest, SemVer(0, 3, 0)).unwrap()

    assert manifest.read_bytes() == b'[package]\r\nname = "x"\r\nversion = "0.3.0"\r\n'


def test_mismatched_quotes_are_rejected(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text("[package]\nversion = \"0.2.3'\n", encoding="utf-8")

    result = read_version(manifest)

    assert isinstance(result, Err)
    assert result.error.kind == "invalid_version"
