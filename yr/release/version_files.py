"""Read and update the version identifier and the changelog.

The version lives in a TOML manifest (``Cargo.toml`` by default) as a bare
``version = "X.Y.Z"`` line in the ``[package]`` (or ``[project]``) table.
The file is edited textually so comments and formatting survive.

Both updates are idempotent: writing the version a file already holds, or
adding a changelog heading that already exists, changes nothing.
"""

from __future__ import annotations

import re
from datetime import date
from pathlib import Path

from yr.core.result import Err, Ok, Result
from yr.platform.files import atomic_write_text, read_text_exact
from yr.release.errors import ReleaseError
from yr.release.semver import SemVer, parse_version

__all__ = [
    "add_changelog_entry",
    "read_version",
    "render_changelog_entry",
    "render_version",
    "write_version",
]

_MANIFEST_TABLES = ("[package]", "[project]")
# Basic or literal string, optionally followed by a comment.
_VERSION_LINE_RE = re.compile(
    r"""(?m)^version[ \t]*=[ \t]*(["'])(?P<value>[^"'\r\n]+)\1[ \t]*(?:#[^\r\n]*)?\r?$"""
)
_NEXT_TABLE_RE = re.compile(r"(?m)^\[")
_UNRELEASED_RE = re.compile(r"^##\s*\[unreleased\]", re.IGNORECASE)


def _version_span(text: str, path: Path) -> Result[tuple[int, int, str], ReleaseError]:
    """Locate the version value: (start, end, raw) offsets into ``text``."""
    for table in _MANIFEST_TABLES:
        idx = text.find(table)
        if idx < 0:
            continue
        body_start = idx + len(table)
        nxt = _NEXT_TABLE_RE.search(text, body_start)
        body_end = nxt.start() if nxt else len(text)
        m = _VERSION_LINE_RE.search(text, body_start, body_end)
        if m is None:
            return Err(
                ReleaseError(
                    kind="invalid_version",
                    message=f"missing version in {table} of {path.name}",
                    hint=str(path),
                )
            )
        return Ok((m.start("value"), m.end("value"), m.group("value")))

    return Err(
        ReleaseError(
            kind="invalid_version",
            message=f"no {' or '.join(_MANIFEST_TABLES)} table in {path.name}",
            hint=str(path),
        )
    )


def _read(path: Path, *, kind: str) -> Result[str, ReleaseError]:
    try:
        return Ok(read_text_exact(path))
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            ReleaseError(
                kind="version_file_failed" if kind == "version" else "changelog_failed",
                message=f"failed to read {path.name}: {e}",
                hint=str(path),
            )
        )


def read_version(path: Path) -> Result[SemVer, ReleaseError]:
    """Read the current version from the manifest at ``path``."""
    text = _read(path, kind="version")
    if isinstance(text, Err):
        return text

    span = _version_span(text.value, path)
    if isinstance(span, Err):
        return span

    raw = span.value[2]
    version = parse_version(raw)
    if version is None:
        return Err(
            ReleaseError(
                kind="invalid_version",
                message=f"not a X.Y.Z version in {path.name}: {raw}",
                hint=str(path),
            )
        )
    return Ok(version)


def render_version(text: str, version: SemVer, *, path: Path) -> Result[str, ReleaseError]:
    """Return ``text`` with the manifest version replaced."""
    span = _version_span(text, path)
    if isinstance(span, Err):
        return span
    start, end, _ = span.value
    return Ok(text[:start] + str(version) + text[end:])


def write_version(path: Path, version: SemVer) -> Result[bool, ReleaseError]:
    """Write ``version`` into the manifest. Returns Ok(False) if already set."""
    text = _read(path, kind="version")
    if isinstance(text, Err):
        return text

    rendered = render_version(text.value, version, path=path)
    if isinstance(rendered, Err):
        return rendered
    if rendered.value == text.value:
        return Ok(False)

    try:
        atomic_write_text(path, rendered.value)
    except OSError as e:
        return Err(
            ReleaseError(
                kind="version_file_failed",
                message=f"failed to write {path.name}: {e}",
                hint=str(path),
            )
        )
    return Ok(True)


def render_changelog_entry(text: str, version: SemVer, *, today: date) -> str:
    """Add a ``## [X.Y.Z] - YYYY-MM-DD`` heading to a changelog.

    The heading goes right below ``## [Unreleased]`` (so the unreleased
    entries become the release's entries), else before the first ``## ``
    heading, else at the end.
    """
    if re.search(rf"(?m)^##\s*\[{re.escape(str(version))}\]", text):
        return text

    heading = f"## [{version}] - {today.isoformat()}\n"
    lines = text.splitlines(keepends=True)

    for i, line in enumerate(lines):
        if _UNRELEASED_RE.match(line):
            if not line.endswith("\n"):
                lines[i] = line + "\n"
            lines[i + 1 : i + 1] = ["\n", heading]
            return "".join(lines)

    for i, line in enumerate(lines):
        if line.startswith("## "):
            lines[i:i] = [heading, "\n"]
            return "".join(lines)

    if text and not text.endswith("\n"):
        text += "\n"
    return text + ("\n" if text else "") + heading


def add_changelog_entry(path: Path, version: SemVer, *, today: date) -> Result[bool, ReleaseError]:
    """Add the release heading to the changelog. Returns Ok(False) if present."""
    text = _read(path, kind="changelog")
    if isinstance(text, Err):
        return text

    rendered = render_changelog_entry(text.value, version, today=today)
    if rendered == text.value:
        return Ok(False)

    try:
        atomic_write_text(path, rendered)
    except OSError as e:
        return Err(
            ReleaseError(
                kind="changelog_failed",
                message=f"failed to write {path.name}: {e}",
                hint=str(path),
            )
        )
    return Ok(True)
