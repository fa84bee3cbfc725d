"""Keep per-language documents structurally in sync.

``DocsService.sync`` copies one language's document body into another
language's file, replacing the switcher. It is one-directional and
overwrites the target unconditionally: commit or back up the target first.

``DocsService.update_switchers`` regenerates switchers in place and is
idempotent; a second run writes nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from yr.core.checks import CheckResult
from yr.core.result import Err, Ok, Result
from yr.docs.block import locate_block, replace_block, strip_block
from yr.docs.errors import DocError, DocumentUnreadable, PartialWriteError, SourceNotFound
from yr.docs.languages import DocType, LanguageConfig
from yr.docs.switcher import render_switcher
from yr.output.console import ConsoleProtocol
from yr.platform.files import atomic_write_text, read_text_exact

__all__ = ["DocsService", "SwitcherUpdateReport", "SyncResult", "compose_document"]


@dataclass(frozen=True, slots=True)
class SyncResult:
    source: Path
    target: Path
    doc_type: DocType


def _empty_paths() -> list[Path]:
    return []


@dataclass
class SwitcherUpdateReport:
    updated: list[Path] = field(default_factory=_empty_paths)
    unchanged: list[Path] = field(default_factory=_empty_paths)
    without_switcher: list[Path] = field(default_factory=_empty_paths)
    skipped: list[Path] = field(default_factory=_empty_paths)


def compose_document(switcher: str, body: str, newline: str = "\n") -> str:
    """Join a switcher and a stripped body with exactly one blank line.

    The switcher and the separator use ``newline`` so a CRLF body stays CRLF.
    """
    lines = body.splitlines(keepends=True)
    while lines and not lines[0].strip():
        lines.pop(0)
    if newline != "\n":
        switcher = switcher.replace("\n", newline)
    return switcher + newline * 2 + "".join(lines)


def _newline_of(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


class DocsService:
    """Switcher regeneration, sync and file checks for one project."""

    def __init__(
        self,
        *,
        config: LanguageConfig,
        root: Path,
        console: ConsoleProtocol,
    ) -> None:
        self._config = config
        self._root = root
        self._console = console

    def sync(self, source: str, target: str, doc_type: DocType) -> Result[SyncResult, DocError]:
        """Copy ``source``'s body into ``target`` with a fresh target switcher.

        All lookups and parsing happen before the write, so any error leaves
        the target file untouched.
        """
        source_file = self._config.file_for(source, doc_type)
        if isinstance(source_file, Err):
            return source_file
        target_file = self._config.file_for(target, doc_type)
        if isinstance(target_file, Err):
            return target_file

        source_path = self._root / source_file.value
        target_path = self._root / target_file.value
        if not source_path.is_file():
            return Err(SourceNotFound(path=source_path))

        self._console.info(f"Syncing {doc_type} from {source} to {target}")

        try:
            text = read_text_exact(source_path)
        except (OSError, UnicodeDecodeError) as e:
            return Err(DocumentUnreadable(path=source_path, reason=str(e)))

        body = strip_block(text, path=source_path)
        if isinstance(body, Err):
            return body

        switcher = render_switcher(self._config, target, doc_type)
        if isinstance(switcher, Err):
            return switcher

        document = compose_document(switcher.value, body.value, _newline_of(text))
        written = self._write(target_path, document)
        if isinstance(written, Err):
            return written

        self._console.success(f"Synced {doc_type} to {target_file.value}")
        return Ok(SyncResult(source=source_path, target=target_path, doc_type=doc_type))

    def update_switchers(
        self, doc_types: tuple[DocType, ...]
    ) -> Result[SwitcherUpdateReport, DocError]:
        """Regenerate switchers for every supported language x ``doc_types``.

        Missing files are skipped with a warning. Files without a switcher
        are left alone.
        """
        report = SwitcherUpdateReport()

        for code in self._config.supported_languages:
            for doc_type in doc_types:
                file_name = self._config.file_for(code, doc_type)
                if isinstance(file_name, Err):
                    return file_name

                path = self._root / file_name.value
                if not path.is_file():
                    self._console.warning(f"File {file_name.value} does not exist, skipping...")
                    report.skipped.append(path)
                    continue

                switcher = render_switcher(self._config, code, doc_type)
                if isinstance(switcher, Err):
                    return switcher

                try:
                    text = read_text_exact(path)
                except (OSError, UnicodeDecodeError) as e:
                    return Err(DocumentUnreadable(path=path, reason=str(e)))

                updated = replace_block(text, switcher.value, path=path)
                if isinstance(updated, Err):
                    return updated

                if updated.value == text:
                    if locate_block(text, path=path).unwrap_or(None) is None:
                        report.without_switcher.append(path)
                        self._console.info(f"No language switcher in {file_name.value}")
                    else:
                        report.unchanged.append(path)
                    continue

                written = self._write(path, updated.value)
                if isinstance(written, Err):
                    return written
                report.updated.append(path)
                self._console.success(f"Updated language switcher in {file_name.value}")

        return Ok(report)

    def check_files(self) -> list[CheckResult]:
        """Check every supported language x doc type file exists on disk."""
        results: list[CheckResult] = []
        for entry in self._config.supported_entries():
            for doc_type in DocType:
                file_name = entry.file_for(doc_type)
                name = f"{entry.code}/{doc_type}"
                if file_name is None:
                    results.append(CheckResult.warning(name, "not configured"))
                elif (self._root / file_name).is_file():
                    results.append(CheckResult.success(name, file_name))
                else:
                    hint = None
                    if entry.code != self._config.default_language:
                        default = self._config.default_language
                        hint = f"yr lang sync {default} {entry.code} {doc_type}"
                    results.append(CheckResult.error(name, f"missing: {file_name}", hint=hint))
        return results

    def _write(self, path: Path, content: str) -> Result[None, PartialWriteError]:
        try:
            atomic_write_text(path, content)
        except OSError as e:
            return Err(PartialWriteError(path=path, reason=str(e)))
        return Ok(None)
