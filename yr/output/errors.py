"""Error presentation utilities.

Centralized error formatting and exit code mapping for both tools.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yr.core.errors import ErrorCode
from yr.docs.errors import (
    DocError,
    DocumentUnreadable,
    LanguageConfigInvalid,
    MalformedBlock,
    PartialWriteError,
    SourceNotFound,
    UnknownDocType,
    UnknownLanguage,
)
from yr.docs.languages import DocType
from yr.output.console import Style
from yr.release.errors import ReleaseError

if TYPE_CHECKING:
    from yr.output.console import ConsoleProtocol

__all__ = [
    "doc_error_exit_code",
    "print_doc_error",
    "print_release_error",
    "release_error_exit_code",
]


def print_doc_error(error: DocError, console: ConsoleProtocol) -> None:
    """Print a documentation error with a hint where one helps."""
    match error:
        case MalformedBlock(line=line, path=path):
            where = f"{path}:{line}" if path else f"line {line}"
            console.error(f"Language switcher opened at {where} is never closed")
            console.print("hint: add the closing </div> line or remove the block", Style.DIM)
        case SourceNotFound(path=path):
            console.error(f"Source file {path} does not exist")
        case DocumentUnreadable(path=path, reason=reason):
            console.error(f"Cannot read {path}: {reason}")
        case UnknownLanguage(code=code, supported=supported):
            console.error(f"Unknown language: {code}")
            console.print(f"supported: {', '.join(supported)}", Style.DIM)
        case UnknownDocType(doc_type=doc_type, language=None):
            console.error(f"Unknown document type: {doc_type}")
            console.print(f"known: {', '.join(t.value for t in DocType)}", Style.DIM)
        case UnknownDocType(doc_type=doc_type, language=language):
            console.error(f"No {doc_type} file configured for language {language}")
        case PartialWriteError(path=path, reason=reason):
            console.error(f"Failed to write {path}: {reason}")
            console.print("the file was left unchanged", Style.DIM)
        case LanguageConfigInvalid(path=path, reason=reason):
            console.error(f"Invalid language configuration {path}: {reason}")


def doc_error_exit_code(error: DocError) -> int:
    match error:
        case MalformedBlock():
            return int(ErrorCode.DOCUMENT_ERROR)
        case SourceNotFound() | UnknownLanguage() | UnknownDocType() | LanguageConfigInvalid():
            return int(ErrorCode.USER_ERROR)
        case DocumentUnreadable() | PartialWriteError():
            return int(ErrorCode.IO_ERROR)


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print a release error naming the stage that failed."""
    console.error(error.message)
    if error.stage:
        console.print(f"aborted at: {error.stage}", Style.DIM)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    match error.kind:
        case "missing_tool" | "not_a_repository" | "dirty_working_tree" | "wrong_branch":
            return int(ErrorCode.ENV_ERROR)
        case "gate_failed":
            return int(ErrorCode.GATE_ERROR)
        case "invalid_version":
            return int(ErrorCode.USER_ERROR)
        case "version_file_failed" | "changelog_failed" | "tag_failed" | "publish_failed":
            return int(ErrorCode.IO_ERROR)
