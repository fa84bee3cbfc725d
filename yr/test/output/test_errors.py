from __future__ import annotations

from pathlib import Path

import pytest

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
from yr.output.console import MockConsole
from yr.output.errors import (
    doc_error_exit_code,
    print_doc_error,
    print_release_error,
    release_error_exit_code,
)
from yr.release.errors import ReleaseError, ReleaseErrorKind


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (MalformedBlock(line=3), ErrorCode.DOCUMENT_ERROR),
        (SourceNotFound(path=Path("README.md")), ErrorCode.USER_ERROR),
        (UnknownLanguage(code="ja", supported=("zh", "en")), ErrorCode.USER_ERROR),
        (UnknownDocType(doc_type="faq"), ErrorCode.USER_ERROR),
        (LanguageConfigInvalid(path=Path("c.json"), reason="x"), ErrorCode.USER_ERROR),
        (PartialWriteError(path=Path("README.en.md"), reason="disk full"), ErrorCode.IO_ERROR),
        (DocumentUnreadable(path=Path("README.md"), reason="bad utf-8"), ErrorCode.IO_ERROR),
    ],
)
def test_doc_error_exit_codes(error: DocError, code: ErrorCode) -> None:
    assert doc_error_exit_code(error) == code


@pytest.mark.parametrize(
    ("kind", "code"),
    [
        ("missing_tool", ErrorCode.ENV_ERROR),
        ("dirty_working_tree", ErrorCode.ENV_ERROR),
        ("wrong_branch", ErrorCode.ENV_ERROR),
        ("gate_failed", ErrorCode.GATE_ERROR),
        ("invalid_version", ErrorCode.USER_ERROR),
        ("publish_failed", ErrorCode.IO_ERROR),
    ],
)
def test_release_error_exit_codes(kind: ReleaseErrorKind, code: ErrorCode) -> None:
    assert release_error_exit_code(ReleaseError(kind=kind, message="m")) == code


def test_malformed_block_message_names_location() -> None:
    console = MockConsole()

    print_doc_error(MalformedBlock(line=12, path=Path("README.md")), console)

    assert console.has_error()
    assert console.find("README.md:12")


def test_unknown_language_lists_supported() -> None:
    console = MockConsole()

    print_doc_error(UnknownLanguage(code="ja", supported=("zh", "en")), console)

    assert console.messages == ["Unknown language: ja", "supported: zh, en"]


def test_unmapped_doc_type_names_language() -> None:
    console = MockConsole()

    print_doc_error(UnknownDocType(doc_type="contributing", language="en"), console)

    assert console.messages == ["No contributing file configured for language en"]


def test_release_error_shows_stage_and_hint() -> None:
    console = MockConsole()
    error = ReleaseError(
        kind="gate_failed",
        message="Lint failed (exit 1)",
        hint="cargo clippy",
        stage="lint",
    )

    print_release_error(error, console)

    assert console.messages == ["Lint failed (exit 1)", "aborted at: lint", "hint: cargo clippy"]


def test_unreadable_document_is_not_reported_as_missing() -> None:
    console = MockConsole()

    print_doc_error(DocumentUnreadable(path=Path("README.md"), reason="permission denied"), console)

    assert console.messages == ["Cannot read README.md: permission denied"]
