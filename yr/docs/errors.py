from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class MalformedBlock:
    """A switcher open marker with no closing tag before end of document."""

    line: int
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class SourceNotFound:
    path: Path


@dataclass(frozen=True, slots=True)
class DocumentUnreadable:
    """A document exists but cannot be read or is not valid UTF-8."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class UnknownLanguage:
    code: str
    supported: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class UnknownDocType:
    doc_type: str
    # Set when the doc type is known but this language has no file for it.
    language: str | None = None


@dataclass(frozen=True, slots=True)
class PartialWriteError:
    """Temp-file write or atomic move failed; the target was not modified."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class LanguageConfigInvalid:
    path: Path
    reason: str


DocError = (
    MalformedBlock
    | SourceNotFound
    | DocumentUnreadable
    | UnknownLanguage
    | UnknownDocType
    | PartialWriteError
    | LanguageConfigInvalid
)
