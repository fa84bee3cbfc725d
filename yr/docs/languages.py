"""Language configuration for the bilingual documentation.

The configuration lives in ``docs/language-config.json``:

    {
      "default_language": "zh",
      "supported_languages": ["zh", "en"],
      "languages": {
        "zh": {"name": "中文", "readme": "README.md", "changelog": "CHANGELOG.md"},
        "en": {"name": "English", "readme": "README.en.md", "changelog": "CHANGELOG.en.md"}
      }
    }

It is loaded once per invocation into an immutable ``LanguageConfig`` that is
passed explicitly to the switcher generator and the sync service.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType

from yr.core.result import Err, Ok, Result
from yr.core.structured import StrDict, as_str_dict, get_str, get_str_list, get_table
from yr.docs.errors import LanguageConfigInvalid, UnknownDocType, UnknownLanguage

__all__ = [
    "DocType",
    "LanguageConfig",
    "LanguageEntry",
    "language_config_from_dict",
    "load_language_config",
    "parse_doc_type",
]


class DocType(StrEnum):
    """Kinds of documents kept in every supported language."""

    README = "readme"
    CHANGELOG = "changelog"
    CONTRIBUTING = "contributing"
    BRANCH_STRATEGY = "branch_strategy"
    RELEASE_CHECKLIST = "release_checklist"
    VERSION_MANAGEMENT = "version_management"


def parse_doc_type(value: str) -> Result[DocType, UnknownDocType]:
    """Parse a doc type name as typed on the command line."""
    normalized = value.strip().lower().replace("-", "_")
    try:
        return Ok(DocType(normalized))
    except ValueError:
        return Err(UnknownDocType(doc_type=value))


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    """One documentation language.

    Attributes:
        code: Language code (e.g. "zh", "en")
        name: Display name used in the switcher (e.g. "中文")
        files: Project-relative file name per doc type
    """

    code: str
    name: str
    files: Mapping[DocType, str]

    def file_for(self, doc_type: DocType) -> str | None:
        return self.files.get(doc_type)


@dataclass(frozen=True, slots=True)
class LanguageConfig:
    """Immutable language configuration.

    Invariants (checked by the loader): codes are unique, every supported
    code has an entry, and ``default_language`` is supported. The order of
    ``supported_languages`` is the switcher rendering order.
    """

    entries: tuple[LanguageEntry, ...]
    default_language: str
    supported_languages: tuple[str, ...]

    def entry(self, code: str) -> LanguageEntry | None:
        for entry in self.entries:
            if entry.code == code:
                return entry
        return None

    def require_supported(self, code: str) -> Result[LanguageEntry, UnknownLanguage]:
        entry = self.entry(code)
        if code not in self.supported_languages or entry is None:
            return Err(UnknownLanguage(code=code, supported=self.supported_languages))
        return Ok(entry)

    def file_for(self, code: str, doc_type: DocType) -> Result[str, UnknownLanguage | UnknownDocType]:
        """Resolve the file name of ``doc_type`` in language ``code``."""
        match self.require_supported(code):
            case Err(e):
                return Err(e)
            case Ok(entry):
                file_name = entry.file_for(doc_type)
                if file_name is None:
                    return Err(UnknownDocType(doc_type=str(doc_type), language=code))
                return Ok(file_name)

    def supported_entries(self) -> Iterator[LanguageEntry]:
        """Yield entries in ``supported_languages`` order."""
        for code in self.supported_languages:
            entry = self.entry(code)
            if entry is not None:
                yield entry


def _parse_entry(code: str, data: Mapping[str, object]) -> LanguageEntry:
    files: dict[DocType, str] = {}
    for doc_type in DocType:
        file_name = get_str(data, doc_type.value)
        if file_name is not None:
            files[doc_type] = file_name
    return LanguageEntry(
        code=code,
        name=get_str(data, "name") or code,
        files=MappingProxyType(files),
    )


def language_config_from_dict(
    data: Mapping[str, object], *, path: Path
) -> Result[LanguageConfig, LanguageConfigInvalid]:
    """Build and validate a LanguageConfig from parsed JSON."""
    languages: StrDict | None = get_table(data, "languages")
    if languages is None:
        return Err(LanguageConfigInvalid(path, "missing 'languages' object"))

    entries: list[LanguageEntry] = []
    for code, raw in languages.items():
        table = as_str_dict(raw)
        if table is None:
            return Err(LanguageConfigInvalid(path, f"language '{code}' must be an object"))
        entries.append(_parse_entry(code, table))

    supported = get_str_list(data, "supported_languages")
    if not supported:
        return Err(LanguageConfigInvalid(path, "'supported_languages' must be a non-empty list"))
    if len(set(supported)) != len(supported):
        return Err(LanguageConfigInvalid(path, "'supported_languages' contains duplicates"))

    known = {e.code for e in entries}
    for code in supported:
        if code not in known:
            return Err(LanguageConfigInvalid(path, f"supported language '{code}' has no entry"))

    default = get_str(data, "default_language") or supported[0]
    if default not in supported:
        return Err(
            LanguageConfigInvalid(path, f"default language '{default}' is not supported")
        )

    return Ok(
        LanguageConfig(
            entries=tuple(entries),
            default_language=default,
            supported_languages=tuple(supported),
        )
    )


def load_language_config(path: Path) -> Result[LanguageConfig, LanguageConfigInvalid]:
    """Load the language configuration JSON file."""
    try:
        raw: object = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(LanguageConfigInvalid(path, "file not found"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(LanguageConfigInvalid(path, f"cannot read: {e}"))
    except json.JSONDecodeError as e:
        return Err(LanguageConfigInvalid(path, f"invalid JSON: {e}"))

    data = as_str_dict(raw)
    if data is None:
        return Err(LanguageConfigInvalid(path, "root must be a JSON object"))
    return language_config_from_dict(data, path=path)
