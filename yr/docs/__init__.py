"""Bilingual documentation: language config, switcher blocks and sync.

Usage:
    from yr.docs import DocsService, DocType, load_language_config

    config = load_language_config(root / "docs/language-config.json").unwrap()
    DocsService(config=config, root=root, console=console).sync("zh", "en", DocType.README)
"""

from yr.docs.block import locate_block, replace_block, strip_block
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
from yr.docs.languages import (
    DocType,
    LanguageConfig,
    LanguageEntry,
    load_language_config,
    parse_doc_type,
)
from yr.docs.switcher import render_switcher
from yr.docs.sync import DocsService, SwitcherUpdateReport, SyncResult

__all__ = [
    # block
    "locate_block",
    "replace_block",
    "strip_block",
    # errors
    "DocError",
    "DocumentUnreadable",
    "LanguageConfigInvalid",
    "MalformedBlock",
    "PartialWriteError",
    "SourceNotFound",
    "UnknownDocType",
    "UnknownLanguage",
    # languages
    "DocType",
    "LanguageConfig",
    "LanguageEntry",
    "load_language_config",
    "parse_doc_type",
    # switcher
    "render_switcher",
    # sync
    "DocsService",
    "SwitcherUpdateReport",
    "SyncResult",
]
