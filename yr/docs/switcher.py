"""Render the language switcher block for one language and doc type."""

from __future__ import annotations

from yr.core.result import Err, Ok, Result
from yr.docs.block import CLOSE_TAG, CONTAINER_OPEN, SWITCHER_MARKER
from yr.docs.errors import UnknownDocType, UnknownLanguage
from yr.docs.languages import DocType, LanguageConfig

__all__ = ["SEPARATOR", "render_switcher"]

SEPARATOR = " • "


def render_switcher(
    config: LanguageConfig,
    current: str,
    doc_type: DocType,
) -> Result[str, UnknownLanguage | UnknownDocType]:
    """Render the switcher for ``current`` language.

    Languages appear in ``supported_languages`` order. The current language
    is a bold label, every other one links to its file for ``doc_type``.
    Every listed language must map ``doc_type``, including the current one,
    so a switcher is never rendered for a doc type some language lacks.

    The returned text has no trailing newline.
    """
    if current not in config.supported_languages:
        return Err(UnknownLanguage(code=current, supported=config.supported_languages))

    labels: list[str] = []
    for code in config.supported_languages:
        match config.file_for(code, doc_type):
            case Err(e):
                return Err(e)
            case Ok(file_name):
                pass

        entry = config.entry(code)
        name = entry.name if entry is not None else code
        if code == current:
            labels.append(f"<strong>{name}</strong>")
        else:
            labels.append(f'<a href="{file_name}">{name}</a>')

    return Ok(
        "\n".join(
            [
                CONTAINER_OPEN,
                f"  <h3>{SWITCHER_MARKER}</h3>",
                "  <p>",
                SEPARATOR.join(labels),
                "  </p>",
                CLOSE_TAG,
            ]
        )
    )
