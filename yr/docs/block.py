"""Locate, replace and strip the language switcher block.

A switcher block is found structurally, never by line number:

    <div align="center">              <- optional container line
      <h3>🌍 Language / 语言</h3>      <- open marker (contains SWITCHER_MARKER)
      <p>
    ...
      </p>
    </div>                            <- close marker (next line containing CLOSE_TAG)

The scanner has two states, outside and inside. Outside, a line containing
the marker phrase opens the block; inside, every line is swallowed up to and
including the first line containing the closing tag. When the line right
before the marker is the container line, it belongs to the block too.

Only the first block in a document is recognised. Everything outside it is
kept byte for byte, line endings included.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from yr.core.result import Err, Ok, Result
from yr.docs.errors import MalformedBlock

__all__ = [
    "CLOSE_TAG",
    "CONTAINER_OPEN",
    "SWITCHER_MARKER",
    "SwitcherBlock",
    "locate_block",
    "replace_block",
    "strip_block",
]

SWITCHER_MARKER = "🌍 Language / 语言"
CONTAINER_OPEN = '<div align="center">'
CLOSE_TAG = "</div>"


@dataclass(frozen=True, slots=True)
class SwitcherBlock:
    """Position of a switcher block within a document's lines.

    Attributes:
        start: Index of the first line of the block (container or marker)
        end: Index one past the closing line
        text: The block's raw text, line endings included
    """

    start: int
    end: int
    text: str

    @property
    def newline(self) -> str:
        """Line ending used by the closing line ("" at end of file)."""
        last = self.text.splitlines(keepends=True)[-1]
        stripped = last.rstrip("\r\n")
        return last[len(stripped) :]


def _find(lines: list[str], *, path: Path | None) -> Result[SwitcherBlock | None, MalformedBlock]:
    inside = False
    start = 0
    marker_line = 0

    for i, line in enumerate(lines):
        if not inside:
            if SWITCHER_MARKER in line:
                inside = True
                marker_line = i
                start = i - 1 if i > 0 and lines[i - 1].strip() == CONTAINER_OPEN else i
            continue

        if CLOSE_TAG in line:
            return Ok(SwitcherBlock(start=start, end=i + 1, text="".join(lines[start : i + 1])))

    if inside:
        return Err(MalformedBlock(line=marker_line + 1, path=path))
    return Ok(None)


def locate_block(text: str, *, path: Path | None = None) -> Result[SwitcherBlock | None, MalformedBlock]:
    """Find the first switcher block.

    Returns:
        Ok(block), Ok(None) when the document has no switcher, or
        Err(MalformedBlock) when the marker is never closed.
    """
    return _find(text.splitlines(keepends=True), path=path)


def replace_block(
    text: str,
    replacement: str | None,
    *,
    path: Path | None = None,
) -> Result[str, MalformedBlock]:
    """Replace (or, with ``replacement=None``, remove) the first switcher block.

    The replacement takes the line ending of the block's closing line, so a
    CRLF document stays CRLF. A document without a switcher is returned
    unchanged.
    """
    lines = text.splitlines(keepends=True)
    match _find(lines, path=path):
        case Err(e):
            return Err(e)
        case Ok(None):
            return Ok(text)
        case Ok(block):
            pass

    head = "".join(lines[: block.start])
    tail = "".join(lines[block.end :])
    if replacement is None:
        return Ok(head + tail)

    newline = block.newline
    body = replacement.rstrip("\r\n")
    if newline == "\r\n":
        body = body.replace("\r\n", "\n").replace("\n", "\r\n")
    return Ok(head + body + newline + tail)


def strip_block(text: str, *, path: Path | None = None) -> Result[str, MalformedBlock]:
    """Remove the first switcher block, leaving a language-neutral body."""
    return replace_block(text, None, path=path)
