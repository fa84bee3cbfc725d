"""Filesystem helpers for documents and version resources."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

__all__ = ["atomic_write_text", "read_text_exact"]


def read_text_exact(path: Path, *, encoding: str = "utf-8") -> str:
    """Read text without newline translation so CRLF files round-trip."""
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


def atomic_write_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write text to path atomically using temp file + replace.

    The temp file lives next to the target so ``os.replace`` never crosses
    filesystems. On any failure the target keeps its previous content and the
    temp file is removed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.",
        suffix=".tmp",
        dir=str(path.parent),
    )
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)
