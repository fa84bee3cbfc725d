"""Console output abstraction.

Services report progress through ``ConsoleProtocol`` rather than printing.
Production uses ``RichConsole``; tests use ``MockConsole`` and assert on the
captured records.

Messages are rendered as ``rich.text.Text`` rather than console markup:
documentation lines such as ``## [Unreleased]`` or ``[INFO]`` prefixes would
otherwise be parsed as markup tags.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()
    HEADER = auto()

    def __str__(self) -> str:
        return self.name.lower()


_LEVEL_LABELS: dict[Style, str] = {
    Style.INFO: "[INFO]",
    Style.SUCCESS: "[SUCCESS]",
    Style.WARNING: "[WARNING]",
    Style.ERROR: "[ERROR]",
}


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling."""
        ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def header(self, message: str) -> None:
        """Print a section header."""
        ...

    def newline(self) -> None: ...


class RichConsole:
    """Console implementation using the Rich library."""

    def __init__(self, *, stderr: bool = False) -> None:
        from rich.console import Console

        self._console = Console(stderr=stderr, highlight=False)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.INFO: "blue",
            Style.DIM: "dim",
            Style.HEADER: "blue bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        from rich.text import Text

        self._console.print(Text(message, style=self._style_map.get(style, "")))

    def success(self, message: str) -> None:
        self._labelled(Style.SUCCESS, message)

    def error(self, message: str) -> None:
        self._labelled(Style.ERROR, message)

    def warning(self, message: str) -> None:
        self._labelled(Style.WARNING, message)

    def info(self, message: str) -> None:
        self._labelled(Style.INFO, message)

    def header(self, message: str) -> None:
        self._console.print()
        self.print(message, Style.HEADER)

    def newline(self) -> None:
        self._console.print()

    def _labelled(self, style: Style, message: str) -> None:
        from rich.text import Text

        label = Text(_LEVEL_LABELS[style], style=self._style_map[style])
        self._console.print(Text.assemble(label, " ", message))


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.INFO))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    # Test helpers

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_warning(self) -> bool:
        return any(o.style == Style.WARNING for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]

    def count(self, style: Style) -> int:
        return sum(1 for o in self.outputs if o.style == style)
