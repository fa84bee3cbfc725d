"""Outcome of a single environment or file check.

Shared by the release prerequisite validator and the language tool's file
check so both ``check`` commands render results the same way.
"""

from dataclasses import dataclass
from enum import Enum, auto


class CheckStatus(Enum):
    """Status of a check result."""

    OK = auto()
    """Check passed."""

    WARNING = auto()
    """Check passed with a caveat (optional tool missing, step skipped)."""

    ERROR = auto()
    """Check failed."""


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a single check.

    Attributes:
        name: Short identifier for what was checked (e.g. "git", "README.en.md")
        status: Whether the check passed, warned, or failed
        message: Human-readable result message
        hint: Optional fix suggestion
    """

    name: str
    status: CheckStatus
    message: str
    hint: str | None = None

    @property
    def is_error(self) -> bool:
        return self.status == CheckStatus.ERROR

    @property
    def is_warning(self) -> bool:
        return self.status == CheckStatus.WARNING

    @classmethod
    def success(cls, name: str, message: str) -> "CheckResult":
        return cls(name=name, status=CheckStatus.OK, message=message)

    @classmethod
    def warning(cls, name: str, message: str, hint: str | None = None) -> "CheckResult":
        return cls(name=name, status=CheckStatus.WARNING, message=message, hint=hint)

    @classmethod
    def error(cls, name: str, message: str, hint: str | None = None) -> "CheckResult":
        return cls(name=name, status=CheckStatus.ERROR, message=message, hint=hint)
