"""Error types for the release flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    # Environment: fix the checkout and re-run.
    "missing_tool",
    "not_a_repository",
    "dirty_working_tree",
    "wrong_branch",
    # Quality gates.
    "gate_failed",
    # Version resources.
    "invalid_version",
    "version_file_failed",
    "changelog_failed",
    # Tag and publish.
    "tag_failed",
    "publish_failed",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Canonical release error payload.

    ``stage`` names the failing gate for ``gate_failed`` and the release
    state that was being left for every other kind.
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None
    stage: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
