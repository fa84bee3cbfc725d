from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal


ReleaseBump = Literal["major", "minor", "patch"]
RELEASE_BUMPS: tuple[ReleaseBump, ...] = ("patch", "minor", "major")


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    bump: ReleaseBump
    # Never tags or publishes when True.
    dry_run: bool = False


class ReleaseState(StrEnum):
    IDLE = "idle"
    PREREQUISITES_CHECKED = "prerequisites_checked"
    GATES_PASSED = "gates_passed"
    VERSION_BUMPED = "version_bumped"
    RELEASED = "released"
    DRY_RUN_COMPLETE = "dry_run_complete"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self in (ReleaseState.RELEASED, ReleaseState.DRY_RUN_COMPLETE, ReleaseState.ABORTED)


class GateStage(StrEnum):
    UNIT_TESTS = "unit_tests"
    DOC_TESTS = "doc_tests"
    LINT = "lint"
    AUDIT = "audit"

    @property
    def label(self) -> str:
        return _GATE_LABELS[self]

    @property
    def is_hard(self) -> bool:
        """Hard gates abort the release; the audit only warns."""
        return self != GateStage.AUDIT


_GATE_LABELS: dict[GateStage, str] = {
    GateStage.UNIT_TESTS: "unit tests",
    GateStage.DOC_TESTS: "documentation tests",
    GateStage.LINT: "lint",
    GateStage.AUDIT: "security audit",
}
