"""Release flow: prerequisites, quality gates, version bump, tag and publish."""

from yr.release.errors import ReleaseError
from yr.release.gates import GateOutcome, GateReport, QualityGateRunner
from yr.release.model import GateStage, ReleaseBump, ReleaseRequest, ReleaseState
from yr.release.orchestrator import ReleaseOrchestrator, ReleaseReport, ReleaseSession
from yr.release.prereqs import PrerequisiteValidator
from yr.release.semver import SemVer, parse_version

__all__ = [
    "GateOutcome",
    "GateReport",
    "GateStage",
    "PrerequisiteValidator",
    "QualityGateRunner",
    "ReleaseBump",
    "ReleaseError",
    "ReleaseOrchestrator",
    "ReleaseReport",
    "ReleaseRequest",
    "ReleaseSession",
    "ReleaseState",
    "SemVer",
    "parse_version",
]
