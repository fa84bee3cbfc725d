"""Quality gates run before any release mutation.

Order is fixed: unit tests, documentation tests, lint (warnings as errors),
security audit. The first three are hard gates and stop the run on a
non-zero exit. The audit is a soft gate: advisories without an available
fix must not block a release, so a failure is only recorded as a warning.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from yr.core.config import GatesConfig
from yr.core.result import Err, Ok, Result
from yr.output.console import ConsoleProtocol
from yr.platform.process import ProcessRunner, format_command
from yr.release.errors import ReleaseError
from yr.release.model import GateStage

GateStatus = Literal["passed", "failed", "skipped"]


@dataclass(frozen=True, slots=True)
class GateOutcome:
    stage: GateStage
    status: GateStatus
    returncode: int | None = None


@dataclass(frozen=True, slots=True)
class GateReport:
    outcomes: tuple[GateOutcome, ...]
    warnings: tuple[str, ...]

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


class QualityGateRunner:
    def __init__(
        self,
        *,
        root: Path,
        config: GatesConfig,
        runner: ProcessRunner,
        console: ConsoleProtocol,
    ) -> None:
        self._root = root
        self._config = config
        self._runner = runner
        self._console = console

    def stages(self) -> list[tuple[GateStage, tuple[str, ...]]]:
        return [
            (GateStage.UNIT_TESTS, self._config.unit_tests),
            (GateStage.DOC_TESTS, self._config.doc_tests),
            (GateStage.LINT, self._config.lint),
            (GateStage.AUDIT, self._config.audit),
        ]

    def run(self) -> Result[GateReport, ReleaseError]:
        self._console.info("Running tests...")
        outcomes: list[GateOutcome] = []
        warnings: list[str] = []

        for stage, argv in self.stages():
            if stage == GateStage.AUDIT and not self._audit_available():
                message = f"{self._config.audit_tool} not installed, skipping security audit"
                self._console.warning(message)
                warnings.append(message)
                outcomes.append(GateOutcome(stage=stage, status="skipped"))
                continue

            self._console.info(f"Running {stage.label}: {format_command(argv)}")
            rc = self._runner.run(argv, cwd=self._root)
            if rc == 0:
                outcomes.append(GateOutcome(stage=stage, status="passed", returncode=rc))
                continue

            outcomes.append(GateOutcome(stage=stage, status="failed", returncode=rc))
            if stage.is_hard:
                return Err(
                    ReleaseError(
                        kind="gate_failed",
                        message=f"{stage.label.capitalize()} failed (exit {rc})",
                        hint=format_command(argv),
                        stage=str(stage),
                    )
                )

            message = "Security audit found issues (check output above)"
            self._console.warning(message)
            warnings.append(message)

        self._console.success("All tests passed")
        return Ok(GateReport(outcomes=tuple(outcomes), warnings=tuple(warnings)))

    def _audit_available(self) -> bool:
        tool = self._config.audit_tool
        if not tool:
            return True
        return self._runner.which(tool) is not None
