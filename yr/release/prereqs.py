"""Release prerequisites: observe the checkout, never modify it."""

from __future__ import annotations

from pathlib import Path

from yr.core.checks import CheckResult
from yr.core.config import ReleaseConfig
from yr.core.result import Err, Ok, Result
from yr.git.repository import Repository
from yr.output.console import ConsoleProtocol
from yr.platform.process import ProcessRunner
from yr.release.errors import ReleaseError


class PrerequisiteValidator:
    """Checks, in order, stopping at the first failure:

    1. required tools resolve on PATH
    2. the project is a git work tree
    3. tracked files have no uncommitted changes
    4. the checked-out branch is a release branch
    """

    def __init__(
        self,
        *,
        root: Path,
        config: ReleaseConfig,
        runner: ProcessRunner,
        console: ConsoleProtocol,
    ) -> None:
        self._root = root
        self._config = config
        self._runner = runner
        self._console = console
        self._repo = Repository(root, runner=runner)

    def validate(self) -> Result[list[CheckResult], ReleaseError]:
        self._console.info("Checking prerequisites...")
        passed: list[CheckResult] = []

        for tool in self._config.required_tools:
            path = self._runner.which(tool)
            if path is None:
                return Err(
                    ReleaseError(
                        kind="missing_tool",
                        message=f"{tool} is not installed",
                        hint=f"install {tool} and make sure it is on PATH",
                    )
                )
            passed.append(CheckResult.success(tool, path))

        if not self._repo.is_repository():
            return Err(ReleaseError(kind="not_a_repository", message="Not in a git repository"))
        passed.append(CheckResult.success("repository", str(self._root)))

        if self._repo.has_uncommitted_changes():
            return Err(
                ReleaseError(
                    kind="dirty_working_tree",
                    message="Working directory is not clean. Please commit or stash changes.",
                    hint="git status",
                )
            )
        passed.append(CheckResult.success("working tree", "clean"))

        match self._repo.current_branch():
            case Err(e):
                return Err(ReleaseError(kind="wrong_branch", message=e.message))
            case Ok(branch):
                pass

        allowed = self._config.branches
        if branch not in allowed:
            shown = branch or "(detached HEAD)"
            return Err(
                ReleaseError(
                    kind="wrong_branch",
                    message=f"Not on {'/'.join(allowed)} branch. Current branch: {shown}",
                    hint=f"git checkout {allowed[0]}",
                )
            )
        passed.append(CheckResult.success("branch", branch))

        self._console.success("Prerequisites check passed")
        return Ok(passed)
