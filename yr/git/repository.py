"""Git operations used by the release flow.

Every command goes through a ``ProcessRunner`` so prerequisite checks and
tag creation can be exercised against a stub.

Usage:
    repo = Repository(root, runner=SubprocessRunner())
    if not repo.is_repository():
        ...
    match repo.current_branch():
        case Ok(branch):
            print(branch)
        case Err(e):
            print(e.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from yr.core.result import Err, Ok, Result
from yr.platform.process import ProcessRunner

__all__ = ["GitError", "Repository"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """A git checkout at ``path``."""

    def __init__(self, path: Path, *, runner: ProcessRunner) -> None:
        self.path = path
        self._runner = runner

    def is_repository(self) -> bool:
        """True if ``path`` is inside a git work tree."""
        return self._runner.run(self._git("rev-parse", "--git-dir"), cwd=self.path) == 0

    def has_uncommitted_changes(self) -> bool:
        """True if tracked files differ from HEAD (untracked files are ignored)."""
        argv = self._git("diff-index", "--quiet", "HEAD", "--")
        return self._runner.run(argv, cwd=self.path) != 0

    def current_branch(self) -> Result[str, GitError]:
        """Get the checked-out branch name ("" when HEAD is detached)."""
        result = self._runner.capture(self._git("branch", "--show-current"), cwd=self.path)
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command="branch --show-current",
                        message=e.stderr.strip() or "cannot determine current branch",
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok(stdout.strip())

    def head_subject(self) -> Result[str, GitError]:
        """Subject line of the HEAD commit."""
        result = self._runner.capture(self._git("log", "-1", "--format=%s"), cwd=self.path)
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command="log",
                        message=e.stderr.strip() or "cannot read HEAD commit",
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok(stdout.strip())

    def tag_exists(self, tag: str) -> bool:
        argv = self._git("rev-parse", "-q", "--verify", f"refs/tags/{tag}")
        return self._runner.run(argv, cwd=self.path) == 0

    def commit_all_argv(self, message: str) -> list[str]:
        return self._git("commit", "-am", message)

    def tag_argv(self, tag: str, message: str) -> list[str]:
        return self._git("tag", "-a", tag, "-m", message)

    def commit_all(self, message: str) -> Result[None, GitError]:
        """Commit all tracked changes."""
        return self._checked("commit", self.commit_all_argv(message))

    def create_tag(self, tag: str, message: str) -> Result[None, GitError]:
        """Create an annotated tag at HEAD."""
        return self._checked("tag", self.tag_argv(tag, message))

    def _checked(self, command: str, argv: list[str]) -> Result[None, GitError]:
        rc = self._runner.run(argv, cwd=self.path)
        if rc != 0:
            return Err(GitError(command=command, message=f"git {command} failed", returncode=rc))
        return Ok(None)

    def _git(self, *args: str) -> list[str]:
        return ["git", "-C", str(self.path), *args]
