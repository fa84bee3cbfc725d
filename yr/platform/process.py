"""Subprocess execution behind a small capability interface.

Release steps never call ``subprocess`` directly. They receive a
``ProcessRunner`` and only look at exit statuses (or, for the few git
queries, captured stdout). Production wires ``SubprocessRunner``; tests
substitute a recording stub, which is how gate short-circuiting and dry-run
safety are verified without real tooling.

Usage:
    runner = SubprocessRunner()
    if runner.run(["cargo", "test"], cwd=root) != 0:
        ...
    match runner.capture(["git", "branch", "--show-current"], cwd=root):
        case Ok(stdout):
            branch = stdout.strip()
        case Err(error):
            print(error)
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from yr.core.result import Err, Ok, Result

__all__ = ["ProcessError", "ProcessRunner", "SubprocessRunner", "format_command"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process (-1 if it could not start).
        stdout: Standard output (may be empty).
        stderr: Standard error (contains error details).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


class ProcessRunner(Protocol):
    """Capability for running external tools."""

    def run(self, args: Sequence[str], *, cwd: Path) -> int:
        """Run a command with output streamed to the terminal.

        Returns:
            The exit status. A command that cannot be started returns 127.
        """
        ...

    def capture(self, args: Sequence[str], *, cwd: Path) -> Result[str, ProcessError]:
        """Run a command and capture stdout.

        Returns:
            Ok(stdout) on exit 0, Err(ProcessError) otherwise.
        """
        ...

    def which(self, name: str) -> str | None:
        """Resolve an executable on PATH."""
        ...


def format_command(args: Sequence[str]) -> str:
    return " ".join(args)


class SubprocessRunner:
    """ProcessRunner backed by ``subprocess.run``.

    No timeout is applied; a command runs until the tool itself exits.
    """

    def run(self, args: Sequence[str], *, cwd: Path) -> int:
        try:
            proc = subprocess.run(list(args), cwd=str(cwd), check=False)
        except OSError:
            return 127
        return proc.returncode

    def capture(self, args: Sequence[str], *, cwd: Path) -> Result[str, ProcessError]:
        try:
            proc = subprocess.run(
                list(args),
                cwd=str(cwd),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            return Err(
                ProcessError(
                    command=tuple(args),
                    returncode=-1,
                    stdout="",
                    stderr=str(e),
                )
            )

        if proc.returncode != 0:
            return Err(
                ProcessError(
                    command=tuple(args),
                    returncode=proc.returncode,
                    stdout=proc.stdout,
                    stderr=proc.stderr,
                )
            )

        return Ok(proc.stdout)

    def which(self, name: str) -> str | None:
        return shutil.which(name)
