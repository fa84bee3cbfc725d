"""Tests for yr.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from yr.core.result import Err, Ok
from yr.platform.process import ProcessError, SubprocessRunner, format_command


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(command=("git", "status"), returncode=1, stdout="", stderr="fatal")
        assert str(error) == "git status failed (exit 1)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(
            command=("cargo", "clippy", "--all-targets", "--", "-D", "warnings"),
            returncode=101,
            stdout="",
            stderr="",
        )
        assert str(error) == "cargo clippy --all-targets ... failed (exit 101)"

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestSubprocessRunner:
    def test_run_returns_exit_status(self, tmp_path: Path) -> None:
        runner = SubprocessRunner()
        assert runner.run([sys.executable, "-c", "pass"], cwd=tmp_path) == 0
        assert runner.run([sys.executable, "-c", "raise SystemExit(3)"], cwd=tmp_path) == 3

    def test_run_missing_executable(self, tmp_path: Path) -> None:
        assert SubprocessRunner().run(["yr-no-such-tool"], cwd=tmp_path) == 127

    def test_capture_stdout(self, tmp_path: Path) -> None:
        result = SubprocessRunner().capture([sys.executable, "-c", "print('main')"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert result.value.strip() == "main"

    def test_capture_failure(self, tmp_path: Path) -> None:
        code = "import sys; sys.stderr.write('bad'); sys.exit(2)"
        result = SubprocessRunner().capture([sys.executable, "-c", code], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 2
        assert result.error.stderr == "bad"

    def test_capture_missing_executable(self, tmp_path: Path) -> None:
        result = SubprocessRunner().capture(["yr-no-such-tool"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1

    def test_which(self) -> None:
        assert SubprocessRunner().which("yr-no-such-tool") is None


def test_format_command() -> None:
    assert format_command(("cargo", "test", "--doc")) == "cargo test --doc"
