from __future__ import annotations

from pathlib import Path

import pytest

from yr.core.project import PROJECT_ROOT_ENV, detect_project, find_project_upward, is_project_root
from yr.core.result import Err, Ok


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(PROJECT_ROOT_ENV, "")


def test_is_project_root(tmp_path: Path) -> None:
    assert not is_project_root(tmp_path)
    (tmp_path / ".git").mkdir()
    assert is_project_root(tmp_path)


def test_config_file_marks_root(tmp_path: Path) -> None:
    (tmp_path / "yr.toml").write_text("", encoding="utf-8")
    assert is_project_root(tmp_path)


def test_find_upward(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    nested = tmp_path / "src" / "crypto"
    nested.mkdir(parents=True)

    assert find_project_upward(nested) == tmp_path


def test_detect_from_start_dir(tmp_path: Path) -> None:
    (tmp_path / "yr.toml").write_text("", encoding="utf-8")
    (tmp_path / "docs").mkdir()

    result = detect_project(start_dir=tmp_path / "docs")

    assert isinstance(result, Ok)
    assert result.value.root == tmp_path.resolve()
    assert result.value.config_path == tmp_path.resolve() / "yr.toml"
    assert result.value.resolve("Cargo.toml") == tmp_path.resolve() / "Cargo.toml"


def test_env_var_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    other = tmp_path / "other"
    other.mkdir()
    monkeypatch.setenv(PROJECT_ROOT_ENV, str(other))

    result = detect_project(start_dir=tmp_path)

    assert isinstance(result, Ok)
    assert result.value.root == other.resolve()


def test_env_var_must_be_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(PROJECT_ROOT_ENV, str(tmp_path / "missing"))

    result = detect_project()

    assert isinstance(result, Err)
    assert PROJECT_ROOT_ENV in result.error.message
