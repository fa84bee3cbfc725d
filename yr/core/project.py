"""Project root detection and paths.

The project root is the checkout the tools operate on: the directory holding
``yr.toml`` or, failing that, the git repository root (``.git``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import CONFIG_FILE_NAME
from .result import Err, Ok, Result

__all__ = [
    "PROJECT_ROOT_ENV",
    "Project",
    "ProjectError",
    "detect_project",
    "find_project_upward",
    "is_project_root",
]

PROJECT_ROOT_ENV = "YR_PROJECT_ROOT"


@dataclass(frozen=True)
class ProjectError:
    """Error when the project root cannot be detected."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Project:
    """A detected project checkout."""

    root: Path

    @property
    def config_path(self) -> Path:
        """Path to yr.toml (may not exist)."""
        return self.root / CONFIG_FILE_NAME

    def resolve(self, relative: str) -> Path:
        """Resolve a project-relative path from configuration."""
        return self.root / relative

    def __str__(self) -> str:
        return str(self.root)


def is_project_root(path: Path) -> bool:
    return (path / CONFIG_FILE_NAME).is_file() or (path / ".git").exists()


def find_project_upward(start: Path) -> Path | None:
    """Search upward from start for the nearest project root."""
    for parent in (start, *start.parents):
        if is_project_root(parent):
            return parent
    return None


def detect_project(
    *,
    start_dir: Path | None = None,
    env_var: str = PROJECT_ROOT_ENV,
) -> Result[Project, ProjectError]:
    """Detect the project root directory.

    Detection order:
    1. ``YR_PROJECT_ROOT`` environment variable (must be a directory)
    2. Search upward from start_dir (or cwd) for ``yr.toml`` or ``.git``
    """
    env_value = os.environ.get(env_var)
    if env_value:
        root = Path(env_value).expanduser().resolve()
        if not root.is_dir():
            return Err(ProjectError(f"{env_var} is not a directory: {root}", searched_from=root))
        return Ok(Project(root=root))

    start = (start_dir or Path.cwd()).resolve()
    found = find_project_upward(start)
    if found is None:
        return Err(
            ProjectError(
                f"no project root found (looked for {CONFIG_FILE_NAME} or .git)",
                searched_from=start,
            )
        )
    return Ok(Project(root=found))
