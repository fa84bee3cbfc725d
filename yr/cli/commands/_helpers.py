"""Shared helpers for CLI commands."""

from __future__ import annotations

import os
from pathlib import Path
from typing import NoReturn

import typer

from yr.core.errors import ErrorCode
from yr.core.project import PROJECT_ROOT_ENV


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)


def apply_project_root(project_root: Path | None) -> None:
    """Pin project detection to ``--project-root`` for this invocation."""
    if project_root is None:
        return

    try:
        root = project_root.expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --project-root: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if not root.is_dir():
        typer.echo(f"error: --project-root '{root}' is not a directory", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    os.environ[PROJECT_ROOT_ENV] = str(root)


PROJECT_ROOT_OPTION = typer.Option(
    None,
    "--project-root",
    help="Project root (overrides auto detection)",
)
