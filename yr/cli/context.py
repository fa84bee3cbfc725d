from __future__ import annotations

from dataclasses import dataclass

import typer

from yr.core.config import Config, load_project_config
from yr.core.errors import ErrorCode
from yr.core.project import Project, detect_project
from yr.core.result import Err
from yr.output.console import ConsoleProtocol, RichConsole
from yr.platform.process import ProcessRunner, SubprocessRunner


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    config: Config
    console: ConsoleProtocol
    runner: ProcessRunner


def build_context() -> CLIContext:
    project_result = detect_project()
    if isinstance(project_result, Err):
        typer.echo(f"error: {project_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    project = project_result.value
    config_result = load_project_config(project.root)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        project=project,
        config=config_result.value,
        console=RichConsole(),
        runner=SubprocessRunner(),
    )
