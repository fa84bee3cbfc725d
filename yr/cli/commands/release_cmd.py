"""Release tool commands: patch, minor, major, test, check."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from yr.cli.commands._helpers import PROJECT_ROOT_OPTION, apply_project_root, exit_with_code
from yr.cli.context import CLIContext, build_context
from yr.core.result import Err, Ok
from yr.output.console import Style
from yr.output.errors import print_release_error, release_error_exit_code
from yr.release.errors import ReleaseError
from yr.release.gates import QualityGateRunner
from yr.release.model import ReleaseBump, ReleaseRequest, ReleaseState
from yr.release.orchestrator import ReleaseOrchestrator
from yr.release.prereqs import PrerequisiteValidator


release_app = typer.Typer(add_completion=False, no_args_is_help=True)

DRY_RUN_OPTION = typer.Option(
    False,
    "--dry-run",
    help="Run every step except writing, tagging and publishing",
)


@release_app.callback()
def _release_main(  # pyright: ignore[reportUnusedFunction]
    project_root: Path | None = PROJECT_ROOT_OPTION,
) -> None:
    """yimi-rutool release tool."""
    apply_project_root(project_root)


def _fail(ctx: CLIContext, error: ReleaseError) -> NoReturn:
    print_release_error(error, ctx.console)
    exit_with_code(release_error_exit_code(error))


def _release(bump: ReleaseBump, *, dry_run: bool) -> None:
    ctx = build_context()
    ctx.console.info("Starting yimi-rutool release process...")
    ctx.console.print(f"command: {bump}", Style.DIM)
    ctx.console.print(f"dry run: {str(dry_run).lower()}", Style.DIM)

    orchestrator = ReleaseOrchestrator(
        root=ctx.project.root,
        config=ctx.config,
        runner=ctx.runner,
        console=ctx.console,
    )
    match orchestrator.run(ReleaseRequest(bump=bump, dry_run=dry_run)):
        case Err(e):
            _fail(ctx, e)
        case Ok(report):
            session = report.session
            ctx.console.print(f"version: {session.previous} -> {session.version}", Style.DIM)
            if report.state == ReleaseState.DRY_RUN_COMPLETE:
                for path in session.changed_files:
                    ctx.console.print(f"would change: {path}", Style.DIM)
            ctx.console.success("Release process completed successfully!")


@release_app.command()
def patch(dry_run: bool = DRY_RUN_OPTION) -> None:
    """Create a patch release (0.1.0 -> 0.1.1)."""
    _release("patch", dry_run=dry_run)


@release_app.command()
def minor(dry_run: bool = DRY_RUN_OPTION) -> None:
    """Create a minor release (0.1.0 -> 0.2.0)."""
    _release("minor", dry_run=dry_run)


@release_app.command()
def major(dry_run: bool = DRY_RUN_OPTION) -> None:
    """Create a major release (0.1.0 -> 1.0.0)."""
    _release("major", dry_run=dry_run)


@release_app.command("test")
def run_gates() -> None:
    """Run all quality gates without releasing."""
    ctx = build_context()
    runner = QualityGateRunner(
        root=ctx.project.root,
        config=ctx.config.gates,
        runner=ctx.runner,
        console=ctx.console,
    )
    match runner.run():
        case Err(e):
            _fail(ctx, e)
        case Ok(report):
            for outcome in report.outcomes:
                ctx.console.print(f"{outcome.stage.label}: {outcome.status}", Style.DIM)


@release_app.command()
def check() -> None:
    """Check release prerequisites only."""
    ctx = build_context()
    validator = PrerequisiteValidator(
        root=ctx.project.root,
        config=ctx.config.release,
        runner=ctx.runner,
        console=ctx.console,
    )
    match validator.validate():
        case Err(e):
            _fail(ctx, e)
        case Ok(results):
            for r in results:
                ctx.console.print(f"{r.name}: {r.message}", Style.SUCCESS)
            ctx.console.success("Prerequisites check completed")
