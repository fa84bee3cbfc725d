"""Language tool commands: update-switchers, sync, list-languages, check."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from yr.cli.commands._helpers import PROJECT_ROOT_OPTION, apply_project_root, exit_with_code
from yr.cli.context import CLIContext, build_context
from yr.core.checks import CheckStatus
from yr.core.errors import ErrorCode
from yr.core.result import Err, Ok
from yr.docs.errors import DocError
from yr.docs.languages import DocType, LanguageConfig, load_language_config, parse_doc_type
from yr.docs.sync import DocsService
from yr.output.console import Style
from yr.output.errors import doc_error_exit_code, print_doc_error


lang_app = typer.Typer(add_completion=False, no_args_is_help=True)


@lang_app.callback()
def _lang_main(  # pyright: ignore[reportUnusedFunction]
    project_root: Path | None = PROJECT_ROOT_OPTION,
) -> None:
    """yimi-rutool language manager for bilingual documentation."""
    apply_project_root(project_root)


def _fail(ctx: CLIContext, error: DocError) -> NoReturn:
    print_doc_error(error, ctx.console)
    exit_with_code(doc_error_exit_code(error))


def _load_languages(ctx: CLIContext) -> LanguageConfig:
    path = ctx.project.resolve(ctx.config.docs.language_config)
    match load_language_config(path):
        case Err(e):
            _fail(ctx, e)
        case Ok(languages):
            return languages


def _service(ctx: CLIContext, languages: LanguageConfig) -> DocsService:
    return DocsService(config=languages, root=ctx.project.root, console=ctx.console)


def _tracked_doc_types(ctx: CLIContext) -> tuple[DocType, ...]:
    doc_types: list[DocType] = []
    for name in ctx.config.docs.tracked:
        match parse_doc_type(name):
            case Err(e):
                _fail(ctx, e)
            case Ok(doc_type):
                doc_types.append(doc_type)
    return tuple(doc_types)


@lang_app.command("update-switchers")
def update_switchers() -> None:
    """Update language switchers in all tracked documents."""
    ctx = build_context()
    languages = _load_languages(ctx)
    doc_types = _tracked_doc_types(ctx)

    match _service(ctx, languages).update_switchers(doc_types):
        case Err(e):
            _fail(ctx, e)
        case Ok(report):
            ctx.console.print(
                f"updated: {len(report.updated)}, unchanged: {len(report.unchanged)}, "
                f"skipped: {len(report.skipped)}",
                Style.DIM,
            )
            ctx.console.success("Language management completed!")


@lang_app.command()
def sync(
    source: str = typer.Argument(..., help="Source language code (e.g. zh)"),
    target: str = typer.Argument(..., help="Target language code (e.g. en)"),
    doc_type: str = typer.Argument(..., help="Document type (e.g. readme, changelog)"),
) -> None:
    """Sync a document from SOURCE language to TARGET language.

    The target file is overwritten; commit it first if it has local edits.
    """
    ctx = build_context()
    languages = _load_languages(ctx)

    match parse_doc_type(doc_type):
        case Err(e):
            _fail(ctx, e)
        case Ok(parsed):
            pass

    match _service(ctx, languages).sync(source, target, parsed):
        case Err(e):
            _fail(ctx, e)
        case Ok(_):
            pass


@lang_app.command("list-languages")
def list_languages() -> None:
    """List all supported languages."""
    ctx = build_context()
    languages = _load_languages(ctx)

    ctx.console.info("Supported languages:")
    for entry in languages.supported_entries():
        marker = " (default)" if entry.code == languages.default_language else ""
        ctx.console.print(f"  - {entry.code} ({entry.name}){marker}")


@lang_app.command()
def check() -> None:
    """Check that every configured language file exists."""
    ctx = build_context()
    languages = _load_languages(ctx)

    ctx.console.info("Checking language files...")
    results = _service(ctx, languages).check_files()
    missing = [r for r in results if r.status == CheckStatus.ERROR]

    for r in results:
        if r.status == CheckStatus.WARNING:
            ctx.console.print(f"{r.name}: {r.message}", Style.DIM)

    if not missing:
        ctx.console.success("All language files exist")
        return

    ctx.console.warning("Missing files:")
    for r in missing:
        ctx.console.print(f"  - {r.name}: {r.message}", Style.WARNING)
        if r.hint:
            ctx.console.print(f"    hint: {r.hint}", Style.DIM)
    exit_with_code(int(ErrorCode.ENV_ERROR))
