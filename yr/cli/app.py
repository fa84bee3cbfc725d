from __future__ import annotations

import typer

from yr import __version__
from yr.cli.commands.lang_cmd import lang_app
from yr.cli.commands.release_cmd import release_app


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Sub-apps
app.add_typer(release_app, name="release", help="Release tool: check, test, patch/minor/major.")
app.add_typer(lang_app, name="lang", help="Language manager for bilingual documentation.")


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_show_version,
        is_eager=True,
    ),
) -> None:
    pass


def main() -> None:
    app()


def release_main() -> None:
    release_app()


def lang_main() -> None:
    lang_app()
