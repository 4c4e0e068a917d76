from __future__ import annotations

import typer

from nextrelease import __version__
from nextrelease.cli.commands.info_cmd import info
from nextrelease.cli.commands.project_cmd import project
from nextrelease.cli.commands.release_cmd import release


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Infer the next release of a repository from its version tags.",
)

app.command()(info)
app.command()(project)
app.command()(release)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    del version


def main() -> None:
    app()
