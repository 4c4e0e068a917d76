from __future__ import annotations

import typer

from nextrelease.cli.context import make_console
from nextrelease.output.report import print_snapshot
from nextrelease.progression.engine import classify_and_project


def project(
    tags: list[str] = typer.Argument(..., help="Tag names, e.g. v1.0.0 v1.1.0-alpha.0"),
    as_json: bool = typer.Option(False, "--json", help="Print the snapshot as JSON"),
) -> None:
    """Compute the release progression from tags given on the command line (offline)."""
    console = make_console()
    snapshot = classify_and_project(tags)
    if as_json:
        console.json(snapshot.to_dict())
        return
    print_snapshot(snapshot, console)
