from __future__ import annotations

from pathlib import Path

import typer

from nextrelease.cli.commands._helpers import resolve_repository, resolve_token
from nextrelease.cli.context import build_context
from nextrelease.output.report import (
    print_listing_problems,
    print_snapshot,
    write_github_output,
)
from nextrelease.services.release_info import get_release_info, get_release_info_extra


def info(
    repository: str | None = typer.Argument(
        None, help="OWNER/REPO (defaults to $GITHUB_REPOSITORY)"
    ),
    urls: bool = typer.Option(False, "--urls", help="Look up release page URLs"),
    as_json: bool = typer.Option(False, "--json", help="Print the snapshot as JSON"),
    max_tags: int | None = typer.Option(None, "--max-tags", min=1, help="Stop after N tags"),
    page_size: int | None = typer.Option(
        None, "--page-size", min=1, max=100, help="Tags per API page"
    ),
    token: str | None = typer.Option(None, "--token", help="GitHub token (or $GITHUB_TOKEN)"),
    config: Path | None = typer.Option(None, "--config", help="Path to nextrelease.toml"),
) -> None:
    """Show the current and upcoming releases of a repository."""
    owner, repo = resolve_repository(repository)
    ctx = build_context(token=resolve_token(token), config_path=config)
    settings = ctx.settings
    page_size = page_size or settings.page_size
    max_count = max_tags or settings.max_tags

    if urls:
        extra = get_release_info_extra(
            ctx.http,
            owner,
            repo,
            page_size=page_size,
            max_count=max_count,
            api_url=settings.api_url,
        )
        snapshot = extra.enriched.snapshot
        print_listing_problems(extra.listing, ctx.console)
        if as_json:
            ctx.console.json(extra.enriched.to_dict())
        else:
            print_snapshot(snapshot, ctx.console, extra.enriched)
    else:
        result = get_release_info(
            ctx.http,
            owner,
            repo,
            page_size=page_size,
            max_count=max_count,
            api_url=settings.api_url,
        )
        snapshot = result.snapshot
        print_listing_problems(result.listing, ctx.console)
        if as_json:
            ctx.console.json(snapshot.to_dict())
        else:
            print_snapshot(snapshot, ctx.console)

    write_github_output(snapshot)
