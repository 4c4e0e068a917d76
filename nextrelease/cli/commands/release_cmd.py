from __future__ import annotations

import os
from pathlib import Path

import typer

from nextrelease.cli.context import build_context, exit_error
from nextrelease.core.config import load_inputs
from nextrelease.core.errors import ErrorCode
from nextrelease.core.result import Err
from nextrelease.output.console import Style
from nextrelease.output.report import print_listing_problems, print_snapshot
from nextrelease.services.dispatch import RELEASE_TYPES, ReleaseContext, dispatch


def release(
    release_type: str | None = typer.Option(
        None,
        "--release-type",
        help=f"One of: {', '.join(RELEASE_TYPES)} (or $INPUT_RELEASE_TYPE)",
    ),
    owner: str | None = typer.Option(None, "--owner", help="Repository owner (or $INPUT_OWNER)"),
    repo: str | None = typer.Option(None, "--repo", help="Repository name (or $INPUT_REPO)"),
    token: str | None = typer.Option(None, "--token", help="GitHub token (or $INPUT_TOKEN)"),
    config: Path | None = typer.Option(None, "--config", help="Path to nextrelease.toml"),
) -> None:
    """Dispatch a release of the given type (alpha only plans, others are WIP)."""
    inputs = load_inputs(
        os.environ,
        {"token": token, "owner": owner, "repo": repo, "release_type": release_type},
    )
    if isinstance(inputs, Err):
        exit_error(str(inputs.error), code=ErrorCode.USER_ERROR)
    cfg = inputs.value

    ctx = build_context(token=cfg.token, config_path=config)
    release_ctx = ReleaseContext(
        http=ctx.http,
        owner=cfg.owner,
        repo=cfg.repo,
        page_size=ctx.settings.page_size,
        max_count=ctx.settings.max_tags,
        api_url=ctx.settings.api_url,
    )

    result = dispatch(release_ctx, cfg.release_type)
    if isinstance(result, Err):
        error = result.error
        if error.is_fatal:
            if error.hint:
                ctx.console.print(f"hint: {error.hint}", Style.DIM)
            exit_error(error.message, code=ErrorCode.USER_ERROR)
        ctx.console.warning(error.message)
        return

    plan = result.value
    ctx.console.info(f"creating an alpha release for {cfg.slug}")
    print_listing_problems(plan.listing, ctx.console)
    print_snapshot(plan.snapshot, ctx.console)
    if plan.branches_error is not None:
        ctx.console.warning(f"could not list branches: {plan.branches_error}")
    elif plan.release_line is None:
        ctx.console.print("latest release branch: -", Style.DIM)
    else:
        major, minor = plan.release_line
        ctx.console.print(f"latest release branch: release-{major}.{minor}")
    ctx.console.print("nothing was created (alpha releases only plan for now)", Style.DIM)
