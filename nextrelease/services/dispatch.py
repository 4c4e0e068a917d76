"""Release dispatcher.

Routes a release type to its action. Only the alpha action does anything
yet, and it stops at planning: it gathers the progression snapshot and the
latest release branch line it would build on. Beta, rc and normal releases
are placeholders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, get_args

from nextrelease.core.config import DEFAULT_API_URL, DEFAULT_MAX_TAGS, MAX_PAGE_SIZE
from nextrelease.core.result import Err, Ok, Result
from nextrelease.github.api import TagListing, latest_release_line, list_branches
from nextrelease.github.http import HttpError
from nextrelease.progression.model import Snapshot
from nextrelease.services.release_info import get_release_info

if TYPE_CHECKING:
    from nextrelease.github.http import HttpClient

ReleaseType = Literal["alpha", "beta", "rc", "normal"]
RELEASE_TYPES: tuple[ReleaseType, ...] = get_args(ReleaseType)

_DispatchErrorKind = Literal["unknown_release_type", "not_implemented"]


@dataclass(frozen=True, slots=True)
class DispatchError:
    kind: _DispatchErrorKind
    message: str
    hint: str | None = None

    @property
    def is_fatal(self) -> bool:
        return self.kind == "unknown_release_type"


@dataclass(frozen=True, slots=True)
class ReleaseContext:
    """Everything an action needs; the client is injected, never global."""

    http: HttpClient
    owner: str
    repo: str
    page_size: int = MAX_PAGE_SIZE
    max_count: int = DEFAULT_MAX_TAGS
    api_url: str = DEFAULT_API_URL


@dataclass(frozen=True, slots=True)
class AlphaPlan:
    """What an alpha release would start from.

    Attributes:
        snapshot: Progression computed from the repository tags
        listing: The tags the snapshot was computed from
        release_line: Highest ``release-X.Y`` branch line, if any
        branches_error: Why branches could not be listed, if they could not
    """

    snapshot: Snapshot
    listing: TagListing
    release_line: tuple[int, int] | None
    branches_error: HttpError | None = None


def parse_release_type(value: str) -> Result[ReleaseType, DispatchError]:
    v = value.strip()
    for release_type in RELEASE_TYPES:
        if v == release_type:
            return Ok(release_type)
    return Err(
        DispatchError(
            kind="unknown_release_type",
            message=f"unknown release type {value}",
            hint=f"Expected one of: {', '.join(RELEASE_TYPES)}",
        )
    )


def plan_alpha(ctx: ReleaseContext) -> AlphaPlan:
    info = get_release_info(
        ctx.http,
        ctx.owner,
        ctx.repo,
        page_size=ctx.page_size,
        max_count=ctx.max_count,
        api_url=ctx.api_url,
    )
    branches = list_branches(ctx.http, ctx.owner, ctx.repo, api_url=ctx.api_url)
    if isinstance(branches, Err):
        return AlphaPlan(
            snapshot=info.snapshot,
            listing=info.listing,
            release_line=None,
            branches_error=branches.error,
        )
    return AlphaPlan(
        snapshot=info.snapshot,
        listing=info.listing,
        release_line=latest_release_line(branches.value),
    )


def _work_in_progress(release_type: ReleaseType) -> Err[DispatchError]:
    return Err(
        DispatchError(
            kind="not_implemented",
            message=f"{release_type} releases are not implemented yet (WIP)",
        )
    )


def dispatch(ctx: ReleaseContext, release_type: str) -> Result[AlphaPlan, DispatchError]:
    """Run the action for `release_type`.

    Returns:
        Ok(AlphaPlan) for alpha, Err(not_implemented) for beta/rc/normal,
        Err(unknown_release_type) for anything else (the fatal case)
    """
    parsed = parse_release_type(release_type)
    if isinstance(parsed, Err):
        return parsed

    match parsed.value:
        case "alpha":
            return Ok(plan_alpha(ctx))
        case "beta" | "rc" | "normal":
            return _work_in_progress(parsed.value)
        case _:
            raise AssertionError(f"unexpected release type: {parsed.value}")
