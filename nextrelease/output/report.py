"""Rendering of snapshots and collaborator failures."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from nextrelease.output.console import Style
from nextrelease.progression.semver import parse_tag, prerelease_stage

if TYPE_CHECKING:
    from nextrelease.github.api import TagListing
    from nextrelease.output.console import ConsoleProtocol
    from nextrelease.progression.model import EnrichedSnapshot, Snapshot

__all__ = ["print_diagnostics", "print_listing_problems", "print_snapshot", "write_github_output"]


def _bump(tag: str, is_minor: bool) -> str:
    """Bump annotation shown under a next tag; the stage is for display only."""
    kind = "minor" if is_minor else "major"
    parsed = parse_tag(tag)
    stage = prerelease_stage(parsed.version) if parsed is not None else None
    if stage is None:
        return f"  ({kind} bump)"
    return f"  ({kind} bump, {stage})"


def print_diagnostics(snapshot: Snapshot, console: ConsoleProtocol) -> None:
    for d in snapshot.diagnostics:
        if d.level == "error":
            console.error(d.message)
        else:
            console.info(d.message)


def print_listing_problems(listing: TagListing, console: ConsoleProtocol) -> None:
    if listing.error is not None:
        console.warning(
            f"stopped listing tags after {len(listing.tags)}: {listing.error}"
        )


def print_snapshot(
    snapshot: Snapshot,
    console: ConsoleProtocol,
    enriched: EnrichedSnapshot | None = None,
) -> None:
    """Human-readable snapshot, one line per known tag."""

    def line(label: str, tag: str | None, url: str | None) -> None:
        if tag is None:
            console.print(f"{label}: -", Style.DIM)
            return
        suffix = f"  {url}" if url else ""
        console.print(f"{label}: {tag}{suffix}")

    urls = enriched.urls if enriched is not None else None
    console.header("Release progression")
    line("current release", snapshot.current.release, urls.current_release if urls else None)
    line(
        "current prerelease",
        snapshot.current.prerelease,
        urls.current_prerelease if urls else None,
    )
    line("next prerelease", snapshot.next.prerelease, urls.next_prerelease if urls else None)
    if snapshot.next.prerelease is not None:
        console.print(_bump(snapshot.next.prerelease, snapshot.next_release_is_minor), Style.DIM)
    line(
        "next-next prerelease",
        snapshot.next_next.prerelease,
        urls.next_next_prerelease if urls else None,
    )
    if snapshot.next_next.prerelease is not None:
        console.print(
            _bump(snapshot.next_next.prerelease, snapshot.next_next_release_is_minor), Style.DIM
        )
    print_diagnostics(snapshot, console)


def _output_lines(snapshot: Snapshot) -> list[str]:
    def s(value: str | None) -> str:
        return value or ""

    return [
        f"current_release={s(snapshot.current.release)}",
        f"current_prerelease={s(snapshot.current.prerelease)}",
        f"next_prerelease={s(snapshot.next.prerelease)}",
        f"next_next_prerelease={s(snapshot.next_next.prerelease)}",
        f"next_release_is_minor={str(snapshot.next_release_is_minor).lower()}",
        f"next_next_release_is_minor={str(snapshot.next_next_release_is_minor).lower()}",
    ]


def write_github_output(snapshot: Snapshot, path: Path | None = None) -> Path | None:
    """Append step outputs to ``$GITHUB_OUTPUT``; no-op outside Actions.

    Returns the file written, or None.
    """
    if path is None:
        env = os.environ.get("GITHUB_OUTPUT")
        if not env:
            return None
        path = Path(env)
    with path.open("a", encoding="utf-8") as fh:
        for entry in _output_lines(snapshot):
            fh.write(f"{entry}\n")
    return path
