"""Release-progression inference.

Given the tags of a repository, work out the latest release, the prerelease
line it came from, and the next two prerelease lines being worked on.
Progression is assumed to be alpha -> beta -> rc -> release, and a project is
assumed to continue its current major before bumping it, so a minor-bump line
always wins over a major-bump line.

Pure computation: no I/O, never raises. Early exits are reported as
Diagnostic entries on the returned Snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from nextrelease.progression.model import CurrentState, Diagnostic, NextState, Snapshot
from nextrelease.progression.semver import ParsedTag, parse_tag

__all__ = [
    "classify_and_project",
    "latest_on_line",
    "next_on_line",
    "partition",
    "sort_versions",
]


def sort_versions(tags: Iterable[str]) -> list[ParsedTag]:
    """Parse tags, drop non-semver ones, and sort highest first.

    The sort is stable: tags with equal precedence (``v1.0.0`` and ``1.0.0``)
    keep their input order.
    """
    parsed = [p for p in (parse_tag(t) for t in tags) if p is not None]
    return sorted(parsed, key=lambda p: p.version, reverse=True)


def partition(tags: Sequence[ParsedTag]) -> tuple[list[ParsedTag], list[ParsedTag]]:
    """Split into (releases, prereleases), keeping the order of `tags`."""
    releases = [t for t in tags if not t.is_prerelease]
    prereleases = [t for t in tags if t.is_prerelease]
    return releases, prereleases


def latest_on_line(tags: Sequence[ParsedTag], major: int, minor: int) -> ParsedTag | None:
    """First tag of a descending list that lies on the major.minor line."""
    for t in tags:
        if t.line == (major, minor):
            return t
    return None


def next_on_line(
    candidates: Sequence[ParsedTag], base: ParsedTag
) -> tuple[ParsedTag, bool] | None:
    """Pick the highest candidate on the line that follows `base`.

    The minor bump line (same major, minor + 1) is preferred; otherwise any
    candidate on major + 1. Returns (tag, is_minor) or None.
    """
    major, minor = base.line
    minor_line = [t for t in candidates if t.line == (major, minor + 1)]
    if minor_line:
        return (minor_line[0], True)
    major_line = [t for t in candidates if t.version.major == major + 1]
    if major_line:
        return (major_line[0], False)
    return None


def classify_and_project(tags: Iterable[str]) -> Snapshot:
    """Compute the release progression snapshot for a set of tags.

    Args:
        tags: Raw tag names, unordered; duplicates and non-semver names are fine

    Returns:
        A Snapshot, populated as far as the tag history allows
    """
    ordered = sort_versions(tags)
    if not ordered:
        return Snapshot(
            diagnostics=(
                Diagnostic(
                    kind="no_valid_tags",
                    message="no valid semantic version tags found",
                ),
            )
        )

    releases, prereleases = partition(ordered)
    if not releases:
        return Snapshot(
            diagnostics=(
                Diagnostic(kind="no_release", message="no latest release", level="error"),
            )
        )

    release = releases[0]
    # Prereleases leading up to the release; later patch prereleases on the
    # same line are work in progress, not the current state.
    preceding = [t for t in prereleases if t.version < release.version]
    prerelease = latest_on_line(preceding, *release.line)
    if prerelease is None:
        return Snapshot(
            current=CurrentState(release=release.name),
            diagnostics=(
                Diagnostic(
                    kind="no_prerelease",
                    message=f"no prerelease found on the {release.line[0]}.{release.line[1]} line",
                    level="error",
                ),
            ),
        )

    current = CurrentState(release=release.name, prerelease=prerelease.name)
    candidates = [t for t in prereleases if t.version > release.version]
    if not candidates:
        return Snapshot(
            current=current,
            diagnostics=(
                Diagnostic(
                    kind="no_work_in_progress",
                    message=f"no prereleases after {release.name}",
                ),
            ),
        )

    found = next_on_line(candidates, release)
    if found is None:
        return Snapshot(
            current=current,
            diagnostics=(
                Diagnostic(
                    kind="inconsistent_progression",
                    message="next release is neither minor nor major",
                    level="error",
                ),
            ),
        )
    next_tag, next_is_minor = found

    found_after = next_on_line(candidates, next_tag)
    if found_after is None:
        return Snapshot(
            current=current,
            next=NextState(prerelease=next_tag.name),
            next_release_is_minor=next_is_minor,
        )
    next_next_tag, next_next_is_minor = found_after

    return Snapshot(
        current=current,
        next=NextState(prerelease=next_tag.name),
        next_next=NextState(prerelease=next_next_tag.name),
        next_release_is_minor=next_is_minor,
        next_next_release_is_minor=next_next_is_minor,
    )
