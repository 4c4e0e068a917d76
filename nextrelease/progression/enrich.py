from __future__ import annotations

from collections.abc import Callable

from nextrelease.progression.model import EnrichedSnapshot, ReleaseUrls, Snapshot

ReleaseUrlLookup = Callable[[str], "str | None"]


def enrich(snapshot: Snapshot, lookup: ReleaseUrlLookup) -> EnrichedSnapshot:
    """Attach release page URLs to a snapshot.

    `lookup` is only called for tags the snapshot actually holds, once each.
    """

    def url_for(tag: str | None) -> str | None:
        if tag is None:
            return None
        return lookup(tag)

    return EnrichedSnapshot(
        snapshot=snapshot,
        urls=ReleaseUrls(
            current_release=url_for(snapshot.current.release),
            current_prerelease=url_for(snapshot.current.prerelease),
            next_prerelease=url_for(snapshot.next.prerelease),
            next_next_prerelease=url_for(snapshot.next_next.prerelease),
        ),
    )
