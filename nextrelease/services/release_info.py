from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nextrelease.core.config import DEFAULT_API_URL, DEFAULT_MAX_TAGS, MAX_PAGE_SIZE
from nextrelease.github.api import TagListing, list_tags, release_url_for_tag
from nextrelease.progression.engine import classify_and_project
from nextrelease.progression.enrich import enrich
from nextrelease.progression.model import EnrichedSnapshot, Snapshot

if TYPE_CHECKING:
    from nextrelease.github.http import HttpClient


@dataclass(frozen=True, slots=True)
class ReleaseInfo:
    """A snapshot together with the tag listing it was computed from."""

    snapshot: Snapshot
    listing: TagListing


@dataclass(frozen=True, slots=True)
class EnrichedReleaseInfo:
    enriched: EnrichedSnapshot
    listing: TagListing


def get_release_info(
    http: HttpClient,
    owner: str,
    repo: str,
    *,
    page_size: int = MAX_PAGE_SIZE,
    max_count: int = DEFAULT_MAX_TAGS,
    api_url: str = DEFAULT_API_URL,
) -> ReleaseInfo:
    # The listing is complete (or as complete as it gets) before projection.
    listing = list_tags(http, owner, repo, page_size, max_count, api_url)
    return ReleaseInfo(snapshot=classify_and_project(listing.tags), listing=listing)


def get_release_info_extra(
    http: HttpClient,
    owner: str,
    repo: str,
    *,
    page_size: int = MAX_PAGE_SIZE,
    max_count: int = DEFAULT_MAX_TAGS,
    api_url: str = DEFAULT_API_URL,
) -> EnrichedReleaseInfo:
    """Same as get_release_info, with release page URLs attached."""
    info = get_release_info(
        http, owner, repo, page_size=page_size, max_count=max_count, api_url=api_url
    )

    def lookup(tag: str) -> str | None:
        return release_url_for_tag(http, owner, repo, tag, api_url)

    return EnrichedReleaseInfo(enriched=enrich(info.snapshot, lookup), listing=info.listing)
