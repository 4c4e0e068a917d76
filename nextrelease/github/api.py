"""GitHub REST API calls used to feed the progression engine.

All functions take an HttpClient so tests never touch the network. Failures
stay at this boundary: tag listing returns what it collected so far, and
release lookups return None.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal
from urllib.parse import quote

from nextrelease.core.config import DEFAULT_API_URL, DEFAULT_MAX_TAGS, MAX_PAGE_SIZE
from nextrelease.core.result import Err, Ok, Result
from nextrelease.core.structured import as_obj_list, as_str_dict, get_str, names_of
from nextrelease.github.http import HttpError
from nextrelease.progression.semver import parse_release_branch

if TYPE_CHECKING:
    from nextrelease.github.http import HttpClient

__all__ = [
    "TagListing",
    "iter_tag_pages",
    "latest_release_line",
    "list_branches",
    "list_tags",
    "release_by_tag_url",
    "release_url_for_tag",
    "tags_url",
]

TagListingStop = Literal["empty_page", "max_count", "error"]


def _repo_path(owner: str, repo: str) -> str:
    return f"repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


def tags_url(
    owner: str,
    repo: str,
    page: int,
    page_size: int = MAX_PAGE_SIZE,
    api_url: str = DEFAULT_API_URL,
) -> str:
    return f"{api_url}/{_repo_path(owner, repo)}/tags?per_page={page_size}&page={page}"


def release_by_tag_url(owner: str, repo: str, tag: str, api_url: str = DEFAULT_API_URL) -> str:
    return f"{api_url}/{_repo_path(owner, repo)}/releases/tags/{quote(tag, safe='')}"


def branches_url(
    owner: str, repo: str, page_size: int = MAX_PAGE_SIZE, api_url: str = DEFAULT_API_URL
) -> str:
    return f"{api_url}/{_repo_path(owner, repo)}/branches?per_page={page_size}"


@dataclass(frozen=True, slots=True)
class TagListing:
    """Tag names gathered from the API, possibly partial.

    Attributes:
        tags: Tag names in API order
        stop: Why pagination ended
        error: The failure that ended pagination (stop == "error")
    """

    tags: tuple[str, ...]
    stop: TagListingStop
    error: HttpError | None = None

    @property
    def is_partial(self) -> bool:
        return self.error is not None


def iter_tag_pages(
    http: HttpClient,
    owner: str,
    repo: str,
    page_size: int = MAX_PAGE_SIZE,
    max_count: int = DEFAULT_MAX_TAGS,
    api_url: str = DEFAULT_API_URL,
) -> Iterator[Result[list[str], HttpError]]:
    """Lazily fetch pages of tag names, starting at page 1.

    Whole pages are yielded, so the total can overshoot `max_count` by up to
    one page. The sequence ends after an empty page, once `max_count` names
    were yielded, or right after yielding an Err.
    """
    page_size = max(1, min(page_size, MAX_PAGE_SIZE))
    seen = 0
    page = 1
    while seen < max_count:
        url = tags_url(owner, repo, page, page_size, api_url)
        result = http.get_json(url)
        if isinstance(result, Err):
            yield result
            return

        items = as_obj_list(result.value)
        if items is None:
            yield Err(HttpError(url=url, status=0, message="Expected JSON array of tags"))
            return

        if not items:
            return
        names = names_of(items)
        seen += len(names)
        yield Ok(names)
        page += 1


def list_tags(
    http: HttpClient,
    owner: str,
    repo: str,
    page_size: int = MAX_PAGE_SIZE,
    max_count: int = DEFAULT_MAX_TAGS,
    api_url: str = DEFAULT_API_URL,
) -> TagListing:
    """Collect tag names for a repository.

    Never raises: on failure, the tags gathered before the error are
    returned together with the error.
    """
    tags: list[str] = []
    for page in iter_tag_pages(http, owner, repo, page_size, max_count, api_url):
        if isinstance(page, Err):
            return TagListing(tags=tuple(tags), stop="error", error=page.error)
        tags.extend(page.value)

    stop: TagListingStop = "max_count" if len(tags) >= max_count else "empty_page"
    return TagListing(tags=tuple(tags), stop=stop)


def release_url_for_tag(
    http: HttpClient,
    owner: str,
    repo: str,
    tag: str,
    api_url: str = DEFAULT_API_URL,
) -> str | None:
    """URL of the published release for `tag`.

    Returns None when the tag has no release, the lookup fails, or the
    response has no ``html_url``.
    """
    result = http.get_json(release_by_tag_url(owner, repo, tag, api_url))
    if isinstance(result, Err):
        return None
    data = as_str_dict(result.value)
    if data is None:
        return None
    return get_str(data, "html_url")


def list_branches(
    http: HttpClient,
    owner: str,
    repo: str,
    api_url: str = DEFAULT_API_URL,
) -> Result[tuple[str, ...], HttpError]:
    """Branch names of a repository (first page only)."""
    url = branches_url(owner, repo, api_url=api_url)
    result = http.get_json(url)
    if isinstance(result, Err):
        return result
    items = as_obj_list(result.value)
    if items is None:
        return Err(HttpError(url=url, status=0, message="Expected JSON array of branches"))
    return Ok(tuple(names_of(items)))


def latest_release_line(branch_names: Iterable[str]) -> tuple[int, int] | None:
    """Highest (major, minor) among ``release-MAJOR.MINOR`` branches."""
    lines = [line for line in (parse_release_branch(n) for n in branch_names) if line is not None]
    if not lines:
        return None
    return max(lines)
