"""GitHub REST API access (tags, releases, branches)."""

from .api import TagListing, list_branches, list_tags, release_url_for_tag
from .http import HttpClient, HttpError, MockHttpClient, RealHttpClient

__all__ = [
    "TagListing",
    "list_branches",
    "list_tags",
    "release_url_for_tag",
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
]
