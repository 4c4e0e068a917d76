from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

import semver

PrereleaseStage = Literal["alpha", "beta", "rc"]

_STAGES: tuple[PrereleaseStage, ...] = ("alpha", "beta", "rc")
_RELEASE_BRANCH_RE = re.compile(r"^release-(0|[1-9]\d*)\.(0|[1-9]\d*)$")


@dataclass(frozen=True, slots=True)
class ParsedTag:
    """A tag name together with the semantic version it denotes."""

    name: str
    version: semver.Version

    @property
    def is_prerelease(self) -> bool:
        return self.version.prerelease is not None

    @property
    def line(self) -> tuple[int, int]:
        return (self.version.major, self.version.minor)


def parse_tag(name: str) -> ParsedTag | None:
    """Parse a tag such as ``v1.2.0-beta.3``; None if it is not a semantic version.

    Surrounding whitespace and a leading ``=`` or ``v`` are accepted, as loose
    semver readers do. The rest must be strict ``MAJOR.MINOR.PATCH[-PRE][+BUILD]``.
    """
    text = name.strip().lstrip("=").strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    try:
        version = semver.Version.parse(text)
    except (ValueError, TypeError):
        return None
    return ParsedTag(name=name, version=version)


def prerelease_stage(version: semver.Version) -> PrereleaseStage | None:
    if version.prerelease is None:
        return None
    label = version.prerelease.split(".", 1)[0].lower()
    for stage in _STAGES:
        if label == stage:
            return stage
    return None


def parse_release_branch(name: str) -> tuple[int, int] | None:
    """Parse a ``release-MAJOR.MINOR`` branch name into its line."""
    m = _RELEASE_BRANCH_RE.match(name)
    if m is None:
        return None
    return (int(m.group(1)), int(m.group(2)))
