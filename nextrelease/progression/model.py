from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

DiagnosticKind = Literal[
    "no_valid_tags",
    "no_release",
    "no_prerelease",
    "no_work_in_progress",
    "inconsistent_progression",
]
DiagnosticLevel = Literal["info", "error"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Why a snapshot stopped early. Never raised, only reported."""

    kind: DiagnosticKind
    message: str
    level: DiagnosticLevel = "info"

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "level": self.level, "message": self.message}


@dataclass(frozen=True, slots=True)
class CurrentState:
    release: str | None = None
    # Latest prerelease on the same major.minor line that precedes `release`.
    prerelease: str | None = None


@dataclass(frozen=True, slots=True)
class NextState:
    prerelease: str | None = None


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Release progression computed from a list of tags.

    Fields hold the original tag names. A snapshot with unset fields is a
    normal outcome (e.g. no beta yet); `diagnostics` says where it stopped.
    """

    current: CurrentState = field(default_factory=CurrentState)
    next: NextState = field(default_factory=NextState)
    next_next: NextState = field(default_factory=NextState)
    next_release_is_minor: bool = False
    next_next_release_is_minor: bool = False
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def is_complete(self) -> bool:
        return self.next_next.prerelease is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "current": {
                "release": self.current.release,
                "prerelease": self.current.prerelease,
            },
            "next": {"prerelease": self.next.prerelease},
            "next_next": {"prerelease": self.next_next.prerelease},
            "next_release_is_minor": self.next_release_is_minor,
            "next_next_release_is_minor": self.next_next_release_is_minor,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass(frozen=True, slots=True)
class ReleaseUrls:
    """Published release page for each snapshot tag (None if unpublished)."""

    current_release: str | None = None
    current_prerelease: str | None = None
    next_prerelease: str | None = None
    next_next_prerelease: str | None = None


@dataclass(frozen=True, slots=True)
class EnrichedSnapshot:
    snapshot: Snapshot
    urls: ReleaseUrls = field(default_factory=ReleaseUrls)

    def to_dict(self) -> dict[str, object]:
        s = self.snapshot
        return {
            "current": {
                "release": s.current.release,
                "prerelease": s.current.prerelease,
                "release_url": self.urls.current_release,
                "prerelease_url": self.urls.current_prerelease,
            },
            "next": {
                "prerelease": s.next.prerelease,
                "prerelease_url": self.urls.next_prerelease,
            },
            "next_next": {
                "prerelease": s.next_next.prerelease,
                "prerelease_url": self.urls.next_next_prerelease,
            },
            "next_release_is_minor": s.next_release_is_minor,
            "next_next_release_is_minor": s.next_next_release_is_minor,
            "diagnostics": [d.to_dict() for d in s.diagnostics],
        }
