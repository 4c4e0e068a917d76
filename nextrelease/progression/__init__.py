"""Tag classification and release-progression inference (pure, no I/O)."""

from .engine import classify_and_project
from .enrich import enrich
from .model import CurrentState, Diagnostic, EnrichedSnapshot, NextState, ReleaseUrls, Snapshot
from .semver import ParsedTag, parse_tag

__all__ = [
    "classify_and_project",
    "enrich",
    "CurrentState",
    "Diagnostic",
    "EnrichedSnapshot",
    "NextState",
    "ReleaseUrls",
    "Snapshot",
    "ParsedTag",
    "parse_tag",
]
