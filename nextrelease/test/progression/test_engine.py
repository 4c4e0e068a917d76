from __future__ import annotations

import pytest

from nextrelease.progression.engine import (
    classify_and_project,
    latest_on_line,
    next_on_line,
    partition,
    sort_versions,
)
from nextrelease.progression.model import CurrentState, NextState, Snapshot
from nextrelease.progression.semver import parse_tag


def _kinds(snapshot: Snapshot) -> list[str]:
    return [d.kind for d in snapshot.diagnostics]


def test_empty_input_gives_empty_snapshot() -> None:
    snapshot = classify_and_project([])

    assert snapshot.current == CurrentState()
    assert snapshot.next == NextState()
    assert snapshot.next_next == NextState()
    assert snapshot.next_release_is_minor is False
    assert snapshot.next_next_release_is_minor is False
    assert _kinds(snapshot) == ["no_valid_tags"]


def test_only_garbage_tags_gives_empty_snapshot() -> None:
    snapshot = classify_and_project(["latest", "nightly", "1.2", "v01.2.3", "release-1.2"])

    assert snapshot.to_dict() == Snapshot().to_dict()
    assert _kinds(snapshot) == ["no_valid_tags"]


def test_prereleases_only_has_no_current_release() -> None:
    snapshot = classify_and_project(["v1.0.0-alpha.0", "v1.0.0-beta.0"])

    assert snapshot.current.release is None
    assert snapshot.current.prerelease is None
    assert _kinds(snapshot) == ["no_release"]
    assert snapshot.diagnostics[0].level == "error"


def test_release_without_prerelease_on_its_line_stops_early() -> None:
    snapshot = classify_and_project(
        ["v1.0.0", "v1.1.0-alpha.0", "v1.1.0-alpha.1", "v1.2.0-alpha.0"]
    )

    assert snapshot.current.release == "v1.0.0"
    assert snapshot.current.prerelease is None
    assert snapshot.next.prerelease is None
    assert snapshot.next_next.prerelease is None
    assert _kinds(snapshot) == ["no_prerelease"]


def test_full_progression_minor_then_major() -> None:
    snapshot = classify_and_project(
        ["v1.0.0", "v1.0.0-beta.1", "v1.1.0-alpha.0", "v2.0.0-alpha.0"]
    )

    assert snapshot.current.release == "v1.0.0"
    assert snapshot.current.prerelease == "v1.0.0-beta.1"
    assert snapshot.next.prerelease == "v1.1.0-alpha.0"
    assert snapshot.next_release_is_minor is True
    assert snapshot.next_next.prerelease == "v2.0.0-alpha.0"
    assert snapshot.next_next_release_is_minor is False
    assert snapshot.diagnostics == ()
    assert snapshot.is_complete


def test_full_progression_two_minor_lines() -> None:
    tags = [
        "v1.3.0",
        "v1.3.0-rc.0",
        "v1.3.0-beta.2",
        "v1.4.0-rc.1",
        "v1.4.0-rc.0",
        "v1.4.0-beta.3",
        "v1.5.0-alpha.7",
        "v1.5.0-alpha.6",
        "v1.2.0",
    ]

    snapshot = classify_and_project(tags)

    assert snapshot.current == CurrentState(release="v1.3.0", prerelease="v1.3.0-rc.0")
    assert snapshot.next == NextState(prerelease="v1.4.0-rc.1")
    assert snapshot.next_next == NextState(prerelease="v1.5.0-alpha.7")
    assert snapshot.next_release_is_minor is True
    assert snapshot.next_next_release_is_minor is True


def test_no_work_in_progress() -> None:
    snapshot = classify_and_project(["v1.0.0", "v1.0.0-rc.0", "v0.9.0", "v0.9.0-rc.0"])

    assert snapshot.current == CurrentState(release="v1.0.0", prerelease="v1.0.0-rc.0")
    assert snapshot.next.prerelease is None
    assert _kinds(snapshot) == ["no_work_in_progress"]
    assert snapshot.diagnostics[0].level == "info"


def test_patch_prerelease_is_inconsistent_progression() -> None:
    # After v1.0.0, a v1.0.1 prerelease is neither on 1.1 nor on 2.x.
    snapshot = classify_and_project(["v1.0.0", "v1.0.0-rc.0", "v1.0.1-rc.0"])

    assert snapshot.current == CurrentState(release="v1.0.0", prerelease="v1.0.0-rc.0")
    assert snapshot.next.prerelease is None
    assert snapshot.next_next.prerelease is None
    assert _kinds(snapshot) == ["inconsistent_progression"]
    assert snapshot.diagnostics[0].level == "error"


def test_skipped_minor_line_is_inconsistent_progression() -> None:
    snapshot = classify_and_project(["v1.0.0", "v1.0.0-rc.0", "v1.2.0-alpha.0"])

    assert snapshot.next.prerelease is None
    assert _kinds(snapshot) == ["inconsistent_progression"]


def test_minor_line_preferred_over_major_line() -> None:
    snapshot = classify_and_project(
        ["v1.0.0", "v1.0.0-rc.0", "v2.0.0-rc.0", "v1.1.0-alpha.0"]
    )

    assert snapshot.next.prerelease == "v1.1.0-alpha.0"
    assert snapshot.next_release_is_minor is True


def test_major_line_used_when_no_minor_line() -> None:
    snapshot = classify_and_project(
        ["v1.4.0", "v1.4.0-rc.0", "v2.0.0-beta.1", "v2.0.0-alpha.3", "v3.0.0-alpha.0"]
    )

    assert snapshot.next.prerelease == "v2.0.0-beta.1"
    assert snapshot.next_release_is_minor is False
    # next-next is relative to the 2.0 line: no 2.1, so the 3.x line.
    assert snapshot.next_next.prerelease == "v3.0.0-alpha.0"
    assert snapshot.next_next_release_is_minor is False


def test_next_next_minor_line_follows_next_line() -> None:
    # 1.2 is the minor bump of the next line (1.1), not of the current one.
    snapshot = classify_and_project(
        ["v1.0.0", "v1.0.0-rc.0", "v1.1.0-beta.0", "v1.2.0-alpha.0", "v2.0.0-alpha.0"]
    )

    assert snapshot.next.prerelease == "v1.1.0-beta.0"
    assert snapshot.next_next.prerelease == "v1.2.0-alpha.0"
    assert snapshot.next_next_release_is_minor is True


def test_major_line_accepts_any_minor() -> None:
    snapshot = classify_and_project(["v1.0.0", "v1.0.0-rc.0", "v2.3.0-alpha.0"])

    assert snapshot.next.prerelease == "v2.3.0-alpha.0"
    assert snapshot.next_release_is_minor is False


def test_next_next_missing_is_not_a_diagnostic() -> None:
    snapshot = classify_and_project(["v1.0.0", "v1.0.0-rc.0", "v1.1.0-beta.0"])

    assert snapshot.next.prerelease == "v1.1.0-beta.0"
    assert snapshot.next_next.prerelease is None
    assert snapshot.next_next_release_is_minor is False
    assert snapshot.diagnostics == ()
    assert not snapshot.is_complete


def test_prerelease_sorting_uses_semver_precedence() -> None:
    # Numeric identifiers compare numerically, rc > beta > alpha lexically.
    snapshot = classify_and_project(
        [
            "v1.0.0",
            "v1.0.0-beta.2",
            "v1.0.0-beta.10",
            "v1.0.0-alpha.11",
            "v1.1.0-alpha.9",
            "v1.1.0-alpha.10",
            "v1.1.0-beta.0",
        ]
    )

    assert snapshot.current.prerelease == "v1.0.0-beta.10"
    assert snapshot.next.prerelease == "v1.1.0-beta.0"


def test_input_order_does_not_matter() -> None:
    tags = ["v2.0.0-alpha.0", "v1.0.0-beta.1", "v1.1.0-alpha.0", "v1.0.0"]

    assert classify_and_project(tags) == classify_and_project(list(reversed(tags)))


def test_idempotent() -> None:
    tags = ["v1.0.0", "v1.0.0-beta.1", "v1.1.0-alpha.0", "garbage"]

    assert classify_and_project(tags) == classify_and_project(tags)


def test_accepts_generator_input() -> None:
    snapshot = classify_and_project(t for t in ["v1.0.0", "v1.0.0-rc.0"])

    assert snapshot.current.prerelease == "v1.0.0-rc.0"


def test_equal_versions_first_in_input_wins() -> None:
    snapshot = classify_and_project(["1.0.0", "v1.0.0", "v1.0.0-rc.0"])

    assert snapshot.current.release == "1.0.0"


def test_duplicates_are_harmless() -> None:
    tags = ["v1.0.0", "v1.0.0", "v1.0.0-rc.0", "v1.1.0-alpha.0", "v1.1.0-alpha.0"]

    snapshot = classify_and_project(tags)

    assert snapshot.current.release == "v1.0.0"
    assert snapshot.next.prerelease == "v1.1.0-alpha.0"


def test_latest_release_ignores_older_lines_with_more_prereleases() -> None:
    snapshot = classify_and_project(
        ["v0.9.0", "v0.10.0-alpha.5", "v0.10.0", "v0.10.0-rc.1", "v0.11.0-alpha.0"]
    )

    assert snapshot.current == CurrentState(release="v0.10.0", prerelease="v0.10.0-rc.1")
    assert snapshot.next.prerelease == "v0.11.0-alpha.0"


@pytest.mark.parametrize(
    "tags",
    [
        ["v1.0.0", "v1.0.0-beta.1", "v1.1.0-alpha.0", "v2.0.0-alpha.0", "junk"],
        ["v3.2.1", "v3.2.0-rc.2", "v3.3.0-alpha.0", "v3.4.0-alpha.0", "v4.0.0-alpha.0"],
        ["v0.1.0", "v0.1.0-rc.0", "v1.0.0-alpha.0", "v1.1.0-alpha.0"],
        ["v1.0.0", "v1.0.0-rc.0", "v1.0.1-rc.0"],
    ],
)
def test_snapshot_properties(tags: list[str]) -> None:
    snapshot = classify_and_project(tags)
    valid = {t for t in tags if parse_tag(t) is not None}

    release = snapshot.current.release
    assert release is not None
    release_v = parse_tag(release)
    assert release_v is not None
    releases = [p for p in sort_versions(tags) if not p.is_prerelease]
    assert release_v.version == releases[0].version

    fields = (
        snapshot.current.prerelease,
        snapshot.next.prerelease,
        snapshot.next_next.prerelease,
    )
    for value in fields:
        assert value is None or value in valid

    if snapshot.current.prerelease is not None:
        pre = parse_tag(snapshot.current.prerelease)
        assert pre is not None
        assert pre.line == release_v.line
        assert pre.version <= release_v.version

    if snapshot.next.prerelease is not None:
        nxt = parse_tag(snapshot.next.prerelease)
        assert nxt is not None
        assert nxt.version > release_v.version
        major, minor = release_v.line
        if snapshot.next_release_is_minor:
            assert nxt.line == (major, minor + 1)
        else:
            assert nxt.version.major == major + 1

        if snapshot.next_next.prerelease is not None:
            nn = parse_tag(snapshot.next_next.prerelease)
            assert nn is not None
            if snapshot.next_next_release_is_minor:
                assert nn.line == (nxt.line[0], nxt.line[1] + 1)
            else:
                assert nn.version.major == nxt.version.major + 1


def test_sort_versions_drops_invalid_and_sorts_descending() -> None:
    ordered = sort_versions(["v1.0.0", "nope", "v1.0.0-rc.1", "v1.1.0", "v0.1.0"])

    assert [p.name for p in ordered] == ["v1.1.0", "v1.0.0", "v1.0.0-rc.1", "v0.1.0"]


def test_partition_keeps_order() -> None:
    releases, prereleases = partition(sort_versions(["v1.0.0-rc.0", "v1.0.0", "v1.1.0-alpha.0"]))

    assert [p.name for p in releases] == ["v1.0.0"]
    assert [p.name for p in prereleases] == ["v1.1.0-alpha.0", "v1.0.0-rc.0"]


def test_latest_on_line() -> None:
    ordered = sort_versions(["v1.2.0-rc.0", "v1.2.0-beta.0", "v1.3.0-alpha.0"])

    found = latest_on_line(ordered, 1, 2)
    assert found is not None
    assert found.name == "v1.2.0-rc.0"
    assert latest_on_line(ordered, 2, 0) is None


def test_next_on_line_returns_none_without_candidates() -> None:
    base = parse_tag("v1.0.0")
    assert base is not None

    assert next_on_line([], base) is None
