"""Helpers for reading untyped JSON and TOML payloads.

GitHub API responses and config files arrive as plain objects; these helpers
validate their shape at the boundary and narrow the types.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def as_obj_list(obj: object) -> ObjList | None:
    if isinstance(obj, list):
        return cast(ObjList, obj)
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value from a mapping, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    return as_str_dict(table.get(key))


def names_of(items: ObjList) -> list[str]:
    """Collect the ``name`` field of each object in a GitHub listing.

    Entries without a string name are skipped.
    """
    names: list[str] = []
    for item in items:
        d = as_str_dict(item)
        if d is None:
            continue
        name = d.get("name")
        if isinstance(name, str) and name:
            names.append(name)
    return names
