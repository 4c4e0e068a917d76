"""Shared helpers for CLI commands."""

from __future__ import annotations

import os
from collections.abc import Mapping

from nextrelease.core.config import split_repository
from nextrelease.core.errors import ErrorCode
from nextrelease.cli.context import exit_error


def resolve_repository(value: str | None, env: Mapping[str, str] | None = None) -> tuple[str, str]:
    """Owner and repo from an ``owner/repo`` argument or ``GITHUB_REPOSITORY``."""
    env = os.environ if env is None else env
    raw = value if value else env.get("GITHUB_REPOSITORY", "")
    if not raw:
        exit_error(
            "repository required (OWNER/REPO or GITHUB_REPOSITORY)",
            code=ErrorCode.USER_ERROR,
        )
    slug = split_repository(raw)
    if slug is None:
        exit_error(f"invalid repository (expected OWNER/REPO): {raw}", code=ErrorCode.USER_ERROR)
    return slug


def resolve_token(value: str | None, env: Mapping[str, str] | None = None) -> str | None:
    env = os.environ if env is None else env
    if value:
        return value
    return env.get("INPUT_TOKEN") or env.get("GITHUB_TOKEN") or None
