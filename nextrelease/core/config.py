"""Typed configuration for nextrelease.

Two sources feed a run:
- ToolSettings: optional ``[nextrelease]`` table in a TOML file (API base URL,
  pagination limits, HTTP timeout).
- ReleaseConfig: the dispatcher inputs (token, owner, repo, release_type),
  taken from CLI options first and then from the environment using the
  GitHub Actions ``INPUT_<NAME>`` convention.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_table

__all__ = [
    "ConfigError",
    "ReleaseConfig",
    "ToolSettings",
    "DEFAULT_API_URL",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_MAX_TAGS",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TIMEOUT",
    "MAX_PAGE_SIZE",
    "load_inputs",
    "load_settings",
    "split_repository",
]

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_CONFIG_FILE = "nextrelease.toml"
# GitHub returns at most 100 items per page.
MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = MAX_PAGE_SIZE
DEFAULT_MAX_TAGS = 40
DEFAULT_TIMEOUT = 30.0

_REQUIRED_INPUTS = ("token", "owner", "repo", "release_type")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Configuration could not be loaded or is incomplete."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message} ({self.path})"
        return self.message


@dataclass(frozen=True, slots=True)
class ToolSettings:
    """Settings read from the ``[nextrelease]`` TOML table."""

    api_url: str = DEFAULT_API_URL
    page_size: int = DEFAULT_PAGE_SIZE
    max_tags: int = DEFAULT_MAX_TAGS
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result[ToolSettings, str]:
        """Build settings from a parsed TOML root, validating value types."""
        table: StrDict = get_table(data, "nextrelease") or {}

        api_url = table.get("api_url", DEFAULT_API_URL)
        if not isinstance(api_url, str) or not api_url.strip():
            return Err("nextrelease.api_url must be a non-empty string")

        page_size = table.get("page_size", DEFAULT_PAGE_SIZE)
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
            return Err("nextrelease.page_size must be a positive integer")

        max_tags = table.get("max_tags", DEFAULT_MAX_TAGS)
        if isinstance(max_tags, bool) or not isinstance(max_tags, int) or max_tags < 1:
            return Err("nextrelease.max_tags must be a positive integer")

        timeout = table.get("timeout", DEFAULT_TIMEOUT)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            return Err("nextrelease.timeout must be a positive number")

        return Ok(
            cls(
                api_url=api_url.strip().rstrip("/"),
                page_size=min(page_size, MAX_PAGE_SIZE),
                max_tags=max_tags,
                timeout=float(timeout),
            )
        )


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Inputs of the release dispatcher.

    The token is a secret: it is excluded from repr so it never ends up in
    console output or tracebacks.
    """

    token: str = field(repr=False)
    owner: str
    repo: str
    release_type: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except PermissionError:
        return Err(ConfigError("Permission denied reading config", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_settings(path: Path) -> Result[ToolSettings, ConfigError]:
    """Load settings from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the TOML file (usually ``nextrelease.toml``)

    Returns:
        Ok(ToolSettings) on success, Err(ConfigError) on unreadable or invalid files
    """
    if not path.is_file():
        return Ok(ToolSettings())

    parsed = _parse_toml(path)
    if isinstance(parsed, Err):
        return parsed

    settings = ToolSettings.from_dict(parsed.value)
    if isinstance(settings, Err):
        return Err(ConfigError(settings.error, path=path))
    return settings


def split_repository(value: str) -> tuple[str, str] | None:
    """Split an ``owner/repo`` slug; None if it is not exactly two parts."""
    parts = value.strip().split("/")
    if len(parts) != 2 or not all(p.strip() for p in parts):
        return None
    return (parts[0].strip(), parts[1].strip())


def _from_env(env: Mapping[str, str], name: str) -> str | None:
    # Same key normalisation as GitHub Actions' core.getInput.
    value = env.get(f"INPUT_{name.replace(' ', '_').upper()}")
    if value is None:
        return None
    return value.strip() or None


def load_inputs(
    env: Mapping[str, str],
    overrides: Mapping[str, str | None] | None = None,
) -> Result[ReleaseConfig, ConfigError]:
    """Resolve the dispatcher inputs.

    Lookup order per input: explicit override (CLI option), ``INPUT_<NAME>``,
    then fallbacks: ``GITHUB_TOKEN`` for the token and ``GITHUB_REPOSITORY``
    for owner/repo.

    Returns:
        Ok(ReleaseConfig), or Err(ConfigError) naming every missing input
    """
    values: dict[str, str | None] = {}
    for name in _REQUIRED_INPUTS:
        override = (overrides or {}).get(name)
        values[name] = (override.strip() or None) if override is not None else None
        if values[name] is None:
            values[name] = _from_env(env, name)

    if values["token"] is None:
        values["token"] = env.get("GITHUB_TOKEN", "").strip() or None

    if values["owner"] is None or values["repo"] is None:
        slug = split_repository(env.get("GITHUB_REPOSITORY", ""))
        if slug is not None:
            values["owner"] = values["owner"] or slug[0]
            values["repo"] = values["repo"] or slug[1]

    missing = [name for name in _REQUIRED_INPUTS if values[name] is None]
    if missing:
        return Err(ConfigError(f"Input required and not supplied: {', '.join(missing)}"))

    return Ok(
        ReleaseConfig(
            token=values["token"] or "",
            owner=values["owner"] or "",
            repo=values["repo"] or "",
            release_type=values["release_type"] or "",
        )
    )
