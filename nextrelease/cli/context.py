from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer

from nextrelease.core.config import DEFAULT_CONFIG_FILE, ToolSettings, load_settings
from nextrelease.core.errors import ErrorCode
from nextrelease.core.result import Err
from nextrelease.github.http import HttpClient, RealHttpClient
from nextrelease.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    settings: ToolSettings
    http: HttpClient
    console: ConsoleProtocol


def exit_error(message: str, *, code: ErrorCode) -> NoReturn:
    typer.echo(f"error: {message}", err=True)
    if os.environ.get("GITHUB_ACTIONS") == "true":
        # Workflow annotation, same effect as core.setFailed in a JS action.
        typer.echo(f"::error::{message}")
    raise typer.Exit(code=int(code))


def make_console() -> ConsoleProtocol:
    return RichConsole()


def build_context(*, token: str | None, config_path: Path | None) -> CLIContext:
    path = config_path if config_path is not None else Path.cwd() / DEFAULT_CONFIG_FILE
    settings_result = load_settings(path)
    if isinstance(settings_result, Err):
        exit_error(str(settings_result.error), code=ErrorCode.ENV_ERROR)
    settings = settings_result.value

    return CLIContext(
        settings=settings,
        http=RealHttpClient(timeout=settings.timeout, token=token),
        console=make_console(),
    )
