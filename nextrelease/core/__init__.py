"""Shared building blocks: results, exit codes, configuration."""

from .config import ConfigError, ReleaseConfig, ToolSettings, load_inputs, load_settings
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "ReleaseConfig",
    "ToolSettings",
    "load_inputs",
    "load_settings",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
