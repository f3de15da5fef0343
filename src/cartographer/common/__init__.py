"""Common models and types used across Cartographer modules."""

from cartographer.utils.types import JsonValue, KeySegment, NonEmptyString

from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo

__all__ = [
    "AppInfo",
    "JsonValue",
    "KeySegment",
    "LoggingConfig",
    "NonEmptyString",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "setup_cli_logging",
]
