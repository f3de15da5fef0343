"""Logging utilities for Cartographer using Loguru.

This module provides logging configuration for both CLI and library usage:
- CLI usage: stderr or file-based logging with rotation and retention
- Library usage: Logging disabled by default, can be enabled by library users
"""

import sys
from pathlib import Path
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from cartographer.constants import APP_NAME

from .models import AppInfo


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_file: str | None = Field(default=None)
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig) -> int:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    sink: Path | object
    file_options: dict[str, str] = {}
    if config.log_file:
        sink = Path(config.log_file).expanduser()
        sink.parent.mkdir(parents=True, exist_ok=True)
        file_options = {"rotation": config.rotation, "retention": config.retention}
    else:
        sink = sys.stderr

    if config.format == "json":
        handler_id = logger.add(
            sink,
            level=config.log_level,
            serialize=True,
            diagnose=(app_info.environment == "dev"),
            **file_options,
        )
    else:
        handler_id = logger.add(
            sink,
            level=config.log_level,
            format=_get_text_format(),
            diagnose=(app_info.environment == "dev"),
            **file_options,
        )

    logger.debug(
        "CLI logging initialized",
        log_file=config.log_file,
        level=config.log_level,
        format=config.format,
    )

    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )

    return handler_id


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
