"""Configuration file loading and validation helpers."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from cartographer.common import create_logger
from cartographer.constants import CONFIG_PATH_ENV, DEFAULT_CONFIG_FILENAME
from cartographer.utils.functools.models import Err, Ok, Result

from .models import (
    CartographerConfig,
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
)

logger = create_logger("config")


def resolve_config_path(path: Path | None = None) -> Path:
    """Pick the config file: explicit path, then $CARTOGRAPHER_CONFIG_PATH, then ./local.cartographer.json."""
    if path is not None:
        return path.expanduser()
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def load_config(path: Path) -> Result[CartographerConfig, ConfigError]:
    """Load and validate the application config. JSON files are read as YAML."""
    logger.debug("Loading config file", path=str(path))

    if not path.exists() or not path.is_file():
        logger.warning("Config file not found", path=str(path))
        return Err(
            ConfigNotFoundError(
                expected_path=path,
                message="Configuration file not found.",
            ),
        )

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Config file read error", path=str(path), error=str(exc))
        return Err(ConfigIOError(path=path, message=str(exc)))

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        logger.error("Config parse error", path=str(path), line=line, column=column, error=str(exc))
        return Err(
            ConfigYamlError(
                path=path,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            ),
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        logger.error("Config must be a mapping", path=str(path))
        return Err(
            ConfigValidationError(
                path=path,
                field=None,
                message="Configuration root must be a mapping of keys to values.",
            ),
        )

    try:
        config = CartographerConfig.model_validate(data)
    except ValidationError as exc:
        error_details = exc.errors()
        field = None
        message = str(exc)
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            field = ".".join(str(part) for part in loc) or None
            message = first.get("msg", message)
        logger.error("Config validation error", path=str(path), field=field, error=message)
        return Err(ConfigValidationError(path=path, field=field, message=message))

    logger.debug("Config validated", path=str(path), storage=config.storage.type)
    return Ok(config)
