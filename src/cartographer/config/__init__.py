"""Public configuration API for Cartographer."""

from __future__ import annotations

from .loader import load_config, resolve_config_path
from .models import (
    CartographerConfig,
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
)

__all__ = [
    "CartographerConfig",
    "ConfigError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "ConfigYamlError",
    "load_config",
    "resolve_config_path",
]
