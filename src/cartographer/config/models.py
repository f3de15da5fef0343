"""Pydantic models for Cartographer configuration and its errors."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from cartographer.common import LoggingConfig
from cartographer.storage.models import MemoryStorageConfig, StorageConfig


class ConfigNotFoundError(BaseModel):
    """Configuration file not found at expected location."""

    model_config = ConfigDict(extra="forbid")

    expected_path: Path
    message: str


class ConfigYamlError(BaseModel):
    """YAML/JSON parsing error in configuration file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Schema validation error in configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


type ConfigError = ConfigNotFoundError | ConfigYamlError | ConfigValidationError | ConfigIOError


class CartographerConfig(BaseModel):
    """Application configuration file (local.cartographer.json)."""

    model_config = ConfigDict(extra="allow")

    storage: StorageConfig = Field(default_factory=MemoryStorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
