"""Storage failure and configuration models."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from cartographer.common import NonEmptyString


class BaseStoreFailure(BaseModel):
    """Base storage failure."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    message: str


class NotFoundFailure(BaseStoreFailure):
    """Key absent from the store."""

    type: Literal["not-found"] = "not-found"
    key: str | None = None


class InternalFailure(BaseStoreFailure):
    """Unexpected I/O, parse or validation failure."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    type: Literal["internal-failure"] = "internal-failure"
    error: BaseException | None = Field(default=None, exclude=True, repr=False)


class CastFailure(BaseStoreFailure):
    """Raw data rejected by a model."""

    type: Literal["cast-failure"] = "cast-failure"


type StoreFailure = NotFoundFailure | InternalFailure


def internal_failure(message: str, error: BaseException | None = None) -> InternalFailure:
    if error is not None:
        message = f"{message}: {error}"
    return InternalFailure(message=message, error=error)


def not_found(key: str) -> NotFoundFailure:
    return NotFoundFailure(key=key, message=f"Key '{key}' not found")


class S3Credentials(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    access_key_id: NonEmptyString
    secret_access_key: SecretStr
    region: str | None = None
    endpoint_url: str | None = None


class MemoryStorageConfig(BaseModel):
    """Process-local storage; nothing survives a restart."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["memory"] = "memory"


class LocalJsonStorageConfig(BaseModel):
    """One JSON file per key under `dir/<namespace>/`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["local-json"] = "local-json"
    dir: Path


class S3JsonStorageConfig(BaseModel):
    """One JSON object per key at `<namespace>/<key>.json` in a bucket."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["s3-json"] = "s3-json"
    creds: S3Credentials
    bucket_name: NonEmptyString


StorageConfig = Annotated[
    MemoryStorageConfig | LocalJsonStorageConfig | S3JsonStorageConfig,
    Field(discriminator="type"),
]


__all__ = [
    "BaseStoreFailure",
    "CastFailure",
    "InternalFailure",
    "LocalJsonStorageConfig",
    "MemoryStorageConfig",
    "NotFoundFailure",
    "S3Credentials",
    "S3JsonStorageConfig",
    "StorageConfig",
    "StoreFailure",
    "internal_failure",
    "not_found",
]
