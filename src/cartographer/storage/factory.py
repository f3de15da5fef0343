"""Assemble a typed MapStore from a storage configuration."""

from __future__ import annotations

from typing import Any, Protocol

from cartographer.common import create_logger

from .directory import create_directory_map_store
from .errors import UnknownStorageTypeError
from .json_modeled import create_json_modeled_storage
from .memory import create_memory_map_store
from .models import LocalJsonStorageConfig, MemoryStorageConfig, S3JsonStorageConfig, StorageConfig
from .protocol import MapStore, Model
from .s3 import create_s3_map_store
from .transform import transform_key_with_file_extension, transform_key_with_namespace

logger = create_logger("storage.factory")

FILE_EXTENSION = "json"


class HasStorage(Protocol):
    """Anything carrying a storage configuration, such as the application config."""

    @property
    def storage(self) -> StorageConfig: ...


async def create_model_map_store[K, V](
    config: StorageConfig | HasStorage,
    value_model: Model[V],
    key_model: Model[K],
    namespace: str,
    *,
    s3_client: Any | None = None,  # noqa: ANN401
) -> MapStore[K, V]:
    """Build the store for one namespace.

    `config` is a storage configuration or anything carrying one at
    `.storage`. An unknown storage type raises `UnknownStorageTypeError`.
    """
    storage: object = getattr(config, "storage", config)

    match storage:
        case S3JsonStorageConfig(creds=creds, bucket_name=bucket_name):
            logger.info("Assembling S3 JSON store", namespace=namespace, bucket=bucket_name)
            backend = await create_s3_map_store(creds, bucket_name, client=s3_client)
            return create_json_modeled_storage(
                transform_key_with_namespace(
                    namespace,
                    transform_key_with_file_extension(FILE_EXTENSION, backend),
                ),
                value_model,
                key_model,
            )
        case LocalJsonStorageConfig(dir=directory):
            logger.info("Assembling local JSON store", namespace=namespace, dir=str(directory))
            backend = await create_directory_map_store(directory / namespace)
            return create_json_modeled_storage(
                transform_key_with_file_extension(FILE_EXTENSION, backend),
                value_model,
                key_model,
            )
        case MemoryStorageConfig():
            logger.info("Assembling memory store", namespace=namespace)
            return create_memory_map_store()
        case _:
            raise UnknownStorageTypeError(getattr(storage, "type", storage))
