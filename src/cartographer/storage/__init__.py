"""Cartographer storage module."""

from .directory import DirectoryMapStore, create_directory_map_store
from .errors import StoreConstructionError, UnknownStorageTypeError
from .factory import HasStorage, create_model_map_store
from .json_modeled import STRING_MODEL, JSONModeledMapStore, PydanticModel, create_json_modeled_storage
from .memory import MemoryMapStore, create_memory_map_store
from .models import (
    CastFailure,
    InternalFailure,
    LocalJsonStorageConfig,
    MemoryStorageConfig,
    NotFoundFailure,
    S3Credentials,
    S3JsonStorageConfig,
    StorageConfig,
    StoreFailure,
)
from .protocol import MapStore, Model
from .s3 import S3MapStore, create_s3_map_store
from .transform import (
    TransformKeyMapStore,
    transform_key,
    transform_key_with_file_extension,
    transform_key_with_namespace,
)

__all__ = [
    "STRING_MODEL",
    "CastFailure",
    "DirectoryMapStore",
    "HasStorage",
    "InternalFailure",
    "JSONModeledMapStore",
    "LocalJsonStorageConfig",
    "MapStore",
    "MemoryMapStore",
    "MemoryStorageConfig",
    "Model",
    "NotFoundFailure",
    "PydanticModel",
    "S3Credentials",
    "S3JsonStorageConfig",
    "S3MapStore",
    "StorageConfig",
    "StoreConstructionError",
    "StoreFailure",
    "TransformKeyMapStore",
    "UnknownStorageTypeError",
    "create_directory_map_store",
    "create_json_modeled_storage",
    "create_memory_map_store",
    "create_model_map_store",
    "create_s3_map_store",
    "transform_key",
    "transform_key_with_file_extension",
    "transform_key_with_namespace",
]
