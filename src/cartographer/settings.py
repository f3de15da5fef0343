from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cartographer.common import AppInfo, LoggingConfig
from cartographer.config import CartographerConfig
from cartographer.constants import ENV_PREFIX
from cartographer.storage.models import MemoryStorageConfig, StorageConfig


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    storage: StorageConfig = Field(default_factory=MemoryStorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def merged_with(self, config: CartographerConfig) -> Settings:
        """Config-file values, overridden by anything set through the environment."""
        overridden = self.model_fields_set
        return self.model_copy(
            update={
                "storage": self.storage if "storage" in overridden else config.storage,
                "logging": self.logging if "logging" in overridden else config.logging,
            }
        )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "AppInfo",
    "Settings",
    "get_settings",
]
