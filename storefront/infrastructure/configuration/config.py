"""
Configuration management for the storefront core
"""

import threading
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.infrastructure.utilities.constants import (
    CatalogSettings,
    PricingSettings,
    StorageSettings,
)


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application settings
    environment: str = Field(default="development", description="Application environment")
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default="logs", description="Directory for log files")
    enable_file_logging: bool = Field(
        default=False, description="Write JSON logs to a rotating file"
    )

    # Pricing
    currency: str = Field(
        default=PricingSettings.DEFAULT_CURRENCY, min_length=3, max_length=3,
        description="Currency code for cart totals and coupon caps",
    )

    # Persistence
    storage_namespace: str = Field(
        default=StorageSettings.DEFAULT_NAMESPACE,
        min_length=1,
        max_length=StorageSettings.MAX_NAMESPACE_LENGTH,
        description="Key the store snapshot is saved under",
    )
    storage_backend: str = Field(default="memory", description="memory or sqlalchemy")
    database_url: str = Field(
        default="sqlite:///data/storefront.db", description="Database connection URL"
    )

    # Product catalog
    catalog_base_url: str = Field(
        default=CatalogSettings.DEFAULT_BASE_URL, description="Product catalog API base URL"
    )
    catalog_timeout_seconds: float = Field(
        default=CatalogSettings.DEFAULT_TIMEOUT_SECONDS, gt=0,
        description="Catalog request timeout",
    )
    catalog_page_size: int = Field(
        default=CatalogSettings.DEFAULT_PAGE_SIZE, gt=0, description="Products per page"
    )
    catalog_prefetch_limit: int = Field(
        default=CatalogSettings.DEFAULT_PREFETCH_LIMIT, gt=0,
        description="Products fetched for client-side sorting when no filter is set",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise and check the log level name"""
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value}")
        return level

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, value: str) -> str:
        """Only the shipped snapshot backends are accepted"""
        backend = value.lower()
        if backend not in StorageSettings.SUPPORTED_BACKENDS:
            raise ValueError(f"Unsupported storage backend: {value}")
        return backend

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, value: str) -> str:
        return value.upper()


_settings_instance: Optional[Settings] = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Forget the cached settings so the next get_config() re-reads the environment"""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
