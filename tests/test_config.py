"""
Tests for configuration management
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from storefront.infrastructure.configuration.config import Settings, get_config, reset_config


class TestSettings:
    """Test Settings model"""

    def test_settings_default_values(self):
        """Test settings with default values"""
        settings = Settings(_env_file=None)
        assert settings.environment == "test"  # from mock_env
        assert settings.log_level == "DEBUG"
        assert settings.currency == "USD"
        assert settings.storage_namespace == "ecommerce-store"
        assert settings.storage_backend == "memory"
        assert settings.catalog_base_url == "https://dummyjson.com"
        assert settings.catalog_page_size == 12
        assert settings.enable_file_logging is False

    def test_settings_from_environment(self):
        """Test settings with custom values"""
        with patch.dict(os.environ, {
            "ENVIRONMENT": "production",
            "LOG_LEVEL": "warning",
            "CURRENCY": "eur",
            "STORAGE_BACKEND": "SQLAlchemy",
            "DATABASE_URL": "sqlite:///tmp/store.db",
            "CATALOG_PAGE_SIZE": "24",
        }):
            settings = Settings(_env_file=None)
            assert settings.environment == "production"
            assert settings.log_level == "WARNING"
            assert settings.currency == "EUR"
            assert settings.storage_backend == "sqlalchemy"
            assert settings.database_url == "sqlite:///tmp/store.db"
            assert settings.catalog_page_size == 24

    @pytest.mark.parametrize("overrides", [
        {"log_level": "LOUD"},
        {"storage_backend": "redis"},
        {"storage_namespace": ""},
        {"currency": "EURO"},
        {"catalog_timeout_seconds": 0},
        {"catalog_page_size": 0},
    ])
    def test_settings_validation_error(self, overrides):
        """Test settings validation error"""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)


class TestGetConfig:
    """Test the cached settings accessor"""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reset_config_rereads_environment(self):
        first = get_config()
        with patch.dict(os.environ, {"STORAGE_NAMESPACE": "other-store"}):
            reset_config()
            second = get_config()
        assert second is not first
        assert second.storage_namespace == "other-store"
