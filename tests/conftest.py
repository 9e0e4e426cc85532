"""
Test configuration and fixtures for the storefront core
"""

import logging
import os
from decimal import Decimal
from unittest.mock import patch

import pytest
import structlog

from storefront.application.store import Store
from storefront.domain.entities.product_entity import Product
from storefront.infrastructure.configuration.config import reset_config
from storefront.infrastructure.coupons.static_coupon_catalog import StaticCouponCatalog


@pytest.fixture(autouse=True)
def mock_env():
    """Isolate tests from the developer's environment and cached settings"""
    test_env = {
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "DEBUG",
    }
    reset_config()
    with patch.dict(os.environ, test_env, clear=True):
        yield test_env
    reset_config()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo root handlers and structlog configuration installed by a test"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def make_product():
    """Factory for product snapshots"""

    def _make(product_id: int = 1, price="9.99", title=None, **details) -> Product:
        return Product.create(
            product_id,
            title or f"Product {product_id}",
            Decimal(str(price)),
            **details,
        )

    return _make


@pytest.fixture
def phone(make_product):
    return make_product(1, "9.99", "iPhone 9", category="smartphones")


@pytest.fixture
def laptop(make_product):
    return make_product(2, "1249.50", "MacBook Pro", category="laptops")


@pytest.fixture
def coupon_catalog():
    return StaticCouponCatalog()


@pytest.fixture
def store(coupon_catalog):
    return Store(coupon_catalog)
