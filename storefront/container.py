"""
Dependency injection container for the storefront core.

Built once at start-up and handed to whatever drives the UI; there is no
module-level instance. Creating it configures logging before any service
exists.
"""

import logging
from typing import Any, Dict, Optional

from storefront.application.store import Store
from storefront.application.use_cases.catalog_browsing_use_case import CatalogBrowsingUseCase
from storefront.domain.repositories.snapshot_repository import SnapshotRepository
from storefront.infrastructure.catalog.http_product_catalog import HttpProductCatalog
from storefront.infrastructure.configuration.config import Settings, get_config
from storefront.infrastructure.coupons.static_coupon_catalog import (
    StaticCouponCatalog,
    default_coupon_rules,
)
from storefront.infrastructure.logging.logging_config import setup_logging
from storefront.infrastructure.persistence.in_memory_snapshot_repository import (
    InMemorySnapshotRepository,
)
from storefront.infrastructure.persistence.persistence_adapter import PersistenceAdapter
from storefront.infrastructure.persistence.sqlalchemy_snapshot_repository import (
    SQLAlchemySnapshotRepository,
)

logger = logging.getLogger(__name__)


class Container:
    """Simple dependency injection container"""

    def __init__(self, settings: Optional[Settings] = None):
        self.config = settings or get_config()
        self.services: Dict[str, Any] = {}
        setup_logging(self.config)

    def get_coupon_catalog(self) -> StaticCouponCatalog:
        """Get the coupon catalog"""
        if "coupon_catalog" not in self.services:
            self.services["coupon_catalog"] = StaticCouponCatalog(
                default_coupon_rules(self.config.currency)
            )
        return self.services["coupon_catalog"]

    def get_snapshot_repository(self) -> SnapshotRepository:
        """Get the snapshot storage backend selected in settings"""
        if "snapshot_repository" not in self.services:
            if self.config.storage_backend == "sqlalchemy":
                repository = SQLAlchemySnapshotRepository(self.config.database_url)
            else:
                repository = InMemorySnapshotRepository()
            logger.info("Using %s snapshot storage", self.config.storage_backend)
            self.services["snapshot_repository"] = repository
        return self.services["snapshot_repository"]

    def get_persistence_adapter(self) -> PersistenceAdapter:
        """Get the persistence adapter for the configured namespace"""
        if "persistence_adapter" not in self.services:
            self.services["persistence_adapter"] = PersistenceAdapter(
                self.get_snapshot_repository(), self.config.storage_namespace
            )
        return self.services["persistence_adapter"]

    def get_store(self) -> Store:
        """Get the store, rehydrated from storage and saving on every change"""
        if "store" not in self.services:
            store = Store(self.get_coupon_catalog(), currency=self.config.currency)
            adapter = self.get_persistence_adapter()
            adapter.rehydrate(store)
            adapter.bind(store)
            self.services["store"] = store
        return self.services["store"]

    def get_product_catalog(self) -> HttpProductCatalog:
        """Get the HTTP product catalog client"""
        if "product_catalog" not in self.services:
            self.services["product_catalog"] = HttpProductCatalog(
                base_url=self.config.catalog_base_url,
                timeout=self.config.catalog_timeout_seconds,
                currency=self.config.currency,
            )
        return self.services["product_catalog"]

    def get_catalog_browsing(self) -> CatalogBrowsingUseCase:
        """Get the catalog browsing use case"""
        if "catalog_browsing" not in self.services:
            self.services["catalog_browsing"] = CatalogBrowsingUseCase(
                self.get_product_catalog(),
                page_size=self.config.catalog_page_size,
                prefetch_limit=self.config.catalog_prefetch_limit,
            )
        return self.services["catalog_browsing"]

    async def aclose(self) -> None:
        """Release network and database resources"""
        catalog = self.services.pop("product_catalog", None)
        if catalog is not None:
            await catalog.aclose()
        repository = self.services.get("snapshot_repository")
        if isinstance(repository, SQLAlchemySnapshotRepository):
            repository.dispose()
