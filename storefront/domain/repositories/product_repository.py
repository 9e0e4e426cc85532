"""
Product catalog interface

Defines the contract for the upstream catalog that supplies product
snapshots. The cart and favorites never call it; callers pass the fetched
products in.
"""

from abc import ABC, abstractmethod
from typing import List

from storefront.domain.entities.product_entity import Category, Product, ProductListing


class ProductCatalog(ABC):
    """Repository interface for product catalog reads"""

    @abstractmethod
    async def get_all(self, limit: int, skip: int = 0) -> ProductListing:
        """Paginated listing of all products"""

    @abstractmethod
    async def get_categories(self) -> List[Category]:
        """All product categories"""

    @abstractmethod
    async def get_by_category(self, category: str) -> ProductListing:
        """Products in one category"""

    @abstractmethod
    async def search(self, query: str) -> ProductListing:
        """Products matching a search query"""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product:
        """A single product; raises ProductNotFoundError when missing"""
