"""
Catalog browsing use case

Fetches products for the current filter and applies the client-side sort and
pagination the storefront list page uses.
"""

import logging
import math
from typing import Iterable, List, Sequence, TypeVar

from storefront.application.dtos.catalog_dtos import Page
from storefront.domain.entities.filter_entity import FilterState, SortOption
from storefront.domain.entities.product_entity import Category, Product
from storefront.domain.repositories.product_repository import ProductCatalog
from storefront.infrastructure.utilities.constants import CatalogSettings

T = TypeVar("T")


def sort_products(products: Iterable[Product], sort_by: SortOption) -> List[Product]:
    """Stable sort by price; catalog order when no sort is selected"""
    products = list(products)
    if sort_by is SortOption.PRICE_ASC:
        return sorted(products, key=lambda product: product.price.amount)
    if sort_by is SortOption.PRICE_DESC:
        return sorted(products, key=lambda product: product.price.amount, reverse=True)
    return products


def paginate(items: Sequence[T], page: int, limit: int) -> Page[T]:
    """Slice ``items`` into 1-based pages of ``limit``"""
    if page < 1:
        raise ValueError("Page must be at least 1")
    if limit < 1:
        raise ValueError("Limit must be at least 1")
    total_pages = math.ceil(len(items) / limit)
    start = (page - 1) * limit
    return Page(
        items=tuple(items[start:start + limit]),
        page=page,
        limit=limit,
        total_items=len(items),
        total_pages=total_pages,
    )


class CatalogBrowsingUseCase:
    """
    Use case for browsing the product catalog

    A search query takes precedence over a category. With neither, the first
    ``prefetch_limit`` products are fetched once and sorted client-side.
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        page_size: int = CatalogSettings.DEFAULT_PAGE_SIZE,
        prefetch_limit: int = CatalogSettings.DEFAULT_PREFETCH_LIMIT,
    ):
        self._catalog = catalog
        self._page_size = page_size
        self._prefetch_limit = prefetch_limit
        self._logger = logging.getLogger(self.__class__.__name__)

    async def browse(self, filter_state: FilterState, page: int = 1) -> Page[Product]:
        """Products for ``filter_state``, sorted and paginated"""
        if filter_state.search_query:
            listing = await self._catalog.search(filter_state.search_query)
        elif filter_state.category:
            listing = await self._catalog.get_by_category(filter_state.category)
        else:
            listing = await self._catalog.get_all(self._prefetch_limit, 0)

        products = sort_products(listing.products, filter_state.sort_by)
        result = paginate(products, page, self._page_size)
        self._logger.debug(
            "Browse page %d/%d with %d products (filter=%s)",
            result.page,
            result.total_pages,
            result.total_items,
            filter_state,
        )
        return result

    async def categories(self) -> List[Category]:
        return await self._catalog.get_categories()

    async def product_details(self, product_id: int) -> Product:
        return await self._catalog.get_by_id(product_id)
