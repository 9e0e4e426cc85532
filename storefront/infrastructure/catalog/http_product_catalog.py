"""
HTTP Product Catalog

ProductCatalog implementation for a DummyJSON-compatible product API.
Failures are reported, never retried.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from storefront.application.dtos.snapshot_dtos import ProductSnapshot
from storefront.domain.entities.product_entity import Category, Product, ProductListing
from storefront.domain.repositories.product_repository import ProductCatalog
from storefront.infrastructure.utilities.constants import CatalogSettings, PricingSettings
from storefront.infrastructure.utilities.exceptions import CatalogError, ProductNotFoundError


class HttpProductCatalog(ProductCatalog):
    """Async client for the upstream product catalog"""

    def __init__(
        self,
        base_url: str = CatalogSettings.DEFAULT_BASE_URL,
        timeout: float = CatalogSettings.DEFAULT_TIMEOUT_SECONDS,
        currency: str = PricingSettings.DEFAULT_CURRENCY,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._currency = currency
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )
        self._logger = logging.getLogger(self.__class__.__name__)

    async def __aenter__(self) -> "HttpProductCatalog":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as e:
            self._logger.error("Catalog request %s failed: %s", path, e)
            raise CatalogError(f"Catalog request failed: {e}", path) from e
        self._logger.debug("GET %s -> %s", path, response.status_code)
        return response

    def _json(self, response: httpx.Response) -> Any:
        try:
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            self._logger.error("Catalog returned %s for %s", response.status_code, response.url)
            raise CatalogError(
                f"Catalog returned HTTP {response.status_code}", str(response.url)
            ) from e
        except ValueError as e:
            raise CatalogError("Catalog returned invalid JSON", str(response.url)) from e

    def _product(self, data: Any) -> Product:
        try:
            return ProductSnapshot.model_validate(data).to_entity(self._currency)
        except (PydanticValidationError, ValueError) as e:
            raise CatalogError(f"Malformed product in catalog response: {e}") from e

    def _listing(self, data: Any) -> ProductListing:
        if not isinstance(data, dict) or not isinstance(data.get("products"), list):
            raise CatalogError("Catalog response has no product list")
        products = tuple(self._product(item) for item in data["products"])
        return ProductListing(
            products=products,
            total=data.get("total", len(products)),
            skip=data.get("skip", 0),
            limit=data.get("limit", len(products)),
        )

    async def get_all(self, limit: int, skip: int = 0) -> ProductListing:
        response = await self._get("/products", params={"limit": limit, "skip": skip})
        return self._listing(self._json(response))

    async def get_categories(self) -> List[Category]:
        data = self._json(await self._get("/products/categories"))
        if not isinstance(data, list):
            raise CatalogError("Catalog categories response is not a list")
        categories = []
        for item in data:
            # Older API versions return bare slugs, newer ones objects
            if isinstance(item, str):
                categories.append(Category(slug=item, name=item))
            elif isinstance(item, dict) and item.get("slug"):
                categories.append(Category(slug=item["slug"], name=item.get("name") or item["slug"]))
            else:
                raise CatalogError(f"Malformed category in catalog response: {item!r}")
        return categories

    async def get_by_category(self, category: str) -> ProductListing:
        response = await self._get(f"/products/category/{quote(category, safe='')}")
        return self._listing(self._json(response))

    async def search(self, query: str) -> ProductListing:
        response = await self._get("/products/search", params={"q": query})
        return self._listing(self._json(response))

    async def get_by_id(self, product_id: int) -> Product:
        response = await self._get(f"/products/{int(product_id)}")
        if response.status_code == httpx.codes.NOT_FOUND:
            raise ProductNotFoundError(product_id)
        return self._product(self._json(response))
