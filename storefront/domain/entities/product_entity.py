# pylint: disable=too-many-instance-attributes
"""
Product Entity - read-only snapshot of a catalog product
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple, Union

from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.product_id import ProductId
from storefront.infrastructure.utilities.constants import PricingSettings


@dataclass(frozen=True)
class Product:
    """Product snapshot as received from the product catalog"""

    id: ProductId
    title: str
    price: Money
    category: str = ""
    description: str = ""
    thumbnail: str = ""
    images: Tuple[str, ...] = field(default_factory=tuple)
    brand: Optional[str] = None
    stock: Optional[int] = None
    rating: Optional[float] = None
    discount_percentage: Optional[float] = None

    def __post_init__(self):
        """Validate the product after initialization"""
        if not isinstance(self.title, str) or not self.title:
            raise ValueError("Product title cannot be empty")
        for name in ("category", "description", "thumbnail"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"Product {name} must be a string")
        if self.brand is not None and not isinstance(self.brand, str):
            raise ValueError("Product brand must be a string")
        if self.stock is not None and self.stock < 0:
            raise ValueError("Product stock cannot be negative")
        # Lists coming from JSON are frozen so the snapshot stays hashable
        if not isinstance(self.images, tuple):
            object.__setattr__(self, "images", tuple(self.images))

    @property
    def product_id(self) -> int:
        """Plain integer id used as the cart and favorites key"""
        return self.id.value

    @classmethod
    def create(
        cls,
        product_id: int,
        title: str,
        price: Union[str, int, float, Decimal],
        currency: str = PricingSettings.DEFAULT_CURRENCY,
        **details,
    ) -> "Product":
        """Create a product from primitive values"""
        return cls(
            id=ProductId(product_id),
            title=title,
            price=Money(price, currency),
            **details,
        )


@dataclass(frozen=True)
class Category:
    """Product category as listed by the catalog"""

    slug: str
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ProductListing:
    """One page of products returned by the catalog"""

    products: Tuple[Product, ...]
    total: int
    skip: int = 0
    limit: int = 0
