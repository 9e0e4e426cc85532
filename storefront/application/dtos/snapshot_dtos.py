"""
Snapshot DTOs

Serializable copy of the whole store: auth, cart, filter and favorites.
Keys are camelCase, the same field names the web client used for its
persisted state; money fields serialize as decimal strings.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from storefront.domain.entities.cart_entity import CartLineItem
from storefront.domain.entities.filter_entity import FilterState, SortOption
from storefront.domain.entities.identity_entity import Identity
from storefront.domain.entities.product_entity import Product
from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.product_id import ProductId
from storefront.infrastructure.utilities.constants import PricingSettings, StorageSettings


def _decimal_from_number(value):
    # Floats arrive from JSON; str() keeps 9.99 as Decimal("9.99")
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class SnapshotModel(BaseModel):
    """Base for snapshot records"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ProductSnapshot(SnapshotModel):
    """Product fields as stored and as served by the catalog API"""

    id: int = Field(gt=0)
    title: str = Field(min_length=1)
    price: Decimal = Field(ge=0)
    category: str = ""
    description: str = ""
    thumbnail: str = ""
    images: List[str] = Field(default_factory=list)
    brand: Optional[str] = None
    stock: Optional[int] = Field(default=None, ge=0)
    rating: Optional[float] = None
    discount_percentage: Optional[float] = None

    @field_validator("price", mode="before")
    @classmethod
    def normalize_price(cls, value):
        return _decimal_from_number(value)

    @classmethod
    def from_entity(cls, product: Product) -> "ProductSnapshot":
        return cls(
            id=product.product_id,
            title=product.title,
            price=product.price.amount,
            category=product.category,
            description=product.description,
            thumbnail=product.thumbnail,
            images=list(product.images),
            brand=product.brand,
            stock=product.stock,
            rating=product.rating,
            discount_percentage=product.discount_percentage,
        )

    def to_entity(self, currency: str = PricingSettings.DEFAULT_CURRENCY) -> Product:
        return Product(
            id=ProductId(self.id),
            title=self.title,
            price=Money(self.price, currency),
            category=self.category,
            description=self.description,
            thumbnail=self.thumbnail,
            images=tuple(self.images),
            brand=self.brand,
            stock=self.stock,
            rating=self.rating,
            discount_percentage=self.discount_percentage,
        )


class CartLineSnapshot(ProductSnapshot):
    """A product plus its quantity, stored flat"""

    quantity: int = Field(ge=1)

    @classmethod
    def from_line(cls, line: CartLineItem) -> "CartLineSnapshot":
        data = ProductSnapshot.from_entity(line.product).model_dump()
        return cls(**data, quantity=line.quantity)

    def to_line(self, currency: str = PricingSettings.DEFAULT_CURRENCY) -> CartLineItem:
        return CartLineItem(product=self.to_entity(currency), quantity=self.quantity)


class CartSnapshot(SnapshotModel):
    items: List[CartLineSnapshot] = Field(default_factory=list)
    total: Decimal = Field(default=Decimal("0"), ge=0)

    @field_validator("total", mode="before")
    @classmethod
    def normalize_total(cls, value):
        return _decimal_from_number(value)


class UserSnapshot(SnapshotModel):
    id: int
    username: str = Field(min_length=1)
    email: str = ""
    first_name: str = ""
    token: str = Field(min_length=1)

    @classmethod
    def from_identity(cls, identity: Identity) -> "UserSnapshot":
        return cls(
            id=identity.user_id,
            username=identity.username,
            email=identity.email,
            first_name=identity.first_name,
            token=identity.token,
        )

    def to_identity(self) -> Identity:
        return Identity(
            username=self.username,
            token=self.token,
            user_id=self.id,
            first_name=self.first_name,
            email=self.email,
        )


class AuthSnapshot(SnapshotModel):
    user: Optional[UserSnapshot] = None
    is_authenticated: bool = False


class FilterSnapshot(SnapshotModel):
    category: str = ""
    sort_by: str = ""
    search_query: str = ""

    @field_validator("sort_by")
    @classmethod
    def validate_sort_by(cls, value: str) -> str:
        return SortOption.parse(value).value

    @classmethod
    def from_state(cls, state: FilterState) -> "FilterSnapshot":
        return cls(
            category=state.category,
            sort_by=state.sort_by.value,
            search_query=state.search_query,
        )

    def to_state(self) -> FilterState:
        return FilterState(
            category=self.category,
            sort_by=SortOption.parse(self.sort_by),
            search_query=self.search_query,
        )


class StoreSnapshot(SnapshotModel):
    """Complete serializable copy of the store at one instant"""

    version: int = StorageSettings.SNAPSHOT_VERSION
    auth: AuthSnapshot = Field(default_factory=AuthSnapshot)
    cart: CartSnapshot = Field(default_factory=CartSnapshot)
    filter: FilterSnapshot = Field(default_factory=FilterSnapshot)
    favorites: List[ProductSnapshot] = Field(default_factory=list)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, payload: str) -> "StoreSnapshot":
        return cls.model_validate_json(payload)
