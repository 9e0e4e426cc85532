"""
Cart Entity - line items and the running total

The ledger keeps one line per product id in insertion order together with a
cached total. Every mutation computes the new lines and the new total first
and assigns both at the end, so the two never disagree between calls.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from storefront.domain.entities.product_entity import Product
from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.product_id import ProductId
from storefront.infrastructure.utilities.constants import (
    PricingSettings,
    ValidationSettings,
)
from storefront.infrastructure.utilities.exceptions import InvalidQuantityError

ProductKey = Union[int, ProductId]


def _validate_quantity(quantity) -> int:
    if (
        isinstance(quantity, bool)
        or not isinstance(quantity, int)
        or quantity < ValidationSettings.MIN_CART_ITEM_QUANTITY
    ):
        raise InvalidQuantityError(quantity)
    return quantity


@dataclass(frozen=True)
class CartLineItem:
    """One product and its quantity"""

    product: Product
    quantity: int = 1

    def __post_init__(self):
        _validate_quantity(self.quantity)

    @property
    def product_id(self) -> int:
        return self.product.product_id

    @property
    def unit_price(self) -> Money:
        return self.product.price

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity

    def with_quantity(self, quantity: int) -> "CartLineItem":
        """Copy of this line with another quantity"""
        return replace(self, quantity=quantity)


class CartLedger:
    """Ordered cart line items keyed by product id, plus the cached total"""

    def __init__(self, currency: str = PricingSettings.DEFAULT_CURRENCY):
        self._currency = currency
        self._lines: Dict[int, CartLineItem] = {}
        self._total = Money.zero(currency)

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def total(self) -> Money:
        return self._total

    @property
    def items(self) -> Tuple[CartLineItem, ...]:
        return tuple(self._lines.values())

    @property
    def line_count(self) -> int:
        """Number of distinct products in the cart"""
        return len(self._lines)

    @property
    def item_count(self) -> int:
        """Sum of quantities over all lines"""
        return sum(line.quantity for line in self._lines.values())

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLineItem]:
        return iter(self.items)

    def is_empty(self) -> bool:
        return not self._lines

    def contains(self, product_id: ProductKey) -> bool:
        return int(product_id) in self._lines

    def get(self, product_id: ProductKey) -> Optional[CartLineItem]:
        return self._lines.get(int(product_id))

    def add_item(self, product: Product) -> CartLineItem:
        """Add one unit of ``product``, creating its line if needed"""
        key = product.product_id
        existing = self._lines.get(key)
        if existing is not None:
            line = existing.with_quantity(existing.quantity + 1)
        else:
            line = CartLineItem(product=product, quantity=1)
        new_total = self._total + line.unit_price

        lines = dict(self._lines)
        lines[key] = line
        self._commit(lines, new_total)
        return line

    def remove_item(self, product_id: ProductKey) -> bool:
        """Drop the line for ``product_id``; False when it is not in the cart"""
        key = int(product_id)
        line = self._lines.get(key)
        if line is None:
            return False
        new_total = self._total - line.line_total

        lines = dict(self._lines)
        del lines[key]
        self._commit(lines, new_total)
        return True

    def set_quantity(self, product_id: ProductKey, quantity: int) -> bool:
        """
        Replace the quantity of an existing line.

        Quantities below 1 raise InvalidQuantityError; use ``remove_item``
        to take a product out of the cart. Returns False when the product
        is not in the cart.
        """
        _validate_quantity(quantity)
        key = int(product_id)
        line = self._lines.get(key)
        if line is None:
            return False
        if line.quantity == quantity:
            return False

        if quantity > line.quantity:
            new_total = self._total + line.unit_price * (quantity - line.quantity)
        else:
            new_total = self._total - line.unit_price * (line.quantity - quantity)

        lines = dict(self._lines)
        lines[key] = line.with_quantity(quantity)
        self._commit(lines, new_total)
        return True

    def adjust_quantity(self, product_id: ProductKey, delta: int) -> bool:
        """Step a line's quantity by ``delta``; ignored if it would drop below 1"""
        line = self.get(product_id)
        if line is None:
            return False
        new_quantity = line.quantity + delta
        if new_quantity < ValidationSettings.MIN_CART_ITEM_QUANTITY:
            return False
        return self.set_quantity(product_id, new_quantity)

    def clear(self) -> None:
        self._commit({}, Money.zero(self._currency))

    def restore(self, lines: Iterable[CartLineItem]) -> None:
        """Replace the contents, merging duplicate ids and recomputing the total"""
        merged: Dict[int, CartLineItem] = {}
        for line in lines:
            existing = merged.get(line.product_id)
            if existing is not None:
                line = existing.with_quantity(existing.quantity + line.quantity)
            merged[line.product_id] = line
        self._commit(merged, self._sum(merged.values()))

    def recompute_total(self) -> Money:
        """Total derived from the lines, ignoring the cache"""
        return self._sum(self._lines.values())

    def is_consistent(self) -> bool:
        return self._total == self.recompute_total()

    def _sum(self, lines: Iterable[CartLineItem]) -> Money:
        total = Money.zero(self._currency)
        for line in lines:
            total = total + line.line_total
        return total

    def _commit(self, lines: Dict[int, CartLineItem], total: Money) -> None:
        self._lines = lines
        self._total = total

    def __repr__(self) -> str:
        return f"CartLedger(lines={len(self._lines)}, total={self._total!r})"
