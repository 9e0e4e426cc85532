"""
Pricing DTOs

Results of pricing the cart and of checking out.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from storefront.domain.entities.cart_entity import CartLineItem
from storefront.domain.entities.coupon_entity import AppliedCoupon
from storefront.domain.value_objects.money import Money


@dataclass(frozen=True)
class PriceBreakdown:
    """Subtotal, coupon discount and final total"""

    subtotal: Money
    discount: Money
    final_total: Money
    applied_coupon: Optional[AppliedCoupon] = None

    @property
    def has_discount(self) -> bool:
        return self.applied_coupon is not None


@dataclass(frozen=True)
class CheckoutReceipt:
    """What was bought when the cart was checked out"""

    lines: Tuple[CartLineItem, ...]
    breakdown: PriceBreakdown
    username: Optional[str] = None
    placed_at: datetime = field(default_factory=datetime.now)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)
