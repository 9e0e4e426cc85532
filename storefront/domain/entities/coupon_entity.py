"""
Coupon Entities - discount rules and the coupon applied to the cart
"""

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.value_objects.coupon_code import CouponCode
from storefront.domain.value_objects.money import Money
from storefront.infrastructure.utilities.constants import PricingSettings


@dataclass(frozen=True)
class CouponRule:
    """Named discount policy: a percentage capped at an absolute amount"""

    code: CouponCode
    discount_percent: Decimal
    max_discount_amount: Money

    def __post_init__(self):
        if not isinstance(self.discount_percent, Decimal):
            object.__setattr__(self, "discount_percent", Decimal(str(self.discount_percent)))
        if not (
            PricingSettings.MIN_DISCOUNT_PERCENT
            <= self.discount_percent
            <= PricingSettings.MAX_DISCOUNT_PERCENT
        ):
            raise ValueError("Discount percent must be between 0 and 100")

    @classmethod
    def create(
        cls,
        code: str,
        discount_percent,
        max_discount_amount,
        currency: str = PricingSettings.DEFAULT_CURRENCY,
    ) -> "CouponRule":
        return cls(
            code=CouponCode(code),
            discount_percent=discount_percent,
            max_discount_amount=Money(max_discount_amount, currency),
        )

    def discount_for(self, total: Money) -> Money:
        """min(total x percent / 100, cap)"""
        return total.percentage(self.discount_percent).min(self.max_discount_amount)


@dataclass(frozen=True)
class AppliedCoupon:
    """Coupon in effect for the session, with the code as the user typed it"""

    rule: CouponRule
    entered_code: str

    @property
    def code(self) -> str:
        return self.entered_code
