"""
Pricing use case

Derives the discount and final total from the cart total and the applied
coupon. Pure: nothing here stores state.
"""

import logging
from typing import Optional

from storefront.application.dtos.pricing_dtos import PriceBreakdown
from storefront.domain.entities.coupon_entity import AppliedCoupon
from storefront.domain.repositories.coupon_repository import CouponCatalog
from storefront.domain.value_objects.money import Money
from storefront.infrastructure.utilities.exceptions import InvalidCouponError


class PricingCalculator:
    """
    Prices a cart snapshot.

    Without a coupon the discount is zero. With one, the discount is
    ``min(total x percent / 100, cap)`` and the final total is the
    subtotal minus that discount. All arithmetic is exact decimal.
    """

    def __init__(self, coupon_catalog: CouponCatalog):
        self._coupon_catalog = coupon_catalog
        self._logger = logging.getLogger(self.__class__.__name__)

    def calculate(
        self, cart_total: Money, applied_coupon: Optional[AppliedCoupon] = None
    ) -> PriceBreakdown:
        """Price ``cart_total`` with an optional coupon"""
        if applied_coupon is None:
            return PriceBreakdown(
                subtotal=cart_total,
                discount=Money.zero(cart_total.currency),
                final_total=cart_total,
            )

        discount = applied_coupon.rule.discount_for(cart_total)
        return PriceBreakdown(
            subtotal=cart_total,
            discount=discount,
            final_total=cart_total - discount,
            applied_coupon=applied_coupon,
        )

    def apply_coupon(self, code: str) -> AppliedCoupon:
        """Resolve a typed code; raises InvalidCouponError when unknown"""
        rule = self._coupon_catalog.find(code)
        if rule is None:
            self._logger.info("Rejected coupon code %r", code)
            raise InvalidCouponError(code)
        self._logger.info("Resolved coupon %s (%s%%)", rule.code, rule.discount_percent)
        return AppliedCoupon(rule=rule, entered_code=code)
