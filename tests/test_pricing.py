"""
Pricing Tests - coupon lookup and price breakdown
"""

from decimal import Decimal

import pytest

from storefront.application.use_cases.pricing_use_case import PricingCalculator
from storefront.domain.entities.coupon_entity import CouponRule
from storefront.domain.value_objects.money import Money
from storefront.infrastructure.coupons.static_coupon_catalog import (
    DEFAULT_COUPONS,
    StaticCouponCatalog,
    default_coupon_rules,
)
from storefront.infrastructure.utilities.constants import ErrorCodes
from storefront.infrastructure.utilities.exceptions import InvalidCouponError


@pytest.fixture
def calculator(coupon_catalog):
    return PricingCalculator(coupon_catalog)


class TestStaticCouponCatalog:
    """Test the shipped coupon set"""

    def test_shipped_rules(self, coupon_catalog):
        assert len(coupon_catalog) == 5
        rule = coupon_catalog.find("SITA40")
        assert rule.discount_percent == Decimal("40")
        assert rule.max_discount_amount == Money(Decimal("80"))

    @pytest.mark.parametrize("code", ["RAM50", "ram50", "Ram50"])
    def test_case_insensitive(self, coupon_catalog, code):
        assert str(coupon_catalog.find(code).code) == "RAM50"

    @pytest.mark.parametrize("code", ["BOGUS", "", " RAM50", "RAM50 ", None, 50])
    def test_unknown_codes(self, coupon_catalog, code):
        assert coupon_catalog.find(code) is None

    def test_duplicate_codes_rejected(self):
        with pytest.raises(ValueError):
            StaticCouponCatalog([CouponRule.create("A", 10, 5), CouponRule.create("a", 20, 5)])

    def test_currency(self):
        rules = default_coupon_rules("EUR")
        assert all(rule.max_discount_amount.currency == "EUR" for rule in rules)


class TestPricingCalculator:
    """Test discount and final total computation"""

    def test_no_coupon(self, calculator):
        breakdown = calculator.calculate(Money(Decimal("250")))
        assert breakdown.discount.is_zero()
        assert breakdown.final_total == Money(Decimal("250"))
        assert not breakdown.has_discount

    def test_ram50_is_capped(self, calculator):
        """50% of 250 is 125, capped at 100"""
        applied = calculator.apply_coupon("RAM50")
        breakdown = calculator.calculate(Money(Decimal("250")), applied)
        assert breakdown.subtotal == Money(Decimal("250"))
        assert breakdown.discount == Money(Decimal("100"))
        assert breakdown.final_total == Money(Decimal("150"))
        assert breakdown.has_discount

    def test_percentage_below_cap(self, calculator):
        applied = calculator.apply_coupon("laxman10")
        breakdown = calculator.calculate(Money(Decimal("49.95")), applied)
        assert breakdown.discount.amount == Decimal("4.995")
        assert breakdown.final_total.rounded() == Decimal("44.96")

    def test_empty_cart_with_coupon(self, calculator):
        applied = calculator.apply_coupon("RAM50")
        breakdown = calculator.calculate(Money.zero(), applied)
        assert breakdown.discount.is_zero()
        assert breakdown.final_total.is_zero()

    def test_unknown_coupon(self, calculator):
        with pytest.raises(InvalidCouponError) as exc_info:
            calculator.apply_coupon("BOGUS")
        assert exc_info.value.code == "BOGUS"
        assert exc_info.value.user_message == ErrorCodes.INVALID_COUPON_MESSAGE

    def test_entered_code_is_kept(self, calculator):
        assert calculator.apply_coupon("ram50").code == "ram50"

    @pytest.mark.parametrize("code", [code for code, _, _ in DEFAULT_COUPONS])
    @pytest.mark.parametrize("total", ["0", "0.01", "19.99", "40", "99.99", "200", "250", "10000"])
    def test_discount_bounds(self, calculator, code, total):
        """0 <= discount <= min(total x percent, cap) and final total >= 0"""
        subtotal = Money(Decimal(total))
        applied = calculator.apply_coupon(code)
        breakdown = calculator.calculate(subtotal, applied)
        rule = applied.rule
        assert breakdown.discount.amount >= 0
        assert breakdown.discount <= rule.max_discount_amount
        assert breakdown.discount.amount <= subtotal.amount * rule.discount_percent / 100
        assert breakdown.final_total.amount >= 0
        assert breakdown.final_total + breakdown.discount == subtotal
