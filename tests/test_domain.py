"""
Domain Layer Tests - Value Objects and Entities
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from storefront.domain.entities.coupon_entity import CouponRule
from storefront.domain.entities.filter_entity import FilterState, SortOption
from storefront.domain.entities.identity_entity import Identity
from storefront.domain.entities.product_entity import Product
from storefront.domain.value_objects.coupon_code import CouponCode
from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.product_id import ProductId


class TestMoney:
    """Test the Money value object"""

    def test_float_input_is_exact(self):
        """Floats are converted through their string form"""
        assert Money(9.99).amount == Decimal("9.99")
        assert Money.from_float(0.1).amount == Decimal("0.1")

    def test_no_rounding_on_construction(self):
        """Sub-cent precision is kept until display"""
        money = Money(Decimal("5.997"))
        assert money.amount == Decimal("5.997")
        assert money.rounded() == Decimal("6.00")
        assert money.format_display() == "6.00 USD"

    def test_invalid_values(self):
        """Negative, non-finite and badly coded amounts are rejected"""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))
        with pytest.raises(ValueError):
            Money(Decimal("NaN"))
        with pytest.raises(ValueError):
            Money(Decimal("1"), "US")
        with pytest.raises(ValueError):
            Money(True)

    def test_arithmetic(self):
        """Add, subtract, multiply and percentage stay exact"""
        a = Money(Decimal("19.98"))
        b = Money(Decimal("9.99"))
        assert a + b == Money(Decimal("29.97"))
        assert a - b == Money(Decimal("9.99"))
        assert b * 3 == Money(Decimal("29.97"))
        assert 2 * b == Money(Decimal("19.98"))
        assert Money(Decimal("250")).percentage(50) == Money(Decimal("125"))

    def test_subtract_below_zero(self):
        with pytest.raises(ValueError):
            Money(Decimal("1")) - Money(Decimal("2"))

    def test_currency_mismatch(self):
        with pytest.raises(ValueError):
            Money(Decimal("1"), "USD") + Money(Decimal("1"), "EUR")
        with pytest.raises(ValueError):
            Money(Decimal("1"), "USD") < Money(Decimal("1"), "EUR")

    def test_currency_normalized(self):
        assert Money(Decimal("1"), "usd").currency == "USD"

    def test_min_and_equality(self):
        """min() picks the smaller amount; trailing zeros do not matter"""
        small = Money(Decimal("100"))
        large = Money(Decimal("125.00"))
        assert large.min(small) is small
        assert Money(Decimal("1.50")) == Money(Decimal("1.5"))
        assert hash(Money(Decimal("1.50"))) == hash(Money(Decimal("1.5")))


class TestProductId:
    """Test ProductId validation"""

    def test_valid(self):
        pid = ProductId(7)
        assert int(pid) == 7
        assert str(pid) == "7"

    def test_invalid(self):
        for value in [0, -1, None, "1", True, 1.5]:
            with pytest.raises(ValueError):
                ProductId(value)


class TestCouponCode:
    """Test CouponCode matching"""

    def test_case_insensitive_match(self):
        assert CouponCode("ram50").matches(CouponCode("RAM50"))
        assert not CouponCode("RAM5").matches(CouponCode("RAM50"))

    def test_preserves_typed_value(self):
        assert str(CouponCode("Ram50")) == "Ram50"

    def test_invalid(self):
        with pytest.raises(ValueError):
            CouponCode("")
        with pytest.raises(ValueError):
            CouponCode("X" * 101)


class TestProduct:
    """Test Product snapshots"""

    def test_create(self):
        product = Product.create(3, "Perfume", "13.00", category="fragrances", images=["a.jpg"])
        assert product.product_id == 3
        assert product.price == Money(Decimal("13"))
        assert product.images == ("a.jpg",)

    def test_immutable(self, phone):
        with pytest.raises(FrozenInstanceError):
            phone.title = "Other"

    def test_invalid(self):
        with pytest.raises(ValueError):
            Product.create(1, "", "1.00")
        with pytest.raises(ValueError):
            Product.create(1, "Phone", "9.99", brand=7)
        with pytest.raises(ValueError):
            Product.create(1, "Phone", "9.99", category=None)
        with pytest.raises(ValueError):
            Product.create(1, "Item", "1.00", stock=-1)


class TestIdentity:
    """Test Identity construction from credentials"""

    def test_from_credentials(self):
        identity = Identity.from_credentials("emilys", "secret")
        assert identity.username == "emilys"
        assert identity.first_name == "emilys"
        assert identity.email == "emilys@example.com"
        assert identity.user_id == 1
        assert identity.is_authenticated is True

    def test_token_is_opaque_and_stable(self):
        token = Identity.derive_token("emilys", "secret")
        assert token == Identity.derive_token("emilys", "secret")
        assert token != Identity.derive_token("emilys", "other")
        assert "secret" not in token
        assert len(token) == 64

    def test_invalid(self):
        with pytest.raises(ValueError):
            Identity(username="", token="t")


class TestFilterState:
    """Test FilterState value holder"""

    def test_defaults(self):
        state = FilterState()
        assert state.category == ""
        assert state.sort_by is SortOption.NONE
        assert state.search_query == ""
        assert not state.is_active

    def test_partial_update(self):
        state = FilterState(category="laptops").with_changes(sort_by="price-desc")
        assert state.category == "laptops"
        assert state.sort_by is SortOption.PRICE_DESC
        assert state.is_active

    def test_unknown_fields_and_values(self):
        with pytest.raises(ValueError):
            FilterState().with_changes(colour="red")
        with pytest.raises(ValueError):
            FilterState(sort_by="cheapest")


class TestCouponRule:
    """Test CouponRule validation and discount maths"""

    def test_discount_is_capped(self):
        rule = CouponRule.create("RAM50", 50, 100)
        assert rule.discount_for(Money(Decimal("250"))) == Money(Decimal("100"))
        assert rule.discount_for(Money(Decimal("100"))) == Money(Decimal("50"))

    def test_percent_bounds(self):
        with pytest.raises(ValueError):
            CouponRule.create("BAD", 101, 10)
        with pytest.raises(ValueError):
            CouponRule.create("BAD", -1, 10)
        with pytest.raises(ValueError):
            CouponRule.create("BAD", 10, -5)
