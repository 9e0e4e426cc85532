"""
Cart Ledger Tests - line items and the running total
"""

import random
from decimal import Decimal

import pytest

from storefront.domain.entities.cart_entity import CartLedger, CartLineItem
from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.product_id import ProductId
from storefront.infrastructure.utilities.exceptions import InvalidQuantityError


@pytest.fixture
def ledger():
    return CartLedger()


def expected_total(ledger: CartLedger) -> Decimal:
    return sum((line.unit_price.amount * line.quantity for line in ledger.items), Decimal("0"))


class TestAddItem:
    """Test adding products to the cart"""

    def test_add_creates_line(self, ledger, phone):
        line = ledger.add_item(phone)
        assert line.quantity == 1
        assert ledger.line_count == 1
        assert ledger.total == Money(Decimal("9.99"))

    def test_repeated_add_increments(self, ledger, phone):
        """Adding the same product twice gives one line with quantity 2"""
        ledger.add_item(phone)
        line = ledger.add_item(phone)
        assert line.quantity == 2
        assert ledger.line_count == 1
        assert ledger.item_count == 2
        assert ledger.total.amount == Decimal("19.98")

    def test_insertion_order_kept(self, ledger, make_product):
        for product_id in (5, 2, 9):
            ledger.add_item(make_product(product_id))
        ledger.add_item(make_product(2))
        assert [line.product_id for line in ledger.items] == [5, 2, 9]

    def test_price_snapshot_is_kept(self, ledger, make_product):
        """The first snapshot of a product keeps pricing its line"""
        ledger.add_item(make_product(1, "10.00"))
        ledger.add_item(make_product(1, "12.00"))
        assert ledger.get(1).unit_price == Money(Decimal("10.00"))
        assert ledger.total.amount == Decimal("20.00")


class TestRemoveItem:
    """Test removing products from the cart"""

    def test_remove_line(self, ledger, phone, laptop):
        ledger.add_item(phone)
        ledger.add_item(laptop)
        assert ledger.remove_item(phone.product_id) is True
        assert not ledger.contains(phone.product_id)
        assert ledger.total == laptop.price

    def test_remove_absent_is_noop(self, ledger, phone):
        ledger.add_item(phone)
        assert ledger.remove_item(42) is False
        assert ledger.total.amount == Decimal("9.99")

    def test_remove_is_idempotent(self, ledger, phone):
        ledger.add_item(phone)
        ledger.remove_item(phone.product_id)
        before = (ledger.items, ledger.total)
        assert ledger.remove_item(phone.product_id) is False
        assert (ledger.items, ledger.total) == before

    def test_accepts_product_id_value_object(self, ledger, phone):
        ledger.add_item(phone)
        assert ledger.remove_item(ProductId(phone.product_id)) is True


class TestSetQuantity:
    """Test replacing a line's quantity"""

    def test_scenario_add_twice_then_set_five(self, ledger, phone):
        ledger.add_item(phone)
        ledger.add_item(phone)
        assert ledger.set_quantity(phone.product_id, 5) is True
        assert ledger.get(phone.product_id).quantity == 5
        assert ledger.total.amount == Decimal("49.95")

    def test_decrease(self, ledger, phone):
        ledger.add_item(phone)
        ledger.set_quantity(phone.product_id, 4)
        ledger.set_quantity(phone.product_id, 1)
        assert ledger.total.amount == Decimal("9.99")

    @pytest.mark.parametrize("quantity", [0, -3, 1.5, "2", True, None])
    def test_invalid_quantity_rejected(self, ledger, phone, quantity):
        """Quantities below 1 or not whole numbers never change the cart"""
        ledger.add_item(phone)
        with pytest.raises(InvalidQuantityError) as exc_info:
            ledger.set_quantity(phone.product_id, quantity)
        assert exc_info.value.field == "quantity"
        assert ledger.get(phone.product_id).quantity == 1
        assert ledger.total.amount == Decimal("9.99")

    def test_invalid_quantity_rejected_for_absent_product(self, ledger):
        with pytest.raises(InvalidQuantityError):
            ledger.set_quantity(7, 0)

    def test_absent_product_is_noop(self, ledger, phone):
        ledger.add_item(phone)
        assert ledger.set_quantity(99, 3) is False
        assert ledger.line_count == 1

    def test_unchanged_quantity(self, ledger, phone):
        ledger.add_item(phone)
        assert ledger.set_quantity(phone.product_id, 1) is False


class TestAdjustQuantity:
    """Test the +/- quantity steps"""

    def test_step_up_and_down(self, ledger, phone):
        ledger.add_item(phone)
        assert ledger.adjust_quantity(phone.product_id, 1) is True
        assert ledger.get(phone.product_id).quantity == 2
        assert ledger.adjust_quantity(phone.product_id, -1) is True
        assert ledger.get(phone.product_id).quantity == 1

    def test_never_below_one(self, ledger, phone):
        ledger.add_item(phone)
        assert ledger.adjust_quantity(phone.product_id, -1) is False
        assert ledger.get(phone.product_id).quantity == 1

    def test_absent_product(self, ledger):
        assert ledger.adjust_quantity(3, 1) is False


class TestRunningTotal:
    """The cached total always equals the sum of price x quantity"""

    def test_random_operation_sequence(self, make_product):
        rng = random.Random(1234)
        prices = ["9.99", "0.10", "0.20", "1249.50", "13.00", "0.01"]
        products = [make_product(i + 1, price) for i, price in enumerate(prices)]
        ledger = CartLedger()

        for _ in range(500):
            product = rng.choice(products)
            action = rng.choice(["add", "remove", "set", "adjust", "clear"])
            if action == "add":
                ledger.add_item(product)
            elif action == "remove":
                ledger.remove_item(product.product_id)
            elif action == "set":
                ledger.set_quantity(product.product_id, rng.randint(1, 9))
            elif action == "adjust":
                ledger.adjust_quantity(product.product_id, rng.choice([-1, 1]))
            elif rng.random() < 0.05:
                ledger.clear()

            assert ledger.total.amount == expected_total(ledger)
            assert ledger.is_consistent()
            ids = [line.product_id for line in ledger.items]
            assert len(ids) == len(set(ids))
            assert all(line.quantity >= 1 for line in ledger.items)

    def test_no_drift_with_tenths(self, ledger, make_product):
        """Cycles over 0.1 and 0.2 end exactly at zero"""
        dime = make_product(1, 0.1)
        twenty = make_product(2, 0.2)
        for _ in range(100):
            ledger.add_item(dime)
            ledger.add_item(twenty)
        assert ledger.total.amount == Decimal("30.0")
        ledger.set_quantity(1, 3)
        ledger.remove_item(2)
        ledger.remove_item(1)
        assert ledger.total.amount == Decimal("0")

    def test_clear(self, ledger, phone, laptop):
        ledger.add_item(phone)
        ledger.add_item(laptop)
        ledger.clear()
        assert ledger.is_empty()
        assert ledger.total.is_zero()


class TestRestore:
    """Test replacing the contents from stored lines"""

    def test_restore_recomputes_total(self, ledger, phone, laptop):
        ledger.restore([CartLineItem(phone, 2), CartLineItem(laptop, 1)])
        assert ledger.total.amount == Decimal("1269.48")
        assert ledger.is_consistent()

    def test_restore_merges_duplicates(self, ledger, phone):
        ledger.restore([CartLineItem(phone, 2), CartLineItem(phone, 3)])
        assert ledger.line_count == 1
        assert ledger.get(phone.product_id).quantity == 5

    def test_line_rejects_zero_quantity(self, phone):
        with pytest.raises(InvalidQuantityError):
            CartLineItem(phone, 0)
