"""
Store - the storefront state container

One instance per process, built by the container at start-up. It owns the
cart ledger, favorites, browsing filter, session and applied coupon. Every
public mutation runs under a single re-entrant lock, so concurrent callers
are serialized and the cart total can never be observed out of step with its
lines. Subscribers receive a fresh snapshot after each change.
"""

import logging
import threading
from typing import Callable, List, Optional, Tuple, Union

from storefront.application.dtos.pricing_dtos import CheckoutReceipt, PriceBreakdown
from storefront.application.dtos.snapshot_dtos import (
    AuthSnapshot,
    CartLineSnapshot,
    CartSnapshot,
    FilterSnapshot,
    ProductSnapshot,
    StoreSnapshot,
    UserSnapshot,
)
from storefront.application.use_cases.pricing_use_case import PricingCalculator
from storefront.application.use_cases.session_use_case import SessionBinder
from storefront.domain.entities.cart_entity import CartLedger, CartLineItem
from storefront.domain.entities.coupon_entity import AppliedCoupon
from storefront.domain.entities.favorites_entity import FavoritesSet
from storefront.domain.entities.filter_entity import FilterState
from storefront.domain.entities.identity_entity import Identity
from storefront.domain.entities.product_entity import Product
from storefront.domain.repositories.coupon_repository import CouponCatalog
from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.product_id import ProductId
from storefront.infrastructure.logging.logging_config import get_structured_logger
from storefront.infrastructure.utilities.constants import PricingSettings
from storefront.infrastructure.utilities.exceptions import CartEmptyError, ValidationError

Listener = Callable[[StoreSnapshot], None]
ProductKey = Union[int, ProductId]


class Store:
    """Process-wide cart, favorites, session, filter and coupon state"""

    def __init__(
        self,
        coupon_catalog: CouponCatalog,
        currency: str = PricingSettings.DEFAULT_CURRENCY,
    ):
        self._currency = currency
        self._lock = threading.RLock()
        self._cart = CartLedger(currency)
        self._favorites = FavoritesSet()
        self._filter = FilterState()
        self._applied_coupon: Optional[AppliedCoupon] = None
        self._pricing = PricingCalculator(coupon_catalog)
        self._session = SessionBinder(
            self._cart, self._favorites, on_cart_reset=self._drop_coupon
        )
        self._listeners: List[Listener] = []
        self._logger = logging.getLogger(self.__class__.__name__)
        self._events = get_structured_logger(__name__)

    @property
    def currency(self) -> str:
        return self._currency

    # -------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unsubscribes it"""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _changed(self, event: str, **context) -> None:
        self._events.info(event, **context)
        try:
            snapshot = self._build_snapshot()
        except Exception:  # pylint: disable=broad-except
            # The change is already committed; only the notification is lost
            self._logger.exception("Could not snapshot the store after %s", event)
            return
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:  # pylint: disable=broad-except
                self._logger.exception("Store listener %r failed after %s", listener, event)

    # -------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------
    def add_to_cart(self, product: Product) -> CartLineItem:
        """Add one unit of ``product``; repeated adds keep incrementing"""
        with self._lock:
            line = self._cart.add_item(product)
            self._changed(
                "cart_item_added",
                product_id=line.product_id,
                quantity=line.quantity,
                total=str(self._cart.total.amount),
            )
            return line

    def remove_from_cart(self, product_id: ProductKey) -> bool:
        """Remove a line; a missing product is a no-op returning False"""
        with self._lock:
            if not self._cart.remove_item(product_id):
                self._logger.debug("Product %s not in cart, nothing to remove", product_id)
                return False
            self._changed(
                "cart_item_removed",
                product_id=int(product_id),
                total=str(self._cart.total.amount),
            )
            return True

    def update_quantity(self, product_id: ProductKey, quantity: int) -> bool:
        """
        Set a line's quantity.

        Raises InvalidQuantityError below 1; use ``remove_from_cart`` instead.
        Returns False when the product is not in the cart or nothing changed.
        """
        with self._lock:
            if not self._cart.set_quantity(product_id, quantity):
                self._logger.debug("Quantity update for %s left the cart unchanged", product_id)
                return False
            self._changed(
                "cart_quantity_updated",
                product_id=int(product_id),
                quantity=quantity,
                total=str(self._cart.total.amount),
            )
            return True

    def adjust_quantity(self, product_id: ProductKey, delta: int) -> bool:
        """Step a quantity up or down; never takes a line below 1"""
        with self._lock:
            if not self._cart.adjust_quantity(product_id, delta):
                return False
            line = self._cart.get(product_id)
            self._changed(
                "cart_quantity_updated",
                product_id=int(product_id),
                quantity=line.quantity,
                total=str(self._cart.total.amount),
            )
            return True

    def clear_cart(self) -> None:
        """Empty the cart and drop the applied coupon"""
        with self._lock:
            if self._cart.is_empty() and self._applied_coupon is None:
                return
            self._cart.clear()
            self._applied_coupon = None
            self._changed("cart_cleared")

    def is_in_cart(self, product_id: ProductKey) -> bool:
        with self._lock:
            return self._cart.contains(product_id)

    def cart_item(self, product_id: ProductKey) -> Optional[CartLineItem]:
        with self._lock:
            return self._cart.get(product_id)

    def cart_items(self) -> Tuple[CartLineItem, ...]:
        with self._lock:
            return self._cart.items

    def cart_total(self) -> Money:
        with self._lock:
            return self._cart.total

    def line_count(self) -> int:
        """Distinct products in the cart"""
        with self._lock:
            return self._cart.line_count

    def item_count(self) -> int:
        with self._lock:
            return self._cart.item_count

    # -------------------------------------------------------------------
    # Favorites
    # -------------------------------------------------------------------
    def add_to_favorites(self, product: Product) -> bool:
        with self._lock:
            if not self._favorites.add(product):
                return False
            self._changed("favorite_added", product_id=product.product_id)
            return True

    def remove_from_favorites(self, product_id: ProductKey) -> bool:
        with self._lock:
            if not self._favorites.remove(product_id):
                return False
            self._changed("favorite_removed", product_id=int(product_id))
            return True

    def toggle_favorite(self, product: Product) -> bool:
        """Flip a product's favorite status; returns the new status"""
        with self._lock:
            is_favorite = self._favorites.toggle(product)
            self._changed(
                "favorite_added" if is_favorite else "favorite_removed",
                product_id=product.product_id,
            )
            return is_favorite

    def is_favorite(self, product_id: ProductKey) -> bool:
        with self._lock:
            return self._favorites.contains(product_id)

    def favorites(self) -> Tuple[Product, ...]:
        with self._lock:
            return self._favorites.items

    def clear_favorites(self) -> None:
        with self._lock:
            if not len(self._favorites):
                return
            self._favorites.clear()
            self._changed("favorites_cleared")

    # -------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------
    def login(self, username: str, password: str) -> Identity:
        """Log in; a different username than the current one empties the cart"""
        with self._lock:
            previous = self._session.identity
            identity = self._session.login(username, password)
            if identity == previous:
                return identity
            self._changed("user_logged_in", username=identity.username)
            return identity

    def logout(self) -> None:
        """Log out and wipe cart, coupon and favorites"""
        with self._lock:
            unchanged = (
                self._session.identity is None
                and self._cart.is_empty()
                and not len(self._favorites)
                and self._applied_coupon is None
            )
            self._session.logout()
            if unchanged:
                return
            self._changed("user_logged_out")

    def is_authenticated(self) -> bool:
        with self._lock:
            return self._session.is_authenticated()

    @property
    def identity(self) -> Optional[Identity]:
        with self._lock:
            return self._session.identity

    # -------------------------------------------------------------------
    # Filter
    # -------------------------------------------------------------------
    def set_filter(self, **changes) -> FilterState:
        """Merge ``category`` / ``sort_by`` / ``search_query`` into the filter"""
        with self._lock:
            try:
                new_filter = self._filter.with_changes(**changes)
            except ValueError as e:
                raise ValidationError(str(e), "filter") from e
            if new_filter == self._filter:
                return self._filter
            self._filter = new_filter
            self._changed(
                "filter_changed",
                category=new_filter.category,
                sort_by=new_filter.sort_by.value,
                search_query=new_filter.search_query,
            )
            return new_filter

    @property
    def filter(self) -> FilterState:
        with self._lock:
            return self._filter

    # -------------------------------------------------------------------
    # Coupons and pricing
    # -------------------------------------------------------------------
    def apply_coupon(self, code: str) -> AppliedCoupon:
        """
        Apply a coupon, replacing any coupon already applied.

        Raises InvalidCouponError for unknown codes and leaves the current
        coupon, if any, in place.
        """
        with self._lock:
            applied = self._pricing.apply_coupon(code)
            self._applied_coupon = applied
            self._changed("coupon_applied", code=applied.entered_code)
            return applied

    def remove_coupon(self) -> None:
        with self._lock:
            if self._applied_coupon is None:
                return
            self._applied_coupon = None
            self._changed("coupon_removed")

    @property
    def applied_coupon(self) -> Optional[AppliedCoupon]:
        with self._lock:
            return self._applied_coupon

    def price_breakdown(self) -> PriceBreakdown:
        with self._lock:
            return self._pricing.calculate(self._cart.total, self._applied_coupon)

    def checkout(self) -> CheckoutReceipt:
        """Place the order: capture lines and prices, then empty the cart"""
        with self._lock:
            if self._cart.is_empty():
                raise CartEmptyError()
            identity = self._session.identity
            receipt = CheckoutReceipt(
                lines=self._cart.items,
                breakdown=self._pricing.calculate(self._cart.total, self._applied_coupon),
                username=identity.username if identity else None,
            )
            self._cart.clear()
            self._applied_coupon = None
            self._changed(
                "checkout_completed",
                items=receipt.item_count,
                final_total=str(receipt.breakdown.final_total.amount),
            )
            return receipt

    def _drop_coupon(self) -> None:
        self._applied_coupon = None

    # -------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------
    def snapshot(self) -> StoreSnapshot:
        """Read-only copy of auth, cart, filter and favorites"""
        with self._lock:
            return self._build_snapshot()

    def _build_snapshot(self) -> StoreSnapshot:
        identity = self._session.identity
        return StoreSnapshot(
            auth=AuthSnapshot(
                user=UserSnapshot.from_identity(identity) if identity else None,
                is_authenticated=identity is not None,
            ),
            cart=CartSnapshot(
                items=[CartLineSnapshot.from_line(line) for line in self._cart.items],
                total=self._cart.total.amount,
            ),
            filter=FilterSnapshot.from_state(self._filter),
            favorites=[ProductSnapshot.from_entity(p) for p in self._favorites.items],
        )

    def restore(self, snapshot: StoreSnapshot) -> None:
        """
        Replace the whole state with ``snapshot``.

        The cart total is recomputed from the lines; a stored total that
        disagrees is logged and discarded. The applied coupon is not part of
        a snapshot and is cleared.
        """
        identity = None
        if snapshot.auth.is_authenticated and snapshot.auth.user is not None:
            identity = snapshot.auth.user.to_identity()
        lines = [item.to_line(self._currency) for item in snapshot.cart.items]
        favorites = [item.to_entity(self._currency) for item in snapshot.favorites]
        filter_state = snapshot.filter.to_state()

        with self._lock:
            self._cart.restore(lines)
            if self._cart.total.amount != snapshot.cart.total:
                self._logger.warning(
                    "Stored cart total %s does not match its lines, using %s",
                    snapshot.cart.total,
                    self._cart.total.amount,
                )
            self._favorites.restore(favorites)
            self._filter = filter_state
            self._session.restore(identity)
            self._applied_coupon = None
            self._changed(
                "store_restored",
                lines=self._cart.line_count,
                favorites=len(self._favorites),
                authenticated=identity is not None,
            )
