"""
Domain entities package

Contains the core storefront entities: product snapshots, the cart ledger,
favorites, the session identity, the browsing filter and coupons.
"""

from .cart_entity import CartLedger, CartLineItem
from .coupon_entity import AppliedCoupon, CouponRule
from .favorites_entity import FavoritesSet
from .filter_entity import FilterState, SortOption
from .identity_entity import Identity
from .product_entity import Category, Product, ProductListing

__all__ = [
    "AppliedCoupon",
    "CartLedger",
    "CartLineItem",
    "Category",
    "CouponRule",
    "FavoritesSet",
    "FilterState",
    "Identity",
    "Product",
    "ProductListing",
    "SortOption",
]
