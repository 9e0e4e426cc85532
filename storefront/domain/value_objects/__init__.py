"""
Domain value objects package

Contains immutable value objects that represent concepts in the storefront
domain.
"""

from .coupon_code import CouponCode
from .money import Money
from .product_id import ProductId

__all__ = [
    "CouponCode",
    "Money",
    "ProductId",
]
