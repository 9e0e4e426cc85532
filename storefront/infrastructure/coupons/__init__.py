"""
Coupon catalog implementations
"""

from .static_coupon_catalog import DEFAULT_COUPONS, StaticCouponCatalog, default_coupon_rules

__all__ = ["DEFAULT_COUPONS", "StaticCouponCatalog", "default_coupon_rules"]
