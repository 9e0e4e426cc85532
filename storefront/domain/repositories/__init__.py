"""
Domain repository interfaces
"""

from .coupon_repository import CouponCatalog
from .product_repository import ProductCatalog
from .snapshot_repository import SnapshotRepository

__all__ = ["CouponCatalog", "ProductCatalog", "SnapshotRepository"]
